"""AIH document delivery receipts.

Renders the printable receipt handed to patients when they deliver the
paperwork for an elective surgery authorization (A.I.H): one A4 page with
two identical copies, one kept by the sector and one by the patient.
"""
