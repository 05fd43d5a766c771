"""CadSUS and phone number validation and masking."""

import re

CNS_FIRST_DIGITS = "12789"


def _digits(value: str) -> str:
    return re.sub(r"\D", "", value or "")


def validate_cpf(value: str) -> bool:
    """Check an 11-digit CPF against both of its mod-11 check digits."""
    cpf = _digits(value)
    if len(cpf) != 11 or len(set(cpf)) == 1:
        return False

    def check_digit(part: str) -> int:
        factor = len(part) + 1
        total = sum(int(d) * (factor - i) for i, d in enumerate(part))
        result = total * 10 % 11
        return 0 if result == 10 else result

    return check_digit(cpf[:9]) == int(cpf[9]) and check_digit(cpf[:10]) == int(cpf[10])


def validate_cns(value: str) -> bool:
    """Check a 15-digit CNS (Cartão Nacional de Saúde) number."""
    cns = _digits(value)
    if len(cns) != 15 or cns[0] not in CNS_FIRST_DIGITS:
        return False
    return sum(int(d) * (15 - i) for i, d in enumerate(cns)) % 11 == 0


def validate_cad_sus(value: str) -> bool:
    """Validate a CadSUS field as CPF or CNS depending on its length."""
    digits = _digits(value)
    if len(digits) == 11:
        return validate_cpf(digits)
    if len(digits) == 15:
        return validate_cns(digits)
    return False


def apply_cad_sus_mask(value: str) -> str:
    """Format partial input as 000.000.000-00 (CPF) or 000 0000 0000 0000 (CNS)."""
    v = _digits(value)[:15]
    if len(v) <= 11:
        v = re.sub(r"(\d{3})(\d)", r"\1.\2", v, count=1)
        v = re.sub(r"(\d{3})(\d)", r"\1.\2", v, count=1)
        v = re.sub(r"(\d{3})(\d{1,2})", r"\1-\2", v, count=1)
        return v
    v = re.sub(r"(\d{3})(\d)", r"\1 \2", v, count=1)
    v = re.sub(r"(\d{4})(\d)", r"\1 \2", v, count=1)
    v = re.sub(r"(\d{4})(\d)", r"\1 \2", v, count=1)
    return v


def apply_phone_mask(value: str) -> str:
    """Format partial input as (00) 00000-0000."""
    v = _digits(value)[:11]
    v = re.sub(r"(\d{2})(\d)", r"(\1) \2", v, count=1)
    v = re.sub(r"(\d{5})(\d)", r"\1-\2", v, count=1)
    return v


def validate_mobile_phone(value: str) -> str | None:
    """Return the formatted mobile number, or None when it is not one."""
    phone = _digits(value)
    if len(phone) != 11 or phone[2] != "9":
        return None
    return f"({phone[:2]}) {phone[2:7]}-{phone[7:]}"


def apply_procedure_mask(value: str) -> str:
    """Format a partial SIGTAP procedure code as 00.00.00.000-0."""
    v = _digits(value)[:10]
    v = re.sub(r"(\d{2})(\d)", r"\1.\2", v, count=1)
    v = re.sub(r"(\d{2})(\d)", r"\1.\2", v, count=1)
    v = re.sub(r"(\d{2})(\d)", r"\1.\2", v, count=1)
    v = re.sub(r"(\d{3})(\d)", r"\1-\2", v, count=1)
    return v
