"""Pydantic models for receipt generation."""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


def _current_time() -> str:
    return datetime.now().strftime("%H:%M")


class Patient(BaseModel):
    """Patient record as kept by the registry."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str = ""
    name: str = Field(min_length=1)
    phone: str = ""
    cad_sus: str = Field(min_length=1)  # CPF (11 digits) or CNS (15 digits)
    updated_at: int = 0  # epoch milliseconds


class DocumentConfig(BaseModel):
    """Per-receipt settings filled in by the clerk."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    procedimento: str = ""
    is_itabuna: bool = True
    is_m_pactuado: bool = False
    delivery_date: date = Field(default_factory=date.today)
    print_time: str = Field(default_factory=_current_time, pattern=r"^([01]\d|2[0-3]):[0-5]\d$")

    @property
    def delivery_date_display(self) -> str:
        return self.delivery_date.strftime("%d/%m/%Y")


class ReceiptJob(BaseModel):
    """One receipt to render from a YAML job file."""

    patient: Patient
    document: DocumentConfig = Field(default_factory=DocumentConfig)
    logo: str | None = None  # data URL or image path relative to the job file
