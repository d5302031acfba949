from pydantic import ConfigDict

from .base import CamelModel


class UCSBOrganizationBase(CamelModel):
    org_translation_short: str
    org_translation: str
    inactive: bool


class UCSBOrganizationCreate(UCSBOrganizationBase):
    org_code: str


class UCSBOrganizationUpdate(UCSBOrganizationBase):
    """Replacement payload. The stored ``orgCode`` is kept; any ``orgCode`` sent is ignored."""
    org_code: str | None = None


class UCSBOrganization(UCSBOrganizationBase):
    org_code: str
    model_config = ConfigDict(from_attributes=True)
