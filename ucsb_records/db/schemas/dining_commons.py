from pydantic import ConfigDict

from .base import CamelModel


class UCSBDiningCommonsMenuItemBase(CamelModel):
    dining_commons_code: str
    name: str
    station: str


class UCSBDiningCommonsMenuItemCreate(UCSBDiningCommonsMenuItemBase):
    pass


class UCSBDiningCommonsMenuItemUpdate(UCSBDiningCommonsMenuItemBase):
    pass


class UCSBDiningCommonsMenuItem(UCSBDiningCommonsMenuItemBase):
    id: int
    model_config = ConfigDict(from_attributes=True)
