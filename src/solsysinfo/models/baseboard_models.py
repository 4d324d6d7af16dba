from typing import Optional

from pydantic import BaseModel, ConfigDict

from solsysinfo.models.component_model import ComponentInfo, KnownStr, UNKNOWN
from solsysinfo.models.status_models import Status


class BaseboardInitializer(BaseModel):
    """Raw values collected while scanning, before any defaulting."""

    manufacturer: str = ""
    model: str = ""
    version: str = ""
    serial_number: str = ""


class BaseboardInfo(ComponentInfo):
    """Baseboard (Motherboard) information model."""

    model_config = ConfigDict(frozen=True)

    # Manufacturer of the baseboard
    manufacturer: KnownStr = UNKNOWN

    # Model (product name) of the baseboard
    model: KnownStr = UNKNOWN

    # Version of the baseboard
    version: KnownStr = UNKNOWN

    # Serial number of the baseboard
    serial_number: KnownStr = UNKNOWN

    @classmethod
    def from_initializer(cls, initializer: BaseboardInitializer, status: Optional[Status] = None) -> "BaseboardInfo":
        return cls(
            status=status if status is not None else Status(),
            manufacturer=initializer.manufacturer,
            model=initializer.model,
            version=initializer.version,
            serial_number=initializer.serial_number,
        )
