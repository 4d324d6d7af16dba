from pydantic import ConfigDict, Field

from solsysinfo.models.baseboard_models import BaseboardInfo
from solsysinfo.models.component_model import ComponentInfo, KnownStr, UNKNOWN
from solsysinfo.models.firmware_models import FirmwareInfo


class ComputerSystemInfo(ComponentInfo):
    """Identity of the machine, along with its firmware and baseboard."""

    model_config = ConfigDict(frozen=True)

    #: System manufacturer, e.g. ``Oracle Corporation``
    manufacturer: KnownStr = UNKNOWN

    #: System product name
    model: KnownStr = UNKNOWN

    #: System (chassis) serial number
    serial_number: KnownStr = UNKNOWN

    firmware: FirmwareInfo = Field(default_factory=FirmwareInfo)
    baseboard: BaseboardInfo = Field(default_factory=BaseboardInfo)
