from pydantic import ConfigDict

from solsysinfo.models.component_model import ComponentInfo, KnownStr, UNKNOWN


class FirmwareInfo(ComponentInfo):
    """Firmware (BIOS) information model."""

    model_config = ConfigDict(frozen=True)

    #: Vendor of the firmware
    manufacturer: KnownStr = UNKNOWN

    #: Version string reported by the firmware
    version: KnownStr = UNKNOWN

    #: Release date, as ``YYYY-MM-DD`` when it could be normalized
    release_date: KnownStr = UNKNOWN
