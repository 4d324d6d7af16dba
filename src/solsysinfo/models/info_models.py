from abc import ABC, abstractmethod

from pydantic import BaseModel, Field

from solsysinfo.models.baseboard_models import BaseboardInfo
from solsysinfo.models.computer_system_models import ComputerSystemInfo
from solsysinfo.models.firmware_models import FirmwareInfo


class HardwareInfo(BaseModel):
    computer_system: ComputerSystemInfo = Field(default_factory=ComputerSystemInfo)
    firmware: FirmwareInfo = Field(default_factory=FirmwareInfo)
    baseboard: BaseboardInfo = Field(default_factory=BaseboardInfo)


class SolarisHardwareInfo(HardwareInfo):
    pass


class HardwareManagerInterface(ABC):
    info: HardwareInfo

    @abstractmethod
    def fetch_computer_system_info(self) -> ComputerSystemInfo:
        pass

    @abstractmethod
    def fetch_firmware_info(self) -> FirmwareInfo:
        pass

    @abstractmethod
    def fetch_baseboard_info(self) -> BaseboardInfo:
        pass

    @abstractmethod
    def fetch_hardware_info(self) -> HardwareInfo:
        pass
