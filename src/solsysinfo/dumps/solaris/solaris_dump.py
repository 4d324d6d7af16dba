from solsysinfo.dumps.solaris.computer_system import fetch_computer_system_info
from solsysinfo.models.baseboard_models import BaseboardInfo
from solsysinfo.models.computer_system_models import ComputerSystemInfo
from solsysinfo.models.firmware_models import FirmwareInfo
from solsysinfo.models.info_models import (
    HardwareInfo,
    HardwareManagerInterface,
    SolarisHardwareInfo,
)


class SolarisHardwareManager(HardwareManagerInterface):
    """
    Uses the `smbios` and `prtconf` commands to extract info.
    """

    def __init__(self):
        self.info = SolarisHardwareInfo(
            computer_system=ComputerSystemInfo(),
            firmware=FirmwareInfo(),
            baseboard=BaseboardInfo(),
        )

    def fetch_computer_system_info(self) -> ComputerSystemInfo:
        computer_system, firmware, baseboard = fetch_computer_system_info()
        self.info.computer_system = computer_system
        self.info.firmware = firmware
        self.info.baseboard = baseboard
        return self.info.computer_system

    def fetch_firmware_info(self) -> FirmwareInfo:
        self.fetch_computer_system_info()
        return self.info.firmware

    def fetch_baseboard_info(self) -> BaseboardInfo:
        self.fetch_computer_system_info()
        return self.info.baseboard

    def fetch_hardware_info(self) -> HardwareInfo:
        # firmware and baseboard come from the same smbios run
        self.fetch_computer_system_info()
        return self.info
