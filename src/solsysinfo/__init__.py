from solsysinfo.dumps.solaris.solaris_dump import SolarisHardwareManager as HardwareManager
from solsysinfo.models.component_model import UNKNOWN

__all__ = ["HardwareManager", "UNKNOWN"]
