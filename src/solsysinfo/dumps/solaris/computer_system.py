import logging
from enum import Enum
from typing import Iterable, NamedTuple, Tuple

from solsysinfo.models.baseboard_models import BaseboardInfo, BaseboardInitializer
from solsysinfo.models.component_model import UNKNOWN
from solsysinfo.models.computer_system_models import ComputerSystemInfo
from solsysinfo.models.firmware_models import FirmwareInfo
from solsysinfo.models.status_models import Status, StatusType, add_message, mark_partial
from solsysinfo.util.command import get_first_answer, run_native
from solsysinfo.util.parsing import extract_single_quoted

logger = logging.getLogger(__name__)

# smbios only reports the tables to root
SMBIOS_COMMAND = ["smbios"]
# Only present if STB (Sun Explorer) is installed
SNEEP_COMMAND = ["sneep"]
PRTCONF_COMMAND = ["prtconf", "-pv"]

SECTION_MARKER = "SMB_TYPE_"
CHASSIS_SERIAL_MARKER = "chassis-sn:"


class _Section(Enum):
    NONE = 0
    BIOS = 1
    SYSTEM = 2
    BASEBOARD = 3


_SECTION_MARKERS = (
    ("SMB_TYPE_BIOS", _Section.BIOS),
    ("SMB_TYPE_SYSTEM", _Section.SYSTEM),
    ("SMB_TYPE_BASEBOARD", _Section.BASEBOARD),
)

# Labels are tried in order, the first one found on a line wins.
_SECTION_LABELS = {
    _Section.BIOS: (
        ("Vendor:", "vendor"),
        ("Version String:", "bios_version"),
        ("Release Date:", "bios_date"),
    ),
    _Section.SYSTEM: (
        ("Manufacturer:", "manufacturer"),
        ("Product:", "product"),
        ("Serial Number:", "serial_number"),
    ),
    _Section.BASEBOARD: (
        ("Manufacturer:", "board_manufacturer"),
        ("Product:", "board_model"),
        ("Version:", "board_version"),
        ("Serial Number:", "board_serial_number"),
    ),
}


class SmbiosScan(NamedTuple):
    """Raw values found in the first three SMBIOS tables. Empty when not found."""
    vendor: str = ""
    bios_version: str = ""
    bios_date: str = ""
    manufacturer: str = ""
    product: str = ""
    serial_number: str = ""
    board_manufacturer: str = ""
    board_model: str = ""
    board_version: str = ""
    board_serial_number: str = ""


class ReleaseDate(NamedTuple):
    value: str
    # False when ``value`` is the raw string, as it could not be rewritten
    normalized: bool


def _section_of(line: str):
    for marker, section in _SECTION_MARKERS:
        if marker in line:
            return section
    return None


def scan_smbios(lines: Iterable[str]) -> SmbiosScan:
    """
    Sample output of ``smbios``:

    ID    SIZE TYPE
    0     87   SMB_TYPE_BIOS (BIOS Information)

      Vendor: Parallels Software International Inc.
      Version String: 11.2.1 (32686)
      Release Date: 07/15/2016
      ...

    ID    SIZE TYPE
    1     177  SMB_TYPE_SYSTEM (system information)

      Manufacturer: Parallels Software International Inc.
      Product: Parallels Virtual Platform
      Version: None
      Serial Number: Parallels-45 2E 7E 2D 57 5C 4B 59 B1 30 28 81 B7 81 89 34
      ...

    ID    SIZE TYPE
    2     90   SMB_TYPE_BASEBOARD (base board)

      Manufacturer: Parallels Software International Inc.
      Product: Parallels Virtual Platform
      Version: None
      Serial Number: None
      ...

    The BIOS, system and baseboard tables come first. Scanning stops at the
    first table of any other type.
    """
    found = {}
    section = _Section.NONE

    for line in lines:
        if SECTION_MARKER in line:
            section = _section_of(line)
            if section is None:
                break

        for label, key in _SECTION_LABELS.get(section, ()):
            if label in line:
                found[key] = line.split(label, 1)[1].strip()
                break

    return SmbiosScan(**found)


def normalize_release_date(raw_date: str) -> ReleaseDate:
    # smbios prints MM/DD/YYYY
    if len(raw_date) < 10 or raw_date[2] != "/" or raw_date[5] != "/":
        return ReleaseDate(raw_date, False)
    return ReleaseDate(f"{raw_date[6:10]}-{raw_date[0:2]}-{raw_date[3:5]}", True)


def fetch_system_serial_number() -> str:
    serial_number = get_first_answer(SNEEP_COMMAND).strip()
    if serial_number:
        return serial_number

    for line in run_native(PRTCONF_COMMAND):
        if CHASSIS_SERIAL_MARKER in line:
            serial_number = extract_single_quoted(line)
            break

    return serial_number if serial_number else UNKNOWN


def _new_status(smbios_lines) -> Status:
    if smbios_lines:
        return Status(type=StatusType.SUCCESS)
    return Status(
        type=StatusType.FAILED,
        messages=["smbios returned no data (root privileges are required)"],
    )


def _firmware_from_scan(scan: SmbiosScan, status: Status) -> FirmwareInfo:
    fields = {}

    if scan.vendor:
        fields["manufacturer"] = scan.vendor
    else:
        status = mark_partial(status, "Could not find BIOS vendor")

    if scan.bios_version:
        fields["version"] = scan.bios_version
    else:
        status = mark_partial(status, "Could not find BIOS version")

    if scan.bios_date:
        release_date = normalize_release_date(scan.bios_date)
        fields["release_date"] = release_date.value
        if not release_date.normalized:
            status = add_message(status, f"BIOS release date '{scan.bios_date}' is not in MM/DD/YYYY form")
    else:
        status = mark_partial(status, "Could not find BIOS release date")

    return FirmwareInfo(status=status, **fields)


def _baseboard_from_scan(scan: SmbiosScan, status: Status) -> BaseboardInfo:
    initializer = BaseboardInitializer(
        manufacturer=scan.board_manufacturer,
        model=scan.board_model,
        version=scan.board_version,
        serial_number=scan.board_serial_number,
    )

    for name, value in initializer.model_dump().items():
        if not value:
            status = mark_partial(status, f"Could not find baseboard {name.replace('_', ' ')}")

    return BaseboardInfo.from_initializer(initializer, status=status)


def fetch_computer_system_info() -> Tuple[ComputerSystemInfo, FirmwareInfo, BaseboardInfo]:
    smbios_lines = run_native(SMBIOS_COMMAND)
    scan = scan_smbios(smbios_lines)
    logger.debug("smbios scan: %s", scan)

    firmware = _firmware_from_scan(scan, _new_status(smbios_lines))
    baseboard = _baseboard_from_scan(scan, _new_status(smbios_lines))

    status = _new_status(smbios_lines)
    fields = {}

    if scan.manufacturer:
        fields["manufacturer"] = scan.manufacturer
    else:
        status = mark_partial(status, "Could not find system manufacturer")

    if scan.product:
        fields["model"] = scan.product
    else:
        status = mark_partial(status, "Could not find system product name")

    serial_number = scan.serial_number
    if not serial_number:
        serial_number = fetch_system_serial_number()
    if serial_number == UNKNOWN:
        status = mark_partial(status, "Could not find system serial number")

    computer_system = ComputerSystemInfo(
        status=status,
        serial_number=serial_number,
        firmware=firmware,
        baseboard=baseboard,
        **fields,
    )

    return computer_system, firmware, baseboard
