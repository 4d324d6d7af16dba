from enum import Enum
from typing import Tuple

from pydantic import BaseModel, ConfigDict


class StatusType(str, Enum):
    SUCCESS = "success"
    PARTIAL = "partial"
    FAILED = "failed"


class Status(BaseModel):
    """Every component carries a ``status`` attribute describing how the discovery went.

    ``SUCCESS`` means every attribute was found. ``PARTIAL`` means one or more attributes
    were not found and were left as ``UNKNOWN``. ``FAILED`` means the underlying command
    gave no data at all. Messages may be present for any type, describing what happened
    during discovery.

    A status is frozen like the records that hold it, so it is part of the snapshot.
    """

    model_config = ConfigDict(frozen=True)

    type: StatusType = StatusType.SUCCESS
    messages: Tuple[str, ...] = ()


def add_message(status: Status, message: str) -> Status:
    return status.model_copy(update={"messages": status.messages + (message,)})


def mark_partial(status: Status, message: str) -> Status:
    if status.type == StatusType.FAILED:
        return add_message(status, message)
    return Status(type=StatusType.PARTIAL, messages=status.messages + (message,))


"""
Discovery code carries a status along while it scans, replacing it on every change,
and hands the final one to the record.
```
status = Status()
if not vendor:
    status = mark_partial(status, "Could not find BIOS vendor")
firmware = FirmwareInfo(status=status, manufacturer=vendor)
```
A FAILED status is never downgraded to PARTIAL by ``mark_partial``; the message is still recorded.
"""
