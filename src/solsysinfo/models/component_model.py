from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, Field

from solsysinfo.models.status_models import Status

#: Value used for every attribute that could not be determined.
UNKNOWN = "unknown"


def _unknown_if_empty(value: Any) -> Any:
    if value is None:
        return UNKNOWN
    if isinstance(value, str) and not value.strip():
        return UNKNOWN
    return value


#: A string attribute that is never empty: missing values become ``UNKNOWN``.
KnownStr = Annotated[str, BeforeValidator(_unknown_if_empty)]


class ComponentInfo(BaseModel):
    status: Status = Field(default_factory=Status)
