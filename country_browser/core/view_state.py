from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from .country import Country
from .exceptions import FetchError
from .population import UNFILTERED_LABEL


class Status(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    ERROR = "error"


@dataclass(frozen=True)
class ViewState:
    """
    Everything the country table needs to render.

    Fields:

    - records: last successfully fetched list, empty until the first fetch
    - query: free-text name search
    - bucket: selected population bucket label
    - status: idle / loading / error
    - last_error: the failure behind status=error, None otherwise
    - has_fetched: True once any fetch has succeeded, so "never loaded" and
      "loaded zero countries" can be told apart

    Instances are immutable; transitions build a new ViewState. A loading
    state never carries an error.
    """

    records: Tuple[Country, ...] = ()
    query: str = ""
    bucket: str = UNFILTERED_LABEL
    status: Status = Status.IDLE
    last_error: Optional[FetchError] = None
    has_fetched: bool = False

    def __post_init__(self) -> None:
        if self.status is Status.LOADING and self.last_error is not None:
            raise ValueError("A loading ViewState cannot hold an error")

    def evolve(self, **changes: Any) -> ViewState:
        return replace(self, **changes)

    @property
    def error_message(self) -> Optional[str]:
        return None if self.last_error is None else str(self.last_error)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "records": [c.to_dict() for c in self.records],
            "query": self.query,
            "bucket": self.bucket,
            "status": self.status.value,
            "last_error": self.error_message,
            "has_fetched": self.has_fetched,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> ViewState:
        status = Status(data.get("status", Status.IDLE.value))
        error_message = data.get("last_error")
        last_error = None
        if error_message is not None and status is not Status.LOADING:
            last_error = FetchError(error_message)

        return cls(
            records=tuple(Country.from_dict(r) for r in data.get("records", [])),
            query=str(data.get("query") or ""),
            bucket=str(data.get("bucket") or UNFILTERED_LABEL),
            status=status,
            last_error=last_error,
            has_fetched=bool(data.get("has_fetched", False)),
        )
