"""
Result models returned by the catalog facades.

Validation problems are collected as events instead of being raised,
so callers can report every problem at once.
"""

from enum import Enum
from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel, Field, computed_field

T = TypeVar("T")


class Severity(str, Enum):
    """Severity of an event."""

    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"


class Status(str, Enum):
    """Overall status of a result."""

    OK = "OK"
    WARN = "WARN"
    ERROR = "ERROR"


class Event(BaseModel):
    """Single validation or processing event."""

    severity: Severity = Field(description="Event severity")
    key: str = Field(description="Machine readable event code")
    message: str = Field(description="Human readable message")

    model_config = {"frozen": True}


class Result(BaseModel, Generic[T]):
    """Outcome of a facade operation with optional data and events."""

    data: Optional[T] = Field(None, description="Returned data")
    events: List[Event] = Field(default_factory=list, description="Collected events")

    @computed_field
    @property
    def status(self) -> Status:
        """Worst severity among events."""
        severities = {event.severity for event in self.events}
        if Severity.ERROR in severities:
            return Status.ERROR
        if Severity.WARN in severities:
            return Status.WARN
        return Status.OK

    @classmethod
    def of(cls, data: Optional[T]) -> "Result[T]":
        """Create a successful result holding data."""
        return cls(data=data)

    @classmethod
    def error(cls, key: str, message: str) -> "Result[T]":
        """Create a result with a single error event."""
        return cls(events=[Event(severity=Severity.ERROR, key=key, message=message)])

    def add_event(self, event: Event) -> None:
        """Append an event."""
        self.events.append(event)

    def add_error(self, key: str, message: str) -> None:
        """Append an error event."""
        self.add_event(Event(severity=Severity.ERROR, key=key, message=message))

    def add_events(self, events: List[Event]) -> None:
        """Append several events."""
        self.events.extend(events)

    @property
    def is_ok(self) -> bool:
        """Whether no error event was recorded."""
        return self.status != Status.ERROR
