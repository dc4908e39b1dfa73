"""Decision outcomes."""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field

from .report import StatusReport


class OutcomeKind(str, Enum):
    """Terminal states of a single decision."""

    NOOP = "noop"
    APPLIED = "applied"
    REPORT = "report"
    FAILURE = "failure"


class Outcome(BaseModel):
    """The result of one invocation.

    ``warnings`` belong on the diagnostic stream and are kept separate from
    ``message`` so report output stays parseable.
    """

    kind: OutcomeKind
    message: str = ""
    warnings: List[str] = Field(default_factory=list)
    report: Optional[StatusReport] = None

    @property
    def failed(self) -> bool:
        return self.kind == OutcomeKind.FAILURE

    @classmethod
    def noop(cls, message: str, warnings: Optional[List[str]] = None) -> "Outcome":
        return cls(kind=OutcomeKind.NOOP, message=message, warnings=list(warnings or []))

    @classmethod
    def applied(cls, message: str, warnings: Optional[List[str]] = None) -> "Outcome":
        return cls(kind=OutcomeKind.APPLIED, message=message, warnings=list(warnings or []))

    @classmethod
    def failure(cls, message: str, warnings: Optional[List[str]] = None) -> "Outcome":
        return cls(kind=OutcomeKind.FAILURE, message=message, warnings=list(warnings or []))

    @classmethod
    def status(cls, report: StatusReport, warnings: Optional[List[str]] = None) -> "Outcome":
        return cls(kind=OutcomeKind.REPORT, report=report, warnings=list(warnings or []))
