"""Report-related models."""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class ReportFormat(str, Enum):
    """Supported report formats."""

    TEXT = "text"
    JSON = "json"
    YAML = "yaml"


class UpdateEntry(BaseModel):
    """One row of the recommended updates table."""

    version: str
    image: str


class NotRecommendedEntry(BaseModel):
    """A conditional update whose Recommended condition is not True."""

    version: str
    image: str
    recommended: str
    reason: str = ""
    message: str = ""


class StatusReport(BaseModel):
    """Everything the status-only mode displays, in display order."""

    progress: Optional[str] = None
    upgradeable_reason: Optional[str] = None
    upgradeable_message: Optional[str] = None
    channel: str = ""
    upstream: str = ""
    available_channels: List[str] = Field(default_factory=list)
    recommended_updates: List[UpdateEntry] = Field(default_factory=list)
    updates_retrieved: bool = True
    not_recommended_updates: List[NotRecommendedEntry] = Field(default_factory=list)
    include_not_recommended: bool = False
