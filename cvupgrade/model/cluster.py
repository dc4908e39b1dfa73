"""ClusterVersion resource models."""

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, field_validator


class ConditionStatus(str, Enum):
    """Tri-state condition status."""

    TRUE = "True"
    FALSE = "False"
    UNKNOWN = "Unknown"


class Condition(BaseModel):
    """A named status condition.

    Cluster-level conditions (Degraded, Progressing, Upgradeable, ...) and
    the per-update ``Recommended`` condition share this shape.
    """

    type: str
    status: ConditionStatus = ConditionStatus.UNKNOWN
    reason: str = ""
    message: str = ""
    last_transition_time: Optional[str] = Field(default=None, alias="lastTransitionTime")

    class Config:
        populate_by_name = True
        extra = "allow"

    @property
    def is_true(self) -> bool:
        return self.status == ConditionStatus.TRUE

    @property
    def is_false(self) -> bool:
        return self.status == ConditionStatus.FALSE


class Release(BaseModel):
    """An addressable cluster release."""

    version: str = ""
    image: str = ""
    url: Optional[str] = None
    channels: List[str] = Field(default_factory=list)

    class Config:
        frozen = True
        extra = "allow"

    @field_validator("version", "image", mode="before")
    @classmethod
    def _null_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("channels", mode="before")
    @classmethod
    def _null_channels(cls, value: Any) -> Any:
        return [] if value is None else value

    @property
    def display_name(self) -> str:
        """Version, else image, else a placeholder."""
        return self.version or self.image or "<unknown>"


class Update(BaseModel):
    """A requested update, written back as the desired state."""

    version: str = ""
    image: str = ""
    force: bool = False

    class Config:
        extra = "allow"

    @classmethod
    def from_release(cls, release: Release, force: bool = False) -> "Update":
        return cls(version=release.version, image=release.image, force=force)

    @property
    def display_name(self) -> str:
        """Version, else image, else a placeholder."""
        return self.version or self.image or "<unknown>"

    def is_equivalent(self, release: Release) -> bool:
        """Check whether this request points at the given release.

        Images are compared when both are set, otherwise versions when both
        are set; anything else is not equivalent.
        """
        if self.image and release.image:
            return self.image == release.image
        if self.version and release.version:
            return self.version == release.version
        return False


class ConditionalUpdate(BaseModel):
    """A reachable release whose recommendation depends on cluster checks."""

    release: Release
    conditions: List[Condition] = Field(default_factory=list)

    class Config:
        extra = "allow"

    @field_validator("conditions", mode="before")
    @classmethod
    def _null_conditions(cls, value: Any) -> Any:
        return [] if value is None else value


class ClusterVersionStatus(BaseModel):
    """Observed state reported by the cluster."""

    desired: Release = Field(default_factory=Release)
    available_updates: List[Release] = Field(default_factory=list, alias="availableUpdates")
    conditional_updates: List[ConditionalUpdate] = Field(
        default_factory=list, alias="conditionalUpdates"
    )
    conditions: List[Condition] = Field(default_factory=list)

    class Config:
        populate_by_name = True
        extra = "allow"

    @field_validator("available_updates", "conditional_updates", "conditions", mode="before")
    @classmethod
    def _null_lists(cls, value: Any) -> Any:
        return [] if value is None else value


class ClusterVersionSpec(BaseModel):
    """Desired state requested of the cluster."""

    desired_update: Optional[Update] = Field(default=None, alias="desiredUpdate")
    channel: Optional[str] = None
    upstream: Optional[str] = None

    class Config:
        populate_by_name = True
        extra = "allow"


class ClusterVersion(BaseModel):
    """The cluster-scoped ClusterVersion resource."""

    api_version: str = Field(default="config.openshift.io/v1", alias="apiVersion")
    kind: str = "ClusterVersion"
    metadata: Dict[str, Any] = Field(default_factory=dict)
    spec: ClusterVersionSpec = Field(default_factory=ClusterVersionSpec)
    status: ClusterVersionStatus = Field(default_factory=ClusterVersionStatus)

    class Config:
        populate_by_name = True
        extra = "allow"

    @property
    def name(self) -> str:
        """Get resource name."""
        return self.metadata.get("name", "version")

    def with_desired_update(self, update: Optional[Update]) -> "ClusterVersion":
        """Return a copy whose spec requests the given update."""
        spec = self.spec.model_copy(update={"desired_update": update})
        return self.model_copy(update={"spec": spec})

    def to_manifest(self) -> Dict[str, Any]:
        """Serialize back to the API representation."""
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")
