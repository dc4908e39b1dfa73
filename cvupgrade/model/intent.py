"""User intent and the modifier flags that accompany it."""

from enum import Enum

from pydantic import BaseModel


class UpgradeMode(str, Enum):
    """Mutually exclusive entry modes."""

    CLEAR = "clear"
    TO_LATEST = "to-latest"
    TO_VERSION = "to-version"
    TO_IMAGE = "to-image"
    STATUS = "status"


class Intent(BaseModel):
    """A single requested action with its target, if any."""

    mode: UpgradeMode
    target: str = ""

    class Config:
        frozen = True

    @property
    def version(self) -> str:
        return self.target if self.mode == UpgradeMode.TO_VERSION else ""

    @property
    def image(self) -> str:
        return self.target if self.mode == UpgradeMode.TO_IMAGE else ""


class UpgradeOptions(BaseModel):
    """Flags collected from the command line."""

    to: str = ""
    to_image: str = ""
    to_latest: bool = False
    clear: bool = False

    force: bool = False
    allow_explicit_upgrade: bool = False
    allow_upgrade_with_warnings: bool = False
    include_not_recommended: bool = False
    allow_not_recommended: bool = False

    @property
    def intent(self) -> Intent:
        """Collapse the flag set into one intent.

        Conflicting combinations are rejected by ``validate_options`` before
        this is consulted.
        """
        if self.clear:
            return Intent(mode=UpgradeMode.CLEAR)
        if self.to_latest:
            return Intent(mode=UpgradeMode.TO_LATEST)
        if self.to:
            return Intent(mode=UpgradeMode.TO_VERSION, target=self.to)
        if self.to_image:
            return Intent(mode=UpgradeMode.TO_IMAGE, target=self.to_image)
        return Intent(mode=UpgradeMode.STATUS)
