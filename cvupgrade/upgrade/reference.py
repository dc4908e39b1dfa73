"""Container image reference parsing and release target matching."""

import re

from pydantic import BaseModel

from ..model.cluster import Release

NAME_TOTAL_LENGTH_MAX = 255

_ALPHANUMERIC = r"[a-z0-9]+"
_SEPARATOR = r"(?:[._]|__|[-]+)"
_NAME_COMPONENT = rf"{_ALPHANUMERIC}(?:{_SEPARATOR}{_ALPHANUMERIC})*"
_DOMAIN_COMPONENT = r"(?:[a-zA-Z0-9]|[a-zA-Z0-9][a-zA-Z0-9-]*[a-zA-Z0-9])"
_DOMAIN = rf"{_DOMAIN_COMPONENT}(?:\.{_DOMAIN_COMPONENT})*(?::[0-9]+)?"
_TAG = r"[\w][\w.-]{0,127}"
_DIGEST = r"[A-Za-z][A-Za-z0-9]*(?:[-_+.][A-Za-z][A-Za-z0-9]*)*:[0-9a-fA-F]{32,}"
_NAME = rf"(?:{_DOMAIN}/)?{_NAME_COMPONENT}(?:/{_NAME_COMPONENT})*"

REFERENCE_PATTERN = re.compile(
    rf"^(?P<name>{_NAME})(?::(?P<tag>{_TAG}))?(?:@(?P<digest>{_DIGEST}))?$"
)


class InvalidReferenceError(ValueError):
    """An image pull spec could not be parsed."""


class ImageReference(BaseModel):
    """A parsed ``[registry/][namespace/]name[:tag][@digest]`` pull spec."""

    registry: str = ""
    namespace: str = ""
    name: str = ""
    tag: str = ""
    digest: str = ""

    class Config:
        frozen = True

    @classmethod
    def parse(cls, spec: str) -> "ImageReference":
        """Parse an image pull spec."""
        if not spec:
            raise InvalidReferenceError("repository name must have at least one component")

        match = REFERENCE_PATTERN.match(spec)
        if not match:
            if REFERENCE_PATTERN.match(spec.lower()):
                raise InvalidReferenceError("repository name must be lowercase")
            raise InvalidReferenceError("invalid reference format")

        name = match.group("name")
        if len(name) > NAME_TOTAL_LENGTH_MAX:
            raise InvalidReferenceError(
                f"repository name must not be more than {NAME_TOTAL_LENGTH_MAX} characters"
            )

        registry = ""
        first, sep, rest = name.partition("/")
        if sep and (":" in first or "." in first or first == "localhost"):
            registry, name = first, rest

        namespace = ""
        head, sep, rest = name.partition("/")
        if sep:
            namespace, name = head, rest

        return cls(
            registry=registry,
            namespace=namespace,
            name=name,
            tag=match.group("tag") or "",
            digest=match.group("digest") or "",
        )


def target_match(candidate: Release, want_version: str, want_image: str) -> bool:
    """Check whether a release satisfies the requested version or image.

    Empty ``want_version`` and ``want_image`` never match, even a candidate
    whose own fields are empty. Raises ``InvalidReferenceError`` when an
    image comparison is needed and either pull spec cannot be parsed.
    """
    if want_version and candidate.version == want_version:
        return True

    if want_image:
        if candidate.image == want_image:
            return True

        # Same digest means the same content, whatever the tags say.
        candidate_ref = ImageReference.parse(candidate.image)
        wanted_ref = ImageReference.parse(want_image)
        if wanted_ref.digest and candidate_ref.digest == wanted_ref.digest:
            return True

    return False
