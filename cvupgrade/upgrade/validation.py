"""Validation of user supplied flags, before any cluster access."""

from typing import List

import semver

from ..model.intent import UpgradeOptions
from .errors import InputValidationError
from .reference import ImageReference, InvalidReferenceError

TAG_PULL_SPEC_WARNING = (
    "Using by-tag pull specs is dangerous, and while we still allow it in combination with "
    "--force for backward compatibility, it would be much safer to pass a by-digest pull "
    "spec instead"
)


def validate_options(options: UpgradeOptions) -> List[str]:
    """Reject malformed or conflicting flags.

    Returns warnings for accepted but risky input.
    """
    warnings: List[str] = []

    if options.clear and (options.to_image or options.to or options.to_latest):
        raise InputValidationError("--clear may not be specified with any other flags")
    if options.to and options.to_image:
        raise InputValidationError("only one of --to or --to-image may be provided")
    if options.to_latest and (options.to or options.to_image):
        raise InputValidationError("--to-latest may not be specified with --to or --to-image")

    if options.to:
        try:
            semver.Version.parse(options.to)
        except ValueError as e:
            raise InputValidationError(
                "--to must be a semantic version (e.g. 4.0.1 or 4.1.0-nightly-20181104): "
                f"{e}"
            ) from e

    # 4.0.1 is also a valid image name, so insist on a registry or repository
    if options.to_image:
        try:
            ref = ImageReference.parse(options.to_image)
        except InvalidReferenceError as e:
            raise InputValidationError(f"--to-image must be a valid image pull spec: {e}") from e
        if not ref.registry and not ref.namespace:
            raise InputValidationError(
                "--to-image must be a valid image pull spec: no registry or repository specified"
            )
        if not ref.digest and not ref.tag:
            raise InputValidationError(
                "--to-image must be a valid image pull spec: no tag or digest specified"
            )
        if ref.tag:
            if not options.force:
                raise InputValidationError(
                    "--to-image must be a by-digest pull spec, unless --force is also set, "
                    "because release images that are not accessed via digest cannot be "
                    "verified by the cluster.  Even when --force is set, using tags is not "
                    "recommended, although we continue to allow it for backwards compatibility"
                )
            warnings.append(TAG_PULL_SPEC_WARNING)

    return warnings
