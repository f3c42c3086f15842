"""
Image Reference Parsing

Extracts the version token (tag or digest) from a container image reference.

Examples:
    >>> get_version_from_image_ref("docker.io/aquasec/trivy:0.14.0")
    '0.14.0'
    >>> get_version_from_image_ref("aquasec/trivy@sha256:5020dac2...")
    'sha256:5020dac2...'
    >>> get_version_from_image_ref("registry:5000/aquasec/trivy")
    'latest'
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

DEFAULT_TAG = "latest"


class ImageReference(BaseModel):
    """
    A container image reference split into its parts.

    Attributes:
        repository: Registry and repository path (may include host:port)
        tag: Tag after the last path segment's colon, if any
        digest: Digest after "@" (e.g. "sha256:..."), if any
    """

    model_config = ConfigDict(frozen=True)

    repository: str
    tag: str | None = None
    digest: str | None = None

    @property
    def version(self) -> str:
        """Digest if pinned, else tag, else "latest"."""
        if self.digest:
            return self.digest
        if self.tag:
            return self.tag
        return DEFAULT_TAG

    def __str__(self) -> str:
        ref = self.repository
        if self.tag:
            ref = f"{ref}:{self.tag}"
        if self.digest:
            ref = f"{ref}@{self.digest}"
        return ref


def parse_image_ref(ref: str) -> ImageReference:
    """
    Split an image reference into repository, tag and digest.

    Only a colon after the final "/" is a tag separator, so a registry
    port ("registry:5000/image") is kept as part of the repository.

    Raises:
        ValueError: If the reference is empty or ends in a bare "@" or ":"
    """
    if not ref or not ref.strip():
        raise ValueError("Image reference must not be empty")

    name, sep, digest = ref.partition("@")
    if sep and not digest:
        raise ValueError(f"Image reference has an empty digest: {ref!r}")

    tag: str | None = None
    slash = name.rfind("/")
    colon = name.rfind(":")
    if colon > slash:
        name, tag = name[:colon], name[colon + 1:]
        if not tag:
            raise ValueError(f"Image reference has an empty tag: {ref!r}")

    if not name:
        raise ValueError(f"Image reference has no repository: {ref!r}")

    return ImageReference(repository=name, tag=tag, digest=digest or None)


def get_version_from_image_ref(ref: str) -> str:
    """
    Return the version of an image reference.

    The digest (including its "sha256:" prefix) wins over a tag. A bare
    repository reference resolves to "latest".
    """
    return parse_image_ref(ref).version
