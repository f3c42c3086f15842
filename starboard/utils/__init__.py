"""
Utility Functions

Modules:
    image: Container image reference parsing
"""

from starboard.utils.image import (
    DEFAULT_TAG,
    ImageReference,
    get_version_from_image_ref,
    parse_image_ref,
)

__all__ = [
    "DEFAULT_TAG",
    "ImageReference",
    "get_version_from_image_ref",
    "parse_image_ref",
]
