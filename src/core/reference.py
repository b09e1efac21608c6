"""
Parsing and manipulation of container image references.

A reference is split into an identity (``name``) and a mutable version
(``tag`` and/or ``digest``). Validation and splitting are separate steps:
the grammar regex only decides whether the whole string is acceptable,
and the split points come from scanning for the last ``@`` and the last
``:`` before it.
"""

import logging
import re
from dataclasses import dataclass

from constants import DIGEST_PREFIX, DIGEST_SEPARATOR, TAG_SEPARATOR
from core.exceptions import ImageSyntaxError

logger = logging.getLogger(__name__)

IMAGE_REFERENCE_PATTERN = re.compile(
    r"^"
    r"(?:(?P<registry>[a-z]+\.[a-z0-9.-]+(?::[0-9]+)?)/)?"
    r"(?:(?P<group>[a-zA-Z0-9-]+)/)?"
    r"(?P<image>[a-z0-9]+(?:-+[a-z0-9]+)*)"
    r"(?::(?P<tag>[A-Za-z0-9._+-]+))?"
    r"(?:@(?P<digest>sha256:[a-f0-9]+))?"
    r"$"
)
"""Grammar for ``[registry/][group/]image[:tag][@digest]``. Used for validation only."""


@dataclass
class ImageReference:
    """Parsed container image reference."""

    name: str
    tag: str = ""
    digest: str = ""

    @classmethod
    def parse(cls, image: str) -> "ImageReference":
        """
        Validate and split an image reference.

        Args:
            image: Image reference (e.g., "ubuntu:14.04")

        Returns:
            ImageReference with name, tag and digest populated

        Raises:
            ImageSyntaxError: If the reference does not match the grammar

        Examples:
            >>> ImageReference.parse("ubuntu:14.04")
            ImageReference(name='ubuntu', tag='14.04', digest='')

            >>> ImageReference.parse("library/alpine@sha256:5938")
            ImageReference(name='library/alpine', tag='', digest='sha256:5938')

            >>> ImageReference.parse("dk.tech.example.com:8080/team1/image2:latest")
            ImageReference(name='dk.tech.example.com:8080/team1/image2', tag='latest', digest='')
        """
        if not IMAGE_REFERENCE_PATTERN.fullmatch(image):
            raise ImageSyntaxError(image)

        tag = ""
        digest = ""

        # Split points come from the last separators, not from the match groups
        at = image.rfind(DIGEST_SEPARATOR)
        version_end = at if at >= 0 else len(image)
        if at >= 0:
            digest = image[at + 1:]

        colon = image.rfind(TAG_SEPARATOR, 0, version_end)
        if colon >= 0:
            tag = image[colon + 1:version_end]

        name_end = min(i for i in (at, colon, len(image)) if i >= 0)
        return cls(name=image[:name_end], tag=tag, digest=digest)

    def format(self) -> str:
        """Return the canonical text of the reference."""
        if self.tag and self.digest:
            return f"{self.name}{TAG_SEPARATOR}{self.tag}{DIGEST_SEPARATOR}{self.digest}"
        if self.digest:
            return f"{self.name}{DIGEST_SEPARATOR}{self.digest}"
        if self.tag:
            return f"{self.name}{TAG_SEPARATOR}{self.tag}"
        return self.name

    def __str__(self) -> str:
        return self.format()

    def set_version(self, version: str) -> None:
        """
        Replace the tag and/or digest of the reference.

        The value is not validated. A value starting with ``sha256:`` becomes
        the digest and clears the tag. A value containing ``@sha256:`` is split
        on its first ``@`` into tag and digest. Anything else becomes the tag
        and clears the digest.

        Args:
            version: New version (e.g., "16.04", "sha256:abc", "16.04@sha256:abc")
        """
        if version.startswith(DIGEST_PREFIX):
            self.digest = version
            self.tag = ""
        elif DIGEST_SEPARATOR + DIGEST_PREFIX in version:
            self.tag, self.digest = version.split(DIGEST_SEPARATOR, 1)
        else:
            self.tag = version
            self.digest = ""
        logger.debug(f"Set version of {self.name} to {version!r}: {self.format()}")


def parse_image_reference(image: str) -> ImageReference:
    """
    Parse a container image reference into its components.

    Args:
        image: Image reference text

    Returns:
        ImageReference with parsed components

    Raises:
        ImageSyntaxError: If the reference does not match the grammar
    """
    return ImageReference.parse(image)


__all__ = [
    "IMAGE_REFERENCE_PATTERN",
    "ImageReference",
    "parse_image_reference",
]
