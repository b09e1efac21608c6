"""Core logic for parsing image references and bumping their versions."""

from core.exceptions import (
    ImageBumpException,
    ImageSyntaxError,
    ImageNotFoundError,
    ConfigurationException,
)
from core.reference import ImageReference, parse_image_reference
from core.manifest import VersionedManifest
from core.dockerfile import Dockerfile
from core.pins import load_version_pins, apply_version_pins

__all__ = [
    "ImageBumpException",
    "ImageSyntaxError",
    "ImageNotFoundError",
    "ConfigurationException",
    "ImageReference",
    "parse_image_reference",
    "VersionedManifest",
    "Dockerfile",
    "load_version_pins",
    "apply_version_pins",
]
