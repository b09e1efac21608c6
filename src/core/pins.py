"""
Version pins: a YAML file of image name -> version pairs.

Example file::

    images:
      ubuntu: "16.04"
      library/alpine: "3.6@sha256:9887454752654746548375"
"""

import logging
from pathlib import Path
from typing import Mapping, Union

import yaml

from constants import DEFAULT_ENCODING, PINS_SECTION
from core.exceptions import ConfigurationException, ImageNotFoundError
from core.manifest import VersionedManifest

logger = logging.getLogger(__name__)


def load_version_pins(path: Union[str, Path]) -> dict[str, str]:
    """
    Load version pins from a YAML file.

    Args:
        path: Path to the pins file

    Returns:
        Mapping of image name to version, in file order

    Raises:
        ConfigurationException: If the file is missing, not valid YAML,
            or lacks a mapping under ``images``, or a version is not a string
    """
    try:
        with open(path, "r", encoding=DEFAULT_ENCODING) as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        raise ConfigurationException(f"Pins file not found: {path}")
    except yaml.YAMLError as e:
        raise ConfigurationException(f"Failed to parse pins file: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationException(f"Invalid pins file format: {path}")

    images = data.get(PINS_SECTION)
    if not isinstance(images, dict):
        raise ConfigurationException(f"Missing or invalid '{PINS_SECTION}' section in {path}")

    pins = {}
    for name, version in images.items():
        # Unquoted versions such as 1.20 load as floats and lose digits
        if not isinstance(version, str):
            raise ConfigurationException(
                f"Version for {name} must be a quoted string, got {version!r}: {path}"
            )
        pins[str(name)] = version
    logger.info(f"Loaded {len(pins)} version pin(s) from {path}")
    return pins


def apply_version_pins(
    manifest: VersionedManifest,
    pins: Mapping[str, str],
    strict: bool = False,
) -> list[str]:
    """
    Apply version pins to a manifest.

    Args:
        manifest: Loaded manifest to modify
        pins: Mapping of image name to version
        strict: Raise on the first pin naming an unknown image instead of skipping it

    Returns:
        Names of the images whose version was set

    Raises:
        ImageNotFoundError: If strict and a pinned image is not in the manifest
    """
    applied = []
    for name, version in pins.items():
        try:
            manifest.set_version(name, version)
        except ImageNotFoundError:
            if strict:
                raise
            logger.warning(f"Skipping pin for {name}: image not found in manifest")
            continue
        applied.append(name)

    logger.debug(f"Applied {len(applied)} of {len(pins)} pin(s)")
    return applied


__all__ = [
    "load_version_pins",
    "apply_version_pins",
]
