"""
Centralized configuration constants for imagebump.

This module provides a single source of truth for values shared by the
reference parser, the Dockerfile model and the CLI.
"""

# ============================================================================
# Dockerfile Directives
# ============================================================================

FROM_KEYWORD = "FROM"
"""Directive keyword that introduces an image reference (case-sensitive)."""

FIELD_SEPARATOR = " "
"""Separator between the keyword, the image reference and any trailing fields."""

LINE_DELIMITER = "\n"
"""Line delimiter used when scanning and storing manifest content."""

CARRIAGE_RETURN = "\r"
"""Kept as line content; ignored when reading FROM references."""

# ============================================================================
# Image Versions
# ============================================================================

DIGEST_PREFIX = "sha256:"
"""Prefix that marks a version string as a content digest."""

DIGEST_SEPARATOR = "@"
"""Separator between an image name (or tag) and its digest."""

TAG_SEPARATOR = ":"
"""Separator between an image name and its tag."""

# ============================================================================
# Files and I/O
# ============================================================================

DEFAULT_ENCODING = "utf-8"
"""Encoding used when reading and writing manifest and pins files."""

DEFAULT_DOCKERFILE = "Dockerfile"
"""Default manifest path used by the CLI."""

DEFAULT_PINS_FILE = "image-versions.yaml"
"""Default version pins file used by the CLI."""

PINS_SECTION = "images"
"""Top-level key of the version pins file holding name -> version pairs."""
