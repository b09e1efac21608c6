"""
Dockerfile model for finding and bumping base image versions.

Only ``FROM`` lines are interpreted. Every other line is carried through
untouched so that writing the document back reproduces its content.
"""

import logging
from pathlib import Path
from typing import Dict, Optional, TextIO, Union

from constants import (
    CARRIAGE_RETURN,
    DEFAULT_ENCODING,
    FIELD_SEPARATOR,
    FROM_KEYWORD,
    LINE_DELIMITER,
)
from core.exceptions import ImageNotFoundError
from core.manifest import VersionedManifest
from core.reference import ImageReference

logger = logging.getLogger(__name__)

DIRECTIVE_PREFIX = FROM_KEYWORD + FIELD_SEPARATOR


class Dockerfile(VersionedManifest):
    """
    Line-oriented Dockerfile with an index of its ``FROM`` images.

    Lines are stored without their delimiter and always written back with
    one, so content lacking a final newline gains one on output. Loading is
    not transactional: if a ``FROM`` line fails to parse, the lines read so
    far (including the failing one) stay in the buffer and the instance
    should be discarded.
    """

    def __init__(self, name: str = "", stream: Optional[TextIO] = None):
        """
        Initialize the Dockerfile and optionally load content.

        Args:
            name: Label for the document, usually its path
            stream: Text stream to load immediately (optional)

        Raises:
            ImageSyntaxError: If a FROM line holds an invalid reference
            OSError: If the stream cannot be read
        """
        self.name = name
        self._lines: list[str] = []
        self.artifacts: Dict[str, ImageReference] = {}
        if stream is not None:
            self.load(stream)

    @classmethod
    def from_path(cls, path: Union[str, Path]) -> "Dockerfile":
        """Open and load a Dockerfile from disk."""
        # newline="\n" keeps "\r" bytes intact and splits on "\n" only
        with open(path, "r", encoding=DEFAULT_ENCODING, newline=LINE_DELIMITER) as f:
            return cls(name=str(path), stream=f)

    def get_artifacts(self) -> Dict[str, ImageReference]:
        """Return the mapping of image name to reference."""
        return self.artifacts

    def load(self, stream: TextIO) -> None:
        """
        Read lines from a stream, indexing every FROM image.

        A later FROM line naming the same image replaces the earlier entry.

        Args:
            stream: Text stream, iterable of lines, or a whole string

        Raises:
            ImageSyntaxError: If a FROM line holds an invalid reference
            OSError: If the stream cannot be read
        """
        if isinstance(stream, (str, bytes)):
            stream = [stream]
        for raw_line in stream:
            if isinstance(raw_line, bytes):
                raw_line = raw_line.decode(DEFAULT_ENCODING)
            for line in _split_lines(raw_line):
                self._lines.append(line)
                content = _strip_carriage_return(line)
                if content.startswith(DIRECTIVE_PREFIX):
                    fields = content.split(FIELD_SEPARATOR, 2)
                    image = ImageReference.parse(fields[1])
                    self.artifacts[image.name] = image
                    logger.debug(f"{self.name or 'Dockerfile'}: found image {image}")

    def set_version(self, name: str, version: str) -> None:
        """
        Change the version of an image and rewrite its FROM lines.

        Every line starting with ``FROM <old reference>`` is replaced whole by
        ``FROM <new reference>``. Text after the old reference on such a line
        (for example a stage alias) is not kept. A trailing carriage return is kept.

        Args:
            name: Image name as returned by ImageReference.name
            version: New tag, digest, or tag@digest

        Raises:
            ImageNotFoundError: If the image is not in this Dockerfile
        """
        image = self.artifacts.get(name)
        if image is None:
            raise ImageNotFoundError(name)

        old_directive = DIRECTIVE_PREFIX + image.format()
        image.set_version(version)
        new_directive = DIRECTIVE_PREFIX + image.format()

        rewritten = 0
        lines = []
        for line in self._lines:
            content = _strip_carriage_return(line)
            if content.startswith(old_directive):
                # CRLF lines keep their carriage return
                line = new_directive + line[len(content):]
                rewritten += 1
            lines.append(line)
        self._lines = lines

        logger.info(f"Bumped {name} to {version} ({rewritten} line(s) rewritten)")

    def to_string(self) -> str:
        """Return the buffered content, one delimiter after every line."""
        return "".join(line + LINE_DELIMITER for line in self._lines)

    def write(self, sink: TextIO) -> None:
        """Write the buffered content verbatim."""
        sink.write(self.to_string())

    def save(self, path: Union[str, Path]) -> None:
        """Write the buffered content to a file."""
        with open(path, "w", encoding=DEFAULT_ENCODING, newline=LINE_DELIMITER) as f:
            self.write(f)
        logger.debug(f"Wrote {len(self._lines)} line(s) to {path}")


def _strip_carriage_return(line: str) -> str:
    """Return the line without one trailing carriage return."""
    if line.endswith(CARRIAGE_RETURN):
        return line[:-1]
    return line


def _split_lines(chunk: str) -> list[str]:
    """Split a chunk of text into lines without their delimiter."""
    if not chunk:
        return []
    lines = chunk.split(LINE_DELIMITER)
    if chunk.endswith(LINE_DELIMITER):
        lines.pop()
    return lines


__all__ = [
    "Dockerfile",
]
