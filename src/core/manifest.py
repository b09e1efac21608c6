"""
Manifest interface for strictly versioned artifacts.

Defines the contract for documents that reference versioned artifacts
(Dockerfiles today), so pins and the CLI can work against any of them.
"""

from abc import ABC, abstractmethod
from typing import Mapping, TextIO

from core.reference import ImageReference


class VersionedManifest(ABC):
    """
    Abstract base class for manifests of versioned artifacts.

    A manifest is loaded from a text stream, exposes its artifacts by
    name, accepts version changes and writes itself back out.
    """

    @abstractmethod
    def load(self, stream: TextIO) -> None:
        """
        Read manifest content from a stream.

        Args:
            stream: Text stream to consume

        Raises:
            ImageSyntaxError: If an artifact reference is invalid
            OSError: If the stream cannot be read
        """
        pass

    @abstractmethod
    def write(self, sink: TextIO) -> None:
        """
        Write manifest content to a stream.

        Args:
            sink: Text stream to write to
        """
        pass

    @abstractmethod
    def get_artifacts(self) -> Mapping[str, ImageReference]:
        """
        Return the artifacts found in the manifest.

        Returns:
            Mapping of artifact name to its reference
        """
        pass

    @abstractmethod
    def set_version(self, name: str, version: str) -> None:
        """
        Change the version of a named artifact.

        Args:
            name: Artifact name
            version: New version string

        Raises:
            ImageNotFoundError: If no artifact has that name
        """
        pass


__all__ = [
    "VersionedManifest",
]
