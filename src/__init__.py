"""
imagebump - Container Image Version Bumper

Find the base images referenced by a Dockerfile and rewrite their tags
or digests in place without touching the rest of the file.
"""

__version__ = "0.3.0"

from core.reference import ImageReference
from core.dockerfile import Dockerfile

__all__ = [
    "ImageReference",
    "Dockerfile",
]
