"""
Exception hierarchy for imagebump.

Provides a standardized exception hierarchy for consistent error handling
across the application. All exceptions inherit from ImageBumpException.
I/O failures are not wrapped and surface as the builtin OSError.
"""


class ImageBumpException(Exception):
    """Base exception for all imagebump errors."""
    pass


class ImageSyntaxError(ImageBumpException):
    """Image reference does not match the reference grammar."""

    def __init__(self, image: str):
        """
        Initialize syntax exception.

        Args:
            image: Offending image reference text
        """
        self.image = image
        super().__init__(f"{image} is not a valid image")


class ImageNotFoundError(ImageBumpException, KeyError):
    """Image name is not registered in a manifest."""

    def __init__(self, image: str):
        """
        Initialize not-found exception.

        Args:
            image: Image name that was looked up
        """
        self.image = image
        super().__init__(f'could not find image "{image}"')

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.args[0]


class ConfigurationException(ImageBumpException):
    """Configuration is invalid or missing."""
    pass


__all__ = [
    "ImageBumpException",
    "ImageSyntaxError",
    "ImageNotFoundError",
    "ConfigurationException",
]
