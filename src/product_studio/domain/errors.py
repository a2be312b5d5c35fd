"""Errors raised while handling a studio session."""


class StudioError(Exception):
    """Base class for product studio failures."""


class InvalidInputType(StudioError):
    """Raised when a selected file is not an image."""


class DecodeError(StudioError):
    """Raised when image bytes or a data URL cannot be read."""


class RemoteError(StudioError):
    """Raised when the image model cannot be reached or answers badly."""
