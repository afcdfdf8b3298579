"""
Error taxonomy for Watermark Manager.

    WatermarkManagerError
      ├── LoadError        input missing, unreadable or not a decodable image
      ├── WriteError       output could not be encoded or written
      └── ValidationError  referenced file absent, unknown edit option
"""
from __future__ import annotations


class WatermarkManagerError(Exception):
    """
    Root of every error raised by this package.
    Keeps the underlying exception (if any) for logging.
    """

    def __init__(self, message: str, original_error: Exception | None = None):
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class LoadError(WatermarkManagerError):
    pass


class WriteError(WatermarkManagerError):
    pass


class ValidationError(WatermarkManagerError):
    pass
