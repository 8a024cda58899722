# errors.py
"""Failure kinds raised by the calculation client and the export routines."""


class CompressorAppError(Exception):
    """Base class for every reportable failure of the viewer."""


class ConnectionFailure(CompressorAppError):
    """No usable response was received from the calculation service."""


class CalculationError(CompressorAppError):
    """The service answered with a structured ``{"error": ...}`` payload."""

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class ResponseFormatError(CompressorAppError):
    """The service answered, but not with a JSON object."""


class MissingResponseField(ResponseFormatError):
    """A field the contract promises is absent from the response."""

    def __init__(self, field):
        super().__init__(f"Response has no '{field}' field")
        self.field = field


class AssetNotFound(CompressorAppError):
    """A static asset could not be fetched."""

    def __init__(self, location, reason=""):
        detail = f": {reason}" if reason else ""
        super().__init__(f"Asset not available at {location}{detail}")
        self.location = location
