class CivicMatchError(Exception):
    """Base error for everything raised by civicmatch."""


class GeohashError(CivicMatchError):
    """Base error for geohash and coordinate operations."""


class InvalidCoordinateError(GeohashError, ValueError):
    """Latitude or longitude outside the valid range."""


class InvalidGeohashError(GeohashError, ValueError):
    """Geohash is empty or has a character outside the base32 alphabet."""


class InvalidPrecisionError(GeohashError, ValueError):
    """Precision is not between 1 and 12."""


class DirectoryError(CivicMatchError):
    """Authority directory data is malformed."""


class ConnectionError(CivicMatchError):
    """Could not reach the directory endpoint."""


class AuthenticationError(CivicMatchError):
    """Invalid API key (401)."""


class NotFoundError(CivicMatchError):
    """Directory endpoint not found (404)."""


class ValidationError(CivicMatchError):
    """Request rejected by the directory endpoint (400)."""


class ServerError(CivicMatchError):
    """Directory endpoint failed (500)."""
