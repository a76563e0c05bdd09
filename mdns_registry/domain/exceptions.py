"""Domain-specific exceptions for service registration."""


class RegistryError(Exception):
    """Base exception for all mdns-registry errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ValidationError(RegistryError):
    """Raised when a registration cannot be built from its configuration.

    The only failure a descriptor build can produce. ``field`` names the
    offending configuration field using the announcement-layer spelling
    (``serviceName``, ``port``).
    """

    def __init__(self, message: str, field: str | None = None, details: dict | None = None):
        super().__init__(message, details)
        self.field = field
        if field:
            self.details["field"] = field
