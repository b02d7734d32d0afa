"""Custom exceptions for the EventHub data layer."""


class EventHubError(Exception):
    """Base exception for EventHub errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigurationError(EventHubError):
    """Connection settings are missing or unusable."""

    pass


class DatabaseConnectionError(EventHubError, ConnectionError):
    """The MongoDB connect attempt failed. Retryable on the next call."""

    pass


class DatabaseNotConnectedError(DatabaseConnectionError):
    """An operation was attempted before connect() resolved."""

    pass


class ValidationError(EventHubError):
    """A field failed validation. Never persisted."""

    def __init__(self, field: str, message: str | None = None):
        super().__init__(message or f"Invalid value for '{field}'")
        self.field = field


class DuplicateSlugError(ValidationError):
    """Another event already uses this slug."""

    def __init__(self, slug: str):
        super().__init__("slug", f"An event with slug '{slug}' already exists")
        self.slug = slug


class ReferenceIntegrityError(EventHubError):
    """A referenced document does not exist."""

    def __init__(self, field: str, value: object):
        super().__init__(f"Referenced document for '{field}' does not exist: {value}")
        self.field = field
        self.value = value
