"""Exception taxonomy shared by the validator, the clients and the API layer."""


class GatewayError(Exception):
    """Base class for every error the gateway raises on purpose."""


class ValidationError(GatewayError):
    """A request parameter fell outside its closed enumeration (HTTP 400)."""

    def __init__(self, field: str, value: str, message: str) -> None:
        super().__init__(message)
        self.field = field
        self.value = value
        self.message = message


class GeneratorError(GatewayError):
    """The text generator or astrology data source failed or returned junk."""


class ConfigurationError(GatewayError):
    """A credential needed for an outbound call is missing."""
