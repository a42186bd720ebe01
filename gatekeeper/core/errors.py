"""Domain errors for the Gatekeeper core."""


class GatekeeperError(Exception):
    """Base class for errors raised by Gatekeeper components."""


class ConfigurationError(GatekeeperError):
    """Raised when a required capability was not supplied.

    Surfaced at the point of use, before any collaborator is called.
    """

    def __init__(self, capability: str) -> None:
        super().__init__(f"Invalid configuration: {capability} is not configured")
        self.capability = capability


class SecretNotFoundError(GatekeeperError, KeyError):
    """Raised by secret stores when an identifier has no stored secret."""

    def __init__(self, identifier: str) -> None:
        super().__init__(identifier)
        self.identifier = identifier

    def __str__(self) -> str:
        return f"No stored secret for identifier {self.identifier!r}"
