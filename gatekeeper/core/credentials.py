"""Credential validation against a stored secret.

The same comparison is offered in three inversion-of-control styles:

1. Parameter injection: ``check_authentication_with`` receives the
   collaborators on every call.
2. Constructor (and attribute) injection: ``CredentialValidator``.
3. Overridable factory methods: ``FactoryCredentialValidator``, whose
   subclasses decide which collaborators to use.

All three run the identical algorithm and give identical results for
collaborators with identical behaviour.
"""

import logging

from .errors import ConfigurationError
from .ports import DigestPort, SecretStorePort

logger = logging.getLogger(__name__)


def check_authentication_with(
    secret_store: SecretStorePort | None,
    digest: DigestPort | None,
    identifier: str,
    presented_secret: str,
) -> bool:
    """Check a presented secret against the stored one for an identifier.

    Performs exactly one lookup and one digest computation. Collaborator
    errors (unknown identifier, digest failure) propagate unchanged.

    Raises:
        ConfigurationError: If either collaborator is None. Raised before
            any collaborator is called.
    """
    if secret_store is None:
        raise ConfigurationError("secret store")
    if digest is None:
        raise ConfigurationError("digest function")

    stored_digest = secret_store.lookup_secret(identifier)
    computed_digest = digest.digest(presented_secret)

    authenticated = stored_digest == computed_digest
    logger.debug(
        f"Authentication for {identifier!r}: "
        f"{'accepted' if authenticated else 'rejected'}"
    )
    return authenticated


class CredentialValidator:
    """Validates credentials using injected collaborators.

    Collaborators are set at construction and may be replaced later
    through the public attributes. A missing collaborator is reported
    when a check is attempted, not at construction.
    """

    def __init__(
        self,
        secret_store: SecretStorePort | None,
        digest: DigestPort | None,
    ):
        self.secret_store = secret_store
        self.digest = digest

    def check_authentication(self, identifier: str, presented_secret: str) -> bool:
        return check_authentication_with(
            self.secret_store, self.digest, identifier, presented_secret
        )


class FactoryCredentialValidator:
    """Validates credentials using collaborators from overridable factories.

    Subclasses override ``provide_secret_store`` and
    ``provide_digest_function`` to choose their collaborators. The base
    factories provide nothing, so an unspecialized validator fails with
    ConfigurationError at the point of use.

    Factories are called on every check.
    """

    def provide_secret_store(self) -> SecretStorePort | None:
        return None

    def provide_digest_function(self) -> DigestPort | None:
        return None

    def check_authentication(self, identifier: str, presented_secret: str) -> bool:
        return check_authentication_with(
            self.provide_secret_store(),
            self.provide_digest_function(),
            identifier,
            presented_secret,
        )
