"""Factory-based credential validator wired from configuration.

Specializes FactoryCredentialValidator by overriding both factories.
The authentication algorithm itself is inherited unchanged.
"""

from gatekeeper.adapters.digest.hashlib_digest import HashlibDigest
from gatekeeper.adapters.store.memory import InMemorySecretStore
from gatekeeper.config import Settings
from gatekeeper.core.credentials import FactoryCredentialValidator
from gatekeeper.core.ports import DigestPort, SecretStorePort


class ConfiguredCredentialValidator(FactoryCredentialValidator):
    """Validator whose collaborators are built from Settings.

    The secret store is seeded once from ``settings.credentials``; the
    digest uses ``settings.digest_algorithm`` and ``settings.digest_salt``.
    """

    def __init__(self, settings: Settings):
        self._secret_store = InMemorySecretStore(settings.credentials)
        self._digest = HashlibDigest(
            algorithm=settings.digest_algorithm,
            salt=settings.digest_salt,
        )

    def provide_secret_store(self) -> SecretStorePort:
        return self._secret_store

    def provide_digest_function(self) -> DigestPort:
        return self._digest
