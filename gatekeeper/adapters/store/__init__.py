"""Secret store adapters.

Only an in-memory store is provided; durable backends implement
SecretStorePort outside this package.
"""

from .memory import InMemorySecretStore

__all__ = ["InMemorySecretStore"]
