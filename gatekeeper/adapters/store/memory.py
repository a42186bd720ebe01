"""In-memory secret store adapter.

Implements SecretStorePort over a plain dict. Records are seeded at
construction (typically from settings) and live for the process only.
"""

import logging
from collections.abc import Mapping

from gatekeeper.core.errors import SecretNotFoundError
from gatekeeper.core.ports import SecretStorePort

logger = logging.getLogger(__name__)


class InMemorySecretStore(SecretStorePort):
    """Dict-backed store mapping identifiers to stored digests."""

    def __init__(self, records: Mapping[str, str] | None = None):
        self._records: dict[str, str] = {}
        for identifier, stored_digest in (records or {}).items():
            self.add(identifier, stored_digest)

    def add(self, identifier: str, stored_digest: str) -> None:
        """Register or replace the stored digest for an identifier."""
        if not identifier or not identifier.strip():
            raise ValueError("identifier must be a non-empty string")
        self._records[identifier] = stored_digest

    def lookup_secret(self, identifier: str) -> str:
        try:
            return self._records[identifier]
        except KeyError:
            logger.warning(f"Secret lookup failed for unknown identifier {identifier!r}")
            raise SecretNotFoundError(identifier) from None

    def __len__(self) -> int:
        return len(self._records)
