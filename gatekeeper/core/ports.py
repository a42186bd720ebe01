"""Port interfaces for the Gatekeeper system.

These abstract base classes define the boundaries between core
domain logic and external adapters. Implementations live in the
adapters/ package; in-memory fakes live in tests/fakes/.

All ports are driven ports (core calls out to adapters):

- FeePolicyPort: How much a charged visitor pays
- SecretStorePort: Stored secret representation for an identifier
- DigestPort: Deterministic transformation of a plaintext secret
"""

from abc import ABC, abstractmethod
from decimal import Decimal

from .models import Visitor


class FeePolicyPort(ABC):
    """Port for pricing a single admission.

    Implementations must be pure functions of the visitor: the ledger may
    call them any number of times and assumes no side effects.
    """

    @abstractmethod
    def compute_fee(self, visitor: Visitor) -> Decimal:
        """Return the fee charged to a visitor.

        Args:
            visitor: The visitor being admitted. Only called for visitors
                the ledger has already decided to charge.

        Returns:
            Non-negative fee amount.
        """


class SecretStorePort(ABC):
    """Port for retrieving the stored secret of an identifier.

    Implementations may be backed by a database, a directory service or
    memory. Any blocking, timeout or retry behaviour belongs to the
    implementation; the core calls it exactly once per check.
    """

    @abstractmethod
    def lookup_secret(self, identifier: str) -> str:
        """Return the stored secret representation for an identifier.

        Args:
            identifier: Account identifier.

        Returns:
            Stored digest, compared verbatim against the computed digest.

        Raises:
            SecretNotFoundError: If the identifier is unknown.
        """


class DigestPort(ABC):
    """Port for digesting a presented plaintext secret."""

    @abstractmethod
    def digest(self, plain_secret: str) -> str:
        """Transform a plaintext secret into its stored representation.

        Must be deterministic for a fixed input within a single run.
        """
