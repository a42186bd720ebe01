"""Fake implementations of core ports for testing.

These in-memory implementations allow core domain logic to be tested
without external dependencies:

- FakeFeePolicyPort: Canned fees, records every visitor it prices
- FakeSecretStorePort: Canned or per-identifier secrets, records lookups
- FakeDigestPort: Canned or prefixed digests, records inputs
"""

from .digest import FakeDigestPort
from .fee_policy import FakeFeePolicyPort
from .secret_store import FakeSecretStorePort

__all__ = [
    "FakeDigestPort",
    "FakeFeePolicyPort",
    "FakeSecretStorePort",
]
