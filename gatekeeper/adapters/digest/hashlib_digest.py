"""hashlib-backed digest adapter.

Implements DigestPort by delegating to the standard library's hashlib.
No hashing is implemented here; the adapter only selects an algorithm,
applies an optional salt, and hex-encodes the result.
"""

import hashlib

from gatekeeper.core.ports import DigestPort


class HashlibDigest(DigestPort):
    """Hex digest of ``salt + secret`` using a named hashlib algorithm."""

    def __init__(self, algorithm: str = "sha256", salt: str = ""):
        """Initialize the digest adapter.

        Args:
            algorithm: Any name in ``hashlib.algorithms_available``.
            salt: Static prefix applied to every secret before hashing.

        Raises:
            ValueError: If the algorithm is not available.
        """
        if algorithm not in hashlib.algorithms_available:
            raise ValueError(f"Unsupported digest algorithm: {algorithm}")
        self.algorithm = algorithm
        self.salt = salt

    def digest(self, plain_secret: str) -> str:
        hasher = hashlib.new(self.algorithm)
        hasher.update((self.salt + plain_secret).encode("utf-8"))
        return hasher.hexdigest()
