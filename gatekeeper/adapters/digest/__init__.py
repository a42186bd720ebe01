"""Digest adapters for presented secrets."""

from .hashlib_digest import HashlibDigest

__all__ = ["HashlibDigest"]
