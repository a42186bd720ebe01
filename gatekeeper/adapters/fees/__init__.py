"""Fee policy adapters."""

from .flat import FlatFeePolicy

__all__ = ["FlatFeePolicy"]
