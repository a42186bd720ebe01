"""Flat admission fee policy."""

from decimal import Decimal

from gatekeeper.core.models import Visitor
from gatekeeper.core.ports import FeePolicyPort


class FlatFeePolicy(FeePolicyPort):
    """Charges the same fee to every visitor it is asked about."""

    def __init__(self, fee: Decimal | int | str):
        fee = Decimal(fee)
        if fee < 0:
            raise ValueError(f"fee must be non-negative, got {fee}")
        self.fee = fee

    def compute_fee(self, visitor: Visitor) -> Decimal:
        return self.fee
