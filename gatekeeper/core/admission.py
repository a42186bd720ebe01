"""Admission and fee accounting rules.

This module decides which visitors are charged on entry and keeps the
running revenue total. How much a visitor pays is delegated to an
injected FeePolicyPort; which day it is, is always supplied by the caller.
"""

import logging
from collections.abc import Callable, Iterable
from decimal import Decimal

from .errors import ConfigurationError
from .models import Visitor, Weekday
from .ports import FeePolicyPort

logger = logging.getLogger(__name__)


class AdmissionLedger:
    """Counts charged admissions and accumulates revenue for one session.

    Uses the fee policy port but contains no pricing logic of its own.
    Revenue only grows; nothing is persisted.
    """

    def __init__(
        self,
        fee_policy: FeePolicyPort | None,
        free_day: Weekday = Weekday.FRIDAY,
    ):
        self.fee_policy = fee_policy
        self.free_day = free_day
        self._accumulated_revenue = Decimal("0")

    @property
    def accumulated_revenue(self) -> Decimal:
        return self._accumulated_revenue

    def get_accumulated_revenue(self) -> Decimal:
        """Return a snapshot of the revenue collected so far."""
        return self._accumulated_revenue

    def process_admissions(self, visitors: Iterable[Visitor]) -> int:
        """Admit visitors under the baseline rule: women enter free.

        Returns:
            Number of visitors charged.

        Raises:
            ConfigurationError: If no fee policy was supplied.
            Any exception from the fee policy, unmodified. Revenue keeps
            the fees of visitors charged before the failure.
        """
        return self._admit(visitors, lambda visitor: visitor.is_male)

    def process_admissions_with_day_rule(
        self, visitors: Iterable[Visitor], today: Weekday
    ) -> int:
        """Admit visitors under the ladies' night rule.

        On the free day women enter free and men are charged; on every
        other day everybody is charged.

        Args:
            visitors: Visitors in arrival order.
            today: Current day, resolved by the caller.

        Returns:
            Number of visitors charged.
        """
        if today == self.free_day:
            return self._admit(visitors, lambda visitor: visitor.is_male)
        return self._admit(visitors, lambda visitor: True)

    def _admit(
        self,
        visitors: Iterable[Visitor],
        is_charged: Callable[[Visitor], bool],
    ) -> int:
        if self.fee_policy is None:
            raise ConfigurationError("fee policy")

        charged = 0
        revenue_before = self._accumulated_revenue

        for visitor in visitors:
            if not is_charged(visitor):
                continue
            self._accumulated_revenue += self.fee_policy.compute_fee(visitor)
            charged += 1

        logger.debug(
            f"Admitted batch: charged {charged} visitor(s), "
            f"revenue +{self._accumulated_revenue - revenue_before}"
        )
        return charged
