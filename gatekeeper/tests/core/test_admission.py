"""Unit tests for the admission ledger.

Stubs verify the returned charge count and the revenue state; mocks
verify how the fee policy is called; the day of the week is injected
directly instead of faking the clock.
"""

from decimal import Decimal
from unittest.mock import Mock, call

import pytest

from gatekeeper.core.admission import AdmissionLedger
from gatekeeper.core.errors import ConfigurationError
from gatekeeper.core.models import Visitor, Weekday
from gatekeeper.core.ports import FeePolicyPort
from gatekeeper.tests.fakes import FakeFeePolicyPort

# ============================================================================
# Test Fixtures
# ============================================================================


@pytest.fixture
def fee_policy() -> FakeFeePolicyPort:
    """Fee policy stub charging 100 per visitor."""
    return FakeFeePolicyPort(default_fee=Decimal("100"))


@pytest.fixture
def ledger(fee_policy: FakeFeePolicyPort) -> AdmissionLedger:
    return AdmissionLedger(fee_policy)


@pytest.fixture
def one_man_two_women() -> list[Visitor]:
    return [
        Visitor(is_male=True, sequence_number=1),
        Visitor(is_male=False, sequence_number=2),
        Visitor(is_male=False, sequence_number=3),
    ]


# ============================================================================
# Baseline rule
# ============================================================================


class TestProcessAdmissions:
    """Women enter free; men are charged."""

    def test_returns_number_of_men(self, ledger: AdmissionLedger) -> None:
        visitors = [
            Visitor(is_male=True),
            Visitor(is_male=False),
            Visitor(is_male=True),
            Visitor(is_male=True),
            Visitor(is_male=False),
        ]

        assert ledger.process_admissions(visitors) == 3

    def test_revenue_starts_at_zero(self, ledger: AdmissionLedger) -> None:
        assert ledger.get_accumulated_revenue() == Decimal("0")

    def test_revenue_counts_only_charged_visitors(
        self, ledger: AdmissionLedger, one_man_two_women: list[Visitor]
    ) -> None:
        ledger.process_admissions(one_man_two_women)

        assert ledger.get_accumulated_revenue() == Decimal("100")

    def test_revenue_is_sum_of_individual_fees(
        self, fee_policy: FakeFeePolicyPort, ledger: AdmissionLedger
    ) -> None:
        fee_policy.set_fee_for_sequence(1, Decimal("80"))
        fee_policy.set_fee_for_sequence(2, Decimal("999"))
        fee_policy.set_fee_for_sequence(3, Decimal("120.50"))
        visitors = [
            Visitor(is_male=True, sequence_number=1),
            Visitor(is_male=False, sequence_number=2),
            Visitor(is_male=True, sequence_number=3),
        ]

        charged = ledger.process_admissions(visitors)

        assert charged == 2
        assert ledger.get_accumulated_revenue() == Decimal("200.50")

    def test_fee_policy_is_never_called_for_women(
        self, fee_policy: FakeFeePolicyPort, ledger: AdmissionLedger
    ) -> None:
        ledger.process_admissions([Visitor(is_male=False), Visitor(is_male=False)])

        assert fee_policy.call_count == 0
        assert ledger.get_accumulated_revenue() == Decimal("0")

    def test_fee_policy_called_in_sequence_order(
        self, fee_policy: FakeFeePolicyPort, ledger: AdmissionLedger
    ) -> None:
        visitors = [
            Visitor(is_male=True, sequence_number=7),
            Visitor(is_male=False, sequence_number=8),
            Visitor(is_male=True, sequence_number=9),
        ]

        ledger.process_admissions(visitors)

        assert [v.sequence_number for v in fee_policy.compute_fee_calls] == [7, 9]

    def test_empty_batch(self, fee_policy: FakeFeePolicyPort, ledger: AdmissionLedger) -> None:
        assert ledger.process_admissions([]) == 0
        assert ledger.get_accumulated_revenue() == Decimal("0")
        assert fee_policy.call_count == 0

    def test_revenue_accumulates_across_batches(
        self, ledger: AdmissionLedger, one_man_two_women: list[Visitor]
    ) -> None:
        ledger.process_admissions(one_man_two_women)
        ledger.process_admissions([Visitor(is_male=True)])

        assert ledger.accumulated_revenue == Decimal("200")

    def test_accepts_any_iterable(self, ledger: AdmissionLedger) -> None:
        visitors = (Visitor(is_male=bool(i % 2)) for i in range(6))

        assert ledger.process_admissions(visitors) == 3

    def test_mock_expects_one_call_per_man(self) -> None:
        """Two men and one woman: the fee policy is asked exactly twice."""
        first = Visitor(is_male=True, sequence_number=1)
        second = Visitor(is_male=True, sequence_number=2)
        woman = Visitor(is_male=False, sequence_number=3)
        fee_policy = Mock(spec=FeePolicyPort)
        fee_policy.compute_fee.return_value = Decimal("100")

        AdmissionLedger(fee_policy).process_admissions([first, second, woman])

        assert fee_policy.compute_fee.call_count == 2
        fee_policy.compute_fee.assert_has_calls([call(first), call(second)])


# ============================================================================
# Ladies' night rule
# ============================================================================


class TestProcessAdmissionsWithDayRule:
    """On Friday women enter free; on other days everybody pays."""

    def test_friday_charges_only_men(
        self, ledger: AdmissionLedger, one_man_two_women: list[Visitor]
    ) -> None:
        charged = ledger.process_admissions_with_day_rule(
            one_man_two_women, Weekday.FRIDAY
        )

        assert charged == 1
        assert ledger.get_accumulated_revenue() == Decimal("100")

    def test_saturday_charges_everybody(
        self, ledger: AdmissionLedger, one_man_two_women: list[Visitor]
    ) -> None:
        charged = ledger.process_admissions_with_day_rule(
            one_man_two_women, Weekday.SATURDAY
        )

        assert charged == 3
        assert ledger.get_accumulated_revenue() == Decimal("300")

    @pytest.mark.parametrize(
        "day", [day for day in Weekday if day is not Weekday.FRIDAY]
    )
    def test_every_other_day_charges_everybody(
        self, fee_policy: FakeFeePolicyPort, day: Weekday, one_man_two_women: list[Visitor]
    ) -> None:
        ledger = AdmissionLedger(fee_policy)

        assert ledger.process_admissions_with_day_rule(one_man_two_women, day) == 3
        assert fee_policy.call_count == 3

    def test_friday_never_prices_women(
        self, fee_policy: FakeFeePolicyPort, ledger: AdmissionLedger, one_man_two_women: list[Visitor]
    ) -> None:
        ledger.process_admissions_with_day_rule(one_man_two_women, Weekday.FRIDAY)

        assert fee_policy.compute_fee_calls == [one_man_two_women[0]]

    def test_day_from_calendar_date(
        self, ledger: AdmissionLedger, one_man_two_women: list[Visitor]
    ) -> None:
        from datetime import date

        friday = Weekday.from_date(date(2015, 8, 7))
        saturday = Weekday.from_date(date(2015, 8, 8))

        assert ledger.process_admissions_with_day_rule(one_man_two_women, friday) == 1
        assert ledger.process_admissions_with_day_rule(one_man_two_women, saturday) == 3

    def test_configurable_free_day(
        self, fee_policy: FakeFeePolicyPort, one_man_two_women: list[Visitor]
    ) -> None:
        ledger = AdmissionLedger(fee_policy, free_day=Weekday.WEDNESDAY)

        assert ledger.process_admissions_with_day_rule(one_man_two_women, Weekday.WEDNESDAY) == 1
        assert ledger.process_admissions_with_day_rule(one_man_two_women, Weekday.FRIDAY) == 3


# ============================================================================
# Errors
# ============================================================================


class TestAdmissionErrors:
    def test_missing_fee_policy_is_configuration_error(self) -> None:
        ledger = AdmissionLedger(None)

        with pytest.raises(ConfigurationError):
            ledger.process_admissions([Visitor(is_male=True)])
        with pytest.raises(ConfigurationError):
            ledger.process_admissions_with_day_rule([Visitor(is_male=True)], Weekday.MONDAY)

    def test_fee_policy_failure_propagates_without_rollback(
        self, fee_policy: FakeFeePolicyPort, ledger: AdmissionLedger
    ) -> None:
        fee_policy.set_fail_after(2, "pricing backend down")
        visitors = [Visitor(is_male=True, sequence_number=i) for i in range(4)]

        with pytest.raises(RuntimeError, match="pricing backend down"):
            ledger.process_admissions(visitors)

        assert ledger.get_accumulated_revenue() == Decimal("200")
        assert fee_policy.call_count == 2
