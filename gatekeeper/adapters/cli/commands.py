"""CLI command implementations for Gatekeeper.

Provides staff-initiated actions through a command-line interface.

This adapter maps CLI commands (admit, revenue, authenticate) to the
AdmissionLedger and a credential validator. It handles CLI-specific
parsing and error reporting; the day of the week is resolved here, at
the boundary, and passed into the core explicitly.
"""

import logging
from collections.abc import Callable
from datetime import date
from typing import Any, Protocol

from gatekeeper.core.admission import AdmissionLedger
from gatekeeper.core.errors import GatekeeperError
from gatekeeper.core.models import Visitor, Weekday

logger = logging.getLogger(__name__)


class Authenticator(Protocol):
    def check_authentication(self, identifier: str, presented_secret: str) -> bool: ...


class CLICommandHandler:
    """Handles CLI commands by delegating to the core components."""

    def __init__(
        self,
        ledger: AdmissionLedger,
        validator: Authenticator,
        today: Callable[[], date] = date.today,
    ):
        """Initialize the CLI command handler.

        Args:
            ledger: Admission ledger for the current session.
            validator: Any credential validator variant.
            today: Clock used only to resolve the ``"today"`` day value.
        """
        self.ledger = ledger
        self.validator = validator
        self.today = today

    def admit(
        self,
        visitors: list[dict[str, Any]],
        day: str | None = None,
    ) -> dict[str, Any]:
        """Admit a batch of visitors via CLI.

        Args:
            visitors: Visitor objects with ``is_male`` and optional
                ``sequence_number``.
            day: Weekday name or ``"today"`` to apply the ladies' night
                rule. If None, the baseline rule applies.

        Returns:
            Dictionary with status, charged count and total revenue.
        """
        try:
            batch = [
                Visitor(
                    is_male=entry["is_male"],
                    sequence_number=entry.get("sequence_number", index),
                )
                for index, entry in enumerate(visitors)
            ]
            weekday = self._resolve_day(day) if day is not None else None
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            return self._admit_error(e)

        try:
            if weekday is None:
                charged = self.ledger.process_admissions(batch)
            else:
                charged = self.ledger.process_admissions_with_day_rule(batch, weekday)
        except GatekeeperError as e:
            return self._admit_error(e)

        result: dict[str, Any] = {
            "status": "success",
            "operation": "admit",
            "admitted": len(batch),
            "charged": charged,
            "revenue": str(self.ledger.get_accumulated_revenue()),
        }
        if weekday is not None:
            result["day"] = weekday.name.lower()
        return result

    def revenue(self) -> dict[str, Any]:
        """Report the revenue accumulated in this session."""
        return {
            "status": "success",
            "operation": "revenue",
            "revenue": str(self.ledger.get_accumulated_revenue()),
        }

    def authenticate(self, identifier: str, secret: str) -> dict[str, Any]:
        """Check a credential via CLI.

        Unknown identifiers and configuration problems are reported as
        error payloads. The secret is never echoed or logged.
        """
        try:
            authenticated = self.validator.check_authentication(identifier, secret)
            return {
                "status": "success",
                "operation": "authenticate",
                "identifier": identifier,
                "authenticated": authenticated,
            }

        except GatekeeperError as e:
            logger.error(f"Failed to authenticate {identifier!r}: {e}")
            return {
                "status": "error",
                "operation": "authenticate",
                "identifier": identifier,
                "message": str(e),
            }

    def _admit_error(self, error: Exception) -> dict[str, Any]:
        logger.error(f"Failed to admit visitors: {error}")
        return {
            "status": "error",
            "operation": "admit",
            "message": str(error),
        }

    def _resolve_day(self, day: str) -> Weekday:
        if not isinstance(day, str):
            raise ValueError(f"day must be a weekday name or 'today', got {day!r}")
        if day.strip().lower() == "today":
            return Weekday.from_date(self.today())
        return Weekday.parse(day)
