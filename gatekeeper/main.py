"""Composition root for the Gatekeeper system.

This module is the ONLY location that imports both core domain logic
and concrete adapter implementations. All wiring of dependencies
happens here.

Module Structure:
- Configuration loading via config module
- Adapter instantiation
- Core component initialization
- Interactive CLI loop
"""

import json
import logging
import sys
from typing import Any

from gatekeeper.adapters.cli.commands import CLICommandHandler
from gatekeeper.adapters.credentials import ConfiguredCredentialValidator
from gatekeeper.adapters.fees.flat import FlatFeePolicy
from gatekeeper.config import Settings, load_settings
from gatekeeper.core.admission import AdmissionLedger


def _run_cli_interactive(cli_handler: CLICommandHandler) -> None:
    """Run interactive CLI loop.

    Provides a REPL-like interface for admission and credential commands.

    Args:
        cli_handler: CLICommandHandler instance for executing commands.
    """
    logger = logging.getLogger(__name__)
    logger.info("Starting interactive CLI. Type 'help' for available commands or 'exit' to quit.")

    while True:
        try:
            command_line = input("gatekeeper> ").strip()

            if not command_line:
                continue

            if command_line.lower() == "exit":
                logger.info("Exiting CLI")
                break

            if command_line.lower() == "help":
                _print_cli_help()
                continue

            # Parse command and arguments
            parts = command_line.split(maxsplit=1)
            command = parts[0].lower()
            args_str = parts[1] if len(parts) > 1 else ""

            try:
                args = json.loads(args_str) if args_str else {}
            except json.JSONDecodeError:
                logger.error("Invalid JSON arguments. Use 'help' for command syntax.")
                continue

            try:
                result = _execute_cli_command(cli_handler, command, args)
                print(json.dumps(result, indent=2, default=str))
            except Exception as e:
                logger.error(f"Command execution error: {e}", exc_info=True)
                print(json.dumps({
                    "status": "error",
                    "message": str(e)
                }, indent=2))

        except EOFError:
            logger.info("EOF received, exiting CLI")
            break
        except KeyboardInterrupt:
            logger.info("Interrupted by user")
            continue


def _execute_cli_command(
    cli_handler: CLICommandHandler,
    command: str,
    args: dict[str, Any],
) -> dict[str, Any]:
    """Execute a CLI command.

    Args:
        cli_handler: CLICommandHandler instance.
        command: Command name.
        args: Command arguments.

    Returns:
        Command result dictionary.

    Raises:
        ValueError: If command is not recognized or a required
            parameter is missing.
    """
    if not isinstance(args, dict):
        raise ValueError("Arguments must be a JSON object")

    if command == "admit":
        if "visitors" not in args:
            raise ValueError("Missing required parameter: visitors")
        return cli_handler.admit(
            visitors=args["visitors"],
            day=args.get("day"),
        )

    elif command == "revenue":
        return cli_handler.revenue()

    elif command == "authenticate":
        for name in ("identifier", "secret"):
            if name not in args:
                raise ValueError(f"Missing required parameter: {name}")
        return cli_handler.authenticate(
            identifier=args["identifier"],
            secret=args["secret"],
        )

    else:
        raise ValueError(f"Unknown command: {command}. Use 'help' for available commands.")


def _print_cli_help() -> None:
    """Print CLI help message."""
    help_text = """
Available Commands (JSON format):

  admit
    Admit a batch of visitors and charge those who pay.
    Required: visitors (list of {"is_male": bool, "sequence_number": int})
    Optional: day (weekday name or "today") to apply the ladies' night rule

    Example: admit {"visitors": [{"is_male": true}, {"is_male": false}], "day": "friday"}

  revenue
    Show the revenue accumulated in this session.

    Example: revenue

  authenticate
    Check a secret against the stored one for an identifier.
    Required: identifier, secret

    Example: authenticate {"identifier": "chris", "secret": "hunter2"}

  help
    Show this help message.

  exit
    Exit the CLI.

Note: All commands accept arguments as a single JSON object.
Provide the JSON after the command name on the same line.
    """
    print(help_text)


def configure_logging(log_level: str, log_format: str) -> None:
    """Configure application logging.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_format: Log format (json, text).
    """
    level = getattr(logging, log_level, logging.INFO)

    if log_format == "json":
        format_str = '{"time": "%(asctime)s", "level": "%(levelname)s", "message": "%(message)s"}'
    else:
        format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=level,
        format=format_str,
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
    )


def build_cli_handler(settings: Settings) -> CLICommandHandler:
    """Instantiate adapters and core components and wire them together."""
    logger = logging.getLogger(__name__)

    fee_policy = FlatFeePolicy(settings.admission_fee)
    logger.info(f"Fee policy: flat {settings.admission_fee}")

    ledger = AdmissionLedger(fee_policy, free_day=settings.free_weekday)
    logger.info(f"Admission ledger initialized, free day: {settings.free_day}")

    validator = ConfiguredCredentialValidator(settings)
    logger.info(
        f"Credential validator initialized: {len(settings.credentials)} record(s), "
        f"digest {settings.digest_algorithm}"
    )

    return CLICommandHandler(ledger, validator)


def bootstrap() -> None:
    """Load configuration, wire adapters, and start the interactive CLI.

    This is the composition root: the single place where all components
    are instantiated and wired together.
    """
    settings = load_settings()

    configure_logging(settings.log_level, settings.log_format)
    logger = logging.getLogger(__name__)
    logger.info("Loading Gatekeeper...")

    cli_handler = build_cli_handler(settings)
    _run_cli_interactive(cli_handler)


def main() -> None:
    """Application entry point.

    Exit codes:
        0: Successful shutdown
        1: Fatal bootstrap or runtime error
        130: Interrupted by user (SIGINT/KeyboardInterrupt)
    """
    logger = logging.getLogger(__name__)
    try:
        bootstrap()
    except KeyboardInterrupt:
        logger.warning("Shutdown requested by user (SIGINT)")
        sys.exit(130)
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
