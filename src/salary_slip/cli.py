"""Salary slip command line interface.

Usage:
    python -m salary_slip report employee.json
    python -m salary_slip net employee.json --danger-zone Kandahar
    cat employee.json | python -m salary_slip report -
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Callable

from pydantic import ValidationError

from salary_slip.calculators.processor import SalarySlipProcessor
from salary_slip.config import Settings, get_settings
from salary_slip.exceptions import SalarySlipError
from salary_slip.schemas import EmployeeRecord
from salary_slip.zones.static import StaticZoneService

logger = logging.getLogger(__name__)


def read_record(source: str) -> dict[str, Any]:
    """Read a JSON employee record from a file path, or stdin for '-'."""
    if source == "-":
        return json.load(sys.stdin)
    return json.loads(Path(source).read_text(encoding="utf-8"))


class SalarySlipCli:
    """Salary slip command line interface."""

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()
        self.parser = self._build_parser()

    def _build_parser(self) -> argparse.ArgumentParser:
        """Build argument parser."""
        parser = argparse.ArgumentParser(
            prog="salary-slip",
            description="Compute net salary and print salary slips",
        )
        parser.add_argument(
            "--version",
            action="version",
            version=f"%(prog)s {self.settings.engine_version}",
        )
        subparsers = parser.add_subparsers(dest="command", help="Commands")

        for name, help_text in (
            ("report", "Print the full salary slip for an employee"),
            ("net", "Print only the net salary for an employee"),
        ):
            sub = subparsers.add_parser(name, help=help_text)
            sub.add_argument(
                "record",
                help="Path to an employee JSON record, or '-' for stdin",
            )
            sub.add_argument(
                "--danger-zone",
                action="append",
                default=[],
                metavar="STATION",
                help="Duty station to treat as a danger zone (repeatable)",
            )

        return parser

    def run(self, args: list[str] | None = None) -> int:
        """Run the CLI with given arguments."""
        parsed = self.parser.parse_args(args)

        if not parsed.command:
            self.parser.print_help()
            return 1

        handlers: dict[str, Callable[[argparse.Namespace], int]] = {
            "report": self._cmd_report,
            "net": self._cmd_net,
        }

        try:
            return handlers[parsed.command](parsed)
        except (OSError, json.JSONDecodeError) as e:
            print(f"ERROR: cannot read record: {e}", file=sys.stderr)
            return 1
        except ValidationError as e:
            print(f"ERROR: invalid employee record:\n{e}", file=sys.stderr)
            return 1
        except SalarySlipError as e:
            print(f"ERROR: {e}", file=sys.stderr)
            return 1

    def _build_processor(self, args: argparse.Namespace) -> SalarySlipProcessor:
        zones = set(self.settings.danger_zones) | set(args.danger_zone)
        logger.debug("Configured danger zones: %s", sorted(zones))
        return SalarySlipProcessor(zone_service=StaticZoneService(zones))

    def _load_employee(self, args: argparse.Namespace):
        return EmployeeRecord.model_validate(read_record(args.record)).to_employee()

    def _cmd_report(self, args: argparse.Namespace) -> int:
        """Print the salary slip."""
        employee = self._load_employee(args)
        print(self._build_processor(args).process(employee))
        return 0

    def _cmd_net(self, args: argparse.Namespace) -> int:
        """Print the net salary."""
        employee = self._load_employee(args)
        print(self._build_processor(args).calculate_net_salary(employee))
        return 0


def main(args: list[str] | None = None) -> int:
    """CLI entry point."""
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    cli = SalarySlipCli(settings)
    return cli.run(args)


if __name__ == "__main__":
    sys.exit(main())
