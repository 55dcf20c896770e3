"""E-waste monitor interactive command-line interface."""
from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass, field
from datetime import date
from typing import Callable, Dict, List, Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from ewaste.dates import DATE_PATTERN, parse_date
from ewaste.models import (
	DeviceStatus,
	EDevice,
	EWasteMonitoringSystem,
	NotificationSystem,
	RecycleOutcome,
)

logger = logging.getLogger(__name__)

MENU_OPTIONS = (
	"Add Device",
	"Monitor Devices",
	"Recycle Device",
	"Show Statistics",
	"Exit",
)
EXIT_CHOICE = len(MENU_OPTIONS)

_STATUS_TEXT = {
	DeviceStatus.RECYCLED: "has already been recycled and is unsafe to use.",
	DeviceStatus.NEEDS_REPLACEMENT: "needs replacement.",
	DeviceStatus.SAFE: "is within safe usage period.",
}
_STATUS_LABEL = {
	DeviceStatus.RECYCLED: "Recycled (unsafe)",
	DeviceStatus.NEEDS_REPLACEMENT: "Needs replacement",
	DeviceStatus.SAFE: "Safe",
}


@dataclass
class MenuIO:
	"""Terminal collaborators for a menu session.

	``input_func`` and ``clock`` are injectable so sessions can be scripted.
	"""

	console: Console = field(default_factory=Console)
	input_func: Optional[Callable[[str], str]] = None
	clock: Callable[[], date] = date.today
	plain: bool = False

	def say(self, text: str = "") -> None:
		self.console.print(text, markup=False, highlight=False, soft_wrap=True)

	def ask(self, prompt: str) -> str:
		if self.input_func is not None:
			return self.input_func(prompt)
		return self.console.input(prompt, markup=False)


def _prompt_date(io: MenuIO) -> date:
	while True:
		raw = io.ask(f"Enter purchase date ({DATE_PATTERN}): ")
		try:
			return parse_date(raw)
		except ValueError as exc:
			logger.debug("Rejected purchase date: %s", exc)
			io.say(f"Invalid date format. Please use {DATE_PATTERN}.")


def _prompt_years(io: MenuIO) -> int:
	while True:
		raw = io.ask("Enter expected lifespan (in years): ")
		try:
			return int(raw.strip())
		except ValueError:
			io.say("Invalid number. Please enter a whole number of years.")


def _cmd_add(registry: EWasteMonitoringSystem, io: MenuIO) -> None:
	name = io.ask("Enter device name: ")
	purchase_date = _prompt_date(io)
	lifespan = _prompt_years(io)
	registry.add_device(EDevice(name, purchase_date, lifespan))
	io.say("Device added successfully.")


def _cmd_monitor(registry: EWasteMonitoringSystem, io: MenuIO) -> None:
	current_date = io.clock()
	reports = registry.monitor_devices(current_date)
	io.say(f"Monitoring Devices as of {current_date.isoformat()}:")
	if io.plain:
		for report in reports:
			io.say(f"{report.device.name} {_STATUS_TEXT[report.status]}")
		return
	table = Table(title="Device Lifecycle", show_lines=False)
	for column in ("name", "purchased", "expected life", "status"):
		table.add_column(column.upper())
	for report in reports:
		table.add_row(
			escape(report.device.name),
			report.device.purchase_date.isoformat(),
			f"{report.device.expected_life} years",
			_STATUS_LABEL[report.status],
		)
	io.console.print(table)


def _cmd_recycle(registry: EWasteMonitoringSystem, io: MenuIO) -> None:
	name = io.ask("Enter device name to recycle: ")
	outcome = registry.recycle_device(name)
	if outcome is RecycleOutcome.ALREADY_RECYCLED:
		io.say(f"Device {name} has already been recycled.")
	elif outcome is RecycleOutcome.NOT_FOUND:
		io.say(f"Device {name} not found.")


def _cmd_statistics(registry: EWasteMonitoringSystem, io: MenuIO) -> None:
	stats = registry.show_statistics()
	rows = (
		("Total Devices", stats.total),
		("Recycled Devices", stats.recycled),
		("Devices in Use", stats.in_use),
	)
	if io.plain:
		for label, value in rows:
			io.say(f"{label}: {value}")
		return
	table = Table(title="Device Statistics", show_header=False)
	table.add_column("metric")
	table.add_column("count", justify="right")
	for label, value in rows:
		table.add_row(label, str(value))
	io.console.print(table)


_HANDLERS: Dict[int, Callable[[EWasteMonitoringSystem, MenuIO], None]] = {
	1: _cmd_add,
	2: _cmd_monitor,
	3: _cmd_recycle,
	4: _cmd_statistics,
}


def _show_menu(io: MenuIO) -> None:
	io.say()
	io.say("Choose an option:")
	for number, label in enumerate(MENU_OPTIONS, start=1):
		io.say(f"{number}. {label}")


def _read_choice(io: MenuIO) -> Optional[int]:
	raw = io.ask("")
	try:
		return int(raw.strip())
	except ValueError:
		return None


def run_menu(registry: EWasteMonitoringSystem, io: MenuIO) -> int:
	"""Drive the menu until the operator exits or input ends."""
	io.say("Welcome to the E-Waste Monitoring System!")
	try:
		while True:
			_show_menu(io)
			choice = _read_choice(io)
			if choice == EXIT_CHOICE:
				break
			handler = _HANDLERS.get(choice) if choice is not None else None
			if handler is None:
				io.say("Invalid Input")
				io.say("Please Try Again")
				continue
			handler(registry, io)
	except (EOFError, KeyboardInterrupt):
		logger.debug("Input closed, leaving menu")
	io.say("Exiting...")
	return 0


def _configure_logging(level_name: str) -> None:
	level = logging.getLevelName(level_name.upper())
	if not isinstance(level, int):
		raise ValueError(f"unknown log level: {level_name}")
	logging.basicConfig(
		level=level,
		format="%(message)s",
		handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
		force=True,
	)


def _build_parser() -> argparse.ArgumentParser:
	parser = argparse.ArgumentParser(description="E-waste device lifecycle monitor")
	parser.add_argument("--plain", action="store_true", help="Print plain text instead of tables")
	parser.add_argument("--log-level", default="WARNING", help="Logging level (DEBUG, INFO, WARNING, ...)")
	return parser


def main(argv: Optional[List[str]] = None) -> int:
	parser = _build_parser()
	args = parser.parse_args(argv)
	try:
		_configure_logging(args.log_level)
	except ValueError as exc:
		parser.error(str(exc))

	console = Console()
	io = MenuIO(console=console, plain=args.plain)
	registry = EWasteMonitoringSystem(NotificationSystem(echo=io.say))
	return run_menu(registry, io)


if __name__ == "__main__":
	sys.exit(main())
