"""Scripted sessions through the interactive menu."""
from __future__ import annotations

import io
import unittest
from datetime import date
from typing import Iterable, List

from rich.console import Console

from ewaste.cli import MenuIO, main, run_menu
from ewaste.models import EWasteMonitoringSystem, NotificationSystem


class _ScriptedInput:
    def __init__(self, lines: Iterable[str]) -> None:
        self._lines = iter(lines)
        self.prompts: List[str] = []

    def __call__(self, prompt: str) -> str:
        self.prompts.append(prompt)
        try:
            return next(self._lines)
        except StopIteration as exc:
            raise EOFError from exc


class MenuSessionTest(unittest.TestCase):
    def _run(self, lines: Iterable[str], *, plain: bool = True, today: date = date(2024, 1, 1), width: int = 120):
        buffer = io.StringIO()
        console = Console(file=buffer, width=width, color_system=None, force_terminal=False)
        scripted = _ScriptedInput(lines)
        menu_io = MenuIO(console=console, input_func=scripted, clock=lambda: today, plain=plain)
        registry = EWasteMonitoringSystem(NotificationSystem(echo=menu_io.say))
        code = run_menu(registry, menu_io)
        return code, registry, buffer.getvalue(), scripted

    def test_laptop_scenario_plain_output(self) -> None:
        code, registry, output, _ = self._run(
            ["1", "Laptop", "2015-01-01", "5", "2", "3", "laptop", "2", "4", "5"]
        )

        self.assertEqual(code, 0)
        self.assertIn("Welcome to the E-Waste Monitoring System!", output)
        self.assertIn("Device added successfully.", output)
        self.assertIn("Monitoring Devices as of 2024-01-01:", output)
        self.assertIn("Laptop needs replacement.", output)
        self.assertIn("Laptop has been recycled and is now considered unsafe for use.", output)
        self.assertIn("Laptop has already been recycled and is unsafe to use.", output)
        self.assertIn("Total Devices: 1", output)
        self.assertIn("Recycled Devices: 1", output)
        self.assertIn("Devices in Use: 0", output)
        self.assertTrue(output.rstrip().endswith("Exiting..."))
        self.assertEqual(len(registry), 1)

    def test_bad_dates_are_reprompted(self) -> None:
        _, registry, output, scripted = self._run(
            ["1", "Phone", "2021/01/01", "not a date", "2021-01-01", "2", "5"]
        )

        self.assertEqual(output.count("Invalid date format. Please use yyyy-MM-dd."), 2)
        date_prompts = [p for p in scripted.prompts if p.startswith("Enter purchase date")]
        self.assertEqual(len(date_prompts), 3)
        [device] = registry.devices()
        self.assertEqual(device.purchase_date, date(2021, 1, 1))
        self.assertEqual(device.expected_life, 2)

    def test_non_integer_lifespan_is_reprompted(self) -> None:
        _, registry, output, _ = self._run(["1", "Phone", "2021-01-01", "two", "-1", "5"])

        self.assertIn("Invalid number. Please enter a whole number of years.", output)
        [device] = registry.devices()
        self.assertEqual(device.expected_life, -1)

    def test_unknown_choices_are_informational(self) -> None:
        code, _, output, _ = self._run(["9", "abc", "", "5"])

        self.assertEqual(code, 0)
        self.assertEqual(output.count("Invalid Input"), 3)
        self.assertEqual(output.count("Please Try Again"), 3)
        self.assertEqual(output.count("Choose an option:"), 4)

    def test_recycle_messages(self) -> None:
        _, _, output, _ = self._run(
            ["3", "Ghost", "1", "TV", "2010-01-01", "8", "3", "tv", "3", "TV", "5"]
        )

        self.assertIn("Device Ghost not found.", output)
        self.assertIn("TV has been recycled and is now considered unsafe for use.", output)
        self.assertIn("Device TV has already been recycled.", output)

    def test_plain_lines_are_not_wrapped_at_console_width(self) -> None:
        name = "x" * 100
        _, _, output, _ = self._run(
            ["3", name, "1", name, "2010-01-01", "1", "2", "3", name, "5"],
            width=80,
        )
        lines = output.splitlines()

        self.assertIn(f"Device {name} not found.", lines)
        self.assertIn(f"{name} needs replacement.", lines)
        self.assertIn(f"{name} has been recycled and is now considered unsafe for use.", lines)

    def test_end_of_input_exits_cleanly(self) -> None:
        code, _, output, _ = self._run(["1", "Phone"])

        self.assertEqual(code, 0)
        self.assertTrue(output.rstrip().endswith("Exiting..."))

    def test_rich_tables(self) -> None:
        _, _, output, _ = self._run(
            ["1", "Old [TV]", "2005-06-01", "10", "1", "Phone", "2023-06-01", "3", "2", "4", "5"],
            plain=False,
        )

        self.assertIn("Device Lifecycle", output)
        self.assertIn("Old [TV]", output)
        self.assertIn("Needs replacement", output)
        self.assertIn("Safe", output)
        self.assertIn("Device Statistics", output)
        self.assertIn("Devices in Use", output)


class MainArgumentsTest(unittest.TestCase):
    def test_unknown_log_level_is_a_usage_error(self) -> None:
        with self.assertRaises(SystemExit) as ctx:
            main(["--log-level", "chatty"])
        self.assertEqual(ctx.exception.code, 2)


if __name__ == "__main__":
    unittest.main()
