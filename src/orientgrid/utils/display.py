"""
Console output for placement runs: a running tally of placement outcomes,
section and key/value tables, and verbosity-gated status lines.
"""

import time
from datetime import datetime
from typing import Any, Mapping

from orientgrid.core.grid import ErrorCode

OUTCOME_LABELS = {
    ErrorCode.OK: "placed",
    ErrorCode.OUT_OF_BOUNDS: "out-of-bounds",
    ErrorCode.OVERLAP: "overlap",
}

STATUS_ICONS = {
    "info": "ℹ️",
    "success": "✅",
    "warning": "⚠️",
    "error": "❌",
    "processing": "🔄",
}


class PlacementProgress:
    """Running tally of placement outcomes, redrawn on one console line."""

    def __init__(self, total_attempts: int):
        self.total_attempts = total_attempts
        self.counts = {code: 0 for code in OUTCOME_LABELS}
        self.start_time = time.time()

    @property
    def attempts_done(self) -> int:
        return sum(self.counts.values())

    @property
    def rejected(self) -> int:
        return self.attempts_done - self.counts[ErrorCode.OK]

    def render(self) -> str:
        tally = " | ".join(f"{label} {self.counts[code]}" for code, label in OUTCOME_LABELS.items())
        return f"🧱 Progress: {self.attempts_done}/{self.total_attempts} attempts | {tally}"

    def record(self, outcome: ErrorCode) -> None:
        """Count one attempt outcome and redraw the tally."""
        self.counts[outcome] += 1
        print("\r" + self.render(), end="", flush=True)

    def finish(self) -> None:
        elapsed = time.time() - self.start_time
        print(f"\n✅ {self.counts[ErrorCode.OK]} placed, {self.rejected} rejected in {elapsed:.2f}s")


class StatusDisplay:
    """Headers, sections and tables for CLI output."""

    @staticmethod
    def print_header(title: str, width: int = 80):
        print("\n" + "=" * width)
        print(f"{title:^{width}}")
        print("=" * width)

    @staticmethod
    def print_section(title: str, width: int = 60):
        print(f"\n📋 {title}")
        print("-" * width)

    @staticmethod
    def print_fields(fields: Mapping[str, Any], title: str):
        """Print ``fields`` as an aligned key/value table under a section header."""
        StatusDisplay.print_section(title)
        for key, value in fields.items():
            if isinstance(value, float):
                value = f"{value:.3f}"
            print(f"  {key:<20} : {value}")

    @staticmethod
    def print_outcomes(counts: Mapping[ErrorCode, int], title: str = "Placement Outcomes"):
        """Print each outcome's count and its share of all attempts."""
        total = sum(counts.values())
        StatusDisplay.print_section(title)
        for code, label in OUTCOME_LABELS.items():
            count = counts.get(code, 0)
            share = count / total if total else 0.0
            print(f"  {label:<20} : {count:>6}  ({share:.1%})")

    @staticmethod
    def print_status(message: str, status: str = "info"):
        icon = STATUS_ICONS.get(status, STATUS_ICONS["info"])
        print(f"{icon} [{datetime.now().strftime('%H:%M:%S')}] {message}")


class LiveLogger:
    """Status lines that are shown only in verbose mode, except errors."""

    def __init__(self, verbose: bool = True):
        self.verbose = verbose

    def _emit(self, message: str, status: str):
        if self.verbose:
            StatusDisplay.print_status(message, status)

    def log_action(self, action_name: str):
        self._emit(f"{action_name}...", "processing")

    def log_result(self, message: str):
        self._emit(message, "success")

    def log_info(self, message: str):
        self._emit(message, "info")

    def log_warning(self, message: str):
        self._emit(message, "warning")

    def log_error(self, message: str):
        StatusDisplay.print_status(message, "error")

