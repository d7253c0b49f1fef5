from typing import Optional
from rich.console import Console
from ..model import Outcome
from ..runners.runner import RunResult

STYLES = {Outcome.PASS: "green", Outcome.FAIL: "bold red", Outcome.SKIP: "yellow"}

class ConsoleReporter:
    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console(highlight=False)

    def emit(self, result: RunResult) -> None:
        out = self.console
        out.print(f"Suite: {result.suite}")
        for c in result.cases:
            style = STYLES[c.outcome]
            out.print(f" - {c.name}: [{style}]{c.outcome.value.upper()}[/{style}]")
        s = result.summary
        if s.skipped:
            out.print("Skipped:")
            for name, reason in s.skipped:
                out.print(f"  {name}: {reason}", markup=False)
        if s.failed:
            out.print("Failed:")
            for name, reason in s.failed:
                out.print(f"  {name}: {reason}", markup=False)
        out.print(f"{result.passed} passed, {result.failed} failed, {result.skipped} skipped")
