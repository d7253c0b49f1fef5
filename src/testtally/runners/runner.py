from dataclasses import dataclass
from typing import List, Callable, Optional, Tuple
import importlib
import logging
import os
from ..config import AppConfig
from ..model import Outcome, RunSummary, TestCase
from ..reporter import Reporter

log = logging.getLogger(__name__)

TRUTHY = {"1", "true", "yes", "on"}


class SkipCase(Exception):
    """Raised inside a check to record it as skipped."""
    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


def skip(reason: str) -> None:
    raise SkipCase(reason)


def env_flag(var: str) -> bool:
    return os.environ.get(var, "").strip().lower() in TRUTHY


def skip_unless_env(var: str, reason: Optional[str] = None) -> None:
    """Skip unless ``var`` is set to a truthy value, e.g. for long-running checks."""
    if not env_flag(var):
        skip(reason or f"{var} not set")


def skip_if_env(var: str, reason: Optional[str] = None) -> None:
    """Skip when ``var`` is truthy, e.g. on a CI box without network access."""
    if env_flag(var):
        skip(reason or f"{var} is set")


@dataclass
class RunResult:
    suite: str
    cases: Tuple[TestCase, ...]
    summary: RunSummary
    @property
    def passed(self) -> int: return self.summary.counts[Outcome.PASS]
    @property
    def failed(self) -> int: return self.summary.counts[Outcome.FAIL]
    @property
    def skipped(self) -> int: return self.summary.counts[Outcome.SKIP]


class Check:
    def __init__(self, id: str, func: Callable[[AppConfig], None]):
        self.id = id
        self.func = func
    def run(self, cfg: AppConfig):
        return self.func(cfg)


def _failure_message(e: Exception) -> str:
    if isinstance(e, AssertionError):
        return str(e) or "assertion failed"
    return f"Error: {e!r}"


class TestRunner:
    __test__ = False

    def __init__(self, cfg: Optional[AppConfig] = None):
        self.cfg = cfg or AppConfig()

    def _load_suite_module(self, suite: str):
        name = suite if "." in suite else f"testtally.testsuites.{suite}"
        return importlib.import_module(name)

    def discover(self, suite: str) -> List[Check]:
        mod = self._load_suite_module(suite)
        return getattr(mod, "discover")()

    def run(self, suite: str) -> RunResult:
        return self.run_checks(suite, self.discover(suite))

    def run_checks(self, suite: str, checks: List[Check]) -> RunResult:
        reporter = Reporter(suite)
        disabled = set(self.cfg.skip)
        for chk in checks:
            if chk.id in disabled:
                reporter.record(chk.id, Outcome.SKIP, "disabled in config")
                continue
            try:
                chk.run(self.cfg)
            except SkipCase as s:
                reporter.record(chk.id, Outcome.SKIP, s.reason or "skipped")
            except Exception as e:
                log.debug("%s failed", chk.id, exc_info=True)
                reporter.record(chk.id, Outcome.FAIL, _failure_message(e))
            else:
                reporter.record(chk.id, Outcome.PASS)
        summary = reporter.summarize()
        return RunResult(suite=suite, cases=reporter.cases, summary=summary)
