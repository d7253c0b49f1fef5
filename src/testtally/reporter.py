"""Run reporter: collects test-case outcomes and summarizes them."""
import logging
from typing import Iterable, List, Optional, Set, Tuple

from .errors import InvalidCase, RunFinalized
from .model import Outcome, RunSummary, TestCase

log = logging.getLogger(__name__)


class Reporter:
    """Accumulates outcomes for one run.

    A reporter starts out recording; the first call to :meth:`summarize`
    finalizes it and later :meth:`record` calls raise :class:`RunFinalized`.
    """

    def __init__(self, name: Optional[str] = None):
        self.name = name
        self._cases: List[TestCase] = []
        self._names: Set[str] = set()
        self._next_seq = 1
        self._summary: Optional[RunSummary] = None

    @property
    def finalized(self) -> bool:
        return self._summary is not None

    @property
    def cases(self) -> Tuple[TestCase, ...]:
        return tuple(self._cases)

    def record(self, name: str, outcome, detail: Optional[str] = None) -> TestCase:
        if self.finalized:
            raise RunFinalized(f"{self.name or 'run'} already summarized; cannot record {name!r}")
        if not isinstance(name, str) or not name.strip():
            raise InvalidCase(f"test case name must be a non-blank string, got {name!r}")
        if name in self._names:
            raise InvalidCase(f"{name}: already recorded in this run")
        if detail is not None and not isinstance(detail, str):
            raise InvalidCase(f"{name}: detail must be a string, got {type(detail).__name__}")
        try:
            kind = Outcome.parse(outcome)
        except ValueError:
            raise InvalidCase(f"{name}: unknown outcome {outcome!r}") from None
        if kind is Outcome.PASS:
            if detail:
                raise InvalidCase(f"{name}: a passing case takes no detail, got {detail!r}")
            detail = None
        elif not detail:
            raise InvalidCase(f"{name}: a {kind.value} outcome needs a reason")

        case = TestCase(name=name, outcome=kind, detail=detail, sequence=self._next_seq)
        self._cases.append(case)
        self._names.add(name)
        self._next_seq += 1
        log.debug("#%d %s: %s", case.sequence, name, kind.value)
        return case

    def is_clean(self) -> bool:
        return not any(c.outcome is Outcome.FAIL for c in self._cases)

    def summarize(self) -> RunSummary:
        if self._summary is not None:
            return self._summary
        counts = {o: 0 for o in Outcome}
        skipped, failed = [], []
        for c in self._cases:
            counts[c.outcome] += 1
            if c.outcome is Outcome.SKIP:
                skipped.append((c.name, c.detail))
            elif c.outcome is Outcome.FAIL:
                failed.append((c.name, c.detail))
        self._summary = RunSummary(counts=counts, skipped=tuple(skipped), failed=tuple(failed))
        log.info("%s: %d passed, %d failed, %d skipped",
                 self.name or "run", counts[Outcome.PASS], counts[Outcome.FAIL], counts[Outcome.SKIP])
        return self._summary


def merge_cases(*case_lists: Iterable[TestCase], name: Optional[str] = None) -> Reporter:
    """Replay cases from independent worker reporters into a fresh one.

    Cases are ordered by their original sequence number, ties broken by
    worker position, and renumbered from 1 in the returned reporter.
    Names must be unique across workers; a collision raises
    :class:`InvalidCase`.
    """
    ordered = sorted(
        ((c.sequence, i, c) for i, cases in enumerate(case_lists) for c in cases),
        key=lambda t: (t[0], t[1]),
    )
    merged = Reporter(name)
    for _, _, c in ordered:
        merged.record(c.name, c.outcome, c.detail)
    return merged
