from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple, Any


class Outcome(str, Enum):
    PASS = "pass"
    FAIL = "fail"
    SKIP = "skip"

    @classmethod
    def parse(cls, value) -> "Outcome":
        if isinstance(value, cls):
            return value
        return cls(str(value).strip().lower())


@dataclass(frozen=True)
class TestCase:
    name: str
    outcome: Outcome
    detail: Optional[str] = None
    sequence: int = 0

    __test__ = False  # not a pytest class


@dataclass(frozen=True)
class RunSummary:
    counts: Mapping[Outcome, int] = field(default_factory=dict)
    skipped: Tuple[Tuple[str, str], ...] = ()
    failed: Tuple[Tuple[str, str], ...] = ()

    def __post_init__(self):
        # always all three outcomes, exposed read-only
        counts = {o: int(self.counts.get(o, 0)) for o in Outcome}
        object.__setattr__(self, "counts", MappingProxyType(counts))

    def __hash__(self):
        return hash((tuple(self.counts.items()), self.skipped, self.failed))

    @property
    def total(self) -> int: return sum(self.counts.values())
    @property
    def passed(self) -> int: return self.counts[Outcome.PASS]
    @property
    def is_clean(self) -> bool: return self.counts[Outcome.FAIL] == 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "counts": {o.value: n for o, n in self.counts.items()},
            "total": self.total,
            "clean": self.is_clean,
            "skipped": [{"name": n, "reason": r} for n, r in self.skipped],
            "failed": [{"name": n, "reason": r} for n, r in self.failed],
        }
