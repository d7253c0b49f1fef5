from ..model import Outcome
from ..runners.runner import RunResult
from ..utils.plots import bar_plot

class ChartReporter:
    def __init__(self, path: str): self.path = path
    def emit(self, result: RunResult) -> None:
        counts = result.summary.counts
        bar_plot([o.value for o in Outcome], [counts[o] for o in Outcome],
                 f"{result.suite}: outcomes", "Outcome", "Cases", self.path,
                 colors=["tab:green", "tab:red", "tab:olive"])
