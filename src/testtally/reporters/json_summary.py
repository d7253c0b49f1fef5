from ..runners.runner import RunResult
from ..utils.artifacts import new_run_dir, write_context

class JSONReporter:
    """Writes summary.json into a fresh timestamped directory per run."""
    def __init__(self, out_dir: str = "artifacts"):
        self.out_dir = out_dir
        self.last_path = None

    def emit(self, result: RunResult) -> None:
        outdir = new_run_dir(result.suite, self.out_dir)
        data = {"suite": result.suite, **result.summary.to_dict()}
        self.last_path = write_context(outdir, data, "summary.json")
