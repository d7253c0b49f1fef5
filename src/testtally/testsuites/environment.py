import importlib.util
import sys
import tempfile
from ..runners.runner import Check, skip, skip_unless_env
from ..config import AppConfig

def python_version(cfg: AppConfig) -> None:
    assert sys.version_info >= (3, 9), f"Python 3.9+ required, found {sys.version.split()[0]}"

def plotting_backend(cfg: AppConfig) -> None:
    if importlib.util.find_spec("matplotlib") is None:
        skip("matplotlib not installed; charts disabled")

def scratch_dir_writable(cfg: AppConfig) -> None:
    skip_unless_env(cfg.long_tests_env, f"long checks run only when {cfg.long_tests_env} is set")
    with tempfile.TemporaryDirectory() as d:
        with open(f"{d}/probe.txt", "w") as f:
            f.write("ok")

def discover():
    return [
        Check("env.python_version", python_version),
        Check("env.plotting_backend", plotting_backend),
        Check("env.scratch_dir_writable", scratch_dir_writable),
    ]
