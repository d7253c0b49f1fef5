from pydantic import BaseModel, Field, field_validator
from typing import Optional, List, Literal
import yaml, pathlib

LogLevel = Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]

class AppConfig(BaseModel):
    log_level: LogLevel = Field("INFO", description="Logging level for the testtally logger")
    output_dir: str = Field("artifacts", description="Directory for JSON summaries and charts")
    skip: List[str] = Field(default_factory=list, description="Check ids recorded as skipped without running")
    long_tests_env: str = Field("TESTTALLY_LONG", description="Env var that opts in to long-running checks")

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, v):
        return v.upper() if isinstance(v, str) else v

def load_config(path: Optional[str] = None, **overrides) -> AppConfig:
    data = {}
    if path is not None and pathlib.Path(path).exists():
        data = yaml.safe_load(pathlib.Path(path).read_text()) or {}
    if isinstance(data, dict):
        data.update({k: v for k, v in overrides.items() if v is not None})
    return AppConfig.model_validate(data)
