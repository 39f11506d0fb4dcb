from __future__ import annotations

from enum import Enum
from pathlib import Path

import yaml
from expandvars import expandvars
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from tinyunit.errors import ConfigError
from tinyunit.registry import DEFAULT_MODULE
from tinyunit.runner import ELAPSED_TIME_PRECISION


class ReporterType(str, Enum):
    TEXT = "text"
    JSON = "json"
    JUNIT = "junit"
    HTML = "html"


DEFAULT_FILENAMES = {
    ReporterType.JSON: "results.json",
    ReporterType.JUNIT: "junit.xml",
    ReporterType.HTML: "report.html",
}


def _expand(value: str) -> str:
    """Expand ${VAR} references; a missing variable without default is an error."""
    try:
        return expandvars(value, nounset=True)
    except Exception as e:
        raise ValueError(f"unresolved environment variable in '{value}': {e}") from e


class ReporterConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    type: ReporterType
    path: str | None = None

    @field_validator("path")
    @classmethod
    def expand_path(cls, v: str | None) -> str | None:
        return _expand(v) if v is not None else None


class HarnessConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    default_module: str = DEFAULT_MODULE
    elapsed_precision: int = Field(default=ELAPSED_TIME_PRECISION, ge=0, le=9)
    deferred: bool = False
    output_dir: str = "tinyunit-results"
    reporters: list[ReporterConfig] = [ReporterConfig(type=ReporterType.TEXT)]

    @field_validator("default_module")
    @classmethod
    def module_must_not_be_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("default_module must not be empty")
        return v

    @field_validator("output_dir")
    @classmethod
    def expand_output_dir(cls, v: str) -> str:
        return _expand(v)

    @field_validator("reporters", mode="before")
    @classmethod
    def normalize_reporters(cls, v: list) -> list:
        result = []
        for item in v:
            if isinstance(item, str):
                result.append({"type": item})
            else:
                result.append(item)
        return result

    @model_validator(mode="after")
    def single_reporter_per_type(self) -> "HarnessConfig":
        seen = [r.type for r in self.reporters]
        duplicates = sorted({t.value for t in seen if seen.count(t) > 1})
        if duplicates:
            raise ValueError(f"duplicate reporter types: {', '.join(duplicates)}")
        return self

    def reporter_path(self, reporter: ReporterConfig) -> Path | None:
        """Output file for a file reporter, or None for the terminal reporter."""
        if reporter.type == ReporterType.TEXT:
            return None
        if reporter.path is not None:
            return Path(reporter.path)
        return Path(self.output_dir) / DEFAULT_FILENAMES[reporter.type]


def load_config(path: Path) -> HarnessConfig:
    """Load and validate a harness config from a YAML file."""
    config_dir = path.parent.resolve()

    try:
        with open(path) as f:
            raw = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(str(path), str(e)) from e

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ValueError(f"config root must be a mapping, got {type(raw).__name__}")

    config = HarnessConfig(**raw)

    # Resolve relative output paths relative to config file location
    output_dir = Path(config.output_dir)
    if not output_dir.is_absolute():
        config.output_dir = str((config_dir / output_dir).resolve())
    for reporter in config.reporters:
        if reporter.path is not None and not Path(reporter.path).is_absolute():
            reporter.path = str((config_dir / reporter.path).resolve())

    return config
