import codecs
from pathlib import Path
from typing import Optional

import yaml

from SequenceAnalyzer.errors import ConfigurationError

DEFAULT_CONFIG_PATH = Path(__file__).with_name("analysis_rules.yml")


def _section(config: dict, name: str) -> dict:
    section = config.get(name) or {}
    if not isinstance(section, dict):
        raise ConfigurationError(f"'{name}' must be a mapping, got {type(section).__name__}")
    return section


def _text(section: dict, key: str, default: str) -> str:
    value = section.get(key, default)
    if not isinstance(value, str):
        raise ConfigurationError(f"'{key}' must be a string, got {value!r}")
    return value


class AnalysisConfig:
    def __init__(self, config_path: Optional[str] = None):
        # Loading of analysis rules from the YAML config file
        config = {}
        if config_path is not None:
            try:
                with open(config_path, "r", encoding="utf-8") as file:
                    config = yaml.safe_load(file) or {}
            except OSError as e:
                raise ConfigurationError(f"Could not read config file {config_path}: {e}") from e
            except yaml.YAMLError as e:
                raise ConfigurationError(f"Invalid YAML in {config_path}: {e}") from e
        if not isinstance(config, dict):
            raise ConfigurationError(f"Config file {config_path} must contain a mapping")

        paths = _section(config, "paths")
        reports = _section(config, "reports")

        self.input_file = Path(_text(paths, "input_file", "input/input.txt"))
        self.output_folder = Path(_text(paths, "output_folder", "output"))

        self.file_prefix = _text(reports, "file_prefix", "occurrence_length_")
        self.file_suffix = _text(reports, "file_suffix", ".csv")
        self.top_sequences_file = _text(reports, "top_sequences_file", "top_sequences.txt")
        self.lines_affected_file = _text(reports, "lines_affected_file", "lines_affected.txt")
        self.top_limit: int = reports.get("top_limit", 10)
        self.encoding = _text(config, "encoding", "utf-8")

        if isinstance(self.top_limit, bool) or not isinstance(self.top_limit, int) or self.top_limit < 0:
            raise ConfigurationError(f"top_limit must be a non-negative integer, got {self.top_limit!r}")
        if not self.file_prefix:
            raise ConfigurationError("file_prefix must not be empty")
        try:
            codecs.lookup(self.encoding)
        except LookupError as e:
            raise ConfigurationError(f"Unknown encoding '{self.encoding}'") from e

    @classmethod
    def load_default(cls) -> "AnalysisConfig":
        return cls(str(DEFAULT_CONFIG_PATH))

    def report_name(self, length: int) -> str:
        return f"{self.file_prefix}{length}{self.file_suffix}"

    def is_report_name(self, name: str) -> bool:
        return name.startswith(self.file_prefix) and name.endswith(self.file_suffix)

    @property
    def top_sequences_path(self) -> Path:
        return self.output_folder / self.top_sequences_file

    @property
    def lines_affected_path(self) -> Path:
        return self.output_folder / self.lines_affected_file
