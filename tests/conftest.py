import pytest
import yaml

from SequenceAnalyzer.config import AnalysisConfig
from SequenceAnalyzer.utils.logger import PACKAGE_LOGGER, get_logger


# The package logger does not propagate, so caplog listens on it directly
@pytest.fixture(autouse=True)
def package_log_capture(caplog):
    package_logger = get_logger(PACKAGE_LOGGER)
    package_logger.addHandler(caplog.handler)
    yield
    package_logger.removeHandler(caplog.handler)


@pytest.fixture
def make_config(tmp_path):
    def _make(input_text=None, **reports):
        input_file = tmp_path / "input.txt"
        if input_text is not None:
            input_file.write_bytes(input_text.encode("utf-8"))
        rules = {
            "paths": {
                "input_file": str(input_file),
                "output_folder": str(tmp_path / "output"),
            },
            "reports": reports,
        }
        config_path = tmp_path / "analysis_rules.yml"
        config_path.write_text(yaml.safe_dump(rules), encoding="utf-8")
        return AnalysisConfig(str(config_path))

    return _make
