from pathlib import Path
from typing import Dict, Iterable, List, Mapping, Optional

from SequenceAnalyzer.config import AnalysisConfig
from SequenceAnalyzer.errors import ArtifactReadFailed, ArtifactWriteFailed, NumericParseFailure
from SequenceAnalyzer.Reporting.report_writer import BORDER_CHAR, DELIMITER
from SequenceAnalyzer.utils.logger import get_logger

logger = get_logger(__name__)


# Recovering the sequence column from a rendered table, borders skipped
def parse_report(text: str) -> List[str]:
    sequences = []
    for line in text.splitlines():
        if line.startswith(BORDER_CHAR):
            continue
        sequence = line.split(DELIMITER)[0].strip()
        if sequence:
            sequences.append(sequence)
    return sequences


def select_top_sequences(sequences_by_length: Mapping[int, Iterable[str]], limit: int = 10) -> List[str]:
    unique_sequences = set()
    for sequences in sequences_by_length.values():
        unique_sequences.update(sequences)
    return sorted(unique_sequences)[:limit]


def render_top_sequences(top_sequences: Iterable[str]) -> str:
    lines = ["Top Sequences:\n"]
    for sequence in top_sequences:
        lines.append(f"  - {sequence}\n")
    return "".join(lines)


class ReportReader:
    def __init__(self, config: AnalysisConfig):
        self.config = config
        self.output_folder = config.output_folder

    def read_report(self, report_path: Path) -> List[str]:
        try:
            with open(report_path, "r", encoding=self.config.encoding, newline="") as file:
                return parse_report(file.read())
        except OSError as e:
            raise ArtifactReadFailed(report_path, e) from e

    # An unreadable report contributes no sequences
    def read_reports(self, report_index: Mapping[int, Path]) -> Dict[int, List[str]]:
        sequences_by_length: Dict[int, List[str]] = {}
        for length in sorted(report_index):
            try:
                sequences_by_length[length] = self.read_report(report_index[length])
            except ArtifactReadFailed as e:
                logger.error(str(e))
                sequences_by_length[length] = []
        return sequences_by_length

    def parse_length(self, name: str) -> int:
        fragment = name[len(self.config.file_prefix):]
        if self.config.file_suffix:
            fragment = fragment[:-len(self.config.file_suffix)]
        try:
            return int(fragment)
        except ValueError as e:
            raise NumericParseFailure(name, fragment) from e

    # Rebuilding the report index from the folder listing when none was kept in memory
    def discover_reports(self) -> Dict[int, Path]:
        report_index: Dict[int, Path] = {}
        if not self.output_folder.is_dir():
            return report_index
        try:
            existing = sorted(self.output_folder.iterdir())
        except OSError as e:
            logger.error(str(ArtifactReadFailed(self.output_folder, e)))
            return report_index
        for path in existing:
            if not (path.is_file() and self.config.is_report_name(path.name)):
                continue
            try:
                length = self.parse_length(path.name)
            except NumericParseFailure as e:
                logger.warning(f"{e}; skipping")
                continue
            report_index[length] = path
        return report_index

    def write_top_sequences(self, top_sequences: List[str]) -> Path:
        output_path = self.config.top_sequences_path
        try:
            with open(output_path, "w", encoding=self.config.encoding, newline="") as file:
                file.write(render_top_sequences(top_sequences))
        except OSError as e:
            raise ArtifactWriteFailed(output_path, e) from e
        return output_path

    def collect_top_sequences(self, report_index: Optional[Mapping[int, Path]] = None) -> List[str]:
        if report_index is None:
            report_index = self.discover_reports()
        sequences_by_length = self.read_reports(report_index)
        return select_top_sequences(sequences_by_length, self.config.top_limit)
