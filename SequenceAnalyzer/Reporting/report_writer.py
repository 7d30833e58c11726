from pathlib import Path
from typing import Dict, List, Mapping, Tuple

from SequenceAnalyzer.config import AnalysisConfig
from SequenceAnalyzer.Counting.sequence_counter import FrequencyTable, calculate_max_lengths
from SequenceAnalyzer.errors import ArtifactWriteFailed, OutputFolderUnavailable
from SequenceAnalyzer.utils.logger import get_logger

DELIMITER = ","
BORDER_CHAR = "-"

logger = get_logger(__name__)


# Count descending, then sequence ascending
def sort_sequences(sequences: Mapping[str, int]) -> List[Tuple[str, int]]:
    return sorted(sequences.items(), key=lambda item: (-item[1], item[0]))


def border_line(max_sequence_length: int, max_count_length: int) -> str:
    # Two extra dashes per column for padding
    return f"{BORDER_CHAR * (max_sequence_length + 2)}{DELIMITER}{BORDER_CHAR * (max_count_length + 2)}\n"


def render_table(sequences: Mapping[str, int], max_sequence_length: int, max_count_length: int) -> str:
    border = border_line(max_sequence_length, max_count_length)
    rows = [border]
    for sequence, count in sort_sequences(sequences):
        rows.append(f"{sequence.ljust(max_sequence_length)}{DELIMITER}{str(count).rjust(max_count_length)}\n")
    rows.append(border)
    return "".join(rows)


class ReportWriter:
    def __init__(self, config: AnalysisConfig):
        self.config = config
        self.output_folder = config.output_folder

    def prepare_output_folder(self) -> None:
        try:
            self.output_folder.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise OutputFolderUnavailable(self.output_folder, e) from e

    # Removing per-length reports left over from a previous run
    def delete_existing_reports(self) -> List[Path]:
        self.prepare_output_folder()
        try:
            existing = sorted(self.output_folder.iterdir())
        except OSError as e:
            raise OutputFolderUnavailable(self.output_folder, e) from e
        removed = []
        for path in existing:
            if path.is_file() and self.config.is_report_name(path.name):
                try:
                    path.unlink()
                    removed.append(path)
                except OSError as e:
                    logger.warning(f"Could not delete stale report {path}: {e}")
        if removed:
            logger.debug(f"Deleted {len(removed)} stale report(s) from {self.output_folder}")
        return removed

    def write_report(self, length: int, sequences: Mapping[str, int],
                     max_sequence_length: int, max_count_length: int) -> Path:
        output_path = self.output_folder / self.config.report_name(length)
        table = render_table(sequences, max_sequence_length, max_count_length)
        try:
            with open(output_path, "w", encoding=self.config.encoding, newline="") as file:
                file.write(table)
        except OSError as e:
            raise ArtifactWriteFailed(output_path, e) from e
        return output_path

    # Writing one report per length; the returned index carries each length next to its file
    def write_reports(self, frequency_table: FrequencyTable) -> Dict[int, Path]:
        self.prepare_output_folder()
        max_sequence_length, max_count_length = calculate_max_lengths(frequency_table)
        report_index: Dict[int, Path] = {}
        for length in sorted(frequency_table):
            try:
                path = self.write_report(length, frequency_table[length], max_sequence_length, max_count_length)
            except ArtifactWriteFailed as e:
                logger.error(str(e))
                continue
            report_index[length] = path
            logger.info(f"Word sequences of length {length} have been saved to {path.name}.")
        return report_index
