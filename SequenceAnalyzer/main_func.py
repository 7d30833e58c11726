import sys
from typing import Any, Dict

from SequenceAnalyzer.config import AnalysisConfig
from SequenceAnalyzer.Counting.sequence_counter import SequenceCounter
from SequenceAnalyzer.errors import AnalyzerError, ArtifactWriteFailed
from SequenceAnalyzer.Parsing.text_tokenizer import read_input_text, split_lines, tokenize
from SequenceAnalyzer.Reporting.report_reader import ReportReader
from SequenceAnalyzer.Reporting.report_writer import ReportWriter
from SequenceAnalyzer.Scanning.line_impact_scanner import LineImpactScanner, write_lines_affected
from SequenceAnalyzer.utils.logger import get_logger

logger = get_logger(__name__)


def run_analysis(config: AnalysisConfig) -> Dict[str, Any]:
    # A missing input aborts before any artifact is touched
    input_text = read_input_text(config.input_file, config.encoding)
    logger.info(f"{config.input_file} -> {len(split_lines(input_text))} lines read")

    writer = ReportWriter(config)
    writer.delete_existing_reports()

    frequency_table = SequenceCounter().count(tokenize(input_text))
    report_index = writer.write_reports(frequency_table)

    # Top sequences come from what was written, not from the in-memory table
    reader = ReportReader(config)
    top_sequences = reader.collect_top_sequences(report_index)
    try:
        reader.write_top_sequences(top_sequences)
        logger.info(f"Top sequences have been saved to {config.top_sequences_file}.")
    except ArtifactWriteFailed as e:
        logger.error(str(e))

    lines_affected = LineImpactScanner(top_sequences).count_lines_affected(input_text)
    try:
        write_lines_affected(lines_affected, config.lines_affected_path, config.encoding)
        logger.info(f"Lines affected have been saved to {config.lines_affected_file}.")
    except ArtifactWriteFailed as e:
        logger.error(str(e))

    return {
        "frequency_table": frequency_table,
        "report_index": report_index,
        "top_sequences": top_sequences,
        "lines_affected": lines_affected,
    }


def main(config_path=None) -> int:
    try:
        config = AnalysisConfig(config_path) if config_path else AnalysisConfig.load_default()
        results = run_analysis(config)
    except AnalyzerError as e:
        logger.error(str(e))
        return 1

    print("\n--- Top Sequences ---")
    for sequence in results["top_sequences"]:
        print(f"  - {sequence}")
    print(f"Lines affected: {results['lines_affected']}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
