import re
from pathlib import Path
from typing import Iterable, List, Optional

from SequenceAnalyzer.errors import ArtifactWriteFailed
from SequenceAnalyzer.Parsing.text_tokenizer import split_lines


class LineImpactScanner:
    def __init__(self, top_sequences: Iterable[str]):
        self.top_sequences: List[str] = [sequence.lower() for sequence in top_sequences]
        # Whole-word match of each sequence, compiled once per run
        self.patterns = [re.compile(rf"\b{re.escape(sequence)}\b") for sequence in self.top_sequences]

    def first_match(self, line: str) -> Optional[str]:
        for sequence, pattern in zip(self.top_sequences, self.patterns):
            if pattern.search(line):
                return sequence
        return None

    # A line counts once, however many top sequences it contains
    def count_lines_affected(self, text: str) -> int:
        if not self.patterns:
            return 0
        lines_affected = 0
        for line in split_lines(text.lower()):
            if self.first_match(line) is not None:
                lines_affected += 1
        return lines_affected


# The artifact holds the bare number, no trailing newline
def write_lines_affected(lines_affected: int, output_path: Path, encoding: str = "utf-8") -> Path:
    try:
        with open(output_path, "w", encoding=encoding, newline="") as file:
            file.write(str(lines_affected))
    except OSError as e:
        raise ArtifactWriteFailed(output_path, e) from e
    return output_path
