from collections import defaultdict
from typing import Dict, List, Tuple

FrequencyTable = Dict[int, Dict[str, int]]


class SequenceCounter:
    def __init__(self):
        # length -> sequence -> occurrences
        self.sequence_counts = defaultdict(lambda: defaultdict(int))

    # Counting every contiguous token run, from each start position to the end of the stream
    def count(self, tokens: List[str]) -> FrequencyTable:
        self.sequence_counts.clear()
        total = len(tokens)
        for i in range(total):
            joined = ""
            for length in range(1, total - i + 1):
                token = tokens[i + length - 1]
                joined = token if length == 1 else f"{joined} {token}"
                # Lowercased as a whole: final sigma depends on the neighbouring characters
                sequence = joined.lower()
                if sequence.strip():
                    self.sequence_counts[length][sequence] += 1
        return self.frequency_table()

    # Freezing the counts into plain dictionaries for the formatting stage
    def frequency_table(self) -> FrequencyTable:
        return {length: dict(sequences) for length, sequences in self.sequence_counts.items()}


# Column widths shared by every per-length report
def calculate_max_lengths(frequency_table: FrequencyTable) -> Tuple[int, int]:
    max_sequence_length = 0
    max_count_length = 0
    for sequences in frequency_table.values():
        for sequence, count in sequences.items():
            max_sequence_length = max(max_sequence_length, len(sequence))
            max_count_length = max(max_count_length, len(str(count)))
    return max_sequence_length, max_count_length
