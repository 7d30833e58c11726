import re
from typing import List

from SequenceAnalyzer.errors import PrimaryInputUnreadable

# Alternation, not a character class: every hyphen and slash is a hard break
WORD_SEPARATORS = re.compile(r"\s+|-|/|\t|,")
LINE_TERMINATORS = re.compile(r"\r\n|\r|\n")


# Reading the whole document once, line terminators left as they are
def read_input_text(file_path, encoding: str = "utf-8") -> str:
    try:
        with open(file_path, "r", encoding=encoding, errors="ignore", newline="") as file:
            return file.read()
    except OSError as e:
        raise PrimaryInputUnreadable(file_path, e) from e


# Empty tokens between consecutive separators are kept so positions stay intact
def tokenize(text: str) -> List[str]:
    return WORD_SEPARATORS.split(text)


def split_lines(text: str) -> List[str]:
    return LINE_TERMINATORS.split(text)
