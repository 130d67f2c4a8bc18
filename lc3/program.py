"""
Program images: a hex start address followed by one hex word per line.

    3000        ; origin
    1042        ADD R0, R1, R2
    F025        HALT

Only the first token of a line counts; blank lines are skipped.
"""
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from .errors import BadProgramHeader, BadProgramInstructions, ProgramMissingHeader

PC_START = 0x3000  # conventional origin for user programs


def parse_hex(token: str) -> Optional[int]:
    """Parse `x3000`, `0x3000` or `3000` as a 16-bit value; None if invalid."""
    text = token.strip()
    if text[:2].lower() == "0x":
        text = text[2:]
    elif text[:1].lower() == "x":
        text = text[1:]
    try:
        value = int(text, 16)
    except ValueError:
        return None
    if not 0 <= value <= 0xFFFF:
        return None
    return value


@dataclass
class Program:
    start: int = PC_START
    instructions: List[int] = field(default_factory=list)

    def __len__(self):
        return len(self.instructions)

    @classmethod
    def from_text(cls, text: str) -> "Program":
        header = None
        words = []
        for line_no, line in enumerate(text.splitlines(), start=1):
            tokens = line.split()
            if not tokens:
                continue
            token = tokens[0]
            if header is None:
                header = parse_hex(token)
                if header is None:
                    raise BadProgramHeader(token)
                continue
            word = parse_hex(token)
            if word is None:
                raise BadProgramInstructions(line_no, token)
            words.append(word)
        if header is None:
            raise ProgramMissingHeader()
        return cls(header, words)

    @classmethod
    def from_file(cls, path) -> "Program":
        return cls.from_text(Path(path).read_text())
