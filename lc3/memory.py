from typing import Iterable, List

from .bits import to_address, to_word
from .errors import AddressOutOfRange

MEM_SIZE = 65536  # Number of 16-bit words in memory


class Memory:
    def __init__(self):
        self.mem: List[int] = [0]*MEM_SIZE

    def __len__(self) -> int:
        return MEM_SIZE

    @staticmethod
    def _check(addr: int) -> int:
        if not 0 <= addr < MEM_SIZE:
            raise AddressOutOfRange(addr)
        return addr

    def read(self, addr: int) -> int:
        """Read a 16-bit word from memory"""
        return self.mem[self._check(addr)]

    def write(self, addr: int, value: int):
        """Write a 16-bit word to memory (stored signed)"""
        self.mem[self._check(addr)] = to_word(value)

    def load(self, start: int, words: Iterable[int]) -> int:
        """Copy `words` in from `start`, wrapping past xFFFF. Returns the count."""
        addr = self._check(start)
        count = 0
        for word in words:
            self.mem[addr] = to_word(word)
            addr = to_address(addr + 1)
            count += 1
        return count

    def cells(self) -> List[int]:
        """Snapshot of every cell, for dump/presentation code."""
        return list(self.mem)
