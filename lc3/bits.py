"""Bit-field helpers shared by the CPU and the disassembler.

Instruction fields are pulled out with an inclusive `[left, right]` bit
range, e.g. `extract_unsigned(0b110010, 4, 1) == 0b1001`.
"""

WORD_BITS = 16
WORD_MASK = 0xFFFF
SIGN_BIT = 0x8000


def extract_unsigned(value: int, left: int, right: int) -> int:
    """Return bits[left:right] of `value` as a non-negative integer."""
    if left < right:
        raise ValueError("left must be >= right")
    mask = ((1 << (left - right + 1)) - 1) << right
    return (value & mask) >> right


def extract_signed(value: int, left: int, right: int) -> int:
    """
    Return bits[left:right] of `value` sign-extended.

    The sign is read from bit `left + 1` of `value`, one
    position above the requested range. A single-bit range never
    sign-extends.
    e.g. extract_signed(59, 4, 0) == -5, extract_signed(1, 0, 0) == 1
    """
    if left < right:
        raise ValueError("left must be >= right")
    if left == right or not (value >> (left + 1)) & 1:
        return extract_unsigned(value, left, right)
    return -(extract_unsigned(~value, left - 1, right) + 1)


def to_word(value: int) -> int:
    """Wrap any integer into a signed 16-bit word (-32768..32767)."""
    value &= WORD_MASK
    return value - (1 << WORD_BITS) if value & SIGN_BIT else value


def to_address(value: int) -> int:
    """Reinterpret a word (or an offset sum) as a 16-bit address."""
    return value & WORD_MASK


# Instruction encodings are the unsigned view of a stored word.
to_instruction = to_address
