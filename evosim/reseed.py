"""Validation and conversion of genome text used to reseed a run."""

from __future__ import annotations

import re
from typing import List

WORD_BITS = 32
HEX_DIGITS_PER_WORD = 8
_WORD_MAX = (1 << WORD_BITS) - 1

_HEX_PATTERN = re.compile(r"[0-9A-Fa-f]*")
_BINARY_PATTERN = re.compile(r"[01]*")
_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"


class GenomeFormatError(ValueError):
    """Raised when genome text is badly formed or the wrong length."""


def validate_genome_string(text: str, hex_format: bool) -> bool:
    """True when ``text`` is whole words of hex (8 digits) or binary (32 digits)."""
    if hex_format:
        return len(text) % HEX_DIGITS_PER_WORD == 0 and bool(
            _HEX_PATTERN.fullmatch(text)
        )
    return len(text) % WORD_BITS == 0 and bool(_BINARY_PATTERN.fullmatch(text))


def word_string_to_number(text: str, base: int) -> int:
    """Value of one word written in ``base``; raise if it is not a 32-bit number."""
    if not 2 <= base <= len(_DIGITS):
        raise GenomeFormatError(f"unsupported base {base}")
    allowed = _DIGITS[:base]
    if not text or any(c.lower() not in allowed for c in text):
        raise GenomeFormatError(f"{text!r} is not a base {base} number")
    value = int(text, base)
    if value > _WORD_MAX:
        raise GenomeFormatError(f"{text!r} does not fit in {WORD_BITS} bits")
    return value


def _chunks(text: str, size: int) -> List[str]:
    return [text[i : i + size] for i in range(0, len(text), size)]


def binary_to_hex(text: str) -> str:
    """Convert binary genome text, 32 digits per word, to upper-case hex."""
    return "".join(
        format(word_string_to_number(chunk, 2), "08X")
        for chunk in _chunks(text, WORD_BITS)
    )


def hex_to_binary(text: str) -> str:
    """Convert hex genome text, 8 digits per word, to binary."""
    return "".join(
        format(word_string_to_number(chunk, 16), "032b")
        for chunk in _chunks(text, HEX_DIGITS_PER_WORD)
    )


def parse_reseed_genome(text: str, hex_format: bool, genome_size: int) -> List[int]:
    """Words of a reseed genome given as hex or binary text of ``genome_size`` words."""
    if not validate_genome_string(text, hex_format):
        raise GenomeFormatError("this doesn't look like a valid genome")
    binary = hex_to_binary(text) if hex_format else text
    if len(binary) != WORD_BITS * genome_size:
        raise GenomeFormatError(
            f"genome has {len(binary)} bits, expected {WORD_BITS * genome_size}"
        )
    return [word_string_to_number(chunk, 2) for chunk in _chunks(binary, WORD_BITS)]