"""DNA → protein translation.

Single pass over frame 0: strip whitespace and uppercase, validate
(empty → length % 3 → alphabet), split into codons, resolve each codon
through a caller-supplied CodonTable, join. Unknown codons fail fast; no
partial protein is ever returned.

The engine keeps no state between calls. The only shared object is the
immutable table, so one table can serve concurrent callers.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from typing import IO, Iterator, Optional, Union

from .codon_table import CODON_LENGTH, NUCLEOTIDES, CodonTable
from .errors import (
    EmptySequenceError,
    InvalidCharactersError,
    LengthNotMultipleOfThreeError,
)

_log = logging.getLogger(__name__)

LINE_WIDTH = 60

_ALPHABET = frozenset(NUCLEOTIDES)


@dataclass(frozen=True)
class ProteinResult:
    """Translated protein plus the sequence it came from.

    Attributes:
        protein: amino-acid symbols, one per codon
        sequence: normalized, validated nucleotide sequence
        table_source: label of the codon table used (None if unlabeled)
    """

    protein: str
    sequence: str
    table_source: Optional[str] = None

    @property
    def n_codons(self) -> int:
        return len(self.sequence) // CODON_LENGTH

    @property
    def n_residues(self) -> int:
        return len(self.protein)

    def lines(self, width: int = LINE_WIDTH) -> Iterator[str]:
        """Display lines of at most ``width`` residues (new iterator per call)."""
        return wrap(self.protein, width)

    def __len__(self) -> int:
        return len(self.protein)

    def __str__(self) -> str:
        return "\n".join(self.lines())


def normalize(raw_input: Union[str, bytes]) -> str:
    """Remove all whitespace and uppercase.

    Bytes are decoded as ASCII; undecodable bytes become U+FFFD and are
    then rejected by validate().
    """
    if isinstance(raw_input, (bytes, bytearray)):
        raw_input = bytes(raw_input).decode("ascii", errors="replace")
    return "".join(raw_input.split()).upper()


def validate(sequence: str) -> str:
    """Check a normalized sequence; returns it unchanged if valid.

    Order matters: emptiness, then length, then alphabet.

    Raises:
        EmptySequenceError: zero length
        LengthNotMultipleOfThreeError: len % 3 != 0
        InvalidCharactersError: any char outside A/T/G/C (all offenders reported)
    """
    if not sequence:
        raise EmptySequenceError()
    if len(sequence) % CODON_LENGTH:
        raise LengthNotMultipleOfThreeError(len(sequence))
    offenders = [(pos, ch) for pos, ch in enumerate(sequence) if ch not in _ALPHABET]
    if offenders:
        raise InvalidCharactersError(offenders)
    return sequence


def codons(sequence: str) -> Iterator[str]:
    """Yield consecutive non-overlapping codons, frame 0.

    A trailing partial codon is not yielded; validate() rules it out.
    """
    for i in range(0, len(sequence) - CODON_LENGTH + 1, CODON_LENGTH):
        yield sequence[i : i + CODON_LENGTH]


def translate(raw_input: Union[str, bytes], table: CodonTable) -> ProteinResult:
    """Translate a DNA sequence to protein.

    Args:
        raw_input: DNA sequence, any case, whitespace anywhere (str or bytes)
        table: codon table to resolve against

    Returns:
        ProteinResult; ``len(result.protein) == len(sequence) / 3``

    Raises:
        TranslationError: empty, misaligned, non-ACGT input, or the first
                          codon the table does not know (UnknownCodonError,
                          with its codon index)
    """
    sequence = validate(normalize(raw_input))
    protein = "".join(
        table.resolve(codon, idx) for idx, codon in enumerate(codons(sequence))
    )
    _log.debug("Translated %d codons using %s", len(protein), table.source or "<table>")
    return ProteinResult(protein=protein, sequence=sequence, table_source=table.source)


def wrap(protein: str, width: int = LINE_WIDTH) -> Iterator[str]:
    """Split a protein into consecutive chunks of at most ``width`` characters."""
    if width < 1:
        raise ValueError(f"Line width must be >= 1, got {width}")
    return (protein[i : i + width] for i in range(0, len(protein), width))


def write_lines(
    result: ProteinResult,
    stream: Optional[IO[str]] = None,
    width: int = LINE_WIDTH,
) -> None:
    """Print each wrapped line of ``result`` to ``stream`` (default stdout)."""
    out = stream if stream is not None else sys.stdout
    for line in result.lines(width):
        out.write(line + "\n")
