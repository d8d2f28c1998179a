"""Error taxonomy for table construction and translation.

Two families, so callers can tell "fix my input" from "fix my table":

    TranslationError  raised by translate() for bad sequences / unknown codons
    TableError        raised by CodonTable.build() for bad table data

Both derive from ValueError.
"""

from __future__ import annotations

from typing import Optional


class DNATranslatorError(ValueError):
    """Base class for every error raised by dnatranslator."""


# ---------------------------------------------------------------------------
# Translation-time (input) errors
# ---------------------------------------------------------------------------


class TranslationError(DNATranslatorError):
    """The input sequence cannot be translated."""


class EmptySequenceError(TranslationError):
    def __init__(self) -> None:
        super().__init__("Empty sequence: nothing left after removing whitespace")


class LengthNotMultipleOfThreeError(TranslationError):
    def __init__(self, length: int) -> None:
        self.length = length
        self.remainder = length % 3
        super().__init__(
            f"Sequence length must be a multiple of 3 "
            f"(got {length} nt, {self.remainder} left over)"
        )


class InvalidCharactersError(TranslationError):
    """Sequence contains characters outside the nucleotide alphabet.

    Attributes:
        offenders: every (position, char) pair, positions 0-based in the
                   normalized sequence
        characters: distinct offending characters, sorted
    """

    MAX_REPORTED = 10

    def __init__(self, offenders: list[tuple[int, str]]) -> None:
        self.offenders = tuple(offenders)
        self.characters = tuple(sorted({ch for _, ch in self.offenders}))
        shown = ", ".join(f"{ch!r}@{pos}" for pos, ch in self.offenders[: self.MAX_REPORTED])
        more = len(self.offenders) - self.MAX_REPORTED
        if more > 0:
            shown += f", ... ({more} more)"
        super().__init__(
            f"Invalid characters {set(self.characters)} in sequence "
            f"(all letters must be A, T, G or C): {shown}"
        )

    @property
    def first(self) -> tuple[int, str]:
        return self.offenders[0]


class UnknownCodonError(TranslationError):
    """Codon has no entry in the codon table.

    ``position`` is the codon index (0-based codon number), not the
    nucleotide offset. None when the lookup was made outside a sequence.
    """

    def __init__(self, codon: str, position: Optional[int] = None) -> None:
        self.codon = codon
        self.position = position
        where = f" at codon {position}" if position is not None else ""
        super().__init__(f"Unknown codon {codon!r}{where}: not in codon table")


# ---------------------------------------------------------------------------
# Table-construction (configuration) errors
# ---------------------------------------------------------------------------


class TableError(DNATranslatorError):
    """The codon table data is unusable."""


class MalformedTableError(TableError):
    def __init__(self, message: str, row: Optional[int] = None) -> None:
        self.row = row
        prefix = f"Row {row}: " if row is not None else ""
        super().__init__(f"Malformed codon table. {prefix}{message}")


class AmbiguousTableError(TableError):
    def __init__(self, codon: str, first_row: int, second_row: int) -> None:
        self.codon = codon
        self.rows = (first_row, second_row)
        super().__init__(
            f"Ambiguous codon table: codon {codon!r} defined twice "
            f"(rows {first_row} and {second_row})"
        )


class EmptyTableError(TableError):
    def __init__(self, source: Optional[str] = None) -> None:
        where = f" ({source})" if source else ""
        super().__init__(f"Empty codon table{where}: no rows")
