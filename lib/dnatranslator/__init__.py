"""dnatranslator: DNA → protein translation with swappable codon tables."""

__version__ = "0.1.0"

from dnatranslator.tools.codon_table import (
    CodonTable,
    CodonTableManager,
    load_table,
    ncbi_table,
    standard_table,
)
from dnatranslator.tools.errors import (
    AmbiguousTableError,
    DNATranslatorError,
    EmptySequenceError,
    EmptyTableError,
    InvalidCharactersError,
    LengthNotMultipleOfThreeError,
    MalformedTableError,
    TableError,
    TranslationError,
    UnknownCodonError,
)
from dnatranslator.tools.translate import ProteinResult, translate, write_lines

__all__ = [
    "AmbiguousTableError",
    "CodonTable",
    "CodonTableManager",
    "DNATranslatorError",
    "EmptySequenceError",
    "EmptyTableError",
    "InvalidCharactersError",
    "LengthNotMultipleOfThreeError",
    "MalformedTableError",
    "ProteinResult",
    "TableError",
    "TranslationError",
    "UnknownCodonError",
    "load_table",
    "ncbi_table",
    "standard_table",
    "translate",
    "write_lines",
]
