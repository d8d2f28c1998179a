"""dnatranslator tools: codon tables, translation, and input sources."""

from .codon_table import (
    BUNDLED_TABLES,
    CodonTable,
    CodonTableManager,
    load_table,
    ncbi_table,
    standard_table,
)
from .sequence_source import read_sequence
from .translate import ProteinResult, codons, normalize, translate, validate, wrap, write_lines

__all__ = [
    "BUNDLED_TABLES",
    "CodonTable",
    "CodonTableManager",
    "ProteinResult",
    "codons",
    "load_table",
    "ncbi_table",
    "normalize",
    "read_sequence",
    "standard_table",
    "translate",
    "validate",
    "wrap",
    "write_lines",
]
