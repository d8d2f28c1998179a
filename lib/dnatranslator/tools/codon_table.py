"""Codon → amino acid lookup tables.

A CodonTable is built once from tabular data (rows of 3 codon cells + 1
amino-acid cell), validated, and then shared read-only across any number of
translate() calls. Cells may be characters or integer code points, so the
same table can come from a text file or from a numeric character-code
matrix (N x 4, e.g. 65 84 71 77 for ATG → M).

Table sources:
    standard_table()        bundled standard genetic code (data/standard_code.tsv)
    load_table(path)        .tsv/.txt text table or .npy/.npz code matrix
    ncbi_table(code_id)     any NCBI genetic code via Biopython

Tables are never held in module state; callers own them, optionally through
a CodonTableManager cache.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Iterable, Iterator, Mapping, Optional

import numpy as np
from Bio.Data.CodonTable import unambiguous_dna_by_id

from .errors import (
    AmbiguousTableError,
    EmptyTableError,
    MalformedTableError,
    UnknownCodonError,
)

_log = logging.getLogger(__name__)

NUCLEOTIDES = "ATGC"
CODON_LENGTH = 3
STOP_SYMBOL = "*"

DATA_DIR = Path(__file__).parent / "data"
STANDARD_TABLE_PATH = DATA_DIR / "standard_code.tsv"
BUNDLED_TABLES: dict[str, Path] = {
    "standard": STANDARD_TABLE_PATH,
    "vertebrate_mitochondrial": DATA_DIR / "vertebrate_mitochondrial.tsv",
}

_TEXT_SUFFIXES = {".tsv", ".txt", ".tab"}
_NUMPY_SUFFIXES = {".npy", ".npz"}


@dataclass(frozen=True)
class CodonTable:
    """Immutable codon → amino-acid mapping.

    Build with CodonTable.build(); the constructor is for already-validated
    mappings only.

    Attributes:
        mapping: read-only view keyed by 3-char uppercase codon
        source: free-form label of where the data came from (path, NCBI id)
    """

    mapping: Mapping[str, str]
    source: Optional[str] = field(default=None, compare=False)

    @classmethod
    def build(cls, table_data: Any, source: Optional[str] = None) -> CodonTable:
        """Validate raw table rows and build a table.

        Args:
            table_data: iterable of rows (or 2-D numpy array) with at least
                        4 fields: codon nt 1, 2, 3, amino acid. Cells are
                        1-char str, 1-byte bytes or integer code points.
                        Fields past the 4th are ignored.
            source: label for diagnostics

        Returns:
            CodonTable

        Raises:
            MalformedTableError: short row, non-character cell, or codon
                                 cell outside A/T/G/C
            AmbiguousTableError: same codon on two rows
            EmptyTableError: no rows
        """
        mapping: dict[str, str] = {}
        first_seen: dict[str, int] = {}

        for row_idx, row in enumerate(_iter_rows(table_data)):
            if len(row) < 4:
                raise MalformedTableError(
                    f"expected 4 fields (3 codon + 1 amino acid), got {len(row)}",
                    row=row_idx,
                )
            cells = [_normalize_cell(cell, row_idx) for cell in row[:4]]
            bad = [c for c in cells[:CODON_LENGTH] if c not in NUCLEOTIDES]
            if bad:
                raise MalformedTableError(
                    f"codon characters must be A, T, G or C, got {bad}",
                    row=row_idx,
                )
            if not (cells[3].isascii() and cells[3].isprintable() and not cells[3].isspace()):
                raise MalformedTableError(
                    f"amino-acid symbol must be a printable ASCII character, got {cells[3]!r}",
                    row=row_idx,
                )
            codon = "".join(cells[:CODON_LENGTH])
            if codon in mapping:
                raise AmbiguousTableError(codon, first_seen[codon], row_idx)
            mapping[codon] = cells[3]
            first_seen[codon] = row_idx

        if not mapping:
            raise EmptyTableError(source)

        _log.debug("Built codon table: %d codons from %s", len(mapping), source or "<data>")
        return cls(mapping=MappingProxyType(mapping), source=source)

    def resolve(self, codon: str, position: Optional[int] = None) -> str:
        """Look up one codon.

        The codon is expected uppercase and already alphabet-checked; no
        validation happens here.

        Args:
            codon: 3-char codon
            position: codon index in the calling sequence, reported on failure

        Raises:
            UnknownCodonError: codon not in the table
        """
        try:
            return self.mapping[codon]
        except KeyError:
            raise UnknownCodonError(codon, position) from None

    def __len__(self) -> int:
        return len(self.mapping)

    def __contains__(self, codon: object) -> bool:
        return codon in self.mapping

    def __iter__(self) -> Iterator[str]:
        return iter(self.mapping)

    @property
    def codons(self) -> tuple[str, ...]:
        return tuple(sorted(self.mapping))

    @property
    def amino_acids(self) -> frozenset[str]:
        return frozenset(self.mapping.values())

    @property
    def is_complete(self) -> bool:
        """True when all 64 codons are present."""
        return len(self.mapping) == len(NUCLEOTIDES) ** CODON_LENGTH


# ---------------------------------------------------------------------------
# Cell / row normalization
# ---------------------------------------------------------------------------


def _iter_rows(table_data: Any) -> Iterable:
    if isinstance(table_data, np.ndarray):
        if table_data.ndim != 2:
            raise MalformedTableError(
                f"table array must be 2-D (rows x fields), got shape {table_data.shape}"
            )
        return (list(row) for row in table_data)
    if isinstance(table_data, (str, bytes)):
        raise MalformedTableError("table data must be rows of fields, not a single string")
    return (list(row) for row in table_data)


def _normalize_cell(cell: Any, row_idx: int) -> str:
    """One table cell → uppercase single character."""
    if isinstance(cell, (bool, np.bool_)):
        raise MalformedTableError(f"boolean cell {cell!r}", row=row_idx)
    if isinstance(cell, (float, np.floating)) and float(cell).is_integer():
        cell = int(cell)
    if isinstance(cell, (int, np.integer)):
        try:
            char = chr(int(cell))
        except (ValueError, OverflowError):
            raise MalformedTableError(f"invalid character code {cell!r}", row=row_idx) from None
    elif isinstance(cell, (bytes, np.bytes_)):
        try:
            char = bytes(cell).decode("ascii")
        except UnicodeDecodeError:
            raise MalformedTableError(f"non-ASCII cell {cell!r}", row=row_idx) from None
    elif isinstance(cell, str):
        char = cell.strip()
    else:
        raise MalformedTableError(
            f"cell {cell!r} is neither a character nor a character code", row=row_idx
        )
    if len(char) != 1:
        raise MalformedTableError(f"cell {cell!r} is not a single character", row=row_idx)
    return char.upper()


# ---------------------------------------------------------------------------
# Table sources
# ---------------------------------------------------------------------------


def _parse_text_table(path: Path) -> list[list[Any]]:
    rows: list[list[Any]] = []
    with open(path) as fh:
        for line in fh:
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            rows.append([int(f) if f.isdigit() else f for f in line.split()])
    return rows


def _load_numpy_table(path: Path) -> np.ndarray:
    data = np.load(path)
    if hasattr(data, "files"):  # NpzFile
        with data:
            key = "code" if "code" in data.files else data.files[0]
            return data[key]
    return data


def load_table(path: Path | str) -> CodonTable:
    """Build a table from a text (.tsv/.txt/.tab) or numpy (.npy/.npz) file.

    Text tables: one row per line, whitespace-separated fields, '#' comments.
    Numpy tables: N x 4 array of character codes or 1-char strings; for
    .npz the array named 'code' (else the first array) is used.

    Raises:
        FileNotFoundError: path does not exist
        ValueError: unsupported suffix
        TableError: invalid table contents
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Codon table not found: {path}")

    suffix = path.suffix.lower()
    if suffix in _TEXT_SUFFIXES:
        rows: Any = _parse_text_table(path)
    elif suffix in _NUMPY_SUFFIXES:
        rows = _load_numpy_table(path)
    else:
        raise ValueError(
            f"Unsupported codon table format {suffix!r}. "
            f"Valid: {sorted(_TEXT_SUFFIXES | _NUMPY_SUFFIXES)}"
        )
    return CodonTable.build(rows, source=str(path))


def standard_table() -> CodonTable:
    """The bundled standard genetic code (64 codons, '*' for stop)."""
    return load_table(STANDARD_TABLE_PATH)


def ncbi_table(code_id: int = 1) -> CodonTable:
    """Build a table for an NCBI genetic code ID using Biopython.

    Common IDs: 1=Standard, 2=Vertebrate Mitochondrial, 11=Bacterial.
    Stop codons map to '*'. Codes where a codon is both a stop and an
    amino acid (27, 28, 31: stop only at the transcript end) keep the
    amino acid.
    """
    if code_id not in unambiguous_dna_by_id:
        raise ValueError(
            f"Unknown genetic code ID {code_id}. "
            f"Valid: {sorted(unambiguous_dna_by_id.keys())}"
        )
    bio_table = unambiguous_dna_by_id[code_id]
    forward = bio_table.forward_table
    rows = [tuple(codon) + (aa,) for codon, aa in forward.items()]
    rows.extend(
        tuple(codon) + (STOP_SYMBOL,)
        for codon in bio_table.stop_codons
        if codon not in forward
    )
    return CodonTable.build(rows, source=f"ncbi:{code_id}")


class CodonTableManager:
    """Session-level cache so each table source is built at most once.

    Owned and passed around by the caller; nothing is cached globally.

    Usage::

        manager = CodonTableManager()
        table = manager.get_standard()
        mito = manager.get_ncbi(2)
        custom = manager.get_file("my_code.tsv")
    """

    def __init__(self):
        self._cache: dict[str, CodonTable] = {}

    def get_standard(self) -> CodonTable:
        return self.get_file(STANDARD_TABLE_PATH)

    def get_bundled(self, name: str) -> CodonTable:
        if name not in BUNDLED_TABLES:
            raise ValueError(f"Unknown bundled table {name!r}. Valid: {sorted(BUNDLED_TABLES)}")
        return self.get_file(BUNDLED_TABLES[name])

    def get_file(self, path: Path | str) -> CodonTable:
        key = f"file:{Path(path).resolve()}"
        if key not in self._cache:
            # Only published once build() has fully validated it
            self._cache[key] = load_table(path)
        return self._cache[key]

    def get_ncbi(self, code_id: int = 1) -> CodonTable:
        key = f"ncbi:{code_id}"
        if key not in self._cache:
            self._cache[key] = ncbi_table(code_id)
        return self._cache[key]

    def __len__(self) -> int:
        return len(self._cache)
