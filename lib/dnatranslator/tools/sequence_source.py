"""Resolve a command-line token to raw sequence text.

A token is either a literal sequence ("ATGCCC") or the path of a text file
holding one. FASTA header (">") and comment (";") lines are dropped so a
single-record FASTA file works as input; everything else is passed through
untouched for translate() to normalize. Multi-record files are refused.
"""

from __future__ import annotations

import os
from pathlib import Path

SEQUENCE_SUFFIXES = {".txt", ".fa", ".fasta", ".fna", ".seq"}


def _looks_like_path(token: str) -> bool:
    if os.sep in token or (os.altsep and os.altsep in token):
        return True
    return Path(token).suffix.lower() in SEQUENCE_SUFFIXES


def read_sequence_file(path: Path | str) -> str:
    """Read a sequence file, skipping '>' header and ';' comment lines.

    Raises:
        ValueError: more than one '>' record in the file
        UnicodeDecodeError: file is not UTF-8 text
    """
    chunks: list[str] = []
    n_headers = 0
    with open(path, encoding="utf-8") as fh:
        for line_num, line in enumerate(fh, 1):
            if line.startswith(">"):
                n_headers += 1
                if n_headers > 1:
                    raise ValueError(
                        f"Multiple FASTA records in {path} (second header on line "
                        f"{line_num}); supply one sequence per run"
                    )
                continue
            if line.startswith(";"):
                continue
            chunks.append(line)
    return "".join(chunks)


def read_sequence(token: str) -> str:
    """File contents if ``token`` names a file, otherwise ``token`` itself.

    Raises:
        FileNotFoundError: token looks like a file path but no such file exists
        IsADirectoryError: token names a directory
        OSError: token names something else that is not a regular file
    """
    # os.path.isfile, not Path.is_file: long literal sequences overflow NAME_MAX
    if os.path.isfile(token):
        return read_sequence_file(token)
    if os.path.isdir(token):
        raise IsADirectoryError(f"Not a regular file: {token} is a directory")
    if os.path.exists(token):
        raise OSError(f"Not a regular file: {token}")
    if _looks_like_path(token):
        raise FileNotFoundError(f"Sequence file not found: {token}")
    return token
