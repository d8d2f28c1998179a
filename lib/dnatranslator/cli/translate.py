"""Translate a DNA sequence (literal or file) and print the protein.

    # Literal sequence, standard code
    python -m dnatranslator.cli.translate ATGCCC

    # File input (plain text or single-record FASTA), mitochondrial code
    dnatranslate cdna.txt --bundled vertebrate_mitochondrial

    # NCBI genetic code via Biopython, or a custom table file
    dnatranslate cdna.fa --genetic-code 11
    dnatranslate cdna.fa --table my_code.tsv --width 80 --output protein.txt

Exit codes: 0 ok, 1 bad input sequence, 2 bad codon table, 3 cannot write output.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from dnatranslator.tools.codon_table import BUNDLED_TABLES, CodonTable, CodonTableManager
from dnatranslator.tools.errors import TableError, TranslationError
from dnatranslator.tools.sequence_source import read_sequence
from dnatranslator.tools.translate import LINE_WIDTH, translate, write_lines

EXIT_INPUT_ERROR = 1
EXIT_TABLE_ERROR = 2
EXIT_OUTPUT_ERROR = 3


def _select_table(args: argparse.Namespace, manager: CodonTableManager) -> CodonTable:
    if args.table:
        return manager.get_file(args.table)
    if args.genetic_code is not None:
        return manager.get_ncbi(args.genetic_code)
    return manager.get_bundled(args.bundled)


def _fail(message: str, code: int) -> int:
    print(f"ERROR: {message}", file=sys.stderr)
    return code


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="dnatranslate",
        description="Convert a DNA sequence into a protein sequence",
    )
    ap.add_argument("input", help="DNA sequence, or path to a text/FASTA file holding one")

    grp = ap.add_mutually_exclusive_group()
    grp.add_argument("--table", help="Codon table file (.tsv/.txt/.npy/.npz)")
    grp.add_argument("--genetic-code", type=int, default=None,
                     help="NCBI genetic code ID (via Biopython)")
    grp.add_argument("--bundled", default="standard", choices=sorted(BUNDLED_TABLES),
                     help="Bundled codon table (default: standard)")

    ap.add_argument("--width", type=int, default=LINE_WIDTH,
                    help=f"Residues per output line (default: {LINE_WIDTH})")
    ap.add_argument("--output", help="Write protein here instead of stdout")
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return ap


def main(argv: Optional[list[str]] = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)
    if args.width < 1:
        ap.error("--width must be >= 1")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="[%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )

    manager = CodonTableManager()
    try:
        table = _select_table(args, manager)
    except (TableError, OSError, ValueError) as exc:
        return _fail(str(exc), EXIT_TABLE_ERROR)

    try:
        raw = read_sequence(args.input)
        result = translate(raw, table)
    except (TranslationError, OSError, ValueError) as exc:
        # ValueError also covers UnicodeDecodeError and multi-record FASTA
        return _fail(str(exc), EXIT_INPUT_ERROR)

    if args.output:
        out_path = Path(args.output)
        try:
            out_path.parent.mkdir(parents=True, exist_ok=True)
            with open(out_path, "w") as fh:
                write_lines(result, fh, width=args.width)
        except OSError as exc:
            return _fail(f"Cannot write {out_path}: {exc}", EXIT_OUTPUT_ERROR)
        print(f"Wrote {result.n_residues} residues to {out_path}", file=sys.stderr)
    else:
        write_lines(result, width=args.width)
    return 0


if __name__ == "__main__":
    sys.exit(main())
