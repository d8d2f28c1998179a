"""dnatranslate command line."""

import pytest

from dnatranslator.cli.translate import (
    EXIT_INPUT_ERROR,
    EXIT_OUTPUT_ERROR,
    EXIT_TABLE_ERROR,
    main,
)


def test_literal_sequence(capsys) -> None:
    assert main(["ATGCCC"]) == 0
    assert capsys.readouterr().out == "MP\n"


def test_file_input_wraps_at_60(tmp_path, capsys) -> None:
    path = tmp_path / "cdna.txt"
    path.write_text("atg" * 125 + "\n")
    assert main([str(path)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert [len(line) for line in lines] == [60, 60, 5]


def test_custom_width_and_output_file(tmp_path, capsys) -> None:
    out = tmp_path / "out" / "protein.txt"
    assert main(["ATGCCCATG", "--width", "2", "--output", str(out)]) == 0
    assert out.read_text() == "MP\nM\n"
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Wrote 3 residues" in captured.err


def test_bundled_mitochondrial_table(capsys) -> None:
    assert main(["ATGTGA", "--bundled", "vertebrate_mitochondrial"]) == 0
    assert capsys.readouterr().out == "MW\n"


def test_ncbi_genetic_code(capsys) -> None:
    assert main(["ATGTGA", "--genetic-code", "2"]) == 0
    assert capsys.readouterr().out == "MW\n"


@pytest.mark.parametrize("seq", ["", "ATGC", "ATGXCC"])
def test_bad_input_exit_code(capsys, seq) -> None:
    assert main([seq]) == EXIT_INPUT_ERROR
    assert capsys.readouterr().err.startswith("ERROR: ")


def test_missing_input_file(tmp_path, capsys) -> None:
    assert main([str(tmp_path / "nope.txt")]) == EXIT_INPUT_ERROR
    assert "not found" in capsys.readouterr().err


def test_unknown_codon_exit_code(tmp_path, capsys) -> None:
    table = tmp_path / "partial.tsv"
    table.write_text("A T G M\n")
    assert main(["ATGTAG", "--table", str(table)]) == EXIT_INPUT_ERROR
    assert "TAG" in capsys.readouterr().err


def test_bad_table_exit_code(tmp_path, capsys) -> None:
    table = tmp_path / "dup.tsv"
    table.write_text("A T G M\nA T G X\n")
    assert main(["ATG", "--table", str(table)]) == EXIT_TABLE_ERROR
    assert "Ambiguous" in capsys.readouterr().err


def test_unknown_genetic_code_exit_code(capsys) -> None:
    assert main(["ATG", "--genetic-code", "999"]) == EXIT_TABLE_ERROR


def test_table_options_are_exclusive(tmp_path) -> None:
    with pytest.raises(SystemExit):
        main(["ATG", "--genetic-code", "1", "--bundled", "standard"])


def test_binary_input_file(tmp_path, capsys) -> None:
    path = tmp_path / "binary.txt"
    path.write_bytes(b"ATG\xff\xfeCCC\n")
    assert main([str(path)]) == EXIT_INPUT_ERROR
    assert capsys.readouterr().err.startswith("ERROR: ")


def test_multi_record_fasta_input(tmp_path, capsys) -> None:
    path = tmp_path / "two.fa"
    path.write_text(">a\nATG\n>b\nCCC\n")
    assert main([str(path)]) == EXIT_INPUT_ERROR
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Multiple FASTA records" in captured.err


def test_directory_input(tmp_path, capsys) -> None:
    assert main([str(tmp_path)]) == EXIT_INPUT_ERROR
    assert "Not a regular file" in capsys.readouterr().err


def test_unwritable_output(tmp_path, capsys) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("")
    out = blocker / "protein.txt"
    assert main(["ATGCCC", "--output", str(out)]) == EXIT_OUTPUT_ERROR
    assert "Cannot write" in capsys.readouterr().err


def test_dual_meaning_genetic_code(capsys) -> None:
    assert main(["ATGTGA", "--genetic-code", "27"]) == 0
    assert capsys.readouterr().out == "MW\n"
