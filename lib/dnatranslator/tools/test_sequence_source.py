"""Input-source resolution: literal sequence vs file."""

import pytest

from dnatranslator.tools.sequence_source import read_sequence


def test_literal_sequence_passes_through() -> None:
    assert read_sequence("atg ccc") == "atg ccc"


def test_long_literal_is_not_treated_as_path() -> None:
    dna = "ATG" * 2000
    assert read_sequence(dna) == dna


def test_plain_text_file(tmp_path) -> None:
    path = tmp_path / "cdna.txt"
    path.write_text("atgccc\nGGG\n")
    assert read_sequence(str(path)) == "atgccc\nGGG\n"


def test_fasta_headers_and_comments_dropped(tmp_path) -> None:
    path = tmp_path / "gene.fa"
    path.write_text(">SBDS cDNA\n;comment\nATGCCC\nTAA\n")
    assert read_sequence(str(path)) == "ATGCCC\nTAA\n"


@pytest.mark.parametrize("token", ["missing.txt", "cdna.fasta", "data/seq"])
def test_missing_file_like_token(tmp_path, monkeypatch, token) -> None:
    monkeypatch.chdir(tmp_path)
    with pytest.raises(FileNotFoundError):
        read_sequence(token)


def test_multi_record_fasta_refused(tmp_path) -> None:
    path = tmp_path / "two.fa"
    path.write_text(">a\nATG\n>b\nCCC\n")
    with pytest.raises(ValueError, match="Multiple FASTA records"):
        read_sequence(str(path))


def test_directory_is_not_a_sequence_file(tmp_path) -> None:
    with pytest.raises(IsADirectoryError, match="Not a regular file"):
        read_sequence(str(tmp_path))


def test_non_utf8_file(tmp_path) -> None:
    path = tmp_path / "binary.txt"
    path.write_bytes(b"ATG\xff\xfeCCC\n")
    with pytest.raises(UnicodeDecodeError):
        read_sequence(str(path))
