import io
import sys

import pytest

import build_index
from invindex.corpus import SAMPLE_DOCUMENTS
from invindex.index_builder import build_index_from_documents
from invindex.search_cli import format_result, main, run_search_loop


@pytest.fixture
def sample_index():
    index, _stats = build_index_from_documents(SAMPLE_DOCUMENTS)
    return index


def test_format_result_found_and_missing(sample_index):
    assert format_result(sample_index, "Romans") == (
        "--- Searching for: 'Romans' (Stemmed: 'roman') ---\n"
        "Found in 1 documents: [1]"
    )
    assert format_result(sample_index, "nonexistent").endswith("Term not found in index.")


def test_search_loop_stops_on_empty_line(sample_index):
    stdin = io.StringIO("Caesar\n\nRomans\n")
    stdout = io.StringIO()
    run_search_loop(sample_index, stdin=stdin, stdout=stdout)
    out = stdout.getvalue()
    assert "Found in 2 documents: [2, 5]" in out
    assert "'Romans'" not in out


def test_search_loop_stops_on_eof(sample_index):
    stdout = io.StringIO()
    run_search_loop(sample_index, stdin=io.StringIO("brutus\n"), stdout=stdout)
    assert "Found in 1 documents: [5]" in stdout.getvalue()


def test_main_with_queries(capsys):
    main(["--sample", "--log-level", "WARNING", "Romans", "nonexistent"])
    out = capsys.readouterr().out
    assert "Indexed 5 documents" in out
    assert "Found in 1 documents: [1]" in out
    assert "Term not found in index." in out


def test_main_with_data_directory(tmp_path, capsys):
    (tmp_path / "one.txt").write_text("Friends and Romans", encoding="utf-8")
    (tmp_path / "two.txt").write_text("Roman roads", encoding="utf-8")
    main(["--data", str(tmp_path), "--log-level", "WARNING", "roman"])
    assert "Found in 2 documents: [1, 2]" in capsys.readouterr().out


def test_main_missing_data_directory_uses_sample(tmp_path, capsys, caplog):
    main(["--data", str(tmp_path / "missing"), "--log-level", "WARNING", "Brutus"])
    out = capsys.readouterr().out
    assert "Indexed 5 documents" in out
    assert "Found in 1 documents: [5]" in out
    assert "using the sample documents" in caplog.text


def test_build_index_report(monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", ["build_index.py", "--sample", "--log-level", "WARNING", "--prefix", "ca"])
    build_index.main()
    out = capsys.readouterr().out
    assert "| Number of indexed documents     | 5 |" in out
    assert "caesar" in out
    assert "roman" not in out.split("Dictionary")[1].split("Documents:")[0]


def test_build_index_report_missing_data_directory(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr(
        sys, "argv", ["build_index.py", "--data", str(tmp_path / "missing"), "--log-level", "WARNING"]
    )
    build_index.main()
    out = capsys.readouterr().out
    assert "INDEX ANALYTICS" in out
    assert "| Number of indexed documents     | 5 |" in out


def test_build_index_report_rejects_negative_top(monkeypatch):
    monkeypatch.setattr(sys, "argv", ["build_index.py", "--sample", "--top", "-1"])
    with pytest.raises(SystemExit) as exc:
        build_index.main()
    assert exc.value.code == 2


def test_build_index_report_top_zero(monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", ["build_index.py", "--sample", "--log-level", "WARNING", "--top", "0"])
    build_index.main()
    assert "Dictionary (0 of " in capsys.readouterr().out
