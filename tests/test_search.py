import io

import pytest

from tweetsearch.index import TweetIndex
from tweetsearch.intset import IntSet
from tweetsearch.search import (
    ids_for_word,
    load_corpus,
    main,
    matching_lines,
    run_query,
)

CORPUS = (
    "1,0,Hello world\n"
    "2,5,Goodbye world, again\n"
    "3,1,hello there\n"
    "bad line\n"
)


@pytest.fixture
def corpus(tmp_path):
    path = tmp_path / "corpus.csv"
    path.write_text(CORPUS, encoding="utf-8")
    return path


@pytest.fixture
def index(corpus):
    idx = TweetIndex(300)
    load_corpus(idx, corpus)
    return idx


def test_load_corpus_counts_valid_lines(corpus):
    idx = TweetIndex(300)
    assert load_corpus(idx, corpus) == 3
    assert len(idx) == 3


def test_load_corpus_stops_when_table_full(corpus):
    idx = TweetIndex(2)
    assert load_corpus(idx, corpus) == 2


def test_load_corpus_missing_file(tmp_path):
    with pytest.raises(OSError):
        load_corpus(TweetIndex(10), tmp_path / "missing.csv")


def test_load_corpus_whitespace_rules(tmp_path):
    path = tmp_path / "c.csv"
    path.write_text(" 7, 8,foo\n9 ,8,bar\n", encoding="utf-8")
    idx = TweetIndex(10)
    assert load_corpus(idx, path) == 1
    assert [t.id for t in idx] == [7]


def test_load_corpus_truncates_text(tmp_path):
    path = tmp_path / "c.csv"
    path.write_text("1,0," + "a" * 300 + "\n", encoding="utf-8")
    idx = TweetIndex(10)
    load_corpus(idx, path)
    assert len(next(iter(idx)).text) == 255


def test_ids_for_word_is_case_insensitive(index):
    assert list(ids_for_word(index, "HELLO")) == [1, 3]
    assert list(ids_for_word(index, "world")) == [1, 2]
    assert len(ids_for_word(index, "nothing")) == 0


def test_matching_lines_keeps_commas_in_text(corpus):
    assert list(matching_lines(IntSet([2]), corpus)) == [("2", "Goodbye world, again")]


def test_matching_lines_in_file_order(corpus):
    ids = [id_field for id_field, _ in matching_lines(IntSet([3, 1]), corpus)]
    assert ids == ["1", "3"]


def test_run_query_single_word(index, corpus):
    out = io.StringIO()
    result = run_query(index, "hello", corpus, out)
    assert list(result) == [1, 3]
    text = out.getvalue()
    assert "ID: 1 -> Texto: Hello world" in text
    assert "ID: 3 -> Texto: hello there" in text


def test_run_query_and(index, corpus):
    out = io.StringIO()
    assert list(run_query(index, "hello AND world", corpus, out)) == [1]
    assert "Resultado da interseccao:" in out.getvalue()


def test_run_query_or(index, corpus):
    assert list(run_query(index, "hello OR world", corpus, io.StringIO())) == [1, 2, 3]


def test_run_query_not(index, corpus):
    out = io.StringIO()
    assert list(run_query(index, "world NOT hello", corpus, out)) == [2]
    assert "ID: 2 -> Texto: Goodbye world, again" in out.getvalue()


def test_run_query_invalid_operator(index, corpus):
    out = io.StringIO()
    assert run_query(index, "hello XOR world", corpus, out) is None
    assert "Operador 'XOR'" in out.getvalue()


def test_run_query_missing_corpus(index, tmp_path):
    out = io.StringIO()
    missing = tmp_path / "gone.csv"
    result = run_query(index, "hello", missing, out)
    assert list(result) == [1, 3]
    assert f"Erro ao abrir o arquivo '{missing}'." in out.getvalue()


def test_main_runs_queries_until_sair(corpus, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("there\nsair\nhello\n"))
    assert main(["--corpus", str(corpus)]) == 0
    text = capsys.readouterr().out
    assert "ID: 3 -> Texto: hello there" in text
    assert "Fechando buscador..." in text
    assert "ID: 1 -> Texto" not in text


def test_main_stops_at_end_of_input(corpus, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main(["--corpus", str(corpus)]) == 0
    assert "Fechando buscador..." not in capsys.readouterr().out


def test_main_reports_missing_corpus(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("sair\n"))
    missing = tmp_path / "none.csv"
    assert main(["--corpus", str(missing)]) == 0
    assert f"Erro ao abrir o arquivo '{missing}'." in capsys.readouterr().out


def test_main_rejects_bad_table_size(corpus, capsys):
    assert main(["--corpus", str(corpus), "--table-size", "0"]) == 1
    assert "Erro ao criar a tabela hash." in capsys.readouterr().out