"""Load a tweet corpus and answer word queries combined with AND, OR and NOT."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Iterator
from os import PathLike
from typing import TextIO

from tweetsearch.index import Tweet, TweetIndex
from tweetsearch.intset import IntSet, evaluate

DEFAULT_CORPUS = "corpus.csv"
DEFAULT_TABLE_SIZE = 300
MAX_QUERY_WORD = 49

_SPACE = " \t\n\v\f\r"
_CORPUS_LINE = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+),[ \t\n\v\f\r]*[+-]?[0-9]+,([^\n]{1,255})")
_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")
_HEADERS = {
    "AND": "Resultado da interseccao:",
    "OR": "Resultado da uniao:",
    "NOT": "Resultado da diferenca:",
}
_ASCII_LOWER = str.maketrans("ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz")

Path = str | PathLike[str]


def _lines(path: Path) -> Iterator[str]:
    with open(path, encoding="utf-8", errors="replace", newline="\n") as handle:
        yield from handle


def load_corpus(index: TweetIndex, path: Path) -> int:
    """Insert every 'id,number,text' line of path into index; return how many went in."""
    loaded = 0
    for line in _lines(path):
        match = _CORPUS_LINE.match(line)
        if match and index.insert(Tweet(int(match.group(1)), match.group(2))):
            loaded += 1
    return loaded


def ids_for_word(index: TweetIndex, word: str) -> IntSet:
    """Return the ids of tweets containing word, compared case-insensitively."""
    return IntSet(index.search(word[:MAX_QUERY_WORD].translate(_ASCII_LOWER)))


def _strtok(line: str, pos: int, delims: str) -> tuple[str | None, int]:
    end_of_line = len(line)
    while pos < end_of_line and line[pos] in delims:
        pos += 1
    if pos >= end_of_line:
        return None, end_of_line
    end = pos
    while end < end_of_line and line[end] not in delims:
        end += 1
    return line[pos:end], min(end + 1, end_of_line)


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def matching_lines(ids: IntSet, path: Path) -> Iterator[tuple[str, str]]:
    """Yield (id field, text) for each corpus line whose id is in ids."""
    for line in _lines(path):
        id_field, pos = _strtok(line, 0, ",")
        _, pos = _strtok(line, pos, ",")
        text, _ = _strtok(line, pos, "\n")
        if id_field is not None and text is not None and _atoi(id_field) in ids:
            yield id_field, text


def _scan_words(query: str, widths: tuple[int, ...]) -> list[str]:
    fields: list[str] = []
    pos = 0
    for width in widths:
        while pos < len(query) and query[pos] in _SPACE:
            pos += 1
        if pos >= len(query):
            break
        end = pos
        while end < len(query) and end - pos < width and query[end] not in _SPACE:
            end += 1
        fields.append(query[pos:end])
        pos = end
    return fields


def _print_matches(ids: IntSet, corpus_path: Path, out: TextIO) -> None:
    try:
        for id_field, text in matching_lines(ids, corpus_path):
            print(f"ID: {id_field} -> Texto: {text}", file=out)
    except OSError:
        print(f"Erro ao abrir o arquivo '{corpus_path}'.", file=out)


def run_query(
    index: TweetIndex,
    query: str,
    corpus_path: Path = DEFAULT_CORPUS,
    out: TextIO | None = None,
) -> IntSet | None:
    """Answer 'word' or 'word1 OP word2', printing matching corpus lines.

    Returns the resulting id set, or None when the query is malformed.
    """
    out = sys.stdout if out is None else out
    fields = _scan_words(query, (MAX_QUERY_WORD, 3, MAX_QUERY_WORD))
    if len(fields) == 3:
        first, operator, second = fields
        print(f"Consulta com duas palavras detectada: '{first} {operator} {second}'", file=out)
        left = ids_for_word(index, first)
        right = ids_for_word(index, second)
        header = _HEADERS.get(operator)
        if header is None:
            print(f"Operador '{operator}' inválido. Use 'AND', 'OR' ou 'NOT'.", file=out)
            return None
        result = evaluate(left, operator, right)
        print(header, file=out)
    elif len(fields) == 1:
        print(f"Consulta com uma palavra detectada: '{fields[0]}'", file=out)
        result = ids_for_word(index, fields[0])
        print("Resultado da pesquisa unica:", file=out)
    else:
        print(
            "Formato de consulta inválido. Use 'palavra' ou "
            "'palavra1 OPERADOR palavra2' (OP = AND, OR, NOT).",
            file=out,
        )
        return None
    _print_matches(result, corpus_path, out)
    return result


def main(argv: list[str] | None = None) -> int:
    """Load the corpus and answer queries read from standard input until 'sair'."""
    parser = argparse.ArgumentParser(prog="tweetsearch", description="Search a tweet corpus by words.")
    parser.add_argument("--corpus", default=DEFAULT_CORPUS, help="CSV file of id,number,text lines")
    parser.add_argument("--table-size", type=int, default=DEFAULT_TABLE_SIZE, help="hash table size")
    args = parser.parse_args(argv)

    try:
        index = TweetIndex(args.table_size)
    except ValueError:
        print("Erro ao criar a tabela hash.")
        return 1

    try:
        load_corpus(index, args.corpus)
    except OSError:
        print(f"Erro ao abrir o arquivo '{args.corpus}'.")

    while True:
        print(
            "\nDigite 'sair' ou insira sua consulta (ex: palavra, ou palavra1 AND palavra2): ",
            end="",
            flush=True,
        )
        line = sys.stdin.readline()
        if not line:
            break
        query = line.split("\n", 1)[0]
        if query == "sair":
            print("Fechando buscador...")
            break
        run_query(index, query, args.corpus)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())