# tweetsearch

A small search tool for a corpus of short texts stored as CSV. Each line of
the corpus has the form

```
id,number,text
```

The second field is read but ignored. The texts are split into lower-case
words (runs of ASCII letters, each cut to 19 letters), indexed, and queried
with a word on its own or with two words joined by `AND`, `OR` or `NOT`.

## Installing

```
pip install .
```

## Command line

Run the interactive search from a directory that holds `corpus.csv`:

```
tweetsearch
```

Options:

- `--corpus PATH` reads another CSV file instead of `corpus.csv`;
- `--table-size N` sets the size of the hash table (default 300).

At the prompt, type a query:

- `coffee` lists every line whose text has the word *coffee*;
- `coffee AND morning` lists lines with both words;
- `coffee OR tea` lists lines with either word;
- `coffee NOT milk` lists lines with the first word but not the second.

Each matching line is printed as `ID: <id> -> Texto: <text>`. Words are
matched without regard to case. Type `sair` (or end the input) to quit. The
prompt and messages are in Portuguese.

## Library use

```python
from tweetsearch.index import Tweet, TweetIndex
from tweetsearch.intset import IntSet, evaluate
from tweetsearch.search import load_corpus, ids_for_word, run_query

index = TweetIndex(300)
load_corpus(index, "corpus.csv")

coffee = ids_for_word(index, "Coffee")
tea = ids_for_word(index, "tea")
print(evaluate(coffee, "OR", tea).format())

result = run_query(index, "coffee AND tea", "corpus.csv")
```

- `tweetsearch.index.TweetIndex` is a chained hash table of `Tweet` objects.
  `insert` stores a tweet, `search(word)` returns the distinct ids of tweets
  containing that exact (lower-case) word, and `export_csv(path)` writes one
  `word,id` line per word of every stored tweet. `string_hash` and
  `extract_words` are available on their own.
- `tweetsearch.intset.IntSet` is an ordered set of integers kept in a
  balanced tree (`tweetsearch.avl.AVLTree`); it supports membership,
  iteration in ascending order, `union`, `intersection`, `difference`
  (also `|`, `&`, `-`) and `format()`. `evaluate(left, op, right)` applies
  `AND`, `OR` or `NOT` and raises `ValueError` for any other operator.
- `tweetsearch.search` has `load_corpus`, `ids_for_word`, `matching_lines`,
  `run_query` and `main`.

## Limits

- The index holds at most `table_size` tweets; further lines of the corpus
  are skipped.
- A word search returns at most 100 ids.
- A query has one word or two words with one operator; longer expressions
  are not parsed.
- Nothing is stored between runs: the index is rebuilt from the CSV file
  each time, and matching lines are read again from that file.

## Running the tests

```
pip install ".[test]"
pytest
```