"""Hash-table index of tweets, searchable by the words they contain."""

from __future__ import annotations

import string
from collections.abc import Iterator
from dataclasses import dataclass, field
from os import PathLike

MAX_IDS = 100
MAX_WORDS = 256
MAX_WORD_LENGTH = 19

_ASCII_LETTERS = frozenset(string.ascii_letters)


def string_hash(text: str) -> int:
    """Hash a string: start at 7, multiply by 31 and add each byte, 32-bit wrap.

    Bytes are taken from the UTF-8 encoding and treated as signed; the result
    is masked to a non-negative 31-bit value.
    """
    value = 7
    for byte in text.encode("utf-8"):
        signed = byte - 256 if byte >= 128 else byte
        value = (31 * value + signed) & 0xFFFFFFFF
    return value & 0x7FFFFFFF


def extract_words(text: str) -> list[str]:
    """Split text into lower-case runs of ASCII letters.

    Each word keeps at most 19 letters and at most 256 words are returned.
    """
    words: list[str] = []
    current: list[str] = []
    for char in text:
        if len(words) >= MAX_WORDS:
            break
        if char in _ASCII_LETTERS:
            if len(current) < MAX_WORD_LENGTH:
                current.append(char.lower())
        elif current:
            words.append("".join(current))
            current = []
    if current and len(words) < MAX_WORDS:
        words.append("".join(current))
    return words


@dataclass
class Tweet:
    """A tweet with its identifier, text and the words taken from the text."""

    id: int
    text: str
    words: list[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self.words = extract_words(self.text)


class TweetIndex:
    """A fixed-size, separately chained hash table of tweets keyed by their text."""

    def __init__(self, table_size: int = 300) -> None:
        if table_size < 1:
            raise ValueError("table size must be positive")
        self.table_size = table_size
        self._buckets: list[list[Tweet]] = [[] for _ in range(table_size)]
        self._count = 0

    def insert(self, tweet: Tweet) -> bool:
        """Store a tweet; return False once the table holds table_size tweets."""
        if self._count >= self.table_size:
            return False
        self._buckets[string_hash(tweet.text) % self.table_size].append(tweet)
        self._count += 1
        return True

    def search(self, word: str) -> list[int]:
        """Return the distinct ids of tweets containing word, at most 100.

        The comparison is exact; stored words are lower case.
        """
        found: list[int] = []
        seen: set[int] = set()
        for tweet in self:
            if len(found) >= MAX_IDS:
                break
            if tweet.id not in seen and word in tweet.words:
                seen.add(tweet.id)
                found.append(tweet.id)
        return found

    def export_csv(self, path: str | PathLike[str]) -> None:
        """Write one 'word,id' line for every word of every stored tweet."""
        with open(path, "w", encoding="utf-8", newline="\n") as handle:
            for tweet in self:
                for word in tweet.words:
                    handle.write(f"{word},{tweet.id}\n")

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Tweet]:
        """Yield tweets bucket by bucket, newest first within a bucket."""
        for bucket in self._buckets:
            yield from reversed(bucket)