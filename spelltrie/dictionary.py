# Copyright 2026, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
"""Load word lists from local files or http(s) URLs into a Trie"""
from __future__ import annotations

from .node import LETTERS
from .session import get_requests_session
from .trie import Trie
from typing import Iterable, Iterator, NamedTuple

import datetime
import logging
import requests
import time

log = logging.getLogger("spelltrie.dictionary")


class DictionaryError(Exception):
    """Dictionary could not be loaded"""


class LoadStats(NamedTuple):
    source: str
    words: int
    nodes: int
    elapsed: datetime.timedelta


def is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def is_valid_query(text: str) -> bool:
    """True if `text` is a non-empty run of latin letters"""
    return bool(text) and all(c in LETTERS for c in text)


def iter_words(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        yield from line.split()


def _read_file(path: str) -> list[str]:
    try:
        with open(path, encoding="utf-8", errors="replace") as fp:
            return fp.read().splitlines()
    except OSError as ex:
        raise DictionaryError("Unable to open {}: {}".format(path, ex.strerror or ex)) from ex


def _fetch_url(url: str, timeout: float | None) -> list[str]:
    session = get_requests_session(timeout=timeout)
    try:
        response = session.get(url)
    except requests.exceptions.RequestException as ex:
        raise DictionaryError("Unable to fetch {}: {}".format(url, ex)) from ex
    if not response.ok:
        raise DictionaryError("Unable to fetch {}: HTTP {} {}".format(url, response.status_code, response.reason))
    if not response.encoding or response.encoding.lower() == "iso-8859-1":
        response.encoding = "utf-8"
    log.debug("fetched %d bytes from %s", len(response.content), url)
    return response.text.splitlines()


def read_words(source: str, timeout: float | None = None) -> list[str]:
    """Read the whitespace separated words of a local file or an http(s) URL"""
    lines = _fetch_url(source, timeout) if is_url(source) else _read_file(source)
    return list(iter_words(lines))


def load_words(words: Iterable[str], source: str, trie: Trie | None = None) -> tuple[Trie, LoadStats]:
    """Insert `words` into `trie` (a new one by default), lowercased."""
    if trie is None:
        trie = Trie()

    start = time.perf_counter()
    count = 0
    for word in words:
        trie.insert(word.lower())
        count += 1
    elapsed = datetime.timedelta(seconds=time.perf_counter() - start)

    stats = LoadStats(source=source, words=count, nodes=trie.node_count, elapsed=elapsed)
    log.debug("loaded %d word(s) into %d node(s) from %s in %s", stats.words, stats.nodes, source, elapsed)
    return trie, stats


def load_dictionary(source: str, trie: Trie | None = None, timeout: float | None = None) -> tuple[Trie, LoadStats]:
    """Insert every word of `source` into `trie` (a new one by default).

    Words are whitespace separated, normally one per line, and lowercased
    before insertion.
    """
    return load_words(read_words(source, timeout=timeout), source, trie=trie)
