# Copyright 2026, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
"""Dictionary trie with known-error fuzzy correction

Corrections cover two typo classes only: a wrong vowel, and an extra copy of
a doubled letter ("boook" -> "book"). A missing letter ("bok") is never
restored and consonant mistakes are not corrected at all.
"""
from __future__ import annotations

from .node import is_letter, Node, VOWELS
from typing import Iterable

import logging


class Trie:
    """Prefix tree over the 26 lowercase latin letters.

    The tree is built by sequential `insert` calls and is read-only
    afterwards; concurrent readers need no locking once loading is done.
    """

    def __init__(self, words: Iterable[str] = ()) -> None:
        self.log = logging.getLogger("spelltrie.trie")
        self.root = Node()
        self.node_count = 0
        for word in words:
            self.insert(word)

    def insert(self, word: str) -> None:
        """Add `word`, dropping characters that are not latin letters"""
        node = self.root
        prefix = ""
        for c in word:
            if not is_letter(c):
                continue
            c = c.lower()
            prefix += c
            child = node.get_child(c)
            if child is None:
                child = Node()
                node.set_child(c, child)
                self.node_count += 1
            child.word = prefix
            node = child
        if node is not self.root:
            node.is_endpoint = True

    def exact_lookup(self, word: str) -> bool:
        node = self.root
        for c in word:
            if not is_letter(c):
                continue
            child = node.get_child(c)
            if child is None:
                return False
            node = child
        return node.is_endpoint

    def correct(self, word: str) -> set[str]:
        """Return the dictionary words `word` may have been meant as.

        An exact match short-circuits to a single-element set; otherwise the
        result is every word reachable through vowel substitution and
        doubled-letter collapse, possibly empty.
        """
        word = word.lower()
        if self.exact_lookup(word):
            return {word}

        results: set[str] = set()
        self._fuzzy_search(word, results)
        self.log.debug("%d correction(s) for %r", len(results), word)
        return results

    def _fuzzy_search(self, word: str, results: set[str]) -> None:
        # explicit stack of (position in word, node), depth-first
        stack: list[tuple[int, Node]] = [(0, self.root)]
        length = len(word)
        while stack:
            pos, node = stack.pop()
            if pos == length:
                if node.is_endpoint:
                    results.add(node.word)
                continue

            c = word[pos]
            if not is_letter(c):
                # skipped the same way insert and exact_lookup skip it
                stack.append((pos + 1, node))
                continue

            child = node.get_child(c)
            if child is not None:
                stack.append((pos + 1, child))
                if pos + 1 < length and word[pos + 1] == c:
                    # typed letter doubled by mistake: consume both, descend once
                    stack.append((pos + 2, child))

            if c in VOWELS:
                for v in VOWELS:
                    substitute = node.get_child(v)
                    if v != c and substitute is not None:
                        stack.append((pos + 1, substitute))
