# Copyright 2026, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
"""Trie vertex with one child slot per lowercase latin letter"""
from __future__ import annotations

from typing import Final

import string

ALPHABET_SIZE: Final = 26
VOWELS: Final = "aeiou"
LETTERS: Final = frozenset(string.ascii_letters)


def is_letter(c: str) -> bool:
    return c in LETTERS


def slot_index(c: str) -> int:
    if c not in LETTERS:
        raise ValueError("Not a latin letter: {!r}".format(c))
    return ord(c.lower()) - ord("a")


class Node:
    __slots__ = ("children", "is_endpoint", "word")

    def __init__(self, word: str = "") -> None:
        self.children: list[Node | None] = [None] * ALPHABET_SIZE
        self.is_endpoint = False
        self.word = word

    def get_child(self, c: str) -> Node | None:
        return self.children[slot_index(c)]

    def set_child(self, c: str, node: Node | None) -> None:
        self.children[slot_index(c)] = node

    def __repr__(self) -> str:
        return "Node(word={!r}, is_endpoint={!r})".format(self.word, self.is_endpoint)
