# Copyright 2026, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from .node import ALPHABET_SIZE, Node, VOWELS
from .trie import Trie

__all__ = ["ALPHABET_SIZE", "Node", "Trie", "VOWELS"]
