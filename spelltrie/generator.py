# Copyright 2026, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
"""Random misspellings of dictionary words, for exercising the corrector"""
from __future__ import annotations

from .node import VOWELS
from typing import Iterator, Sequence

import random

DEFAULT_COUNT = 50
TERMINATOR = "-1"


def misspell(word: str, rng: random.Random) -> str:
    """Return `word` with some vowels swapped, consonants doubled or uppercased.

    Per character a value 0-9 is drawn: a vowel is replaced by a random vowel
    on 0-2; any other character is doubled on 4-5 and uppercased on 8-9.
    """
    out = []
    for c in word:
        roll = rng.randrange(10)
        if c in VOWELS:
            out.append(rng.choice(VOWELS) if roll < 3 else c)
        elif 3 < roll < 6:
            out.append(c + c)
        elif roll > 7:
            out.append(c.upper())
        else:
            out.append(c)
    return "".join(out)


def generate_misspellings(
    words: Sequence[str], count: int = DEFAULT_COUNT, rng: random.Random | None = None
) -> Iterator[str]:
    if not words:
        return
    rng = rng or random.Random()
    for _ in range(count):
        yield misspell(rng.choice(words), rng)
