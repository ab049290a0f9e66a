# Copyright 2026, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from __future__ import annotations

from . import argx, envdefault
from .cliarg import arg
from .dictionary import is_valid_query, load_words, LoadStats, read_words
from .generator import generate_misspellings, TERMINATOR
from .trie import Trie
from argparse import ArgumentParser
from functools import cached_property
from typing import Any, Iterator, Protocol

import datetime
import random
import time

CHECK_LAYOUT = [["word", "status", "elapsed"], "suggestions"]
STATS_LAYOUT = [["source", "words", "nodes", "elapsed"]]
VERIFY_LAYOUT = [["generated", "exact", "corrected", "no_suggestions", "invalid", "elapsed"]]
QUIT_WORD = "-1"
INVALID_INPUT = "Invalid input! Please try again with a word containing only [a-z]."


class DictionaryReader(Protocol):
    def __call__(self, source: str, timeout: float | None = None) -> list[str]:
        ...


def classify(word: str, suggestions: set[str]) -> str:
    if suggestions == {word.lower()}:
        return "exact"
    return "corrected" if suggestions else "unknown"


class SpellTrieCLI(argx.CommandLineTool):
    load_stats: LoadStats | None = None

    def __init__(self, reader: DictionaryReader = read_words):
        argx.CommandLineTool.__init__(self, "spelltrie")
        self.reader = reader

    def add_args(self, parser: ArgumentParser) -> None:
        parser.add_argument(
            "--dictionary",
            help="Word list file or http(s) URL, one word per line [SPELLTRIE_DICTIONARY], default {!r}".format(
                envdefault.SPELLTRIE_DICTIONARY
            ),
            default=None,
            metavar="PATH_OR_URL",
        )
        parser.add_argument(
            "--request-timeout",
            type=float,
            default=None,
            help="Wait for up to N seconds when fetching a dictionary URL [SPELLTRIE_REQUEST_TIMEOUT]",
        )

    def get_dictionary_source(self) -> str:
        """Return dictionary given as cmdline argument, from the config file or the environment"""
        if getattr(self.args, "dictionary", None):
            return self.args.dictionary
        return self.config.get("dictionary") or envdefault.SPELLTRIE_DICTIONARY

    def get_request_timeout(self) -> float | None:
        value = getattr(self.args, "request_timeout", None)
        if value is None:
            value = self.config.get("request_timeout", envdefault.SPELLTRIE_REQUEST_TIMEOUT)
        if value is None or value == "":
            return None
        try:
            return float(value)
        except ValueError as ex:
            raise argx.UserError("Invalid request timeout {!r}".format(value)) from ex

    @cached_property
    def word_list(self) -> list[str]:
        return self.reader(self.get_dictionary_source(), timeout=self.get_request_timeout())

    @cached_property
    def dictionary(self) -> Trie:
        trie, self.load_stats = load_words(self.word_list, self.get_dictionary_source())
        return trie

    def _correct(self, word: str) -> dict[str, Any]:
        start = time.perf_counter()
        suggestions = self.dictionary.correct(word)
        elapsed = datetime.timedelta(seconds=time.perf_counter() - start)
        self.log.debug("corrected %r in %s", word, elapsed)
        return {
            "word": word,
            "status": classify(word, suggestions),
            "suggestions": sorted(suggestions),
            "elapsed": elapsed,
        }

    def _get_count(self) -> int:
        if self.args.count < 1:
            raise argx.UserError("Count must be positive, got {}".format(self.args.count))
        return self.args.count

    def _misspellings(self) -> list[str]:
        words = self.word_list
        if not words:
            raise argx.UserError("Dictionary {!r} contains no words".format(self.get_dictionary_source()))
        return list(generate_misspellings(words, count=self._get_count(), rng=random.Random(self.args.seed)))

    @arg.json
    @arg.words
    def check(self) -> int | None:
        """Suggest corrections for misspelled words"""
        records = []
        for word in self.args.word:
            if not is_valid_query(word):
                self.log.warning("Skipping %r: only the letters a-z are accepted", word)
                records.append({"word": word, "status": "invalid", "suggestions": [], "elapsed": None})
                continue
            records.append(self._correct(word))

        self.print_response(records, json=self.args.json, table_layout=CHECK_LAYOUT)
        return 1 if any(record["status"] == "invalid" for record in records) else None

    @arg.json
    @arg.words
    def lookup(self) -> None:
        """Check whether words are in the dictionary"""
        records = [{"word": word, "found": self.dictionary.exact_lookup(word)} for word in self.args.word]
        self.print_response(records, json=self.args.json, table_layout=["word", "found"])

    @arg.json
    def stats(self) -> None:
        """Load the dictionary and show its size"""
        self.dictionary  # pylint: disable=pointless-statement
        assert self.load_stats is not None
        self.print_response(self.load_stats._asdict(), json=self.args.json, table_layout=STATS_LAYOUT)

    def _input_tokens(self) -> Iterator[str]:
        """Whitespace separated words typed at the prompt, until end of input"""
        while True:
            try:
                line = input(" > ")
            except EOFError:
                return
            yield from line.split()

    @arg()
    def shell(self) -> None:
        """Interactive spell checker, enter '-1' to quit"""
        print("Welcome to the Spell Checker.")
        trie = self.dictionary
        assert self.load_stats is not None
        millis = self.load_stats.elapsed // datetime.timedelta(milliseconds=1)
        print(
            "{} word(s) loaded into {} node(s) in {} millisecond(s).".format(
                self.load_stats.words, self.load_stats.nodes, millis
            )
        )
        print()

        tokens = self._input_tokens()
        while True:
            print("Enter a word ('-1' to quit):")
            user_input = next(tokens, None)
            if user_input is None or user_input == QUIT_WORD:
                break
            if not is_valid_query(user_input):
                print(INVALID_INPUT)
                continue

            start = time.perf_counter()
            corrections = trie.correct(user_input)
            micros = int((time.perf_counter() - start) * 1000000)
            if corrections:
                print("{} possible correction(s) found in {} microsecond(s).".format(len(corrections), micros))
                print("Suggestion(s): " + " ".join(sorted(corrections)))
            else:
                print("No Suggestions")

        print("Terminating program execution...")

    @arg.count
    @arg.seed
    @arg("-o", "--output", help="Also write the misspellings to FILE", metavar="FILE")
    @arg("--terminator", action="store_true", default=False, help="End output with '-1' for piping into 'shell'")
    def generate(self) -> None:
        """Print random misspellings of dictionary words"""
        misspellings = self._misspellings()
        for word in misspellings:
            print(word)
        if self.args.terminator:
            print(TERMINATOR)

        if self.args.output:
            with open(self.args.output, "w", encoding="utf-8") as fp:
                for word in misspellings:
                    fp.write(word + "\n")
            self.log.info("Wrote %d misspelling(s) to %s", len(misspellings), self.args.output)

    @arg.json
    @arg.count
    @arg.seed
    def verify(self) -> None:
        """Correct random misspellings and count the ones without suggestions or with invalid characters"""
        misspellings = self._misspellings()
        statuses = {"exact": 0, "corrected": 0, "unknown": 0, "invalid": 0}
        start = time.perf_counter()
        for word in misspellings:
            if not is_valid_query(word):
                statuses["invalid"] += 1
                continue
            statuses[classify(word, self.dictionary.correct(word))] += 1
        elapsed = datetime.timedelta(seconds=time.perf_counter() - start)

        self.print_response(
            {
                "generated": len(misspellings),
                "exact": statuses["exact"],
                "corrected": statuses["corrected"],
                "no_suggestions": statuses["unknown"],
                "invalid": statuses["invalid"],
                "elapsed": elapsed,
            },
            json=self.args.json,
            table_layout=VERIFY_LAYOUT,
        )


if __name__ == "__main__":
    SpellTrieCLI().main()
