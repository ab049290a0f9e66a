# Copyright 2026, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from __future__ import annotations

from .pretty import TableLayout
from argparse import Action, Namespace
from os import PathLike
from spelltrie import envdefault, pretty
from spelltrie.dictionary import DictionaryError
from typing import Any, Callable, Collection, Mapping, NoReturn, Sequence, TextIO, TYPE_CHECKING, TypeVar

import argparse
import errno
import functools
import json as jsonlib
import logging
import requests.exceptions
import sys

# Optional shell completions
try:
    import argcomplete  # type: ignore

    ARGCOMPLETE_INSTALLED = True
except ImportError:
    ARGCOMPLETE_INSTALLED = False

try:
    from .version import __version__
except ImportError:
    __version__ = "UNKNOWN"

SKIP_EVALUATION_TYPES = (property, functools.cached_property)
ARG_LIST_PROP = "_arg_list"
LOG_FORMAT = "%(levelname)s\t%(message)s"
EXPECTED_ERRORS = (requests.exceptions.ConnectionError, DictionaryError)


class CustomFormatter(argparse.RawDescriptionHelpFormatter):
    """Help formatter to display the default value only for integers and non-empty strings"""

    def _get_help_string(self, action: Action) -> str:
        help_text = action.help or ""
        if "%(default)" in help_text or action.default is argparse.SUPPRESS or not action.option_strings:
            return help_text
        if (not isinstance(action.default, bool) and isinstance(action.default, int)) or (
            isinstance(action.default, str) and action.default
        ):
            help_text += " (default: %(default)s)"
        return help_text


class UserError(Exception):
    """User error"""


F = TypeVar("F", bound=Callable)


class Arg:
    """Declares an argument of an CLI command.

    Takes the same arguments as `argparse.ArgumentParser.add_argument`. Every
    method carrying this decorator becomes a command named after the method,
    with underscores turned into dashes; the parsed values are found in
    `self.args`.

    Example usage::

        class CLI(CommandLineTool):

            @arg("word", nargs="+")
            def check(self):
                print(self.args.word)
    """

    def __call__(self, *args: Any, **kwargs: Any) -> Callable[[F], F]:
        def wrap(func: F) -> F:
            arg_list = getattr(func, ARG_LIST_PROP, None)
            if arg_list is None:
                arg_list = []
                setattr(func, ARG_LIST_PROP, arg_list)

            if args or kwargs:
                arg_list.insert(0, (args, kwargs))

            return func

        return wrap

    if TYPE_CHECKING:

        def __getattr__(self, name: str) -> Callable:
            ...

        def __setattr__(self, name: str, value: Callable) -> None:
            ...


arg = Arg()


def command_name(func: Callable) -> str:
    return func.__name__.replace("_", "-")


class Config(dict):
    def __init__(self, file_path: PathLike | str):
        dict.__init__(self)
        self.file_path = file_path
        self.load()

    def load(self) -> None:
        self.clear()
        try:
            with open(self.file_path, encoding="utf-8") as fp:
                self.update(jsonlib.load(fp))
        except OSError as ex:
            if ex.errno == errno.ENOENT:
                return

            raise UserError(
                "Failed to load configuration file {!r}: {}: {}".format(self.file_path, ex.__class__.__name__, ex)
            ) from ex
        except ValueError as ex:
            raise UserError("Invalid JSON in configuration file {!r}".format(self.file_path)) from ex


class CommandLineTool:
    config: Config

    def __init__(self, name: str):
        self.log = logging.getLogger(name)
        self.parser = argparse.ArgumentParser(prog=name, formatter_class=CustomFormatter)
        self.parser.add_argument(
            "--config",
            help="config file location %(default)r",
            default=envdefault.SPELLTRIE_CONFIG,
        )
        self.parser.add_argument("-v", "--verbose", help="Enable debug logging", action="store_true", default=False)
        self.parser.add_argument("--version", action="version", version="spelltrie {}".format(__version__))
        self.subparsers = self.parser.add_subparsers(title="commands", dest="command", help="", metavar="")
        self.args: Namespace = Namespace()

    def add_args(self, parser: argparse.ArgumentParser) -> None:
        pass  # override in sub-class

    def add_cmd(self, func: Callable) -> None:
        """Add a parser for a single command method call"""
        assert func.__doc__, f"Missing docstring for {func.__qualname__}"

        parser = self.subparsers.add_parser(
            command_name(func), help=func.__doc__, description=func.__doc__, formatter_class=CustomFormatter
        )
        parser.set_defaults(func=func)
        for arg_args, arg_kwargs in getattr(func, ARG_LIST_PROP, []):
            parser.add_argument(*arg_args, **arg_kwargs)

    def commands(self) -> list[Callable]:
        """Every method tagged with @arg, in name order"""
        found = []
        for prop in dir(self):
            # Skip @property and @cached_property attributes to delay coercing their evaluation.
            if isinstance(getattr(self.__class__, prop, None), SKIP_EVALUATION_TYPES):
                continue
            func = getattr(self, prop, None)
            if getattr(func, ARG_LIST_PROP, None) is not None:
                assert callable(func)
                found.append(func)
        return found

    def parse_args(self, args: Sequence[str] | None = None) -> None:
        self.add_args(self.parser)
        for func in self.commands():
            self.add_cmd(func)

        if ARGCOMPLETE_INSTALLED:
            argcomplete.autocomplete(self.parser)

        self.args = self.parser.parse_args(args=args)

    def print_response(
        self,
        result: Mapping[str, Any] | Collection[Mapping[str, Any]],
        json: bool = True,
        table_layout: TableLayout | None = None,
        file: TextIO | None = None,
    ) -> None:
        """print results as json or as a table"""
        if file is None:
            file = sys.stdout

        if json:
            print(jsonlib.dumps(result, indent=4, sort_keys=True, cls=pretty.CustomJsonEncoder), file=file)
        else:
            rows = [result] if isinstance(result, Mapping) else result
            pretty.print_table(rows, table_layout=table_layout, file=file)

    def run(self, args: Sequence[str] | None = None) -> int | None:
        args = args or sys.argv[1:]
        if not args:
            args = ["--help"]

        self.parse_args(args=args)
        if self.args.verbose:
            logging.getLogger("spelltrie").setLevel(logging.DEBUG)
        try:
            self.config = Config(self.args.config)
            func = getattr(self.args, "func", None)
            if not func:
                self.parser.parse_args(list(args) + ["--help"])
                return 1
            return func()
        except (UserError,) + EXPECTED_ERRORS as ex:
            # nicer output on "expected" errors
            self.log.error("command failed: {0.__class__.__name__}: {0}".format(ex))
            return 1
        except OSError as ex:
            if ex.errno != errno.EPIPE:
                raise
            self.log.error("*** output truncated ***")
            return 13  # SIGPIPE value in case anyone cares
        except KeyboardInterrupt:
            self.log.error("*** terminated by keyboard ***")
            return 2  # SIGINT

    def main(self, args: Sequence[str] | None = None) -> NoReturn:
        logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
        logging.getLogger("requests").setLevel(logging.WARNING)
        logging.getLogger("urllib3").setLevel(logging.WARNING)
        sys.exit(self.run(args))
