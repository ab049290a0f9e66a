# Copyright 2026, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.

from .argx import arg
from .generator import DEFAULT_COUNT

arg.json = arg("--json", help="Raw json output", action="store_true", default=False)
arg.words = arg("word", nargs="+", help="Word to check, containing only the letters a-z")
arg.count = arg("-n", "--count", type=int, default=DEFAULT_COUNT, help="Number of misspellings to generate")
arg.seed = arg("--seed", type=int, default=None, help="Random seed for reproducible misspellings")
