# Copyright 2026, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from .cli import SpellTrieCLI


def main() -> None:
    SpellTrieCLI().main()


if __name__ == "__main__":
    main()
