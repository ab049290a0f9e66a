# Copyright 2026, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
"""
Configurable parameters via environment variables
"""

import os

USER_HOME = os.path.expanduser("~")

SPELLTRIE_CONFIG_DIR = os.environ.get("SPELLTRIE_CONFIG_DIR", os.path.join(USER_HOME, ".config", "spelltrie"))

SPELLTRIE_CONFIG = os.environ.get("SPELLTRIE_CONFIG", os.path.join(SPELLTRIE_CONFIG_DIR, "spelltrie.json"))
SPELLTRIE_DICTIONARY = os.environ.get("SPELLTRIE_DICTIONARY", "/usr/share/dict/words")
SPELLTRIE_REQUEST_TIMEOUT = os.environ.get("SPELLTRIE_REQUEST_TIMEOUT")
