# Copyright 2026, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from __future__ import annotations

from requests import adapters, models, Session
from requests.structures import CaseInsensitiveDict
from typing import Any

import logging

try:
    from .version import __version__
except ImportError:
    __version__ = "UNKNOWN"

log = logging.getLogger("spelltrie.http")


class DictionaryAdapter(adapters.HTTPAdapter):
    def __init__(self, *args: Any, timeout: float | None = None, **kwargs: Any) -> None:
        self.timeout = timeout
        super().__init__(*args, **kwargs)

    def send(self, *args: Any, **kwargs: Any) -> models.Response:
        if not kwargs.get("timeout"):
            kwargs["timeout"] = self.timeout
        return super().send(*args, **kwargs)


def log_response(response: models.Response, *args: Any, **kwargs: Any) -> None:
    log.debug("%s %s: %s %s", response.request.method, response.url, response.status_code, response.reason)


def get_requests_session(*, timeout: float | None = None) -> Session:
    adapter = DictionaryAdapter(timeout=timeout)

    session = Session()
    session.mount("http://", adapter)
    session.mount("https://", adapter)
    session.verify = True
    session.headers = CaseInsensitiveDict(
        {
            "accept": "text/plain",
            "user-agent": "spelltrie/" + __version__,
        }
    )
    session.hooks["response"].append(log_response)

    return session
