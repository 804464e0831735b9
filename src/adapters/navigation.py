"""
Redirect capability.

Ending an action with a redirect unwinds the call stack with RedirectRequired;
the HTTP shell turns it into a 303 response. It is a control signal, so action
error boundaries must not catch it.
"""

from __future__ import annotations

from typing import NoReturn


class RedirectRequired(Exception):
    def __init__(self, path: str, status_code: int = 303):
        super().__init__(path)
        self.path = path
        self.status_code = status_code


class RaisingRedirector:
    def __init__(self, status_code: int = 303):
        self.status_code = status_code

    def redirect(self, path: str) -> NoReturn:
        raise RedirectRequired(path, self.status_code)
