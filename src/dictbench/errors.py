from __future__ import annotations

from typing import Optional


class BenchError(Exception):
    """Base for every fatal benchmark error."""


class InputError(BenchError):
    """Corpus source is unreadable or not valid line-oriented text."""


class ConfigError(BenchError):
    """Rejected configuration (raised before any sample is read)."""


class CodecError(BenchError):
    """
    Compression or dictionary training failed.

    strategy / index are filled in by the runner so the message says
    which measurement and which sample (or block) blew up.
    """

    def __init__(self, message: str, strategy: Optional[str] = None, index: Optional[int] = None):
        super().__init__(message)
        self.strategy = strategy
        self.index = index
