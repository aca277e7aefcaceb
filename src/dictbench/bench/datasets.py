from __future__ import annotations

import logging
import random
from typing import List

from dictbench.errors import InputError


log = logging.getLogger(__name__)


def load_corpus(path: str) -> List[bytes]:
    """
    One sample per line, line terminator (\\n or \\r\\n) stripped.

    Empty lines are kept as empty samples. The file must be valid UTF-8.
    """
    samples: List[bytes] = []
    try:
        with open(path, "rb") as f:
            for lineno, ln in enumerate(f, start=1):
                if ln.endswith(b"\n"):
                    ln = ln[:-1]
                    if ln.endswith(b"\r"):
                        ln = ln[:-1]
                try:
                    ln.decode("utf-8")
                except UnicodeDecodeError as e:
                    raise InputError(f"{path}:{lineno}: not valid UTF-8: {e}") from e
                samples.append(ln)
    except OSError as e:
        raise InputError(f"cannot read {path}: {e}") from e

    log.info("loaded %d samples from %s", len(samples), path)
    return samples


def toy_corpus(lines: int = 2000, seed: int = 7) -> List[bytes]:
    """
    Synthetic agent-log style corpus: lots of shared structure, unique ids.

    Deterministic for a given (lines, seed).
    """
    rng = random.Random(seed)

    levels = ["INFO", "INFO", "INFO", "DEBUG", "WARN", "ERROR"]
    components = ["scheduler", "worker", "cache", "http", "storage", "auth"]
    templates = [
        "{ts} {lvl} [{comp}] request {rid} completed in {ms}ms status=200",
        "{ts} {lvl} [{comp}] request {rid} failed in {ms}ms status=500 retry={n}",
        "{ts} {lvl} [{comp}] cache miss for key user:{uid}:profile",
        "{ts} {lvl} [{comp}] cache hit for key user:{uid}:session",
        "{ts} {lvl} [{comp}] job {rid} queued position={n}",
        "{ts} {lvl} [{comp}] job {rid} finished rows={ms}",
        "{ts} {lvl} [{comp}] user {uid} logged in from 10.0.{n}.{m}",
    ]

    out: List[bytes] = []
    t = 1_700_000_000
    for _ in range(lines):
        t += rng.randint(0, 3)
        line = rng.choice(templates).format(
            ts=t,
            lvl=rng.choice(levels),
            comp=rng.choice(components),
            rid=f"{rng.getrandbits(32):08x}",
            uid=rng.randint(1, 5000),
            ms=rng.randint(1, 2500),
            n=rng.randint(0, 9),
            m=rng.randint(1, 254),
        )
        out.append(line.encode("utf-8"))
    return out
