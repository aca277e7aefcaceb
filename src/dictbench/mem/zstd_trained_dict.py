from __future__ import annotations

import logging
from typing import List, Sequence

import zstandard as zstd

from dictbench.errors import CodecError


log = logging.getLogger(__name__)


def train_dict(samples: Sequence[bytes], dict_size: int) -> bytes:
    """
    Train a zstd dictionary of (at most) dict_size bytes from samples.

    Unlike a best-effort trainer this never retries with a smaller size:
    a corpus too small for the requested dictionary is a CodecError.
    """
    if dict_size <= 0:
        raise CodecError(f"train_dict: dict_size must be > 0, got {dict_size}")

    clean: List[bytes] = [bytes(s) for s in samples]
    if not clean:
        raise CodecError("train_dict: samples is empty")

    total_src = sum(len(s) for s in clean)
    log.debug("training %d-byte dictionary from %d samples (%d bytes)", dict_size, len(clean), total_src)

    try:
        d = zstd.train_dictionary(dict_size, clean)
    except (zstd.ZstdError, ValueError, TypeError) as e:
        raise CodecError(f"train_dict failed ({len(clean)} samples, {total_src} bytes): {e}") from e

    return d.as_bytes()
