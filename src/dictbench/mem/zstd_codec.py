from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, Sequence

import zstandard as zstd

from dictbench.errors import CodecError
from dictbench.mem.zstd_trained_dict import train_dict


Compress = Callable[[bytes], bytes]


@dataclass(frozen=True)
class ZstdCodec:
    """
    Concrete codec capability on top of python-zstandard.

    level 0 means zstd's own default level.
    """
    level: int = 0

    def compressor(self, dict_bytes: Optional[bytes] = None) -> Compress:
        """
        Fresh compression context; optionally bound to a trained dictionary.

        The returned callable keeps its context between calls, but zstd
        frames produced by ZstdCompressor.compress() never reference earlier
        input, so each call is still an independent frame.
        """
        try:
            if dict_bytes is None:
                cctx = zstd.ZstdCompressor(level=self.level)
            else:
                cdict = zstd.ZstdCompressionDict(dict_bytes)
                cctx = zstd.ZstdCompressor(level=self.level, dict_data=cdict)
        except (zstd.ZstdError, ValueError, TypeError) as e:
            raise CodecError(f"zstd: cannot create compressor (level={self.level}): {e}") from e

        def compress(data: bytes) -> bytes:
            try:
                return cctx.compress(data)
            except zstd.ZstdError as e:
                raise CodecError(f"zstd: compress failed ({len(data)} bytes): {e}") from e

        return compress

    def train_dictionary(self, samples: Sequence[bytes], dict_size: int) -> bytes:
        return train_dict(samples, dict_size)
