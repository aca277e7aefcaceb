from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

from dictbench.bench.runner import fresh_compressor, run_block, run_uncompressed
from dictbench.bench.metrics import SizeSummary
from dictbench.errors import ConfigError
from dictbench.mem.zstd_codec import ZstdCodec


DEFAULT_SIZES = [4 * 1024, 16 * 1024, 64 * 1024, 256 * 1024, 1 << 20]


@dataclass
class SweepRow:
    block_size: int
    summary: SizeSummary
    ratio: float


def run_sweep(corpus: Sequence[bytes], codec: ZstdCodec, sizes: Sequence[int] = DEFAULT_SIZES) -> List[SweepRow]:
    """Block strategy once per capacity, same corpus, fresh compressor each time."""
    for bs in sizes:
        if bs <= 0:
            raise ConfigError(f"block size must be > 0, got {bs}")

    base = run_uncompressed(corpus)
    rows: List[SweepRow] = []
    for bs in sizes:
        s = run_block(corpus, fresh_compressor(codec, "block"), bs)
        rows.append(SweepRow(block_size=bs, summary=s, ratio=s.ratio(base)))
    return rows


def format_sweep(rows: Sequence[SweepRow]) -> List[str]:
    out = [
        "BlockSize | Blocks | Compressed | Ratio",
        "----------------------------------------",
    ]
    for r in rows:
        out.append(
            f"{str(r.block_size).rjust(9)} | "
            f"{str(r.summary.count).rjust(6)} | "
            f"{str(r.summary.total).rjust(10)} | "
            f"{r.ratio:.2f}"
        )
    return out
