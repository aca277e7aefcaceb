from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from dictbench.bench.metrics import SizeSummary
from dictbench.config import BenchConfig
from dictbench.errors import CodecError
from dictbench.mem.chunking import accumulate_blocks
from dictbench.mem.zstd_codec import Compress, ZstdCodec


log = logging.getLogger(__name__)


@dataclass
class BenchResult:
    uncompressed: SizeSummary
    naive: SizeSummary
    block: SizeSummary
    dictionary: SizeSummary


def _compress(compress: Compress, data: bytes, strategy: str, index: int, what: str) -> bytes:
    try:
        return compress(data)
    except CodecError as e:
        raise CodecError(f"{strategy}: {what} {index} failed: {e}", strategy=strategy, index=index) from e


def fresh_compressor(codec: ZstdCodec, strategy: str, dict_bytes: Optional[bytes] = None) -> Compress:
    try:
        return codec.compressor(dict_bytes)
    except CodecError as e:
        raise CodecError(f"{strategy}: {e}", strategy=strategy) from e


def run_uncompressed(corpus: Sequence[bytes]) -> SizeSummary:
    out = SizeSummary()
    for s in corpus:
        out.record(len(s))
    return out


def run_naive(corpus: Sequence[bytes], compress: Compress, strategy: str = "naive") -> SizeSummary:
    """Every sample compressed on its own, no shared context."""
    out = SizeSummary()
    for i, s in enumerate(corpus):
        out.record(len(_compress(compress, s, strategy, i, "sample")))
    return out


def run_block(corpus: Sequence[bytes], compress: Compress, block_size: int) -> SizeSummary:
    """
    Consecutive samples concatenated into blocks of <= block_size bytes
    (a lone oversized sample is its own block), one record per block.
    """
    out = SizeSummary()
    for idx, block in enumerate(accumulate_blocks(corpus, block_size)):
        out.record(len(_compress(compress, block, "block", idx, "block")))
        log.debug("block %d flushed: %d bytes", idx, len(block))
    return out


def run_dict(corpus: Sequence[bytes], codec: ZstdCodec, dict_size: int) -> SizeSummary:
    """Train once on the whole corpus, then naive per-sample with the dict."""
    try:
        dict_bytes = codec.train_dictionary(corpus, dict_size)
    except CodecError as e:
        raise CodecError(f"dict-train: {e}", strategy="dict-train") from e

    log.info("trained dictionary: %d bytes (target %d)", len(dict_bytes), dict_size)
    return run_naive(corpus, fresh_compressor(codec, "dict", dict_bytes), strategy="dict")


def run_all(corpus: Sequence[bytes], codec: ZstdCodec, config: BenchConfig) -> BenchResult:
    """
    All four measurements, strictly in order. Each strategy gets a fresh
    compressor and its own SizeSummary. First codec failure aborts.
    """
    uncompressed = run_uncompressed(corpus)
    log.info("uncompressed: count=%d total=%d", uncompressed.count, uncompressed.total)

    naive = run_naive(corpus, fresh_compressor(codec, "naive"))
    log.info("naive: count=%d total=%d", naive.count, naive.total)

    block = run_block(corpus, fresh_compressor(codec, "block"), config.block_size)
    log.info("block: count=%d total=%d", block.count, block.total)

    dict_summary = run_dict(corpus, codec, config.dict_size)
    log.info("dict: count=%d total=%d", dict_summary.count, dict_summary.total)

    return BenchResult(
        uncompressed=uncompressed,
        naive=naive,
        block=block,
        dictionary=dict_summary,
    )
