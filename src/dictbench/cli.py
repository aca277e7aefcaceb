from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from dictbench.bench.datasets import load_corpus, toy_corpus
from dictbench.bench.report import format_report
from dictbench.bench.runner import run_all
from dictbench.bench.sweep import DEFAULT_SIZES, format_sweep, run_sweep
from dictbench.config import DEFAULT_BLOCK_SIZE, DEFAULT_DICT_SIZE, DEFAULT_LEVEL, BenchConfig
from dictbench.errors import BenchError, ConfigError
from dictbench.mem.zstd_codec import ZstdCodec


log = logging.getLogger("dictbench")


def _corpus(args: argparse.Namespace) -> List[bytes]:
    if args.toy:
        return toy_corpus(lines=args.toy_lines)
    return load_corpus(args.infile)


def _check_source(args: argparse.Namespace) -> None:
    if args.toy and args.toy_lines < 1:
        raise ConfigError(f"toy_lines must be >= 1, got {args.toy_lines}")


def cmd_run(args: argparse.Namespace) -> int:
    config = BenchConfig.from_args(args)
    _check_source(args)
    corpus = _corpus(args)

    result = run_all(corpus, ZstdCodec(level=config.level), config)
    for line in format_report(result):
        print(line)
    return 0


def cmd_sweep(args: argparse.Namespace) -> int:
    config = BenchConfig(level=args.level).validate()
    for bs in args.sizes:
        BenchConfig(level=args.level, block_size=bs).validate()
    _check_source(args)
    corpus = _corpus(args)

    rows = run_sweep(corpus, ZstdCodec(level=config.level), args.sizes)
    for line in format_sweep(rows):
        print(line)
    return 0


def _add_source(p: argparse.ArgumentParser) -> None:
    src = p.add_mutually_exclusive_group(required=True)
    src.add_argument("--input", dest="infile", help="Input text file, one sample per line")
    src.add_argument("--toy", action="store_true", help="Use the built-in synthetic corpus")
    p.add_argument("--toy-lines", type=int, default=2000)
    p.add_argument("--level", type=int, default=DEFAULT_LEVEL, help="zstd level (0 = default)")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="dictbench", description="Per-sample vs block vs dictionary zstd ratios")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    pr = sub.add_parser("run", help="Report uncompressed / naive / block / dict sizes")
    _add_source(pr)
    pr.add_argument("--block-size", type=int, default=DEFAULT_BLOCK_SIZE)
    pr.add_argument("--dict-size", type=int, default=DEFAULT_DICT_SIZE)
    pr.set_defaults(fn=cmd_run)

    ps = sub.add_parser("sweep", help="Block strategy ratio across block sizes")
    _add_source(ps)
    ps.add_argument("--sizes", type=int, nargs="+", default=DEFAULT_SIZES)
    ps.set_defaults(fn=cmd_sweep)

    return p


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        return int(args.fn(args))
    except BenchError as e:
        log.debug("fatal", exc_info=True)
        print(f"dictbench: error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
