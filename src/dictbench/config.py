from __future__ import annotations

import argparse
from dataclasses import dataclass

from dictbench.errors import ConfigError


DEFAULT_LEVEL = 0  # 0 = let zstd pick its default
DEFAULT_BLOCK_SIZE = 1 << 20
DEFAULT_DICT_SIZE = 1_024


@dataclass(frozen=True)
class BenchConfig:
    level: int = DEFAULT_LEVEL
    block_size: int = DEFAULT_BLOCK_SIZE
    dict_size: int = DEFAULT_DICT_SIZE

    def validate(self) -> "BenchConfig":
        for name in ("level", "block_size", "dict_size"):
            v = getattr(self, name)
            if isinstance(v, bool) or not isinstance(v, int):
                raise ConfigError(f"{name} must be an integer, got {v!r}")
        if self.block_size <= 0:
            raise ConfigError(f"block_size must be > 0, got {self.block_size}")
        if self.dict_size <= 0:
            raise ConfigError(f"dict_size must be > 0, got {self.dict_size}")
        return self

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "BenchConfig":
        return cls(
            level=args.level,
            block_size=getattr(args, "block_size", DEFAULT_BLOCK_SIZE),
            dict_size=getattr(args, "dict_size", DEFAULT_DICT_SIZE),
        ).validate()
