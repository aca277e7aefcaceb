from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional


@dataclass
class BlockAccumulator:
    """
    Buffers consecutive samples until the next one would overflow capacity.

    Policy (flush-before-append, never split):
      - non-empty buffer and len(buf) + len(sample) > capacity -> emit buf, clear
      - then the sample is always appended
    A sample bigger than capacity therefore lands in an empty buffer and
    becomes its own oversized block on the next offer() or on drain().
    """
    capacity: int
    _buf: bytearray = field(default_factory=bytearray, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.capacity <= 0:
            raise ValueError(f"capacity must be > 0, got {self.capacity}")

    def __len__(self) -> int:
        return len(self._buf)

    def offer(self, sample: bytes) -> Optional[bytes]:
        block = None
        if self._buf and len(self._buf) + len(sample) > self.capacity:
            block = bytes(self._buf)
            self._buf.clear()
        self._buf += sample
        return block

    def drain(self) -> Optional[bytes]:
        if not self._buf:
            return None
        block = bytes(self._buf)
        self._buf.clear()
        return block


def accumulate_blocks(samples: Iterable[bytes], capacity: int) -> Iterator[bytes]:
    """Yield every block for a corpus in emission order, tail included."""
    acc = BlockAccumulator(capacity)
    for s in samples:
        block = acc.offer(s)
        if block is not None:
            yield block

    tail = acc.drain()
    if tail is not None:
        yield tail
