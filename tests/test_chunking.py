import pytest

from dictbench.bench.datasets import toy_corpus
from dictbench.mem.chunking import BlockAccumulator, accumulate_blocks


def _blocks(samples, capacity):
    acc = BlockAccumulator(capacity)
    out = []
    for s in samples:
        b = acc.offer(s)
        if b is not None:
            out.append(b)
    tail = acc.drain()
    if tail is not None:
        out.append(tail)
    return out


def test_exact_flush_boundary():
    acc = BlockAccumulator(5)

    assert acc.offer(b"ab") is None
    assert acc.offer(b"cd") is None  # 2 + 2 = 4 <= 5
    assert len(acc) == 4
    assert acc.offer(b"ef") == b"abcd"  # 4 + 2 = 6 > 5
    assert acc.drain() == b"ef"
    assert acc.drain() is None


def test_fill_to_exact_capacity_does_not_flush():
    acc = BlockAccumulator(4)
    assert acc.offer(b"ab") is None
    assert acc.offer(b"cd") is None
    assert acc.offer(b"e") == b"abcd"


def test_oversized_sample_is_its_own_block():
    acc = BlockAccumulator(10)
    big = b"b" * 13

    assert acc.offer(b"a") is None
    assert acc.offer(big) == b"a"
    assert acc.drain() == big


def test_oversized_first_sample_waits_for_next_offer():
    acc = BlockAccumulator(3)
    assert acc.offer(b"xxxxxxxx") is None
    assert acc.offer(b"y") == b"xxxxxxxx"
    assert acc.drain() == b"y"


def test_empty_samples_and_empty_drain():
    acc = BlockAccumulator(3)
    assert acc.drain() is None
    assert acc.offer(b"") is None
    assert acc.drain() is None


def test_conservation_and_capacity():
    samples = toy_corpus(lines=500, seed=3) + [b"z" * 5000, b"", b"tail"]
    cap = 1024

    blocks = _blocks(samples, cap)

    assert b"".join(blocks) == b"".join(samples)
    for b in blocks:
        assert len(b) <= cap or b == b"z" * 5000


def test_deterministic_across_instances():
    samples = toy_corpus(lines=300, seed=11)
    assert _blocks(samples, 700) == _blocks(samples, 700)


def test_accumulate_blocks_matches_offer_drain():
    samples = [b"ab", b"cd", b"ef", b"g" * 9, b"h"]
    assert list(accumulate_blocks(samples, 5)) == [b"abcd", b"ef", b"g" * 9, b"h"]


def test_capacity_must_be_positive():
    with pytest.raises(ValueError):
        BlockAccumulator(0)
