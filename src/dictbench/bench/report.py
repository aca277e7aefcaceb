from typing import List, Optional

from dictbench.bench.metrics import SizeSummary
from dictbench.bench.runner import BenchResult


def format_summary(s: SizeSummary) -> str:
    return f"SizeSummary {{ count: {s.count}, total: {s.total} }}"


def format_line(label: str, summary: SizeSummary, baseline: Optional[SizeSummary] = None) -> str:
    """
    '<label>: <ratio> <summary>'; the baseline line itself carries no ratio.
    """
    if baseline is None:
        return f"{label}: {format_summary(summary)}"
    return f"{label}: {summary.ratio(baseline):.2f} {format_summary(summary)}"


def format_report(result: BenchResult) -> List[str]:
    base = result.uncompressed
    return [
        format_line("uncompressed", base),
        format_line("naive", result.naive, base),
        format_line("block", result.block, base),
        format_line("dict", result.dictionary, base),
    ]
