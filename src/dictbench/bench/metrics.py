import math
from dataclasses import dataclass


@dataclass
class SizeSummary:
    """
    Running count + byte total for one measurement.

    Every strategy owns its own instance; nothing here is shared.
    """
    count: int = 0
    total: int = 0

    def record(self, size: int) -> None:
        self.count += 1
        self.total += size

    def ratio(self, baseline: "SizeSummary") -> float:
        """
        baseline.total / self.total.

        An empty summary gives inf (nan when the baseline is empty too).
        """
        return _ratio(baseline.total, self.total)


def _ratio(raw: int, comp: int) -> float:
    if comp == 0:
        return math.inf if raw > 0 else math.nan
    return raw / comp
