from dataclasses import dataclass
from enum import Enum
from typing import Optional

from Bio.Seq import Seq

from readset_pipeline.models.chromatogram import SummaryMetrics


class Orientation(str, Enum):
    FORWARD = "forward"
    REVERSE = "reverse"


class FilterOutcome(str, Enum):
    PASSED = "passed"
    TOO_MANY_SECONDARY_PEAKS = "too_many_secondary_peaks"
    TOO_SHORT = "too_short"


@dataclass(frozen=True)
class ProcessedRead:
    """
    Result of processing one chromatogram. `sequence` is set only when the
    read passed every filter; `outcome` says which filter rejected it otherwise.
    """
    file_path: str
    orientation: Orientation
    outcome: FilterOutcome
    summary: SummaryMetrics
    sequence: Optional[Seq] = None

    def __post_init__(self):
        if (self.outcome is FilterOutcome.PASSED) != (self.sequence is not None):
            raise ValueError(f"{self.file_path}: sequence must be set exactly when the read passed.")

    @property
    def is_present(self) -> bool:
        return self.outcome is FilterOutcome.PASSED
