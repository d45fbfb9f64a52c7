from dataclasses import dataclass, field
from typing import Dict, List, Tuple

import numpy as np

BASES = ("A", "C", "G", "T")

# Column names of the per-file summary, in output order
SUMMARY_METRIC_COLUMNS = [
    "raw.length",
    "trimmed.length",
    "trim.start",
    "trim.finish",
    "raw.secondary.peaks",
    "trimmed.secondary.peaks",
    "raw.mean.quality",
    "trimmed.mean.quality",
    "raw.min.quality",
    "trimmed.min.quality",
]


@dataclass
class AbiTrace:
    """
    Raw signal read from one ABIF chromatogram.

    `channels` holds the analysed trace for each base, `peak_locations` the
    trace index of every base call and `qualities` its Phred score.
    """
    name: str
    channels: Dict[str, np.ndarray]
    peak_locations: np.ndarray
    qualities: np.ndarray

    @property
    def n_calls(self) -> int:
        return len(self.peak_locations)

    @property
    def n_scans(self) -> int:
        return max((len(v) for v in self.channels.values()), default=0)


@dataclass(frozen=True)
class SummaryMetrics:
    raw_length: int
    trimmed_length: int
    trim_start: int
    trim_finish: int
    raw_secondary_peaks: int
    trimmed_secondary_peaks: int
    raw_mean_quality: float
    trimmed_mean_quality: float
    raw_min_quality: float
    trimmed_min_quality: float

    @property
    def trim_window(self) -> Tuple[int, int]:
        return self.trim_start, self.trim_finish

    def to_dict(self) -> dict:
        return {
            "raw.length": int(self.raw_length),
            "trimmed.length": int(self.trimmed_length),
            "trim.start": int(self.trim_start),
            "trim.finish": int(self.trim_finish),
            "raw.secondary.peaks": int(self.raw_secondary_peaks),
            "trimmed.secondary.peaks": int(self.trimmed_secondary_peaks),
            "raw.mean.quality": float(self.raw_mean_quality),
            "trimmed.mean.quality": float(self.trimmed_mean_quality),
            "raw.min.quality": float(self.raw_min_quality),
            "trimmed.min.quality": float(self.trimmed_min_quality),
        }


@dataclass(frozen=True)
class DecodedChromatogram:
    file_path: str
    primary_seq: str
    secondary_seq: str
    summary: SummaryMetrics
    secondary_peak_positions: List[int] = field(default_factory=list)

    def __post_init__(self):
        if len(self.primary_seq) != len(self.secondary_seq):
            raise ValueError(
                f"{self.file_path}: primary ({len(self.primary_seq)}) and secondary "
                f"({len(self.secondary_seq)}) calls differ in length."
            )
