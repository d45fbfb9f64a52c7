# readset_pipeline/core/chromatogram.py

import os
from typing import Union

import numpy as np

from readset_pipeline.core.abi_loader import load_abi
from readset_pipeline.core.base_caller import make_base_calls
from readset_pipeline.core.trimming import trim_mott
from readset_pipeline.models.chromatogram import AbiTrace, DecodedChromatogram, SummaryMetrics


def summarise_trace(
    trace: AbiTrace,
    trim_cutoff: float = 0.0001,
    secondary_peak_ratio: float = 0.33,
    file_path: str = "",
) -> DecodedChromatogram:
    """
    Call primary/secondary bases and compute the quality, trimming and
    secondary-peak summary of one chromatogram.
    """
    primary, secondary = make_base_calls(trace, ratio=secondary_peak_ratio)
    trim_start, trim_finish = trim_mott(trace.qualities, cutoff=trim_cutoff)

    qual = np.asarray(trace.qualities, dtype=float)
    qual_trimmed = qual[trim_start - 1:trim_finish] if trim_start > 0 else qual[:0]

    # 1-based positions where a second base was called
    peak_positions = [i + 1 for i, (p, s) in enumerate(zip(primary, secondary)) if p != s]
    trimmed_positions = [pos for pos in peak_positions if trim_start <= pos <= trim_finish]

    summary = SummaryMetrics(
        raw_length=len(qual),
        trimmed_length=len(qual_trimmed),
        trim_start=trim_start,
        trim_finish=trim_finish,
        raw_secondary_peaks=len(peak_positions),
        trimmed_secondary_peaks=len(trimmed_positions),
        raw_mean_quality=float(qual.mean()) if qual.size else 0.0,
        trimmed_mean_quality=float(qual_trimmed.mean()) if qual_trimmed.size else 0.0,
        raw_min_quality=float(qual.min()) if qual.size else 0.0,
        trimmed_min_quality=float(qual_trimmed.min()) if qual_trimmed.size else 0.0,
    )

    return DecodedChromatogram(
        file_path=file_path or trace.name,
        primary_seq=primary,
        secondary_seq=secondary,
        summary=summary,
        secondary_peak_positions=peak_positions,
    )


def decode_chromatogram(
    file_path: Union[str, os.PathLike],
    trim_cutoff: float = 0.0001,
    secondary_peak_ratio: float = 0.33,
) -> DecodedChromatogram:
    path = os.fspath(file_path)
    trace = load_abi(path)
    return summarise_trace(trace, trim_cutoff, secondary_peak_ratio, file_path=path)
