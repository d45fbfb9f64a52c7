# readset_pipeline/pipeline.py

import os
from typing import Callable, Union

from readset_pipeline.config import ReadsetConfig
from readset_pipeline.core.ambiguity import ambiguity_consensus, reverse_complement
from readset_pipeline.core.chromatogram import decode_chromatogram
from readset_pipeline.models.chromatogram import DecodedChromatogram
from readset_pipeline.models.read import FilterOutcome, Orientation, ProcessedRead

Decoder = Callable[[str, float, float], DecodedChromatogram]


def process_read(
    file_path: Union[str, os.PathLike],
    orientation: Orientation,
    config: ReadsetConfig,
    decoder: Decoder = decode_chromatogram,
) -> ProcessedRead:
    path = os.fspath(file_path)
    orientation = Orientation(orientation)
    decoded = decoder(path, config.trim_cutoff, config.secondary_peak_ratio)
    summary = decoded.summary

    # secondary peaks are kept in the read as ambiguity codes
    read = ambiguity_consensus(decoded.primary_seq, decoded.secondary_seq)

    if config.trim:
        trim_start, trim_finish = summary.trim_start, summary.trim_finish
        secondary_peaks = summary.trimmed_secondary_peaks
    else:
        trim_start, trim_finish = 1, len(read)
        secondary_peaks = summary.raw_secondary_peaks

    read = read[trim_start - 1:trim_finish] if trim_start > 0 else read[:0]

    if config.max_secondary_peaks is not None and secondary_peaks > config.max_secondary_peaks:
        outcome = FilterOutcome.TOO_MANY_SECONDARY_PEAKS
    elif len(read) < config.min_length:
        outcome = FilterOutcome.TOO_SHORT
    else:
        outcome = FilterOutcome.PASSED

    if outcome is not FilterOutcome.PASSED:
        return ProcessedRead(path, orientation, outcome, summary)

    if orientation is Orientation.REVERSE:
        read = reverse_complement(read)

    return ProcessedRead(path, orientation, outcome, summary, sequence=read)
