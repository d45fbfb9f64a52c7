# readset_pipeline/core/trimming.py

from typing import Sequence, Tuple

import numpy as np


def trim_mott(qualities: Sequence[float], cutoff: float = 0.0001) -> Tuple[int, int]:
    """
    Modified Mott quality trimming.

    Each base scores `cutoff - P(error)`; the running sum is floored at zero.
    The window starts where the running sum first turns positive and ends at
    its first maximum. Unlike Biopython's abi-trim the first base is not
    trimmed unconditionally.

    Args:
        qualities: Phred quality per base.
        cutoff: error probability above which a base counts against the window.

    Returns:
        (start, finish), 1-based and inclusive. (0, 0) when no base is worth
        keeping.
    """
    qual = np.asarray(qualities, dtype=float)
    if qual.size == 0:
        return 0, 0

    scores = cutoff - np.power(10.0, qual / -10.0)

    cumulative = np.zeros(qual.size, dtype=float)
    running = 0.0
    start = 0
    for i, score in enumerate(scores):
        running += score
        if running <= 0:
            running = 0.0
        elif start == 0:
            start = i + 1
        cumulative[i] = running

    if cumulative.sum() == 0:
        return 0, 0

    finish = int(np.argmax(cumulative)) + 1
    return start, finish
