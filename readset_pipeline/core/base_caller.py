# readset_pipeline/core/base_caller.py

from typing import Dict, Tuple

import numpy as np
from scipy.signal import find_peaks

from readset_pipeline.models.chromatogram import BASES, AbiTrace


def call_windows(peak_locations: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """
    One trace window per base call, bounded by the midpoints between
    neighbouring peak locations. Windows are half-open: [start, stop).
    """
    locs = np.asarray(peak_locations, dtype=float)
    if len(locs) == 0:
        return np.empty(0), np.empty(0)

    diffs = np.diff(np.concatenate(([0.0], locs)))
    starts = locs - 0.5 * diffs
    stops = np.empty_like(locs)
    stops[:-1] = locs[:-1] + 0.5 * diffs[1:]
    stops[-1] = locs[-1] + 0.5 * diffs[-1]
    return starts, stops


def window_peak_heights(
    channels: Dict[str, np.ndarray],
    starts: np.ndarray,
    stops: np.ndarray,
) -> np.ndarray:
    """Tallest peak of each channel inside each window; 0 where a channel has none."""
    heights = np.zeros((len(starts), len(BASES)), dtype=float)

    for col, base in enumerate(BASES):
        signal = np.asarray(channels[base], dtype=float)
        peak_indices, _ = find_peaks(signal)
        if len(peak_indices) == 0:
            continue
        peak_heights = signal[peak_indices]

        lo = np.searchsorted(peak_indices, starts, side="left")
        hi = np.searchsorted(peak_indices, stops, side="left")
        for row, (a, b) in enumerate(zip(lo, hi)):
            if b > a:
                heights[row, col] = peak_heights[a:b].max()

    return heights


def make_base_calls(trace: AbiTrace, ratio: float = 0.33) -> Tuple[str, str]:
    """
    Call a primary and a secondary base at every peak location.

    A base is called in a window when its peak reaches `ratio` of the tallest
    peak there. With one called base primary and secondary agree; with more,
    the two tallest are used. Windows without any signal are called N.
    """
    starts, stops = call_windows(trace.peak_locations)
    heights = window_peak_heights(trace.channels, starts, stops)

    primary, secondary = [], []
    for row in heights:
        top = row.max()
        if top <= 0:
            primary.append("N")
            secondary.append("N")
            continue

        order = np.argsort(-row, kind="stable")
        called = [i for i in order if row[i] / top >= ratio]
        primary.append(BASES[called[0]])
        secondary.append(BASES[called[1]] if len(called) > 1 else BASES[called[0]])

    return "".join(primary), "".join(secondary)
