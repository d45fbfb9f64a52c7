import struct
from typing import Dict, Optional, Tuple

import numpy as np
import pytest

from readset_pipeline.errors import UnreadableFileError
from readset_pipeline.models.chromatogram import AbiTrace, DecodedChromatogram, SummaryMetrics


def make_decoded(
    path: str,
    primary: str,
    secondary: Optional[str] = None,
    trim_window: Optional[Tuple[int, int]] = None,
    raw_peaks: Optional[int] = None,
    trimmed_peaks: Optional[int] = None,
) -> DecodedChromatogram:
    secondary = primary if secondary is None else secondary
    start, finish = trim_window if trim_window is not None else (1, len(primary))
    positions = [i + 1 for i, (p, s) in enumerate(zip(primary, secondary)) if p != s]

    summary = SummaryMetrics(
        raw_length=len(primary),
        trimmed_length=max(0, finish - start + 1) if start > 0 else 0,
        trim_start=start,
        trim_finish=finish,
        raw_secondary_peaks=len(positions) if raw_peaks is None else raw_peaks,
        trimmed_secondary_peaks=(
            len([p for p in positions if start <= p <= finish]) if trimmed_peaks is None else trimmed_peaks
        ),
        raw_mean_quality=40.0,
        trimmed_mean_quality=45.0,
        raw_min_quality=10.0,
        trimmed_min_quality=30.0,
    )
    return DecodedChromatogram(path, primary, secondary, summary, positions)


class FakeDecoder:
    """Serves prepared chromatograms by path; unknown paths are unreadable."""

    def __init__(self, chromatograms: Dict[str, DecodedChromatogram]):
        self.chromatograms = chromatograms

    def __call__(self, path: str, trim_cutoff: float, secondary_peak_ratio: float) -> DecodedChromatogram:
        if path not in self.chromatograms:
            raise UnreadableFileError(path, "no such file")
        return self.chromatograms[path]


@pytest.fixture
def fake_decoder():
    def _make(*decoded: DecodedChromatogram) -> FakeDecoder:
        return FakeDecoder({d.file_path: d for d in decoded})
    return _make


def spike_trace(calls, n_scans: int = 60, spacing: int = 10, qualities=None) -> AbiTrace:
    """
    Synthetic trace with one call every `spacing` scans. Each call is a dict
    of base -> peak height, drawn as single-scan spikes.
    """
    channels = {base: np.zeros(n_scans) for base in "ACGT"}
    locations = []
    for i, heights in enumerate(calls):
        loc = spacing * (i + 1)
        locations.append(loc)
        for base, height in heights.items():
            channels[base][loc] = height

    if qualities is None:
        qualities = [50] * len(calls)

    return AbiTrace(
        name="synthetic",
        channels=channels,
        peak_locations=np.array(locations, dtype=int),
        qualities=np.array(qualities, dtype=float),
    )


def _abif_entry(name: str, number: int, code: int, size: int, values) -> tuple:
    if code == 2:
        payload = bytes(values)
    else:
        payload = struct.pack(f">{len(values)}h", *values)
    return name.encode("ascii"), number, code, size, len(values), payload


def write_abif(path, channels: Dict[str, list], peak_locations, qualities, dye_order: str = "GATC") -> str:
    """
    Write a minimal ABIF file holding the analysed traces, dye order, peak
    locations, qualities and called bases of one read.
    """
    calls = []
    for loc in peak_locations:
        heights = {base: channels[base][loc] for base in dye_order}
        calls.append(max(heights, key=heights.get))

    entries = [
        _abif_entry("DATA", 9 + i, 4, 2, [int(v) for v in channels[base]])
        for i, base in enumerate(dye_order)
    ]
    entries += [
        _abif_entry("FWO_", 1, 2, 1, dye_order.encode("ascii")),
        _abif_entry("PLOC", 2, 4, 2, [int(v) for v in peak_locations]),
        _abif_entry("PCON", 2, 2, 1, [int(q) for q in qualities]),
        _abif_entry("PBAS", 2, 2, 1, "".join(calls).encode("ascii")),
    ]

    header_size = 4 + struct.calcsize(">H4sI2H3I")
    data = b""
    directory = b""
    for name, number, code, size, count, payload in entries:
        head = struct.pack(">4sI2H2I", name, number, code, size, count, len(payload))
        if len(payload) <= 4:
            directory += head + payload.ljust(4, b"\0") + struct.pack(">I", 0)
        else:
            directory += head + struct.pack(">2I", header_size + len(data), 0)
            data += payload

    header = b"ABIF" + struct.pack(
        ">H4sI2H3I", 101, b"tdir", 1, 1023, 28, len(entries), len(directory), header_size + len(data)
    )
    with open(path, "wb") as fh:
        fh.write(header + data + directory)
    return str(path)
