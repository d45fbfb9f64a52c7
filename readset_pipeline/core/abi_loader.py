# readset_pipeline/core/abi_loader.py

import logging
import os
import struct
from pathlib import Path
from typing import List, Union

import numpy as np
from Bio import SeqIO

from readset_pipeline.errors import UnreadableFileError
from readset_pipeline.models.chromatogram import BASES, AbiTrace

logger = logging.getLogger(__name__)

# Analysed traces, in the dye order given by FWO_1
TRACE_TAGS = ("DATA9", "DATA10", "DATA11", "DATA12")


def _as_text(value) -> str:
    if isinstance(value, bytes):
        return value.decode("ascii", errors="replace")
    return str(value)


def _as_array(value) -> np.ndarray:
    if isinstance(value, bytes):
        return np.frombuffer(value, dtype=np.uint8).astype(float)
    if np.isscalar(value):
        return np.array([value], dtype=float)
    return np.array(value, dtype=float)


def load_abi(file_path: Union[str, os.PathLike]) -> AbiTrace:
    """
    Loads an ABIF (.ab1) chromatogram and extracts the traces, base-call
    peak locations and qualities.

    Args:
        file_path: Path to the .ab1 file.

    Returns:
        AbiTrace with one analysed channel per base.

    Raises:
        UnreadableFileError: the file is missing, not ABIF, or lacks the
            tags needed for base calling.
    """
    path = os.fspath(file_path)
    try:
        record = SeqIO.read(path, "abi")
    except (OSError, ValueError, struct.error) as e:
        logger.error(f"Error loading chromatogram {path}: {e}")
        raise UnreadableFileError(path, str(e)) from e

    raw = record.annotations.get("abif_raw", {})
    missing = [tag for tag in (*TRACE_TAGS, "FWO_1", "PLOC2", "PCON2") if tag not in raw]
    if missing:
        logger.error(f"Chromatogram {path} is missing tags: {', '.join(missing)}")
        raise UnreadableFileError(path, f"missing ABIF tags {missing}")

    dye_order = _as_text(raw["FWO_1"]).upper()[:4]
    if sorted(dye_order) != sorted(BASES):
        logger.error(f"Chromatogram {path} has unexpected base order '{dye_order}'")
        raise UnreadableFileError(path, f"unexpected base order '{dye_order}' in FWO_1")

    channels = {
        base: _as_array(raw[tag]) for base, tag in zip(dye_order, TRACE_TAGS)
    }
    peak_locations = _as_array(raw["PLOC2"]).astype(int)
    qualities = _as_array(raw["PCON2"])

    if len(peak_locations) != len(qualities):
        logger.error(f"Chromatogram {path} has {len(peak_locations)} peak locations but {len(qualities)} quality values")
        raise UnreadableFileError(
            path,
            f"{len(peak_locations)} peak locations but {len(qualities)} quality values",
        )

    return AbiTrace(
        name=record.name,
        channels={base: channels[base] for base in BASES},
        peak_locations=peak_locations,
        qualities=qualities,
    )


def find_abi_files(folder: Union[str, os.PathLike]) -> List[str]:
    """Sorted paths of the .ab1 files directly inside `folder`."""
    folder = Path(folder)
    if not folder.is_dir():
        raise UnreadableFileError(str(folder), "not a directory")
    return sorted(str(p) for p in folder.iterdir() if p.suffix.lower() == ".ab1")
