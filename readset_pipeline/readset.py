# readset_pipeline/readset.py

import logging
import os
from collections import Counter
from functools import partial
from multiprocessing import Pool
from typing import Dict, List, Optional, Sequence, Union

from Bio.Seq import Seq

from readset_pipeline.config import ReadsetConfig, resolve_processors
from readset_pipeline.core.chromatogram import decode_chromatogram
from readset_pipeline.errors import ConfigurationError
from readset_pipeline.models.read import Orientation, ProcessedRead
from readset_pipeline.models.readset import Readset
from readset_pipeline.pipeline import Decoder, process_read
from readset_pipeline.utils.table_builders import build_read_summary_df

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]


def _check_unique_paths(forward_paths: List[str], reverse_paths: List[str]) -> None:
    shared = sorted(set(forward_paths) & set(reverse_paths))
    if shared:
        raise ConfigurationError(
            f"Files listed as both forward and reverse reads: {', '.join(shared)}"
        )

    repeated = sorted(p for p, n in Counter(forward_paths + reverse_paths).items() if n > 1)
    if repeated:
        raise ConfigurationError(f"Files listed more than once: {', '.join(repeated)}")


def build_readset(
    forward_paths: Sequence[PathLike],
    reverse_paths: Sequence[PathLike],
    config: Optional[ReadsetConfig] = None,
    decoder: Decoder = decode_chromatogram,
) -> Readset:
    """
    Build a readset from forward and reverse chromatograms.

    Every file is processed independently (in parallel when more than one
    processor is available). Reads failing the secondary-peak or length
    filters are left out of the readset but keep their summary row.

    Args:
        forward_paths: chromatograms used as they are.
        reverse_paths: chromatograms that get reverse-complemented.
        config: trimming and filtering options; defaults when None.
        decoder: turns a path into a DecodedChromatogram.

    Returns:
        Readset with reads keyed by file path and one summary row per file,
        forward files first, each group in input order.
    """
    config = config or ReadsetConfig()
    fwd = [os.fspath(p) for p in forward_paths]
    rev = [os.fspath(p) for p in reverse_paths]
    _check_unique_paths(fwd, rev)

    tasks = [(p, Orientation.FORWARD) for p in fwd] + [(p, Orientation.REVERSE) for p in rev]
    processors = min(resolve_processors(config.processors), max(1, len(tasks)))
    logger.info(
        f"Processing {len(fwd)} forward and {len(rev)} reverse reads with {processors} processor(s)"
    )

    worker = partial(process_read, config=config, decoder=decoder)
    if processors > 1:
        with Pool(processes=processors) as pool:
            results: List[ProcessedRead] = pool.starmap(worker, tasks)
    else:
        results = [worker(path, orientation) for path, orientation in tasks]

    reads: Dict[str, Seq] = {}
    for result in results:
        if result.is_present:
            reads[result.file_path] = result.sequence
        else:
            logger.debug(f"Excluded {result.file_path}: {result.outcome.value}")

    summaries = build_read_summary_df(results, reads.keys())
    logger.info(f"Readset built: {len(reads)} of {len(results)} reads included")

    return Readset(reads=reads, summaries=summaries)
