#!/usr/bin/env python3

import argparse
import logging
import os
import sys
from typing import List

from readset_pipeline.config import resolve_config
from readset_pipeline.core.abi_loader import find_abi_files
from readset_pipeline.errors import ReadsetError
from readset_pipeline.readset import build_readset
from readset_pipeline.utils.exporters import get_exporter


def expand_paths(paths: List[str]) -> List[str]:
    """Replace folder arguments by the .ab1 files they contain."""
    expanded = []
    for path in paths:
        if os.path.isdir(path):
            expanded.extend(find_abi_files(path))
        else:
            expanded.append(path)
    return expanded


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Build a readset from Sanger chromatograms (.ab1).")
    parser.add_argument("-f", "--forward", nargs="+", default=[], help="Forward .ab1 files or folders")
    parser.add_argument("-r", "--reverse", nargs="+", default=[], help="Reverse .ab1 files or folders (reverse-complemented)")
    parser.add_argument("--no-trim", action="store_true", help="Keep full reads instead of Mott-trimming them")
    parser.add_argument("--trim-cutoff", type=float, default=0.0001, help="Error probability cutoff for trimming")
    parser.add_argument("--max-secondary-peaks", type=int, default=None, help="Drop reads with more secondary peaks than this")
    parser.add_argument("--secondary-peak-ratio", type=float, default=0.33, help="Minimum secondary/primary peak height ratio")
    parser.add_argument("--min-length", type=int, default=1, help="Drop reads shorter than this")
    parser.add_argument("--processors", type=int, default=None, help="Worker processes (default: all available)")
    parser.add_argument("--fasta", help="Optional path to write the readset as FASTA")
    parser.add_argument("--summary", help="Optional path to write the read summaries as CSV")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def config_from_args(args: argparse.Namespace):
    return resolve_config(
        trim=not args.no_trim,
        trim_cutoff=args.trim_cutoff,
        max_secondary_peaks=args.max_secondary_peaks,
        secondary_peak_ratio=args.secondary_peak_ratio,
        min_length=args.min_length,
        processors=args.processors,
    )


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = config_from_args(args)
        readset = build_readset(expand_paths(args.forward), expand_paths(args.reverse), config)
    except ReadsetError as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 1

    if args.fasta:
        with open(args.fasta, "w") as out:
            out.write(get_exporter("fasta").export(readset))
        print(f"[✓] Readset written to: {args.fasta}")

    if args.summary:
        with open(args.summary, "w") as out:
            out.write(get_exporter("summary_csv").export(readset))
        print(f"[✓] Read summaries written to: {args.summary}")

    if not (args.fasta or args.summary):
        print(readset.summaries.to_string(index=False))

    return 0


if __name__ == "__main__":
    sys.exit(main())
