# readset_pipeline/utils/table_builders.py

import os
from pathlib import Path
from typing import Collection, List

import pandas as pd

from readset_pipeline.models.chromatogram import SUMMARY_METRIC_COLUMNS
from readset_pipeline.models.read import ProcessedRead
from readset_pipeline.models.readset import INCLUDED_COLUMN

SUMMARY_COLUMNS = ["file.path", "folder.name", "file.name", *SUMMARY_METRIC_COLUMNS, INCLUDED_COLUMN]


def build_read_summary_df(results: List[ProcessedRead], included_paths: Collection[str]) -> pd.DataFrame:
    rows = []

    for result in results:
        path = Path(result.file_path)
        rows.append({
            "file.path": result.file_path,
            "folder.name": os.path.basename(os.path.dirname(result.file_path) or "."),
            "file.name": path.name,
            **result.summary.to_dict(),
            INCLUDED_COLUMN: result.file_path in included_paths,
        })

    return pd.DataFrame(rows, columns=SUMMARY_COLUMNS)
