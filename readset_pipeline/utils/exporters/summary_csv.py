# readset_pipeline/utils/exporters/summary_csv.py

from readset_pipeline.models.readset import Readset

from .base import ExporterBase


class SummaryCsvExporter(ExporterBase):
    def __init__(self, basename: str = "read_summaries"):
        self.basename = basename

    def export(self, readset: Readset) -> str:
        return readset.summaries.to_csv(index=False)

    def filename(self) -> str:
        return f"{self.basename}.csv"
