# readset_pipeline/utils/exporters/__init__.py

from .fasta import FastaExporter
from .summary_csv import SummaryCsvExporter

EXPORTERS = {
    "fasta": FastaExporter,
    "summary_csv": SummaryCsvExporter,
}


def get_exporter(name: str, **kwargs):
    exporter_cls = EXPORTERS.get(name.lower())
    if not exporter_cls:
        raise ValueError(f"Unknown exporter: {name}")
    return exporter_cls(**kwargs)
