# readset_pipeline/utils/exporters/fasta.py

import io
from typing import Dict, Optional

from Bio import SeqIO

from readset_pipeline.models.readset import Readset

from .base import ExporterBase


class FastaExporter(ExporterBase):
    def __init__(self, basename: str = "readset", id_map: Optional[Dict[str, str]] = None):
        self.basename = basename
        self.id_map = id_map or {}

    def export(self, readset: Readset) -> str:
        records = readset.to_seq_records()
        for record in records:
            record.id = self.id_map.get(record.id, record.id)
        output = io.StringIO()
        SeqIO.write(records, output, "fasta")
        return output.getvalue()

    def filename(self) -> str:
        return f"{self.basename}.fasta"
