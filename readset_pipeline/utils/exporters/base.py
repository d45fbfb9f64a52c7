# readset_pipeline/utils/exporters/base.py

from abc import ABC, abstractmethod

from readset_pipeline.models.readset import Readset


class ExporterBase(ABC):
    @abstractmethod
    def export(self, readset: Readset) -> str:
        """Export to string format (FASTA, CSV, etc.)"""
        pass

    @abstractmethod
    def filename(self) -> str:
        """Default filename for download"""
        pass
