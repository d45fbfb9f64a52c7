from dataclasses import dataclass, field
from typing import Dict, List

import pandas as pd
from Bio.Seq import Seq
from Bio.SeqRecord import SeqRecord

INCLUDED_COLUMN = "read.included.in.readset"


@dataclass
class Readset:
    reads: Dict[str, Seq] = field(default_factory=dict)
    summaries: pd.DataFrame = field(default_factory=pd.DataFrame)

    def __len__(self) -> int:
        return len(self.reads)

    @property
    def n_included(self) -> int:
        if self.summaries.empty:
            return 0
        return int(self.summaries[INCLUDED_COLUMN].sum())

    def to_seq_records(self) -> List[SeqRecord]:
        return [SeqRecord(seq, id=path, description="") for path, seq in self.reads.items()]
