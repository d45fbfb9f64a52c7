# readset_pipeline/core/ambiguity.py

from typing import Dict, FrozenSet, Union

from Bio.Data.IUPACData import ambiguous_dna_values
from Bio.Seq import Seq

# {bases} -> IUPAC code, e.g. {"A", "G"} -> "R"
_CODE_FOR_BASES: Dict[FrozenSet[str], str] = {
    frozenset(bases): code
    for code, bases in ambiguous_dna_values.items()
    if code != "X"
}


def ambiguity_code(primary: str, secondary: str) -> str:
    primary = primary.upper()
    secondary = secondary.upper()
    if primary == secondary:
        return primary
    if "N" in (primary, secondary) or "-" in (primary, secondary):
        return "N"
    bases = frozenset(ambiguous_dna_values.get(primary, "N")) | frozenset(ambiguous_dna_values.get(secondary, "N"))
    return _CODE_FOR_BASES.get(bases, "N")


def ambiguity_consensus(primary: str, secondary: str) -> Seq:
    """
    Merge primary and secondary calls into one read: agreeing positions keep
    the base, disagreeing ones get the IUPAC code covering both.
    """
    if len(primary) != len(secondary):
        raise ValueError(
            f"Primary and secondary calls must have equal length ({len(primary)} != {len(secondary)})."
        )
    return Seq("".join(ambiguity_code(p, s) for p, s in zip(str(primary), str(secondary))))


def reverse_complement(seq: Union[Seq, str]) -> Seq:
    if not isinstance(seq, Seq):
        seq = Seq(seq)
    return seq.reverse_complement()
