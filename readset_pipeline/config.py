# readset_pipeline/config.py

import os
from multiprocessing import cpu_count
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from readset_pipeline.errors import ConfigurationError

__VERSION__ = "1.0.0"


class ReadsetConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    trim: bool = True
    trim_cutoff: float = Field(0.0001, gt=0.0, lt=1.0)
    max_secondary_peaks: Optional[int] = Field(None, ge=0)
    secondary_peak_ratio: float = Field(0.33, gt=0.0, lt=1.0)
    min_length: int = Field(1, ge=0)
    processors: Optional[int] = Field(None, ge=1)  # None = all available

    def __init__(self, **data):
        try:
            super().__init__(**data)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid readset configuration: {e}") from e


def resolve_config(config: Optional[ReadsetConfig] = None, **overrides) -> ReadsetConfig:
    """
    Build a validated ReadsetConfig, applying keyword overrides on top of
    `config` (or the defaults). Invalid values raise ConfigurationError.
    """
    base = config.model_dump() if config is not None else {}
    base.update(overrides)
    return ReadsetConfig(**base)


def resolve_processors(processors: Optional[int] = None) -> int:
    if processors is not None:
        if processors < 1:
            raise ConfigurationError(f"processors must be >= 1, got {processors}")
        return processors

    if hasattr(os, "sched_getaffinity"):
        return max(1, len(os.sched_getaffinity(0)))
    return max(1, cpu_count())
