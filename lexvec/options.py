"""Functional options for building a :class:`~lexvec.config.LexvecConfig`.

Each builder returns a :data:`ModelOption`, a deferred single-field
mutation.  Options are applied in order, so a later option targeting
the same field wins::

    config = new_config(dim(300), window(8), relation(RelationType.PMI), to_lower())
"""

from __future__ import annotations

from typing import Callable

from lexvec.config import LexvecConfig, default_config
from lexvec.relation import RelationType

ModelOption = Callable[[LexvecConfig], None]


def _set(name: str, value) -> ModelOption:
    def option(config: LexvecConfig) -> None:
        setattr(config, name, value)

    return option


def batch_size(v: int) -> ModelOption:
    return _set("batch_size", v)


def dim(v: int) -> ModelOption:
    return _set("dim", v)


def doc_in_memory(enabled: bool = True) -> ModelOption:
    return _set("doc_in_memory", enabled)


def concurrency(v: int) -> ModelOption:
    return _set("concurrency", v)


def initlr(v: float) -> ModelOption:
    return _set("initlr", v)


def iterations(v: int) -> ModelOption:
    return _set("iterations", v)


def max_count(v: int) -> ModelOption:
    return _set("max_count", v)


def min_count(v: int) -> ModelOption:
    return _set("min_count", v)


def negative_sample_size(v: int) -> ModelOption:
    return _set("negative_sample_size", v)


def relation(typ: RelationType) -> ModelOption:
    """Assign *typ* as-is; it is not re-validated."""
    return _set("relation_type", typ)


def smooth(v: float) -> ModelOption:
    return _set("smooth", v)


def subsample_threshold(v: float) -> ModelOption:
    return _set("subsample_threshold", v)


def theta(v: float) -> ModelOption:
    return _set("theta", v)


def to_lower(enabled: bool = True) -> ModelOption:
    return _set("to_lower", enabled)


def verbose(enabled: bool = True) -> ModelOption:
    return _set("verbose", enabled)


def window(v: int) -> ModelOption:
    return _set("window", v)


def apply_options(config: LexvecConfig, *options: ModelOption) -> LexvecConfig:
    """Apply *options* to *config* in order and return it."""
    for option in options:
        option(config)
    return config


def new_config(*options: ModelOption) -> LexvecConfig:
    """Build a default configuration with *options* applied on top."""
    return apply_options(default_config(), *options)
