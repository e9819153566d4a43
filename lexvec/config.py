"""LexVec training hyperparameter configuration.

Provides a dataclass-based configuration whose defaults all come from
the single :data:`DEFAULTS` mapping, so the command-line flags and the
functional options cannot drift apart.  Supports loading overrides from
YAML files and writing a resolved configuration back out.
"""

from __future__ import annotations

import logging
import os
from dataclasses import asdict, dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

import yaml

from lexvec.relation import RelationType

logger = logging.getLogger(__name__)

DEFAULTS: Mapping[str, Any] = MappingProxyType({
    "batch_size": 100000,
    "dim": 10,
    "doc_in_memory": False,
    "initlr": 0.025,
    "iterations": 15,
    "max_count": -1,
    "min_count": 5,
    "negative_sample_size": 5,
    "relation_type": RelationType.default(),
    "smooth": 0.75,
    "subsample_threshold": 1.0e-3,
    "theta": 1.0e-4,
    "to_lower": False,
    "verbose": False,
    "window": 5,
})


def host_cpu_count() -> int:
    """Number of processing units on this host, 1 if it cannot be determined."""
    return os.cpu_count() or 1


@dataclass
class LexvecConfig:
    """Hyperparameters for LexVec word-embedding training.

    ``concurrency`` is resolved from the host CPU count each time an
    instance is created.  Numeric fields are not range-checked here;
    the trainer rejects values it cannot use.
    """

    batch_size: int = DEFAULTS["batch_size"]
    dim: int = DEFAULTS["dim"]
    doc_in_memory: bool = DEFAULTS["doc_in_memory"]
    concurrency: int = field(default_factory=host_cpu_count)
    initlr: float = DEFAULTS["initlr"]
    iterations: int = DEFAULTS["iterations"]
    max_count: int = DEFAULTS["max_count"]
    min_count: int = DEFAULTS["min_count"]
    negative_sample_size: int = DEFAULTS["negative_sample_size"]
    relation_type: RelationType = DEFAULTS["relation_type"]
    smooth: float = DEFAULTS["smooth"]
    subsample_threshold: float = DEFAULTS["subsample_threshold"]
    theta: float = DEFAULTS["theta"]
    to_lower: bool = DEFAULTS["to_lower"]
    verbose: bool = DEFAULTS["verbose"]
    window: int = DEFAULTS["window"]

    @property
    def lr_floor(self) -> float:
        """Lowest learning rate the trainer may decay to."""
        return self.initlr * self.theta

    def set_relation(self, token: str) -> None:
        """Parse *token* and assign it; the current value survives a bad token."""
        self.relation_type = RelationType.parse(token)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["relation_type"] = str(self.relation_type)
        return data


def default_config() -> LexvecConfig:
    """Return a new :class:`LexvecConfig` holding every default."""
    return LexvecConfig()


def load_config(yaml_path: Optional[str] = None) -> LexvecConfig:
    """Load a LexvecConfig, optionally overriding from a YAML file.

    Parameters
    ----------
    yaml_path:
        Path to a YAML configuration file keyed by field name.  If
        *None*, returns the default configuration.  Fields missing from
        the file keep their default values.

    Returns
    -------
    A :class:`LexvecConfig` instance.

    Raises
    ------
    InvalidRelationTypeError
        If ``relation_type`` is not a known relation token.
    TypeError
        If the file is not a mapping or names a field that does not exist.
    """
    if yaml_path is None:
        return default_config()

    logger.info("Loading LexVec config from %s", yaml_path)
    with open(yaml_path, "r") as f:
        data: Dict[str, Any] = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise TypeError(
            f"LexVec config {yaml_path} must be a mapping of field names, got {type(data).__name__}"
        )

    if "relation_type" in data:
        data["relation_type"] = RelationType.parse(data["relation_type"])

    return LexvecConfig(**data)


def save_config(config: LexvecConfig, yaml_path: str) -> None:
    """Write *config* to *yaml_path*, creating parent directories."""
    os.makedirs(os.path.dirname(yaml_path) or ".", exist_ok=True)
    with open(yaml_path, "w") as f:
        yaml.safe_dump(config.to_dict(), f, default_flow_style=False, sort_keys=False)
    logger.debug("Saved LexVec config to %s", yaml_path)
