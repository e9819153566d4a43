"""LexVec configuration CLI entry point.

Resolves a training configuration from built-in defaults, an optional
YAML file and command-line flags (in that order of precedence) and
prints the result as YAML.

Usage::

    python -m lexvec.cli --dim 300 --rel pmi
    python -m lexvec.cli --config configs/lexvec.yaml -w 8 --to-lower
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, Sequence

import yaml

from lexvec.config import LexvecConfig, load_config
from lexvec.flags import bind_flags

logger = logging.getLogger(__name__)


def _config_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(add_help=False)
    parser.add_argument(
        "--config",
        dest="config_path",
        type=str,
        default=argparse.SUPPRESS,
        help="Path to YAML LexVec config file",
    )
    return parser


def resolve_config(argv: Sequence[str]) -> LexvecConfig:
    """Build a :class:`LexvecConfig` from ``--config`` plus the bound flags.

    Flags given on the command line override values from the YAML file.
    Exits through argparse on usage errors, including an unknown ``--rel``.
    """
    pre_args, remaining = _config_parser().parse_known_args(list(argv))
    config = load_config(getattr(pre_args, "config_path", None))

    parser = argparse.ArgumentParser(
        prog="lexvec",
        description="Print the resolved LexVec training configuration",
        parents=[_config_parser()],
    )
    bind_flags(parser, config)
    parser.parse_args(remaining, namespace=config)
    return config


def main(argv: Optional[List[str]] = None) -> None:
    """Resolve the configuration from *argv* (``sys.argv`` when None) and print it."""
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%m/%d/%Y %H:%M:%S",
        level=logging.INFO,
    )

    config = resolve_config(sys.argv[1:] if argv is None else argv)
    if config.verbose:
        logging.getLogger().setLevel(logging.DEBUG)
    logger.debug("Resolved config: %s", config)

    print(yaml.safe_dump(config.to_dict(), default_flow_style=False, sort_keys=False), end="")


if __name__ == "__main__":
    main()
