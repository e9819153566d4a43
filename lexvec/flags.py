"""Command-line flag binding for :class:`~lexvec.config.LexvecConfig`.

Every configuration field is registered on an :mod:`argparse` parser with
``dest`` set to the field name, so parsing with ``namespace=config``
writes values straight into the configuration.

Usage::

    config = default_config()
    parser = bind_flags(argparse.ArgumentParser(), config)
    parser.parse_args(argv, namespace=config)
"""

from __future__ import annotations

import argparse
from typing import Any, List, Optional, Sequence

from lexvec.config import DEFAULTS, LexvecConfig, default_config
from lexvec.relation import InvalidRelationTypeError, RelationType


class RelationAction(argparse.Action):
    """Parse ``--rel`` into a :class:`RelationType` before storing it.

    An unknown token leaves the destination untouched and is reported as
    an argparse usage error chained from the :class:`InvalidRelationTypeError`.
    """

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: Any,
        values: Any,
        option_string: Optional[str] = None,
    ) -> None:
        try:
            relation_type = RelationType.parse(values)
        except InvalidRelationTypeError as exc:
            raise argparse.ArgumentError(self, str(exc)) from exc
        setattr(namespace, self.dest, relation_type)


def bind_flags(
    parser: argparse.ArgumentParser,
    config: Optional[LexvecConfig] = None,
) -> argparse.ArgumentParser:
    """Register one flag per configuration field on *parser*.

    Defaults shown in ``--help`` come from :data:`DEFAULTS`; the
    ``--goroutines`` default is the late-bound CPU count of *config* (or
    of a fresh default config when *config* is None).  Returns *parser*.
    """
    concurrency = config.concurrency if config is not None else default_config().concurrency

    parser.add_argument("--batch", dest="batch_size", type=int,
                        default=DEFAULTS["batch_size"],
                        help="batch size to train")
    parser.add_argument("-d", "--dim", dest="dim", type=int,
                        default=DEFAULTS["dim"],
                        help="dimension for word vector")
    parser.add_argument("--goroutines", dest="concurrency", type=int,
                        default=concurrency,
                        help="number of workers")
    parser.add_argument("--in-memory", dest="doc_in_memory",
                        action=argparse.BooleanOptionalAction,
                        default=DEFAULTS["doc_in_memory"],
                        help="whether to store the doc in memory")
    parser.add_argument("--initlr", dest="initlr", type=float,
                        default=DEFAULTS["initlr"],
                        help="initial learning rate")
    parser.add_argument("--iter", dest="iterations", type=int,
                        default=DEFAULTS["iterations"],
                        help="number of iteration")
    parser.add_argument("--max-count", dest="max_count", type=int,
                        default=DEFAULTS["max_count"],
                        help="upper limit to filter words")
    parser.add_argument("--min-count", dest="min_count", type=int,
                        default=DEFAULTS["min_count"],
                        help="lower limit to filter words")
    parser.add_argument("--sample", dest="negative_sample_size", type=int,
                        default=DEFAULTS["negative_sample_size"],
                        help="negative sample size")
    parser.add_argument("--rel", dest="relation_type", action=RelationAction,
                        default=DEFAULTS["relation_type"],
                        metavar=RelationType.choices(),
                        help=f"relation type for co-occurrence words. One of {RelationType.choices()}")
    parser.add_argument("--smooth", dest="smooth", type=float,
                        default=DEFAULTS["smooth"],
                        help="smoothing value for co-occurence value")
    parser.add_argument("--threshold", dest="subsample_threshold", type=float,
                        default=DEFAULTS["subsample_threshold"],
                        help="threshold for subsampling")
    parser.add_argument("--theta", dest="theta", type=float,
                        default=DEFAULTS["theta"],
                        help="lower limit of learning rate (lr >= initlr * theta)")
    parser.add_argument("--to-lower", dest="to_lower",
                        action=argparse.BooleanOptionalAction,
                        default=DEFAULTS["to_lower"],
                        help="whether the words on corpus convert to lowercase or not")
    parser.add_argument("--verbose", dest="verbose",
                        action=argparse.BooleanOptionalAction,
                        default=DEFAULTS["verbose"],
                        help="verbose mode")
    parser.add_argument("-w", "--window", dest="window", type=int,
                        default=DEFAULTS["window"],
                        help="context window size")
    return parser


def parse_flags(
    argv: Optional[Sequence[str]] = None,
    config: Optional[LexvecConfig] = None,
) -> LexvecConfig:
    """Parse *argv* into *config* (a fresh default config when None).

    Fields whose flags are absent from *argv* keep their current value.
    """
    if config is None:
        config = default_config()
    parser = bind_flags(argparse.ArgumentParser(prog="lexvec"), config)
    args: List[str] = list(argv) if argv is not None else []
    parser.parse_args(args, namespace=config)
    return config
