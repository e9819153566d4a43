"""Relation types applied to co-occurrence counts before LexVec training.

The relation type decides how raw co-occurrence counts are transformed:

* PPMI – positive pointwise mutual information (default)
* PMI – pointwise mutual information
* COLLOCATION – raw collocation count
* LOG_COLLOCATION – log of the collocation count
"""

from __future__ import annotations

from enum import Enum


class InvalidRelationTypeError(ValueError):
    """Raised when a token does not name one of the known relation types."""

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(
            f"invalid relation type: {token} not in {RelationType.choices()}"
        )


class RelationType(str, Enum):
    PPMI = "ppmi"
    PMI = "pmi"
    COLLOCATION = "co"
    LOG_COLLOCATION = "logco"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def default(cls) -> "RelationType":
        return cls.PPMI

    @classmethod
    def choices(cls) -> str:
        """Legal tokens joined in declaration order, e.g. ``ppmi|pmi|co|logco``."""
        return "|".join(member.value for member in cls)

    @classmethod
    def parse(cls, token: str) -> "RelationType":
        """Return the member whose token is exactly *token*.

        Matching is case-sensitive; anything else raises
        :class:`InvalidRelationTypeError`.
        """
        for member in cls:
            if member.value == token:
                return member
        raise InvalidRelationTypeError(token)
