"""Tests for lexvec.relation — co-occurrence relation types."""

from __future__ import annotations

import pytest

from lexvec.relation import InvalidRelationTypeError, RelationType

ALL_TOKENS = ["ppmi", "pmi", "co", "logco"]


class TestRelationTypeEnum:
    def test_has_four_members(self):
        assert len(RelationType) == 4

    def test_tokens_in_declaration_order(self):
        assert [t.value for t in RelationType] == ALL_TOKENS

    def test_default_is_ppmi(self):
        assert RelationType.default() is RelationType.PPMI

    def test_choices(self):
        assert RelationType.choices() == "ppmi|pmi|co|logco"

    def test_str_renders_token(self):
        assert str(RelationType.LOG_COLLOCATION) == "logco"
        assert f"{RelationType.COLLOCATION}" == "co"


class TestParse:
    @pytest.mark.parametrize("token", ALL_TOKENS)
    def test_accepts_every_legal_token(self, token):
        """parse(token) then str() gives back exactly the token."""
        assert str(RelationType.parse(token)) == token

    @pytest.mark.parametrize("member", list(RelationType))
    def test_round_trip(self, member):
        assert RelationType.parse(str(member)) is member

    @pytest.mark.parametrize("token", ["bogus", "", "PPMI", "Pmi", "log", "logco ", "c"])
    def test_rejects_other_strings(self, token):
        """Matching is exact and case-sensitive."""
        with pytest.raises(InvalidRelationTypeError):
            RelationType.parse(token)


class TestInvalidRelationTypeError:
    def test_message_names_token_and_choices(self):
        with pytest.raises(InvalidRelationTypeError) as excinfo:
            RelationType.parse("bogus")
        assert str(excinfo.value) == "invalid relation type: bogus not in ppmi|pmi|co|logco"
        assert excinfo.value.token == "bogus"

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            RelationType.parse("nope")
