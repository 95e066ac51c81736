"""
Unit tests for queryfilter.serializer.integer and the serializer registry.
"""

import pytest
from pydantic import ValidationError

from queryfilter.errors import ParsingError
from queryfilter.models import Filter, Operator
from queryfilter.options import SerializerOptions
from queryfilter.serializer.base import get_serializer
from queryfilter.serializer.integer import IntegerSerializer
from tests.conftest import int_set, scalar


class TestRegistry:

    def test_integer_is_registered(self):
        assert isinstance(get_serializer("integer"), IntegerSerializer)

    def test_options_are_forwarded(self):
        serializer = get_serializer("integer", {"optimize": False})
        assert serializer.get_option("optimize") is False

    def test_unknown_value_type(self):
        with pytest.raises(ValueError, match="date"):
            get_serializer("date")


class TestOptions:

    def test_defaults(self, serializer):
        assert serializer.get_option("ranges") is True
        assert serializer.get_option("optimize") is True
        assert serializer.get_option("delimiter") == ";"

    def test_missing_option_returns_default(self, serializer):
        assert serializer.get_option("nope", 42) == 42

    def test_unknown_option_rejected(self):
        with pytest.raises(ValidationError):
            IntegerSerializer({"optimise": True})


class TestUnserialize:

    def test_optimizes_by_default(self, serializer):
        assert serializer.unserialize("gt3;gt7;gt5;eq1;eq2") == [
            scalar(Operator.GT, 7),
            int_set(Operator.EQ, 1, 2),
        ]

    def test_optimization_can_be_disabled(self, raw_serializer):
        assert raw_serializer.unserialize("gt3;gt7") == [scalar(Operator.GT, 3), scalar(Operator.GT, 7)]

    def test_none(self, serializer):
        assert serializer.unserialize(None) == []

    def test_ranges_disabled(self):
        serializer = IntegerSerializer(SerializerOptions(ranges=False))
        assert serializer.unserialize("1;!2") == [int_set(Operator.EQ, 1), int_set(Operator.NEQ, 2)]
        with pytest.raises(ParsingError, match="not allowed"):
            serializer.unserialize("1;gt5")

    def test_limited_operators(self):
        serializer = IntegerSerializer({"limited": ["eq", "gt"]})
        assert serializer.unserialize("gt1;4") == [scalar(Operator.GT, 1), int_set(Operator.EQ, 4)]
        with pytest.raises(ParsingError, match="neq"):
            serializer.unserialize("!5")

    def test_custom_delimiter(self):
        serializer = IntegerSerializer({"delimiter": ","})
        assert serializer.unserialize("gt1,lt5") == [scalar(Operator.GT, 1), scalar(Operator.LT, 5)]


class TestSerialize:

    def test_encodes_with_symbols(self, serializer):
        constraints = [scalar(Operator.GTE, 10), scalar(Operator.LT, 20), scalar(Operator.NEQ, 15)]
        assert serializer.serialize(constraints) == ">=10;<20;!15"

    def test_equality_is_bare_number(self, serializer):
        assert serializer.serialize([int_set(Operator.EQ, 1, 2)]) == "1;2"

    def test_negative_values(self, serializer):
        assert serializer.serialize([scalar(Operator.EQ, -3), scalar(Operator.GT, -9)]) == "-3;>-9"

    def test_drops_duplicate_tokens(self, serializer):
        assert serializer.serialize([scalar(Operator.GT, 5), scalar(Operator.GT, 5)]) == ">5"

    def test_many_repeated_items(self, serializer):
        constraints = [scalar(Operator.NEQ, i % 300) for i in range(30000)]
        assert serializer.serialize(constraints) == ";".join(f"!{i}" for i in range(300))

    def test_custom_delimiter(self):
        serializer = IntegerSerializer({"delimiter": "|"})
        assert serializer.serialize([scalar(Operator.GT, 1), scalar(Operator.LT, 5)]) == ">1|<5"

    def test_round_trip(self, serializer):
        constraints = serializer.unserialize("gte10;lt20;neq15;neq16;-4;7")
        assert serializer.unserialize(serializer.serialize(constraints)) == constraints


class TestBuildSqlParts:

    def test_delegates_to_emitter(self, serializer):
        constraints = serializer.unserialize("5;gt1")
        fragments = serializer.build_sql_parts(Filter(field="field", constraints=constraints))
        assert [f.sql for f in fragments] == ["t.field = :t_field", "t.field > :t_field2"]
