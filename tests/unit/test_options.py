"""
Unit tests for queryfilter.options.
"""

import pytest
from pydantic import ValidationError

from queryfilter.models import Operator
from queryfilter.options import SerializerOptions


class TestSerializerOptions:

    def test_defaults(self):
        options = SerializerOptions()
        assert options.ranges is True
        assert options.optimize is True
        assert options.limited is None
        assert options.delimiter == ";"

    def test_from_mapping(self):
        options = SerializerOptions.from_mapping({"ranges": False, "limited": ["eq", "neq"]})
        assert options.ranges is False
        assert options.limited == frozenset({Operator.EQ, Operator.NEQ})

    def test_from_mapping_passes_instances_through(self):
        options = SerializerOptions(optimize=False)
        assert SerializerOptions.from_mapping(options) is options

    def test_from_none(self):
        assert SerializerOptions.from_mapping(None) == SerializerOptions()

    def test_rejects_unknown_options(self):
        with pytest.raises(ValidationError):
            SerializerOptions.from_mapping({"sort": True})

    def test_rejects_empty_delimiter(self):
        with pytest.raises(ValidationError):
            SerializerOptions(delimiter="")

    def test_allows_everything_by_default(self):
        options = SerializerOptions()
        assert all(options.allows(op) for op in Operator)

    def test_ranges_disabled(self):
        options = SerializerOptions(ranges=False)
        assert [op for op in Operator if options.allows(op)] == [Operator.EQ, Operator.NEQ]

    def test_limited(self):
        options = SerializerOptions(limited=frozenset({Operator.GT}))
        assert [op for op in Operator if options.allows(op)] == [Operator.GT]
