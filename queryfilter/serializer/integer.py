"""
Serializer for integer filters such as ``>=10;<20;!15``.
"""
from typing import Dict, List, Optional

from queryfilter.errors import ParsingError
from queryfilter.logging_config import get_logger
from queryfilter.models import Constraint, Filter, Operator, SqlFragment
from queryfilter.serializer.base import AbstractSerializer, register_serializer
from queryfilter.serializer.optimizer import optimize
from queryfilter.serializer.parser import SYMBOLS, parse
from queryfilter.serializer.sql import build_sql_parts

logger = get_logger(__name__)


@register_serializer
class IntegerSerializer(AbstractSerializer):
    """Encodes, decodes and translates integer constraints."""

    NAME = "integer"

    def serialize(self, constraints: List[Constraint]) -> str:
        """
        Encode constraints into the compact form.

        Equalities are written as bare numbers, everything else with its
        symbol alias. Set values produce one token per item.
        """
        tokens: Dict[str, None] = {}
        for constraint in constraints:
            prefix = "" if constraint.operator == Operator.EQ else SYMBOLS[constraint.operator]
            for item in constraint.value.items():
                tokens.setdefault(f"{prefix}{item}")
        return self.options.delimiter.join(tokens)

    def unserialize(self, raw: Optional[str]) -> List[Constraint]:
        """
        Decode an encoded filter into constraints.

        Raises:
            ParsingError: for malformed input or operators the options forbid
        """
        constraints = parse(raw, self.options.delimiter)
        self.check_allowed(constraints)
        return optimize(constraints, self.options.optimize)

    def check_allowed(self, constraints: List[Constraint]) -> None:
        for constraint in constraints:
            if not self.options.allows(constraint.operator):
                logger.debug("Operator %s rejected by serializer options", constraint.operator.value)
                raise ParsingError(f"Operator not allowed for this filter: {constraint.operator.value}")

    def build_sql_parts(self, filter: Filter, table_alias: str = "t") -> List[SqlFragment]:
        return build_sql_parts(filter, table_alias)
