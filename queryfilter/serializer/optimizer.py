"""
Collapses a list of ANDed integer constraints into its minimal equivalent.
"""
from typing import List

from queryfilter.errors import InternalConsistencyError
from queryfilter.grouping import group_by
from queryfilter.logging_config import get_logger, log_performance
from queryfilter.models import Constraint, IntSet, Operator

logger = get_logger(__name__)


@log_performance(logger, "optimize")
def optimize(constraints: List[Constraint], enabled: bool = True) -> List[Constraint]:
    """
    Drop dominated bounds and merge equality groups.

    Lower bounds keep only the largest value, upper bounds only the smallest;
    every constraint sitting on that tightest value is kept. All eq values
    merge into one set-valued constraint, and likewise for neq. Groups are
    emitted in the order their operator first appears.

    Args:
        constraints: Constraints as produced by the parser
        enabled: When False the input is returned untouched

    Returns:
        A new list of constraints

    Raises:
        InternalConsistencyError: on an operator this optimizer has no rule for
    """
    if not enabled:
        return constraints

    groups = group_by(lambda c: c.operator, lambda c: c.value, constraints)

    optimized: List[Constraint] = []
    for operator, group in groups.items():
        if operator in (Operator.GT, Operator.GTE):
            tightest = max(value.maximum for value in group)
            optimized.extend(c for value, members in group.items() if value.maximum == tightest for c in members)
        elif operator in (Operator.LT, Operator.LTE):
            tightest = min(value.minimum for value in group)
            optimized.extend(c for value, members in group.items() if value.minimum == tightest for c in members)
        elif operator in (Operator.EQ, Operator.NEQ):
            merged = list(dict.fromkeys(item for value in group for item in value.items()))
            optimized.append(Constraint(operator=operator, value=IntSet(values=tuple(merged))))
        else:
            logger.error("No optimization rule for operator %r", operator)
            raise InternalConsistencyError(f"Undefined behavior for operator: {operator!r}")

    logger.debug("Optimized %d constraints down to %d", len(constraints), len(optimized))
    return optimized
