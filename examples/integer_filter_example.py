"""
Example turning encoded integer filters into WHERE-clause fragments.

The fragments use named placeholders; set-valued parameters are meant to be
expanded by the driver (IN / NOT IN), scalar ones bound directly.
"""

from queryfilter import Filter, IntegerSerializer, ParsingError, get_serializer
from queryfilter.logging_config import setup_logging
from queryfilter.pipeline import run


def main():
    """Walk through the parse, optimize and emit stages."""

    print("=== Integer Filter Example ===\n")

    # 1. Decode and optimize
    print("1. Decoding a filter:")
    serializer = get_serializer("integer")
    constraints = serializer.unserialize("gte10;gte12;lt20;lt30;neq15;neq16")
    for constraint in constraints:
        print(f"  {constraint.operator.value}: {constraint.value}")
    print()

    # 2. Emit SQL
    print("2. SQL fragments:")
    for fragment in serializer.build_sql_parts(Filter(field="age", constraints=constraints), "u"):
        print(f"SQL: {fragment.sql}")
        print(f"Parameters: {fragment.parameters}")
    print()

    # 3. Encode back
    print("3. Re-encoded:")
    print(serializer.serialize(constraints))
    print()

    # 4. Malformed input
    print("4. Malformed input:")
    try:
        IntegerSerializer().unserialize("gt5;xx5")
    except ParsingError as e:
        print(f"Rejected: {e}")
    print()

    # 5. Result-returning pipeline
    print("5. Pipeline results:")
    for raw in ("1;2;3", "eq"):
        result = run(raw, "id")
        print(f"{raw!r}: {result}")


if __name__ == "__main__":
    setup_logging()
    main()
