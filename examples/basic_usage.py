"""Basic usage examples for sigguard."""

import numbers

from sigguard import (
    declare, validate, configure,
    AnyDefined, NullableTokenless, UndefinedToken, Undefined,
    Nullable, Array, Regex, Custom, Rest,
    SignatureMismatch,
)


# Example 1: Single signature
@declare(float)
def double(x):
    """Double a number."""
    return x * 2


# Example 2: Alternative signatures, first match wins
@declare(str).declare(numbers.Number)
def to_label(value):
    return str(value)


# Example 3: Variable arity with a trailing fixed position
@declare(float, {"rest": {"nullable": str}}, UndefinedToken)
def log_values(level, *rest):
    return level, rest


# Example 4: Subscripted modifier spelling
@declare(Array[Nullable[str]], Rest[Regex[r"^--"]])
def run(names, *flags):
    return [n for n in names if n], flags


def is_port(value):
    return isinstance(value, int) and 0 < value < 65536


# Example 5: Custom predicates and presence sentinels
@declare(Custom[is_port], NullableTokenless(str))
def connect(port, host):
    return (host or "localhost", port)


if __name__ == "__main__":
    print(double(21))
    print(to_label(5))
    print(log_values(3, "a", None, Undefined))
    print(run(["a", None], "--verbose"))
    print(connect(8080, None))
    print(validate([1, 2], {"array": float}))

    try:
        double("21")
    except SignatureMismatch as e:
        print(e)

    # Functions finalized after this point are not checked
    configure(enabled=False)

    @declare(AnyDefined)
    def unchecked(value):
        return value

    print(unchecked(None))
