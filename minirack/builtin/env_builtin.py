"""Built-in functions for the minirack runtime.

This module defines integer arithmetic, comparison, boolean logic, list
processing and kind predicates, plus the registration step that seeds a
fresh global frame with them.
"""
from __future__ import annotations

from minirack import Expression
from minirack.errors import MinirackTypeError, MinirackZeroDivisionError
from minirack.types.boolean import Boolean, TRUE, FALSE, to_boolean, is_true
from minirack.types.closure import Closure
from minirack.types.cons import Cons, EmptyList, EMPTY, LispList
from minirack.types.frame import Frame
from minirack.types.primitive import PrimitiveFunction
from minirack.types.symbol import Symbol


def _integer(name: str, value: Expression) -> int:
    if not isinstance(value, int):
        raise MinirackTypeError(f"{name} expects integers, got {value}")
    return value


def _integers(name: str, args: list[Expression]) -> list[int]:
    return [_integer(name, a) for a in args]


def _list(name: str, value: Expression) -> LispList:
    if not isinstance(value, (Cons, EmptyList)):
        raise MinirackTypeError(f"{name} expects a list, got {value}")
    return value


def _pair(name: str, value: Expression) -> Cons:
    if not isinstance(value, Cons):
        raise MinirackTypeError(f"{name} expects a non-empty list, got {value}")
    return value


# -------------------------------
# Arithmetic
# -------------------------------
def add(args: list[Expression]) -> int:
    """Return the sum of all arguments; 0 with no arguments."""
    return sum(_integers("+", args))


def sub(args: list[Expression]) -> int:
    """Subtract all subsequent numbers from the first; unary negation for one arg."""
    nums = _integers("-", args)
    if len(nums) == 1:
        return -nums[0]
    result = nums[0]
    for n in nums[1:]:
        result -= n
    return result


def mul(args: list[Expression]) -> int:
    result = 1
    for n in _integers("*", args):
        result *= n
    return result


def div(args: list[Expression]) -> int:
    """Integer division folded left, truncating toward zero."""
    nums = _integers("/", args)
    result = nums[0]
    for n in nums[1:]:
        if n == 0:
            raise MinirackZeroDivisionError("/: division by zero")
        quotient = abs(result) // abs(n)
        result = quotient if (result < 0) == (n < 0) else -quotient
    return result


def modulo(args: list[Expression]) -> int:
    """Remainder taking the sign of the divisor."""
    a, b = _integers("modulo", args)
    if b == 0:
        raise MinirackZeroDivisionError("modulo: division by zero")
    return a % b


# -------------------------------
# Comparison
# -------------------------------
def num_eq(args: list[Expression]) -> Boolean:
    a, b = _integers("=", args)
    return to_boolean(a == b)


def num_ne(args: list[Expression]) -> Boolean:
    a, b = _integers("!=", args)
    return to_boolean(a != b)


def lt(args: list[Expression]) -> Boolean:
    a, b = _integers("<", args)
    return to_boolean(a < b)


def lte(args: list[Expression]) -> Boolean:
    a, b = _integers("<=", args)
    return to_boolean(a <= b)


def gt(args: list[Expression]) -> Boolean:
    a, b = _integers(">", args)
    return to_boolean(a > b)


def gte(args: list[Expression]) -> Boolean:
    a, b = _integers(">=", args)
    return to_boolean(a >= b)


def is_equal(args: list[Expression]) -> Boolean:
    """Structural equality: lists element-wise, symbols by name."""
    a, b = args
    return to_boolean(a is b or a == b)


# -------------------------------
# Boolean logic
# -------------------------------
# Same truthiness as `if`: only #t is true. Arguments arrive already evaluated.
def logical_not(args: list[Expression]) -> Boolean:
    return to_boolean(not is_true(args[0]))


def logical_and(args: list[Expression]) -> Boolean:
    return to_boolean(all(is_true(a) for a in args))


def logical_or(args: list[Expression]) -> Boolean:
    return to_boolean(any(is_true(a) for a in args))


# -------------------------------
# List operations
# -------------------------------
def cons(args: list[Expression]) -> Cons:
    head, tail = args
    return Cons(head, _list("cons", tail))


def car(args: list[Expression]) -> Expression:
    return _pair("car", args[0]).car


def cdr(args: list[Expression]) -> LispList:
    return _pair("cdr", args[0]).cdr


def list_builtin(args: list[Expression]) -> LispList:
    return Cons.from_iterable(args)


def length(args: list[Expression]) -> int:
    return len(_list("length", args[0]))


# -------------------------------
# Predicates
# -------------------------------
def is_null(args: list[Expression]) -> Boolean:
    return to_boolean(args[0] is EMPTY)


def is_pair(args: list[Expression]) -> Boolean:
    return to_boolean(isinstance(args[0], Cons))


def is_list(args: list[Expression]) -> Boolean:
    return to_boolean(isinstance(args[0], (Cons, EmptyList)))


def is_symbol(args: list[Expression]) -> Boolean:
    return to_boolean(isinstance(args[0], Symbol))


def is_number(args: list[Expression]) -> Boolean:
    return to_boolean(isinstance(args[0], int))


def is_boolean(args: list[Expression]) -> Boolean:
    return to_boolean(isinstance(args[0], Boolean))


def is_procedure(args: list[Expression]) -> Boolean:
    return to_boolean(isinstance(args[0], (PrimitiveFunction, Closure)))


# -------------------------------
# Registration
# -------------------------------
# (name, implementation, required parameters, variadic tail)
CATALOG = (
    ("+", add, (), "n"),
    ("-", sub, ("n",), "m"),
    ("*", mul, (), "n"),
    ("/", div, ("n", "d"), "more"),
    ("modulo", modulo, ("n", "d"), None),
    ("=", num_eq, ("a", "b"), None),
    ("!=", num_ne, ("a", "b"), None),
    ("<", lt, ("a", "b"), None),
    ("<=", lte, ("a", "b"), None),
    (">", gt, ("a", "b"), None),
    (">=", gte, ("a", "b"), None),
    ("equal?", is_equal, ("a", "b"), None),
    ("not", logical_not, ("x",), None),
    ("and", logical_and, (), "x"),
    ("or", logical_or, (), "x"),
    ("cons", cons, ("x", "lst"), None),
    ("car", car, ("lst",), None),
    ("cdr", cdr, ("lst",), None),
    ("list", list_builtin, (), "x"),
    ("length", length, ("lst",), None),
    ("null?", is_null, ("x",), None),
    ("pair?", is_pair, ("x",), None),
    ("list?", is_list, ("x",), None),
    ("symbol?", is_symbol, ("x",), None),
    ("number?", is_number, ("x",), None),
    ("boolean?", is_boolean, ("x",), None),
    ("procedure?", is_procedure, ("x",), None),
)


def primitive_functions() -> list[PrimitiveFunction]:
    """Build a fresh PrimitiveFunction for every catalog entry."""
    return [
        PrimitiveFunction(name, fn, params, rest)
        for name, fn, params, rest in CATALOG
    ]


def register(frame: Frame) -> None:
    """Register all builtin functions and constants into the given frame."""
    frame.update({Symbol(p.name): p for p in primitive_functions()})
    frame.define(Symbol("true"), TRUE)
    frame.define(Symbol("false"), FALSE)


def new_global_frame() -> Frame:
    """A parentless frame seeded with every primitive; one per session."""
    frame = Frame()
    register(frame)
    return frame
