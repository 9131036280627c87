from minirack.types.symbol import Symbol
from minirack.types.boolean import Boolean, TRUE, FALSE, to_boolean, is_true
from minirack.types.cons import Cons, EmptyList, EMPTY, LispList
from minirack.types.primitive import PrimitiveFunction
from minirack.types.frame import Frame
from minirack.types.closure import Closure

__all__ = [
    "Symbol",
    "Boolean",
    "TRUE",
    "FALSE",
    "to_boolean",
    "is_true",
    "Cons",
    "EmptyList",
    "EMPTY",
    "LispList",
    "PrimitiveFunction",
    "Frame",
    "Closure",
]
