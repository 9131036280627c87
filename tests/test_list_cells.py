import pytest

from minirack.errors import MinirackTypeError
from minirack.types.boolean import TRUE, FALSE, Boolean
from minirack.types.cons import Cons, EmptyList, EMPTY
from minirack.types.symbol import Symbol


def test_empty_list_is_a_singleton():
    assert EmptyList() is EMPTY
    assert len(EMPTY) == 0
    assert list(EMPTY) == []


def test_from_iterable_builds_from_empty():
    lst = Cons.from_iterable([1, 2, 3])
    assert lst.car == 1
    assert lst.cdr.cdr.cdr is EMPTY
    assert Cons.from_iterable([]) is EMPTY
    assert list(lst) == [1, 2, 3]
    assert len(lst) == 3


def test_cdr_must_be_a_list():
    with pytest.raises(MinirackTypeError):
        Cons(1, 2)
    with pytest.raises(MinirackTypeError):
        Cons(1, Symbol("x"))


def test_structural_equality_and_hash():
    a = Cons.from_iterable([1, Cons.from_iterable([Symbol("x")]), EMPTY])
    b = Cons.from_iterable([1, Cons.from_iterable([Symbol("x")]), EMPTY])
    assert a == b
    assert hash(a) == hash(b)
    assert a != Cons.from_iterable([1, 2])
    assert Cons.from_iterable([1, 2]) != Cons.from_iterable([1, 2, 3])
    assert Cons.from_iterable([1]) != EMPTY


def test_list_display():
    assert str(Cons.from_iterable([1, Symbol("a"), TRUE, EMPTY])) == "(1 a #t ())"
    assert str(EMPTY) == "()"


def test_booleans_are_not_integers():
    assert TRUE != 1
    assert FALSE != 0
    assert Boolean(True) == TRUE
    assert str(FALSE) == "#f"


def test_symbols_compare_by_name():
    assert Symbol("abc") == Symbol("abc")
    assert Symbol("abc") != "abc"
    assert len({Symbol("a"), Symbol("a")}) == 1
