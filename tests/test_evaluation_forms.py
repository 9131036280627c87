import pytest

from minirack.errors import MinirackMalformedForm, MinirackUnboundVariable
from minirack.types.boolean import TRUE
from minirack.types.closure import Closure
from minirack.types.cons import Cons, EMPTY
from minirack.types.primitive import PrimitiveFunction
from minirack.types.symbol import Symbol


@pytest.fixture
def counted(env):
    """Binds (tick x), a primitive that counts its calls and returns x."""
    calls = []

    def tick(args):
        calls.append(args[0])
        return args[0]

    env.define(Symbol("tick"), PrimitiveFunction("tick", tick, ("x",)))
    return calls


# ------------------ quote ------------------

@pytest.mark.parametrize(
    "code, expected",
    [
        ("(quote 5)", 5),
        ("(quote x)", Symbol("x")),
        ("(quote ())", EMPTY),
        ("(quote (1 2 3))", Cons.from_iterable([1, 2, 3])),
        ("(quote (+ 1 2))", Cons.from_iterable([Symbol("+"), 1, 2])),
        ("'(a (b))", Cons.from_iterable([Symbol("a"), Cons.from_iterable([Symbol("b")])])),
    ],
)
def test_quote_returns_datum_unevaluated(env, code, expected, run):
    assert run(code) == expected


@pytest.mark.parametrize("code", ["(quote)", "(quote 1 2)"])
def test_quote_arity(env, code, run):
    with pytest.raises(MinirackMalformedForm):
        run(code)


# ------------------ define ------------------

def test_define_binds_and_returns_value(env, run):
    assert run("(define x (+ 1 2))") == 3
    assert env.lookup(Symbol("x")) == 3


def test_define_evaluates_body_once(env, counted, run):
    assert run("(define y (tick 7))") == 7
    assert counted == [7]


def test_define_ignores_extra_forms(env, counted, run):
    assert run("(define z 1 (tick 2))") == 1
    assert counted == []


@pytest.mark.parametrize("code", ["(define)", "(define x)", "(define 5 1)", "(define (f x) x)"])
def test_define_malformed(env, code, run):
    with pytest.raises(MinirackMalformedForm):
        run(code)


def test_define_inside_closure_body_is_local(env, run):
    run("(define f (lambda () (define local 5)))")
    assert run("(f)") == 5
    with pytest.raises(MinirackUnboundVariable):
        run("local")


# ------------------ lambda ------------------

def test_lambda_builds_closure_over_current_frame(env, run):
    fn = run("(lambda (a b) (+ a b))")
    assert isinstance(fn, Closure)
    assert fn.formals == (Symbol("a"), Symbol("b"))
    assert fn.body == Cons.from_iterable([Symbol("+"), Symbol("a"), Symbol("b")])
    assert fn.env is env


def test_lambda_with_no_parameters(env, run):
    assert run("((lambda () 42))") == 42


@pytest.mark.parametrize(
    "code",
    [
        "(lambda)",
        "(lambda (x))",
        "(lambda (x) x x)",
        "(lambda x x)",
        "(lambda (x 1) x)",
        "(lambda ((x)) x)",
    ],
)
def test_lambda_malformed(env, code, run):
    with pytest.raises(MinirackMalformedForm):
        run(code)


# ------------------ if ------------------

def test_if_true_takes_consequent_only(env, counted, run):
    assert run("(if true (tick 1) (tick 2))") == 1
    assert counted == [1]


@pytest.mark.parametrize("test_expr", ["false", "0", "1", "'()", "'(1)", "car", "(lambda () 1)", "'x"])
def test_everything_but_true_takes_alternate(env, counted, test_expr, run):
    assert run(f"(if {test_expr} (tick 1) (tick 2))") == 2
    assert counted == [2]


def test_if_accepts_hash_t(env, run):
    assert run("(if #t 'yes 'no)") == Symbol("yes")
    assert run("(if (< 1 2) 'yes 'no)") == Symbol("yes")


@pytest.mark.parametrize("code", ["(if)", "(if true)", "(if true 1)", "(if true 1 2 3)"])
def test_if_arity(env, code, run):
    with pytest.raises(MinirackMalformedForm):
        run(code)


def test_if_result_is_a_value(env, run):
    assert run("(if (= 1 1) true false)") is TRUE
