import pytest

from minirack.errors import MinirackArityError, MinirackNotAFunction
from minirack.evaluation.apply import apply
from minirack.evaluation.evaluator import evaluate
from minirack.types.closure import Closure
from minirack.types.cons import Cons
from minirack.types.frame import Frame
from minirack.types.symbol import Symbol


def test_lexical_not_dynamic_scope(env, run):
    code = """
        (define x 1)
        (define f (lambda () x))
        (define g (lambda (x) (f)))
        (g 2)
    """
    assert run(code) == 1


def test_closure_captures_enclosing_call_frame(env, run):
    run("(define make-adder (lambda (n) (lambda (x) (+ x n))))")
    run("(define add5 (make-adder 5))")
    run("(define add10 (make-adder 10))")
    assert run("(add5 1)") == 6
    assert run("(add10 1)") == 11


@pytest.mark.parametrize("call", ["(pair 1)", "(pair 1 2 3)", "(pair)"])
def test_arity_mismatch_is_never_padded_or_truncated(env, call, run):
    run("(define pair (lambda (a b) (list a b)))")
    with pytest.raises(MinirackArityError, match="pair"):
        run(call)


def test_anonymous_arity_error(env, run):
    with pytest.raises(MinirackArityError, match="anonymous"):
        run("((lambda (a) a))")


def test_recursive_length(env, run):
    run(
        """
        (define len
          (lambda (lst)
            (if (null? lst) 0 (+ 1 (len (cdr lst))))))
        """
    )
    assert run("(len '(1 2 3))") == 3
    assert run("(len '())") == 0


def test_recursion_gets_a_frame_per_call(env, run):
    run(
        """
        (define fact
          (lambda (n)
            (if (= n 0) 1 (* n (fact (- n 1))))))
        """
    )
    assert run("(fact 10)") == 3628800


def test_mutual_recursion_through_shared_global_frame(env, run):
    run("(define even? (lambda (n) (if (= n 0) true (odd? (- n 1)))))")
    # odd? is defined after even? captured the global frame
    run("(define odd? (lambda (n) (if (= n 0) false (even? (- n 1)))))")
    assert run("(even? 10)") == run("true")
    assert run("(odd? 7)") == run("true")


def test_later_define_visible_to_earlier_closure(env, run):
    run("(define get-y (lambda () y))")
    run("(define y 3)")
    assert run("(get-y)") == 3


def test_parameters_shadow_globals_only_inside_call(env, run):
    run("(define x 100)")
    run("(define f (lambda (x) (* x 2)))")
    assert run("(f 4)") == 8
    assert run("x") == 100


def test_higher_order_functions(env, run):
    run("(define twice (lambda (f x) (f (f x))))")
    assert run("(twice (lambda (n) (* n 3)) 2)") == 18
    assert run("(twice cdr '(1 2 3))") == Cons.from_iterable([3])


def test_extend_env_parent_is_defining_frame():
    defining = Frame()
    fn = Closure([Symbol("a")], Symbol("a"), defining)
    frame = fn.extend_env([7])
    assert frame.parent is defining
    assert frame.vars == {Symbol("a"): 7}


def test_apply_rejects_non_functions(env):
    with pytest.raises(MinirackNotAFunction):
        apply(5, [], evaluate)


def test_closure_display(env, run):
    run("(define square (lambda (x) (* x x)))")
    assert str(run("square")) == "#<function:square>"
    assert str(run("(lambda (x) x)")) == "#<function:anonymous>"
