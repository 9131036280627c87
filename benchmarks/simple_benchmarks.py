from timeit import timeit

from minirack.interpreter import Interpreter
from minirack.types.symbol import Symbol
from minirack.types.frame import Frame
from minirack.reader.parser import parse
from minirack.evaluation.evaluator import evaluate


def time_evaluator(code: str, rounds: int, prelude=None) -> float:
    """Time evaluation only: the source is parsed once and the last form is
    re-evaluated against a session that has already run the earlier forms.
    """
    itp = Interpreter(prelude=prelude)
    *setup, expr = parse(code)
    for form in setup:
        evaluate(form, itp.env)
    # Warmup
    evaluate(expr, itp.env)
    # Timed
    return timeit(lambda: evaluate(expr, itp.env), number=rounds)


def bench_lookup_chain(n_frames: int = 1000, n_lookups: int = 10000) -> float:
    # Build a frame chain with a binding at the root
    root = Frame()
    key = Symbol("answer")
    root.define(key, 42)
    frame = root
    for _ in range(n_frames):
        frame = Frame(parent=frame)
    # Warmup
    for _ in range(1000):
        frame.lookup(key)
    # Timed
    return timeit(lambda: frame.lookup(key), number=n_lookups)


LAMBDA_APPLY_CODE = "((lambda (x y) (+ x y)) 1 2)"

FACT_CODE = r"""
(define fact
  (lambda (n)
    (if (<= n 1)
        1
        (* n (fact (- n 1))))))
(fact 100)
"""

FIB_CODE = r"""
(define fib
  (lambda (n)
    (if (< n 2)
        n
        (+ (fib (- n 1)) (fib (- n 2))))))
(fib 15)
"""

# Exercises the derived list functions from the prelude
PRELUDE_LIST_CODE = r"""
(define xs (list 1 2 3 4 5 6 7 8 9 10))
(foldl + 0 (map (lambda (x) (* x x)) (filter (lambda (x) (> x 3)) xs)))
"""


def _print_timing(name: str, code: str, rounds: int, prelude=None) -> None:
    t = time_evaluator(code, rounds, prelude)
    print(f"Benchmark: {name}")
    print(f"  evaluator: {t:.6f}s  [rounds={rounds}]")


if __name__ == "__main__":
    print("Benchmark: frame lookup chain (pure Python frame walk)")
    print(f"  time: {bench_lookup_chain():.6f}s")

    _print_timing("lambda application", LAMBDA_APPLY_CODE, rounds=20000)
    _print_timing("recursive factorial", FACT_CODE, rounds=500)
    _print_timing("naive fibonacci", FIB_CODE, rounds=20)
    _print_timing("prelude map/filter/foldl", PRELUDE_LIST_CODE, rounds=1000, prelude='auto')
