# Core type aliases for minirack's data model.
# Code and data share one representation: Symbol, Boolean, int, the EMPTY
# list and Cons cells, PrimitiveFunction and Closure values.
#
# Naming guidance:
# - Expression: Use in reader/evaluator code for forms and values alike.
# - EvaluatorFn: Signature of the evaluator handed to special forms.

from typing import Any, Callable

# Runtime value alias
Expression = Any

# Evaluator function type: (expr, frame) -> value
EvaluatorFn = Callable[..., Expression]
