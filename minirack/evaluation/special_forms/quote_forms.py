from minirack import Expression, EvaluatorFn
from minirack.errors import MinirackMalformedForm
from minirack.types.frame import Frame


def quote_form(
    tail: list[Expression], frame: Frame, evaluate_fn: EvaluatorFn
) -> Expression:
    """(quote datum) returns datum unevaluated."""
    if len(tail) != 1:
        raise MinirackMalformedForm(f"quote expects exactly 1 argument, got {len(tail)}")
    return tail[0]
