from minirack import EvaluatorFn
from minirack import Expression
from minirack.errors import MinirackMalformedForm
from minirack.types.frame import Frame
from minirack.types.symbol import Symbol


def define_form(
    tail: list[Expression],
    frame: Frame,
    evaluate_fn: EvaluatorFn,
) -> Expression:
    """
    (define name value)
    Binds in the current frame and returns the bound value. Forms after the
    value expression are ignored.
    """
    if len(tail) < 2:
        raise MinirackMalformedForm("define requires a name and an expression")

    name, val_expr = tail[0], tail[1]
    if not isinstance(name, Symbol):
        raise MinirackMalformedForm(f"define target must be a symbol, got {name}")
    value = evaluate_fn(val_expr, frame)
    frame.define(name, value)
    return value
