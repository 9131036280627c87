from minirack import EvaluatorFn
from minirack import Expression
from minirack.errors import MinirackMalformedForm
from minirack.types.boolean import is_true
from minirack.types.frame import Frame


def if_form(
    tail: list[Expression],
    frame: Frame,
    evaluate_fn: EvaluatorFn,
) -> Expression:
    if len(tail) != 3:
        raise MinirackMalformedForm(
            "if requires a test, a consequent and an alternate"
        )

    test, consequent, alternate = tail
    if is_true(evaluate_fn(test, frame)):
        return evaluate_fn(consequent, frame)
    return evaluate_fn(alternate, frame)
