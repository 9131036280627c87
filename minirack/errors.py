
class MinirackError(Exception):
    """ Base class for all minirack errors"""
    pass

class MinirackSyntaxError(MinirackError):
    """ Raised when source text cannot be read"""

class MinirackInvalidSymbol(MinirackError):
    """ Raised when a non-symbol is used as a variable name"""
    pass

class MinirackUnboundVariable(MinirackError):
    """ Raised when a symbol is used before it is bound"""
    pass

class MinirackEmptyListEvaluation(MinirackError):
    """ Raised when the empty list is evaluated as code"""

class MinirackMalformedForm(MinirackError):
    """ Raised when a special form has the wrong shape"""

class MinirackNotAFunction(MinirackError):
    """ Raised when a non-function value is called"""

class MinirackArityError(MinirackError):
    """ Raised when the number of arguments passed to a function is incorrect"""

class MinirackTypeError(MinirackError):
    """ Raised when the types of arguments passed to a function are incorrect"""

class MinirackZeroDivisionError(MinirackError):
    """ Raised when an integer is divided by zero"""
