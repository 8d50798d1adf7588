

class LambError(Exception):
    """ Base class for all lamb errors"""
    pass

class LambSyntaxError(LambError):
    """ Raised when the source text cannot be tokenized or parsed"""

    def __init__(self, message: str, line: int, col: int):
        super().__init__(f"{message} ({line}:{col})")
        self.message = message
        self.line = line
        self.col = col

class LambUnboundSymbol(LambError):
    """ Raised when a variable is read, or written from a nested scope, before it is bound"""

class LambInvalidSymbol(LambError):
    """ Raised when the target of an assignment is not a variable"""

class LambTypeError(LambError):
    """ Raised when an operand or callee has the wrong type"""

class LambZeroDivisionError(LambError):
    """ Raised when dividing or taking a remainder by zero"""
