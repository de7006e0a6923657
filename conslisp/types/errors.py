class ConsLispError(Exception):
    """ Base class for all conslisp errors"""
    pass

class UnboundSymbol(ConsLispError):
    """ Raised when a symbol is looked up but bound in no enclosing frame"""

    def __init__(self, name):
        super().__init__(f"Unbound symbol {name}")
        self.name = name

class NotAPair(ConsLispError):
    """ Raised when car/cdr is taken of something that is neither a pair nor Nil"""

class NotAProperList(ConsLispError):
    """ Raised when a list operation meets a tail that is neither a pair nor Nil"""

class NotASymbol(ConsLispError):
    """ Raised when a binding position holds something other than a symbol"""

class ArityError(ConsLispError):
    """ Raised when a function or special form gets the wrong number of arguments"""

    def __init__(self, expected, actual, name=None):
        who = f"{name}: " if name else ""
        super().__init__(f"{who}arity mismatch, expected {expected}, got {actual}")
        self.expected = expected
        self.actual = actual
        self.name = name

class LispTypeError(ConsLispError):
    """ Raised when a primitive receives operands of the wrong kind"""

class LispZeroDivisionError(LispTypeError):
    """ Raised on division by zero"""

class NotAFunction(ConsLispError):
    """ Raised when something other than a closure or primitive is applied"""

class LispSyntaxError(ConsLispError):
    """ Raised when the reader meets malformed input"""

class InternalError(ConsLispError):
    """ Raised on interpreter invariant violations that user code cannot cause"""
