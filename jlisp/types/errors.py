class JlispError(Exception):
    """ Base class for all Jlisp errors"""
    pass

class JlispInvalidSymbol(JlispError):
    """ Raised when a non-symbol is used where a symbol is required"""
    pass

class JlispSyntaxError(JlispError):
    """ Raised when source text does not match the grammar"""

class JlispArityError(JlispError):
    """ Raised when the number of arguments passed to a function is incorrect"""

class JlispTypeError(JlispError):
    """ Raised when the types of arguments passed to a function are incorrect"""

class JlispValueError(JlispError):
    """ Raised when an argument has the right type but an unusable value"""
