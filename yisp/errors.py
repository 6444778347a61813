class YispError(Exception):
    """ Base class for all Yisp errors"""
    kind = "Error"


class YispTypeError(YispError):
    """ Raised when an operation gets a value of the wrong variant"""
    kind = "TypeError"


class YispDivisionByZero(YispError):
    """ Raised by div when the divisor is zero"""
    kind = "DivisionByZero"


class YispModulusByZero(YispError):
    """ Raised by mod when the truncated divisor is zero"""
    kind = "ModulusByZero"


class YispFunctionPositionError(YispError):
    """ Raised (strict mode) when the head of a call cannot be applied"""
    kind = "FunctionPosition"


class YispUnrecognizedBuiltin(YispError):
    """ Raised (strict mode) when no builtin matches a name"""
    kind = "UnrecognizedBuiltin"


class YispDefineSyntaxError(YispError):
    """ Raised (strict mode) when define gets neither a symbol nor a (name args...) list"""
    kind = "InvalidDefine"


class YispRecursionError(YispError):
    """ Raised when evaluation exhausts the Python call stack"""
    kind = "ResourceExhausted"
