

class SchemeError(Exception):
    """ Base class for all schemer errors"""
    pass

class SchemeUnboundSymbol(SchemeError):
    """ Raised when an identifier is bound neither in the environment chain nor in the definition store"""
    pass

class SchemeShapeError(SchemeError):
    """ Raised when an expression or value does not have a shape the evaluator handles"""

class SchemeTypeError(SchemeShapeError):
    """ Raised when the types of arguments passed to a primitive are incorrect"""

class SchemeArityError(SchemeError):
    """ Raised when the number of arguments passed to a function or form is incorrect"""

class SchemeSyntaxError(SchemeError):
    """ Raised when source text cannot be read"""

class SchemeModuleError(SchemeError):
    """ Raised when a required module cannot be found or loaded"""

class SchemeIncompleteInput(SchemeSyntaxError):
    """ Raised when source text ends in the middle of an expression"""

class SchemeRecursionError(SchemeError):
    """ Raised when evaluation nests deeper than the Python stack allows"""
