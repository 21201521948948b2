
class ScriblError(Exception):
    """ Base class for all Scribl errors"""
    pass

# ---------------------------------------------------------------------------
# Hard errors: abort the whole evaluation.
# ---------------------------------------------------------------------------

class ScriblHardError(ScriblError):
    """ Raised for errors that unwind the entire evaluation"""
    pass

class ScriblParseError(ScriblHardError):
    """ Raised when the syntax tree handed to the interpreter contains a syntax error"""

class ScriblParserUnavailable(ScriblHardError):
    """ Raised when the tree-sitter grammar cannot be loaded"""

class ScriblRedeclarationError(ScriblHardError):
    """ Raised when assigning to a name already bound constant in the resolution chain"""

    def __init__(self, name: str):
        super().__init__(f"Variable '{name}' is constant and cannot be reassigned")
        self.name = name

class ScriblRecursionError(ScriblHardError):
    """ Raised when the syntax tree nests deeper than the configured limit"""

# ---------------------------------------------------------------------------
# Soft errors: logged as diagnostics, the failing node evaluates to Void.
# ---------------------------------------------------------------------------

class ScriblSoftError(ScriblError):
    """ Base class for errors recovered locally by the evaluator"""
    pass

class ScriblTypeMismatch(ScriblSoftError):
    """ Raised when operand kinds do not match what an operator requires"""

class ScriblUnhandledOperator(ScriblSoftError):
    """ Raised when an operator token has no implementation"""

class ScriblUnhandledNodeKind(ScriblSoftError):
    """ Raised when the evaluator meets a node kind it does not implement"""

class ScriblUnresolvedMember(ScriblSoftError):
    """ Raised when a member path cannot be resolved for assignment"""

class ScriblLiteralParseError(ScriblSoftError):
    """ Raised when a literal's raw text cannot be converted to a value"""

class ScriblArityError(ScriblSoftError):
    """ Raised when a node does not have the children its kind requires"""
