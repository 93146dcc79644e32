"""
errors.py - Failures that abort a madlib run.
"""
__author__ = "Thomas J. Daley, J.D."
__version__ = "0.1.0"

EXIT_OK = 0
EXIT_USAGE = 2


class MadLibError(Exception):
    """
    Base class for every failure a run can report.

    Each subclass names one kind of failure and the exit code the command line
    returns for it.
    """
    kind = "MadLibError"
    exit_code = 1

    def __init__(self, message:str, path:str=None, line:int=None):
        """
        Class initializer.

        Args:
            message (str): What went wrong.
            path (str): File the failure relates to, if any.
            line (int): Approximate 1-based line number within *path*, if known.
        """
        super().__init__(message)
        self.message = message
        self.path = path
        self.line = line

    def __str__(self)->str:
        result = "{}: {}".format(self.kind, self.message)
        if self.path is not None:
            result += " File '{}'.".format(self.path)
        if self.line is not None:
            result += " See line {}.".format(self.line)
        return result


class InputNotFound(MadLibError):
    kind = "InputNotFound"
    exit_code = 3


class MalformedInput(MadLibError):
    kind = "MalformedInput"
    exit_code = 4


class MissingField(MadLibError):
    kind = "MissingField"
    exit_code = 5


class UnknownCategory(MadLibError):
    kind = "UnknownCategory"
    exit_code = 6


class EmptyPool(MadLibError):
    kind = "EmptyPool"
    exit_code = 7


class IOFailure(MadLibError):
    kind = "IOFailure"
    exit_code = 8
