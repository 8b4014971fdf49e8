import sys


class Colors:
    BLUE = '\033[94m'
    GREEN = '\033[92m'
    WARNING = '\033[93m'
    FAIL = '\033[91m'
    ENDC = '\033[0m'
    BOLD = '\033[1m'
    REVERSE = '\033[7m'


class InterpreterError(Exception):
    """Base class for everything the interpreter reports."""


class StreamError(InterpreterError):
    """Fatal to the step that hit it. Ends the run."""


class DecodeError(StreamError):
    def __init__(self, source, reason="buffer did not contain valid UTF-8"):
        super().__init__(f"{source}: {reason}")
        self.source = source


class ExhaustedError(StreamError):
    def __init__(self, source):
        super().__init__(f"{source}: no more data")
        self.source = source


class SourceReadError(StreamError):
    def __init__(self, source, cause):
        super().__init__(f"{source}: {cause}")
        self.source = source
        self.cause = cause


class TapeAllocationError(StreamError):
    def __init__(self, address):
        super().__init__(f"cannot grow tape to address {address}")
        self.address = address


class Diagnostic(InterpreterError):
    """Non-fatal anomaly. Reported, never raised out of a step."""


class UnmatchedCloseBracket(Diagnostic):
    def __init__(self, position):
        super().__init__(f"no matching '[' found for ']' at {position}")
        self.position = position


class InvalidCodepoint(Diagnostic):
    def __init__(self, value):
        super().__init__(f"cannot print invalid codepoint {value:#x}")
        self.value = value


class OutputWriteFailure(Diagnostic):
    def __init__(self, cause):
        super().__init__(f"error while writing: {cause}")
        self.cause = cause


def print_diagnostic(diagnostic, stream=None):
    stream = stream or sys.stderr
    if stream.isatty():
        print(f"{Colors.WARNING}bfi: {diagnostic}{Colors.ENDC}", file=stream)
    else:
        print(f"bfi: {diagnostic}", file=stream)
