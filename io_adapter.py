from chars import CharReader
from errors import ExhaustedError, InvalidCodepoint, OutputWriteFailure

MAX_CODEPOINT = 0x10FFFF
SURROGATES = range(0xD800, 0xE000)


def to_scalar(value):
    """The character for a cell value, or None if it is not a unicode scalar."""
    if value > MAX_CODEPOINT or value in SURROGATES:
        return None
    return chr(value)


class IOAdapter:
    """Moves single cells between the tape and the input/output streams."""

    def __init__(self, output, input, report):
        self.output = output
        self.input = CharReader(input, 'input')
        self.report = report

    def write(self, value):
        char = to_scalar(value)
        if char is None:
            self.report(InvalidCodepoint(value))
            return
        try:
            self.output.write(char.encode('utf-8'))
            self.output.flush()
        except OSError as e:
            self.report(OutputWriteFailure(e))

    def read(self, tape):
        char = self.input.read_char()
        if char is None:
            raise ExhaustedError('input')
        tape.write(ord(char))
        return char
