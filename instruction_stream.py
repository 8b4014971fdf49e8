from enum import Enum

from chars import CharReader
from errors import ExhaustedError


class Op(Enum):
    RIGHT = '>'
    LEFT = '<'
    INC = '+'
    DEC = '-'
    OUTPUT = '.'
    INPUT = ','
    JUMP_IF_ZERO = '['
    JUMP_IF_NONZERO = ']'

    def __str__(self):
        return self.value


SYMBOLS = {op.value: op for op in Op}


class InstructionStream:
    """
    Lazily materialized program.

    Each pull reads characters from the source until one is an instruction
    symbol, which gets decoded into an Op and appended. Everything else is a
    comment and is dropped. Appended ops are never removed or reordered, so
    the materialized prefix can be scanned backwards at any time.
    """

    def __init__(self, source):
        self.reader = CharReader(source, 'program')
        self.ops = []

    def __len__(self):
        return len(self.ops)

    def __getitem__(self, index):
        return self.ops[index]

    def pull_next(self):
        while True:
            char = self.reader.read_char()
            if char is None:
                raise ExhaustedError('program')
            op = SYMBOLS.get(char)
            if op is not None:
                self.ops.append(op)
                return op

    def find_forward(self, op, start):
        """Index of the first `op` at or after `start` in the materialized ops."""
        for i in range(start, len(self.ops)):
            if self.ops[i] is op:
                return i
        return None

    def find_backward(self, op, end):
        """Index of the nearest `op` before `end` in the materialized ops."""
        for i in range(end - 1, -1, -1):
            if self.ops[i] is op:
                return i
        return None
