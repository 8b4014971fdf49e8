"""
Execution engine.

One call to `step()` fetches, dispatches and advances past exactly one
instruction. Instructions are pulled from the program only when the
instruction pointer runs off the materialized prefix, or when a `[` needs to
look ahead for its `]`.

Bracket matching is a plain nearest-symbol scan, not depth aware: `[` jumps
to the first `]` after it and `]` returns to the closest `[` before it. Nested
loops therefore do not behave like in a jump-table interpreter.
"""
import sys

from errors import ExhaustedError, StreamError, UnmatchedCloseBracket, print_diagnostic
from instruction_stream import InstructionStream, Op
from io_adapter import IOAdapter
from tape import ADDRESS_BITS, INITIAL_TAPE_SIZE, Tape


class Interpreter:
    def __init__(self, program, output, input, tape_size=INITIAL_TAPE_SIZE,
                 address_bits=ADDRESS_BITS, trace=False, report=print_diagnostic):
        self.diagnostics = []
        self._report = report
        self.tape = Tape(tape_size, address_bits)
        self.instructions = InstructionStream(program)
        self.io = IOAdapter(output, input, self.report)
        self.instruction_pointer = 0
        self.trace = trace
        self.steps = 0

    def report(self, diagnostic):
        self.diagnostics.append(diagnostic)
        self._report(diagnostic)

    def fetch(self):
        while self.instruction_pointer >= len(self.instructions):
            self.instructions.pull_next()
        return self.instructions[self.instruction_pointer]

    def step(self):
        op = self.fetch()

        if self.trace:
            print(f"p = {self.tape.ptr}, ip = {self.instruction_pointer}, "
                  f"op = '{op}', cell = {self.tape.read()}", file=sys.stderr)

        if op is Op.RIGHT:
            self.tape.move(1)
        elif op is Op.LEFT:
            self.tape.move(-1)
        elif op is Op.INC:
            self.tape.write_delta(1)
        elif op is Op.DEC:
            self.tape.write_delta(-1)
        elif op is Op.OUTPUT:
            self.io.write(self.tape.read())
        elif op is Op.INPUT:
            self.io.read(self.tape)
        elif op is Op.JUMP_IF_ZERO:
            self.jump_if_zero()
        elif op is Op.JUMP_IF_NONZERO:
            self.jump_if_nonzero()

        self.instruction_pointer += 1
        self.steps += 1

    def jump_if_zero(self):
        if self.tape.read() != 0:
            return

        target = self.instructions.find_forward(Op.JUMP_IF_NONZERO, self.instruction_pointer + 1)
        try:
            while target is None:
                if self.instructions.pull_next() is Op.JUMP_IF_NONZERO:
                    target = len(self.instructions) - 1
        except ExhaustedError:
            # Whole program read, no `]`: leave the pointer past the end so
            # the next fetch ends the run.
            target = len(self.instructions) - 1
        self.instruction_pointer = target

    def jump_if_nonzero(self):
        if self.tape.read() == 0:
            return

        target = self.instructions.find_backward(Op.JUMP_IF_ZERO, self.instruction_pointer)
        if target is None:
            self.report(UnmatchedCloseBracket(self.instruction_pointer))
            return
        self.instruction_pointer = target

    def run(self):
        """Step until a source fails. Returns the error that ended the run."""
        while True:
            try:
                self.step()
            except StreamError as e:
                return e
