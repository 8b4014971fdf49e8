#!/usr/bin/env python3
import argparse
import io
import sys

from bfi import non_negative_int
from errors import Colors, StreamError
from interpreter import Interpreter
from tape import INITIAL_TAPE_SIZE

MAX_DUMP_CELLS = 1024


class Debugger:
    def __init__(self, program, input, output=None, tape_size=INITIAL_TAPE_SIZE):
        self.itp = Interpreter(program, output or sys.stdout.buffer, input, tape_size=tape_size)
        self.breakpoints = set()
        self.error = None
        self.last_cmd = 's'

    @property
    def finished(self):
        return self.error is not None

    def run_step(self):
        if self.finished:
            return False
        sys.stdout.flush()
        try:
            self.itp.step()
        except StreamError as e:
            self.error = e
            return False
        return True

    def run_continue(self):
        while self.run_step():
            if self.itp.instruction_pointer in self.breakpoints:
                print(f"Breakpoint hit at {self.itp.instruction_pointer}")
                return

    def toggle_breakpoint(self, ip):
        if ip in self.breakpoints:
            self.breakpoints.remove(ip)
            print(f"Breakpoint removed at {ip}")
        else:
            self.breakpoints.add(ip)
            print(f"Breakpoint set at {ip}")

    def dump_memory(self, addr, count):
        if count > MAX_DUMP_CELLS:
            print(f"Dump limited to {MAX_DUMP_CELLS} cells")
            count = MAX_DUMP_CELLS
        print("Memory Dump:")
        for i in range(addr, addr + count):
            print(f"[{i:04}]: {self.itp.tape.peek(i)}")

    def print_state(self):
        itp = self.itp
        tape = itp.tape
        print(f"\n{Colors.BOLD}--- Step {itp.steps} ---{Colors.ENDC}")
        print(f"IP: {itp.instruction_pointer} / {len(itp.instructions)}")
        print(f"Ptr: {tape.ptr}")

        # Tape window around ptr
        window = 8
        start = max(0, tape.ptr - window)
        tape_str = ""
        for i in range(start, tape.ptr + window + 1):
            val = f"{tape.peek(i):03}"
            if i == tape.ptr:
                tape_str += f"{Colors.REVERSE}[{val}]{Colors.ENDC} "
            else:
                tape_str += f" {val}  "
        print(f"Loc: {tape_str}")

        # Only what has been read from the program so far
        context_window = 2
        start_op = max(0, itp.instruction_pointer - context_window)
        end_op = min(len(itp.instructions), itp.instruction_pointer + context_window + 1)
        for i in range(start_op, end_op):
            if i == itp.instruction_pointer:
                print(f"{Colors.GREEN}-> {i:04}: {itp.instructions[i]}{Colors.ENDC}")
            else:
                print(f"   {i:04}: {itp.instructions[i]}")

    def handle(self, cmd):
        """Run one debugger command. False means the session is over."""
        cmd = cmd.strip()
        if cmd == '':
            cmd = self.last_cmd
        self.last_cmd = cmd

        if cmd.startswith('s'):
            self.run_step()
        elif cmd.startswith('c'):
            self.run_continue()
        elif cmd.startswith('q'):
            return False
        elif cmd.startswith('m'):
            parts = cmd.split()
            try:
                addr = int(parts[1]) if len(parts) > 1 else self.itp.tape.ptr
                count = int(parts[2]) if len(parts) > 2 else 20
            except ValueError:
                print("Usage: m [addr] [count]")
            else:
                self.dump_memory(addr, count)
        elif cmd.startswith('b'):
            try:
                self.toggle_breakpoint(int(cmd.split()[1]))
            except (IndexError, ValueError):
                print("Usage: b <ip>")
        else:
            print(f"Unknown command: {cmd}")

        if self.finished:
            print(f"{Colors.FAIL}Stopped: {self.error}{Colors.ENDC}")
            return False
        return True

    def run(self):
        print("BF Debugger started. Commands: (s)tep, (c)ontinue, (b)reakpoint <ip>, "
              "(m)em dump [addr] [count], (q)uit, enter to repeat last")
        while True:
            self.print_state()
            try:
                cmd = input(f"{Colors.BLUE}(bf-dbg){Colors.ENDC} ")
            except EOFError:
                break
            if not self.handle(cmd):
                break

        print("Execution finished.")


def main(argv=None):
    parser = argparse.ArgumentParser(prog='bf-debug', description='Step through a Brainfuck program')
    parser.add_argument('file', metavar='FILE')
    parser.add_argument('--input', metavar='PATH',
                        help='file the program reads with , (default: no input)')
    parser.add_argument('--tape-size', type=non_negative_int, default=INITIAL_TAPE_SIZE)
    args = parser.parse_args(argv)

    paths = [args.file] + ([args.input] if args.input else [])
    files = []
    try:
        for path in paths:
            files.append(open(path, 'rb'))
    except OSError as e:
        for f in files:
            f.close()
        print(f"could not open file '{path}': {e.strerror or e}", file=sys.stderr)
        return 1

    program = files[0]
    input_data = files[1] if args.input else io.BytesIO()
    with program, input_data:
        Debugger(program, input_data, tape_size=args.tape_size).run()
    return 0


if __name__ == '__main__':
    sys.exit(main())
