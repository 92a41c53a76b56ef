"""
Calc REPL - interactive read-loop around CalcRuntime

Commands:
    exit    leave the loop
    vars    list variables as "name = value"
    clear   remove all variables

Any other non-blank line is evaluated and printed as "=> value". Errors are
reported and the loop moves on to the next line.
"""

from typing import Optional, TextIO
import argparse
import logging
import sys

from .runtime import CalcRuntime
from .errors import CalcError

logger = logging.getLogger(__name__)

PROMPT = ">>> "
RESULT = "=> "
WELCOME = (
    "Welcome to the Calculator REPL!\n"
    "type <expression> to evaluate an expression\n"
    "type 'vars' to list variables\n"
    "type 'clear' to clear variables\n"
    "type 'exit' to exit\n"
    "\n"
)
GOODBYE = "Goodbye!\n"


class Repl:
    """Line-oriented read-eval-print loop"""

    def __init__(self, runtime: CalcRuntime, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None,
                 prompt: str = PROMPT):
        self.runtime = runtime
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.prompt = prompt

    def loop(self) -> int:
        """Run until 'exit' or end of input; returns the exit status"""
        self.stdout.write(WELCOME)
        while True:
            self.stdout.write(self.prompt)
            self.stdout.flush()
            line = self.stdin.readline()
            if not line:
                self.stdout.write("\n" + GOODBYE)
                return 0
            if not self.handle(line.rstrip('\n')):
                self.stdout.write(GOODBYE)
                return 0

    def handle(self, line: str) -> bool:
        """Process one line; False means the loop should stop"""
        command = line.strip()
        if command == "exit":
            return False
        elif command == "clear":
            self.runtime.clear_env()
        elif command == "vars":
            for name, value in sorted(self.runtime.get_env().items()):
                self.stdout.write(f"{name} = {value}\n")
        elif command:
            try:
                value = self.runtime.execute(line)
            except CalcError as e:
                logger.debug("Line %r failed: %s", line, e)
                self.stdout.write(f"error: {e}\n")
            else:
                self.stdout.write(f"{RESULT}{value}\n")
        return True


def main(argv: Optional[list] = None) -> int:
    parser = argparse.ArgumentParser(description="Integer calculator REPL.")
    parser.add_argument("-c", "--command", metavar="LINE",
                        help="Evaluate a single line, print the result and exit.")
    parser.add_argument("--strict", action="store_true",
                        help="Reject unrecognized characters instead of ending the line there.")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging level (default: WARNING).")
    parser.add_argument("--prompt", default=PROMPT, help="Prompt string for interactive mode.")
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level),
                        format="%(levelname)s %(name)s: %(message)s")

    runtime = CalcRuntime(strict=args.strict)

    if args.command is not None:
        try:
            print(runtime.execute(args.command))
        except CalcError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        return 0

    return Repl(runtime, prompt=args.prompt).loop()


__all__ = ['Repl', 'main', 'PROMPT', 'RESULT', 'WELCOME', 'GOODBYE']
