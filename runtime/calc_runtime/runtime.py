"""
Calc Runtime - one-line pipeline facade

Runs tokenizer -> parser -> evaluator for a single line against a variable
context that persists across calls.
"""

from typing import Dict

from .parser import CalcParser
from .evaluator import CalcEvaluator
from .ast_nodes import Statement
from .errors import NestingTooDeepError


class CalcRuntime:
    """Main calculator runtime interface"""

    def __init__(self, strict: bool = False):
        self.strict = strict
        self.evaluator = CalcEvaluator()

    def parse(self, source: str) -> Statement:
        try:
            return CalcParser(source, strict=self.strict).parse_statement()
        except RecursionError:
            raise NestingTooDeepError() from None

    def execute(self, source: str) -> int:
        """Parse and evaluate one line, returning its integer result"""
        stmt = self.parse(source)
        try:
            return self.evaluator.eval_statement(stmt)
        except RecursionError:
            raise NestingTooDeepError() from None

    def set_var(self, name: str, value: int):
        """Set variable in context"""
        self.evaluator.set_var(name, value)

    def get_var(self, name: str) -> int:
        """Get variable from context"""
        return self.evaluator.get_var(name)

    def clear_var(self, name: str):
        self.evaluator.clear_var(name)

    def get_env(self) -> Dict[str, int]:
        """Snapshot of the variable context"""
        return dict(self.evaluator.vars())

    def clear_env(self):
        """Remove all variables"""
        self.evaluator.clear_vars()


def execute_line(source: str, strict: bool = False) -> int:
    """
    Evaluate one line with an empty context (convenience function)

    Example:
        >>> execute_line('2 + 3 * 4')
        14
        >>> execute_line('(2 + 3) * 4')
        20
    """
    return CalcRuntime(strict=strict).execute(source)


__all__ = ['CalcRuntime', 'execute_line']
