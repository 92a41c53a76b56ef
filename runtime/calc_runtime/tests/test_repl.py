"""
Test suite for the calc REPL and command line
"""

import io
import pytest
import sys
import os

# Add grandparent directory to path for imports (to find calc_runtime package)
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from calc_runtime.repl import Repl, main, PROMPT, WELCOME, GOODBYE
from calc_runtime.runtime import CalcRuntime


def run_session(text, runtime=None):
    runtime = runtime if runtime is not None else CalcRuntime()
    stdout = io.StringIO()
    status = Repl(runtime, stdin=io.StringIO(text), stdout=stdout).loop()
    return status, stdout.getvalue()


class TestSession:
    """Test the read-loop"""

    def test_welcome_and_exit(self):
        status, output = run_session('exit\n')
        assert status == 0
        assert output.startswith(WELCOME)
        assert output.endswith(GOODBYE)

    def test_prints_result(self):
        _, output = run_session('2 + 3 * 4\nexit\n')
        assert '=> 14\n' in output

    def test_vars_listing_sorted(self):
        _, output = run_session('b = 2\na = 1\nvars\nexit\n')
        assert 'a = 1\nb = 2\n' in output

    def test_clear(self):
        runtime = CalcRuntime()
        _, output = run_session('x = 1\nclear\nvars\nexit\n', runtime)
        assert runtime.get_env() == {}
        assert 'x = 1\n' not in output.split('=> 1\n', 1)[1]

    def test_error_then_continue(self):
        _, output = run_session('1 / 0\n5\nexit\n')
        assert 'error: [E_DIVISION_BY_ZERO] Division by zero\n' in output
        assert '=> 5\n' in output

    def test_undefined_variable_reported(self):
        _, output = run_session('y\nexit\n')
        assert 'E_UNDEFINED_VARIABLE' in output

    def test_parse_error_reported(self):
        _, output = run_session('(1 + 2\nexit\n')
        assert 'error: [E_MISSING_RPAREN]' in output

    def test_blank_line_ignored(self):
        _, output = run_session('\n   \nexit\n')
        assert 'error' not in output
        assert output.count(PROMPT) == 3

    def test_long_line_then_continue(self):
        line = ' + '.join(['1'] * 2000)
        _, output = run_session(line + '\n5\nexit\n')
        assert '=> 2000\n' in output
        assert '=> 5\n' in output

    def test_deep_parentheses_reported(self):
        line = '(' * 5000 + '1' + ')' * 5000
        status, output = run_session(line + '\n5\nexit\n')
        assert status == 0
        assert 'error: [E_NESTING_TOO_DEEP]' in output
        assert '=> 5\n' in output

    def test_end_of_input_exits(self):
        status, output = run_session('1 + 1\n')
        assert status == 0
        assert '=> 2\n' in output
        assert output.endswith(GOODBYE)

    def test_handle_returns_false_on_exit(self):
        repl = Repl(CalcRuntime(), stdin=io.StringIO(), stdout=io.StringIO())
        assert repl.handle('exit') is False
        assert repl.handle('1') is True


class TestCommandLine:
    """Test the argparse entry point"""

    def test_command(self, capsys):
        assert main(['-c', '(2 + 3) * 4']) == 0
        assert capsys.readouterr().out.strip() == '20'

    def test_command_error(self, capsys):
        assert main(['-c', '1 % 0']) == 1
        assert 'E_MODULO_BY_ZERO' in capsys.readouterr().err

    def test_strict_flag(self, capsys):
        assert main(['--strict', '-c', '1 + 2 $']) == 1
        assert 'E_INVALID_CHARACTER' in capsys.readouterr().err

    def test_lenient_default(self, capsys):
        assert main(['-c', '1 + 2 $']) == 0
        assert capsys.readouterr().out.strip() == '3'


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
