import io

from core.calculator import ExpressionCalculator
from main import build_parser, main, run_expressions, run_shell


def run(lines, **kwargs):
    out = io.StringIO()
    kwargs.setdefault("show_banner", False)
    kwargs.setdefault("prompt", "")
    handled = run_shell(lines, out, **kwargs)
    return handled, out.getvalue().splitlines()


def test_session_output():
    handled, output = run(["-3 + 4*(2-1) ^ 3\n", "5 / 0\n", "(1 + 2\n", "\n"])
    assert handled == 3
    assert output == [
        "Postfix: 3 ~ 4 2 1 - 3 ^ * +",
        "Result: 1",
        "Postfix: 5 0 /",
        "Error (evaluate): Division by zero",
        "Error (infix->postfix): Mismatched parentheses",
        "Goodbye!",
    ]


def test_whitespace_line_ends_session():
    handled, output = run(["1 + 1\n", "   \t\n", "2 + 2\n"])
    assert handled == 1
    assert output == ["Postfix: 1 1 +", "Result: 2", "Goodbye!"]


def test_end_of_input_ends_session():
    handled, output = run(["7 % 4"])
    assert handled == 1
    assert output[-1] == "Goodbye!"
    assert "Result: 3" in output


def test_empty_first_line_skips_evaluation():
    handled, output = run(["\n", "1 + 1\n"])
    assert handled == 0
    assert output == ["Goodbye!"]


def test_long_line_is_rejected():
    handled, output = run(["1 + 2 + 3\n", "1+2\n"], max_expr_len=5)
    assert output == ["Error (input): Line too long", "Postfix: 1 2 +", "Result: 3", "Goodbye!"]


def test_custom_unary_symbol_and_banner():
    out = io.StringIO()
    run_shell(["-1\n"], out, unary_symbol="u", prompt="> ")
    text = out.getvalue()
    assert text.startswith("Expression Calculator (integers)")
    assert "> Postfix: 1 u\n" in text


def test_run_expressions_exit_code():
    out = io.StringIO()
    calculator = ExpressionCalculator()
    assert run_expressions(["2 ^ 3 ^ 2"], out, calculator, "~") == 0
    assert out.getvalue() == "Postfix: 2 3 2 ^ ^\nResult: 512\n"
    assert run_expressions(["1", "2 ^ -1"], io.StringIO(), calculator, "~") == 1


def test_parser_defaults():
    args = build_parser().parse_args([])
    assert args.expression is None
    assert args.overflow == "wrap"
    assert args.unary_symbol == "~"
    assert not args.quiet


def test_main_with_expressions(capsys):
    args = build_parser().parse_args(["-e", "1 + 2", "-e", "2 * -5", "--overflow", "checked"])
    assert main(args) == 0
    captured = capsys.readouterr()
    assert captured.out.splitlines() == [
        "Postfix: 1 2 +", "Result: 3",
        "Postfix: 2 5 ~ *", "Result: -10",
    ]


def test_control_separator_line_does_not_end_session():
    handled, output = run(["\x1c\n", "1 + 1\n", "\n"])
    assert handled == 2
    assert output == [
        "Error (infix->postfix): Invalid character: '\x1c'",
        "Postfix: 1 1 +",
        "Result: 2",
        "Goodbye!",
    ]
