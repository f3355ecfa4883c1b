"""主程序入口 - 交互式整数表达式计算器"""
import argparse
import logging
import sys

from config.config import (
    LIMITS_CONFIG, EVALUATOR_CONFIG, SHELL_CONFIG, LOGGING_CONFIG,
    OVERFLOW_MODES, validate_config
)
from core import ExpressionCalculator
from core.calculator import STAGE_CONVERT
from core.converter import WHITESPACE

logger = logging.getLogger(__name__)


def format_calculation(calc, unary_symbol):
    """Calculation -> 输出行列表"""
    if calc.stage == STAGE_CONVERT:
        return [f"Error (infix->postfix): {calc.error}"]
    lines = [f"Postfix: {calc.render_postfix(unary_symbol)}"]
    if calc.ok:
        lines.append(f"Result: {calc.value}")
    else:
        lines.append(f"Error (evaluate): {calc.error}")
    return lines


def run_shell(lines, out, calculator=None, unary_symbol=None, prompt=None,
              max_expr_len=None, show_banner=True):
    """
    读取-求值-输出循环。空行或全空白行、输入结束时退出。
    Args:
        lines: 可迭代的输入行（如 sys.stdin）
        out: 可写的文本流
    Returns:
        处理的表达式数量
    """
    calculator = calculator or ExpressionCalculator()
    unary_symbol = unary_symbol or SHELL_CONFIG["unary_symbol"]
    prompt = SHELL_CONFIG["prompt"] if prompt is None else prompt
    max_expr_len = max_expr_len or LIMITS_CONFIG["max_expr_len"]

    if show_banner:
        out.write(SHELL_CONFIG["banner"] + "\n")

    handled = 0
    line_iter = iter(lines)
    while True:
        out.write(prompt)
        out.flush()
        line = next(line_iter, None)
        if line is None:
            break
        line = line.rstrip("\r\n")
        if not line.strip(WHITESPACE):
            break

        handled += 1
        if len(line) > max_expr_len:
            out.write("Error (input): Line too long\n")
            continue

        calc = calculator.calculate(line)
        for text in format_calculation(calc, unary_symbol):
            out.write(text + "\n")

    out.write(SHELL_CONFIG["farewell"] + "\n")
    logger.debug(f"Session finished, {handled} expressions")
    return handled


def run_expressions(expressions, out, calculator, unary_symbol):
    """一次性计算 -e 给出的表达式；全部成功返回 0，否则返回 1"""
    exit_code = 0
    for expression in expressions:
        calc = calculator.calculate(expression)
        for text in format_calculation(calc, unary_symbol):
            out.write(text + "\n")
        if not calc.ok:
            exit_code = 1
    return exit_code


def main(args):
    validate_config()
    calculator = ExpressionCalculator(overflow=args.overflow)
    logger.info(f"Overflow mode: {args.overflow}")

    if args.expression:
        return run_expressions(args.expression, sys.stdout, calculator, args.unary_symbol)

    try:
        run_shell(sys.stdin, sys.stdout, calculator,
                  unary_symbol=args.unary_symbol,
                  show_banner=not args.quiet)
    except KeyboardInterrupt:
        sys.stdout.write("\n" + SHELL_CONFIG["farewell"] + "\n")
    return 0


def build_parser():
    parser = argparse.ArgumentParser(description="Integer expression calculator")

    parser.add_argument(
        "-e", "--expression",
        action="append",
        help="Evaluate the expression and exit (may be repeated)"
    )
    parser.add_argument(
        "--overflow",
        choices=OVERFLOW_MODES,
        default=EVALUATOR_CONFIG["overflow"],
        help="Behaviour of + - * on 64-bit overflow: wrap around or report an error"
    )
    parser.add_argument(
        "--unary_symbol",
        type=str,
        default=SHELL_CONFIG["unary_symbol"],
        help="Symbol used for unary minus in the postfix output"
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Do not print the banner"
    )
    parser.add_argument(
        "--log_level",
        type=str,
        default=LOGGING_CONFIG["level"],
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (logs go to stderr)"
    )
    return parser


def cli():
    args = build_parser().parse_args()
    # 设置日志
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format=LOGGING_CONFIG["format"]
    )
    sys.exit(main(args))


if __name__ == "__main__":
    cli()
