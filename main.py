"""主程序入口 - 演示表达式批量求值 + 交互式输入"""
import argparse
import logging

from config.config import *
from calculator import ExpressionEvaluator, results_to_frame, load_expressions, save_results
from utils.formatting import format_result, format_error

logger = logging.getLogger(__name__)


def evaluate_and_print(expression, evaluator):
    """求值并打印一行结果；失败只打印错误，不中断"""
    outcome = evaluator.try_evaluate(expression)
    if outcome.ok:
        print(format_result(expression, outcome.value))
    else:
        print(format_error(expression, outcome.error))
    return outcome


def read_expression(prompt=OUTPUT_CONFIG['prompt']):
    """从标准输入读取一行，输入结束时返回 None"""
    print(prompt)
    try:
        return input()
    except EOFError:
        return None


def main(args):
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format=LOGGING_CONFIG['format']
    )
    validate_config()

    evaluator = ExpressionEvaluator(cache_size=args.cache_size)

    if args.expressions_file:
        expressions = load_expressions(args.expressions_file)
    else:
        expressions = DEMO_EXPRESSIONS
    logger.info(f"Evaluating {len(expressions)} expressions")

    outcomes = [evaluate_and_print(expression, evaluator) for expression in expressions]

    if args.save_results:
        results = results_to_frame(outcomes)
        save_results(results, args.results_path)

    if args.no_interactive:
        return

    expression = read_expression()
    if not expression:
        print(OUTPUT_CONFIG['invalid_message'])
    else:
        evaluate_and_print(expression, evaluator)


def non_negative_int(text):
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative, got {value}")
    return value


def build_parser():
    parser = argparse.ArgumentParser(description="Infix arithmetic calculator")

    parser.add_argument(
        "--expressions_file",
        type=str,
        default=None,
        help="Path to a .csv (column 'expression') or text file with one expression per line"
    )
    parser.add_argument(
        "--no_interactive",
        action="store_true",
        help="Skip reading an extra expression from standard input"
    )
    parser.add_argument(
        "--save_results",
        action="store_true",
        help="Save the batch results to a CSV file"
    )
    parser.add_argument(
        "--results_path",
        type=str,
        default=OUTPUT_CONFIG['results_path'],
        help="Path to save the batch results"
    )
    parser.add_argument(
        "--cache_size",
        type=non_negative_int,
        default=EVALUATOR_CONFIG['cache_size'],
        help="Maximum number of cached results"
    )
    parser.add_argument(
        "--log_level",
        type=str,
        default=LOGGING_CONFIG['level'],
        help="Logging level (DEBUG, INFO, WARNING, ERROR)"
    )
    return parser


if __name__ == "__main__":
    main(build_parser().parse_args())
