"""计算器模块 - 表达式求值和批量处理"""
from .evaluator import ExpressionEvaluator, EvaluationResult, evaluate_expression
from .batch import evaluate_batch, results_to_frame, load_expressions, save_results

__all__ = [
    'ExpressionEvaluator', 'EvaluationResult', 'evaluate_expression',
    'evaluate_batch', 'results_to_frame', 'load_expressions', 'save_results'
]
