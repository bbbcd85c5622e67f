"""批量求值模块 - calculator/batch.py"""
import logging

import numpy as np
import pandas as pd

from calculator.evaluator import ExpressionEvaluator

logger = logging.getLogger(__name__)

RESULT_COLUMNS = ['expression', 'result', 'error']


def evaluate_batch(expressions, evaluator=None):
    """
    逐条求值，单条失败不会中断整批

    Parameters:
    - expressions: 表达式文本列表
    - evaluator: ExpressionEvaluator 实例，默认新建一个

    Returns:
    - DataFrame，列为 expression / result / error；失败行 result 为 NaN
    """
    evaluator = evaluator or ExpressionEvaluator()
    return results_to_frame([evaluator.try_evaluate(expression) for expression in expressions])


def results_to_frame(outcomes):
    """EvaluationResult 列表 -> DataFrame"""
    rows = []

    for outcome in outcomes:
        if outcome.ok:
            rows.append({'expression': outcome.expression, 'result': outcome.value, 'error': None})
        else:
            logger.warning(f"Failed to evaluate '{outcome.expression}': {outcome.error}")
            rows.append({'expression': outcome.expression, 'result': np.nan, 'error': str(outcome.error)})

    results = pd.DataFrame(rows, columns=RESULT_COLUMNS)
    results['result'] = results['result'].astype(float)
    logger.info(f"Evaluated {len(results)} expressions, {results['error'].notna().sum()} failed")
    return results


def load_expressions(file_path):
    """
    加载表达式列表

    - .csv 文件读取 'expression' 列
    - 其他文件每行一个表达式，跳过空行
    """
    logger.info(f"Loading expressions from {file_path}")

    if str(file_path).endswith('.csv'):
        # dtype=str 防止 '3' 之类的表达式被解析成数字
        frame = pd.read_csv(file_path, dtype=str, keep_default_na=False)
        if 'expression' not in frame.columns:
            raise ValueError(f"Column 'expression' not found in {file_path}.")
        expressions = [e for e in frame['expression'].tolist() if e.strip()]
    else:
        with open(file_path, 'r', encoding='utf-8') as f:
            expressions = [line.rstrip('\r\n') for line in f if line.strip()]

    logger.info(f"Loaded {len(expressions)} expressions")
    return expressions


def save_results(results, file_path):
    """保存批量结果为CSV"""
    logger.info(f"Saving results to {file_path}")
    results.to_csv(file_path, index=False)
