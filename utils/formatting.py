"""utils/formatting.py"""
import math

import numpy as np

from config.config import OUTPUT_CONFIG

# [1e-3, 1e7) 内写成普通小数，其余写成科学计数法，如 1.0E7、1.0E-4
PLAIN_RANGE = (1e-3, 1e7)


def format_number(value):
    """float -> 文本；无穷和 NaN 写成 Infinity / -Infinity / NaN"""
    value = float(value)
    if math.isnan(value):
        return 'NaN'
    if math.isinf(value):
        return 'Infinity' if value > 0 else '-Infinity'
    if value == 0 or PLAIN_RANGE[0] <= abs(value) < PLAIN_RANGE[1]:
        return repr(value)

    # 最短可还原的有效数字，至少保留一位小数
    mantissa, exponent = np.format_float_scientific(value, unique=True, trim='0').split('e')
    return f"{mantissa}E{int(exponent)}"


def format_result(expression, value):
    return OUTPUT_CONFIG['result_template'].format(expression=expression, result=format_number(value))


def format_error(expression, error):
    return OUTPUT_CONFIG['error_template'].format(expression=expression, message=error)
