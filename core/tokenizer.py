"""core/tokenizer.py - 中缀表达式文本 -> Token序列"""
import logging

from core.token_system import NUMBER_CHARS, make_token, format_expression

logger = logging.getLogger(__name__)


def tokenize(text, strip_chars=' '):
    """
    将表达式文本切分为 Token 序列（中缀形式）

    Args:
        text: 表达式文本
        strip_chars: 切分前删除的字符（默认只删除空格）
    Returns:
        Token列表，顺序与原文一致
    Raises:
        UnrecognizedInputError: 无法识别的字符或非法数字串
    """
    expression = ''.join(ch for ch in text if ch not in strip_chars)

    token_sequence = []
    i = 0
    while i < len(expression):
        # 贪婪地读取最长的数字/小数点串，整体作为一个数值
        j = i
        while j < len(expression) and expression[j] in NUMBER_CHARS:
            j += 1

        if j > i:
            token_sequence.append(make_token(expression[i:j]))
            i = j
        else:
            token_sequence.append(make_token(expression[i]))
            i += 1

    logger.debug(f"Tokenized '{text}' -> {format_expression(token_sequence)}")
    return token_sequence
