import logging
from collections import OrderedDict
from typing import NamedTuple, Optional

from config.config import EVALUATOR_CONFIG
from core import ExpressionError, RPNEvaluator, tokenize, to_postfix

logger = logging.getLogger(__name__)


class EvaluationResult(NamedTuple):
    """单个表达式的求值结果：成功时 error 为 None"""
    expression: str
    value: Optional[float] = None
    error: Optional[ExpressionError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class ExpressionEvaluator:
    """表达式文本 -> float，分词、转换、求值三步串联，带LRU缓存"""

    def __init__(self, cache_size=None, strip_chars=None):
        self.rpn_evaluator = RPNEvaluator
        self.cache_size = cache_size if cache_size is not None else EVALUATOR_CONFIG['cache_size']
        if self.cache_size < 0:
            raise ValueError(f"cache_size must be non-negative, got {self.cache_size}")
        self.strip_chars = strip_chars if strip_chars is not None else EVALUATOR_CONFIG['strip_chars']
        # 使用有限大小的OrderedDict实现LRU缓存
        self._result_cache = OrderedDict()
        self._cache_hits = 0
        self._cache_misses = 0

    def _manage_cache(self):
        """管理缓存大小"""
        while len(self._result_cache) > self.cache_size:
            # 删除最久未使用的条目
            self._result_cache.popitem(last=False)

    def clear_cache(self):
        """清空缓存（供外部调用）"""
        self._result_cache.clear()
        logger.info(f"Cache cleared. Hits: {self._cache_hits}, Misses: {self._cache_misses}")
        self._cache_hits = 0
        self._cache_misses = 0

    @property
    def cache_info(self):
        return {
            'hits': self._cache_hits,
            'misses': self._cache_misses,
            'size': len(self._result_cache),
        }

    def evaluate(self, expression: str) -> float:
        """
        Args:
            expression: 中缀表达式文本
        Returns:
            float 结果
        Raises:
            ExpressionError: 无法识别的输入或结构非法的表达式
        """
        cache_key = self._generate_cache_key(expression)

        if cache_key in self._result_cache:
            # 移到末尾（最近使用）
            self._result_cache.move_to_end(cache_key)
            self._cache_hits += 1
            logger.debug(f"Cache hit for expression: {expression[:50]}")
            return self._result_cache[cache_key]

        self._cache_misses += 1
        result = self._evaluate_impl(expression)

        # 只缓存成功的结果，失败每次重新抛出
        self._result_cache[cache_key] = result
        self._manage_cache()
        return result

    def _evaluate_impl(self, expression: str) -> float:
        token_sequence = tokenize(expression, self.strip_chars)
        postfix = to_postfix(token_sequence)
        return self.rpn_evaluator.evaluate(postfix)

    def try_evaluate(self, expression: str) -> EvaluationResult:
        """求值但不抛出表达式错误，调用方逐条匹配结果"""
        try:
            return EvaluationResult(expression, value=self.evaluate(expression))
        except ExpressionError as e:
            logger.debug(f"Error evaluating expression '{expression[:50]}': {type(e).__name__}: {e}")
            return EvaluationResult(expression, error=e)

    def _generate_cache_key(self, expression: str) -> str:
        """生成缓存键：去掉被忽略的字符，'1 + 2' 与 '1+2' 共用一条"""
        return ''.join(ch for ch in expression if ch not in self.strip_chars)


_default_evaluator = None


def get_default_evaluator() -> ExpressionEvaluator:
    global _default_evaluator
    if _default_evaluator is None:
        _default_evaluator = ExpressionEvaluator()
    return _default_evaluator


def evaluate_expression(expression: str) -> float:
    """表达式文本 -> 结果，出错时抛出 ExpressionError"""
    return get_default_evaluator().evaluate(expression)
