"""配置文件"""
import logging

logger = logging.getLogger(__name__)

# 求值器参数
EVALUATOR_CONFIG = {
    "cache_size": 1000,   # LRU缓存条目上限
    "strip_chars": " ",   # 分词前删除的字符，只删空格
}

# 操作符优先级（与 core.token_system.TOKEN_DEFINITIONS 一致）
PRECEDENCE_CONFIG = {
    "+": 1,
    "-": 1,
    "*": 2,
    "/": 2,
    "^": 3,
}

# 输出格式
OUTPUT_CONFIG = {
    "result_template": "{expression} = {result}",
    "error_template": "Error with expression {expression} -> {message}",
    "invalid_message": "Invalid expression.",
    "prompt": "\nEnter an expression: ",
    "results_path": "expression_results.csv",
}

# 日志
LOGGING_CONFIG = {
    "level": "WARNING",
    "format": '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
}

# 演示表达式，最后一个括号不匹配
DEMO_EXPRESSIONS = [
    "1/3",
    "(2+3)*(4+ 5.0)",
    "3^2",
    "(2*2)^(2*2)",
    "30/(3*2)",
    "5.25-4.50",
    "(2+3)*(4+ 5.0",
]


# 验证配置
def validate_config():
    """验证配置的合理性"""
    from core.token_system import TOKEN_DEFINITIONS

    assert EVALUATOR_CONFIG["cache_size"] > 0, "cache_size 必须为正数"
    for symbol, precedence in PRECEDENCE_CONFIG.items():
        assert TOKEN_DEFINITIONS[symbol].precedence == precedence, f"{symbol} 的优先级不一致"
    assert PRECEDENCE_CONFIG["^"] > PRECEDENCE_CONFIG["*"] > PRECEDENCE_CONFIG["+"], "优先级顺序错误"
    logger.info("Configuration validated successfully!")
