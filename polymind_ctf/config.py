"""
运行配置 - 从环境变量 / .env 读取
"""
import os
from dotenv import load_dotenv

load_dotenv()


def get_positive_int(name: str, default: int) -> int:
    """读取正整数配置，格式错误时报出配置名"""
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        raise ValueError(f"配置 {name} 必须是正整数, 实际为 {raw!r}") from None
    if value <= 0:
        raise ValueError(f"配置 {name} 必须是正整数, 实际为 {value}")
    return value


LOG_LEVEL = os.getenv("CTF_LOG_LEVEL", "INFO").upper()

# 曲线点搜索的迭代上限
MAX_POINT_SEARCH_ITERATIONS = get_positive_int("CTF_MAX_POINT_SEARCH_ITERATIONS", 10000)

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'
