"""
CTF / UMA 共享常量
"""

# BN254 域素数，满足 P ≡ 3 (mod 4)
P = 21888242871839275222246405745257275088696311157297823662689037894645226208583

# 曲线 y² = x³ + 3
CURVE_B = 3

# 压缩编码中标记 y 为奇数的位
TOGGLE_BIT = 1 << 254

# Polymarket 市场使用的 UMA 预言机地址
UMA_ORACLE = "0x6A9D222616C90FcA5754cd1333cFD9b7fb6a4F74"

# USDC.e on Polygon
USDC_ADDRESS = "0x2791Bca1f2de4661ED88A30C99A7a9449Aa84174"

# 二元市场的默认结果槽数量
DEFAULT_OUTCOME_SLOT_COUNT = 2

# 二元市场的 outcome index
OUTCOME_INDICES = (0, 1)


def outcome_slot_count() -> int:
    """返回默认结果槽数量"""
    return DEFAULT_OUTCOME_SLOT_COUNT
