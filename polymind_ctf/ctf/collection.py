"""
CollectionId 编码（CTHelpers.getCollectionId）

CollectionId 不是普通的 keccak 结果，而是把哈希重新编码为 BN254 曲线
y² = x³ + 3 上一个点的压缩 x 坐标：
    1. payload = conditionId || uint256(1 << outcome_index)
    2. raw = keccak256(payload)，记录 raw 的最高位（第 255 位）作为符号位
    3. x = raw mod P，逐次 +1 直到 x³ + 3 是二次剩余
    4. 按符号位选取 y 的奇偶，y 为奇数时在 x 上置第 254 位
"""
import logging
from typing import Optional, Tuple

from .. import config
from ..errors import InvalidOutcomeIndexError, PointSearchError
from .constants import CURVE_B, OUTCOME_INDICES, P, TOGGLE_BIT
from .field import FieldElement, from_bytes32, is_odd, pow_mod, to_bytes32, toggle
from .hashing import BytesLike, keccak256, to_hash

logger = logging.getLogger(__name__)

_ONE = FieldElement(1)
_B = FieldElement(CURVE_B)


def check_outcome_index(outcome_index: int) -> int:
    """校验 outcome_index ∈ {0, 1}"""
    if isinstance(outcome_index, bool) or not isinstance(outcome_index, int):
        raise InvalidOutcomeIndexError(outcome_index)
    if outcome_index not in OUTCOME_INDICES:
        raise InvalidOutcomeIndexError(outcome_index)
    return outcome_index


def collection_payload(condition_id: BytesLike, outcome_index: int) -> bytes:
    """构造 64 字节 payload: conditionId(32) || indexSet(32)"""
    condition = to_hash(condition_id, "condition_id")
    # indexSet 是位掩码，不是原始索引
    index_set = 1 << check_outcome_index(outcome_index)
    return condition + to_bytes32(index_set)


def encode_collection_hash(raw_hash: bytes, max_iterations: Optional[int] = None) -> bytes:
    """
    将原始 keccak 哈希编码为压缩曲线点

    Args:
        raw_hash: 32 字节 keccak 结果
        max_iterations: 点搜索迭代上限，默认读取配置

    Returns:
        32 字节 CollectionId

    Raises:
        PointSearchError: 超过迭代上限
    """
    if max_iterations is None:
        max_iterations = config.MAX_POINT_SEARCH_ITERATIONS

    raw = from_bytes32(raw_hash)
    # 必须在取模前读取，约简会丢掉第 255 位
    odd = (raw >> 255) & 1 == 1
    x1 = FieldElement.of(raw)

    for iteration in range(1, max_iterations + 1):
        x1 = x1 + _ONE
        yy = x1 * x1 * x1 + _B
        y1 = yy.sqrt_candidate()
        if y1 * y1 != yy:
            continue

        logger.debug(f"找到曲线点: {iteration} 次迭代")

        y = y1.value
        if odd != y1.is_odd:
            y = y1.negate()

        x = x1.value
        if is_odd(y):
            x = toggle(x)
        return to_bytes32(x)

    raise PointSearchError(max_iterations)


def compute_collection_id(condition_id: BytesLike, outcome_index: int) -> bytes:
    """计算 CollectionId"""
    payload = collection_payload(condition_id, outcome_index)
    return encode_collection_hash(keccak256(payload))


def decompress_collection_id(collection_id: BytesLike) -> Tuple[int, bool]:
    """
    拆分压缩编码

    Returns:
        (x 坐标, y 是否为奇数)
    """
    value = from_bytes32(to_hash(collection_id, "collection_id"))
    y_is_odd = value & TOGGLE_BIT != 0
    return value & ~TOGGLE_BIT, y_is_odd


def is_on_curve_x(x: int) -> bool:
    """x³ + 3 是否为模 P 的二次剩余（欧拉判别法）"""
    if not 0 <= x < P:
        return False
    yy = (pow_mod(x, 3) + CURVE_B) % P
    if yy == 0:
        return True
    return pow_mod(yy, (P - 1) >> 1) == 1
