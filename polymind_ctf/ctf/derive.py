"""
CTF (Conditional Token Framework) 工具函数
用于计算 QuestionId / ConditionId / PositionId(TokenId) 等链上参数
"""
from dataclasses import dataclass, asdict
from typing import Any, Dict, Tuple, Union

from web3 import Web3

from .collection import compute_collection_id
from .constants import DEFAULT_OUTCOME_SLOT_COUNT, UMA_ORACLE
from .field import from_bytes32, to_bytes32
from .hashing import BytesLike, keccak256, to_address, to_hash


@dataclass(frozen=True)
class BinaryPositions:
    """二元头寸信息"""
    collateral: str
    condition_id: str
    collection_id_yes: str
    collection_id_no: str
    position_yes: int
    position_no: int

    @property
    def position_yes_hex(self) -> str:
        return Web3.to_hex(to_bytes32(self.position_yes))

    @property
    def position_no_hex(self) -> str:
        return Web3.to_hex(to_bytes32(self.position_no))

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        # uint256 超出 JSON 数值的安全范围，统一输出字符串
        data["position_yes"] = str(self.position_yes)
        data["position_no"] = str(self.position_no)
        data["position_yes_hex"] = self.position_yes_hex
        data["position_no_hex"] = self.position_no_hex
        return data


def calculate_question_id(ancillary: Union[bytes, str]) -> bytes:
    """QuestionId = keccak256(ancillaryData)"""
    if isinstance(ancillary, str):
        ancillary = ancillary.encode('utf-8')
    return keccak256(bytes(ancillary))


def get_condition_id(oracle: BytesLike, question_id: BytesLike, outcome_slot_count: int) -> bytes:
    """
    计算 ConditionId

    conditionId = keccak256(oracle(20) || questionId(32) || outcomeSlotCount(32))

    Args:
        oracle: 预言机地址
        question_id: 问题 ID
        outcome_slot_count: 结果槽数量 (通常为 2)

    Returns:
        32 字节 ConditionId
    """
    encoded = (
        to_address(oracle, "oracle")
        + to_hash(question_id, "question_id")
        + to_bytes32(outcome_slot_count)
    )
    return keccak256(encoded)


def get_condition_id_with_defaults(question_id: BytesLike) -> bytes:
    """使用 UMA 预言机和 2 个结果槽计算 ConditionId"""
    return get_condition_id(UMA_ORACLE, question_id, DEFAULT_OUTCOME_SLOT_COUNT)


def compute_position_id_hash(collateral: BytesLike, collection_id: BytesLike) -> bytes:
    """keccak256(collateral(20) || collectionId(32))"""
    payload = to_address(collateral, "collateral") + to_hash(collection_id, "collection_id")
    return keccak256(payload)


def position_id_from_collection(collateral: BytesLike, collection_id: BytesLike) -> int:
    """计算 PositionId (TokenId)，按大端 uint256 解释"""
    return from_bytes32(compute_position_id_hash(collateral, collection_id))


def calculate_position_id(collateral: BytesLike, condition_id: BytesLike, outcome_index: int) -> int:
    """计算指定结果的 ERC1155 TokenId"""
    collection_id = compute_collection_id(condition_id, outcome_index)
    return position_id_from_collection(collateral, collection_id)


def calculate_position_ids(collateral: BytesLike, condition_id: BytesLike) -> Tuple[int, int]:
    """返回 (outcome 0, outcome 1) 两个 TokenId"""
    return (
        calculate_position_id(collateral, condition_id, 0),
        calculate_position_id(collateral, condition_id, 1),
    )


def derive_binary_positions(collateral: BytesLike, condition_id: BytesLike) -> BinaryPositions:
    """推导二元市场的头寸 TokenId 和 CollectionId"""
    collateral_bytes = to_address(collateral, "collateral")
    condition_bytes = to_hash(condition_id, "condition_id")

    # YES = outcome 0 (indexSet 1), NO = outcome 1 (indexSet 2)
    collection_id_yes = compute_collection_id(condition_bytes, 0)
    collection_id_no = compute_collection_id(condition_bytes, 1)

    return BinaryPositions(
        collateral=Web3.to_hex(collateral_bytes),
        condition_id=Web3.to_hex(condition_bytes),
        collection_id_yes=Web3.to_hex(collection_id_yes),
        collection_id_no=Web3.to_hex(collection_id_no),
        position_yes=position_id_from_collection(collateral_bytes, collection_id_yes),
        position_no=position_id_from_collection(collateral_bytes, collection_id_no),
    )
