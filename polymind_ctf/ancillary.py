"""
UMA ancillary data 构造
格式与 Polymarket 上游实现保持一致，任何改动都会改变 QuestionId
"""
import logging
from typing import Sequence

from .ctf.hashing import BytesLike, to_address
from .errors import EmptyOutcomeError, InvalidOutcomeCountError

logger = logging.getLogger(__name__)

ANC_DATA_FMT = (
    "q: title: {title}, description: {description} res_data: {res_data},initializer:{initializer}"
)

RES_DATA_FMT = (
    "p1: 0, p2: 1, p3: 0.5. Where p1 corresponds to {neg}, p2 to {pos}, p3 to unknown/50-50. "
    "Updates made by the question creator via the bulletin board at "
    "0x6A9D222616C90FcA5754cd1333cFD9b7fb6a4F74 as described by https://polygonscan.com/tx/"
    "0xa14f01b115c4913624fc3f508f960f4dea252758e73c28f5f07f8e19d7bca066 should be considered."
)

EXPECTED_OUTCOMES = 2


def create_ancillary_data(
    title: str,
    description: str,
    creator: BytesLike,
    outcomes: Sequence[str]
) -> bytes:
    """
    根据市场元数据构造 ancillary data

    Args:
        title: 市场标题
        description: 市场描述
        creator: 问题创建者地址
        outcomes: 结果标签 [正向, 反向]，例如 ["Yes", "No"]

    Returns:
        UTF-8 编码的 ancillary data

    Raises:
        InvalidOutcomeCountError: 结果数量不是 2
        EmptyOutcomeError: 某个结果标签为空
    """
    if len(outcomes) != EXPECTED_OUTCOMES:
        raise InvalidOutcomeCountError(expected=EXPECTED_OUTCOMES, found=len(outcomes))

    for index, outcome in enumerate(outcomes):
        if not outcome.strip():
            raise EmptyOutcomeError(index=index)

    creator_bytes = to_address(creator, "creator")

    res_data = _format_res_data(outcomes[0], outcomes[1])
    ancillary = (
        ANC_DATA_FMT
        .replace("{title}", title)
        .replace("{description}", description)
        .replace("{res_data}", res_data)
        .replace("{initializer}", creator_bytes.hex())
    )
    logger.debug(f"ancillary data 长度: {len(ancillary)}")
    return ancillary.encode('utf-8')


def _format_res_data(pos: str, neg: str) -> str:
    return RES_DATA_FMT.replace("{neg}", neg).replace("{pos}", pos)
