"""
头寸解码器（Position Decoder）
命令行计算 Polymarket 二元市场的 ERC1155 TokenId
"""
import argparse
import json
import logging
import sys
from typing import List, Optional

from . import config
from .ctf.collection import check_outcome_index
from .ctf.derive import calculate_position_id, derive_binary_positions
from .ctf.field import to_bytes32
from .ctf.hashing import to_address, to_hash
from .errors import CTFError, InvalidOutcomeIndexError

logger = logging.getLogger(__name__)


def _parse_outcome_index(text: str) -> int:
    try:
        value = int(text.strip())
    except ValueError:
        raise InvalidOutcomeIndexError(text) from None
    return check_outcome_index(value)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="polymind-ctf-position",
        description="PolyMind 头寸解码器 - 计算 Polymarket 市场 TokenId"
    )
    parser.add_argument("collateral", type=str, help="抵押品代币地址")
    parser.add_argument("condition_id", type=str, help="条件ID")
    parser.add_argument("outcome_index", type=str, help="结果索引 (0 或 1)")
    parser.add_argument(
        "--both",
        action="store_true",
        help="输出两个结果的 CollectionId 与 TokenId (JSON)"
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="输出JSON文件路径 (可选)"
    )
    return parser


def run(args: argparse.Namespace) -> str:
    """
    执行推导并返回要输出的文本

    Raises:
        CTFError: 参数校验失败
    """
    collateral = to_address(args.collateral.strip(), "collateral address")
    condition_id = to_hash(args.condition_id.strip(), "condition id")
    outcome_index = _parse_outcome_index(args.outcome_index)

    if args.both or args.output:
        positions = derive_binary_positions(collateral, condition_id)
        return json.dumps(positions.to_dict(), indent=2, ensure_ascii=False)

    position_id = calculate_position_id(collateral, condition_id, outcome_index)
    logger.debug(f"outcome {outcome_index} TokenId: {position_id}")
    return to_bytes32(position_id).hex()


def main(argv: Optional[List[str]] = None) -> int:
    """主函数 - 命令行入口"""
    logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)

    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        result = run(args)
    except CTFError as e:
        logger.error(f"参数错误: {e}")
        print(str(e), file=sys.stderr)
        return 1

    if args.output:
        try:
            with open(args.output, 'w', encoding='utf-8') as f:
                f.write(result)
                f.write("\n")
            logger.info(f"✓ 头寸数据已保存到: {args.output}")
        except OSError as e:
            logger.error(f"保存文件失败: {e}")
            return 1
    else:
        print(result)

    return 0


if __name__ == "__main__":
    sys.exit(main())
