"""
Keccak256 与十六进制输入解析
"""
from typing import Union

from web3 import Web3

from ..errors import InvalidHexError

BytesLike = Union[bytes, bytearray, str]

ADDRESS_LENGTH = 20
HASH_LENGTH = 32


def keccak256(data: bytes) -> bytes:
    return bytes(Web3.keccak(data))


def to_fixed_bytes(value: BytesLike, length: int, field: str) -> bytes:
    """
    将 bytes 或 hex 字符串（可带 0x 前缀）转换为定长 bytes

    Args:
        value: 输入值
        length: 期望字节数
        field: 字段名，用于错误信息

    Returns:
        长度为 length 的 bytes

    Raises:
        InvalidHexError: 格式错误或长度不符
    """
    if isinstance(value, (bytes, bytearray)):
        raw = bytes(value)
    elif isinstance(value, str):
        text = value.strip()
        if text[:2].lower() == '0x':
            text = text[2:]
        if len(text) != length * 2:
            raise InvalidHexError(field, value, length)
        try:
            raw = Web3.to_bytes(hexstr=text)
        except ValueError:
            raise InvalidHexError(field, value, length) from None
    else:
        raise InvalidHexError(field, value, length)

    if len(raw) != length:
        raise InvalidHexError(field, value, length)
    return raw


def to_address(value: BytesLike, field: str = "address") -> bytes:
    """解析 20 字节地址（不校验 EIP-55 校验和）"""
    return to_fixed_bytes(value, ADDRESS_LENGTH, field)


def to_hash(value: BytesLike, field: str = "hash") -> bytes:
    """解析 32 字节哈希"""
    return to_fixed_bytes(value, HASH_LENGTH, field)

