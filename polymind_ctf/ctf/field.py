"""
BN254 素域上的模运算
Python int 本身是任意精度的，这里只负责约简与定宽序列化
"""
from dataclasses import dataclass

from .constants import P, TOGGLE_BIT

UINT256_MAX = (1 << 256) - 1


def add_mod(a: int, b: int, modulus: int = P) -> int:
    return (a + b) % modulus


def mul_mod(a: int, b: int, modulus: int = P) -> int:
    return (a * b) % modulus


def pow_mod(base: int, exponent: int, modulus: int = P) -> int:
    return pow(base, exponent, modulus)


def sqrt_mod(a: int, modulus: int = P) -> int:
    """
    计算平方根候选值 a^((p+1)/4) mod p

    仅当 p ≡ 3 (mod 4) 且 a 是二次剩余时结果才是真正的平方根，
    调用方需要平方验证。
    """
    return pow(a, (modulus + 1) >> 2, modulus)


def is_odd(value: int) -> bool:
    return value & 1 == 1


def toggle(value: int) -> int:
    """翻转第 254 位"""
    return value ^ TOGGLE_BIT


def to_bytes32(value: int) -> bytes:
    """序列化为 32 字节大端（左侧补零）"""
    if value < 0 or value > UINT256_MAX:
        raise ValueError(f"数值超出 uint256 范围: {value}")
    return value.to_bytes(32, byteorder='big')


def from_bytes32(data: bytes) -> int:
    if len(data) != 32:
        raise ValueError(f"需要 32 字节, 实际 {len(data)} 字节")
    return int.from_bytes(data, byteorder='big')


@dataclass(frozen=True)
class FieldElement:
    """域元素，value 始终满足 0 <= value < P"""
    value: int

    def __post_init__(self) -> None:
        if not 0 <= self.value < P:
            raise ValueError(f"域元素未约简: {self.value}")

    @classmethod
    def of(cls, value: int) -> "FieldElement":
        """约简后构造"""
        return cls(value % P)

    @classmethod
    def from_bytes32(cls, data: bytes) -> "FieldElement":
        return cls.of(from_bytes32(data))

    def __add__(self, other: "FieldElement") -> "FieldElement":
        return FieldElement(add_mod(self.value, other.value))

    def __mul__(self, other: "FieldElement") -> "FieldElement":
        return FieldElement(mul_mod(self.value, other.value))

    def __pow__(self, exponent: int) -> "FieldElement":
        if exponent < 0:
            raise ValueError("指数必须非负")
        return FieldElement(pow_mod(self.value, exponent))

    def negate(self) -> int:
        """
        返回 P - value

        value == 0 时结果为 P（未约简），与链上实现保持一致，因此返回 int。
        """
        return P - self.value

    def sqrt_candidate(self) -> "FieldElement":
        return FieldElement(sqrt_mod(self.value))

    @property
    def is_odd(self) -> bool:
        return is_odd(self.value)

    def to_bytes32(self) -> bytes:
        return to_bytes32(self.value)
