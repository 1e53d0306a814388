"""
CTF 标识符推导的异常定义
"""
from typing import Optional


class CTFError(Exception):
    """所有推导错误的基类"""


class AncillaryError(CTFError, ValueError):
    """构造 ancillary data 时的输入校验错误"""


class InvalidOutcomeCountError(AncillaryError):
    """结果标签数量不正确"""

    def __init__(self, expected: int, found: int) -> None:
        self.expected = expected
        self.found = found
        super().__init__(f"结果数量无效: 需要 {expected} 个, 实际 {found} 个")


class EmptyOutcomeError(AncillaryError):
    """结果标签为空（去除空白后）"""

    def __init__(self, index: int) -> None:
        self.index = index
        super().__init__(f"索引 {index} 处的结果标签为空")


class InvalidOutcomeIndexError(CTFError, ValueError):
    """outcome_index 只能是 0 或 1"""

    def __init__(self, index: object) -> None:
        self.index = index
        super().__init__(f"outcome index 必须是 0 或 1, 实际为 {index!r}")


class InvalidHexError(CTFError, ValueError):
    """地址或哈希的十六进制格式无效"""

    def __init__(self, field: str, value: object, expected_length: Optional[int] = None) -> None:
        self.field = field
        self.value = value
        self.expected_length = expected_length
        detail = f" (需要 {expected_length} 字节)" if expected_length else ""
        super().__init__(f"无效的 {field}: {value!r}{detail}")


class PointSearchError(CTFError, RuntimeError):
    """
    曲线点搜索超过迭代上限

    正常输入下期望约 2 次迭代即可找到点，超限说明素数或曲线常量被破坏。
    """

    def __init__(self, iterations: int) -> None:
        self.iterations = iterations
        super().__init__(f"{iterations} 次迭代内未找到曲线点，请检查域素数/曲线常量")
