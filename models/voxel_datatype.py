# -*- coding: utf-8 -*-
"""
体素数据类型（Model）。
封闭枚举：每个成员携带 NIfTI datatype 编码、单样本字节数与小端 numpy dtype。
"""

from enum import Enum
from typing import Optional

import numpy as np


class VoxelDatatype(Enum):
    """
    支持的体素类型。
    - UINT8 / UINT16_LE / FLOAT32_LE 可解码
    - UNSUPPORTED：其余所有 NIfTI 编码，读取时按 0 处理
    """

    UINT8 = (2, 1, "u1")
    UINT16_LE = (512, 2, "<u2")
    FLOAT32_LE = (16, 4, "<f4")
    UNSUPPORTED = (None, 0, None)

    def __init__(self, code: Optional[int], sample_size: int, dtype_str: Optional[str]):
        self.code = code
        self.sample_size = sample_size
        self._dtype_str = dtype_str

    @property
    def numpy_dtype(self) -> Optional[np.dtype]:
        """小端 numpy dtype，UNSUPPORTED 为 None。"""
        if self._dtype_str is None:
            return None
        return np.dtype(self._dtype_str)

    @property
    def is_supported(self) -> bool:
        return self is not VoxelDatatype.UNSUPPORTED

    @classmethod
    def from_code(cls, code: int) -> "VoxelDatatype":
        """NIfTI datatype 编码 -> VoxelDatatype，未识别的编码映射为 UNSUPPORTED。"""
        for member in cls:
            if member.code is not None and member.code == code:
                return member
        return cls.UNSUPPORTED
