# -*- coding: utf-8 -*-
"""
体素缓冲区随机读取（Model）。
按线性样本序号（非字节偏移）从原始字节中读出单个数值，只读、无副作用。
"""

import logging
from typing import Union

import numpy as np

from .errors import OutOfBounds
from .voxel_datatype import VoxelDatatype

logger = logging.getLogger(__name__)


def read_sample(buffer: bytes, datatype: VoxelDatatype, index: int) -> Union[int, float]:
    """
    读取第 index 个样本。
    字节偏移 = index * sample_size；UNSUPPORTED 返回 0 并记录一次警告。
    """
    if datatype is VoxelDatatype.UNSUPPORTED:
        logger.warning("不支持的 NIfTI 数据类型，样本 %d 按 0 处理", index)
        return 0

    size = datatype.sample_size
    offset = index * size
    if index < 0 or offset + size > len(buffer):
        raise OutOfBounds(
            f"样本 {index} 的字节范围 [{offset}, {offset + size}) 超出缓冲区长度 {len(buffer)}"
        )
    return np.frombuffer(buffer, dtype=datatype.numpy_dtype, count=1, offset=offset)[0].item()
