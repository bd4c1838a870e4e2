# -*- coding: utf-8 -*-
"""
切片提取（Model）。
沿深度轴取第 slice_index 个平面，输出 (height, width) 行优先样本网格。
"""

import numpy as np

from .errors import InvalidSliceIndex, OutOfBounds
from .voxel_accessor import read_sample
from .voxel_datatype import VoxelDatatype
from .volume_descriptor import VolumeDescriptor


def plane_base(descriptor: VolumeDescriptor, slice_index: int) -> int:
    """平面首样本的线性序号（以样本计）。"""
    return slice_index * descriptor.width * descriptor.height


def extract_slice(buffer: bytes, descriptor: VolumeDescriptor, slice_index: int) -> np.ndarray:
    """
    提取单个切片的原始样本。
    (row, col) 对应线性序号 plane_base + row * width + col，与像素缓冲区布局一致。
    """
    if not 0 <= slice_index < descriptor.depth:
        raise InvalidSliceIndex(slice_index, descriptor.depth)

    width, height = descriptor.width, descriptor.height
    base = plane_base(descriptor, slice_index)
    datatype = descriptor.datatype

    if datatype is VoxelDatatype.UNSUPPORTED:
        # 逐样本读取，每次读取各记录一条诊断
        grid = np.zeros((height, width), dtype=np.uint8)
        for row in range(height):
            for col in range(width):
                grid[row, col] = read_sample(buffer, datatype, base + row * width + col)
        return grid

    size = datatype.sample_size
    start = base * size
    end = start + descriptor.plane_size * size
    if end > len(buffer):
        raise OutOfBounds(
            f"切片 {slice_index} 的字节范围 [{start}, {end}) 超出缓冲区长度 {len(buffer)}"
        )
    samples = np.frombuffer(buffer, dtype=datatype.numpy_dtype, count=descriptor.plane_size, offset=start)
    return samples.reshape(height, width)
