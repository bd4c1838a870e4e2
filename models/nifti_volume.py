# -*- coding: utf-8 -*-
"""
NIfTI 体数据封装（Model）。
持有解码后的描述信息与只读体素缓冲区，不包含 UI 与文件解析逻辑。
"""

from pathlib import Path
from typing import Optional, Tuple

from .slice_renderer import RasterizedSlice, extract_and_rasterize
from .volume_descriptor import VolumeDescriptor, validate_buffer


class NiftiVolume:
    """
    NIfTI 体数据。
    - buffer 为解压后的体素字节（小端），构造时校验长度
    - shape 为 (depth, height, width)，与切片网格的 (row, col) 顺序一致
    """

    def __init__(self, descriptor: VolumeDescriptor, buffer: bytes, source: Optional[Path] = None):
        buffer = bytes(buffer)
        validate_buffer(descriptor, buffer)
        self.descriptor = descriptor
        self.buffer = buffer
        self.source = source

    @property
    def shape(self) -> Tuple[int, int, int]:
        """体数据形状 (Z, Y, X)。"""
        d = self.descriptor
        return d.depth, d.height, d.width

    @property
    def depth(self) -> int:
        return self.descriptor.depth

    @property
    def slice_range(self) -> Tuple[int, int]:
        """可选层号范围 (0, depth - 1)。"""
        return 0, self.descriptor.depth - 1

    def rasterize_slice(self, slice_index: int) -> RasterizedSlice:
        return extract_and_rasterize(self.descriptor, self.buffer, slice_index)
