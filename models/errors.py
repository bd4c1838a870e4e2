# -*- coding: utf-8 -*-
"""
体数据解码与切片栅格化的异常类型。
不支持的数据类型不在此列：按 0 值样本降级并记录警告，不中断整张切片。
"""


class VolumeError(Exception):
    """体数据相关错误的基类，供 ViewModel 在 UI 边界统一捕获。"""


class MalformedVolume(VolumeError):
    """维度非正、缓冲区长度不足或文件不是有效的 NIfTI，本次解码失败。"""


class InvalidSliceIndex(VolumeError):
    """层号超出 [0, depth-1]。"""

    def __init__(self, slice_index: int, depth: int):
        super().__init__(f"层号 {slice_index} 超出范围 [0, {depth - 1}]")
        self.slice_index = slice_index
        self.depth = depth


class OutOfBounds(VolumeError):
    """样本读取越过缓冲区末尾，说明描述信息与缓冲区不一致。"""
