# -*- coding: utf-8 -*-
"""
切片渲染入口（Model）。
组合：缓冲区校验 -> 切片提取 -> 逐样本归一化 -> RGBA 栅格化。
纯函数，不缓存；相同输入得到相同像素。
"""

from dataclasses import dataclass

from .plane_rasterizer import rasterize
from .slice_extractor import extract_slice
from .volume_descriptor import VolumeDescriptor, validate_buffer


@dataclass(frozen=True)
class RasterizedSlice:
    """栅格化后的切片：尺寸供调用方设置显示区域，pixels 为 RGBA 字节。"""

    width: int
    height: int
    slice_index: int
    pixels: bytes


def extract_and_rasterize(
    descriptor: VolumeDescriptor,
    buffer: bytes,
    slice_index: int,
) -> RasterizedSlice:
    """提取第 slice_index 层并转换为可直接显示的灰度 RGBA 缓冲区。"""
    validate_buffer(descriptor, buffer)
    grid = extract_slice(buffer, descriptor, slice_index)
    pixels = rasterize(grid, descriptor.width, descriptor.height)
    return RasterizedSlice(
        width=descriptor.width,
        height=descriptor.height,
        slice_index=slice_index,
        pixels=pixels,
    )
