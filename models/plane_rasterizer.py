# -*- coding: utf-8 -*-
"""
平面栅格化（Model）。
把 (height, width) 样本网格转为 RGBA 交错像素缓冲区：R=G=B=灰度，A=255。
"""

from typing import Callable

import numpy as np

from config import DEFAULT_DISPLAY
from .intensity_normalizer import normalize as default_normalize


def _apply_normalize(grid: np.ndarray, normalize: Callable) -> np.ndarray:
    """默认策略整块向量化计算；其余策略逐样本调用，结果截断到 [0, 255]。"""
    if normalize is default_normalize:
        return normalize(grid)
    values = np.vectorize(normalize, otypes=[np.float64])(grid)
    top = float(DEFAULT_DISPLAY.intensity_max)
    return np.clip(np.nan_to_num(values, nan=0.0), 0.0, top).astype(np.uint8)


def rasterize(
    grid: np.ndarray,
    width: int,
    height: int,
    normalize: Callable = default_normalize,
) -> bytes:
    """
    生成长度恰为 width * height * 4 的像素缓冲区，像素 (row, col) 位于 (row * width + col) * 4。
    normalize 对单个样本返回灰度值，越界结果截断到 [0, 255]。
    """
    grid = np.asarray(grid)
    if grid.shape != (height, width):
        raise ValueError(f"样本网格形状 {grid.shape} 与 ({height}, {width}) 不一致")

    gray = _apply_normalize(grid, normalize).reshape(height, width)
    pixels = np.empty((height, width, 4), dtype=np.uint8)
    pixels[:, :, :3] = gray[:, :, np.newaxis]
    pixels[:, :, 3] = DEFAULT_DISPLAY.opaque_alpha
    return pixels.tobytes()
