# -*- coding: utf-8 -*-
"""
强度归一化（Model）。
固定策略，不做自适应窗宽窗位：
- 原始值 <= 1：视为已归一化的 [0, 1] 数据，输出 value * 255
- 原始值 > 1：视为 [0, 400] 显示窗内的强度，输出 value / 400 * 255
两个分支的结果都截断到 [0, 255] 后向零取整（163.2 -> 163）。
"""

from typing import Union

import numpy as np

from config import DEFAULT_DISPLAY, DisplayConfig


def normalize(raw, config: DisplayConfig = DEFAULT_DISPLAY) -> Union[int, np.ndarray]:
    """
    将原始样本映射到 [0, 255]。
    标量输入返回 int，数组输入返回同形状的 uint8 数组。
    NaN 视为 0，+inf 视为窗口上限，-inf 视为 0。
    """
    values = np.nan_to_num(
        np.asarray(raw, dtype=np.float64),
        nan=0.0,
        posinf=config.window_max,
        neginf=0.0,
    )
    top = float(config.intensity_max)
    scaled = np.where(
        values <= config.unit_range_max,
        values * top,
        values / config.window_max * top,
    )
    result = np.clip(scaled, 0.0, top).astype(np.uint8)
    if result.ndim == 0:
        return int(result)
    return result
