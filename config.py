# -*- coding: utf-8 -*-
"""
应用配置常量。
显示窗口、界面外观等可调参数集中在此，Model / View 按需引用默认实例。
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class DisplayConfig:
    """切片灰度映射参数（固定显示窗，不做自适应窗宽窗位）。"""

    # 原始强度的假定显示窗上限，窗口为 [0, window_max]
    window_max: float = 400.0
    # 不大于该值的样本视为已归一化到 [0, 1] 的数据
    unit_range_max: float = 1.0
    # 输出灰度上限
    intensity_max: int = 255
    # RGBA 中 A 通道恒定值（完全不透明）
    opaque_alpha: int = 255


@dataclass(frozen=True)
class GUIConfig:
    """界面外观配置。"""

    window_title: str = "NIfTI 切片浏览器"
    window_size: Tuple[int, int] = (960, 760)
    background_color: str = "#1E1E2E"
    panel_color: str = "#252535"
    text_color: str = "#E0E0E0"
    accent_color: str = "#3A86FF"
    file_filter: str = "NIfTI 文件 (*.nii *.nii.gz);;所有文件 (*.*)"


DEFAULT_DISPLAY = DisplayConfig()
DEFAULT_GUI = GUIConfig()
