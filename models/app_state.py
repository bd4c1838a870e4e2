# -*- coding: utf-8 -*-
"""
全局应用状态（Model）。
由 ViewModel 持有并读写，每次渲染时把当前层号显式传入切片引擎。
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .nifti_volume import NiftiVolume


@dataclass
class AppState:
    """
    全局应用状态。
    - volume：当前加载的 NIfTI 体数据，未加载时为 None
    - slice_index：当前显示的层号（0 起）
    - source_path：体数据来源文件
    """

    volume: Optional[NiftiVolume] = None
    slice_index: int = 0
    source_path: Optional[Path] = None
