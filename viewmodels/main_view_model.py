# -*- coding: utf-8 -*-
"""
主界面 ViewModel（MVVM）。
负责：NIfTI 加载、当前层号状态、切片 QImage 生成。
View 通过信号接收刷新通知，通过方法获取展示数据与执行命令。
"""

import logging
from pathlib import Path
from typing import Optional, Tuple, Union

from PySide6.QtCore import QObject, Signal
from PySide6.QtGui import QImage

from models import AppState, NiftiVolume, VolumeError, load_nifti_file

logger = logging.getLogger(__name__)


class MainViewModel(QObject):
    """
    主界面 ViewModel。
    - 持有 AppState，提供加载 NIfTI、切换层号等命令
    - 每次取图都把当前层号显式传给切片引擎，引擎本身无状态
    - 发出信号：volume_loaded, slice_changed, status_message
    """

    # 体数据加载完成（View 据此重设滑条范围并刷新切片）
    volume_loaded = Signal()
    # 当前层号变化（View 刷新切片与层号文字）
    slice_changed = Signal(int)
    # 状态栏文案
    status_message = Signal(str)

    def __init__(self, parent=None):
        super().__init__(parent)
        self._app_state = AppState()

    @property
    def app_state(self) -> AppState:
        """全局应用状态，只读供 View 绑定。"""
        return self._app_state

    @property
    def volume(self) -> Optional[NiftiVolume]:
        """当前体数据，未加载时为 None。"""
        return self._app_state.volume

    # ---------- 命令：数据加载 ----------

    def load_nifti_file(self, path: Union[str, Path]) -> bool:
        """
        加载 .nii / .nii.gz 文件，更新 AppState 并从第 0 层开始显示。
        失败时保留原有体数据，发出 status_message 并返回 False。
        """
        path = Path(path)
        try:
            volume = load_nifti_file(path)
        except (OSError, VolumeError) as e:
            logger.error("加载 NIfTI 失败：%s：%s", path, e)
            self.status_message.emit(f"加载 NIfTI 失败：{e}")
            return False

        self._app_state.volume = volume
        self._app_state.source_path = path
        self._app_state.slice_index = 0
        d, h, w = volume.shape
        self.status_message.emit(
            f"已加载 NIfTI：{path.name}，{w}x{h}，共 {d} 层，"
            f"数据类型 {volume.descriptor.datatype.name}"
        )
        self.volume_loaded.emit()
        self.slice_changed.emit(0)
        return True

    # ---------- 命令：层号 ----------

    def set_slice(self, index: int) -> None:
        """设置当前层号（截断到有效范围），变化时发出 slice_changed。"""
        if self.volume is None:
            return
        lo, hi = self.volume.slice_range
        index = max(lo, min(hi, int(index)))
        if index == self._app_state.slice_index:
            return
        self._app_state.slice_index = index
        logger.debug("切换到第 %d 层", index)
        self.slice_changed.emit(index)

    def step_slice(self, delta: int) -> None:
        """在当前层号基础上前后移动 delta 层（滚轮使用）。"""
        self.set_slice(self._app_state.slice_index + delta)

    # ---------- 供 View 获取展示数据 ----------

    def get_slice_image(self) -> Optional[QImage]:
        """
        生成当前层的 RGBA8888 QImage，无数据时返回 None。
        返回深拷贝，图像不引用引擎输出的字节缓冲区。
        """
        volume = self.volume
        if volume is None:
            return None
        try:
            result = volume.rasterize_slice(self._app_state.slice_index)
        except VolumeError as e:
            logger.error("切片渲染失败：%s", e)
            self.status_message.emit(f"切片渲染失败：{e}")
            return None
        qimg = QImage(
            result.pixels,
            result.width,
            result.height,
            result.width * 4,
            QImage.Format_RGBA8888,
        )
        return qimg.copy()

    def get_slice_index_range(self) -> Tuple[int, int]:
        """返回层索引范围 (min_index, max_index)，无数据时 (0, 0)。"""
        if self.volume is None:
            return 0, 0
        return self.volume.slice_range

    def get_slice_label(self) -> str:
        """当前层号文字，按 1 起计数显示。"""
        if self.volume is None:
            return "当前层：-"
        return f"当前层：{self._app_state.slice_index + 1} / {self.volume.depth}"
