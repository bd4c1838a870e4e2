# -*- coding: utf-8 -*-
"""
切片视图（View）。
仅负责展示与交互：滚轮切层；图像数据由 ViewModel 提供。
"""

from typing import TYPE_CHECKING

from PySide6.QtCore import Qt
from PySide6.QtGui import QPixmap, QWheelEvent
from PySide6.QtWidgets import QFrame, QLabel, QSizePolicy, QVBoxLayout

if TYPE_CHECKING:
    from viewmodels.main_view_model import MainViewModel


class SliceView(QFrame):
    """
    轴状位 2D 切片视图。
    - 通过 ViewModel 获取当前层的 QImage 并按比例显示
    - 滚轮：请求 ViewModel 前后切换一层
    """

    def __init__(self, title: str, view_model: "MainViewModel", parent=None):
        super().__init__(parent)
        self.setFrameShape(QFrame.StyledPanel)
        self.setObjectName("SliceView-axial")

        self._view_model = view_model
        self._pixmap = QPixmap()

        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        layout.setSpacing(2)

        self._title_label = QLabel(title)
        self._title_label.setStyleSheet("color: #ffffff; font-weight: bold;")
        layout.addWidget(self._title_label)

        self._image_label = QLabel("未加载数据")
        self._image_label.setAlignment(Qt.AlignCenter)
        self._image_label.setSizePolicy(QSizePolicy.Ignored, QSizePolicy.Ignored)
        layout.addWidget(self._image_label, 1)

    @property
    def pixmap(self) -> QPixmap:
        return self._pixmap

    def refresh_display(self) -> None:
        """从 ViewModel 获取当前层图像并更新 Label。"""
        qimg = self._view_model.get_slice_image()
        if qimg is None:
            self._pixmap = QPixmap()
            self._image_label.clear()
            self._image_label.setText("未加载数据")
            return
        self._pixmap = QPixmap.fromImage(qimg)
        self._update_scaled_pixmap()

    def _update_scaled_pixmap(self) -> None:
        """按 Label 尺寸等比缩放显示，保持体素宽高比。"""
        if self._pixmap.isNull():
            return
        size = self._image_label.size()
        self._image_label.setPixmap(
            self._pixmap.scaled(size, Qt.KeepAspectRatio, Qt.FastTransformation)
        )

    def resizeEvent(self, event) -> None:
        super().resizeEvent(event)
        self._update_scaled_pixmap()

    def wheelEvent(self, event: QWheelEvent) -> None:
        """滚轮：在深度方向上切换层号。"""
        if self._view_model.volume is None:
            return
        delta = event.angleDelta().y()
        if delta == 0:
            return
        self._view_model.step_slice(1 if delta > 0 else -1)
        event.accept()
