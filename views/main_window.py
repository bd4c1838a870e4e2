# -*- coding: utf-8 -*-
"""
主窗口（View）。
仅负责布局、菜单、层号滑条与 ViewModel 的绑定；
业务逻辑与数据均由 ViewModel 提供。
"""

from typing import TYPE_CHECKING

from PySide6.QtCore import Qt
from PySide6.QtGui import QAction
from PySide6.QtWidgets import (
    QFileDialog,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QMessageBox,
    QSlider,
    QStatusBar,
    QVBoxLayout,
    QWidget,
)

from config import DEFAULT_GUI
from views.slice_view import SliceView

if TYPE_CHECKING:
    from viewmodels.main_view_model import MainViewModel


# 深色医疗主题 QSS
STYLESHEET = f"""
QMainWindow {{ background-color: {DEFAULT_GUI.background_color}; color: {DEFAULT_GUI.text_color}; }}
QLabel {{ color: {DEFAULT_GUI.text_color}; }}
QFrame {{ background-color: {DEFAULT_GUI.panel_color}; border: 1px solid #303040; }}
QSlider::groove:horizontal {{ background: #303040; height: 6px; }}
QSlider::handle:horizontal {{
    background: {DEFAULT_GUI.accent_color}; width: 12px; border-radius: 6px;
}}
"""


class MainWindow(QMainWindow):
    """
    主窗口 View。
    - 中间为切片视图，下方为层号滑条与当前层文字
    - 通过 ViewModel 加载 NIfTI、切换层号、刷新切片
    """

    def __init__(self, view_model: "MainViewModel", parent=None):
        super().__init__(parent)
        self._view_model = view_model
        self.setWindowTitle(DEFAULT_GUI.window_title)
        self.resize(*DEFAULT_GUI.window_size)
        self.setStyleSheet(STYLESHEET)

        self._create_menu()
        central = QWidget(self)
        self.setCentralWidget(central)
        main_layout = QVBoxLayout(central)
        main_layout.setContentsMargins(4, 4, 4, 4)

        self._slice_view = SliceView("轴状位", self._view_model)
        main_layout.addWidget(self._slice_view, 1)
        main_layout.addLayout(self._create_slider_row())

        status = QStatusBar()
        status.setStyleSheet(f"color: {DEFAULT_GUI.text_color}; background-color: #151521;")
        self.setStatusBar(status)
        self.statusBar().showMessage("就绪")

        # 绑定 ViewModel 信号
        self._view_model.volume_loaded.connect(self._on_volume_loaded)
        self._view_model.slice_changed.connect(self._on_slice_changed)
        self._view_model.status_message.connect(self.statusBar().showMessage)

    @property
    def slice_view(self) -> SliceView:
        return self._slice_view

    @property
    def slider(self) -> QSlider:
        return self._slider

    def _create_menu(self) -> None:
        """构建顶部菜单栏。"""
        menu_bar = self.menuBar()
        file_menu = menu_bar.addMenu("文件")
        open_action = QAction("打开 NIfTI 文件", self)
        open_action.triggered.connect(self._on_open_nifti)
        file_menu.addAction(open_action)
        exit_action = QAction("退出", self)
        exit_action.triggered.connect(self.close)
        file_menu.addAction(exit_action)

        help_menu = menu_bar.addMenu("帮助")
        about_action = QAction("关于", self)
        about_action.triggered.connect(self._show_about)
        help_menu.addAction(about_action)

    def _create_slider_row(self) -> QHBoxLayout:
        """层号滑条 + 当前层文字。加载数据前禁用。"""
        row = QHBoxLayout()
        self._slider = QSlider(Qt.Horizontal)
        self._slider.setMinimum(0)
        self._slider.setMaximum(0)
        self._slider.setEnabled(False)
        self._slider.valueChanged.connect(self._view_model.set_slice)
        row.addWidget(self._slider, 1)
        self._slice_label = QLabel(self._view_model.get_slice_label())
        row.addWidget(self._slice_label)
        return row

    # ---------- 菜单槽 ----------

    def _on_open_nifti(self) -> None:
        """菜单「打开 NIfTI 文件」：选文件后交给 ViewModel 加载。"""
        file_path, _ = QFileDialog.getOpenFileName(
            self, "选择 NIfTI 文件", "", DEFAULT_GUI.file_filter,
        )
        if not file_path:
            return
        ok = self._view_model.load_nifti_file(file_path)
        if not ok:
            QMessageBox.critical(self, "错误", "加载 NIfTI 失败，请查看状态栏或控制台。")

    def _show_about(self) -> None:
        QMessageBox.information(
            self, "关于",
            f"{DEFAULT_GUI.window_title}\n\n逐层浏览 NIfTI 体数据的灰度切片。\n采用 MVVM 架构。",
        )

    # ---------- ViewModel 信号槽 ----------

    def _on_volume_loaded(self) -> None:
        """体数据加载完成：按层数重设滑条范围（避免越界层号）。"""
        lo, hi = self._view_model.get_slice_index_range()
        self._slider.blockSignals(True)
        self._slider.setRange(lo, hi)
        self._slider.setValue(self._view_model.app_state.slice_index)
        self._slider.blockSignals(False)
        self._slider.setEnabled(True)

    def _on_slice_changed(self, index: int) -> None:
        """层号变化：同步滑条（避免循环触发）、刷新切片与层号文字。"""
        if self._slider.value() != index:
            self._slider.blockSignals(True)
            self._slider.setValue(index)
            self._slider.blockSignals(False)
        self._slice_label.setText(self._view_model.get_slice_label())
        self._slice_view.refresh_display()
