# -*- coding: utf-8 -*-
"""
NIfTI 切片浏览器入口。
组装 MVVM：MainViewModel 持有状态与命令，MainWindow 负责展示。
命令行可直接传入 .nii / .nii.gz 路径，启动后立即打开。
"""

import logging
import sys

from PySide6.QtWidgets import QApplication

from config import DEFAULT_GUI
from viewmodels import MainViewModel
from views import MainWindow


def setup_logging(level: int = logging.INFO) -> None:
    """日志输出到 stdout。"""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def main() -> None:
    setup_logging()
    app = QApplication(sys.argv)
    app.setApplicationName(DEFAULT_GUI.window_title)

    view_model = MainViewModel()
    window = MainWindow(view_model)
    window.show()

    if len(sys.argv) > 1:
        view_model.load_nifti_file(sys.argv[1])

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
