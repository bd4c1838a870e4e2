import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import numpy as np
import pytest
import SimpleITK as sitk

from models import VolumeDescriptor, VoxelDatatype


@pytest.fixture(scope="session")
def qapp():
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def uint8_descriptor():
    return VolumeDescriptor(width=2, height=2, depth=2, datatype=VoxelDatatype.UINT8)


@pytest.fixture
def uint8_buffer():
    return bytes([10, 20, 30, 40, 50, 60, 70, 80])


@pytest.fixture
def write_nifti(tmp_path):
    """用 SimpleITK 写出 NIfTI。array 维度为 (Z, Y, X)，文件中 dim[1..3] = (X, Y, Z)。"""

    def _write(name: str, array: np.ndarray):
        path = tmp_path / name
        sitk.WriteImage(sitk.GetImageFromArray(array), str(path))
        return path

    return _write
