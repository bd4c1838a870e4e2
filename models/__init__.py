# -*- coding: utf-8 -*-
"""
Model 层：应用核心数据与切片引擎。
- AppState：全局应用状态（体数据引用、当前层号）
- NiftiVolume / VolumeDescriptor / VoxelDatatype：体数据与其描述
- extract_and_rasterize：切片提取 + 归一化 + RGBA 栅格化
- load_nifti_file / decode_nifti_bytes：NIfTI 文件解码
"""

from .app_state import AppState
from .errors import InvalidSliceIndex, MalformedVolume, OutOfBounds, VolumeError
from .intensity_normalizer import normalize
from .nifti_reader import decode_nifti_bytes, load_nifti_file, read_header
from .nifti_volume import NiftiVolume
from .plane_rasterizer import rasterize
from .slice_extractor import extract_slice
from .slice_renderer import RasterizedSlice, extract_and_rasterize
from .voxel_accessor import read_sample
from .voxel_datatype import VoxelDatatype
from .volume_descriptor import VolumeDescriptor, validate_buffer

__all__ = [
    "AppState",
    "VolumeError",
    "MalformedVolume",
    "InvalidSliceIndex",
    "OutOfBounds",
    "normalize",
    "decode_nifti_bytes",
    "load_nifti_file",
    "read_header",
    "NiftiVolume",
    "rasterize",
    "extract_slice",
    "RasterizedSlice",
    "extract_and_rasterize",
    "read_sample",
    "VoxelDatatype",
    "VolumeDescriptor",
    "validate_buffer",
]
