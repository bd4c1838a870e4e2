# -*- coding: utf-8 -*-
"""
NIfTI 文件解码（Model）。
流程：gzip 检测与解压 -> nibabel 解析头部 -> 按 vox_offset 截取体素字节 -> 构造 NiftiVolume。
切片引擎只消费这里产出的 VolumeDescriptor 与小端字节缓冲区。
"""

import gzip
import io
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple, Union

import nibabel as nib
import numpy as np
from nibabel.spatialimages import HeaderDataError

from .errors import MalformedVolume
from .nifti_volume import NiftiVolume
from .voxel_datatype import VoxelDatatype
from .volume_descriptor import VolumeDescriptor

logger = logging.getLogger(__name__)

GZIP_MAGIC = b"\x1f\x8b"
# sizeof_hdr 字段：NIfTI-1 为 348，NIfTI-2 为 540
NIFTI1_HEADER_SIZE = 348
NIFTI2_HEADER_SIZE = 540


@dataclass(frozen=True)
class NiftiHeaderInfo:
    """切片引擎所需的头部信息。dimensions 为 (x, y, z)，缺失的维度补 1。"""

    dimensions: Tuple[int, int, int]
    datatype_code: int
    byte_offset: int
    endianness: str


def is_compressed(data: bytes) -> bool:
    return data[:2] == GZIP_MAGIC


def decompress(data: bytes) -> bytes:
    try:
        return gzip.decompress(data)
    except (OSError, EOFError) as e:
        raise MalformedVolume(f"gzip 解压失败：{e}") from e


def _header_class(data: bytes):
    """根据 sizeof_hdr（两种字节序均可）选择 NIfTI-1 或 NIfTI-2 头部类。"""
    if len(data) < 4:
        raise MalformedVolume("文件过短，不是有效的 NIfTI 文件")
    for byteorder in ("little", "big"):
        size = int.from_bytes(data[:4], byteorder)
        if size == NIFTI1_HEADER_SIZE:
            return nib.Nifti1Header
        if size == NIFTI2_HEADER_SIZE:
            return nib.Nifti2Header
    raise MalformedVolume("不是有效的 NIfTI 文件")


def read_header(data: bytes) -> NiftiHeaderInfo:
    """解析（已解压的）NIfTI 字节的头部，非 NIfTI 数据抛出 MalformedVolume。"""
    header_class = _header_class(data)
    try:
        header = header_class.from_fileobj(io.BytesIO(data))
    except (HeaderDataError, ValueError, EOFError) as e:
        raise MalformedVolume(f"NIfTI 头部解析失败：{e}") from e

    dim = header["dim"]
    ndim = int(dim[0])
    if ndim < 1:
        raise MalformedVolume("NIfTI 头部未声明任何维度")
    # 只使用前三个空间维度，4D 数据仅第一个体可寻址
    dimensions = tuple(int(dim[i]) if i <= ndim else 1 for i in (1, 2, 3))
    return NiftiHeaderInfo(
        dimensions=dimensions,
        datatype_code=int(header["datatype"]),
        byte_offset=int(header.get_data_offset()),
        endianness=header.endianness,
    )


def _to_little_endian(payload: bytes, descriptor: VolumeDescriptor) -> bytes:
    """大端体素转为小端；长度不足时原样返回，由 NiftiVolume 的校验报错。"""
    datatype = descriptor.datatype
    required = descriptor.required_bytes
    if len(payload) < required:
        return payload
    count = required // datatype.sample_size
    big = np.frombuffer(payload, dtype=datatype.numpy_dtype.newbyteorder(">"), count=count)
    return big.astype(datatype.numpy_dtype).tobytes()


def decode_nifti_bytes(data: bytes, source: Optional[Path] = None) -> NiftiVolume:
    """
    从整份文件字节解码体数据。
    - 压缩数据先解压
    - 大端文件中的多字节样本转换为小端
    """
    if is_compressed(data):
        data = decompress(data)
        logger.info("文件已解压，%d 字节", len(data))

    info = read_header(data)
    logger.info(
        "NIfTI 头部：维度 %s，datatype=%d，数据偏移 %d，字节序 %s",
        info.dimensions, info.datatype_code, info.byte_offset, info.endianness,
    )

    datatype = VoxelDatatype.from_code(info.datatype_code)
    if not datatype.is_supported:
        logger.warning("不支持的 NIfTI 数据类型 %d，切片将以 0 值显示", info.datatype_code)

    width, height, depth = info.dimensions
    descriptor = VolumeDescriptor(width, height, depth, datatype)
    if info.byte_offset > len(data):
        raise MalformedVolume(f"数据偏移 {info.byte_offset} 超出文件长度 {len(data)}")

    payload = data[info.byte_offset:]
    if info.endianness == ">" and datatype.sample_size > 1:
        payload = _to_little_endian(payload, descriptor)

    volume = NiftiVolume(descriptor, payload, source)
    logger.info("层数：%d", depth)
    return volume


def load_nifti_file(path: Union[str, Path]) -> NiftiVolume:
    """读取 .nii / .nii.gz 文件。"""
    path = Path(path)
    logger.info("读取 NIfTI 文件：%s", path)
    return decode_nifti_bytes(path.read_bytes(), source=path)
