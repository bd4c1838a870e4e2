# -*- coding: utf-8 -*-
"""
体数据描述（Model）。
VolumeDescriptor 是头部解码与切片引擎之间唯一的约定，在边界处校验一次。
"""

from dataclasses import dataclass

from .errors import MalformedVolume
from .voxel_datatype import VoxelDatatype


@dataclass(frozen=True)
class VolumeDescriptor:
    """
    体数据尺寸与类型，不可变。
    - width / height / depth 分别对应 NIfTI dim[1] / dim[2] / dim[3]
    - 缓冲区布局：depth 个平面，每个平面 width*height 个样本，行优先
    """

    width: int
    height: int
    depth: int
    datatype: VoxelDatatype

    def __post_init__(self):
        for name in ("width", "height", "depth"):
            value = getattr(self, name)
            if value <= 0:
                raise MalformedVolume(f"体数据维度 {name}={value} 必须为正数")

    @property
    def plane_size(self) -> int:
        """单个切片平面的样本数。"""
        return self.width * self.height

    @property
    def required_bytes(self) -> int:
        """缓冲区至少应包含的字节数。"""
        return self.plane_size * self.depth * self.datatype.sample_size


def validate_buffer(descriptor: VolumeDescriptor, buffer: bytes) -> None:
    """缓冲区长度不足时抛出 MalformedVolume，应在任何切片提取之前调用。"""
    required = descriptor.required_bytes
    if len(buffer) < required:
        raise MalformedVolume(
            f"体数据缓冲区长度 {len(buffer)} 字节，少于所需的 {required} 字节 "
            f"({descriptor.width}x{descriptor.height}x{descriptor.depth}, "
            f"{descriptor.datatype.name})"
        )
