import logging
import struct

import pytest

from models import OutOfBounds, VoxelDatatype, read_sample


def test_uint8_reads_single_byte():
    buffer = bytes([0, 7, 255])
    assert read_sample(buffer, VoxelDatatype.UINT8, 1) == 7
    assert read_sample(buffer, VoxelDatatype.UINT8, 2) == 255


def test_uint16_is_little_endian():
    buffer = bytes([0x34, 0x12, 0x00, 0x01, 0xFF, 0xFF])
    assert read_sample(buffer, VoxelDatatype.UINT16_LE, 0) == 0x1234
    assert read_sample(buffer, VoxelDatatype.UINT16_LE, 1) == 256
    assert read_sample(buffer, VoxelDatatype.UINT16_LE, 2) == 65535


def test_float32_uses_sample_index_not_byte_offset():
    buffer = struct.pack("<3f", 0.5, -2.25, 1234.5)
    assert read_sample(buffer, VoxelDatatype.FLOAT32_LE, 0) == 0.5
    assert read_sample(buffer, VoxelDatatype.FLOAT32_LE, 1) == -2.25
    assert read_sample(buffer, VoxelDatatype.FLOAT32_LE, 2) == 1234.5


def test_read_past_end_raises():
    buffer = bytes([1, 2, 3])
    with pytest.raises(OutOfBounds):
        read_sample(buffer, VoxelDatatype.UINT16_LE, 1)
    with pytest.raises(OutOfBounds):
        read_sample(buffer, VoxelDatatype.UINT8, 3)


def test_negative_index_raises():
    with pytest.raises(OutOfBounds):
        read_sample(bytes([1, 2]), VoxelDatatype.UINT8, -1)


def test_unsupported_returns_zero_and_warns(caplog):
    caplog.set_level(logging.WARNING, logger="models.voxel_accessor")
    assert read_sample(bytes([9, 9]), VoxelDatatype.UNSUPPORTED, 0) == 0
    assert len(caplog.records) == 1
    assert caplog.records[0].levelno == logging.WARNING


def test_buffer_is_not_modified():
    buffer = bytearray([10, 20])
    read_sample(buffer, VoxelDatatype.UINT8, 0)
    assert buffer == bytearray([10, 20])
