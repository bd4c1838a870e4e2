import gzip
import logging

import nibabel as nib
import numpy as np
import pytest

from models import MalformedVolume, VoxelDatatype, decode_nifti_bytes, extract_slice, load_nifti_file, read_header
from models.nifti_reader import decompress, is_compressed


def _volume_array(dtype) -> np.ndarray:
    # (Z, Y, X) = (3, 2, 4)
    return np.arange(24).reshape(3, 2, 4).astype(dtype)


@pytest.mark.parametrize(
    "dtype, datatype",
    [
        (np.uint8, VoxelDatatype.UINT8),
        (np.uint16, VoxelDatatype.UINT16_LE),
        (np.float32, VoxelDatatype.FLOAT32_LE),
    ],
)
@pytest.mark.parametrize("name", ["volume.nii", "volume.nii.gz"])
def test_load_matches_written_array(write_nifti, dtype, datatype, name):
    array = _volume_array(dtype)
    volume = load_nifti_file(write_nifti(name, array))

    descriptor = volume.descriptor
    assert (descriptor.width, descriptor.height, descriptor.depth) == (4, 2, 3)
    assert descriptor.datatype is datatype
    assert volume.shape == array.shape
    assert volume.source.name == name

    for index in range(3):
        np.testing.assert_array_equal(extract_slice(volume.buffer, descriptor, index), array[index])


def test_gzip_detection(write_nifti):
    raw = write_nifti("plain.nii", _volume_array(np.uint8)).read_bytes()
    packed = gzip.compress(raw)
    assert is_compressed(packed)
    assert not is_compressed(raw)
    assert decompress(packed) == raw


def test_header_fields(write_nifti):
    data = write_nifti("header.nii", _volume_array(np.uint16)).read_bytes()
    info = read_header(data)
    assert info.dimensions == (4, 2, 3)
    assert info.datatype_code == 512
    assert info.byte_offset >= 352
    assert info.endianness == "<"


def test_two_dimensional_image_has_depth_one(write_nifti):
    array = np.arange(6, dtype=np.uint8).reshape(2, 3)
    volume = load_nifti_file(write_nifti("flat.nii", array))
    assert volume.shape == (1, 2, 3)


def test_unsupported_datatype_decodes_and_warns(write_nifti, caplog):
    caplog.set_level(logging.WARNING, logger="models.nifti_reader")
    volume = load_nifti_file(write_nifti("int16.nii", _volume_array(np.int16)))
    assert volume.descriptor.datatype is VoxelDatatype.UNSUPPORTED
    assert any("数据类型 4" in record.getMessage() for record in caplog.records)
    result = volume.rasterize_slice(0)
    assert result.pixels == bytes([0, 0, 0, 255]) * 8


def test_big_endian_payload_is_converted():
    header = nib.Nifti1Header(endianness=">")
    header.set_data_shape((2, 2, 1))
    header.set_data_dtype(np.uint16)
    header["vox_offset"] = 352
    values = np.array([1, 256, 513, 1000], dtype=">u2")
    data = header.binaryblock + b"\x00" * 4 + values.tobytes()

    assert read_header(data).endianness == ">"
    volume = decode_nifti_bytes(data)
    assert volume.descriptor.datatype is VoxelDatatype.UINT16_LE
    assert np.frombuffer(volume.buffer, dtype="<u2").tolist() == [1, 256, 513, 1000]


@pytest.mark.parametrize("data", [b"", b"abc", b"not a nifti file" * 40])
def test_non_nifti_bytes_are_malformed(data):
    with pytest.raises(MalformedVolume):
        decode_nifti_bytes(data)


def test_bad_gzip_is_malformed():
    with pytest.raises(MalformedVolume):
        decode_nifti_bytes(b"\x1f\x8b" + b"\x00" * 20)


def test_truncated_payload_is_malformed(write_nifti):
    data = write_nifti("cut.nii", _volume_array(np.float32)).read_bytes()
    with pytest.raises(MalformedVolume):
        decode_nifti_bytes(data[:-4])


def test_missing_file_raises_os_error(tmp_path):
    with pytest.raises(OSError):
        load_nifti_file(tmp_path / "missing.nii")
