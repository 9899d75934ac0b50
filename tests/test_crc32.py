import pytest

from cobcsw.crc32 import crc32


def test_empty_data_yields_initial_value():
    assert crc32(b"") == 0xFFFFFFFF


def test_standard_check_value():
    assert crc32(b"123456789") == 0x0376E6E7


@pytest.mark.parametrize(
    "data",
    [b"\x00", b"\xaa\x00\xff\x00", b"Hello from SPI1!", bytes(range(256))],
)
def test_appending_checksum_big_endian_gives_zero_residue(data):
    checksum = crc32(data)
    assert crc32(data + checksum.to_bytes(4, "big")) == 0


def test_result_fits_in_32_bits():
    for data in (b"\xff" * 100, bytes(range(256)) * 3):
        assert 0 <= crc32(data) <= 0xFFFFFFFF


def test_bytes_like_inputs_agree():
    data = b"\xaa\x00\xff\x00"
    assert crc32(bytearray(data)) == crc32(data) == crc32(memoryview(data))


def test_single_bit_change_changes_checksum():
    assert crc32(b"\x00\x00\x00\x01") != crc32(b"\x00\x00\x00\x00")
    assert crc32(b"\x01") == crc32(bytes([1]))


def test_text_is_rejected():
    with pytest.raises(TypeError):
        crc32("123456789")