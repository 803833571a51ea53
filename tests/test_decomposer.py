import pytest

from address_space import AddressOutOfRange, compute_layout, decompose, to_binary


@pytest.fixture
def two_level():
    return compute_layout(2, 32, 4096)


@pytest.fixture
def single_level():
    return compute_layout(1, 16, 1024)


def test_two_level_decompose_4097(two_level):
    breakdown = decompose(two_level, 4097)
    assert breakdown.offset == 1
    assert breakdown.vpn == 1
    assert breakdown.table_index == 1
    assert breakdown.directory_index == 0


def test_address_equal_to_memory_size_is_out_of_range(two_level):
    with pytest.raises(AddressOutOfRange) as excinfo:
        decompose(two_level, 2 ** 32)
    assert excinfo.value.memory_size == 2 ** 32
    assert str(excinfo.value) == "address exceeds memory bounds of 4294967296 bytes."


def test_negative_address_is_out_of_range(single_level):
    with pytest.raises(AddressOutOfRange):
        decompose(single_level, -1)


def test_highest_address(two_level):
    breakdown = decompose(two_level, 2 ** 32 - 1)
    assert breakdown.offset == 4095
    assert breakdown.vpn == 2 ** 20 - 1
    assert breakdown.directory_index == 1023
    assert breakdown.table_index == 1023


def test_single_level_fields(single_level):
    breakdown = decompose(single_level, 0xABCD)
    assert breakdown.vpn == 42
    assert breakdown.offset == 973
    assert breakdown.vpn_binary == "101010"
    assert breakdown.offset_binary == "1111001101"
    assert breakdown.address_binary == "1010101111001101"
    assert breakdown.directory_index is None
    assert breakdown.table_index is None
    assert breakdown.directory_index_binary is None
    assert breakdown.table_index_binary is None


def test_zero_renders_full_width(two_level):
    breakdown = decompose(two_level, 0)
    assert breakdown.address_binary == "0" * 32
    assert breakdown.vpn_binary == "0" * 20
    assert breakdown.offset_binary == "0" * 12
    assert breakdown.directory_index_binary == "0" * 10
    assert breakdown.table_index_binary == "0" * 10


def test_binary_widths_match_layout():
    for organization, address_bits, page_size in [(1, 20, 1024), (2, 40, 8192), (2, 63, 512 * 1024)]:
        layout = compute_layout(organization, address_bits, page_size)
        for va in (0, 1, page_size - 1, page_size, 2 ** address_bits // 3, 2 ** address_bits - 1):
            breakdown = decompose(layout, va)
            assert len(breakdown.address_binary) == layout.address_bits
            assert len(breakdown.vpn_binary) == layout.vpn_bits
            assert len(breakdown.offset_binary) == layout.offset_bits
            if layout.is_two_level:
                assert len(breakdown.directory_index_binary) == layout.directory_index_bits
                assert len(breakdown.table_index_binary) == layout.table_index_bits


def test_fields_rebuild_the_address():
    for organization, address_bits, page_size in [(1, 32, 4096), (2, 32, 4096), (2, 48, 2048), (1, 63, 65536)]:
        layout = compute_layout(organization, address_bits, page_size)
        for va in (0, 4097, 0x12345678, 2 ** address_bits - 1, 2 ** (address_bits - 1) + 12345):
            breakdown = decompose(layout, va)
            assert breakdown.rebuild() == va
            assert (breakdown.vpn << layout.offset_bits) | breakdown.offset == va


def test_zero_width_vpn():
    layout = compute_layout(1, 10, 1024)
    breakdown = decompose(layout, 1023)
    assert breakdown.vpn == 0
    assert breakdown.vpn_binary == ""
    assert breakdown.offset_binary == "1" * 10


def test_decompose_is_deterministic(two_level):
    assert decompose(two_level, 123456) == decompose(two_level, 123456)


def test_to_binary():
    assert to_binary(5, 4) == "0101"
    assert to_binary(0, 3) == "000"
    assert to_binary(0, 0) == ""


def test_two_level_report(two_level):
    lines = str(decompose(two_level, 4097)).splitlines()
    assert lines == [
        "VPN of the address in decimal: 1",
        "page offset of the address in decimal: 1",
        "page directory index in decimal: 0",
        "page table index in decimal: 1",
        "the input address in binary: 00000000000000000001000000000001",
        "VPN of the address in binary: 00000000000000000001",
        "page offset of the address in binary: 000000000001",
        "page directory index in binary: 0000000000",
        "page table index in binary: 0000000001",
    ]


def test_single_level_report_has_no_directory_lines(single_level):
    report = str(decompose(single_level, 5))
    assert "page directory index" not in report
    assert "page table index" not in report
    assert "page offset of the address in decimal: 5" in report
