import pytest

from fogos.params import (
    STAT_SIZE,
    FileType,
    Stat,
    unpack_stat,
)


def test_stat_round_trip():
    st = Stat(dev=1, ino=42, type=FileType.FILE, nlink=2, size=123456789)
    assert unpack_stat(st.pack()) == st


def test_stat_packed_length():
    assert len(Stat().pack()) == STAT_SIZE


def test_stat_padding_is_zero():
    data = Stat(dev=-1, ino=7, type=FileType.DIR, nlink=3, size=9).pack()
    assert data[12:16] == bytes(4)


def test_stat_dev_little_endian():
    data = Stat(dev=1).pack()
    assert data[:4] == b"\x01\x00\x00\x00"


def test_unpack_known_type_becomes_enum():
    st = unpack_stat(Stat(type=FileType.DEVICE).pack())
    assert st.type is FileType.DEVICE


def test_unpack_unknown_type_kept_as_int():
    st = unpack_stat(Stat(type=0).pack())
    assert st.type == 0
    assert not isinstance(st.type, FileType)


def test_unpack_short_data_raises():
    with pytest.raises(ValueError):
        unpack_stat(bytes(STAT_SIZE - 1))


def test_pack_negative_size_raises():
    with pytest.raises(ValueError):
        Stat(size=-1).pack()