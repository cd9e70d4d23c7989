"""Virtio MMIO registers, split virtqueue structures and the block buffer."""

from __future__ import annotations

import enum
import struct
from dataclasses import dataclass, field

# MMIO control registers.
VIRTIO_MMIO_MAGIC_VALUE = 0x000
VIRTIO_MMIO_VERSION = 0x004
VIRTIO_MMIO_DEVICE_ID = 0x008
VIRTIO_MMIO_VENDOR_ID = 0x00C
VIRTIO_MMIO_DEVICE_FEATURES = 0x010
VIRTIO_MMIO_DRIVER_FEATURES = 0x020
VIRTIO_MMIO_QUEUE_SEL = 0x030
VIRTIO_MMIO_QUEUE_NUM_MAX = 0x034
VIRTIO_MMIO_QUEUE_NUM = 0x038
VIRTIO_MMIO_QUEUE_READY = 0x044
VIRTIO_MMIO_QUEUE_NOTIFY = 0x050
VIRTIO_MMIO_INTERRUPT_STATUS = 0x060
VIRTIO_MMIO_INTERRUPT_ACK = 0x064
VIRTIO_MMIO_STATUS = 0x070
VIRTIO_MMIO_QUEUE_DESC_LOW = 0x080
VIRTIO_MMIO_QUEUE_DESC_HIGH = 0x084
VIRTIO_MMIO_DRIVER_DESC_LOW = 0x090
VIRTIO_MMIO_DRIVER_DESC_HIGH = 0x094
VIRTIO_MMIO_DEVICE_DESC_LOW = 0x0A0
VIRTIO_MMIO_DEVICE_DESC_HIGH = 0x0A4

# Device feature bits.
VIRTIO_BLK_F_RO = 5
VIRTIO_BLK_F_SCSI = 7
VIRTIO_BLK_F_CONFIG_WCE = 11
VIRTIO_BLK_F_MQ = 12
VIRTIO_F_ANY_LAYOUT = 27
VIRTIO_RING_F_INDIRECT_DESC = 28
VIRTIO_RING_F_EVENT_IDX = 29

NUM = 8  # descriptors per queue; a power of two

VIRTIO_BLK_T_IN = 0
VIRTIO_BLK_T_OUT = 1


class DeviceStatus(enum.IntFlag):
    """Bits of the device status register."""

    ACKNOWLEDGE = 1
    DRIVER = 2
    DRIVER_OK = 4
    FEATURES_OK = 8


class DescFlag(enum.IntFlag):
    """Descriptor flags."""

    NEXT = 1
    WRITE = 2


_DESC = struct.Struct("<QIHH")
_AVAIL = struct.Struct(f"<HH{NUM}HH")
_USED_ELEM = struct.Struct("<II")
_USED = struct.Struct("<HH" + "II" * NUM)
_BLK_REQ = struct.Struct("<IIQ")

DESC_SIZE = _DESC.size
AVAIL_SIZE = _AVAIL.size
USED_SIZE = _USED.size
BLK_REQUEST_SIZE = _BLK_REQ.size


def _pack(layout: struct.Struct, *values: int) -> bytes:
    try:
        return layout.pack(*values)
    except struct.error as exc:
        raise ValueError(f"field out of range: {exc}") from exc


def _require(data: bytes, layout: struct.Struct, what: str) -> None:
    if len(data) < layout.size:
        raise ValueError(f"{what} needs {layout.size} bytes, got {len(data)}")


@dataclass(frozen=True)
class VirtqDesc:
    """A single descriptor."""

    addr: int = 0
    len: int = 0
    flags: int = 0
    next: int = 0

    def pack(self) -> bytes:
        return _pack(_DESC, self.addr, self.len, self.flags, self.next)


def unpack_desc(data: bytes) -> VirtqDesc:
    _require(data, _DESC, "descriptor")
    return VirtqDesc(*_DESC.unpack_from(data))


@dataclass(frozen=True)
class VirtqAvail:
    """The available ring written by the driver."""

    flags: int = 0
    idx: int = 0
    ring: tuple[int, ...] = (0,) * NUM
    unused: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "ring", tuple(self.ring))
        if len(self.ring) != NUM:
            raise ValueError(f"avail ring must have {NUM} entries")

    def pack(self) -> bytes:
        return _pack(_AVAIL, self.flags, self.idx, *self.ring, self.unused)


def unpack_avail(data: bytes) -> VirtqAvail:
    _require(data, _AVAIL, "avail ring")
    flags, idx, *rest = _AVAIL.unpack_from(data)
    return VirtqAvail(flags=flags, idx=idx, ring=tuple(rest[:NUM]), unused=rest[NUM])


@dataclass(frozen=True)
class VirtqUsedElem:
    """One completed request reported by the device."""

    id: int = 0
    len: int = 0


@dataclass(frozen=True)
class VirtqUsed:
    """The used ring written by the device."""

    flags: int = 0
    idx: int = 0
    ring: tuple[VirtqUsedElem, ...] = (VirtqUsedElem(),) * NUM

    def __post_init__(self) -> None:
        object.__setattr__(self, "ring", tuple(self.ring))
        if len(self.ring) != NUM:
            raise ValueError(f"used ring must have {NUM} entries")

    def pack(self) -> bytes:
        values = [v for elem in self.ring for v in (elem.id, elem.len)]
        return _pack(_USED, self.flags, self.idx, *values)


def unpack_used(data: bytes) -> VirtqUsed:
    _require(data, _USED, "used ring")
    flags, idx, *rest = _USED.unpack_from(data)
    ring = tuple(VirtqUsedElem(id=i, len=n) for i, n in zip(rest[0::2], rest[1::2]))
    return VirtqUsed(flags=flags, idx=idx, ring=ring)


@dataclass(frozen=True)
class BlkRequest:
    """The first descriptor of a block device request."""

    type: int = VIRTIO_BLK_T_IN
    reserved: int = 0
    sector: int = 0

    def pack(self) -> bytes:
        return _pack(_BLK_REQ, self.type, self.reserved, self.sector)


def unpack_blk_request(data: bytes) -> BlkRequest:
    _require(data, _BLK_REQ, "block request")
    return BlkRequest(*_BLK_REQ.unpack_from(data))


@dataclass
class Buf:
    """A cached disk block."""

    valid: bool = False  # has data been read from disk?
    disk: bool = False  # does the disk own the buffer?
    dev: int = 0
    blockno: int = 0
    refcnt: int = 0
    data: bytearray = field(default_factory=bytearray)