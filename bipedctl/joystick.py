"""Wireless remote packet: button bit field and analog sticks."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field, fields

# Buttons in bit order, least significant bit first.
_BUTTONS = (
    "r1", "l1", "start", "select", "r2", "l2", "f1", "f2",
    "a", "b", "x", "y", "up", "right", "down", "left",
)

_LAYOUT = struct.Struct("<2sH5f16s")
PACKET_SIZE = _LAYOUT.size


@dataclass
class KeySwitch:
    """State of the sixteen remote buttons, packed into a 16-bit word."""

    r1: bool = False
    l1: bool = False
    start: bool = False
    select: bool = False
    r2: bool = False
    l2: bool = False
    f1: bool = False
    f2: bool = False
    a: bool = False
    b: bool = False
    x: bool = False
    y: bool = False
    up: bool = False
    right: bool = False
    down: bool = False
    left: bool = False

    @classmethod
    def from_value(cls, value: int) -> "KeySwitch":
        """Decode a 16-bit button word."""
        if not 0 <= value <= 0xFFFF:
            raise ValueError(f"button word must fit in 16 bits, got {value}")
        return cls(**{name: bool(value >> bit & 1) for bit, name in enumerate(_BUTTONS)})

    @property
    def value(self) -> int:
        """The 16-bit button word."""
        return sum(1 << bit for bit, name in enumerate(_BUTTONS) if getattr(self, name))

    def pressed(self) -> list[str]:
        """Names of the buttons held down."""
        return [f.name for f in fields(self) if getattr(self, f.name)]


@dataclass
class RockerBtnData:
    """40-byte remote packet: header, buttons, sticks and unused tail."""

    head: bytes = b"\x00\x00"
    btn: KeySwitch = field(default_factory=KeySwitch)
    lx: float = 0.0
    rx: float = 0.0
    ry: float = 0.0
    l2: float = 0.0
    ly: float = 0.0
    idle: bytes = bytes(16)

    @classmethod
    def unpack(cls, data: bytes) -> "RockerBtnData":
        """Decode a packet."""
        data = bytes(data)
        if len(data) != PACKET_SIZE:
            raise ValueError(f"remote packet must be {PACKET_SIZE} bytes, got {len(data)}")
        head, btn, lx, rx, ry, l2, ly, idle = _LAYOUT.unpack(data)
        return cls(head, KeySwitch.from_value(btn), lx, rx, ry, l2, ly, idle)

    def pack(self) -> bytes:
        """Encode the packet."""
        if len(self.head) != 2:
            raise ValueError("head must be 2 bytes")
        if len(self.idle) != 16:
            raise ValueError("idle must be 16 bytes")
        return _LAYOUT.pack(
            bytes(self.head), self.btn.value,
            self.lx, self.rx, self.ry, self.l2, self.ly, bytes(self.idle),
        )