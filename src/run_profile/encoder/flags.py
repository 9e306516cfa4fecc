"""Bit-field edge attribute record and the values packed into it."""

from math import isfinite
from typing import Dict, List


class EdgeFlags:
    """Fixed-width bit field holding the encoded attributes of one edge."""
    
    __slots__ = ["bits"]
    
    def __init__(self, bits: int = 0) -> None:
        self.bits = bits
    
    def copy(self) -> "EdgeFlags":
        return EdgeFlags(self.bits)
    
    def __eq__(self, other) -> bool:
        if not isinstance(other, EdgeFlags):
            return NotImplemented
        return self.bits == other.bits
    
    def __hash__(self) -> int:
        return hash(self.bits)
    
    def __repr__(self) -> str:
        return f"EdgeFlags({self.bits:#x})"


class EncodedValue:
    """A named unsigned integer slot of ``bits`` width inside EdgeFlags."""
    
    def __init__(self, name: str, bits: int) -> None:
        if bits < 1:
            raise ValueError(f"{name}: bits must be at least 1, got {bits}")
        self.name = name
        self.bits = bits
        self.shift = 0
        self.max_int = (1 << bits) - 1
    
    def _write(self, flags: EdgeFlags, value: int) -> None:
        mask = self.max_int << self.shift
        flags.bits = (flags.bits & ~mask) | (value << self.shift)
    
    def _read(self, flags: EdgeFlags) -> int:
        return (flags.bits >> self.shift) & self.max_int
    
    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r}, bits={self.bits}, shift={self.shift})"


class BooleanEncodedValue(EncodedValue):
    """Single flag bit."""
    
    def __init__(self, name: str) -> None:
        super().__init__(name, 1)
    
    def set_bool(self, flags: EdgeFlags, value: bool) -> None:
        self._write(flags, 1 if value else 0)
    
    def get_bool(self, flags: EdgeFlags) -> bool:
        return self._read(flags) == 1


class IntEncodedValue(EncodedValue):
    """Unsigned integer, writes saturate into [0, max_int]."""
    
    def set_int(self, flags: EdgeFlags, value: int) -> None:
        self._write(flags, max(0, min(self.max_int, int(value))))
    
    def get_int(self, flags: EdgeFlags) -> int:
        return self._read(flags)


class DecimalEncodedValue(EncodedValue):
    """
    Non-negative decimal stored as ``round(value / factor)``.
    
    Writes saturate at the largest storable value, so the quantized
    number never wraps around its bit width.
    """
    
    def __init__(self, name: str, bits: int, factor: float) -> None:
        super().__init__(name, bits)
        if factor <= 0:
            raise ValueError(f"{name}: factor must be positive, got {factor}")
        self.factor = factor
    
    @property
    def max_value(self) -> float:
        return self.max_int * self.factor
    
    def set_decimal(self, flags: EdgeFlags, value: float) -> None:
        if not isfinite(value):
            raise ValueError(f"{self.name}: cannot store non-finite value {value}")
        stored = int(round(value / self.factor))
        self._write(flags, max(0, min(self.max_int, stored)))
    
    def get_decimal(self, flags: EdgeFlags) -> float:
        return self._read(flags) * self.factor


class EncodingManager:
    """Lays out encoded values one after another in a shared EdgeFlags."""
    
    def __init__(self) -> None:
        self._values: Dict[str, EncodedValue] = {}
        self._next_shift = 0
    
    def register(self, value: EncodedValue) -> EncodedValue:
        if value.name in self._values:
            raise ValueError(f"Encoded value already registered: {value.name}")
        value.shift = self._next_shift
        self._next_shift += value.bits
        self._values[value.name] = value
        return value
    
    def get(self, name: str) -> EncodedValue:
        return self._values[name]
    
    @property
    def used_bits(self) -> int:
        return self._next_shift
    
    def names(self) -> List[str]:
        return list(self._values)
