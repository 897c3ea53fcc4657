"""
Rect Canvas Editor - Color Domain Model

RGBA color used by document shapes and overlay instances.
Components are stored as floats in [0, 1], the layout the renderer consumes.
"""

from typing import Tuple


def _clamp01(v) -> float:
    return max(0.0, min(1.0, float(v)))


class Color:
    """Immutable RGBA color with float [0-1] storage.

    Construction clamps every component into range, so a Color is always
    valid to hand to the renderer.
    """

    __slots__ = ('_r', '_g', '_b', '_a')

    def __init__(self, r: float, g: float, b: float, a: float = 1.0):
        self._r = _clamp01(r)
        self._g = _clamp01(g)
        self._b = _clamp01(b)
        self._a = _clamp01(a)

    @property
    def r(self) -> float:
        """Red component (0-1) - READ ONLY"""
        return self._r

    @property
    def g(self) -> float:
        """Green component (0-1) - READ ONLY"""
        return self._g

    @property
    def b(self) -> float:
        """Blue component (0-1) - READ ONLY"""
        return self._b

    @property
    def a(self) -> float:
        """Alpha component (0-1) - READ ONLY"""
        return self._a

    # ========================================
    # Factory Methods
    # ========================================

    @classmethod
    def from_tuple(cls, rgba) -> 'Color':
        """Create from a 3- or 4-sequence of floats (alpha defaults to 1)."""
        values = list(rgba)
        if len(values) not in (3, 4):
            raise ValueError(f"Expected 3 or 4 color components, got {len(values)}")
        return cls(*values)

    @classmethod
    def from_uint8(cls, r: int, g: int, b: int, a: int = 255) -> 'Color':
        """Create from 8-bit components (0-255)."""
        return cls(r / 255.0, g / 255.0, b / 255.0, a / 255.0)

    @classmethod
    def from_hex(cls, hex_string: str) -> 'Color':
        """Create from RRGGBB / RRGGBBAA, with or without a leading #.

        Raises:
            ValueError: if the string is not 6 or 8 hex digits
        """
        digits = hex_string.strip().lstrip('#')
        if len(digits) not in (6, 8):
            raise ValueError(f"Invalid hex color: {hex_string!r}")
        try:
            parts = [int(digits[i:i + 2], 16) for i in range(0, len(digits), 2)]
        except ValueError:
            raise ValueError(f"Invalid hex color: {hex_string!r}") from None
        return cls.from_uint8(*parts)

    # ========================================
    # Conversions
    # ========================================

    def to_tuple(self) -> Tuple[float, float, float, float]:
        return (self._r, self._g, self._b, self._a)

    def to_uint8(self) -> Tuple[int, int, int, int]:
        return tuple(int(round(c * 255)) for c in self.to_tuple())

    def to_hex(self) -> str:
        """#RRGGBBAA"""
        return '#' + ''.join(f'{c:02X}' for c in self.to_uint8())

    def with_alpha(self, a: float) -> 'Color':
        return Color(self._r, self._g, self._b, a)

    def __iter__(self):
        return iter(self.to_tuple())

    def __eq__(self, other):
        if not isinstance(other, Color):
            return NotImplemented
        return self.to_tuple() == other.to_tuple()

    def __hash__(self):
        return hash(self.to_tuple())

    def __repr__(self):
        return f"Color({self._r:.3f}, {self._g:.3f}, {self._b:.3f}, {self._a:.3f})"
