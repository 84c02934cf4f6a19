"""
Color value type: explicit 0-255 channels, hex parsing, and pure blend helpers.
"""
from dataclasses import dataclass


def clamp_channel(value: float) -> int:
    """Round and clamp one channel to the valid byte range."""
    return int(max(0, min(255, round(value))))


@dataclass(frozen=True)
class Color:
    r: int
    g: int
    b: int

    @classmethod
    def of(cls, r: float, g: float, b: float) -> "Color":
        return cls(clamp_channel(r), clamp_channel(g), clamp_channel(b))

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def with_alpha(self, alpha: float) -> tuple[int, int, int, int]:
        return (self.r, self.g, self.b, clamp_channel(alpha))


WHITE = Color(255, 255, 255)
BLACK = Color(0, 0, 0)


def parse_hex(value: str) -> Color:
    """'#RRGGBB' (or 'RRGGBB', or short '#RGB') to Color."""
    s = value.strip().lstrip("#")
    if len(s) == 3:
        s = "".join(ch * 2 for ch in s)
    if len(s) != 6:
        raise ValueError(f"Not a hex RGB color: {value!r}")
    return Color(int(s[0:2], 16), int(s[2:4], 16), int(s[4:6], 16))


def to_hex(color: Color) -> str:
    return f"#{color.r:02X}{color.g:02X}{color.b:02X}"


def lerp(a: Color, b: Color, t: float) -> Color:
    """Linear blend from a (t=0) to b (t=1)."""
    t = max(0.0, min(1.0, t))
    return Color.of(
        a.r + (b.r - a.r) * t,
        a.g + (b.g - a.g) * t,
        a.b + (b.b - a.b) * t,
    )


def scale(color: Color, factor: float) -> Color:
    """Multiply every channel (0.7 = darken to 70%)."""
    return Color.of(color.r * factor, color.g * factor, color.b * factor)


def shift(color: Color, delta: float) -> Color:
    """Add the same offset to every channel."""
    return Color.of(color.r + delta, color.g + delta, color.b + delta)


def brightness(color: Color) -> float:
    """Mean of the three channels (0-255)."""
    return (color.r + color.g + color.b) / 3
