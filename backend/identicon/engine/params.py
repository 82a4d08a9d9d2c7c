"""Parameter extraction: hash characters to shape, rotation and colour choices.

Byte map (0-indexed into the UTF-8 bytes of the hash):

    [0]      corner shape id         raw value
    [1]      side shape id           raw value
    [2]      center shape id         & 7
    [3]      corner rotation         & 3
    [4]      side rotation           & 3
    [5]      center background flag  % 2
    [6:12]   corner red, green, blue two characters each
    [12:18]  side red, green, blue   two characters each

Everything past position 17 is ignored.
"""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_HASH = "098f6bcd4621d373cade4e832627b4f6"

# Shorter hashes (or none at all) fall back to DEFAULT_HASH
MIN_HASH_LENGTH = 20


@dataclass(frozen=True)
class ShapeSpec:
    """One ring region (corner or side)."""

    shape_id: int
    rotation: int
    red: int
    green: int
    blue: int

    @property
    def color(self) -> tuple[int, int, int]:
        """Drawable RGB. Channels decoded from non-hex characters can fall outside 0..255."""
        return (_clamp8(self.red), _clamp8(self.green), _clamp8(self.blue))


@dataclass(frozen=True)
class CenterSpec:
    shape_id: int
    use_side_background: bool


@dataclass(frozen=True)
class ImageParams:
    corner: ShapeSpec
    side: ShapeSpec
    center: CenterSpec


def _clamp8(v: int) -> int:
    return max(0, min(255, v))


def _digit(code: int) -> int:
    # Whole alphabets are range-checked, so "g" decodes to 16. Any other
    # ASCII byte keeps its value; bytes past ASCII read as signed chars.
    if 0x30 <= code <= 0x39:
        return code - 0x30
    if 0x41 <= code <= 0x5A:
        return code - 0x41 + 10
    if 0x61 <= code <= 0x7A:
        return code - 0x61 + 10
    if 0x80 <= code <= 0xFF:
        return code - 0x100
    return code


def _code(ch: int | str) -> int:
    return ch if isinstance(ch, int) else ord(ch)


def hexdec(first: int | str, second: int | str | None = None) -> int:
    """Decode one byte, or a two-byte pair as ``first * 16 + second``.

    Accepts byte values (as from indexing ``bytes``) or one-character strings.
    """
    num = _digit(_code(first))
    if second is not None:
        num = num * 16 + _digit(_code(second))
    return num


def normalize_hash(value: str | None) -> bytes:
    """UTF-8 bytes of ``value``, or of DEFAULT_HASH when it is missing or too short.

    Length is counted in bytes, so ten two-byte characters are enough.
    """
    if value is not None:
        data = value.encode("utf-8")
        if len(data) >= MIN_HASH_LENGTH:
            return data
    return DEFAULT_HASH.encode("ascii")


def extract(value: str | None) -> ImageParams:
    """Decode a hash into the parameters of one identicon."""
    h = normalize_hash(value)

    corner = ShapeSpec(
        shape_id=hexdec(h[0]),
        rotation=hexdec(h[3]) & 3,
        red=hexdec(h[6], h[7]),
        green=hexdec(h[8], h[9]),
        blue=hexdec(h[10], h[11]),
    )
    side = ShapeSpec(
        shape_id=hexdec(h[1]),
        rotation=hexdec(h[4]) & 3,
        red=hexdec(h[12], h[13]),
        green=hexdec(h[14], h[15]),
        blue=hexdec(h[16], h[17]),
    )
    center = CenterSpec(
        shape_id=hexdec(h[2]) & 7,
        use_side_background=hexdec(h[5]) % 2 != 0,
    )
    return ImageParams(corner=corner, side=side, center=center)
