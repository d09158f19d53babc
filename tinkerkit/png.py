"""A minimal reader for PNG chunk data."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Sequence, Union

_SIGNATURE_LENGTH = 8


def _take(data: bytes, start: int, length: int) -> bytes:
    chunk = bytes(data[start : start + length])
    if len(chunk) != length:
        raise ValueError(
            f"expected {length} bytes at offset {start}, only {len(chunk)} available"
        )
    return chunk


def cast_2u8_u16(data: bytes) -> int:
    """Read a big-endian 16-bit unsigned integer from the first two bytes."""
    return int.from_bytes(_take(data, 0, 2), "big")


def cast_4u8_u32(data: bytes) -> int:
    """Read a big-endian 32-bit unsigned integer from the first four bytes."""
    return int.from_bytes(_take(data, 0, 4), "big")


@dataclass(frozen=True)
class ColorType:
    grayscale: bool = True
    palette: bool = False
    color: bool = False
    alpha: bool = False

    @classmethod
    def from_byte(cls, byte: int) -> ColorType:
        palette = bool(byte & 1)
        color = bool(byte & 2)
        alpha = bool(byte & 4)
        return cls(
            grayscale=not (palette or color or alpha),
            palette=palette,
            color=color,
            alpha=alpha,
        )

    def to_byte(self) -> int:
        return int(self.palette) | int(self.color) << 2 | int(self.alpha) << 3


def _alpha_for(bit_depth: int) -> int:
    if not 0 <= bit_depth < 16:
        raise ValueError(f"bit depth {bit_depth} does not fit a 16-bit alpha")
    return 1 << bit_depth


@dataclass(frozen=True)
class Color:
    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 0

    @classmethod
    def rgb(cls, r: int, g: int, b: int, bit_depth: int) -> Color:
        return cls(r, g, b, _alpha_for(bit_depth))

    @classmethod
    def grayscale(cls, value: int, bit_depth: int) -> Color:
        return cls(value, value, value, _alpha_for(bit_depth))


@dataclass(frozen=True)
class Chromaticity:
    """White point and primaries as stored in a cHRM chunk."""

    wpx: int = 0
    wpy: int = 0
    rx: int = 0
    ry: int = 0
    gx: int = 0
    gy: int = 0
    bx: int = 0
    by: int = 0


@dataclass(frozen=True)
class PhysDim:
    """Pixels per unit along each axis, as stored in a pHYs chunk."""

    x: int = 0
    y: int = 0
    unit: int = 0


@dataclass
class Png:
    width: int = 0
    height: int = 0
    bit_depth: int = 0
    color_type: ColorType = field(default_factory=ColorType)
    compression_method: int = 0
    filter_method: int = 0
    interlace_method: int = 0
    palette: bytes = b""
    pixels: list[Color] = field(default_factory=list)
    bg_color: Optional[Color] = None
    chromaticities: Optional[Chromaticity] = None
    phys_dim: Optional[PhysDim] = None
    texts: list[str] = field(default_factory=list)

    @classmethod
    def from_bytes(cls, data: bytes) -> Png:
        """Read the chunks that follow the 8-byte signature, stopping at IEND."""
        png = cls()
        _take(data, 0, _SIGNATURE_LENGTH)
        body = bytes(data[_SIGNATURE_LENGTH:])
        pixel_data = bytearray()
        offset = 0
        while offset < len(body):
            length = cast_4u8_u32(_take(body, offset, 4))
            ctype = _take(body, offset + 4, 4).decode("latin-1")
            cdata = _take(body, offset + 8, length)
            _take(body, offset + 8 + length, 4)
            if parse_chunk(ctype, cdata, png, pixel_data):
                break
            offset += 12 + length
        parse_idat_all(bytes(pixel_data), png)
        return png


def parse_idat_all(data: bytes, png: Png) -> None:
    """Turn the collected image data into pixels appended to ``png``."""
    offset = 0
    while offset < len(data):
        width = png.bit_depth >> 3 if png.bit_depth >= 8 else 1
        if png.color_type.color:
            width *= 4
            if png.bit_depth == 8:
                pixel = Color(*_take(data, offset, 4))
            else:
                raw = _take(data, offset, 8)
                pixel = Color(
                    *(cast_2u8_u16(raw[i : i + 2]) for i in range(0, 8, 2))
                )
        else:
            pixel = Color()
        png.pixels.append(pixel)
        offset += width


def parse_chunk(
    ctype: Union[str, bytes], data: bytes, png: Png, pixel_data: bytearray
) -> bool:
    """Apply one chunk to ``png``; return True when parsing should stop."""
    if isinstance(ctype, (bytes, bytearray)):
        ctype = bytes(ctype).decode("latin-1")
    if ctype == "IEND":
        return True
    handler = _HANDLERS.get(ctype)
    if ctype == "IDAT":
        start = 1 if png.filter_method == 0 else 0
        pixel_data.extend(data[start:])
    elif handler is not None:
        handler(bytes(data), png)
    return False


def _parse_ihdr(data: bytes, png: Png) -> None:
    header = _take(data, 0, 13)
    png.width = cast_4u8_u32(header[0:4])
    png.height = cast_4u8_u32(header[4:8])
    png.bit_depth = header[8]
    png.color_type = ColorType.from_byte(header[9])
    png.compression_method = header[10]
    png.filter_method = header[11]
    png.interlace_method = header[12]


def _parse_plte(data: bytes, png: Png) -> None:
    png.palette = bytes(data)


def _parse_bkgd(data: bytes, png: Png) -> None:
    kind = png.color_type.to_byte()
    if kind in (0, 4):
        png.bg_color = Color.grayscale(cast_2u8_u16(data), png.bit_depth)
    elif kind in (2, 6):
        raw = _take(data, 0, 6)
        png.bg_color = Color.rgb(
            cast_2u8_u16(raw[0:2]),
            cast_2u8_u16(raw[2:4]),
            cast_2u8_u16(raw[4:6]),
            png.bit_depth,
        )
    else:
        png.bg_color = None


def _parse_chrm(data: bytes, png: Png) -> None:
    raw = _take(data, 0, 32)
    png.chromaticities = Chromaticity(
        *(cast_4u8_u32(raw[i : i + 4]) for i in range(0, 32, 4))
    )


def _parse_phys(data: bytes, png: Png) -> None:
    raw = _take(data, 0, 9)
    png.phys_dim = PhysDim(cast_4u8_u32(raw[0:4]), cast_4u8_u32(raw[4:8]), raw[8])


def _parse_text(data: bytes, png: Png) -> None:
    png.texts.append(data.decode("utf-8"))


_HANDLERS = {
    "IHDR": _parse_ihdr,
    "PLTE": _parse_plte,
    "bKGD": _parse_bkgd,
    "cHRM": _parse_chrm,
    "pHYs": _parse_phys,
    "tEXt": _parse_text,
    "iTXt": _parse_text,
    "zTXt": _parse_text,
}


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read a PNG file (``interesting.png`` by default) and print what was found."""
    args = list(sys.argv[1:] if argv is None else argv)
    path = Path(args[0]) if args else Path.cwd() / "interesting.png"
    png = Png.from_bytes(path.read_bytes())
    print(f"pixels: {len(png.pixels)}")
    print(f"bit_depth: {png.bit_depth}")
    print(f"color_type: {png.color_type}")
    print(f"bg_color: {png.bg_color}")
    print(f"chromaticities: {png.chromaticities}")
    print(f"phys_dim: {png.phys_dim}")
    print(f"texts: {png.texts}")
    return 0


if __name__ == "__main__":
    sys.exit(main())