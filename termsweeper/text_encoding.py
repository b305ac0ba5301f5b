"""Lenient conversions between UTF-16 code units, UTF-8 bytes and wide strings."""

from __future__ import annotations

from typing import Iterable, Iterator, Union

REPLACEMENT = 0xFFFD

_MIN_VALUE = (0, 0x80, 0x800, 0x10000)

Unit = Union[int, str]


def _is_high(unit: int) -> bool:
    return 0xD800 <= unit <= 0xDBFF


def _is_low(unit: int) -> bool:
    return 0xDC00 <= unit <= 0xDFFF


def _code_points(units: Iterable[Unit]) -> Iterator[int]:
    """Decode UTF-16 units, replacing unpaired surrogates with U+FFFD."""
    pending_high = None
    for raw in units:
        unit = ord(raw) if isinstance(raw, str) else int(raw)
        if pending_high is not None:
            high, pending_high = pending_high, None
            if _is_low(unit):
                yield (((high - 0xD800) << 10) | (unit - 0xDC00)) + 0x10000
                continue
            yield REPLACEMENT
        if _is_high(unit):
            pending_high = unit
        elif _is_low(unit):
            yield REPLACEMENT
        else:
            yield unit
    if pending_high is not None:
        yield REPLACEMENT


def _to_units(code_point: int) -> list[int]:
    if code_point <= 0xFFFF:
        return [code_point]
    offset = code_point - 0x10000
    return [0xD800 + (offset >> 10), 0xDC00 + (offset & 0x3FF)]


def utf16_to_utf8(units: Iterable[Unit]) -> bytes:
    """Encode UTF-16 code units (ints or one-character strings) as UTF-8."""
    return "".join(map(chr, _code_points(units))).encode("utf-8")


def utf8_to_utf16(data: bytes) -> list[int]:
    """Decode UTF-8 bytes to UTF-16 code units, substituting U+FFFD for bad input.

    A truncated sequence at the end yields one replacement and stops decoding.
    """
    data = bytes(data)
    out: list[int] = []
    length = len(data)
    i = 0
    while i < length:
        lead = data[i]
        if lead <= 0x7F:
            code_point, extra = lead, 0
        elif (lead & 0xE0) == 0xC0:
            code_point, extra = lead & 0x1F, 1
        elif (lead & 0xF0) == 0xE0:
            code_point, extra = lead & 0x0F, 2
        elif (lead & 0xF8) == 0xF0:
            code_point, extra = lead & 0x07, 3
        else:
            out.append(REPLACEMENT)
            i += 1
            continue

        if i + extra >= length:
            out.append(REPLACEMENT)
            break

        tail = data[i + 1:i + 1 + extra]
        if any((byte & 0xC0) != 0x80 for byte in tail):
            out.append(REPLACEMENT)
            i += 1
            continue
        for byte in tail:
            code_point = (code_point << 6) | (byte & 0x3F)
        i += extra + 1

        if code_point < _MIN_VALUE[extra]:
            out.append(REPLACEMENT)
        elif code_point <= 0xFFFF and 0xD800 <= code_point <= 0xDFFF:
            out.append(REPLACEMENT)
        else:
            out.extend(_to_units(code_point))
    return out


def utf16_to_wide(units: Iterable[Unit], wide_bits: int = 32) -> list[int]:
    """Convert UTF-16 units to wide characters of 32 bits (code points) or 16 bits (units)."""
    if wide_bits not in (16, 32):
        raise ValueError(f"unsupported wide character width: {wide_bits}")
    points = _code_points(units)
    if wide_bits == 32:
        return list(points)
    return [unit for point in points for unit in _to_units(point)]