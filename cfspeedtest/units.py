"""Human-readable formatting of bit rates and byte counts."""

from __future__ import annotations

__all__ = ["bits_per_second_si", "bytes_si", "bytes_iec"]

_SI_PREFIXES = ("k", "M", "G", "T")
_IEC_PREFIXES = ("Ki", "Mi", "Gi", "Ti")


def _value_with_unit(number: float, unit: str) -> str:
    if number < 100:
        # Three significant digits, trailing zeroes dropped.
        return f"{number:.3g} {unit}"
    return f"{number:.0f} {unit}"


def _scaled(value: int, base: int, prefixes: tuple[str, ...], unit: str) -> str:
    if value < 0:
        raise ValueError(f"value must not be negative: {value}")
    if value < base:
        return f"{value} {unit}"
    number = float(value)
    for index, prefix in enumerate(prefixes):
        number /= base
        if value < base ** (index + 2) or index == len(prefixes) - 1:
            return _value_with_unit(number, prefix + unit)
    raise AssertionError("unreachable")


def bits_per_second_si(bits: int) -> str:
    """Format a bit rate with decimal prefixes, e.g. ``12.5 Mbit/s``."""
    return _scaled(bits, 1_000, _SI_PREFIXES, "bit/s")


def bytes_si(count: int) -> str:
    """Format a byte count with decimal prefixes, e.g. ``25 MB``."""
    return _scaled(count, 1_000, _SI_PREFIXES, "B")


def bytes_iec(count: int) -> str:
    """Format a byte count with binary prefixes, e.g. ``1.5 MiB``."""
    return _scaled(count, 1_024, _IEC_PREFIXES, "B")