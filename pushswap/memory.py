"""Byte-buffer helpers: fill, search, compare and copy over ``bytearray`` objects."""

__all__ = [
    "compare",
    "copy",
    "fill",
    "find_byte",
    "move",
    "zero",
    "zeroed",
]


def _check_count(count, *buffers):
    if count < 0:
        raise ValueError(f"count must not be negative, got {count}")
    for buffer in buffers:
        if count > len(buffer):
            raise IndexError(f"count {count} exceeds buffer of {len(buffer)} byte(s)")


def fill(buffer, value, count):
    """Set the first ``count`` bytes of ``buffer`` to ``value`` (taken modulo 256).

    Returns ``buffer``.
    """
    _check_count(count, buffer)
    buffer[:count] = bytes([value & 0xFF]) * count
    return buffer


def zero(buffer, count):
    """Set the first ``count`` bytes of ``buffer`` to zero."""
    fill(buffer, 0, count)


def zeroed(count, size):
    """A new zero-filled buffer holding ``count`` items of ``size`` bytes each."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def find_byte(data, value, count):
    """Index of the first byte equal to ``value`` (modulo 256) among the first ``count``, or None."""
    _check_count(count, data)
    index = bytes(data[:count]).find(value & 0xFF)
    return None if index < 0 else index


def compare(first, second, count):
    """Compare the first ``count`` bytes of two buffers.

    Returns 0 when they match, otherwise the difference between the first
    pair of bytes that differ.
    """
    _check_count(count, first, second)
    for left, right in zip(first[:count], second[:count]):
        if left != right:
            return left - right
    return 0


def copy(destination, source, count):
    """Copy the first ``count`` bytes of ``source`` over the start of ``destination``.

    Returns ``destination``.
    """
    _check_count(count, destination, source)
    destination[:count] = source[:count]
    return destination


def move(buffer, destination, source, count):
    """Copy ``count`` bytes inside ``buffer`` from offset ``source`` to offset ``destination``.

    The regions may overlap; the result is as if the bytes were first copied
    aside. Returns ``buffer``.
    """
    if count < 0:
        raise ValueError(f"count must not be negative, got {count}")
    for offset in (destination, source):
        if offset < 0 or offset + count > len(buffer):
            raise IndexError(
                f"region at {offset} of {count} byte(s) lies outside buffer of {len(buffer)}"
            )
    buffer[destination : destination + count] = buffer[source : source + count]
    return buffer