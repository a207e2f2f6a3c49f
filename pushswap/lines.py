"""Reading a stream one line at a time, pulling fixed-size chunks as needed."""

__all__ = ["BUFFER_SIZE", "LineReader", "read_lines"]

BUFFER_SIZE = 10


class LineReader:
    """Hand out the lines of a text or binary stream, newline included.

    The stream is read ``buffer_size`` characters (or bytes) at a time and
    whatever follows the last newline handed out is kept for the next call.
    The final line is returned without a newline if the stream does not end
    with one.
    """

    def __init__(self, stream, buffer_size=BUFFER_SIZE):
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending = None

    def __repr__(self):
        return f"LineReader({self._stream!r}, buffer_size={self._buffer_size})"

    def read_line(self):
        """The next line, or None once the stream is exhausted."""
        while True:
            pending = self._pending
            if pending is not None:
                newline = "\n" if isinstance(pending, str) else b"\n"
                end = pending.find(newline)
                if end >= 0:
                    line, rest = pending[: end + 1], pending[end + 1 :]
                    self._pending = rest or None
                    return line
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                self._pending = None
                return pending or None
            self._pending = chunk if pending is None else pending + chunk

    def __iter__(self):
        return iter(self.read_line, None)


def read_lines(stream, buffer_size=BUFFER_SIZE):
    """Yield the lines of ``stream`` one by one, newline included."""
    yield from LineReader(stream, buffer_size)