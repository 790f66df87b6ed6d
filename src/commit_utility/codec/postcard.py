"""Byte-level postcard reading and writing utilities.

This module provides the low-level primitives of the postcard wire format
used by the commitment producer: raw bytes, LEB128 varints, zigzag-encoded
signed integers, length-prefixed strings and byte strings, option tags and
enum variant indices.
"""

from __future__ import annotations

# Widths of the integer types that appear on the wire
USIZE_BITS = 64
U32_BITS = 32
MAX_CHAR_BYTES = 4


def _varint_max_bytes(num_bits: int) -> int:
    return (num_bits + 6) // 7


def zigzag_encode(value: int, num_bits: int) -> int:
    """Map a signed integer onto an unsigned one (0, -1, 1, -2, ...).

    Args:
        value: Signed integer value
        num_bits: Width of the signed type (16, 32, 64 or 128)

    Returns:
        Zigzag-encoded unsigned value
    """
    return ((value << 1) ^ (value >> (num_bits - 1))) & ((1 << num_bits) - 1)


def zigzag_decode(value: int) -> int:
    """Invert zigzag_encode()."""
    return (value >> 1) ^ -(value & 1)


class PostcardWriter:
    """Appends postcard-encoded values to a byte buffer.

    Example:
        >>> writer = PostcardWriter()
        >>> writer.write_varint(300, 64)
        >>> writer.write_str("a")
        >>> writer.to_bytes()
        b'\\xac\\x02\\x01a'
    """

    def __init__(self) -> None:
        """Initialize an empty writer."""
        self._buffer = bytearray()

    def write_u8(self, value: int) -> None:
        """Write an unsigned byte.

        Raises:
            ValueError: If value is outside 0-255
        """
        if not 0 <= value <= 0xFF:
            raise ValueError(f"u8 value out of range: {value}")
        self._buffer.append(value)

    def write_i8(self, value: int) -> None:
        """Write a signed byte in two's complement.

        Raises:
            ValueError: If value is outside -128..127
        """
        if not -0x80 <= value <= 0x7F:
            raise ValueError(f"i8 value out of range: {value}")
        self._buffer.append(value & 0xFF)

    def write_varint(self, value: int, num_bits: int) -> None:
        """Write an unsigned integer as a LEB128 varint.

        Args:
            value: Unsigned integer value
            num_bits: Width of the unsigned type on the wire

        Raises:
            ValueError: If value is negative or doesn't fit in num_bits
        """
        if value < 0:
            raise ValueError(f"write_varint requires non-negative value, got {value}")
        if value >> num_bits:
            raise ValueError(f"Value {value} requires more than {num_bits} bits")

        while True:
            byte = value & 0x7F
            value >>= 7
            if value:
                self._buffer.append(byte | 0x80)
            else:
                self._buffer.append(byte)
                return

    def write_signed(self, value: int, num_bits: int) -> None:
        """Write a signed integer as a zigzag varint.

        Raises:
            ValueError: If value doesn't fit in num_bits using two's complement
        """
        min_value = -(1 << (num_bits - 1))
        max_value = (1 << (num_bits - 1)) - 1
        if value < min_value or value > max_value:
            raise ValueError(
                f"Value {value} doesn't fit in {num_bits} bits (range: {min_value} to {max_value})"
            )
        self.write_varint(zigzag_encode(value, num_bits), num_bits)

    def write_raw(self, data: bytes) -> None:
        """Write bytes with no length prefix (fixed-size tuples)."""
        self._buffer.extend(data)

    def write_bytes(self, data: bytes) -> None:
        """Write a length-prefixed byte string."""
        self.write_varint(len(data), USIZE_BITS)
        self._buffer.extend(data)

    def write_str(self, value: str) -> None:
        """Write a length-prefixed UTF-8 string."""
        self.write_bytes(value.encode("utf-8"))

    def write_option_tag(self, present: bool) -> None:
        self._buffer.append(1 if present else 0)

    def write_variant(self, index: int) -> None:
        """Write an enum variant index."""
        self.write_varint(index, U32_BITS)

    def write_length(self, length: int) -> None:
        """Write a sequence or map element count."""
        self.write_varint(length, USIZE_BITS)

    def to_bytes(self) -> bytes:
        """Return the encoded bytes."""
        return bytes(self._buffer)


class PostcardReader:
    """Reads postcard-encoded values from a byte buffer.

    Truncation raises IndexError; any other malformed input raises ValueError.
    Callers translate both into DeserializationError.

    Example:
        >>> reader = PostcardReader(b"\\xac\\x02\\x01a")
        >>> reader.read_varint(64)
        300
        >>> reader.read_str()
        'a'
        >>> reader.bytes_remaining()
        0
    """

    def __init__(self, data: bytes) -> None:
        """Initialize a reader over the given data.

        Args:
            data: Byte buffer to read
        """
        self._data = bytes(data)
        self._position = 0

    def read_u8(self) -> int:
        """Read an unsigned byte.

        Raises:
            IndexError: If no more bytes are available
        """
        if self._position >= len(self._data):
            raise IndexError("Attempted to read past end of buffer")

        value = self._data[self._position]
        self._position += 1
        return value

    def read_i8(self) -> int:
        """Read a signed byte in two's complement."""
        value = self.read_u8()
        return value - 0x100 if value & 0x80 else value

    def read_varint(self, num_bits: int) -> int:
        """Read a LEB128 varint for an unsigned type of the given width.

        Args:
            num_bits: Width of the unsigned type on the wire

        Returns:
            Unsigned integer value

        Raises:
            IndexError: If the varint is truncated
            ValueError: If the varint is too long or overflows num_bits
        """
        value = 0
        for i in range(_varint_max_bytes(num_bits)):
            byte = self.read_u8()
            value |= (byte & 0x7F) << (7 * i)
            if not byte & 0x80:
                if value >> num_bits:
                    raise ValueError(f"Varint overflows {num_bits} bits")
                return value

        raise ValueError(f"Varint longer than {_varint_max_bytes(num_bits)} bytes")

    def read_signed(self, num_bits: int) -> int:
        """Read a zigzag varint for a signed type of the given width."""
        return zigzag_decode(self.read_varint(num_bits))

    def read_raw(self, num_bytes: int) -> bytes:
        """Read a fixed number of bytes with no length prefix.

        Raises:
            IndexError: If not enough bytes are available
        """
        if num_bytes > self.bytes_remaining():
            raise IndexError(
                f"Not enough bytes: need {num_bytes}, have {self.bytes_remaining()}"
            )

        result = self._data[self._position : self._position + num_bytes]
        self._position += num_bytes
        return result

    def read_bytes(self) -> bytes:
        """Read a length-prefixed byte string."""
        return self.read_raw(self.read_length())

    def read_str(self) -> str:
        """Read a length-prefixed UTF-8 string.

        Raises:
            ValueError: If the payload is not valid UTF-8
        """
        raw = self.read_bytes()
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ValueError(f"Invalid UTF-8 encoding: {e}") from e

    def read_char(self) -> str:
        """Read a char, encoded as a UTF-8 string of at most four bytes.

        Only the first character of the payload is kept.

        Raises:
            ValueError: If the payload is empty, longer than four bytes, or
                not valid UTF-8
        """
        length = self.read_varint(USIZE_BITS)
        if length > MAX_CHAR_BYTES:
            raise ValueError(f"Char encoding of {length} bytes exceeds {MAX_CHAR_BYTES}")
        try:
            value = self.read_raw(length).decode("utf-8")
        except UnicodeDecodeError as e:
            raise ValueError(f"Invalid UTF-8 encoding: {e}") from e
        if not value:
            raise ValueError("Empty char encoding")
        return value[0]

    def read_option_tag(self) -> bool:
        """Read an Option tag and return whether a value follows."""
        tag = self.read_u8()
        if tag > 1:
            raise ValueError(f"Invalid option tag {tag}")
        return tag == 1

    def read_variant(self, num_variants: int) -> int:
        """Read an enum variant index.

        Args:
            num_variants: Number of variants the enum defines

        Raises:
            ValueError: If the index is out of range
        """
        index = self.read_varint(U32_BITS)
        if index >= num_variants:
            raise ValueError(f"Invalid variant index {index} (only {num_variants} variants)")
        return index

    def read_length(self) -> int:
        """Read a sequence, map or byte-string length.

        Raises:
            IndexError: If the length exceeds the remaining bytes
        """
        length = self.read_varint(USIZE_BITS)
        # Every element occupies at least one byte
        if length > self.bytes_remaining():
            raise IndexError(
                f"Length {length} exceeds remaining {self.bytes_remaining()} bytes"
            )
        return length

    def bytes_remaining(self) -> int:
        """Return the number of unread bytes."""
        return len(self._data) - self._position

    def position(self) -> int:
        """Return the current read offset in bytes."""
        return self._position
