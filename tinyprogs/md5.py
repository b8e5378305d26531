"""MD5 message digest (RFC 1321) in pure Python."""

from __future__ import annotations

import math
import struct
import sys

_MASK = 0xFFFFFFFF
_INITIAL_STATE = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476)

# Per-step constants: floor(2**32 * |sin(i)|) for i = 1..64.
_T = tuple(int(4294967296.0 * abs(math.sin(i))) & _MASK for i in range(1, 65))

_SHIFTS = (7, 12, 17, 22) * 4 + (5, 9, 14, 20) * 4 + (4, 11, 16, 23) * 4 + (6, 10, 15, 21) * 4

RFC_TEST_MESSAGES = (
    "",
    "945399884.61923487334tuvga",
    "abc",
    "message digest",
    "abcdefghijklmnopqrstuvwxyz",
    "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789",
    "12345678901234567890123456789012345678901234567890123456789012345678901234567890",
)


def _rotate_left(value: int, amount: int) -> int:
    return ((value << amount) | (value >> (32 - amount))) & _MASK


def _compress(state: tuple[int, int, int, int], block: bytes) -> tuple[int, int, int, int]:
    words = struct.unpack("<16I", block)
    a, b, c, d = state
    for step in range(64):
        if step < 16:
            mixed = (b & c) | (~b & d)
            index = step
        elif step < 32:
            mixed = (b & d) | (c & ~d)
            index = (5 * step + 1) % 16
        elif step < 48:
            mixed = b ^ c ^ d
            index = (3 * step + 5) % 16
        else:
            mixed = c ^ (b | ~d)
            index = (7 * step) % 16
        total = (a + (mixed & _MASK) + words[index] + _T[step]) & _MASK
        a, d, c, b = d, c, b, (b + _rotate_left(total, _SHIFTS[step])) & _MASK
    return tuple((old + new) & _MASK for old, new in zip(state, (a, b, c, d)))  # type: ignore[return-value]


class Md5:
    """Incremental MD5 hasher with a hashlib-like interface."""

    digest_size = 16
    block_size = 64

    def __init__(self, data: bytes = b"") -> None:
        self._state = _INITIAL_STATE
        self._pending = b""
        self._length = 0
        if data:
            self.update(data)

    def update(self, data: bytes) -> None:
        """Append bytes to the message."""
        chunk = memoryview(data).tobytes()
        self._length += len(chunk)
        pending = self._pending + chunk
        whole = len(pending) - len(pending) % 64
        for offset in range(0, whole, 64):
            self._state = _compress(self._state, pending[offset:offset + 64])
        self._pending = pending[whole:]

    def copy(self) -> "Md5":
        """Return an independent hasher with the same state."""
        clone = Md5()
        clone._state = self._state
        clone._pending = self._pending
        clone._length = self._length
        return clone

    def digest(self) -> bytes:
        """Return the 16-byte digest of everything appended so far."""
        bit_length = (self._length * 8) & 0xFFFFFFFFFFFFFFFF
        padding = b"\x80" + b"\x00" * ((55 - self._length) % 64)
        tail = self._pending + padding + struct.pack("<Q", bit_length)
        state = self._state
        for offset in range(0, len(tail), 64):
            state = _compress(state, tail[offset:offset + 64])
        return struct.pack("<4I", *state)

    def hexdigest(self) -> str:
        """Return the digest as lower-case hexadecimal."""
        return self.digest().hex()


def md5_hex(data: bytes) -> str:
    """Return the hexadecimal MD5 digest of ``data``."""
    return Md5(data).hexdigest()


def main(argv: list[str] | None = None) -> int:
    """Print digests of the given strings, or of the RFC test suite."""
    messages = sys.argv[1:] if argv is None else argv
    for message in messages or RFC_TEST_MESSAGES:
        print(f'MD5 ("{message}") = {md5_hex(message.encode("utf-8"))}')
    return 0


if __name__ == "__main__":
    sys.exit(main())