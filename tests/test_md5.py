import hashlib

import pytest

from tinyprogs.md5 import RFC_TEST_MESSAGES, Md5, main, md5_hex


@pytest.mark.parametrize(
    "message, expected",
    [
        ("", "d41d8cd98f00b204e9800998ecf8427e"),
        ("abc", "900150983cd24fb0d6963f7d28e17f72"),
        ("message digest", "f96b697d7cb7938d525a2f31aaf161d0"),
        ("abcdefghijklmnopqrstuvwxyz", "c3fcd3d76192e4007dfb496cca67e13b"),
        (
            "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789",
            "d174ab98d277d9f5a5611c2c9f419d9f",
        ),
        (
            "12345678901234567890123456789012345678901234567890123456789012345678901234567890",
            "57edf4a22be3c955ac49da2e2107b67a",
        ),
    ],
)
def test_rfc_vectors(message, expected):
    assert md5_hex(message.encode()) == expected


@pytest.mark.parametrize("size", [0, 1, 55, 56, 57, 63, 64, 65, 127, 128, 1000])
def test_matches_hashlib_across_block_boundaries(size):
    data = bytes(range(256)) * 4
    assert md5_hex(data[:size]) == hashlib.md5(data[:size]).hexdigest()


def test_incremental_updates_equal_single_update():
    data = b"The quick brown fox jumps over the lazy dog" * 7
    hasher = Md5()
    for start in range(0, len(data), 13):
        hasher.update(data[start:start + 13])
    assert hasher.digest() == Md5(data).digest()


def test_digest_does_not_consume_state():
    hasher = Md5(b"abc")
    first = hasher.hexdigest()
    hasher.update(b"def")
    assert first == hashlib.md5(b"abc").hexdigest()
    assert hasher.hexdigest() == hashlib.md5(b"abcdef").hexdigest()


def test_copy_is_independent():
    hasher = Md5(b"prefix")
    clone = hasher.copy()
    clone.update(b"-more")
    assert hasher.hexdigest() == hashlib.md5(b"prefix").hexdigest()
    assert clone.hexdigest() == hashlib.md5(b"prefix-more").hexdigest()


def test_digest_length():
    assert len(Md5(b"x").digest()) == 16


def test_str_rejected():
    with pytest.raises(TypeError):
        Md5().update("text")


def test_main_prints_suite(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == len(RFC_TEST_MESSAGES)
    assert lines[2] == 'MD5 ("abc") = 900150983cd24fb0d6963f7d28e17f72'


def test_main_with_arguments(capsys):
    main(["hello"])
    out = capsys.readouterr().out
    assert out == f'MD5 ("hello") = {hashlib.md5(b"hello").hexdigest()}\n'