import base64
import os

import pytest

from pixelscan.b64codec import decode, encode


def test_encode_known_vectors():
    assert encode(b"f") == "Zg=="
    assert encode(b"foobar") == "Zm9vYmFy"


def test_decode_known_vector():
    assert decode("Zm8=") == b"fo"


@pytest.mark.parametrize("length", range(1, 20))
def test_round_trip(length):
    data = os.urandom(length)
    assert decode(encode(data)) == data


@pytest.mark.parametrize("length", range(1, 20))
def test_encode_agrees_with_stdlib(length):
    data = bytes(range(length))
    assert encode(data) == base64.b64encode(data).decode("ascii")


def test_encoded_length_is_padded():
    for length in range(1, 12):
        assert len(encode(b"x" * length)) % 4 == 0


def test_decode_ignores_noise():
    clean = encode(b"hello world, this is a longer payload")
    noisy = "\n".join(clean[i : i + 7] for i in range(0, len(clean), 7)) + "\r\n"
    assert decode(noisy) == decode(clean)


def test_decode_accepts_bytes_and_str():
    text = encode(b"\x00\xff\x10")
    assert decode(text.encode("ascii")) == decode(text) == b"\x00\xff\x10"


def test_decode_without_padding():
    assert decode("Zg") == decode("Zg==")


def test_decode_empty():
    assert decode("") == b""


def test_encode_empty_rejected():
    with pytest.raises(ValueError):
        encode(b"")