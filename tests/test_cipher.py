import io

from hypothesis import given, strategies as st

from roguelib.cipher import (
    ENCSTR,
    STATLIST,
    VERSION,
    read_encrypted,
    transform,
    write_encrypted,
)


@given(st.binary(max_size=300))
def test_transform_is_an_involution(data):
    assert transform(transform(data)) == data


@given(st.binary(max_size=200))
def test_transform_keeps_length(data):
    assert len(transform(data)) == len(data)


def test_first_key_byte_combines_both_key_strings():
    assert transform(b"\x00")[0] == ENCSTR[0] ^ STATLIST[0]


@given(st.binary(min_size=1, max_size=100), st.integers(min_value=0, max_value=100))
def test_prefix_of_ciphertext_is_ciphertext_of_prefix(data, cut):
    assert transform(data)[:cut] == transform(data[:cut])


def test_write_then_read_round_trip():
    buf = io.BytesIO()
    payload = VERSION.encode() + b"\0"
    assert write_encrypted(buf, payload) == len(payload)
    assert buf.getvalue() == transform(payload)
    buf.seek(0)
    assert read_encrypted(buf, len(payload)) == payload


def test_read_from_empty_stream_gives_nothing():
    assert read_encrypted(io.BytesIO(), 10) == b""


def test_short_read_decrypts_what_is_there():
    stored = transform(b"hello")
    assert read_encrypted(io.BytesIO(stored[:3]), 5) == b"hel"


def test_each_record_restarts_keystream():
    buf = io.BytesIO()
    write_encrypted(buf, b"ab")
    write_encrypted(buf, b"ab")
    raw = buf.getvalue()
    assert raw[:2] == raw[2:]