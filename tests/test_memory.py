import pytest
from hypothesis import given
from hypothesis import strategies as st

from ftkit.memory import calloc, mem_chr, mem_cmp, mem_copy, mem_move, mem_set, zero


def test_zero_clears_prefix_only():
    buf = bytearray(b"Ciao")
    result = zero(buf, 2)
    assert result is buf
    assert buf[:2] == bytes(2)
    assert buf[2:] == b"ao"


def test_zero_whole_buffer():
    buf = bytearray(b"Ciao")
    zero(buf, len(buf))
    assert buf == bytes(len(buf))


def test_zero_too_many_bytes():
    with pytest.raises(ValueError):
        zero(bytearray(b"Ciao"), 5)


@given(st.integers(0, 50), st.integers(0, 50))
def test_calloc_is_zero_filled(count, size):
    buf = calloc(count, size)
    assert len(buf) == count * size
    assert not any(buf)


def test_calloc_negative():
    with pytest.raises(ValueError):
        calloc(-1, 4)


def test_mem_chr_finds_first_occurrence():
    data = b"Casa mia"
    index = mem_chr(data, ord("m"), 6)
    assert index == data.find(b"m")
    assert data[index] == ord("m")


def test_mem_chr_outside_range():
    assert mem_chr(b"Casa mia", ord("i"), 6) is None


def test_mem_chr_reduces_value():
    assert mem_chr(b"Casa", ord("a") + 256, 4) == mem_chr(b"Casa", ord("a"), 4)


def test_mem_chr_count_too_large():
    with pytest.raises(ValueError):
        mem_chr(b"ab", ord("a"), 3)


def test_mem_cmp_first_difference_sign():
    assert mem_cmp(b"Casa mia", b"Casamia", 5) < 0
    assert mem_cmp(b"Casamia", b"Casa mia", 5) > 0


def test_mem_cmp_equal_prefix():
    assert mem_cmp(b"Casa mia", b"Casamia", 4) == 0


def test_mem_cmp_unsigned_bytes():
    assert mem_cmp(b"\xff", b"\x01", 1) > 0


@given(st.binary(min_size=1, max_size=20), st.binary(min_size=1, max_size=20))
def test_mem_cmp_antisymmetric(a, b):
    n = min(len(a), len(b))
    assert mem_cmp(a, b, n) == -mem_cmp(b, a, n)
    assert (mem_cmp(a, b, n) == 0) == (a[:n] == b[:n])


def test_mem_copy_overwrites_prefix():
    original = b"isso vado"
    dest = bytearray(original)
    result = mem_copy(dest, b"Ciao", 4)
    assert result is dest
    assert dest[:4] == b"Ciao"
    assert dest[4:] == original[4:]


def test_mem_copy_source_too_short():
    with pytest.raises(ValueError):
        mem_copy(bytearray(10), b"abc", 4)


def test_mem_move_forward_overlap():
    buf = bytearray(b"abcdef")
    mem_move(buf, 2, 0, 4)
    assert buf == b"ababcd"


def test_mem_move_backward_overlap():
    buf = bytearray(b"abcdef")
    mem_move(buf, 0, 2, 4)
    assert buf == b"cdefef"


@given(st.binary(min_size=1, max_size=30), st.data())
def test_mem_move_copies_source_region(data, draw):
    size = len(data)
    n = draw.draw(st.integers(0, size))
    src = draw.draw(st.integers(0, size - n))
    dest = draw.draw(st.integers(0, size - n))
    buf = bytearray(data)
    mem_move(buf, dest, src, n)
    assert buf[dest : dest + n] == data[src : src + n]
    assert len(buf) == size


def test_mem_move_out_of_bounds():
    with pytest.raises(ValueError):
        mem_move(bytearray(b"abc"), 2, 0, 2)


def test_mem_set_fills():
    buf = bytearray(b"Ciao")
    mem_set(buf, 57, 4)
    assert buf == b"9999"


def test_mem_set_wraps_value():
    a = mem_set(bytearray(4), 65 + 256, 2)
    b = mem_set(bytearray(4), 65, 2)
    assert a == b
    assert a[2:] == bytes(2)


def test_mem_set_negative_count():
    with pytest.raises(ValueError):
        mem_set(bytearray(4), 1, -1)