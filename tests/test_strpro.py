import pytest

from cwmpcore.strpro import clean_by_ch, clean_space, hex2str, str2hex


def test_clean_space_strips_both_ends():
    assert clean_space("   1    d ") == "1    d"


def test_clean_space_keeps_tabs():
    assert clean_space(" \tx\t ") == "\tx\t"


def test_clean_space_all_spaces():
    assert clean_space("     ") == ""


def test_clean_by_ch_quotes():
    assert clean_by_ch('""realm""', '"') == "realm"


def test_clean_by_ch_rejects_multichar():
    with pytest.raises(ValueError):
        clean_by_ch("abc", "ab")


def test_hex2str_little_endian_int():
    data = (0x12345678).to_bytes(4, "little")
    assert hex2str(data, 128) == "78563412"


def test_hex2str_high_bytes_lowercase():
    assert hex2str(b"\xff\xab", 5) == "ffab"


def test_hex2str_out_len_too_small():
    with pytest.raises(ValueError):
        hex2str(b"\x01\x02", 4)


def test_hex2str_empty_data():
    with pytest.raises(ValueError):
        hex2str(b"", 10)


@pytest.mark.parametrize("data", [b"\x00", b"\x12\x34\x56\x78", bytes(range(256))])
def test_round_trip(data):
    text = hex2str(data, len(data) * 2 + 1)
    assert str2hex(text, len(data)) == data


def test_str2hex_odd_length():
    with pytest.raises(ValueError):
        str2hex("abc", 4)


def test_str2hex_buffer_too_small():
    with pytest.raises(ValueError):
        str2hex("aabbcc", 2)


def test_str2hex_rejects_uppercase():
    with pytest.raises(ValueError):
        str2hex("AB", 1)


def test_str2hex_empty_text():
    assert str2hex("", 4) == b""