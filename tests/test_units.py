import pytest

from cfspeedtest.units import bits_per_second_si, bytes_iec, bytes_si


def _split(text):
    number, unit = text.split(" ")
    return float(number), number, unit


def test_pinned_values():
    assert bytes_si(1_000) == "1 kB"
    assert bytes_iec(1_024) == "1 KiB"
    assert bits_per_second_si(1_000_000) == "1 Mbit/s"


@pytest.mark.parametrize("count", [0, 1, 7, 99, 512, 999])
def test_small_values_are_plain(count):
    assert bytes_si(count) == f"{count} B"
    assert bits_per_second_si(count) == f"{count} bit/s"


@pytest.mark.parametrize("count", [0, 1, 1000, 1023])
def test_small_iec_values_are_plain(count):
    assert bytes_iec(count) == f"{count} B"


@pytest.mark.parametrize(
    "exponent, prefix", [(1, "k"), (2, "M"), (3, "G"), (4, "T"), (5, "T")]
)
def test_si_prefix_selection(exponent, prefix):
    for value in (1000**exponent, 1000**exponent * 5, 1000 ** (exponent + 1) - 1):
        if exponent < 4 or value >= 1000**4:
            _, _, unit = _split(bytes_si(value))
            assert unit == prefix + "B"
            _, _, rate_unit = _split(bits_per_second_si(value))
            assert rate_unit == prefix + "bit/s"


@pytest.mark.parametrize(
    "exponent, prefix", [(1, "Ki"), (2, "Mi"), (3, "Gi"), (4, "Ti")]
)
def test_iec_prefix_selection(exponent, prefix):
    for value in (1024**exponent, 1024**exponent * 3):
        _, _, unit = _split(bytes_iec(value))
        assert unit == prefix + "B"


@pytest.mark.parametrize(
    "value", [1_000, 1_234, 9_999, 12_345, 99_949, 123_456, 999_499, 25_000_000]
)
def test_si_number_is_in_range(value):
    number, _, _ = _split(bytes_si(value))
    assert 1 <= number <= 1000


@pytest.mark.parametrize("value", [100_000, 123_456, 555_555, 999_000])
def test_large_mantissa_has_no_decimals(value):
    _, text, _ = _split(bytes_si(value))
    assert "." not in text
    assert int(text) == round(value / 1000)


@pytest.mark.parametrize("value", [1_234, 5_678, 12_345, 98_765])
def test_small_mantissa_has_three_significant_digits(value):
    _, text, _ = _split(bytes_si(value))
    digits = text.replace(".", "").lstrip("0")
    assert len(digits) <= 3
    assert abs(float(text) - value / 1000) <= 0.05 * (10 ** (len(str(value)) - 4))


def test_whole_numbers_drop_trailing_zeroes():
    for exponent in range(1, 5):
        _, text, _ = _split(bytes_si(2 * 1000**exponent))
        assert text == "2"


def test_bits_and_bytes_share_numbers():
    for value in (0, 999, 1_500, 2_500_000, 7_000_000_000):
        bits_number = bits_per_second_si(value).split(" ")[0]
        bytes_number = bytes_si(value).split(" ")[0]
        assert bits_number == bytes_number


@pytest.mark.parametrize("func", [bits_per_second_si, bytes_si, bytes_iec])
def test_negative_values_raise(func):
    with pytest.raises(ValueError):
        func(-1)