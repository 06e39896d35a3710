from linebars.checksum import (
    code11_check_values,
    code93_check_values,
    code128_checksum,
    ean5_checksum,
    mod10_weighted,
    mod43,
    msi_mod10,
)


def digits(s):
    return [int(char) for char in s]


def test_ean13_check_digit():
    assert mod10_weighted(digits("400638133393")) == 1


def test_ean8_check_digit():
    assert mod10_weighted(digits("9638507")) == 4


def test_upca_check_digit():
    assert mod10_weighted(digits("04210000526")) == 4


def test_mod43():
    # C O D E 3 9
    assert mod43([12, 24, 13, 14, 3, 9]) == 32


def test_code93_check_values():
    # T E S T 9 3
    assert code93_check_values([29, 14, 28, 29, 9, 3]) == (41, 6)


def test_code93_weights_wrap_around():
    # C weights restart after 20, K weights after 15
    values = [1] * 25
    c, k = code93_check_values(values)
    assert c == (sum(range(1, 21)) + sum(range(1, 6))) % 47
    weights_k = [i % 15 + 1 for i in range(26)]
    assert k == sum(w * v for w, v in zip(weights_k, [c] + values)) % 47


def test_code11_single_check_value():
    # 1 2 3 - 4 5
    assert code11_check_values([1, 2, 3, 10, 4, 5]) == (5,)


def test_code11_two_check_values_for_long_content():
    assert len(code11_check_values(digits("1234567890"))) == 2


def test_msi_mod10():
    assert msi_mod10(digits("1234567")) == 4


def test_code128_checksum():
    # start B, P J J 1 2 3 C
    assert code128_checksum([104, 48, 42, 42, 17, 18, 19, 35]) == 55


def test_ean5_checksum():
    assert ean5_checksum(digits("52495")) == 1
