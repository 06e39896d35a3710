"""Check digit routines shared by the symbologies.

All functions take a sequence of integer character values (digits for the
numeric symbologies) and return the check value as an integer."""


def _weighted_sum(values, max_weight):
    # weights 1, 2, ..., max_weight, 1, 2, ... counted from the right
    checksum = 0
    for i, value in enumerate(reversed(values)):
        checksum += (i % max_weight + 1) * value
    return checksum


def mod10_weighted(digits, weights=(3, 1)):
    """Modulo 10 check digit of EAN and UPC codes.

    :param digits:      Sequence of integers 0-9, without check digit
    :param weights:     Weights applied alternately, starting from the
                        rightmost digit
    :return:            Check digit"""
    checksum = 0
    for i, digit in enumerate(reversed(digits)):
        checksum += weights[i % len(weights)] * digit
    return -checksum % 10


def mod43(values):
    """Code 39 modulo 43 check character value"""
    return sum(values) % 43


def code93_check_values(values):
    """Returns the C and K check character values of Code 93"""
    values = list(values)
    c = _weighted_sum(values, 20) % 47
    k = _weighted_sum(values + [c], 15) % 47
    return c, k


def code11_check_values(values):
    """Returns Code 11 check values: C, and K for content of 10 or more
characters"""
    values = list(values)
    c = _weighted_sum(values, 10) % 11
    if len(values) < 10:
        return (c,)
    k = _weighted_sum(values + [c], 9) % 11
    return c, k


def msi_mod10(digits):
    """MSI modulo 10 (Luhn) check digit"""
    checksum = 0
    for i, digit in enumerate(reversed(digits)):
        if i % 2 == 0:
            digit *= 2
            if digit > 9:
                digit -= 9
        checksum += digit
    return -checksum % 10


def code128_checksum(values):
    """Code 128 check character value.

    :param values:      Character values, start character included
    :return:            Value of the check character"""
    checksum = 0
    for i, n in enumerate(values):
        checksum += n * max([1, i])
    return checksum % 103


def ean5_checksum(digits):
    """EAN-5 supplement checksum, selects the parity pattern"""
    return (3 * sum(digits[0::2]) + 9 * sum(digits[1::2])) % 10
