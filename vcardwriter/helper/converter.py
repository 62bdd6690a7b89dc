from __future__ import annotations

import math


def to_list(string_or_list) -> list:
    if string_or_list is None:
        return []
    return [string_or_list] if isinstance(string_or_list, str) else list(string_or_list)


def number_to_string(number: float | int) -> str:
    """
    Shortest text that reads back as the same number.

    Magnitudes from 1e-6 up to 1e21 are written positionally, integral floats
    lose their trailing ".0". Outside that range the exponent is written with
    an explicit sign and no zero padding, e.g. 1e+21 and 1.5e-7.
    """
    if isinstance(number, int):
        return str(number)
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "Infinity" if number > 0 else "-Infinity"
    if number.is_integer() and abs(number) < 1e21:
        return str(int(number))
    mantissa, _, exponent = repr(number).partition("e")
    if not exponent:
        return mantissa
    exponent = int(exponent)
    if -7 < exponent < 0:
        # repr switches to exponents below 1e-4, positional goes on to 1e-6
        sign = "-" if mantissa.startswith("-") else ""
        digits = mantissa.lstrip("-").replace(".", "")
        return f"{sign}0.{'0' * (-exponent - 1)}{digits}"
    return f"{mantissa}e{'+' if exponent > 0 else '-'}{abs(exponent)}"
