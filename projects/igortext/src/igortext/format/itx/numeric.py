"""Numeric text formatting for ITX data blocks and scale directives."""

import math
from typing import SupportsFloat

from igortext.format.itx.constants import INF_TEXT, NAN_TEXT


def format_number(value: SupportsFloat) -> str:
    """Render a value as the shortest decimal text that round-trips as a double.

    Integral values lose their trailing ``.0`` so ``1.0`` is written as ``1``.
    NaN and infinities use the spellings Igor reads back.

    Args:
        value: Anything ``float()`` accepts, including numpy scalars.

    Returns:
        The decimal text, always with ``.`` as the decimal point.
    """
    number = float(value)

    if math.isnan(number):
        return NAN_TEXT
    if math.isinf(number):
        return INF_TEXT if number > 0 else f"-{INF_TEXT}"

    text = repr(number)
    if text.endswith(".0"):
        text = text[:-2]
    return text
