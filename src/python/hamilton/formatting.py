"""
===============================================================================
HAMILTON - Text Rendering
===============================================================================
Human-readable rendering of Hamilton values as "(a+bi+cj+dk)".

Only the four-component accessor ``cartesian()`` is consumed, and nothing
here is read back by the algebra. The output is not meant to be parsed.

Components are written like the ``%g`` verb with shortest round-trip digits:

    1.0        -> 1
    0.1        -> 0.1
    1234567.0  -> 1.234567e+06
    0.00001    -> 1e-05
    -0.0       -> -0
    inf, nan   -> +Inf, NaN
===============================================================================
"""

import math
from typing import Optional

import numpy as np

from hamilton.config import FormattingConfig


def format_component(x: float, exponent_threshold: int = 6) -> str:
    """
    Render a single float with shortest round-trip digits.

    Parameters
    ----------
    x : float
        Value to render.
    exponent_threshold : int, optional
        Scientific notation is used when the decimal exponent is below -4
        or at least this value.

    Returns
    -------
    str
        The rendered number. Infinities carry an explicit sign.
    """
    if math.isnan(x):
        return "NaN"
    if math.isinf(x):
        return "+Inf" if x > 0 else "-Inf"

    sci = np.format_float_scientific(x, unique=True, trim='-', exp_digits=2)
    exponent = int(sci.rsplit('e', 1)[1])
    if exponent < -4 or exponent >= exponent_threshold:
        return sci
    return np.format_float_positional(x, unique=True, trim='-')


def format_hamilton(z, config: Optional[FormattingConfig] = None) -> str:
    """
    Render a Hamilton value as "(a+bi+cj+dk)".

    The scalar component is written as is. Each of the other components
    carries an explicit sign token: its own "-" when the sign bit is set
    (negative zero included), "+Inf" for positive infinity, and otherwise a
    "+" prefix.

    Parameters
    ----------
    z : Hamilton
        Any object exposing ``cartesian()``.
    config : FormattingConfig, optional
        Basis symbols and exponent threshold. Defaults apply when omitted.

    Examples
    --------
    >>> format_hamilton(Hamilton(1, 2, 3, 4))
    '(1+2i+3j+4k)'
    >>> format_hamilton(Hamilton(0.5, -1, float('inf'), -0.0))
    '(0.5-1i+Infj-0k)'
    """
    config = config or FormattingConfig()
    threshold = config.exponent_threshold
    values = z.cartesian()

    parts = ["(", format_component(values[0], threshold), config.symbols[0]]
    for value, symbol in zip(values[1:], config.symbols[1:]):
        if math.copysign(1.0, value) < 0:
            token = format_component(value, threshold)
        elif math.isinf(value):
            token = "+Inf"
        else:
            token = "+" + format_component(value, threshold)
        parts.append(token)
        parts.append(symbol)
    parts.append(")")
    return "".join(parts)
