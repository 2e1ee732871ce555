"""
Number formatting for the ProCalc display
"""
import math
import re

import config

_TRAILING_ZEROS = re.compile(r'\.?0+$')


def round_smart(value, max_digits=config.MAX_SIGNIFICANT_DIGITS):
    """Render a number without binary float artifacts.

    Rounds to at most ``max_digits`` significant digits, then drops trailing
    zeros and a dangling decimal point: ``round_smart(0.1 + 0.2) == "0.3"``.
    """
    num = float(f"{float(value):.{min(max_digits, 15)}g}")
    if not math.isfinite(num):
        return str(value)

    fixed = _TRAILING_ZEROS.sub('', f"{num:.12f}")
    return "0" if fixed == "-0" else fixed
