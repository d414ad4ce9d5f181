# Answer parsing and the correctness rule.

from __future__ import annotations

import math
import re
from typing import Any, Union

# Absolute, not relative: answers are bounded primary-school values.
ANSWER_TOLERANCE = 0.01

# Leading decimal literal, the way a lenient parseFloat reads "12.5 apples"
_LEADING_NUMBER_RE = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_INFINITY_RE = re.compile(r"^\s*([+-]?)Infinity")


def parse_answer(value: Any) -> float:
    """
    Coerce a learner answer to float. Never raises:
      - int/float pass through (bool is not a number here)
      - strings yield their leading numeric literal
      - anything else is NaN, which is never marked correct
    """
    if isinstance(value, bool):
        return math.nan
    if isinstance(value, (int, float)):
        try:
            return float(value)
        except OverflowError:
            # ints too large for a float
            return math.inf if value > 0 else -math.inf
    if not isinstance(value, str):
        return math.nan

    m = _LEADING_NUMBER_RE.match(value)
    if m:
        return float(m.group(1))
    m = _INFINITY_RE.match(value)
    if m:
        return -math.inf if m.group(1) == "-" else math.inf
    return math.nan


def is_correct(user_answer: float, correct_answer: float) -> bool:
    # NaN compares False, so unparseable answers fall out here
    return abs(user_answer - correct_answer) < ANSWER_TOLERANCE


def clean_number(x: float) -> Union[int, float]:
    """54.0 -> 54; 12.5 stays 12.5."""
    if math.isfinite(x) and abs(x - round(x)) < 1e-12:
        return int(round(x))
    return x


def num_to_clean_str(x: float) -> str:
    return str(clean_number(x))
