"""
Parsing Service

Functions for coercing user-supplied numbers and fractions. Every helper
falls back to a default instead of raising, so a malformed field never
blocks a cost computation.
"""

import math
import re
from constants import UNICODE_FRACTIONS, COMMON_FRACTIONS


def float_to_fraction(value):
    """Convert float to fraction string for display."""
    if value is None or value == 0:
        return '0'
    # Check if it's a whole number
    if value == int(value):
        return str(int(value))
    # Split into whole and decimal parts
    whole = int(value)
    decimal = value - whole
    # Check common fractions (with tolerance)
    for dec, frac in COMMON_FRACTIONS.items():
        if abs(decimal - dec) < 0.02:
            if whole > 0:
                return f"{whole} {frac}"
            return frac
    return f"{value:.2f}".rstrip('0').rstrip('.')


def normalize_fractions(text):
    """Replace Unicode fraction characters with decimal equivalents."""
    # First, normalize all whitespace (including non-breaking spaces) to regular spaces
    text = re.sub(r'[\s\u00a0\u2000-\u200b]+', ' ', text)

    for char, value in UNICODE_FRACTIONS.items():
        if char in text:
            # Mixed fraction like "1½" or "1 ½"
            pattern = r'(\d+)\s*' + re.escape(char)
            match = re.search(pattern, text)
            if match:
                whole = float(match.group(1))
                text = re.sub(pattern, str(whole + value), text)
            else:
                text = text.replace(char, str(value))
    return text


def safe_float(value, default=0.0, min_val=None, max_val=None):
    """Safely parse a float value with optional bounds."""
    if value is None or value == '' or isinstance(value, bool):
        return default
    try:
        result = float(value)
    except (ValueError, TypeError):
        return default
    if not math.isfinite(result):
        return default
    if min_val is not None:
        result = max(min_val, result)
    if max_val is not None:
        result = min(max_val, result)
    return result


def parse_fraction(value, default=0.0, min_val=None):
    """
    Parse a quantity like '1 1/2', '3/4', '1½' or '0.5' into a float.
    Numbers pass straight through.
    """
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        total = safe_float(value, default=default)
    elif not value:
        return default
    else:
        text = normalize_fractions(str(value)).strip()
        total = 0.0
        try:
            total = float(text)
        except ValueError:
            for part in text.split():
                if '/' in part:
                    try:
                        num, den = part.split('/')
                        total += float(num) / float(den)
                    except (ValueError, ZeroDivisionError):
                        pass
                else:
                    try:
                        total += float(part)
                    except ValueError:
                        pass
        if not math.isfinite(total):
            total = default

    if total < 0:
        total = default
    if min_val is not None and total < min_val:
        total = min_val

    return total
