"""
Input Sanitization Module

Cleans free-text fields (recipe, ingredient, process and packaging names)
before they are stored or used as catalog keys.
"""

import re

from constants import MAX_LENGTHS

_CONTROL_CHARS = re.compile(r'[\x00-\x1f\x7f-\x9f]')


def sanitize_text(text, max_length=10000):
    """
    Sanitize text by stripping control characters and surrounding whitespace.

    Args:
        text: The text to sanitize (can be None)
        max_length: Maximum allowed length (default 10000)

    Returns:
        Sanitized string, truncated if necessary
    """
    if text is None:
        return ''

    if not isinstance(text, str):
        text = str(text)

    text = _CONTROL_CHARS.sub('', text).strip()

    if len(text) > max_length:
        text = text[:max_length]

    return text


def sanitize_recipe_name(name, max_length=None):
    """
    Sanitize a recipe name for use as the catalog key.

    Names are compared exactly on save, so internal whitespace is collapsed
    to keep "Rye  Bread" and "Rye Bread" from becoming two entries.

    Returns:
        Sanitized recipe name, or '' when nothing usable is left
    """
    if max_length is None:
        max_length = MAX_LENGTHS['recipe_name']

    name = sanitize_text(name, max_length=max_length * 2)

    # Collapse multiple spaces
    name = re.sub(r'\s+', ' ', name)

    if len(name) > max_length:
        name = name[:max_length].rstrip()

    return name


def sanitize_unit(unit, default=''):
    """Sanitize a unit string. Case is preserved, matching is case-insensitive."""
    unit = sanitize_text(unit, max_length=MAX_LENGTHS['unit'])
    return unit or default
