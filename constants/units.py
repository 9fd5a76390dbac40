"""
Unit Constants and Conversion Tables

Contains the weight and volume tables used by the conversion service.
Keys are lowercase unit names, values are factors to the category base unit.
"""

# Weight conversions to G
WEIGHT_TO_G = {
    'g': 1, 'gram': 1, 'grams': 1,
    'kg': 1000, 'kilogram': 1000, 'kilograms': 1000,
    'oz': 28.3495, 'ounce': 28.3495, 'ounces': 28.3495,
    'lb': 453.592, 'pound': 453.592, 'pounds': 453.592,
    # Count units, priced as an average egg (55g)
    'ct': 55, 'count': 55, 'piece': 55,
}

# Volume conversions to ML
VOLUME_TO_ML = {
    'ml': 1, 'milliliter': 1, 'milliliters': 1,
    'l': 1000, 'liter': 1000, 'liters': 1000,
    'tsp': 4.92892, 'teaspoon': 4.92892, 'teaspoons': 4.92892,
    'tbsp': 14.7868, 'tablespoon': 14.7868, 'tablespoons': 14.7868,
    'fl oz': 29.5735,
    'cup': 236.588, 'cups': 236.588,
    'pint': 473.176, 'pints': 473.176,
    'quart': 946.353, 'quarts': 946.353,
    'gal': 3785.41, 'gallon': 3785.41, 'gallons': 3785.41,
}

WEIGHT_UNITS = frozenset(WEIGHT_TO_G)
VOLUME_UNITS = frozenset(VOLUME_TO_ML)

# Category names returned by unit_category()
WEIGHT = 'weight'
VOLUME = 'volume'

# Common fractions for display (using precise values)
COMMON_FRACTIONS = {
    0.125: '1/8', 0.25: '1/4', 1/3: '1/3', 0.375: '3/8',
    0.5: '1/2', 0.625: '5/8', 2/3: '2/3', 0.75: '3/4', 0.875: '7/8'
}

# Unicode fraction characters mapping
UNICODE_FRACTIONS = {
    '\u00bd': 0.5,   # ½
    '\u2153': 1/3,   # ⅓
    '\u2154': 2/3,   # ⅔
    '\u00bc': 0.25,  # ¼
    '\u00be': 0.75,  # ¾
    '\u215b': 0.125,  # ⅛
    '\u215c': 0.375,  # ⅜
    '\u215d': 0.625,  # ⅝
    '\u215e': 0.875,  # ⅞
}
