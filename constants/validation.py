"""
Validation Constants

Contains whitelist values and limits for validating user input.
"""

from .energy import DEFAULT_SETTINGS, STOVE_TYPES

# Settings keys that may be updated (whitelist)
VALID_SETTINGS_KEYS = frozenset(DEFAULT_SETTINGS)

# Settings stored as text rather than numbers
TEXT_SETTINGS_KEYS = frozenset({'stove_type'})

VALID_STOVE_TYPES = frozenset(STOVE_TYPES)

# Efficiencies are fractions of 1
EFFICIENCY_KEYS = frozenset({
    'gas_burner_efficiency',
    'electric_burner_efficiency',
    'induction_burner_efficiency',
})

# Maximum field lengths
MAX_LENGTHS = {
    'ingredient_name': 200,
    'recipe_name': 200,
    'unit': 20,
    'yield_unit': 50,
    'process_name': 100,
    'packaging_name': 100,
}

# Version tag written into exported data files
EXPORT_VERSION = '1.0'
