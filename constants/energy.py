"""
Energy Constants

Fixed equipment ratings and the built-in settings defaults used by the
cost engine.
"""

# Generic gas oven, not user-configurable
OVEN_BTU_PER_HOUR = 25000
OVEN_EFFICIENCY = 0.65

# Average stand mixer
MIXER_WATTAGE = 300

BTU_PER_THERM = 100000
WATTS_PER_KW = 1000

# Stove technologies
GAS = 'gas'
ELECTRIC = 'electric'
INDUCTION = 'induction'
STOVE_TYPES = (GAS, ELECTRIC, INDUCTION)

# Default power level for a new stovetop process (percent)
DEFAULT_POWER_LEVEL = 70

# Built-in settings, used on first run and for any missing key
DEFAULT_SETTINGS = {
    'labor_rate': 20.0,          # $/hr
    'gas_rate': 2.6,             # $/therm
    'electric_rate': 0.18,       # $/kWh
    'stove_type': GAS,
    'gas_burner_btu': 12000.0,
    'electric_burner_wattage': 1500.0,
    'induction_burner_wattage': 1800.0,
    'gas_burner_efficiency': 0.4,
    'electric_burner_efficiency': 0.75,
    'induction_burner_efficiency': 0.85,
}

DEFAULT_PACKAGING_OPTIONS = (
    ('Cake board and box', 2.0),
    ('Bread bag', 0.2),
)
