"""
Settings Service

Reads and updates the account-wide settings record. Settings are stored as
key-value rows and handed to the cost engine as a CostSettings snapshot.
"""

from constants import (
    DEFAULT_PACKAGING_OPTIONS,
    DEFAULT_SETTINGS,
    EFFICIENCY_KEYS,
    MAX_LENGTHS,
    TEXT_SETTINGS_KEYS,
    VALID_SETTINGS_KEYS,
    VALID_STOVE_TYPES,
)
from models import db, PackagingOption as PackagingOptionRow, Settings
from utils.logging import get_logger
from utils.sanitizer import sanitize_text
from .errors import ValidationError
from .parsing import safe_float
from .records import CostSettings, PackagingOption

logger = get_logger(__name__)

# Accepted spellings for each settings key (camelCase from the UI/export format)
_KEY_ALIASES = {key: key for key in VALID_SETTINGS_KEYS}
_KEY_ALIASES.update({
    'laborRate': 'labor_rate',
    'gasRate': 'gas_rate',
    'electricRate': 'electric_rate',
    'stoveType': 'stove_type',
    'gasBurnerBTU': 'gas_burner_btu',
    'electricBurnerWattage': 'electric_burner_wattage',
    'inductionBurnerWattage': 'induction_burner_wattage',
    'gasBurnerEfficiency': 'gas_burner_efficiency',
    'electricBurnerEfficiency': 'electric_burner_efficiency',
    'inductionBurnerEfficiency': 'induction_burner_efficiency',
})


def _ensure_defaults():
    """Create any missing settings rows; seed packaging options on first use."""
    rows = {row.key: row for row in Settings.query.all()}
    first_use = not rows

    for key, default in DEFAULT_SETTINGS.items():
        if key not in rows:
            rows[key] = Settings(key=key, value=str(default))
            db.session.add(rows[key])

    if first_use:
        for name, cost in DEFAULT_PACKAGING_OPTIONS:
            db.session.add(PackagingOptionRow(name=name, cost=cost))
        logger.info("settings.created defaults=%s", len(DEFAULT_SETTINGS))

    if db.session.new:
        db.session.commit()
    return rows


def get_settings():
    """Return the current settings as a CostSettings snapshot."""
    rows = _ensure_defaults()
    values = {}
    for key, default in DEFAULT_SETTINGS.items():
        raw = rows[key].value
        if key in TEXT_SETTINGS_KEYS:
            values[key] = raw if raw in VALID_STOVE_TYPES else default
        else:
            values[key] = safe_float(raw, default=default, min_val=0.0)

    options = PackagingOptionRow.query.order_by(PackagingOptionRow.id).all()
    values['packaging_options'] = [
        PackagingOption(id=option.id, name=option.name, cost=option.cost) for option in options
    ]
    return CostSettings(**values)


def _validate_setting(key, value):
    if key == 'stove_type':
        stove_type = str(value or '').strip().lower()
        if stove_type not in VALID_STOVE_TYPES:
            raise ValidationError(f'Invalid stove type: {value}')
        return stove_type

    number = safe_float(value, default=None)
    if number is None:
        raise ValidationError(f'{key} must be a number')
    if number < 0:
        raise ValidationError(f'{key} cannot be negative')
    if key in EFFICIENCY_KEYS and not 0 < number <= 1:
        raise ValidationError(f'{key} must be between 0 and 1')
    return number


def _validate_packaging_options(options):
    """Turn a packaging option list into records; ids in it are ignored."""
    if not isinstance(options, list):
        raise ValidationError('packagingOptions must be a list')

    cleaned = []
    for option in options:
        if not isinstance(option, dict):
            raise ValidationError('Each packaging option must be an object')
        cost = safe_float(option.get('cost', 0.0), default=None)
        if cost is None or cost < 0:
            raise ValidationError('Packaging cost must be a non-negative number')
        cleaned.append(PackagingOption(
            name=sanitize_text(option.get('name', ''), max_length=MAX_LENGTHS['packaging_name']),
            cost=cost,
        ))
    return cleaned


def update_settings(changes):
    """
    Apply a partial settings update.

    Args:
        changes: dict of setting name (snake_case or camelCase) -> new value.
            A 'packagingOptions' list, when present, replaces all options.

    Returns:
        The updated CostSettings

    Raises:
        ValidationError: unknown key or invalid value; nothing is written
    """
    if not isinstance(changes, dict):
        raise ValidationError('Settings must be an object')
    changes = dict(changes)
    packaging = changes.pop('packagingOptions', changes.pop('packaging_options', None))

    validated = {}
    for name, value in changes.items():
        key = _KEY_ALIASES.get(name)
        if key is None:
            raise ValidationError(f'Unknown setting: {name}')
        validated[key] = _validate_setting(key, value)

    options = None if packaging is None else _validate_packaging_options(packaging)

    rows = _ensure_defaults()
    for key, value in validated.items():
        rows[key].value = str(value)

    if options is not None:
        PackagingOptionRow.query.delete()
        for option in options:
            db.session.add(PackagingOptionRow(name=option.name, cost=option.cost))

    db.session.commit()
    logger.info("settings.updated keys=%s", sorted(validated))
    return get_settings()


def add_packaging_option(name='', cost=0.0):
    option = PackagingOptionRow(
        name=sanitize_text(name, max_length=MAX_LENGTHS['packaging_name']),
        cost=safe_float(cost, min_val=0.0),
    )
    db.session.add(option)
    db.session.commit()
    logger.info("packaging_option.created id=%s name=%s", option.id, option.name)
    return option


def update_packaging_option(option, name=None, cost=None):
    if cost is not None:
        number = safe_float(cost, default=None)
        if number is None or number < 0:
            raise ValidationError('Packaging cost must be a non-negative number')
        option.cost = number
    if name is not None:
        option.name = sanitize_text(name, max_length=MAX_LENGTHS['packaging_name'])
    db.session.commit()
    return option


def delete_packaging_option(option):
    option_id = option.id
    db.session.delete(option)
    db.session.commit()
    logger.info("packaging_option.deleted id=%s", option_id)
