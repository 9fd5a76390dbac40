"""
Recipe Models

Contains the Recipe catalog entry and its ordered ingredient lines and
stovetop processes. Cost totals are a snapshot taken at save time.
"""

from datetime import datetime, timezone

from .base import db


def _utcnow():
    return datetime.now(timezone.utc)


class Recipe(db.Model):
    """Saved recipe with its equipment times, rates and cost snapshot."""
    id = db.Column(db.Integer, primary_key=True)
    # Catalog key: saving under an existing name overwrites that entry
    name = db.Column(db.String(200), unique=True, nullable=False, index=True)

    preheat_time = db.Column(db.Float, default=0.0)     # minutes
    bake_time = db.Column(db.Float, default=0.0)        # minutes
    bake_temp = db.Column(db.Float, default=0.0)        # informational only
    mixer_time = db.Column(db.Float, default=0.0)       # minutes
    labor_time = db.Column(db.Float, default=0.0)       # minutes
    labor_rate = db.Column(db.Float, default=0.0)       # $/hr
    packaging_cost = db.Column(db.Float, default=0.0)   # $ per yield unit
    yield_qty = db.Column(db.Float, default=1.0)
    yield_unit = db.Column(db.String(50), default='unit')
    gas_rate = db.Column(db.Float, default=0.0)         # $/therm
    electric_rate = db.Column(db.Float, default=0.0)    # $/kWh

    # Snapshot computed by the cost engine on save, never recomputed on load
    total_cost = db.Column(db.Float, nullable=True)
    cost_per_unit = db.Column(db.Float, nullable=True)
    cost_per_unit_without_labor = db.Column(db.Float, nullable=True)
    saved_at = db.Column(db.DateTime(timezone=True), default=_utcnow)

    ingredients = db.relationship(
        'RecipeIngredient', backref='recipe', lazy=True,
        cascade='all, delete-orphan', order_by='RecipeIngredient.position',
    )
    stovetop_processes = db.relationship(
        'StovetopProcess', backref='recipe', lazy=True,
        cascade='all, delete-orphan', order_by='StovetopProcess.position',
    )


class RecipeIngredient(db.Model):
    """One ingredient line: usage quantity plus the package it is bought in."""
    id = db.Column(db.Integer, primary_key=True)
    recipe_id = db.Column(db.Integer, db.ForeignKey('recipe.id', ondelete='CASCADE'), nullable=False, index=True)
    position = db.Column(db.Integer, nullable=False, default=0)
    name = db.Column(db.String(200), nullable=False, default='')
    quantity = db.Column(db.Float, nullable=False, default=0.0)
    unit = db.Column(db.String(20), nullable=False, default='g')
    package_size = db.Column(db.Float, default=0.0)
    package_unit = db.Column(db.String(20), default='g')
    package_price = db.Column(db.Float, default=0.0)


class StovetopProcess(db.Model):
    """Stovetop step (simmer, boil, ...) with optional burner rating overrides."""
    id = db.Column(db.Integer, primary_key=True)
    recipe_id = db.Column(db.Integer, db.ForeignKey('recipe.id', ondelete='CASCADE'), nullable=False, index=True)
    position = db.Column(db.Integer, nullable=False, default=0)
    name = db.Column(db.String(100), default='')
    stove_type = db.Column(db.String(20), nullable=False, default='gas')
    burner_btu = db.Column(db.Float, nullable=True)
    burner_wattage = db.Column(db.Float, nullable=True)
    power_level = db.Column(db.Float, default=70.0)     # 0-100
    duration = db.Column(db.Float, default=0.0)         # minutes
