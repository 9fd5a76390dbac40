"""
Ingredient Model

Reusable ingredient database used to prefill package fields on recipe lines.
"""

from .base import db


class Ingredient(db.Model):
    """Purchase package for an ingredient: size, unit and price."""
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(200), unique=True, nullable=False, index=True)
    package_size = db.Column(db.Float, default=0.0)
    package_unit = db.Column(db.String(20), default='g')
    package_price = db.Column(db.Float, default=0.0)
