"""
Settings Models

Contains the key-value Settings rows and the packaging option list.
"""

from .base import db


class Settings(db.Model):
    """Key-value storage for application settings."""
    id = db.Column(db.Integer, primary_key=True)
    key = db.Column(db.String(50), unique=True, nullable=False)
    value = db.Column(db.String(200))


class PackagingOption(db.Model):
    """Named per-unit packaging cost (e.g. bread bag) offered when costing a recipe."""
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False, default='')
    cost = db.Column(db.Float, nullable=False, default=0.0)
