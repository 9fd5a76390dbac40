# Utility modules for the batch cost calculator
from .logging import configure_logging, get_logger
from .sanitizer import sanitize_text, sanitize_recipe_name, sanitize_unit
