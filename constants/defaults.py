"""
Default Catalog Data

Seed data for an empty database: the reusable ingredient database and one
example recipe.
"""

# (name, package_size, package_unit, package_price)
DEFAULT_INGREDIENTS = (
    ('Flour', 1, 'kg', 2.5),
    ('Kefir', 1, 'L', 3.0),
    ('Milk', 1, 'L', 1.5),
    ('Water', 1, 'L', 0.1),
    ('Eggs', 12, 'eggs', 4.0),
    ('Yeast', 100, 'g', 2.0),
    ('Salt', 1, 'kg', 1.0),
    ('Sugar', 1, 'kg', 1.2),
    ('Butter', 1, 'kg', 8.0),
    ('Seeds (sesame/poppy)', 1, 'kg', 12.0),
    ('Nuts (walnuts)', 1, 'kg', 15.0),
    ('Dried fruits (raisins)', 1, 'kg', 10.0),
    ('Chocolate chips', 1, 'kg', 18.0),
)

DEFAULT_RECIPES = (
    {
        'recipeName': 'French-Style Country Bread',
        'ingredients': [
            {'name': 'Flour', 'quantity': 645, 'unit': 'g', 'packageSize': 1, 'packageUnit': 'kg', 'packagePrice': 2.5},
            {'name': 'Water', 'quantity': 454, 'unit': 'g', 'packageSize': 1, 'packageUnit': 'L', 'packagePrice': 0.1},
            {'name': 'Salt', 'quantity': 2, 'unit': 'tsp', 'packageSize': 1, 'packageUnit': 'kg', 'packagePrice': 1.0},
            {'name': 'Yeast', 'quantity': 1, 'unit': 'tsp', 'packageSize': 100, 'packageUnit': 'g', 'packagePrice': 2.0},
            {'name': 'Sugar', 'quantity': 14, 'unit': 'g', 'packageSize': 1, 'packageUnit': 'kg', 'packagePrice': 1.2},
            {'name': 'Nuts (walnuts)', 'quantity': 20, 'unit': 'g', 'packageSize': 1, 'packageUnit': 'kg', 'packagePrice': 15.0},
            {'name': 'Seeds (sesame/poppy)', 'quantity': 20, 'unit': 'g', 'packageSize': 1, 'packageUnit': 'kg', 'packagePrice': 12.0},
        ],
        'preheatTime': 30,
        'bakeTime': 30,
        'bakeTemp': 425,
        'mixerTime': 15,
        'laborTime': 30,
        'laborRate': 20,
        'packagingCost': 0.2,
        'yieldQty': 1,
        'yieldUnit': 'loaf',
        'gasRate': 2.6,
        'electricRate': 0.18,
        'stovetopProcesses': [],
    },
)
