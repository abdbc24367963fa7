"""
Seed Data

Starter techniques, pantry staples and sample recipes loaded by `flask seed`.
Names are already normalized.
"""

SEED_TECHNIQUES = [
    {'name': 'sautéing', 'description': 'Cooking quickly in a little fat over high heat', 'difficulty': 1},
    {'name': 'braising', 'description': 'Slow cooking partly submerged in liquid', 'difficulty': 3},
    {'name': 'roasting', 'description': 'Dry-heat cooking in the oven', 'difficulty': 2},
    {'name': 'emulsification', 'description': 'Binding fat and water into a stable sauce', 'difficulty': 4},
    {'name': 'deglazing', 'description': 'Lifting browned bits from the pan with liquid', 'difficulty': 2},
    {'name': 'knife skills', 'description': 'Fast, safe and even cutting', 'difficulty': 2},
    {'name': 'blanching', 'description': 'Brief boil followed by an ice bath', 'difficulty': 2},
    {'name': 'reduction', 'description': 'Simmering to concentrate flavor', 'difficulty': 2},
    {'name': 'tempering', 'description': 'Raising the temperature of delicate ingredients gradually', 'difficulty': 3},
    {'name': 'mise en place', 'description': 'Prepping everything before the heat goes on', 'difficulty': 1},
]

# (name, category, location, staple)
SEED_ITEMS = [
    ('garlic', 'PRODUCE', 'PANTRY', True),
    ('onion', 'PRODUCE', 'PANTRY', True),
    ('canned chickpeas', 'PANTRY', 'PANTRY', True),
    ('canned crushed tomatoes', 'PANTRY', 'PANTRY', True),
    ('soy sauce', 'CONDIMENT', 'PANTRY', True),
    ('olive oil', 'PANTRY', 'PANTRY', True),
    ('chicken thighs', 'MEAT', 'FREEZER', False),
    ('salmon fillet', 'MEAT', 'FREEZER', False),
    ('ground beef', 'MEAT', 'FREEZER', False),
    ('black pepper', 'SPICE', 'PANTRY', True),
    ('cumin', 'SPICE', 'PANTRY', True),
    ('paprika', 'SPICE', 'PANTRY', True),
    ('oregano', 'SPICE', 'PANTRY', True),
    ('butter', 'DAIRY', 'FRIDGE', True),
    ('eggs', 'DAIRY', 'FRIDGE', True),
    ('parmesan', 'DAIRY', 'FRIDGE', False),
    ('rice', 'PANTRY', 'PANTRY', True),
    ('pasta', 'PANTRY', 'PANTRY', True),
    ('chicken broth', 'PANTRY', 'PANTRY', True),
    ('lemon', 'PRODUCE', 'FRIDGE', False),
    ('dijon mustard', 'CONDIMENT', 'FRIDGE', True),
    ('honey', 'PANTRY', 'PANTRY', True),
]

SEED_RECIPES = [
    {
        'title': 'Honey Dijon Sheet Pan Salmon',
        'servings': 2,
        'hands_on_min': 10,
        'total_min': 25,
        'difficulty': 1,
        'source': 'PERSONAL',
        'cuisine': 'American',
        'complexity': 'FAMILIAR',
        'equipment': ['OVEN'],
        'tags': ['WEEKNIGHT', 'HEALTHY', 'QUICK'],
        'seasons': [],
        'instructions': (
            'Heat the oven to 425F and line a sheet pan.\n\n'
            'Whisk soy sauce, mustard, honey and melted butter.\n\n'
            'Brush the glaze over the salmon and roast 12-14 minutes.\n\n'
            'Finish with lemon.'
        ),
        'ingredients': [
            {'name': 'salmon fillet', 'required': True, 'quantity_text': '1 lb'},
            {'name': 'soy sauce', 'required': True, 'quantity_text': '1 tbsp'},
            {'name': 'dijon mustard', 'required': True, 'quantity_text': '1 tbsp',
             'substitutions': ['whole grain mustard']},
            {'name': 'honey', 'required': True, 'quantity_text': '1 tbsp'},
            {'name': 'butter', 'required': True, 'quantity_text': '1 tbsp', 'preparation': 'melted',
             'substitutions': ['olive oil']},
            {'name': 'black pepper', 'required': False, 'quantity_text': 'to taste'},
            {'name': 'lemon', 'required': False, 'quantity_text': '1/2'},
        ],
        'techniques': ['roasting'],
    },
    {
        'title': 'Aglio e Olio',
        'servings': 2,
        'hands_on_min': 15,
        'total_min': 20,
        'difficulty': 2,
        'source': 'FAMILY',
        'cuisine': 'Italian',
        'complexity': 'FAMILIAR',
        'equipment': ['STOVETOP'],
        'tags': ['WEEKNIGHT', 'VEGETARIAN', 'QUICK', 'PANTRY_MEAL'],
        'seasons': [],
        'instructions': (
            'Boil the pasta in salted water, saving a cup of the water.\n\n'
            'Warm olive oil and gently cook sliced garlic until golden.\n\n'
            'Toss pasta, oil and splashes of pasta water until glossy. Top with parsley and parmesan.'
        ),
        'ingredients': [
            {'name': 'pasta', 'required': True, 'quantity_text': '8 oz'},
            {'name': 'olive oil', 'required': True, 'quantity_text': '1/3 cup'},
            {'name': 'garlic', 'required': True, 'quantity_text': '6 cloves', 'preparation': 'thinly sliced'},
            {'name': 'red pepper flakes', 'required': False, 'quantity_text': '1/2 tsp'},
            {'name': 'parsley', 'required': False, 'quantity_text': '1/4 cup'},
            {'name': 'parmesan', 'required': False, 'quantity_text': 'for serving'},
        ],
        'techniques': ['sautéing'],
    },
]
