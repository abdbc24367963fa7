"""
Models Package

Exports all database models and the db instance for use throughout the application.
"""

from .base import db

from .inventory import Item, ItemBatch
from .recipe import Recipe, RecipeIngredient
from .technique import Technique, RecipeTechnique, COMFORT_LABELS
from .cooklog import CookLog
from .mealplan import MealPlan
from .grocery import GroceryItem

__all__ = [
    'db',
    'Item',
    'ItemBatch',
    'Recipe',
    'RecipeIngredient',
    'Technique',
    'RecipeTechnique',
    'COMFORT_LABELS',
    'CookLog',
    'MealPlan',
    'GroceryItem',
]
