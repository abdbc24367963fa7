"""
Meal Plan Model

Contains the MealPlan model: one entry per calendar date and meal slot.
"""

from .base import db, isoformat


class MealPlan(db.Model):
    """Planned meal for a date/slot. The recipe is optional (notes-only entries)."""
    id = db.Column(db.Integer, primary_key=True)
    date = db.Column(db.Date, nullable=False, index=True)
    slot = db.Column(db.String(20), nullable=False)  # 'breakfast', 'lunch', 'dinner'
    recipe_id = db.Column(db.Integer, db.ForeignKey('recipe.id', ondelete='SET NULL'), nullable=True, index=True)
    notes = db.Column(db.String(500), nullable=True)
    servings = db.Column(db.Integer, nullable=True)
    recipe = db.relationship('Recipe')

    __table_args__ = (db.UniqueConstraint('date', 'slot', name='uq_mealplan_date_slot'),)

    def to_dict(self):
        return {
            'id': self.id,
            'date': isoformat(self.date),
            'slot': self.slot,
            'recipeId': self.recipe_id,
            'recipe': self.recipe.summary() if self.recipe else None,
            'notes': self.notes,
            'servings': self.servings,
        }
