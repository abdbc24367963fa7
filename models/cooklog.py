"""
Cook Log Model

One row per time a recipe was cooked. Logs are history: they are created,
listed and deleted with their recipe, never edited.
"""

from .base import db, isoformat, now


class CookLog(db.Model):
    id = db.Column(db.Integer, primary_key=True)
    recipe_id = db.Column(db.Integer, db.ForeignKey('recipe.id', ondelete='CASCADE'), nullable=False, index=True)
    rating = db.Column(db.Integer, nullable=False)  # 1-5
    notes = db.Column(db.Text, nullable=True)
    would_repeat = db.Column(db.Boolean, default=True, nullable=False)
    served_to = db.Column(db.Integer, nullable=True)
    cooked_on = db.Column(db.DateTime, default=now, nullable=False, index=True)

    def to_dict(self, with_recipe=False):
        data = {
            'id': self.id,
            'recipeId': self.recipe_id,
            'rating': self.rating,
            'notes': self.notes,
            'wouldRepeat': self.would_repeat,
            'servedTo': self.served_to,
            'cookedOn': isoformat(self.cooked_on),
        }
        if with_recipe and self.recipe is not None:
            data['recipe'] = self.recipe.summary()
        return data
