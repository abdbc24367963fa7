"""
Technique Models

Cooking techniques with a self-assessed comfort level, and the join
table linking them to recipes.
"""

from .base import db

# Comfort levels: 0 untried, 1 learning, 2 comfortable, 3 confident
COMFORT_LABELS = ('untried', 'learning', 'comfortable', 'confident')


class Technique(db.Model):
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), unique=True, nullable=False, index=True)  # normalized
    description = db.Column(db.String(500), nullable=True)
    difficulty = db.Column(db.Integer, default=2, nullable=False)  # 1-5
    comfort = db.Column(db.Integer, default=0, nullable=False)  # 0-3

    def to_dict(self, with_recipes=False):
        data = {
            'id': self.id,
            'name': self.name,
            'description': self.description,
            'difficulty': self.difficulty,
            'comfort': self.comfort,
            'comfortLabel': COMFORT_LABELS[self.comfort],
        }
        if with_recipes:
            data['recipes'] = [rt.recipe.summary() for rt in self.recipes if rt.recipe]
        return data


class RecipeTechnique(db.Model):
    """Join table linking recipes to the techniques they exercise."""
    id = db.Column(db.Integer, primary_key=True)
    recipe_id = db.Column(db.Integer, db.ForeignKey('recipe.id', ondelete='CASCADE'), nullable=False, index=True)
    technique_id = db.Column(db.Integer, db.ForeignKey('technique.id', ondelete='CASCADE'), nullable=False, index=True)
    technique = db.relationship('Technique', backref=db.backref('recipes', lazy=True))

    __table_args__ = (db.UniqueConstraint('recipe_id', 'technique_id', name='uq_recipe_technique'),)
