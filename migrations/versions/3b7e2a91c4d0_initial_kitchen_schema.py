"""Initial kitchen schema

Revision ID: 3b7e2a91c4d0
Revises:
Create Date: 2026-10-18 10:12:41.118204

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3b7e2a91c4d0'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table('item',
    sa.Column('id', sa.Integer(), nullable=False),
    sa.Column('name', sa.String(length=200), nullable=False),
    sa.Column('category', sa.String(length=20), nullable=False),
    sa.Column('location', sa.String(length=20), nullable=False),
    sa.Column('staple', sa.Boolean(), nullable=False),
    sa.Column('par_level', sa.Integer(), nullable=True),
    sa.Column('default_cost_cents', sa.Integer(), nullable=True),
    sa.Column('created_at', sa.DateTime(), nullable=False),
    sa.PrimaryKeyConstraint('id')
    )
    with op.batch_alter_table('item', schema=None) as batch_op:
        batch_op.create_index(batch_op.f('ix_item_name'), ['name'], unique=True)

    op.create_table('recipe',
    sa.Column('id', sa.Integer(), nullable=False),
    sa.Column('title', sa.String(length=200), nullable=False),
    sa.Column('servings', sa.Integer(), nullable=False),
    sa.Column('servings_max', sa.Integer(), nullable=True),
    sa.Column('hands_on_min', sa.Integer(), nullable=False),
    sa.Column('total_min', sa.Integer(), nullable=False),
    sa.Column('difficulty', sa.Integer(), nullable=False),
    sa.Column('equipment', sa.JSON(), nullable=False),
    sa.Column('tags', sa.JSON(), nullable=False),
    sa.Column('seasons', sa.JSON(), nullable=False),
    sa.Column('instructions', sa.Text(), nullable=False),
    sa.Column('source', sa.String(length=20), nullable=False),
    sa.Column('source_ref', sa.String(length=500), nullable=True),
    sa.Column('cuisine', sa.String(length=50), nullable=True),
    sa.Column('complexity', sa.String(length=20), nullable=False),
    sa.Column('created_at', sa.DateTime(), nullable=False),
    sa.PrimaryKeyConstraint('id')
    )
    with op.batch_alter_table('recipe', schema=None) as batch_op:
        batch_op.create_index(batch_op.f('ix_recipe_title'), ['title'], unique=True)
        batch_op.create_index(batch_op.f('ix_recipe_cuisine'), ['cuisine'], unique=False)

    op.create_table('technique',
    sa.Column('id', sa.Integer(), nullable=False),
    sa.Column('name', sa.String(length=100), nullable=False),
    sa.Column('description', sa.String(length=500), nullable=True),
    sa.Column('difficulty', sa.Integer(), nullable=False),
    sa.Column('comfort', sa.Integer(), nullable=False),
    sa.PrimaryKeyConstraint('id')
    )
    with op.batch_alter_table('technique', schema=None) as batch_op:
        batch_op.create_index(batch_op.f('ix_technique_name'), ['name'], unique=True)

    op.create_table('grocery_item',
    sa.Column('id', sa.Integer(), nullable=False),
    sa.Column('name', sa.String(length=200), nullable=False),
    sa.Column('channel', sa.String(length=20), nullable=False),
    sa.Column('reason', sa.String(length=300), nullable=True),
    sa.Column('checked', sa.Boolean(), nullable=False),
    sa.Column('source', sa.String(length=20), nullable=False),
    sa.Column('created_at', sa.DateTime(), nullable=False),
    sa.PrimaryKeyConstraint('id')
    )

    op.create_table('item_batch',
    sa.Column('id', sa.Integer(), nullable=False),
    sa.Column('item_id', sa.Integer(), nullable=False),
    sa.Column('quantity_text', sa.String(length=100), nullable=False),
    sa.Column('expires_on', sa.DateTime(), nullable=True),
    sa.Column('purchased_on', sa.DateTime(), nullable=True),
    sa.Column('cost_cents', sa.Integer(), nullable=True),
    sa.Column('created_at', sa.DateTime(), nullable=False),
    sa.ForeignKeyConstraint(['item_id'], ['item.id'], ondelete='CASCADE'),
    sa.PrimaryKeyConstraint('id')
    )
    with op.batch_alter_table('item_batch', schema=None) as batch_op:
        batch_op.create_index(batch_op.f('ix_item_batch_item_id'), ['item_id'], unique=False)

    op.create_table('recipe_ingredient',
    sa.Column('id', sa.Integer(), nullable=False),
    sa.Column('recipe_id', sa.Integer(), nullable=False),
    sa.Column('name', sa.String(length=200), nullable=False),
    sa.Column('required', sa.Boolean(), nullable=False),
    sa.Column('quantity_text', sa.String(length=100), nullable=True),
    sa.Column('preparation', sa.String(length=200), nullable=True),
    sa.Column('substitutions', sa.JSON(), nullable=False),
    sa.ForeignKeyConstraint(['recipe_id'], ['recipe.id'], ondelete='CASCADE'),
    sa.PrimaryKeyConstraint('id')
    )
    with op.batch_alter_table('recipe_ingredient', schema=None) as batch_op:
        batch_op.create_index(batch_op.f('ix_recipe_ingredient_recipe_id'), ['recipe_id'], unique=False)

    op.create_table('cook_log',
    sa.Column('id', sa.Integer(), nullable=False),
    sa.Column('recipe_id', sa.Integer(), nullable=False),
    sa.Column('rating', sa.Integer(), nullable=False),
    sa.Column('notes', sa.Text(), nullable=True),
    sa.Column('would_repeat', sa.Boolean(), nullable=False),
    sa.Column('served_to', sa.Integer(), nullable=True),
    sa.Column('cooked_on', sa.DateTime(), nullable=False),
    sa.ForeignKeyConstraint(['recipe_id'], ['recipe.id'], ondelete='CASCADE'),
    sa.PrimaryKeyConstraint('id')
    )
    with op.batch_alter_table('cook_log', schema=None) as batch_op:
        batch_op.create_index(batch_op.f('ix_cook_log_recipe_id'), ['recipe_id'], unique=False)
        batch_op.create_index(batch_op.f('ix_cook_log_cooked_on'), ['cooked_on'], unique=False)

    op.create_table('recipe_technique',
    sa.Column('id', sa.Integer(), nullable=False),
    sa.Column('recipe_id', sa.Integer(), nullable=False),
    sa.Column('technique_id', sa.Integer(), nullable=False),
    sa.ForeignKeyConstraint(['recipe_id'], ['recipe.id'], ondelete='CASCADE'),
    sa.ForeignKeyConstraint(['technique_id'], ['technique.id'], ondelete='CASCADE'),
    sa.PrimaryKeyConstraint('id'),
    sa.UniqueConstraint('recipe_id', 'technique_id', name='uq_recipe_technique')
    )
    with op.batch_alter_table('recipe_technique', schema=None) as batch_op:
        batch_op.create_index(batch_op.f('ix_recipe_technique_recipe_id'), ['recipe_id'], unique=False)
        batch_op.create_index(batch_op.f('ix_recipe_technique_technique_id'), ['technique_id'], unique=False)

    op.create_table('meal_plan',
    sa.Column('id', sa.Integer(), nullable=False),
    sa.Column('date', sa.Date(), nullable=False),
    sa.Column('slot', sa.String(length=20), nullable=False),
    sa.Column('recipe_id', sa.Integer(), nullable=True),
    sa.Column('notes', sa.String(length=500), nullable=True),
    sa.Column('servings', sa.Integer(), nullable=True),
    sa.ForeignKeyConstraint(['recipe_id'], ['recipe.id'], ondelete='SET NULL'),
    sa.PrimaryKeyConstraint('id'),
    sa.UniqueConstraint('date', 'slot', name='uq_mealplan_date_slot')
    )
    with op.batch_alter_table('meal_plan', schema=None) as batch_op:
        batch_op.create_index(batch_op.f('ix_meal_plan_date'), ['date'], unique=False)
        batch_op.create_index(batch_op.f('ix_meal_plan_recipe_id'), ['recipe_id'], unique=False)


def downgrade():
    op.drop_table('meal_plan')
    op.drop_table('recipe_technique')
    op.drop_table('cook_log')
    op.drop_table('recipe_ingredient')
    op.drop_table('item_batch')
    op.drop_table('grocery_item')
    op.drop_table('technique')
    op.drop_table('recipe')
    op.drop_table('item')
