"""Initial costing schema

Revision ID: 3b9e2f4c1a7d
Revises:
Create Date: 2026-10-18 09:12:41.508233

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3b9e2f4c1a7d'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'recipe',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.Column('preheat_time', sa.Float(), nullable=True),
        sa.Column('bake_time', sa.Float(), nullable=True),
        sa.Column('bake_temp', sa.Float(), nullable=True),
        sa.Column('mixer_time', sa.Float(), nullable=True),
        sa.Column('labor_time', sa.Float(), nullable=True),
        sa.Column('labor_rate', sa.Float(), nullable=True),
        sa.Column('packaging_cost', sa.Float(), nullable=True),
        sa.Column('yield_qty', sa.Float(), nullable=True),
        sa.Column('yield_unit', sa.String(length=50), nullable=True),
        sa.Column('gas_rate', sa.Float(), nullable=True),
        sa.Column('electric_rate', sa.Float(), nullable=True),
        sa.Column('total_cost', sa.Float(), nullable=True),
        sa.Column('cost_per_unit', sa.Float(), nullable=True),
        sa.Column('cost_per_unit_without_labor', sa.Float(), nullable=True),
        sa.Column('saved_at', sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    with op.batch_alter_table('recipe', schema=None) as batch_op:
        batch_op.create_index(batch_op.f('ix_recipe_name'), ['name'], unique=True)

    op.create_table(
        'recipe_ingredient',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('recipe_id', sa.Integer(), nullable=False),
        sa.Column('position', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.Column('quantity', sa.Float(), nullable=False),
        sa.Column('unit', sa.String(length=20), nullable=False),
        sa.Column('package_size', sa.Float(), nullable=True),
        sa.Column('package_unit', sa.String(length=20), nullable=True),
        sa.Column('package_price', sa.Float(), nullable=True),
        sa.ForeignKeyConstraint(['recipe_id'], ['recipe.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    with op.batch_alter_table('recipe_ingredient', schema=None) as batch_op:
        batch_op.create_index(batch_op.f('ix_recipe_ingredient_recipe_id'), ['recipe_id'], unique=False)

    op.create_table(
        'stovetop_process',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('recipe_id', sa.Integer(), nullable=False),
        sa.Column('position', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=True),
        sa.Column('stove_type', sa.String(length=20), nullable=False),
        sa.Column('burner_btu', sa.Float(), nullable=True),
        sa.Column('burner_wattage', sa.Float(), nullable=True),
        sa.Column('power_level', sa.Float(), nullable=True),
        sa.Column('duration', sa.Float(), nullable=True),
        sa.ForeignKeyConstraint(['recipe_id'], ['recipe.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    with op.batch_alter_table('stovetop_process', schema=None) as batch_op:
        batch_op.create_index(batch_op.f('ix_stovetop_process_recipe_id'), ['recipe_id'], unique=False)

    op.create_table(
        'ingredient',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.Column('package_size', sa.Float(), nullable=True),
        sa.Column('package_unit', sa.String(length=20), nullable=True),
        sa.Column('package_price', sa.Float(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    with op.batch_alter_table('ingredient', schema=None) as batch_op:
        batch_op.create_index(batch_op.f('ix_ingredient_name'), ['name'], unique=True)

    op.create_table(
        'settings',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('key', sa.String(length=50), nullable=False),
        sa.Column('value', sa.String(length=200), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('key'),
    )

    op.create_table(
        'packaging_option',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('cost', sa.Float(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )


def downgrade():
    op.drop_table('packaging_option')
    op.drop_table('settings')
    with op.batch_alter_table('ingredient', schema=None) as batch_op:
        batch_op.drop_index(batch_op.f('ix_ingredient_name'))
    op.drop_table('ingredient')
    with op.batch_alter_table('stovetop_process', schema=None) as batch_op:
        batch_op.drop_index(batch_op.f('ix_stovetop_process_recipe_id'))
    op.drop_table('stovetop_process')
    with op.batch_alter_table('recipe_ingredient', schema=None) as batch_op:
        batch_op.drop_index(batch_op.f('ix_recipe_ingredient_recipe_id'))
    op.drop_table('recipe_ingredient')
    with op.batch_alter_table('recipe', schema=None) as batch_op:
        batch_op.drop_index(batch_op.f('ix_recipe_name'))
    op.drop_table('recipe')
