"""initial_schema

Revision ID: 0001
Revises:
Create Date: 2026-10-17 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from fastapi_users_db_sqlalchemy.generics import GUID

# revision identifiers, used by Alembic.
revision: str = '0001'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


STARTER_TIPS = [
    ("dog", "exercise", "Daily walks",
     "Most dogs need at least 30 to 60 minutes of walking every day."),
    ("dog", "nutrition", "Consistent meal times",
     "Feed at the same times each day and keep fresh water available."),
    ("cat", "health", "Litter box hygiene",
     "Scoop the litter box daily; changes in use can signal health problems."),
    ("cat", "play", "Short play sessions",
     "Two or three 10 minute play sessions a day keep indoor cats active."),
    ("bird", "environment", "Cage placement",
     "Keep the cage away from drafts, kitchens and direct sunlight."),
    ("fish", "environment", "Water changes",
     "Replace 10 to 20 percent of the tank water every week."),
    ("general", "health", "Annual checkups",
     "Schedule a veterinary checkup at least once a year."),
    ("general", "grooming", "Regular grooming",
     "Brushing and nail trims prevent matting and discomfort."),
]


def upgrade() -> None:
    """Create all tables and seed the starter pet care tips."""
    op.create_table(
        'users',
        sa.Column('id', GUID(), primary_key=True, nullable=False),
        sa.Column('email', sa.String(320), nullable=False),
        sa.Column('hashed_password', sa.String(1024), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('is_superuser', sa.Boolean(), nullable=False),
        sa.Column('is_verified', sa.Boolean(), nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('avatar', sa.String(500), nullable=True),
        sa.Column('preferences', sa.JSON(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
    )
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    op.create_table(
        'pets',
        sa.Column('id', GUID(), primary_key=True, nullable=False),
        sa.Column('user_id', GUID(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('type', sa.String(20), nullable=False),
        sa.Column('breed', sa.String(255), nullable=True),
        sa.Column('age', sa.Integer(), nullable=True),
        sa.Column('weight', sa.Float(), nullable=True),
        sa.Column('avatar', sa.String(500), nullable=True),
        sa.Column('favorite_toys', sa.Text(), nullable=True),
        sa.Column('allergies', sa.Text(), nullable=True),
        sa.Column('special_needs', sa.Text(), nullable=True),
        sa.Column('adoption_date', sa.Date(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
    )
    op.create_index('ix_pets_user_id', 'pets', ['user_id'])
    op.create_index('ix_pets_created_at', 'pets', ['created_at'])

    op.create_table(
        'tasks',
        sa.Column('id', GUID(), primary_key=True, nullable=False),
        sa.Column('pet_id', GUID(), sa.ForeignKey('pets.id', ondelete='CASCADE'), nullable=False),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('type', sa.String(20), nullable=False),
        sa.Column('priority', sa.String(10), nullable=False),
        sa.Column('scheduled_time', sa.DateTime(), nullable=False),
        sa.Column('completed_at', sa.DateTime(), nullable=True),
        sa.Column('is_recurring', sa.Boolean(), nullable=False),
        sa.Column('recurrence_pattern', sa.String(10), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
    )
    op.create_index('ix_tasks_pet_id', 'tasks', ['pet_id'])
    op.create_index('ix_tasks_type', 'tasks', ['type'])
    op.create_index('ix_tasks_scheduled_time', 'tasks', ['scheduled_time'])

    op.create_table(
        'task_logs',
        sa.Column('id', GUID(), primary_key=True, nullable=False),
        sa.Column('task_id', GUID(), sa.ForeignKey('tasks.id', ondelete='CASCADE'), nullable=False),
        sa.Column('pet_id', GUID(), sa.ForeignKey('pets.id', ondelete='CASCADE'), nullable=False),
        sa.Column('user_id', GUID(), sa.ForeignKey('users.id', ondelete='SET NULL'), nullable=True),
        sa.Column('completed_at', sa.DateTime(), nullable=False),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('duration', sa.Integer(), nullable=True),
        sa.Column('quantity', sa.Float(), nullable=True),
        sa.Column('mood', sa.String(10), nullable=True),
    )
    op.create_index('ix_task_logs_task_id', 'task_logs', ['task_id'])
    op.create_index('ix_task_logs_pet_id', 'task_logs', ['pet_id'])
    op.create_index('ix_task_logs_completed_at', 'task_logs', ['completed_at'])

    op.create_table(
        'shared_access',
        sa.Column('id', GUID(), primary_key=True, nullable=False),
        sa.Column('pet_id', GUID(), sa.ForeignKey('pets.id', ondelete='CASCADE'), nullable=False),
        sa.Column('user_id', GUID(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('role', sa.String(20), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.UniqueConstraint('pet_id', 'user_id', name='uq_shared_access_pet_user'),
    )
    op.create_index('ix_shared_access_pet_id', 'shared_access', ['pet_id'])
    op.create_index('ix_shared_access_user_id', 'shared_access', ['user_id'])

    # Pet history records
    record_tables = {
        'pet_photos': [
            sa.Column('photo_url', sa.String(500), nullable=False),
            sa.Column('caption', sa.Text(), nullable=True),
        ],
        'pet_milestones': [
            sa.Column('title', sa.String(255), nullable=False),
            sa.Column('description', sa.Text(), nullable=True),
            sa.Column('milestone_date', sa.Date(), nullable=False),
            sa.Column('type', sa.String(50), nullable=False),
        ],
        'pet_weight_logs': [
            sa.Column('weight', sa.Float(), nullable=False),
            sa.Column('notes', sa.Text(), nullable=True),
        ],
        'pet_mood_logs': [
            sa.Column('mood', sa.String(10), nullable=False),
            sa.Column('notes', sa.Text(), nullable=True),
        ],
        'pet_achievements': [
            sa.Column('type', sa.String(50), nullable=False),
            sa.Column('title', sa.String(255), nullable=False),
            sa.Column('description', sa.Text(), nullable=True),
            sa.Column('icon', sa.String(100), nullable=True),
        ],
    }
    for table_name, columns in record_tables.items():
        op.create_table(
            table_name,
            sa.Column('id', GUID(), primary_key=True, nullable=False),
            sa.Column('pet_id', GUID(), sa.ForeignKey('pets.id', ondelete='CASCADE'), nullable=False),
            sa.Column('recorded_at', sa.DateTime(), nullable=False),
            *columns,
        )
        op.create_index(f'ix_{table_name}_pet_id', table_name, ['pet_id'])

    op.create_table(
        'task_attachments',
        sa.Column('id', GUID(), primary_key=True, nullable=False),
        sa.Column('task_id', GUID(), sa.ForeignKey('tasks.id', ondelete='CASCADE'), nullable=False),
        sa.Column('file_url', sa.String(500), nullable=False),
        sa.Column('file_name', sa.String(255), nullable=False),
        sa.Column('file_type', sa.String(100), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
    )
    op.create_index('ix_task_attachments_task_id', 'task_attachments', ['task_id'])

    op.create_table(
        'task_comments',
        sa.Column('id', GUID(), primary_key=True, nullable=False),
        sa.Column('task_id', GUID(), sa.ForeignKey('tasks.id', ondelete='CASCADE'), nullable=False),
        sa.Column('user_id', GUID(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('comment', sa.Text(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
    )
    op.create_index('ix_task_comments_task_id', 'task_comments', ['task_id'])

    op.create_table(
        'notifications',
        sa.Column('id', GUID(), primary_key=True, nullable=False),
        sa.Column('user_id', GUID(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('type', sa.String(20), nullable=False),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('message', sa.Text(), nullable=False),
        sa.Column('related_id', sa.String(64), nullable=True),
        sa.Column('is_read', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
    )
    op.create_index('ix_notifications_user_id', 'notifications', ['user_id'])
    op.create_index('ix_notifications_is_read', 'notifications', ['is_read'])

    tips = op.create_table(
        'pet_care_tips',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True, nullable=False),
        sa.Column('pet_type', sa.String(20), nullable=False),
        sa.Column('category', sa.String(50), nullable=False),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
    )
    op.create_index('ix_pet_care_tips_pet_type', 'pet_care_tips', ['pet_type'])
    op.create_index('ix_pet_care_tips_category', 'pet_care_tips', ['category'])

    op.bulk_insert(
        tips,
        [
            {"pet_type": pet_type, "category": category, "title": title, "content": content}
            for pet_type, category, title, content in STARTER_TIPS
        ],
    )


def downgrade() -> None:
    """Drop all tables, children first."""
    for table_name in (
        'pet_care_tips',
        'notifications',
        'task_comments',
        'task_attachments',
        'pet_achievements',
        'pet_mood_logs',
        'pet_weight_logs',
        'pet_milestones',
        'pet_photos',
        'shared_access',
        'task_logs',
        'tasks',
        'pets',
        'users',
    ):
        op.drop_table(table_name)
