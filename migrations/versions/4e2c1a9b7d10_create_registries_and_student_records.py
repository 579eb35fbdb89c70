"""create users, registries, registry entries and student records

Revision ID: 4e2c1a9b7d10
Revises:
Create Date: 2026-10-19 09:12:41.203511

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = '4e2c1a9b7d10'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'users',
        sa.Column('id', postgresql.UUID(as_uuid=True), primary_key=True, server_default=sa.text('gen_random_uuid()')),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('display_name', sa.String(), nullable=True),
        sa.Column('is_superadmin', sa.Boolean(), nullable=False, server_default=sa.text('false')),
        sa.Column('created_at', sa.TIMESTAMP(timezone=True), server_default=sa.text('now()'), nullable=True),
        sa.Column('updated_at', sa.TIMESTAMP(timezone=True), server_default=sa.text('now()'), nullable=True),
    )
    op.create_index(op.f('ix_users_email'), 'users', ['email'], unique=True)

    op.create_table(
        'registries',
        sa.Column('id', postgresql.UUID(as_uuid=True), primary_key=True, server_default=sa.text('gen_random_uuid()')),
        sa.Column('name', sa.String(length=255), nullable=True),
        sa.Column('created_by', postgresql.UUID(as_uuid=True), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('created_at', sa.TIMESTAMP(timezone=True), server_default=sa.text('now()'), nullable=True),
        sa.Column('updated_at', sa.TIMESTAMP(timezone=True), server_default=sa.text('now()'), nullable=True),
    )

    op.create_table(
        'student_records',
        sa.Column('id', postgresql.UUID(as_uuid=True), primary_key=True, server_default=sa.text('gen_random_uuid()')),
        sa.Column('owner_user_id', postgresql.UUID(as_uuid=True), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('nia', sa.BigInteger(), nullable=False),
        sa.Column('nombre', sa.Text(), nullable=False),
        sa.Column('curp', sa.String(length=64), nullable=False),
        sa.Column('telefono_tutor', sa.BigInteger(), nullable=False),
        sa.Column('email_tutor', sa.Text(), nullable=False),
        sa.Column('grado', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('grupo', sa.String(length=64), nullable=False, server_default='unassigned'),
        sa.Column('created_at', sa.TIMESTAMP(timezone=True), server_default=sa.text('now()'), nullable=True),
        sa.Column('updated_at', sa.TIMESTAMP(timezone=True), server_default=sa.text('now()'), nullable=True),
    )
    op.create_index('idx_student_records_owner_user_id', 'student_records', ['owner_user_id'], unique=False)
    op.create_index('idx_student_records_nia', 'student_records', ['nia'], unique=False)

    op.create_table(
        'registry_entries',
        sa.Column('registry_id', postgresql.UUID(as_uuid=True), sa.ForeignKey('registries.id'), nullable=False),
        sa.Column('nia', sa.BigInteger(), autoincrement=False, nullable=False),
        sa.Column('record_id', postgresql.UUID(as_uuid=True), sa.ForeignKey('student_records.id'), nullable=False),
        sa.Column('created_at', sa.TIMESTAMP(timezone=True), server_default=sa.text('now()'), nullable=True),
        sa.PrimaryKeyConstraint('registry_id', 'nia'),
    )
    op.create_index('idx_registry_entries_record_id', 'registry_entries', ['record_id'], unique=False)


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index('idx_registry_entries_record_id', table_name='registry_entries')
    op.drop_table('registry_entries')
    op.drop_index('idx_student_records_nia', table_name='student_records')
    op.drop_index('idx_student_records_owner_user_id', table_name='student_records')
    op.drop_table('student_records')
    op.drop_table('registries')
    op.drop_index(op.f('ix_users_email'), table_name='users')
    op.drop_table('users')
