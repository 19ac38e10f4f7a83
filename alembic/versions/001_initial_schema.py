"""Initial schema - role, role_capability, app_option.

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""

from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import JSONB

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "role",
        sa.Column("id", sa.String(100), primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("position", sa.Integer(), nullable=False, server_default="0"),
    )

    op.create_table(
        "role_capability",
        sa.Column("role_id", sa.String(100), sa.ForeignKey("role.id", ondelete="CASCADE"), primary_key=True),
        sa.Column("capability", sa.String(191), primary_key=True),
        sa.Column("granted", sa.Boolean(), nullable=False, server_default=sa.true()),
    )
    op.create_index("ix_role_capability_capability", "role_capability", ["capability"])

    op.create_table(
        "app_option",
        sa.Column("name", sa.String(191), primary_key=True),
        sa.Column("value", JSONB(), nullable=False),
    )

    # Seed default roles
    op.execute("""
        INSERT INTO role (id, name, position) VALUES
        ('administrator', 'Administrator', 0),
        ('editor', 'Editor', 1),
        ('author', 'Author', 2),
        ('contributor', 'Contributor', 3),
        ('subscriber', 'Subscriber', 4)
    """)
    op.execute("""
        INSERT INTO role_capability (role_id, capability, granted)
        SELECT 'administrator', unnest(ARRAY[
            'read', 'edit_posts', 'delete_posts', 'publish_posts', 'upload_files',
            'edit_others_posts', 'manage_options', 'list_users', 'promote_users'
        ]), TRUE
    """)
    op.execute("""
        INSERT INTO role_capability (role_id, capability, granted)
        SELECT 'editor', unnest(ARRAY[
            'read', 'edit_posts', 'delete_posts', 'publish_posts', 'upload_files',
            'edit_others_posts'
        ]), TRUE
    """)
    op.execute("""
        INSERT INTO role_capability (role_id, capability, granted)
        SELECT 'author', unnest(ARRAY['read', 'edit_posts', 'delete_posts', 'publish_posts', 'upload_files']), TRUE
    """)
    op.execute("""
        INSERT INTO role_capability (role_id, capability, granted)
        SELECT 'contributor', unnest(ARRAY['read', 'edit_posts', 'delete_posts']), TRUE
    """)
    op.execute("""
        INSERT INTO role_capability (role_id, capability, granted)
        VALUES ('subscriber', 'read', TRUE)
    """)


def downgrade() -> None:
    op.drop_table("app_option")
    op.drop_index("ix_role_capability_capability", table_name="role_capability")
    op.drop_table("role_capability")
    op.drop_table("role")
