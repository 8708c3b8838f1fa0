"""refresh project search_vector on client rename

Revision ID: c2d9e4f1a6b3
Revises: 8b4e6d0c2a17
Create Date: 2026-10-19

A project's search_vector embeds its client's name. Renaming the user
re-fires the projects BEFORE UPDATE trigger for every project they own.
"""

from typing import Sequence, Union

from alembic import op

revision: str = "c2d9e4f1a6b3"
down_revision: Union[str, Sequence[str], None] = "8b4e6d0c2a17"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.execute(
        """
        CREATE OR REPLACE FUNCTION users_projects_refresh_fn()
        RETURNS trigger AS $$
        BEGIN
          UPDATE projects SET search_vector = search_vector
          WHERE client_id = NEW.id;
          RETURN NULL;
        END;
        $$ LANGUAGE plpgsql;
        """
    )
    op.execute(
        """
        CREATE TRIGGER users_projects_refresh_trigger
        AFTER UPDATE OF name ON users
        FOR EACH ROW
        WHEN (OLD.name IS DISTINCT FROM NEW.name)
        EXECUTE FUNCTION users_projects_refresh_fn()
        """
    )


def downgrade() -> None:
    op.execute("DROP TRIGGER IF EXISTS users_projects_refresh_trigger ON users")
    op.execute("DROP FUNCTION IF EXISTS users_projects_refresh_fn()")
