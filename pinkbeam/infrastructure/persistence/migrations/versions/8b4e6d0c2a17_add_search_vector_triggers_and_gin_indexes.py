"""add search_vector triggers and GIN indexes

Revision ID: 8b4e6d0c2a17
Revises: 3f1a9c2d7e01
Create Date: 2026-03-09

search_vector holds the space-joined display fields of each row (the same
text the batch indexer writes). Triggers keep it current on insert/update;
GIN expression indexes serve the to_tsvector('english', ...) match.
"""

from typing import Sequence, Union

from alembic import op

revision: str = "8b4e6d0c2a17"
down_revision: Union[str, Sequence[str], None] = "3f1a9c2d7e01"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

# table -> SQL expression over NEW producing the joined text
VECTOR_SOURCES: dict[str, str] = {
    "projects": (
        "NEW.title, NEW.description, "
        "(SELECT u.name FROM users u WHERE u.id = NEW.client_id)"
    ),
    "users": "NEW.name, NEW.email, NEW.company, NEW.phone, NEW.industry",
    "support_tickets": "NEW.title, NEW.description",
    "blog_posts": (
        "NEW.title, NEW.excerpt, NEW.content, NEW.meta_title, NEW.meta_desc"
    ),
}


def upgrade() -> None:
    for table, fields in VECTOR_SOURCES.items():
        op.execute(
            f"""
            CREATE OR REPLACE FUNCTION {table}_search_vector_fn()
            RETURNS trigger AS $$
            BEGIN
              NEW.search_vector := btrim(regexp_replace(
                concat_ws(' ', {fields}), '\\s+', ' ', 'g'));
              RETURN NEW;
            END;
            $$ LANGUAGE plpgsql;
            """
        )
        op.execute(
            f"""
            CREATE TRIGGER {table}_search_vector_trigger
            BEFORE INSERT OR UPDATE ON {table}
            FOR EACH ROW EXECUTE FUNCTION {table}_search_vector_fn()
            """
        )
        op.execute(
            f"""
            CREATE INDEX ix_{table}_search_vector ON {table}
            USING gin (to_tsvector('english', COALESCE(search_vector, '')))
            """
        )


def downgrade() -> None:
    for table in reversed(list(VECTOR_SOURCES)):
        op.execute(f"DROP INDEX IF EXISTS ix_{table}_search_vector")
        op.execute(
            f"DROP TRIGGER IF EXISTS {table}_search_vector_trigger ON {table}"
        )
        op.execute(f"DROP FUNCTION IF EXISTS {table}_search_vector_fn()")
