"""001: create catalog tables (channels, categories, videos, video_categories)

Revision ID: 001
Revises:
Create Date: 2026-10-19
"""
from typing import Sequence, Union
from alembic import op

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.execute("""
        CREATE OR REPLACE FUNCTION fn_touch_modified_date()
        RETURNS TRIGGER AS $$
        BEGIN
            NEW.modified_date = NOW();
            RETURN NEW;
        END;
        $$ LANGUAGE plpgsql;
    """)
    op.execute("""
        CREATE TABLE channels (
            channel_id      BIGSERIAL       PRIMARY KEY,
            member_id       BIGINT          NOT NULL UNIQUE,
            channel_name    VARCHAR(100)    NOT NULL,
            subscribers     INT             NOT NULL DEFAULT 0,
            CONSTRAINT ck_channels_subscribers_gte_0 CHECK (subscribers >= 0)
        );
    """)
    op.execute("""
        CREATE TABLE categories (
            category_id     BIGSERIAL       PRIMARY KEY,
            category_name   VARCHAR(64)     NOT NULL UNIQUE
        );
    """)
    op.execute("""
        CREATE TABLE videos (
            video_id        BIGSERIAL       PRIMARY KEY,
            video_name      VARCHAR(200)    NOT NULL,
            price           INT             NOT NULL DEFAULT 0,
            view            INT             NOT NULL DEFAULT 0,
            star            REAL            NOT NULL DEFAULT 0,
            description     TEXT,
            channel_id      BIGINT          NOT NULL REFERENCES channels (channel_id),
            created_date    TIMESTAMPTZ     NOT NULL DEFAULT NOW(),
            modified_date   TIMESTAMPTZ     NOT NULL DEFAULT NOW(),
            CONSTRAINT ck_videos_price_gte_0 CHECK (price >= 0),
            CONSTRAINT ck_videos_star_range  CHECK (star >= 0 AND star <= 10)
        );
    """)
    op.execute("""
        CREATE TABLE video_categories (
            video_id        BIGINT  NOT NULL REFERENCES videos (video_id) ON DELETE CASCADE,
            category_id     BIGINT  NOT NULL REFERENCES categories (category_id),
            PRIMARY KEY (video_id, category_id)
        );
    """)
    op.execute("CREATE INDEX idx_videos_created_date ON videos (created_date DESC, video_id DESC);")
    op.execute("CREATE INDEX idx_videos_channel ON videos (channel_id);")
    op.execute("""
        CREATE TRIGGER trg_videos_modified_date
            BEFORE UPDATE ON videos
            FOR EACH ROW EXECUTE FUNCTION fn_touch_modified_date();
    """)


def downgrade() -> None:
    op.execute("DROP TABLE IF EXISTS video_categories CASCADE;")
    op.execute("DROP TABLE IF EXISTS videos CASCADE;")
    op.execute("DROP TABLE IF EXISTS categories CASCADE;")
    op.execute("DROP TABLE IF EXISTS channels CASCADE;")
    op.execute("DROP FUNCTION IF EXISTS fn_touch_modified_date();")
