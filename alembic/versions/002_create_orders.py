"""002: create orders and order_videos tables

Revision ID: 002
Revises: 001
Create Date: 2026-10-19
"""
from typing import Sequence, Union
from alembic import op

revision: str = "002"
down_revision: Union[str, None] = "001"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.execute("""
        CREATE TABLE orders (
            order_id                VARCHAR(36)     PRIMARY KEY,
            member_id               BIGINT          NOT NULL,
            payment_key             VARCHAR(200),
            total_pay_amount        INT             NOT NULL,
            remain_refund_amount    INT             NOT NULL DEFAULT 0,
            reward                  INT             NOT NULL DEFAULT 0,
            remain_refund_reward    INT             NOT NULL DEFAULT 0,
            complete_date           TIMESTAMPTZ,
            order_status            VARCHAR(20)     NOT NULL DEFAULT 'ORDERED',
            created_date            TIMESTAMPTZ     NOT NULL DEFAULT NOW(),
            modified_date           TIMESTAMPTZ     NOT NULL DEFAULT NOW(),
            CONSTRAINT ck_orders_total_gte_0   CHECK (total_pay_amount >= 0),
            CONSTRAINT ck_orders_remain_gte_0  CHECK (remain_refund_amount >= 0 AND remain_refund_reward >= 0),
            CONSTRAINT ck_orders_status CHECK (order_status IN ('ORDERED', 'CANCELED', 'COMPLETED'))
        );
    """)
    op.execute("""
        CREATE TABLE order_videos (
            order_video_id  VARCHAR(32)     PRIMARY KEY,
            order_id        VARCHAR(36)     NOT NULL REFERENCES orders (order_id) ON DELETE CASCADE,
            video_id        BIGINT          NOT NULL REFERENCES videos (video_id),
            price           INT             NOT NULL,
            order_status    VARCHAR(20)     NOT NULL DEFAULT 'ORDERED',
            created_date    TIMESTAMPTZ     NOT NULL DEFAULT NOW(),
            modified_date   TIMESTAMPTZ     NOT NULL DEFAULT NOW(),
            CONSTRAINT ck_order_videos_status CHECK (order_status IN ('ORDERED', 'CANCELED', 'COMPLETED'))
        );
    """)
    op.execute("CREATE INDEX idx_orders_member ON orders (member_id);")
    op.execute("CREATE INDEX idx_order_videos_order ON order_videos (order_id);")
    op.execute("CREATE INDEX idx_order_videos_video ON order_videos (video_id);")
    for table in ("orders", "order_videos"):
        op.execute(f"""
            CREATE TRIGGER trg_{table}_modified_date
                BEFORE UPDATE ON {table}
                FOR EACH ROW EXECUTE FUNCTION fn_touch_modified_date();
        """)


def downgrade() -> None:
    op.execute("DROP TABLE IF EXISTS order_videos CASCADE;")
    op.execute("DROP TABLE IF EXISTS orders CASCADE;")
