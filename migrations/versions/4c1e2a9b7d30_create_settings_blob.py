"""create settings_blob

Revision ID: 4c1e2a9b7d30
Revises:
Create Date: 2026-10-18 10:12:03.118204

"""
from alembic import op
import sqlalchemy as sa

import json
from datetime import datetime, timezone

# revision identifiers, used by Alembic.
revision = "4c1e2a9b7d30"
down_revision = None
branch_labels = None
depends_on = None

SETTINGS_KEY = "habit-tracker"

# 旧バージョンの初期値. 最初の 1 件として入れておく
DEFAULT_BLOB = {
    "startOfWeek": "0",
    "monthFormat": "YYYY-MM",
    "displayHead": True,
    "enableHTML": False,
    "enableMarkdown": True,
    "Sunday": "SUN",
    "Monday": "MON",
    "Tuesday": "TUE",
    "Wednesday": "WED",
    "Thursday": "THU",
    "Friday": "FRI",
    "Saturday": "SAT",
}


def upgrade():
    settings_blob = op.create_table(
        "settings_blob",
        sa.Column("key", sa.String(length=80), primary_key=True),
        sa.Column("value", sa.Text(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    )

    op.bulk_insert(
        settings_blob,
        [{"key": SETTINGS_KEY, "value": json.dumps(DEFAULT_BLOB), "updated_at": datetime.now(timezone.utc)}],
    )


def downgrade():
    op.drop_table("settings_blob")
