from __future__ import annotations

import os

# app.py は import 時に DB を設定するので, その前にテスト用の値を入れておく
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("SECRET_KEY", "test")

import pytest

from habit_calendar import Entry, Settings


def make_table(headers, rows, successful=True):
    return {
        "successful": successful,
        "value": {"type": "table", "headers": list(headers), "values": [list(r) for r in rows]},
    }


class RecordingMarkdownRenderer:
    def __init__(self, output="<em>md</em>"):
        self.output = output
        self.calls = []

    def render(self, content, source_path=""):
        self.calls.append((content, source_path))
        return self.output


class BrokenMarkdownRenderer:
    def render(self, content, source_path=""):
        raise RuntimeError("boom")


# -------------------------
# Fixtures
# -------------------------
@pytest.fixture
def settings() -> Settings:
    return Settings()


@pytest.fixture
def feb_entries() -> list[Entry]:
    return [
        Entry(date="2024-02-10", content="ran 5k", link="daily/2024-02-10.md"),
        Entry(date="2024-02-14", content="<b>gym</b>", link=""),
        Entry(date="2024-03-10", content="next month", link="daily/2024-03-10.md"),
    ]


@pytest.fixture
def flask_app():
    from app import app, db

    app.config["TESTING"] = True
    with app.app_context():
        db.create_all()
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(flask_app):
    return flask_app.test_client()
