import os
import json
from dotenv import load_dotenv

from datetime import datetime, timezone
from sqlalchemy.sql import func

from flask import Flask, render_template, redirect, url_for, request, flash, abort
from flask_sqlalchemy import SQLAlchemy
from flask_migrate import Migrate

from zoneinfo import ZoneInfo

from habit_calendar import WEEKDAYS, MarkdownRenderer, Settings, render_calendar

# UTC の現在時刻を返す
def utcnow():
    return datetime.now(timezone.utc)

load_dotenv()

app = Flask(__name__)
app.config["SECRET_KEY"] = os.getenv("SECRET_KEY", "dev")
app.config["SQLALCHEMY_DATABASE_URI"] = os.getenv("DATABASE_URL", "sqlite:///habit_calendar.db")
app.config["SQLALCHEMY_TRACK_MODIFICATIONS"] = False # 省エネ
app.config["CALENDAR_TZ"] = os.getenv("CALENDAR_TZ", "Asia/Tokyo")

db = SQLAlchemy(app)
migrate = Migrate()
migrate.init_app(app, db)

# Markdown レンダラは使いまわす
markdown_renderer = MarkdownRenderer()

SETTINGS_KEY = "habit-tracker"

class SettingsBlob(db.Model):
    # 設定は key ごとに JSON でまるごと保存
    key = db.Column(db.String(80), primary_key=True)
    value = db.Column(db.Text, nullable=False, default="{}")
    updated_at = db.Column(
        db.DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        onupdate=utcnow
    )

def load_settings() -> Settings:
    row = db.session.get(SettingsBlob, SETTINGS_KEY)
    if row is None:
        return Settings()
    try:
        blob = json.loads(row.value)
    except ValueError:
        app.logger.warning("stored settings are not valid JSON, using defaults")
        blob = {}
    return Settings.from_blob(blob if isinstance(blob, dict) else {})

def save_settings(settings: Settings) -> None:
    row = db.session.get(SettingsBlob, SETTINGS_KEY)
    if row is None:
        row = SettingsBlob(key=SETTINGS_KEY)
        db.session.add(row)
    row.value = json.dumps(settings.to_blob())
    db.session.commit()

def shift_month(year: int, month: int, delta: int) -> tuple[int, int]:
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1

@app.route("/")
def index():
    year = request.args.get("year", type=int)
    month = request.args.get("month", type=int)

    if not year or not month:
        today = datetime.now(ZoneInfo(app.config["CALENDAR_TZ"])).date()
        year, month = today.year, today.month

    settings = load_settings()
    calendar = render_calendar({"year": year, "month": month, "data": []}, settings, markdown_renderer)

    return render_template(
        "index.html",
        year=year,
        month=month,
        prev_month=shift_month(year, month, -1),
        next_month=shift_month(year, month, 1),
        calendar_html=calendar.to_html()
    )

# 埋め込みスクリプトからの呼び出し口. body は CalendarRequest の JSON
@app.route("/render", methods=["POST"])
def render_view():
    params = request.get_json(silent=True)
    if not isinstance(params, dict):
        abort(400)

    calendar = render_calendar(params, load_settings(), markdown_renderer)
    return calendar.to_html(), 200, {"Content-Type": "text/html; charset=utf-8"}

# 設定

@app.route("/settings", methods=["GET", "POST"])
def settings_view():
    settings = load_settings()

    if request.method == "POST":
        start_of_week = request.form.get("start_of_week", "0")
        if start_of_week not in {str(i) for i in range(7)}:
            flash("週のはじまりは 0 (日曜) から 6 (土曜) で指定してください. ")
            return redirect(url_for("settings_view"))

        labels = {name.lower(): request.form.get(name.lower(), "").strip() for name in WEEKDAYS}
        settings = settings.with_updates(
            start_of_week=start_of_week,
            month_format=request.form.get("month_format", "").strip() or Settings.month_format,
            display_head="display_head" in request.form,
            enable_html="enable_html" in request.form,
            enable_markdown="enable_markdown" in request.form,
            **labels,
        )
        save_settings(settings)
        flash("設定を保存しました. ")
        return redirect(url_for("settings_view"))

    return render_template(
        "settings.html",
        settings=settings,
        weekdays=WEEKDAYS,
        last_updated=db.session.query(func.max(SettingsBlob.updated_at)).scalar()
    )

@app.cli.command("init-db")
def init_db():
    db.create_all()
    print("initialized the database")


if __name__ == "__main__":
    # 重要: はじめに 1 回 `flask --app app init-db` を実行しておく
    app.run(debug=True)
