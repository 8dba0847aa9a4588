import logging
from dataclasses import dataclass, fields, replace

logger = logging.getLogger(__name__)

WEEKDAYS = ("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday")

# 保存データのキー (camelCase) -> フィールド名
BLOB_KEYS = {
    "startOfWeek": "start_of_week",
    "monthFormat": "month_format",
    "displayHead": "display_head",
    "enableHTML": "enable_html",
    "enableMarkdown": "enable_markdown",
    **{name: name.lower() for name in WEEKDAYS},
}


@dataclass(frozen=True)
class Settings:
    """
    描画時に参照する設定のスナップショット
    保存はホスト側 (key-value の blob) の担当
    """
    start_of_week: str = "0"
    month_format: str = "YYYY-MM"
    display_head: bool = True
    enable_html: bool = False
    enable_markdown: bool = True
    sunday: str = "SUN"
    monday: str = "MON"
    tuesday: str = "TUE"
    wednesday: str = "WED"
    thursday: str = "THU"
    friday: str = "FRI"
    saturday: str = "SAT"

    @classmethod
    def from_blob(cls, blob) -> "Settings":
        # デフォルトの上に保存済みの値をかぶせる. 知らないキーは無視
        names = {f.name for f in fields(cls)}
        values = {}
        for key, value in (blob or {}).items():
            name = BLOB_KEYS.get(key, key)
            if name in names:
                values[name] = value
        return cls(**values)

    def to_blob(self) -> dict:
        return {key: getattr(self, name) for key, name in BLOB_KEYS.items()}

    def with_updates(self, **changes) -> "Settings":
        for name in WEEKDAYS:
            label = name.lower()
            if label in changes and not changes[label]:
                changes[label] = getattr(Settings, label)
        return replace(self, **changes)

    @property
    def start_of_week_index(self) -> int:
        try:
            return int(self.start_of_week) % 7
        except (TypeError, ValueError):
            logger.warning("invalid startOfWeek %r, falling back to Sunday", self.start_of_week)
            return 0

    @property
    def weekday_labels(self) -> tuple[str, ...]:
        """日曜はじまりの曜日ラベル"""
        return tuple(getattr(self, name.lower()) for name in WEEKDAYS)
