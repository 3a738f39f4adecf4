import codecs
import json
import os
from dataclasses import dataclass, field
from typing import List

CONFIG_ENV = "WORDCOUNT_CONFIG_JSON"
DEFAULT_COLUMNS = ["lines", "words", "bytes"]
DEFAULT_ENCODING = "utf-8"


@dataclass
class WcConfig:
    columns: List[str] = field(default_factory=lambda: list(DEFAULT_COLUMNS))
    encoding: str = DEFAULT_ENCODING
    log_level: str = "WARNING"


def _safe_json_load(raw: str) -> dict:
    try:
        data = json.loads(raw)
    except json.JSONDecodeError:
        return {}
    return data if isinstance(data, dict) else {}


def _known_encoding(name: str) -> str:
    try:
        codecs.lookup(name)
    except LookupError:
        return DEFAULT_ENCODING
    return name


def load_config() -> WcConfig:
    raw = (os.getenv(CONFIG_ENV) or "").strip()
    if not raw:
        return WcConfig()

    data = _safe_json_load(raw)
    columns = [str(c).strip() for c in (data.get("columns") or [])]

    return WcConfig(
        columns=columns or list(DEFAULT_COLUMNS),
        encoding=_known_encoding((data.get("encoding") or DEFAULT_ENCODING).strip()),
        log_level=(data.get("log_level") or "WARNING").strip().upper(),
    )
