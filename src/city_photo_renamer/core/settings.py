from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from pathlib import Path
import json
from appdirs import user_config_dir

from city_photo_renamer.core.name_generator import RECORD_SEPARATOR
from city_photo_renamer.parsers.record_parser import RecordParser
from city_photo_renamer.util.timeparse import resolve_timezone

def _config_path() -> Path:
    cfg_dir = Path(user_config_dir(appname="CityPhotoRenamer", appauthor=False))
    cfg_dir.mkdir(parents=True, exist_ok=True)
    return cfg_dir / "settings.json"

@dataclass
class RenameSettings:
    """User-persistent rename settings.

    - record_separator: splits input lines and terminates output lines
    - timezone: zone for naive capture times; "" means the system local zone
    - allow_empty_names: accept ".jpg" filenames and empty city fields
    """
    record_separator: str = RECORD_SEPARATOR
    timezone: str = ""
    allow_empty_names: bool = True

    @classmethod
    def load(cls, path: Path | None = None) -> "RenameSettings":
        p = path or _config_path()
        if not p.exists():
            return cls()
        try:
            data = json.loads(p.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            return cls()
        if not isinstance(data, dict):
            return cls()
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})

    def save(self, path: Path | None = None) -> None:
        p = path or _config_path()
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(asdict(self), indent=2), encoding="utf-8")

    def build_parser(self) -> RecordParser:
        return RecordParser(
            allow_empty_names=self.allow_empty_names,
            tz=resolve_timezone(self.timezone),
        )
