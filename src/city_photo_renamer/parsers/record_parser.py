from __future__ import annotations

import re
from datetime import tzinfo

from city_photo_renamer.core.photo_record import PhotoRecord
from city_photo_renamer.util.errors import InvalidFormatError
from city_photo_renamer.util.timeparse import parse_capture_timestamp, to_epoch_millis

FIELD_SEPARATOR = ","
EXTENSIONS = ("jpeg", "jpg", "png")

REASON_FIELD_COUNT = "expected '<filename>, <city>, <yyyy-MM-dd HH:mm:ss>'"
REASON_BAD_FILENAME = "invalid file name"
REASON_BAD_CITY = "invalid city name"
REASON_BAD_TIMESTAMP = "invalid date and time"

class RecordParser:
    """Turns one `<filename>, <city>, <date> <time>` line into a PhotoRecord.

    By default an empty name before the dot (".jpg") and an empty city are
    accepted; pass allow_empty_names=False to require at least one letter.
    Naive timestamps are interpreted in `tz` (system local zone when None).
    """

    def __init__(self, allow_empty_names: bool = True, tz: tzinfo | None = None) -> None:
        quant = "*" if allow_empty_names else "+"
        self.allow_empty_names = allow_empty_names
        self.tz = tz
        self._filename_re = re.compile(rf"[A-Za-z]{quant}\.(?P<ext>{'|'.join(EXTENSIONS)})")
        self._city_re = re.compile(rf"[A-Za-z]{quant}")

    def parse_line(self, line: str) -> PhotoRecord:
        parts = line.split(FIELD_SEPARATOR)
        if len(parts) != 3:
            raise InvalidFormatError(REASON_FIELD_COUNT, field="record", value=line)
        filename, city, stamp = (p.strip() for p in parts)
        return PhotoRecord(
            extension=self._extension(filename),
            city=self._city(city),
            timestamp_millis=self._timestamp(stamp),
        )

    def _extension(self, filename: str) -> str:
        m = self._filename_re.fullmatch(filename)
        if not m:
            raise InvalidFormatError(f"{REASON_BAD_FILENAME}: {filename!r}", field="filename", value=filename)
        return m.group("ext")

    def _city(self, city: str) -> str:
        if not self._city_re.fullmatch(city):
            raise InvalidFormatError(f"{REASON_BAD_CITY}: {city!r}", field="city", value=city)
        return city

    def _timestamp(self, stamp: str) -> int:
        try:
            dt = parse_capture_timestamp(stamp)
        except ValueError as e:
            raise InvalidFormatError(f"{REASON_BAD_TIMESTAMP}: {stamp!r}", field="timestamp", value=stamp) from e
        return to_epoch_millis(dt, self.tz)
