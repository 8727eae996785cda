from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass

from city_photo_renamer.core.photo_record import PhotoRecord

RECORD_SEPARATOR = "\r\n"

@dataclass(frozen=True)
class _RecordHolder:
    record: PhotoRecord
    arrival: int

def pad_width(count: int) -> int:
    """Number of decimal digits in a city group's size."""
    if count < 1:
        raise ValueError(f"Group size must be positive, got {count}")
    return len(str(count))

def render_name(record: PhotoRecord, sequence: int, width: int) -> str:
    """`<City><zero-padded sequence>.<ext>`, e.g. Warsaw02.jpg."""
    return f"{record.city}{sequence:0{width}d}.{record.extension}"

class NameGenerator:
    """Accumulates records and renders the renamed listing.

    Holders are kept in input order and, per city, in capture-time order.
    Equal timestamps keep their arrival order.
    """

    def __init__(self, separator: str = RECORD_SEPARATOR) -> None:
        self.separator = separator
        self._holders: list[_RecordHolder] = []
        self._by_city: dict[str, list[_RecordHolder]] = {}
        self._times_by_city: dict[str, list[int]] = {}

    def __len__(self) -> int:
        return len(self._holders)

    def add_name(self, record: PhotoRecord) -> None:
        holder = _RecordHolder(record=record, arrival=len(self._holders))
        self._holders.append(holder)
        ordered = self._by_city.setdefault(record.city, [])
        times = self._times_by_city.setdefault(record.city, [])
        # bisect_right lands after the last equal timestamp
        idx = bisect_right(times, record.sort_key())
        times.insert(idx, record.sort_key())
        ordered.insert(idx, holder)

    def city_counts(self) -> dict[str, int]:
        return {city: len(group) for city, group in self._by_city.items()}

    def assigned_names(self) -> list[str]:
        """New names in input order."""
        names: dict[int, str] = {}
        for group in self._by_city.values():
            width = pad_width(len(group))
            for seq, holder in enumerate(group, start=1):
                names[holder.arrival] = render_name(holder.record, seq, width)
        return [names[h.arrival] for h in self._holders]

    def generate(self) -> str:
        return "".join(name + self.separator for name in self.assigned_names())
