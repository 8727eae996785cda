from __future__ import annotations

from dataclasses import dataclass

@dataclass(frozen=True)
class PhotoRecord:
    """One parsed input line.

    - extension: file extension without the dot (jpeg|jpg|png)
    - city: validated city name, used verbatim as group key and name prefix
    - timestamp_millis: capture time as milliseconds since the Unix epoch
    """
    extension: str
    city: str
    timestamp_millis: int

    def sort_key(self) -> int:
        return self.timestamp_millis
