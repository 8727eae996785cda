"""Rename pipeline: split the input, parse each line, hand records to a generator.

Any malformed line aborts the whole batch; callers get either the complete
renamed listing or an InvalidFormatError, never a partial result.
"""

from __future__ import annotations

from typing import Callable

from city_photo_renamer.core.name_generator import NameGenerator
from city_photo_renamer.core.run_logger import RunLogger
from city_photo_renamer.core.settings import RenameSettings
from city_photo_renamer.parsers.record_parser import RecordParser
from city_photo_renamer.util.errors import InvalidFormatError

GeneratorFactory = Callable[[str], NameGenerator]  # separator -> generator

def split_records(text: str, separator: str) -> list[str]:
    """Split on the exact separator, dropping trailing empty segments."""
    lines = text.split(separator)
    while lines and lines[-1] == "":
        lines.pop()
    return lines

def rename_batch(
    text: str,
    parser: RecordParser | None = None,
    generator_factory: GeneratorFactory = NameGenerator,
    settings: RenameSettings | None = None,
    logger: RunLogger | None = None,
) -> str:
    settings = settings or RenameSettings()
    parser = parser or settings.build_parser()
    generator = generator_factory(settings.record_separator)

    lines = split_records(text, settings.record_separator)
    if logger:
        logger.log(f"Renaming batch of {len(lines)} records.")

    for line_number, line in enumerate(lines, start=1):
        try:
            record = parser.parse_line(line)
        except InvalidFormatError as e:
            e.line_number = line_number
            if logger:
                logger.error(f"Aborted: {e}")
            raise
        generator.add_name(record)

    out = generator.generate()
    if logger:
        groups = ", ".join(f"{city or '<empty>'}={n}" for city, n in sorted(generator.city_counts().items()))
        logger.log(f"Renamed {len(generator)} records ({groups}).")
    return out

def solution(text: str) -> str:
    """Rename `<file>, <city>, <yyyy-MM-dd HH:mm:ss>` lines to `<City><NN>.<ext>` lines."""
    return rename_batch(text)
