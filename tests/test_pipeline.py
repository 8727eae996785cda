from __future__ import annotations

from pathlib import Path

import pytest

from city_photo_renamer.core.name_generator import NameGenerator
from city_photo_renamer.core.pipeline import rename_batch, solution, split_records
from city_photo_renamer.core.run_logger import RunLogger
from city_photo_renamer.core.settings import RenameSettings
from city_photo_renamer.util.errors import InvalidFormatError

REFERENCE_INPUT = (
    "photo.jpg, Warsaw, 2013-09-05 14:08:15\r\n"
    "aa.jpg, Warsaw, 2013-09-05 14:08:15\r\n"
    "sds.jpg, Warsaw, 2013-09-05 14:08:15\r\n"
    "d.jpg, Warsaw, 2013-09-05 14:08:15\r\n"
    "gghh.jpg, Warsaw, 2013-09-05 14:08:15\r\n"
    "ssd.jpg, Warsaw, 2013-06-05 14:08:15\r\n"
    "xsd.jpg, Warsaw, 2013-09-05 14:08:15\r\n"
    "dsadvv.jpg, Warsaw, 2013-06-05 14:08:15\r\n"
    "sdased.jpg, Warsaw, 2013-02-05 14:08:15\r\n"
    "bgg.jpg, Warsaw, 2013-09-02 14:08:15\r\n"
    "adas.jpg, Warsaw, 2013-09-05 14:08:15\r\n"
    "a.jpg, London, 2013-09-05 14:08:15\r\n"
    "b.jpg, Warsaw, 2013-09-04 14:08:15"
)

REFERENCE_OUTPUT = (
    "Warsaw06.jpg\r\n"
    "Warsaw07.jpg\r\n"
    "Warsaw08.jpg\r\n"
    "Warsaw09.jpg\r\n"
    "Warsaw10.jpg\r\n"
    "Warsaw02.jpg\r\n"
    "Warsaw11.jpg\r\n"
    "Warsaw03.jpg\r\n"
    "Warsaw01.jpg\r\n"
    "Warsaw04.jpg\r\n"
    "Warsaw12.jpg\r\n"
    "London1.jpg\r\n"
    "Warsaw05.jpg\r\n"
)


def test_solution_reference_batch():
    assert solution(REFERENCE_INPUT) == REFERENCE_OUTPUT


def test_solution_same_with_trailing_separator():
    assert solution(REFERENCE_INPUT + "\r\n") == REFERENCE_OUTPUT


def test_solution_one_output_line_per_input_line():
    out = solution(REFERENCE_INPUT)
    in_lines = REFERENCE_INPUT.split("\r\n")
    out_lines = out.split("\r\n")
    assert out_lines[-1] == ""
    assert len(out_lines) - 1 == len(in_lines)
    for src, dst in zip(in_lines, out_lines):
        city = src.split(",")[1].strip()
        assert dst.startswith(city)
        assert dst[len(city):].split(".")[0].isdigit()


def test_solution_mixed_extensions():
    text = (
        "a.png, Paris, 2020-01-01 18:00:00\r\n"
        "b.jpeg, Paris, 2020-01-01 09:00:00"
    )
    assert solution(text) == "Paris2.png\r\nParis1.jpeg\r\n"


def test_solution_empty_input():
    assert solution("") == ""


def test_solution_plain_newlines_are_not_separators():
    with pytest.raises(InvalidFormatError):
        solution("a.jpg, Oslo, 2020-01-01 10:00:00\nb.jpg, Oslo, 2020-01-01 11:00:00")


def test_malformed_line_aborts_batch():
    text = (
        "photo.jpg, Warsaw, 2013-09-05 14:08:15\r\n"
        "123.jpg, Warsaw, 2013-09-05 14:08:15\r\n"
        "a.jpg, London, 2013-09-05 14:08:15"
    )
    with pytest.raises(InvalidFormatError) as excinfo:
        solution(text)
    assert excinfo.value.line_number == 2
    assert excinfo.value.field == "filename"
    assert str(excinfo.value).startswith("line 2:")


def test_split_records():
    assert split_records("a\r\nb\r\n\r\n", "\r\n") == ["a", "b"]
    assert split_records("a\r\n\r\nb", "\r\n") == ["a", "", "b"]
    assert split_records("", "\r\n") == []


def test_rename_batch_with_settings():
    settings = RenameSettings(record_separator="\n", timezone="UTC")
    text = "a.jpg, Oslo, 2020-01-01 11:00:00\nb.jpg, Oslo, 2020-01-01 10:00:00\n"
    assert rename_batch(text, settings=settings) == "Oslo2.jpg\nOslo1.jpg\n"


def test_rename_batch_strict_settings_reject_empty_city():
    settings = RenameSettings(allow_empty_names=False)
    with pytest.raises(InvalidFormatError):
        rename_batch("a.jpg, , 2020-01-01 10:00:00", settings=settings)


def test_rename_batch_uses_generator_factory():
    created: list[NameGenerator] = []

    def factory(separator: str) -> NameGenerator:
        gen = NameGenerator(separator)
        created.append(gen)
        return gen

    rename_batch("a.jpg, Oslo, 2020-01-01 10:00:00", generator_factory=factory)
    assert len(created) == 1
    assert len(created[0]) == 1


def test_rename_batch_logs_summary(tmp_path: Path):
    logger = RunLogger(tmp_path / "logs" / "rename_log.txt", batch_label="ref")
    rename_batch(REFERENCE_INPUT, logger=logger)

    lines = logger.read_lines()
    assert len(lines) == 2
    assert "INFO ref: Renaming batch of 13 records." in lines[0]
    assert "London=1, Warsaw=12" in lines[1]


def test_rename_batch_logs_failure(tmp_path: Path):
    logger = RunLogger(tmp_path / "rename_log.txt")
    with pytest.raises(InvalidFormatError):
        rename_batch("a.jpg, Oslo, not a date", logger=logger)

    lines = logger.read_lines()
    assert "ERROR batch: Aborted: line 1: invalid date and time" in lines[-1]
