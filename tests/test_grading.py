from __future__ import annotations

import pytest

from recordkeeper.domain.entities import Learner
from recordkeeper.domain.exceptions import InvalidFormatError, MissingFieldError, StorageError
from recordkeeper.domain.services.grading import ResultProcessor
from recordkeeper.domain.value_objects import ErrorKind, Grade


@pytest.mark.parametrize(
    "score, expected",
    [(100, "A"), (80, "A"), (79, "B"), (70, "B"), (69, "C"), (60, "C"), (59, "D"), (50, "D"), (49, "F"), (0, "F")],
)
def test_grade_boundaries(score, expected):
    assert Grade.from_score(score) == expected
    assert Learner(id=1, full_name="Ama", score=score).grade.value == expected


def test_parse_line_trims_fields():
    learner = ResultProcessor().parse_line(" 7 ,  Ama Serwaa  , 81 ")
    assert learner.id == 7
    assert learner.full_name == "Ama Serwaa"
    assert learner.score == 81


@pytest.mark.parametrize("line", ["1,Name", "1,Name,80,extra", ""])
def test_wrong_field_count_raises_missing_field(line):
    with pytest.raises(MissingFieldError) as exc:
        ResultProcessor().parse_line(line)
    assert exc.value.kind is ErrorKind.MISSING_FIELD
    assert exc.value.expected == 3


def test_missing_field_message_quotes_line():
    with pytest.raises(MissingFieldError) as exc:
        ResultProcessor().parse_line("1,Name")
    assert exc.value.message == 'Line is missing fields: "1,Name"'


def test_non_numeric_id_raises_invalid_format():
    with pytest.raises(InvalidFormatError) as exc:
        ResultProcessor().parse_line("abc,Kofi Boateng,70")
    assert exc.value.kind is ErrorKind.INVALID_FORMAT
    assert exc.value.field == "ID"
    assert exc.value.raw_value == "abc"


def test_non_numeric_score_raises_invalid_format():
    with pytest.raises(InvalidFormatError) as exc:
        ResultProcessor().parse_line("3,Kofi Boateng, seventy")
    assert exc.value.field == "score"
    assert exc.value.message == 'Invalid score format: " seventy"'


def test_decimal_score_is_not_an_integer():
    with pytest.raises(InvalidFormatError):
        ResultProcessor().parse_line("3,Kofi Boateng,70.5")


def test_read_and_write_report(tmp_path):
    source = tmp_path / "learners.txt"
    source.write_text("1, Ama Serwaa, 85\n2,Kofi Boateng,72\n3,Esi Mensah,49\n", encoding="utf-8")
    report = tmp_path / "out" / "grade_report.txt"

    processor = ResultProcessor()
    learners = processor.read_from_file(source)
    processor.write_to_file(learners, report)

    assert [learner.id for learner in learners] == [1, 2, 3]
    assert report.read_text(encoding="utf-8").splitlines() == [
        "Ama Serwaa (ID: 1): Score = 85, Grade = A",
        "Kofi Boateng (ID: 2): Score = 72, Grade = B",
        "Esi Mensah (ID: 3): Score = 49, Grade = F",
    ]


def test_read_aborts_on_first_bad_line(tmp_path):
    source = tmp_path / "learners.txt"
    source.write_text("1,Ama Serwaa,85\n2,Kofi Boateng\n3,Esi Mensah,x\n", encoding="utf-8")

    with pytest.raises(MissingFieldError):
        ResultProcessor().read_from_file(source)


def test_read_handles_windows_line_endings(tmp_path):
    source = tmp_path / "learners.txt"
    source.write_bytes(b"1,Ama Serwaa,85\r\n2,Kofi Boateng,61\r\n")

    learners = ResultProcessor().read_from_file(source)
    assert [learner.score for learner in learners] == [85, 61]


def test_missing_input_file_raises_storage_error(tmp_path):
    with pytest.raises(StorageError) as exc:
        ResultProcessor().read_from_file(tmp_path / "nope.txt")
    assert exc.value.kind is ErrorKind.IO
    assert exc.value.operation == "read"
    assert exc.value.reason == "Input file not found."
    assert isinstance(exc.value.__cause__, FileNotFoundError)


def test_read_skips_utf8_byte_order_mark(tmp_path):
    source = tmp_path / "learners.txt"
    source.write_bytes(b"\xef\xbb\xbf1,Ama Serwaa,85\n")

    learners = ResultProcessor().read_from_file(source)
    assert [(learner.id, learner.full_name) for learner in learners] == [(1, "Ama Serwaa")]


def test_undecodable_input_raises_storage_error(tmp_path):
    source = tmp_path / "learners.txt"
    source.write_bytes(b"1,Ama \xff Serwaa,85\n")

    with pytest.raises(StorageError) as exc:
        ResultProcessor().read_from_file(source)
    assert exc.value.operation == "read"
    assert isinstance(exc.value.__cause__, UnicodeDecodeError)
