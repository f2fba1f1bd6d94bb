import os

import pytest

from packetproc.pair import Pair
from packetproc.processor import (
    Counter,
    CsvReader,
    Result,
    count_and_write_in_one_batch,
    count_and_write_one_by_one,
    generate_result_file_name,
)
from packetproc.textutils import encode_base64

SAMPLES = [(100001, "Hello"), (100002, "سلام"), (100003, "AbCش")]


def _write_input(path, pairs):
    content = "".join(f"{pair_id} , {encode_base64(text)}\n" for pair_id, text in pairs)
    path.write_text(content, encoding="utf-8", newline="\n")
    return str(path)


@pytest.fixture
def sample_file(tmp_path):
    return _write_input(tmp_path / "sample.txt", SAMPLES)


def test_get_next_line(sample_file):
    with CsvReader(sample_file) as reader:
        assert reader.next_pair_decoded() == Pair(100001, "Hello")


def test_get_all_lines(sample_file):
    with CsvReader(sample_file) as reader:
        assert list(reader) == [Pair(i, t) for i, t in SAMPLES]


def test_reader_raises_eof_when_finished(sample_file):
    reader = CsvReader(sample_file)
    for _ in SAMPLES:
        reader.next_pair_decoded()
    with pytest.raises(EOFError):
        reader.next_pair_decoded()
    with pytest.raises(EOFError):
        reader.next_pair_decoded()
    reader.close()


def test_reader_drops_unterminated_last_line(tmp_path):
    path = tmp_path / "in.txt"
    path.write_text(f"1 , {encode_base64('ab')}\n2 , {encode_base64('cd')}", encoding="utf-8")
    with CsvReader(str(path)) as reader:
        assert list(reader) == [Pair(1, "ab")]


def test_reader_invalid_id_reports_line(tmp_path):
    path = tmp_path / "in.txt"
    path.write_text(f"1 , {encode_base64('ab')}\nabc , {encode_base64('cd')}\n", encoding="utf-8")
    with CsvReader(str(path)) as reader:
        assert reader.next_pair_decoded() == Pair(1, "ab")
        with pytest.raises(ValueError, match="line <2>"):
            reader.next_pair_decoded()


def test_reader_missing_comma(tmp_path, capsys):
    path = tmp_path / "in.txt"
    path.write_text("12345\n", encoding="utf-8")
    with CsvReader(str(path)) as reader:
        with pytest.raises(ValueError):
            reader.next_pair_decoded()
    assert "not csv compatible at line <1>" in capsys.readouterr().out


def test_reader_invalid_base64_gives_empty_text(tmp_path):
    path = tmp_path / "in.txt"
    path.write_text("7 , ###\n", encoding="utf-8")
    with CsvReader(str(path)) as reader:
        assert reader.next_pair_decoded() == Pair(7, "")


def test_result_csv_string():
    assert Result(1, 5, 2, 3, 60).csv_string() == "1,5,2,3,60"
    assert Result().csv_string() == "0,0,0,0,0"


def test_count_characters(sample_file):
    with Counter(sample_file) as counter:
        results = list(counter)
    assert results == [
        Result(100001, 5, 0, 5, 100),
        Result(100002, 8, 8, 0, 0),
        Result(100003, 5, 2, 3, 60),
    ]


def test_counter_invariants(sample_file):
    with Counter(sample_file) as counter:
        for result in counter:
            assert result.persian_count + result.english_count == result.count
            assert 0 <= result.english_ratio <= 100


def test_counter_empty_text_fails(tmp_path):
    path = tmp_path / "in.txt"
    path.write_text("7 , ###\n", encoding="utf-8")
    with Counter(str(path)) as counter:
        with pytest.raises(ZeroDivisionError):
            counter.count_next_pair()


def test_count_and_write_one_by_one(sample_file, tmp_path, capsys):
    out = tmp_path / "result.txt"
    count_and_write_one_by_one(sample_file, str(out))
    assert out.read_text(encoding="utf-8").splitlines() == [
        "100001,5,0,5,100",
        "100002,8,8,0,0",
        "100003,5,2,3,60",
    ]
    assert "file finished" in capsys.readouterr().out


def test_count_and_write_one_by_one_stops_at_bad_line(tmp_path):
    path = tmp_path / "in.txt"
    path.write_text(
        f"1 , {encode_base64('ab')}\nxx , {encode_base64('cd')}\n3 , {encode_base64('ef')}\n",
        encoding="utf-8",
    )
    out = tmp_path / "result.txt"
    count_and_write_one_by_one(str(path), str(out))
    assert out.read_text(encoding="utf-8").splitlines() == ["1,2,0,2,100"]


def test_count_and_write_in_one_batch_truncates(sample_file, tmp_path):
    out = tmp_path / "result.txt"
    count_and_write_in_one_batch(sample_file, str(out), 2)
    assert out.read_text(encoding="utf-8").splitlines() == [
        "100001,5,0,5,100",
        "100002,8,8,0,0",
    ]


def test_count_and_write_in_one_batch_pads_with_zeros(sample_file, tmp_path, capsys):
    out = tmp_path / "result.txt"
    count_and_write_in_one_batch(sample_file, str(out), 5)
    lines = out.read_text(encoding="utf-8").splitlines()
    assert lines[3:] == ["0,0,0,0,0", "0,0,0,0,0"]
    assert len(lines) == 5
    printed = capsys.readouterr().out
    assert "<Read All>" in printed
    assert "<Write All>" in printed


def test_count_and_write_in_one_batch_negative(sample_file, tmp_path):
    with pytest.raises(ValueError):
        count_and_write_in_one_batch(sample_file, str(tmp_path / "r.txt"), -1)


def test_batch_matches_one_by_one(sample_file, tmp_path):
    first = tmp_path / "a.txt"
    second = tmp_path / "b.txt"
    count_and_write_one_by_one(sample_file, str(first))
    count_and_write_in_one_batch(sample_file, str(second), len(SAMPLES))
    assert first.read_text(encoding="utf-8") == second.read_text(encoding="utf-8")


def test_generate_result_file_name_with_directory():
    name = os.path.join("data", "in.txt")
    assert generate_result_file_name(name) == os.path.join("data", "result_in.txt")


def test_generate_result_file_name_bare():
    assert generate_result_file_name("in.txt") == "result_in.txt"