import dataclasses

import pytest

from clamdclient.result import ScanResult, ScanStatus, parse_result


def test_clean_file_line():
    result = parse_result("/tmp/clean.txt: OK")
    assert result.status is ScanStatus.OK
    assert result.path == "/tmp/clean.txt"
    assert result.description == ""
    assert result.hash == ""
    assert result.size == 0
    assert result.raw == "/tmp/clean.txt: OK"
    assert not result.infected


def test_found_line_with_description():
    result = parse_result("stream: Eicar-Test-Signature FOUND")
    assert result.status is ScanStatus.FOUND
    assert result.path == "stream"
    assert result.description == "Eicar-Test-Signature"
    assert result.infected


def test_found_line_with_hash_and_size():
    line = "stream: Eicar-Test-Signature(44d88612fea8a8f36de82e1278abb02f:68) FOUND"
    result = parse_result(line)
    assert result.status is ScanStatus.FOUND
    assert result.description == "Eicar-Test-Signature"
    assert result.hash == "44d88612fea8a8f36de82e1278abb02f"
    assert result.size == 68
    assert result.raw == line


def test_error_line():
    result = parse_result("/root/secret: lstat() failed: Permission denied. ERROR")
    # the description may not contain a colon, so this cannot match
    assert result.status is ScanStatus.PARSE_ERROR


def test_error_line_without_colon_in_description():
    result = parse_result("/root/file: Access denied ERROR")
    assert result.status is ScanStatus.ERROR
    assert result.path == "/root/file"
    assert result.description == "Access denied"


def test_path_with_spaces():
    result = parse_result("/tmp/my file.txt: OK")
    assert result.path == "/tmp/my file.txt"
    assert result.status is ScanStatus.OK


@pytest.mark.parametrize("line", ["PONG", "RELOADING", "", "stream: MAYBE", "x: OK\n"])
def test_unparseable_lines(line):
    result = parse_result(line)
    assert result.status is ScanStatus.PARSE_ERROR
    assert result.description == "Regex had no matches"
    assert result.raw == line
    assert result.path == ""


@pytest.mark.parametrize(
    "line, expected",
    [
        ("a: OK", "OK"),
        ("a: Eicar-Test-Signature FOUND", "FOUND"),
        ("a: Access denied ERROR", "ERROR"),
    ],
)
def test_parsed_status_values_match_protocol(line, expected):
    assert parse_result(line).status.value == expected


def test_parse_error_status_text():
    assert str(parse_result("PONG").status) == "PARSE ERROR"


def test_result_is_immutable():
    result = parse_result("a: OK")
    with pytest.raises(dataclasses.FrozenInstanceError):
        result.path = "b"
    assert result.path == "a"


def test_result_equality():
    assert parse_result("a: OK") == ScanResult(raw="a: OK", status=ScanStatus.OK, path="a")