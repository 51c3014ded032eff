import json

import pytest

from catchreport.cli import main

TEST_SOURCE = """TEST_CASE("first")
{
    REQUIRE(true);
}
"""

REPORT = """<?xml version="1.0" encoding="UTF-8"?>
<Catch2TestRun name="demo">
<TestCase name="first"><OverallResult success="true"/></TestCase>
<OverallResultsCases successes="1" failures="0" expectedFailures="0"/>
</Catch2TestRun>
"""


@pytest.fixture
def files(tmp_path):
    xml_path = tmp_path / "results.xml"
    xml_path.write_text(REPORT, encoding="utf-8")
    err_path = tmp_path / "errors.txt"
    err_path.write_text("compiler output", encoding="utf-8")
    test_path = tmp_path / "demo_test.cpp"
    test_path.write_text(TEST_SOURCE, encoding="utf-8")
    return xml_path, tmp_path / "out.json", err_path, test_path


@pytest.mark.parametrize("argv", [[], ["a"], ["a", "b", "c"]])
def test_too_few_arguments(argv, capsys):
    assert main(argv) == -1
    out = capsys.readouterr().out
    assert "required but were not supplied" in out
    assert "input_file_name output_file_name compilation_errors_file_name test_file_path" in out


def test_successful_run_writes_json(files, capsys):
    xml_path, out_path, err_path, test_path = files
    assert main([str(xml_path), str(out_path), str(err_path), str(test_path)]) == 0
    document = json.loads(out_path.read_text(encoding="utf-8"))
    assert document["status"] == "pass"
    assert document["tests"][0]["name"] == "first"
    assert document["tests"][0]["test_code"] == "{\n    REQUIRE(true);\n}"
    assert capsys.readouterr().out == ""


def test_compilation_error_run(files):
    _, out_path, err_path, test_path = files
    missing = out_path.parent / "missing.xml"
    assert main([str(missing), str(out_path), str(err_path), str(test_path)]) == 0
    document = json.loads(out_path.read_text(encoding="utf-8"))
    assert document == {"version": 3, "status": "error", "message": "compiler output"}


def test_unknown_test_name_reports_error(files, capsys):
    xml_path, out_path, err_path, test_path = files
    test_path.write_text("nothing relevant here\n", encoding="utf-8")
    assert main([str(xml_path), str(out_path), str(err_path), str(test_path)]) == 0
    assert capsys.readouterr().out.startswith("Error: ")
    assert not out_path.exists()