"""Convert a Catch2 XML report into the JSON result format of a test runner."""

from __future__ import annotations

import json
import os
import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field

from .helpers import read_file, rtrim, trim

MESSAGE_LIMIT = 65_000
MESSAGE_NOTE = "... (Output was truncated.)"
OUTPUT_LIMIT = 500
OUTPUT_KEEP = 449
OUTPUT_NOTE = "\nOutput was truncated. Please limit to 500 chars"

_INT_RE = re.compile(r"[+-]?[0-9]+")


class ReportDataError(ValueError):
    """The report lacks an element or attribute, or holds a malformed value."""


def clean_test_case_output(text: str) -> str:
    """Drop preprocessor guards shared between test cases and trailing whitespace."""
    text = text.replace("#if defined(EXERCISM_RUN_ALL_TESTS)", "")
    text = text.replace("#endif", "")
    return rtrim(text)


def restrict_msg_length(message: str) -> str:
    """Cut ``message`` to the length the result store accepts."""
    if len(message) > MESSAGE_LIMIT:
        return message[:MESSAGE_LIMIT] + MESSAGE_NOTE
    return message


def to_json_pair(name: str, value: str | int, first_item: bool = False) -> str:
    """Render ``"name": value``, or nothing when the value is empty or zero."""
    if isinstance(value, str):
        if not value:
            return ""
        rendered = json.dumps(value, ensure_ascii=False)
    else:
        if value == 0:
            return ""
        rendered = str(int(value))
    prefix = '"' if first_item else ', "'
    return f"{prefix}{name}\": {rendered}"


def _child(element: ET.Element, tag: str) -> ET.Element:
    found = element.find(tag)
    if found is None:
        raise ReportDataError(f"no <{tag}> in <{element.tag}>")
    return found


def _attr(element: ET.Element, name: str) -> str:
    value = element.get(name)
    if value is None:
        raise ReportDataError(f"no attribute {name!r} on <{element.tag}>")
    return value


def _text(element: ET.Element) -> str:
    return (element.text or "") + "".join(child.tail or "" for child in element)


def _as_int(value: str) -> int:
    stripped = trim(value)
    if not _INT_RE.fullmatch(stripped):
        raise ReportDataError(f"not an integer: {value!r}")
    return int(stripped)


def _as_bool(value: str) -> bool:
    stripped = trim(value)
    if stripped in ("1", "true"):
        return True
    if stripped in ("0", "false"):
        return False
    raise ReportDataError(f"not a boolean: {value!r}")


def _task_id_from_tags(tags: str) -> int:
    raw = tags.encode("utf-8")
    found = raw.find(b"task_")
    if found == -1:
        return 0

    def signed_byte(index: int) -> int:
        if index >= len(raw):
            return 0
        byte = raw[index]
        return byte - 256 if byte > 127 else byte

    zero = ord("0")
    task_id = signed_byte(found + 5) - zero
    second = signed_byte(found + 6)
    if zero <= second <= ord("9"):
        task_id = task_id * 10 + second - zero
    return task_id


@dataclass
class TestResult:
    """The outcome of a single test case."""

    __test__ = False

    name: str = ""
    status: str = ""
    message: str = ""
    output: str = ""
    test_code: str = ""
    task_id: int = 0

    def to_json(self) -> str:
        """Render this result as a JSON object, leaving out empty fields."""
        parts = [
            "{",
            to_json_pair("name", self.name, True),
            to_json_pair("status", self.status),
        ]
        if self.status != "pass":
            parts.append(to_json_pair("message", self.message))
        parts += [
            to_json_pair("output", self.output),
            to_json_pair("test_code", self.test_code),
            to_json_pair("task_id", self.task_id),
            "}",
        ]
        return "".join(parts)


@dataclass
class OutputMessage:
    """The overall outcome of a test run."""

    version: int = 3
    status: str = ""
    message: str = ""
    tests: list[TestResult] = field(default_factory=list)

    def load_from_catch2_xml(
        self,
        xml_test_output_file: str | os.PathLike[str],
        compilation_error_file: str | os.PathLike[str],
    ) -> None:
        """Read a Catch2 XML report; without a usable one, report the compiler output."""
        try:
            root = ET.parse(xml_test_output_file).getroot()
            if root.tag != "Catch2TestRun":
                raise ReportDataError(f"unexpected root element <{root.tag}>")
            failures = _as_int(_attr(_child(root, "OverallResultsCases"), "failures"))
            self.status = "pass" if failures == 0 else "fail"
            for element in root:
                if element.tag == "TestCase":
                    self.tests.append(self._read_test_case(element))
        except (OSError, ET.ParseError, ValueError):
            self.status = "error"
            self.message = restrict_msg_length(read_file(compilation_error_file))

    def _read_test_case(self, element: ET.Element) -> TestResult:
        name = _attr(element, "name")
        status = "pass"
        message = ""
        if not _as_bool(_attr(_child(element, "OverallResult"), "success")):
            status = "fail"
            message = restrict_msg_length(self.build_test_message(element))

        tags = element.get("tags")
        task_id = _task_id_from_tags(tags) if tags is not None else 0

        output = ""
        stdout = element.find("OverallResult/StdOut")
        if stdout is not None:
            output = _text(stdout)
            if len(output) > OUTPUT_LIMIT:
                output = output[:OUTPUT_KEEP] + OUTPUT_NOTE

        return TestResult(name, status, message, output, "", task_id)

    def build_test_message(self, tree: ET.Element) -> str:
        """Describe the first failed expression of a test case element."""
        expression = _child(tree, "Expression")
        testing_type = _attr(expression, "type")
        original = trim(_text(_child(expression, "Original")))
        expanded = trim(_text(_child(expression, "Expanded")))
        filename = _attr(expression, "filename")
        line = _attr(expression, "line")
        return (
            f"\nFAILED:\n  {testing_type}( {original} )\nwith expansion:\n  "
            f"{expanded}\nat {filename}:{line}\n"
        )

    def generate_test_code_from_test_file(self, test_file_path: str | os.PathLike[str]) -> None:
        """Attach to each result the body of its test case taken from the test source."""
        content = read_file(test_file_path)
        for result in self.tests:
            name_at = content.find(result.name)
            if name_at == -1:
                raise ValueError(f"test case {result.name!r} not found in test file")
            curly_at = content.find("{", name_at)
            if curly_at == -1:
                raise ValueError(f"no body found for test case {result.name!r}")
            next_at = content.find("TEST_CASE", name_at)
            if next_at == -1 or next_at < curly_at:
                segment = content[curly_at:]
            else:
                segment = content[curly_at:next_at]
            result.test_code = clean_test_case_output(segment)

    def to_json(self) -> str:
        """Render the run as a JSON document."""
        parts = [
            "{",
            to_json_pair("version", self.version, True),
            to_json_pair("status", self.status),
        ]
        if self.status != "pass":
            parts.append(to_json_pair("message", self.message))
        if self.status != "error":
            parts.append(', "tests": [' + ", ".join(t.to_json() for t in self.tests) + "]")
        parts.append("}")
        return "".join(parts)

    def save_as_exercism_json(self, filename: str | os.PathLike[str]) -> None:
        """Write the JSON document to ``filename``; nothing is written if it cannot be opened."""
        try:
            with open(filename, "w", encoding="utf-8", newline="") as json_file:
                json_file.write(self.to_json())
        except OSError:
            return