# catchreport

`catchreport` reads the XML report that a Catch2 test binary writes. It turns
that report into a JSON results file, format version 3, that a test-runner
front end can show to a student.

It uses only the Python standard library.

## What it does

- **Overall status.** It reads the Catch2 XML report. The status is `pass`
  when the `failures` count on `OverallResultsCases` is zero. Otherwise the
  status is `fail`.
- **Test cases.** Each `TestCase` element becomes one result, with these
  fields:
  - its name and status;
  - for a failed case, a message built from its first `Expression`, for
    example:
    ```
    FAILED:
      REQUIRE( leap::is_leap_year(2000) )
    with expansion:
      false
    at leap_test.cpp:31
    ```
  - any captured `StdOut`. Output longer than 500 characters is cut to its
    first 449 characters, and a note asking for at most 500 characters is
    added;
  - a task number read from the first `task_` in the case's tags. One or two
    digits are read, so `[task_3]` gives `3` and `[task_12]` gives `12`.
- **Errors.** The status becomes `error` when any of these is true:
  - the XML report is missing;
  - the XML report cannot be parsed;
  - the XML report lacks a required element or attribute.

  The message is then the text of the compilation error file. If that file
  does not exist, the message is `compilation error file does not exist`.
- **Message length.** Any message longer than 65,000 characters is cut to
  that length. The text `... (Output was truncated.)` is added after the cut.
- **Test code.** For each test case, the code is taken from the test source
  file:
  - It runs from the first `{` after the case's name up to the next
    `TEST_CASE`, or to the end of the file.
  - `#if defined(EXERCISM_RUN_ALL_TESTS)` and `#endif` lines are removed.
  - Trailing whitespace is removed.
- **Empty fields.** Empty strings and a zero task number are left out of the
  JSON. A `message` is written only when the status is not `pass`. The
  `tests` list is left out when the status is `error`.

## Installation

```
pip install .
```

## Command line

```
catchreport INPUT_XML OUTPUT_JSON COMPILATION_ERRORS_FILE TEST_FILE
```

If fewer than four arguments are given, the command prints a usage message
and exits with a non-zero status.

Other failures are printed as `Error: ...`, and the command still exits with
status zero. One such failure is a test case whose name cannot be found in
the test file. In that case no JSON file is written. A JSON file that cannot
be opened for writing is skipped without any message.

## Library use

```python
from catchreport.results import OutputMessage

report = OutputMessage()
report.load_from_catch2_xml("results.xml", "build.log")
report.generate_test_code_from_test_file("leap_test.cpp")
report.save_as_exercism_json("results.json")
```

`OutputMessage.to_json()` returns the same JSON text as a string instead of
writing it to a file. Each entry of `OutputMessage.tests` is a `TestResult`
dataclass, with these fields:

- `name`
- `status`
- `message`
- `output`
- `test_code`
- `task_id`

`TestResult.to_json()` renders one of them.

The module `catchreport.helpers` holds the small functions the conversion
uses:

- `ltrim`, `rtrim` and `trim` remove whitespace from the start, the end or
  both ends of a string.
- `read_file` returns a file's text.

Example output:

```json
{"version": 3, "status": "pass", "tests": [{"name": "not_divisible_by_4", "status": "pass", "test_code": "{\n    REQUIRE(!leap::is_leap_year(2015));\n}", "task_id": 1}]}
```

## What it does not do

`catchreport` only converts reports that already exist. It does not compile
or run the tests itself. The XML report and the compiler output must come
from an earlier build and test step.