from pathlib import Path

import pytest

from .core.data_structures import UNDEFINED, Report
from .core.enums import Priority
from .core.exceptions import UnmappedCategoryError
from .parsers.grammar import Grammar, header_kind
from .parsers.nag_fortran import (
    _BODY,
    CATEGORIES,
    NAG_FORTRAN_GRAMMAR,
    PRIORITIES,
    NagFortranParser,
)

# Use relative imports as the directory is a package

TESTDATA = Path(__file__).parent / "testdata"

FATAL_ERROR_MESSAGE = "SAME_NAME is not a derived type\n             detected at ::@N"

# (fixture, file name, category, priority, message, line)
EXPECTED_ISSUES = [
    (
        "NagFortranInfo.txt",
        "C:/file1.inc",
        "Info",
        Priority.LOW,
        "Unterminated last line of INCLUDE file",
        1,
    ),
    (
        "NagFortranWarning.txt",
        "C:/file2.f90",
        "Warning",
        Priority.NORMAL,
        "Procedure pointer F pointer-assigned but otherwise unused",
        5,
    ),
    (
        "NagFortranQuestionable.txt",
        "/file3.f90",
        "Questionable",
        Priority.NORMAL,
        "Array constructor has polymorphic element P(5) (but the constructor value will not be polymorphic)",
        12,
    ),
    (
        "NagFortranExtension.txt",
        "file4.f90",
        "Extension",
        Priority.NORMAL,
        "Left-hand side of intrinsic assignment is allocatable polymorphic variable X",
        9,
    ),
    (
        "NagFortranObsolescent.txt",
        "file5.f",
        "Obsolescent",
        Priority.NORMAL,
        "Fixed source form",
        1,
    ),
    (
        "NagFortranDeletedFeatureUsed.txt",
        "file6.f90",
        "Deleted feature used",
        Priority.NORMAL,
        "assigned GOTO statement",
        4,
    ),
    (
        "NagFortranError.txt",
        "file7.f90",
        "Error",
        Priority.HIGH,
        "Character function length 7 is not same as argument F (no. 1) in reference to SUB from O8K (expected length 6)",
        0,
    ),
    (
        "NagFortranRuntimeError.txt",
        "file8.f90",
        "Runtime Error",
        Priority.HIGH,
        "Reference to undefined POINTER P",
        7,
    ),
    (
        "NagFortranFatalError.txt",
        "file9.f90",
        "Fatal Error",
        Priority.HIGH,
        FATAL_ERROR_MESSAGE,
        5,
    ),
    (
        "NagFortranPanic.txt",
        "file10.f90",
        "Panic",
        Priority.HIGH,
        "User requested panic",
        1,
    ),
]


def parse(name: str) -> Report:
    return NagFortranParser().parse((TESTDATA / name).read_text(encoding="utf-8"))


def assert_issue(issue, file_name, category, priority, message, line):
    assert issue.file_name == file_name
    assert issue.category == category
    assert issue.priority is priority
    assert issue.message == message
    assert issue.description == ""
    assert issue.package_name == "-"
    assert issue.line_start == line
    assert issue.line_end == line
    assert issue.column_start == 0
    assert issue.column_end == 0


def histogram(priority: Priority):
    return (
        int(priority is Priority.HIGH),
        int(priority is Priority.NORMAL),
        int(priority is Priority.LOW),
    )


# --- Tests for single message fixtures ---


@pytest.mark.parametrize(
    "fixture, file_name, category, priority, message, line", EXPECTED_ISSUES
)
def test_parse_single_message(fixture, file_name, category, priority, message, line):
    """Each message kind produces exactly one fully populated issue."""
    report = parse(fixture)

    assert len(report) == 1
    assert report.priorities == histogram(priority)
    assert_issue(report.get(0), file_name, category, priority, message, line)


# --- Tests for the combined fixture ---


def test_parse_all_messages():
    """All ten message kinds in one file come back in input order."""
    report = parse("NagFortran.txt")

    assert len(report) == 10
    assert report.priorities == (4, 5, 1)
    for issue, expected in zip(report, EXPECTED_ISSUES):
        assert_issue(issue, *expected[1:])


def test_parse_is_idempotent():
    """Parsing the same text twice yields equal reports."""
    text = (TESTDATA / "NagFortran.txt").read_text(encoding="utf-8")
    parser = NagFortranParser()

    first = parser.parse(text)
    second = parser.parse(text)

    assert first == second
    assert [i.message for i in first] == [i.message for i in second]


def test_mixed_scenario():
    """Info, Warning, multi-line Fatal Error and Panic in one input."""
    text = (
        "Info: C:/file1.inc, line 1: Unterminated last line of INCLUDE file\n"
        "Warning: C:/file2.f90, line 5: Procedure pointer F pointer-assigned but otherwise unused\n"
        "Fatal Error: file9.f90, line 5: SAME_NAME is not a derived type\n"
        "             detected at ::@N\n"
        "Panic: file10.f90, line 1: User requested panic\n"
    )

    report = NagFortranParser().parse(text)

    assert len(report) == 4
    assert report.priorities == (2, 1, 1)
    assert [i.category for i in report] == ["Info", "Warning", "Fatal Error", "Panic"]
    assert report[2].message == FATAL_ERROR_MESSAGE


# --- Tests for continuation lines ---


def test_continuation_lines_until_next_header():
    """Every non-header line up to the next header joins the open message."""
    text = (
        "Error: a.f90, line 3: First line\n"
        "  second line\n"
        "\tthird line\n"
        "Warning: b.f90, line 4: Next\n"
    )

    report = NagFortranParser().parse(text)

    assert len(report) == 2
    assert report[0].message == "First line\n  second line\n\tthird line"
    assert report[1].message == "Next"


def test_continuation_lines_until_end_of_input():
    """The last message is closed at end of input without a trailing newline."""
    text = "Panic: x.f90, line 2: Crash\n   detail one\n   detail two"

    report = NagFortranParser().parse(text)

    assert len(report) == 1
    assert report[0].message == "Crash\n   detail one\n   detail two"


def test_continuation_keeps_crlf_line_breaks():
    """Continuation lines are joined with the line break used in the input."""
    text = "Fatal Error: file9.f90, line 5: SAME_NAME is not a derived type\r\n             detected at ::@N\r\n"

    report = NagFortranParser().parse(text)

    assert report[0].message == "SAME_NAME is not a derived type\r\n             detected at ::@N"


def test_lines_before_first_header_are_ignored():
    """Noise before any header is discarded."""
    text = (
        "NAG Fortran Compiler Release 7.1(Hanzomon) Build 7101\n"
        "\n"
        "Warning: b.f90, line 4: Unused variable X\n"
    )

    report = NagFortranParser().parse(text)

    assert len(report) == 1
    assert report[0].message == "Unused variable X"


# --- Tests for header recognition ---


def test_error_without_line_number():
    """A header without a line number gets line 0 instead of failing."""
    report = NagFortranParser().parse("Error: file7.f90: Something is wrong\n")

    assert report[0].line_start == 0
    assert report[0].line_end == 0
    assert report[0].file_name == "file7.f90"


def test_header_without_file_name():
    """A header without a location gets the undefined file name."""
    report = NagFortranParser().parse("Panic: User requested panic\n")

    assert len(report) == 1
    assert report[0].file_name == UNDEFINED
    assert report[0].line_start == 0
    assert report[0].message == "User requested panic"


@pytest.mark.parametrize(
    "line, file_name, line_number, message",
    [
        ("Warning: C:/My Project/file2.f90, line 5: Unused X", "C:/My Project/file2.f90", 5, "Unused X"),
        ("Warning: C:/Program Files/src/a.f90: Unused X", "C:/Program Files/src/a.f90", 0, "Unused X"),
        (r"Error: C:\Users\me\src\solver.f90, line 12: Bad kind", r"C:\Users\me\src\solver.f90", 12, "Bad kind"),
        ("Info: ./build.v2/mod.f90, line 3: Note this", "./build.v2/mod.f90", 3, "Note this"),
        ("Warning: Makefile, line 5: Unused X", "Makefile", 5, "Unused X"),
        ("Error: file7.f90: Value 1.5: out of range", "file7.f90", 0, "Value 1.5: out of range"),
    ],
)
def test_header_locations(line, file_name, line_number, message):
    """File names may contain spaces, backslashes and dots, or lack an extension."""
    report = NagFortranParser().parse(line + "\n")

    assert len(report) == 1
    assert report[0].file_name == file_name
    assert report[0].line_start == line_number
    assert report[0].line_end == line_number
    assert report[0].message == message


@pytest.mark.parametrize(
    "line, message",
    [
        ("Panic: User requested panic", "User requested panic"),
        ("Warning: Unused variable X. Consider: removing it", "Unused variable X. Consider: removing it"),
        ("Runtime Error: *** Arithmetic exception: Floating divide by zero", "*** Arithmetic exception: Floating divide by zero"),
    ],
)
def test_message_without_location_is_not_a_path(line, message):
    """Text that only resembles a location stays in the message."""
    report = NagFortranParser().parse(line)

    assert report[0].file_name == UNDEFINED
    assert report[0].line_start == 0
    assert report[0].message == message


@pytest.mark.parametrize(
    "line, category",
    [
        ("Runtime Error: f.f90, line 1: msg", "Runtime Error"),
        ("Fatal Error: f.f90, line 1: msg", "Fatal Error"),
        ("Error: f.f90, line 1: msg", "Error"),
        ("Deleted feature used: f.f90, line 1: msg", "Deleted feature used"),
    ],
)
def test_overlapping_markers(line, category):
    """Markers sharing a word are never confused with each other."""
    report = NagFortranParser().parse(line)

    assert len(report) == 1
    assert report[0].category == category


@pytest.mark.parametrize(
    "line",
    [
        "Note: f.f90, line 1: not a NAG category",
        "warning: f.f90, line 1: lower case marker",
        "  Warning: f.f90, line 1: indented marker",
        "Warning:f.f90, line 1: no space after marker",
        "The Error: f.f90, line 1: marker inside text",
    ],
)
def test_non_header_lines_produce_nothing(line):
    """Lines without an anchored, case-sensitive marker are not headers."""
    assert len(NagFortranParser().parse(line)) == 0


@pytest.mark.parametrize(
    "line",
    [
        "Warning:",
        "Warning: ",
        "Error: file7.f90, line 3:",
        "Error: file7.f90:   ",
    ],
)
def test_malformed_headers_are_dropped(line):
    """A header without a message body yields no issue."""
    assert len(NagFortranParser().parse(line + "\n")) == 0


def test_malformed_header_closes_open_message():
    """Lines after a malformed header are not folded into the previous issue."""
    text = (
        "Warning: a.f90, line 1: Kept\n"
        "Error: b.f90, line 2:\n"
        "  orphan continuation\n"
        "Info: c.f90, line 3: Also kept\n"
    )

    report = NagFortranParser().parse(text)

    assert [i.message for i in report] == ["Kept", "Also kept"]


@pytest.mark.parametrize("text", ["", "   ", "\n\n", " \t\n  \n"])
def test_empty_input(text):
    """Empty or whitespace-only input yields an empty report."""
    report = NagFortranParser().parse(text)

    assert len(report) == 0
    assert report.priorities == (0, 0, 0)


# --- Tests for the priority mapping ---


@pytest.mark.parametrize("category", CATEGORIES)
def test_every_category_has_a_priority(category):
    """The header table and the priority table cover the same categories."""
    assert NAG_FORTRAN_GRAMMAR.priority_of(category) is PRIORITIES[category]


def test_categories_sorted_most_specific_first():
    """No marker is preceded by a shorter one."""
    lengths = [len(c) for c in CATEGORIES]
    assert lengths == sorted(lengths, reverse=True)


def test_unmapped_category_is_reported_and_dropped():
    """An issue whose category has no priority is dropped and reported."""
    grammar = Grammar(
        name="nag-fortran-drifted",
        kinds=NAG_FORTRAN_GRAMMAR.kinds + (header_kind("Remark", _BODY),),
        priorities=PRIORITIES,
    )
    errors = []
    parser = NagFortranParser(grammar, on_internal_error=errors.append)

    report = parser.parse(
        "Remark: a.f90, line 1: Not in the table\n"
        "Warning: b.f90, line 2: Still parsed\n"
    )

    assert len(report) == 1
    assert report[0].category == "Warning"
    assert len(errors) == 1
    assert isinstance(errors[0], UnmappedCategoryError)
    assert errors[0].category == "Remark"


def test_unmapped_category_without_handler():
    """Without a handler the issue is still dropped and parsing goes on."""
    grammar = Grammar(
        name="nag-fortran-empty-table",
        kinds=NAG_FORTRAN_GRAMMAR.kinds,
        priorities={},
    )

    report = NagFortranParser(grammar).parse("Warning: b.f90, line 2: Dropped\n")

    assert len(report) == 0
