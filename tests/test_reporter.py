import dataclasses

import pytest

from lllcheck.core.lint.reporter import Issue, ISSUE_SOURCE


def test_issue_defaults():
    issue = Issue(file_path="a.go", line=3, message="line is 130 characters")
    assert issue.column == 0
    assert issue.source == ISSUE_SOURCE == "LLL"


def test_issue_is_immutable():
    issue = Issue(file_path="a.go", line=3, message="m")
    with pytest.raises(dataclasses.FrozenInstanceError):
        issue.line = 4


def test_to_text():
    issue = Issue(file_path="pkg/a.go", line=7, column=1, message="line is more than 65536 characters")
    assert issue.to_text() == "pkg/a.go:7:1: line is more than 65536 characters [LLL]"
    assert str(issue) == issue.to_text()


def test_to_dict():
    issue = Issue(file_path="a.go", line=2, message="line is 150 characters")
    assert issue.to_dict() == {
        "file_path": "a.go",
        "line": 2,
        "column": 0,
        "message": "line is 150 characters",
        "source": "LLL",
    }


def test_from_dict_accepts_short_file_key():
    issue = Issue.from_dict({"file": "b.go", "line": 5, "message": "line is 121 characters"})
    assert issue == Issue(file_path="b.go", line=5, message="line is 121 characters")
