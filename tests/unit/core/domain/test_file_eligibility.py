import pytest

from merge_marker_guard.core.domain.scanning import is_eligible, matching_exclude_pattern


@pytest.mark.parametrize("name", ["src/app.py", "test/foo.js", "README.md"])
def test_removed_files_are_never_eligible(make_file, name):
    assert is_eligible(make_file(name, status="removed"), []) is False


def test_exclude_pattern_is_substring_match(make_file):
    assert is_eligible(make_file("src/test/foo.js"), ["test/"]) is False
    assert is_eligible(make_file("src/foo.js"), ["test/"]) is True


def test_exclude_pattern_is_case_sensitive(make_file):
    assert is_eligible(make_file("src/Test/foo.js"), ["test/"]) is True


def test_exclude_pattern_is_not_a_glob(make_file):
    assert is_eligible(make_file("docs/readme.md"), ["*.md"]) is True


def test_no_patterns_means_eligible(make_file):
    assert is_eligible(make_file("src/foo.js"), []) is True


def test_unknown_status_stays_eligible(make_file):
    assert is_eligible(make_file("src/foo.js", status="mystery"), []) is True


def test_first_matching_pattern_is_returned(make_file):
    file = make_file("vendor/lib/test/x.js")

    assert matching_exclude_pattern(file, ["nope", "lib/", "test/"]) == "lib/"
    assert matching_exclude_pattern(file, ["nope"]) is None
