import pytest

from mdsync.values import extract_link_target, link_sort_key, normalize_value


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (None, ""),
        (True, "true"),
        (False, "false"),
        ("done", "done"),
        (3, "3"),
        (2.5, "2.5"),
        ("line one\nline two", "line one line two"),
    ],
)
def test_normalize_value(value, expected) -> None:
    assert normalize_value(value) == expected


@pytest.mark.parametrize(
    ("cell", "expected"),
    [
        ("[[Note]]", "Note"),
        ("[[folder/sub/Note]]", "Note"),
        ("[[folder\\Note]]", "Note"),
        ("[[Note|Shown alias]]", "Note"),
        ("[[Note#Heading]]", "Note"),
        ("[[Note^block-id]]", "Note"),
        ("[[dir/Note#Heading|Alias]]", "Note"),
        ("  [[ Spaced Note ]]  ", "Spaced Note"),
        ("plain text", "plain text"),
        ("a/b/plain", "plain"),
        ("", ""),
        (None, ""),
    ],
)
def test_extract_link_target(cell, expected) -> None:
    assert extract_link_target(cell) == expected


def test_link_sort_key_ignores_case() -> None:
    cells = ["[[Gamma]]", "[[alpha]]", "[[Beta]]"]

    assert sorted(cells, key=link_sort_key) == ["[[alpha]]", "[[Beta]]", "[[Gamma]]"]
