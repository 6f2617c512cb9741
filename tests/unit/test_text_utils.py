import pytest

from utils.frontmatter import merge_frontmatter, parse_frontmatter, render_frontmatter, split_frontmatter
from utils.text import MAX_FILE_NAME_LENGTH, sanitize_file_name, sanitize_note_name


def test_sanitize_file_name_replaces_illegal_characters() -> None:
    assert sanitize_file_name("Client/Acme: Q1?") == "Client-Acme- Q1-"
    assert sanitize_file_name('a\\b*c"d<e>f|g') == "a-b-c-d-e-f-g"


def test_sanitize_file_name_whitespace_and_dots() -> None:
    assert sanitize_file_name("  ..hidden   project\tname  ") == "hidden project name"


def test_sanitize_file_name_caps_length() -> None:
    assert len(sanitize_file_name("x" * 400)) == MAX_FILE_NAME_LENGTH


def test_sanitize_note_name_only_replaces_characters() -> None:
    assert sanitize_note_name("Meeting: 1/2  ") == "Meeting- 1-2  "


def test_parse_frontmatter_coerces_values() -> None:
    text = "---\nproject: Alpha\ndue: 2024-03-01\ntags: [a, b]\ndone: true\n---\nBody\n"

    assert parse_frontmatter(text) == {
        "project": "Alpha",
        "due": "2024-03-01",
        "tags": "a, b",
        "done": True,
    }


def test_parse_frontmatter_without_block_or_with_bad_yaml() -> None:
    assert parse_frontmatter("# No frontmatter\n") == {}
    assert parse_frontmatter("---\nproject: [unclosed\n---\n") == {}


def test_merge_frontmatter_keeps_body_verbatim() -> None:
    text = "---\nstatus: open\n---\n\n# Title\n\n  indented  \n"

    merged = merge_frontmatter(text, {"project": "Alpha", "status": "done"})

    assert merged == "---\nstatus: done\nproject: Alpha\n---\n\n# Title\n\n  indented  \n"


def test_merge_frontmatter_adds_block_when_missing() -> None:
    assert merge_frontmatter("# Title\n", {"project": "Alpha"}) == "---\nproject: Alpha\n---\n\n# Title\n"


def test_merge_frontmatter_without_changes_returns_same_text() -> None:
    text = "---\nproject:   Alpha   # comment\n---\nbody"

    assert merge_frontmatter(text, {"project": "Alpha"}) is text


def test_merge_frontmatter_rejects_non_mapping_block() -> None:
    with pytest.raises(ValueError):
        merge_frontmatter("---\n- a\n- b\n---\n", {"project": "Alpha"})


def test_render_frontmatter_quotes_when_needed() -> None:
    block = render_frontmatter({"project": "Client/Acme: Q1?"})

    assert parse_frontmatter(block) == {"project": "Client/Acme: Q1?"}
    assert split_frontmatter(block + "body") == (block[4:-4], "body")
