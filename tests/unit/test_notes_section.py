from mdsync.notes import get_table_from_section, rebuild_section, sync_section_table, table_block
from mdsync.tables import render_table

TABLE = render_table(["Note", "status"], [["[[a]]", "done"]])


def test_existing_table_is_replaced_and_prose_kept() -> None:
    doc = (
        "# Title\n\n## Notes\n\nIntro text\n\n"
        "| Note | status |\n| :--- | :--- |\n| [[old]] | x |\n\n"
        "Outro text\n\n## Other\nkeep\n"
    )

    result = sync_section_table(doc, TABLE)

    assert result == (
        "# Title\n\n## Notes\n\nIntro text\n\n"
        "| Note | status |\n| :--- | :--- |\n| [[a]] | done |\n\n"
        "Outro text\n\n## Other\nkeep\n"
    )


def test_sync_is_idempotent() -> None:
    doc = "# T\n\n## Notes\nfree text\n\n| x |\n| --- |\n| y |\nmore\n## Next\n"

    first = sync_section_table(doc, TABLE)
    second = sync_section_table(first, TABLE)

    assert second == first


def test_missing_header_is_appended() -> None:
    result = sync_section_table("# T", TABLE)

    assert result == "# T\n\n## Notes\n\n" + "\n".join(TABLE) + "\n"
    assert sync_section_table(result, TABLE) == result


def test_section_without_table_keeps_prose_after_table() -> None:
    result = sync_section_table("## Notes\nSome prose\n", TABLE)

    assert result == "## Notes\n\n" + "\n".join(TABLE) + "\n\nSome prose\n"
    assert sync_section_table(result, TABLE) == result


def test_second_table_in_section_is_dropped() -> None:
    doc = (
        "## Notes\n\n| Note |\n| --- |\n| [[old]] |\n\nbetween\n\n"
        "| other |\n| --- |\n| row |\n\n## After\n"
    )

    result = sync_section_table(doc, TABLE)

    assert "| other |" not in result
    assert "| [[old]] |" not in result
    assert result.count("| Note | status |") == 1
    assert "between" in result
    assert result.endswith("## After\n")


def test_sections_outside_notes_are_untouched() -> None:
    doc = "## Before\n| keep | me |\n## Notes\n## After\n| also | kept |\n"

    result = sync_section_table(doc, TABLE)

    assert result.startswith("## Before\n| keep | me |\n## Notes\n\n| Note | status |")
    assert result.endswith("## After\n| also | kept |\n")


def test_sub_headers_stay_inside_section() -> None:
    doc = "## Notes\n| a |\n| - |\n### Details\ntext\n## End"

    result = sync_section_table(doc, TABLE)

    assert result == "## Notes\n\n" + "\n".join(TABLE) + "\n### Details\ntext\n## End"


def test_rebuild_section_leading_blank_lines_collapse() -> None:
    assert rebuild_section(["", "", "| a |", "| - |"], ["| b |"]) == ["", "| b |"]


def test_table_block_is_first_contiguous_run() -> None:
    lines = ["text", "| a |", "| - |", "", "| b |"]

    assert table_block(lines) == ["| a |", "| - |"]


def test_get_table_from_section() -> None:
    doc = "## Notes\n\n| Note | status |\n| :--- | :--- |\n| [[a]] | done |\n"

    parsed = get_table_from_section(doc, "Notes")

    assert parsed is not None
    assert parsed.headers == ["Note", "status"]
    assert parsed.rows == [["[[a]]", "done"]]
    assert get_table_from_section("## Notes\ntext\n", "Notes") is None
