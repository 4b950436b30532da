import json

from scripts.check_directory import check


def _raw(items):
    return json.dumps(items).encode("utf-8")


def test_clean_directory_has_no_problems():
    assert check(_raw([{"id": "1", "nombre": "Ana"}, {"id": "2", "nombre": "Bruno"}])) == []


def test_reports_duplicates_and_shared_folders():
    problems = check(_raw([{"id": "A 1", "nombre": "x"}, {"id": "a_1", "nombre": "y"}, {"id": "a_1", "nombre": "z"}]))

    assert any("appears 2 times" in p for p in problems)
    assert any("'a_1'" in p and "share" in p for p in problems)


def test_empty_directory_is_flagged():
    assert check(_raw([])) == ["directory has no usable entries (every upload would be rejected)"]
