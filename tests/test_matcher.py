import math

import pytest

from bookgroups.catalog.matcher import edit_distance, find_exact, match_title, search


def _books(*titles):
    return [{"Title": t, "Id": i} for i, t in enumerate(titles)]


@pytest.mark.parametrize(
    "a, b, expected",
    [
        ("pinocco", "pinocchio", 2),
        ("kitten", "sitting", 3),
        ("", "heidi", 5),
        ("heidi", "", 5),
        ("", "", 0),
        ("ab", "ba", 2),
        ("grimm’s", "grimm's", 1),
    ],
)
def test_edit_distance(a, b, expected):
    assert edit_distance(a, b) == expected


@pytest.mark.parametrize("a, b", [("peter pan", "peter pan (english library)"), ("heidi", "hedi"), ("", "x")])
def test_edit_distance_is_symmetric(a, b):
    assert edit_distance(a, b) == edit_distance(b, a)


def test_edit_distance_identity():
    for s in ["", "Snow White", "Boucle d’Or et Les Trois Ours"]:
        assert edit_distance(s, s) == 0


def test_search_empty_candidates():
    result = search("anything", [])
    assert result.record is None
    assert result.distance == math.inf
    assert not result.found


def test_search_returns_closest():
    books = _books("The Snow Queen", "Pinocchio", "Heidi")
    result = search("Pinocco", books)
    assert result.record == {"Title": "Pinocchio", "Id": 1}
    assert result.distance == 2
    assert not result.exact


def test_search_is_case_insensitive():
    result = search("HEIDY", _books("Peter Pan", "heidi"))
    assert result.record["Title"] == "heidi"
    assert result.distance == 1


def test_search_distance_is_minimal():
    books = _books("Snow White", "The Snow Queen", "The Sleeping Beauty", "Peter Pan", "Heidi")
    query = "snow quen"
    result = search(query, books)
    distances = [edit_distance(query, b["Title"].lower()) for b in books]
    assert result.distance == min(distances)
    assert result.record == books[distances.index(min(distances))]


def test_search_tie_keeps_first():
    books = _books("cat", "bat", "hat")
    for _ in range(3):
        result = search("mat", books)
        assert result.record["Title"] == "cat"
        assert result.distance == 1


def test_search_reports_exact_distance_after_pruning():
    books = _books("Pinocchio", "The Complete Brothers Grimm Fairy Tales", "Heidi")
    result = search("Heidi and friends", books)
    assert result.record["Title"] == "Heidi"
    assert result.distance == edit_distance("heidi and friends", "heidi")


def test_search_query_longer_than_titles():
    result = search("a very long query that exceeds every title", _books("", "ab"))
    assert result.record["Title"] == "ab"


def test_find_exact_first_match_wins():
    books = _books("Snow White", "SNOW WHITE")
    assert find_exact("snow white", books)["Id"] == 0
    assert find_exact("snow whit", books) is None


def test_match_title_prefers_exact():
    books = _books("The Little Princes", "The Little Prince")
    result = match_title("the little prince", books)
    assert result.exact
    assert result.distance == 0
    assert result.record["Id"] == 1


def test_match_title_falls_back_to_fuzzy():
    result = match_title("Pinocco", _books("Pinocchio"))
    assert not result.exact
    assert result.distance == 2


def test_match_title_custom_title_field():
    books = [{"name": "Heidi"}, {"name": "Peter Pan"}]
    assert match_title("peter pann", books, title_field="name").record == {"name": "Peter Pan"}


def test_match_title_rejects_empty_query():
    with pytest.raises(ValueError):
        match_title("", _books("Heidi"))
