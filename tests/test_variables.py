import copy

import pytest

from anilist_mcp.core import variables as v
from anilist_mcp.models.types import MediaFormat, MediaSort, MediaStatus


def test_media_type_mapping():
    assert v.media_type_for("anime") == "ANIME"
    assert v.media_type_for("manga") == "MANGA"


def test_media_type_unknown_kind_asserts():
    with pytest.raises(AssertionError):
        v.media_type_for("novel")


@pytest.mark.parametrize("values, expected", [
    ([], None),
    (["TV"], "TV"),
    (["TV", "ONA"], ["TV", "ONA"]),
    ([MediaFormat.MOVIE], "MOVIE"),
])
def test_collapse(values, expected):
    assert v.collapse(values) == expected


def test_user_and_media_variables():
    assert v.user_variables({"username": "alice"}) == {"username": "alice"}
    assert v.media_variables({"id": 21, "type": "manga"}) == {"id": 21, "type": "MANGA"}


def test_media_list_defaults():
    out = v.media_list_variables({"username": "alice", "type": "anime"})
    assert out == {
        "username": "alice",
        "type": "ANIME",
        "chunk": 1,
        "perChunk": 10,
        "sort": ["STARTED_ON_DESC"],
    }


def test_media_list_passes_chunking_through():
    out = v.media_list_variables({"username": "bob", "type": "manga", "chunk": 3, "perChunk": 50})
    assert out["chunk"] == 3
    assert out["perChunk"] == 50
    assert out["type"] == "MANGA"
    assert out["sort"] == ["STARTED_ON_DESC"]


def test_search_single_format_is_scalar():
    out = v.search_variables({"type": "anime", "format": [MediaFormat.MOVIE]})
    assert out["format"] == "MOVIE"


def test_search_empty_format_is_omitted():
    out = v.search_variables({"type": "anime", "format": []})
    assert "format" not in out


def test_search_many_formats_stay_a_list():
    out = v.search_variables({"type": "anime", "format": ["TV", "MOVIE", "OVA"]})
    assert out["format"] == ["TV", "MOVIE", "OVA"]


def test_search_default_format_by_kind():
    assert v.search_variables({"type": "anime"})["format"] == ["TV", "ONA"]
    assert v.search_variables({"type": "manga", "format": None})["format"] == "MANGA"


def test_search_sort_collapsing_and_default():
    assert v.search_variables({"type": "anime"})["sort"] == ["POPULARITY_DESC", "SCORE_DESC"]
    assert v.search_variables({"type": "anime", "sort": [MediaSort.TRENDING_DESC]})["sort"] == "TRENDING_DESC"
    assert "sort" not in v.search_variables({"type": "anime", "sort": []})
    assert v.search_variables({"type": "anime", "sort": ["SCORE_DESC", "ID"]})["sort"] == ["SCORE_DESC", "ID"]


def test_search_unset_fields_are_omitted():
    out = v.search_variables({
        "type": "manga",
        "search": "berserk",
        "page": None,
        "isAdult": None,
        "genres": None,
    })
    assert out == {"type": "MANGA", "search": "berserk", "format": "MANGA",
                   "sort": ["POPULARITY_DESC", "SCORE_DESC"]}


def test_search_arrays_are_not_collapsed():
    out = v.search_variables({
        "type": "anime",
        "genres": ["Romance"],
        "excludedGenres": ["Horror"],
        "tags": ["Time Skip"],
        "excludedTags": ["Gore"],
        "licensedBy": [7],
        "status": MediaStatus.FINISHED,
        "isAdult": False,
    })
    assert out["genres"] == ["Romance"]
    assert out["excludedGenres"] == ["Horror"]
    assert out["tags"] == ["Time Skip"]
    assert out["excludedTags"] == ["Gore"]
    assert out["licensedBy"] == [7]
    assert out["status"] == "FINISHED"
    assert out["isAdult"] is False


def test_search_is_pure():
    args = {"type": "anime", "format": ["TV"], "sort": ["SCORE_DESC", "ID"], "genres": ["Action"]}
    before = copy.deepcopy(args)

    first = v.search_variables(args)
    second = v.search_variables(args)

    assert first == second
    assert args == before


def test_search_defaults_are_not_shared():
    out = v.search_variables({"type": "anime"})
    out["format"].append("MOVIE")
    out["sort"].append("ID")
    assert v.DEFAULT_FORMATS["anime"] == ["TV", "ONA"]
    assert v.DEFAULT_SEARCH_SORT == ["POPULARITY_DESC", "SCORE_DESC"]
