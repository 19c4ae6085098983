from __future__ import annotations

import copy

from core.domain.errors import SchemaValidationError
from core.domain.models import AccessToken, RelatedResult, SearchResult
from core.domain.result import Err, Ok
from core.schema import ROOT_PATH, array_of, number, object_of, string, validate

ARTIST = object_of("ArtistShape", name=string, id=string)
PAGE = object_of("PageShape", items=array_of(ARTIST))
SEARCH = object_of("SearchShape", artists=PAGE)


def test_object_of_accepts_a_field_called_name() -> None:
    artist = object_of("Artist", name=string, id=string)

    result = validate(artist, {"name": "Bjork", "id": "7w29"})

    assert isinstance(result, Ok)
    assert result.value.name == "Bjork"
    assert validate(artist, {"id": "7w29"}).error.paths == ("name",)


def test_primitives_accept_matching_values() -> None:
    assert validate(string, "abc") == Ok("abc")
    assert validate(number, 3600).unwrap() == 3600
    assert validate(number, 1.5).unwrap() == 1.5


def test_primitives_are_strict() -> None:
    assert isinstance(validate(string, 12), Err)
    assert isinstance(validate(number, "3600"), Err)


def test_nested_object_success_returns_typed_value() -> None:
    raw = {"artists": {"items": [{"name": "Bjork", "id": "7w29"}]}}

    result = validate(SEARCH, raw)

    assert isinstance(result, Ok)
    assert result.value.artists.items[0].name == "Bjork"
    assert result.value.artists.items[0].id == "7w29"


def test_extra_fields_are_ignored_and_input_untouched() -> None:
    raw = {
        "artists": {
            "href": "https://api.example/search",
            "items": [{"name": "Bjork", "id": "7w29", "popularity": 70}],
            "total": 1,
        }
    }
    snapshot = copy.deepcopy(raw)

    result = validate(SearchResult, raw)

    assert isinstance(result, Ok)
    assert result.value.model_dump() == {"artists": {"items": [{"name": "Bjork", "id": "7w29"}]}}
    assert raw == snapshot


def test_error_reports_every_violated_path() -> None:
    raw = {"access_token": 42, "token_type": "Bearer"}

    result = validate(AccessToken, raw)

    assert isinstance(result, Err)
    assert isinstance(result.error, SchemaValidationError)
    assert set(result.error.paths) == {"access_token", "expires_in"}
    message = str(result.error)
    assert "access_token" in message
    assert "expires_in" in message


def test_error_paths_include_list_indexes() -> None:
    raw = {"artists": {"items": [{"name": "ok", "id": "1"}, {"name": None, "id": "2"}, {"id": "3"}]}}

    result = validate(SEARCH, raw)

    assert isinstance(result, Err)
    assert result.error.paths == ("artists.items.1.name", "artists.items.2.name")


def test_array_of_object_validates_each_item() -> None:
    artists = array_of(ARTIST)

    assert isinstance(validate(artists, [{"name": "a", "id": "1"}]), Ok)
    failed = validate(artists, [{"name": "a"}])
    assert isinstance(failed, Err)
    assert failed.error.paths == ("0.id",)


def test_wrong_root_type_reports_root_path() -> None:
    result = validate(RelatedResult, None)

    assert isinstance(result, Err)
    assert result.error.paths == (ROOT_PATH,)


def test_wrong_composite_type_is_reported_at_its_path() -> None:
    result = validate(RelatedResult, {"artists": {"items": []}})

    assert isinstance(result, Err)
    assert result.error.paths == ("artists",)
