"""
Tests unitaires pour la conversion des noms REST <-> GraphQL.
"""

import pytest

from graphql_moviedb.core.naming import constant_case, to_graphql_key, to_rest_key


class TestToRestKey:
    """Tests pour to_rest_key (GraphQL -> REST)."""

    @pytest.mark.parametrize(
        "key, expected",
        [
            ("voteAverage_GTE", "vote_average.gte"),
            ("releaseDate_DESC", "release_date.desc"),
            ("withRuntime_lte", "with_runtime.lte"),
            ("RELEASE_DATE__DESC", "release_date.desc"),
            ("primaryReleaseYear", "primary_release_year"),
            ("NOW_PLAYING", "now_playing"),
            ("page", "page"),
        ],
    )
    def test_converts_graphql_keys(self, key: str, expected: str) -> None:
        assert to_rest_key(key) == expected

    @pytest.mark.parametrize(
        "key", ["vote_average.gte", "release_date.desc", "with_genres", "iso_639_1"]
    )
    def test_rest_keys_are_unchanged(self, key: str) -> None:
        """Une cle deja au format REST n'est pas modifiee."""
        assert to_rest_key(key) == key

    def test_is_idempotent(self) -> None:
        once = to_rest_key("voteCount_GTE")
        assert to_rest_key(once) == once

    def test_operator_without_separator_is_not_split(self) -> None:
        """Seul un suffixe d'operateur separe par un underscore est converti."""
        assert to_rest_key("description") == "description"
        assert to_rest_key("ascending") == "ascending"

    def test_non_string_keys_are_returned_as_is(self) -> None:
        assert to_rest_key(42) == 42
        assert to_rest_key("") == ""


class TestToGraphqlKey:
    """Tests pour to_graphql_key (REST -> GraphQL)."""

    @pytest.mark.parametrize(
        "key, expected",
        [
            ("genre_ids", "genreIds"),
            ("total_results", "totalResults"),
            ("imdb_id", "imdbId"),
            ("id", "id"),
            ("genreIds", "genreIds"),
        ],
    )
    def test_converts_rest_keys(self, key: str, expected: str) -> None:
        assert to_graphql_key(key) == expected

    @pytest.mark.parametrize("key", ["voteAverage", "releaseDate", "originalTitle"])
    def test_round_trip_preserves_camel_case(self, key: str) -> None:
        assert to_graphql_key(to_rest_key(key)) == key


class TestConstantCase:
    def test_words_are_upper_cased_and_joined(self) -> None:
        assert constant_case("Behind the Scenes") == "BEHIND_THE_SCENES"

    def test_snake_and_camel_case(self) -> None:
        assert constant_case("created_at") == "CREATED_AT"
        assert constant_case("releaseDate") == "RELEASE_DATE"

    def test_empty_text(self) -> None:
        assert constant_case("") == ""
