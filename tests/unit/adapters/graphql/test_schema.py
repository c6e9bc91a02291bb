"""
Tests d'execution du schema GraphQL.

Les requetes sont executees directement sur le schema avec un contexte dont
les clients TMDB n'ont pas de cache ; l'API est simulee avec respx. Ces
tests verifient:
- Les champs de detail recuperes a la demande, une seule fois par objet
- La conversion des genreIds en genres avec un seul appel de liste
- La resolution des unions (recherche multiple, credits, elements de liste)
- La traduction des filtres et du tri de discover
- Les mutations de listes et les erreurs d'authentification
"""

import json

import httpx
import pytest
import respx

from graphql_moviedb.adapters.graphql.context import GraphQLContext
from graphql_moviedb.adapters.graphql.errors import format_error
from graphql_moviedb.adapters.graphql.schema import schema
from graphql_moviedb.core.exceptions import AuthenticationError, UnsupportedMediaTypeError
from tests.fixtures.tmdb_responses import (
    TMDB_MOVIE_DETAILS_RESPONSE,
    TMDB_MOVIE_GENRES_RESPONSE,
    TMDB_NOT_FOUND_RESPONSE,
    TMDB_PERSON_RESPONSE,
    TMDB_SEARCH_MOVIE_RESPONSE,
    TMDB_SEARCH_MULTI_RESPONSE,
    TMDB_SEASON_RESPONSE,
    TMDB_SHOW_DETAILS_RESPONSE,
    TMDB_UNAUTHORIZED_RESPONSE,
    TMDB_V4_ADD_ITEMS_RESPONSE,
    TMDB_V4_CREATE_LIST_RESPONSE,
    TMDB_V4_LIST_RESPONSE,
)

V3_URL = "https://api.themoviedb.org/3"
V4_URL = "https://api.themoviedb.org/4"


async def execute(query: str, context: GraphQLContext, **variables):
    """Execute une operation puis ferme les clients du contexte."""
    result = await schema.execute(query, variable_values=variables or None, context_value=context)
    await context.close()
    return result


class TestMovieQueries:
    """Requetes sur les films."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_search_resolves_genres_with_one_call(
        self, respx_mock: respx.Router, context: GraphQLContext
    ) -> None:
        """Les genres de tous les films viennent d'un seul appel /genre/movie/list."""
        search = respx_mock.get(f"{V3_URL}/search/movie").mock(
            return_value=httpx.Response(200, json=TMDB_SEARCH_MOVIE_RESPONSE)
        )
        genres = respx_mock.get(f"{V3_URL}/genre/movie/list").mock(
            return_value=httpx.Response(200, json=TMDB_MOVIE_GENRES_RESPONSE)
        )

        result = await execute(
            """
            query {
              movies(query: "Matrix") {
                results { id title genres { name } }
                meta { page totalResults }
              }
            }
            """,
            context,
        )

        assert result.errors is None
        movies = result.data["movies"]
        assert movies["meta"] == {"page": 1, "totalResults": 100}
        assert movies["results"][0] == {
            "id": "603",
            "title": "The Matrix",
            "genres": [{"name": "Action"}, {"name": "Science Fiction"}],
        }
        assert [genre["name"] for genre in movies["results"][1]["genres"]] == [
            "Adventure",
            "Action",
            "Thriller",
            "Science Fiction",
        ]
        assert search.calls.last.request.url.params["query"] == "Matrix"
        assert genres.call_count == 1

    @pytest.mark.asyncio
    @respx.mock
    async def test_predefined_list_without_query(
        self, respx_mock: respx.Router, context: GraphQLContext
    ) -> None:
        route = respx_mock.get(f"{V3_URL}/movie/top_rated").mock(
            return_value=httpx.Response(200, json={"page": 3, "results": [], "total_pages": 9})
        )

        result = await execute(
            "{ movies(list: TOP_RATED, page: 3) { results { id } meta { page totalPages } } }",
            context,
        )

        assert result.errors is None
        assert result.data["movies"] == {"results": [], "meta": {"page": 3, "totalPages": 9}}
        assert route.calls.last.request.url.params["page"] == "3"

    @pytest.mark.asyncio
    @respx.mock
    async def test_movie_details_in_one_call(
        self, respx_mock: respx.Router, context: GraphQLContext
    ) -> None:
        """Tous les champs de detail sont servis par la reponse de detail."""
        route = respx_mock.get(f"{V3_URL}/movie/603").mock(
            return_value=httpx.Response(200, json=TMDB_MOVIE_DETAILS_RESPONSE)
        )

        result = await execute(
            """
            {
              movie(id: 603) {
                title
                mediaType
                revenue
                genres { id name }
                credits { cast { name character } crew { name job } }
                images { posters { filePath iso_639_1 } backdrops { width } }
                videos { type site iso_3166_1 }
                reviews { author rating }
                productionCompanies { name }
              }
            }
            """,
            context,
        )

        assert result.errors is None
        movie = result.data["movie"]
        assert movie["mediaType"] == "MOVIE"
        assert movie["revenue"] == 463517383
        assert movie["genres"][0] == {"id": "28", "name": "Action"}
        assert movie["credits"]["cast"] == [{"name": "Keanu Reeves", "character": "Neo"}]
        assert movie["credits"]["crew"][0]["job"] == "Director"
        assert movie["images"]["posters"][0]["iso_639_1"] == "en"
        assert movie["videos"] == [
            {"type": "BEHIND_THE_SCENES", "site": "YouTube", "iso_3166_1": "US"}
        ]
        assert movie["reviews"] == [{"author": "Wuchak", "rating": 9.0}]
        assert movie["productionCompanies"] == [{"name": "Village Roadshow Pictures"}]
        assert route.call_count == 1

    @pytest.mark.asyncio
    @respx.mock
    async def test_detail_fields_of_search_result_fetched_once(
        self, respx_mock: respx.Router, context: GraphQLContext
    ) -> None:
        """Plusieurs champs de detail d'un resultat partiel partagent un appel."""
        respx_mock.get(f"{V3_URL}/search/movie").mock(
            return_value=httpx.Response(
                200,
                json={"page": 1, "results": [{"id": 603, "title": "The Matrix"}]},
            )
        )
        details = respx_mock.get(f"{V3_URL}/movie/603").mock(
            return_value=httpx.Response(200, json=TMDB_MOVIE_DETAILS_RESPONSE)
        )

        result = await execute(
            """
            {
              movies(query: "Matrix") {
                results { title credits { cast { name } } videos { key } runtime }
              }
            }
            """,
            context,
        )

        assert result.errors is None
        movie = result.data["movies"]["results"][0]
        assert movie["credits"]["cast"] == [{"name": "Keanu Reeves"}]
        assert movie["videos"] == [{"key": "vKQi3bBA1y8"}]
        assert movie["runtime"] is None
        assert details.call_count == 1

    @pytest.mark.asyncio
    @respx.mock
    async def test_discover_movies_translates_filter(
        self, respx_mock: respx.Router, context: GraphQLContext
    ) -> None:
        route = respx_mock.get(f"{V3_URL}/discover/movie").mock(
            return_value=httpx.Response(200, json={"page": 1, "results": []})
        )

        result = await execute(
            """
            {
              discoverMovies(
                filter: { voteAverage_GTE: 7.5, withGenres: [28, 878], releaseDate_LTE: "2000-01-01" }
                sortBy: RELEASE_DATE
                sortOrder: ASC
              ) { meta { page } }
            }
            """,
            context,
        )

        assert result.errors is None
        params = route.calls.last.request.url.params
        assert params["vote_average.gte"] == "7.5"
        assert params["with_genres"] == "28,878"
        assert params["release_date.lte"] == "2000-01-01"
        assert params["sort_by"] == "release_date.asc"

    @pytest.mark.asyncio
    @respx.mock
    async def test_discover_shows_sorts_on_first_air_date(
        self, respx_mock: respx.Router, context: GraphQLContext
    ) -> None:
        route = respx_mock.get(f"{V3_URL}/discover/tv").mock(
            return_value=httpx.Response(200, json={"page": 1, "results": []})
        )

        result = await execute(
            "{ discoverShows(sortBy: RELEASE_DATE) { meta { page } } }", context
        )

        assert result.errors is None
        assert route.calls.last.request.url.params["sort_by"] == "first_air_date.desc"


class TestShowQueries:
    """Requetes sur les series, saisons et episodes."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_season_is_merged_with_its_show(
        self, respx_mock: respx.Router, context: GraphQLContext
    ) -> None:
        show = respx_mock.get(f"{V3_URL}/tv/1399").mock(
            return_value=httpx.Response(200, json=TMDB_SHOW_DETAILS_RESPONSE)
        )
        season = respx_mock.get(f"{V3_URL}/tv/1399/season/1").mock(
            return_value=httpx.Response(200, json=TMDB_SEASON_RESPONSE)
        )

        result = await execute(
            """
            {
              season(showId: 1399, seasonNumber: 1) {
                name
                showId
                show { name title numberOfSeasons }
                episodes { name episodeNumber showId }
              }
            }
            """,
            context,
        )

        assert result.errors is None
        data = result.data["season"]
        assert data["name"] == "Season 1"
        assert data["showId"] == "1399"
        assert data["show"] == {
            "name": "Game of Thrones",
            "title": "Game of Thrones",
            "numberOfSeasons": 8,
        }
        assert data["episodes"] == [
            {"name": "Winter Is Coming", "episodeNumber": 1, "showId": "1399"}
        ]
        assert show.call_count == 1
        assert season.call_count == 1

    @pytest.mark.asyncio
    @respx.mock
    async def test_show_seasons(self, respx_mock: respx.Router, context: GraphQLContext) -> None:
        respx_mock.get(f"{V3_URL}/tv/1399").mock(
            return_value=httpx.Response(200, json=TMDB_SHOW_DETAILS_RESPONSE)
        )

        result = await execute(
            "{ show(id: 1399) { mediaType seasons { seasonNumber episodeCount showId } } }",
            context,
        )

        assert result.errors is None
        assert result.data["show"] == {
            "mediaType": "TV",
            "seasons": [{"seasonNumber": 1, "episodeCount": 10, "showId": "1399"}],
        }


class TestUnions:
    """Resolution des unions."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_multi_search(self, respx_mock: respx.Router, context: GraphQLContext) -> None:
        respx_mock.get(f"{V3_URL}/search/multi").mock(
            return_value=httpx.Response(200, json=TMDB_SEARCH_MULTI_RESPONSE)
        )

        result = await execute(
            """
            {
              search(query: "Matrix") {
                results {
                  __typename
                  ... on Movie { title }
                  ... on Show { name }
                  ... on Person { name knownFor { __typename } }
                }
              }
            }
            """,
            context,
        )

        assert result.errors is None
        assert result.data["search"]["results"] == [
            {"__typename": "Movie", "title": "The Matrix"},
            {"__typename": "Show", "name": "Game of Thrones"},
            {
                "__typename": "Person",
                "name": "Keanu Reeves",
                "knownFor": [{"__typename": "Movie"}],
            },
        ]

    @pytest.mark.asyncio
    @respx.mock
    async def test_person_credits(self, respx_mock: respx.Router, context: GraphQLContext) -> None:
        respx_mock.get(f"{V3_URL}/person/6384").mock(
            return_value=httpx.Response(200, json=TMDB_PERSON_RESPONSE)
        )

        result = await execute(
            """
            {
              person(id: 6384) {
                name
                credits {
                  __typename
                  ... on CastCredit { character media { ... on Movie { title } } }
                  ... on CrewCredit { job media { ... on Show { name } } }
                }
              }
            }
            """,
            context,
        )

        assert result.errors is None
        assert result.data["person"]["credits"] == [
            {"__typename": "CastCredit", "character": "Neo", "media": {"title": "The Matrix"}},
            {"__typename": "CrewCredit", "job": "Producer", "media": {"name": "Game of Thrones"}},
        ]


class TestLists:
    """Listes utilisateur (API v4)."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_list_with_items(self, respx_mock: respx.Router, context: GraphQLContext) -> None:
        route = respx_mock.get(f"{V4_URL}/list/1").mock(
            return_value=httpx.Response(200, json=TMDB_V4_LIST_RESPONSE)
        )

        result = await execute(
            """
            {
              list(id: 1) {
                name
                numberOfItems
                sortBy
                sortOrder
                items {
                  results { __typename ... on Movie { title } ... on Show { name } }
                  meta { totalResults }
                }
              }
            }
            """,
            context,
        )

        assert result.errors is None
        data = result.data["list"]
        assert data["name"] == "Classiques"
        assert data["numberOfItems"] == 2
        assert data["sortBy"] == "DATE_ADDED"
        assert data["sortOrder"] == "ASC"
        assert data["items"]["results"] == [
            {"__typename": "Movie", "title": "The Matrix"},
            {"__typename": "Show", "name": "Game of Thrones"},
        ]
        assert data["items"]["meta"] == {"totalResults": 2}
        assert route.call_count == 1

    @pytest.mark.asyncio
    @respx.mock
    async def test_create_list(
        self, respx_mock: respx.Router, user_context: GraphQLContext
    ) -> None:
        route = respx_mock.post(f"{V4_URL}/list").mock(
            return_value=httpx.Response(201, json=TMDB_V4_CREATE_LIST_RESPONSE)
        )

        result = await execute(
            """
            mutation {
              createList(name: "A voir", description: "Films du week-end", iso_639_1: "fr") {
                success id message
              }
            }
            """,
            user_context,
        )

        assert result.errors is None
        assert result.data["createList"] == {
            "success": True,
            "id": "7",
            "message": "The item/record was created successfully.",
        }
        body = json.loads(route.calls.last.request.content)
        assert body["iso_639_1"] == "fr"
        assert body["description"] == "Films du week-end"

    @pytest.mark.asyncio
    @respx.mock
    async def test_add_list_items(
        self, respx_mock: respx.Router, user_context: GraphQLContext
    ) -> None:
        respx_mock.post(f"{V4_URL}/list/7/items").mock(
            return_value=httpx.Response(200, json=TMDB_V4_ADD_ITEMS_RESPONSE)
        )

        result = await execute(
            """
            mutation AddItems($items: [ListItemInput!]!) {
              addListItems(id: 7, items: $items) {
                success
                results { mediaId mediaType success }
              }
            }
            """,
            user_context,
            items=[{"id": 603, "mediaType": "MOVIE"}, {"id": 1399, "mediaType": "TV"}],
        )

        assert result.errors is None
        assert result.data["addListItems"] == {
            "success": True,
            "results": [
                {"mediaId": "603", "mediaType": "MOVIE", "success": True},
                {"mediaId": "1399", "mediaType": "TV", "success": False},
            ],
        }

    @pytest.mark.asyncio
    @respx.mock
    async def test_failed_mutation_returns_message(
        self, respx_mock: respx.Router, user_context: GraphQLContext
    ) -> None:
        """Un refus de TMDB n'est pas une erreur GraphQL."""
        respx_mock.delete(f"{V4_URL}/list/404").mock(
            return_value=httpx.Response(404, json=TMDB_NOT_FOUND_RESPONSE)
        )

        result = await execute(
            "mutation { deleteList(id: 404) { success message } }", user_context
        )

        assert result.errors is None
        assert result.data["deleteList"] == {
            "success": False,
            "message": "The resource you requested could not be found.",
        }


class TestErrors:
    """Erreurs propagees au client GraphQL."""

    @pytest.mark.asyncio
    async def test_my_lists_without_token(self, context: GraphQLContext) -> None:
        result = await execute("{ myLists { results { id } } }", context)

        assert result.data is None
        error = result.errors[0]
        assert error.message == "No token."
        assert isinstance(error.original_error, AuthenticationError)

    @pytest.mark.asyncio
    async def test_genres_of_unsupported_media(self, context: GraphQLContext) -> None:
        result = await execute("{ genres(mediaType: PERSON) { name } }", context)

        assert isinstance(result.errors[0].original_error, UnsupportedMediaTypeError)

    @pytest.mark.asyncio
    @respx.mock
    async def test_upstream_error_keeps_sibling_fields(
        self, respx_mock: respx.Router, context: GraphQLContext
    ) -> None:
        """L'echec d'un champ nullable n'empeche pas les autres champs."""
        respx_mock.get(f"{V3_URL}/movie/0").mock(
            return_value=httpx.Response(404, json=TMDB_NOT_FOUND_RESPONSE)
        )
        respx_mock.get(f"{V3_URL}/movie/603").mock(
            return_value=httpx.Response(200, json=TMDB_MOVIE_DETAILS_RESPONSE)
        )

        result = await execute(
            "{ missing: movie(id: 0) { title } found: movie(id: 603) { title } }", context
        )

        assert result.data == {"missing": None, "found": {"title": "The Matrix"}}
        assert len(result.errors) == 1
        assert isinstance(result.errors[0].original_error, httpx.HTTPStatusError)


class TestAccountErrors:
    """Classification des echecs du compte utilisateur."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_tmdb_outage_is_not_unauthenticated(
        self, respx_mock: respx.Router, user_context: GraphQLContext
    ) -> None:
        """Une panne pendant l'echange du token reste une erreur interne."""
        respx_mock.post(f"{V3_URL}/authentication/session/convert/4").mock(
            side_effect=httpx.ConnectError("down")
        )

        result = await execute("{ account { id username } }", user_context)

        assert result.data == {"account": None}
        assert format_error(result.errors[0])["extensions"] == {"code": "INTERNAL_SERVER_ERROR"}

    @pytest.mark.asyncio
    @respx.mock
    async def test_rejected_token_is_unauthenticated(
        self, respx_mock: respx.Router, user_context: GraphQLContext
    ) -> None:
        respx_mock.post(f"{V3_URL}/authentication/session/convert/4").mock(
            return_value=httpx.Response(401, json=TMDB_UNAUTHORIZED_RESPONSE)
        )

        result = await execute("{ account { id } }", user_context)

        assert format_error(result.errors[0]) == {
            "message": "Invalid token.",
            "extensions": {"code": "UNAUTHENTICATED"},
        }

    @pytest.mark.asyncio
    @respx.mock(assert_all_called=False)
    async def test_favorite_with_failing_account_lookup(
        self, respx_mock: respx.Router, user_context: GraphQLContext
    ) -> None:
        """Un echec de /account donne success false, sans erreur GraphQL."""
        respx_mock.post(f"{V3_URL}/authentication/session/convert/4").mock(
            return_value=httpx.Response(200, json={"success": True, "session_id": "abc"})
        )
        respx_mock.get(f"{V3_URL}/account").mock(
            return_value=httpx.Response(503, json={"status_message": "Service unavailable."})
        )
        favorite = respx_mock.post(f"{V3_URL}/account/548/favorite")

        result = await execute(
            "mutation { markAsFavorite(mediaType: MOVIE, id: 603) { success message } }",
            user_context,
        )

        assert result.errors is None
        assert result.data == {
            "markAsFavorite": {"success": False, "message": "Service unavailable."}
        }
        assert not favorite.called
