"""
Tests unitaires pour la resolution a la demande des champs de detail.

Ces tests verifient:
- Un champ present n'entraine aucun appel
- Un champ manquant est recupere une seule fois puis memorise sur l'objet
- Les erreurs du fetcher sont propagees
"""

import pytest

from graphql_moviedb.core.details import get_field


class CountingFetcher:
    """Fetcher de test qui compte ses appels."""

    def __init__(self, response):
        self.response = response
        self.calls = []

    async def __call__(self, entity):
        self.calls.append(dict(entity))
        return self.response


class TestGetField:
    """Tests pour get_field."""

    @pytest.mark.asyncio
    async def test_present_field_does_not_fetch(self) -> None:
        fetcher = CountingFetcher({"credits": {"cast": ["other"]}})
        entity = {"id": 603, "credits": {"cast": ["Keanu"]}}

        value = await get_field(entity, "credits", fetcher)

        assert value == {"cast": ["Keanu"]}
        assert fetcher.calls == []

    @pytest.mark.asyncio
    async def test_missing_field_is_fetched_once(self) -> None:
        """Le second acces au meme champ est servi par l'objet lui-meme."""
        fetcher = CountingFetcher({"id": 603, "credits": {"cast": ["Keanu"]}})
        entity = {"id": 603}

        first = await get_field(entity, "credits", fetcher)
        second = await get_field(entity, "credits", fetcher)

        assert first == second == {"cast": ["Keanu"]}
        assert len(fetcher.calls) == 1
        assert fetcher.calls[0] == {"id": 603}
        assert entity["credits"] == {"cast": ["Keanu"]}

    @pytest.mark.asyncio
    async def test_empty_field_is_fetched(self) -> None:
        fetcher = CountingFetcher({"genres": [{"id": 28, "name": "Action"}]})
        entity = {"id": 603, "genres": []}

        assert await get_field(entity, "genres", fetcher) == [{"id": 28, "name": "Action"}]

    @pytest.mark.asyncio
    async def test_field_absent_from_response(self) -> None:
        fetcher = CountingFetcher({"id": 603})
        entity = {"id": 603}

        assert await get_field(entity, "videos", fetcher) is None
        assert entity["videos"] is None

    @pytest.mark.asyncio
    async def test_fetcher_errors_are_propagated(self) -> None:
        async def failing(entity):
            raise ConnectionError("TMDB unreachable")

        with pytest.raises(ConnectionError):
            await get_field({"id": 603}, "credits", failing)
