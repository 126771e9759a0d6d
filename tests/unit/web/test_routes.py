"""
Tests des routes HTTP via TestClient.

Le Container DI est surchargé : Settings de test, bases SQLite en mémoire
pré-remplies et sources de notes mockées.
"""

from contextlib import contextmanager
from typing import Iterator
from unittest.mock import AsyncMock, MagicMock

import pytest
from dependency_injector import providers
from fastapi.testclient import TestClient
from loguru import logger

from src.adapters.api.local_ratings_client import LocalRatingsClient
from src.adapters.api.omdb_client import OMDbClient
from src.container import Container
from src.core.entities.movie import Rating
from src.core.errors import AppError
from src.core.ports.repositories import ICatalogStore
from src.utils.constants import (
    GENRE_REQUIRED,
    GENRES_FETCHED,
    INTERNAL_SERVER_ERROR,
    INVALID_MOVIE_ID,
    INVALID_PAGE_PARAMETER,
    INVALID_SORT_ORDER,
    INVALID_YEAR_PARAMETER,
    MOVIE_DETAILS_FETCHED,
    MOVIE_NOT_FOUND,
    MOVIES_BY_GENRE_FETCHED,
    MOVIES_BY_YEAR_FETCHED,
    MOVIES_FETCHED,
)
from src.web.app import create_app
from src.web.middleware import TRANSACTION_HEADER


@pytest.fixture
def local_source() -> MagicMock:
    source = MagicMock(spec=LocalRatingsClient)
    source.source = "Local"
    source.fetch = AsyncMock(return_value=Rating(source="Local", value=9.0))
    source.close = AsyncMock()
    return source


@pytest.fixture
def remote_source() -> MagicMock:
    source = MagicMock(spec=OMDbClient)
    source.source = "Rotten Tomatoes"
    source.fetch = AsyncMock(return_value=None)
    source.close = AsyncMock()
    return source


@pytest.fixture
def container(
    test_settings, movies_engine, ratings_engine, local_source, remote_source
) -> Iterator[Container]:
    container = Container()
    container.config.override(providers.Object(test_settings))
    container.movies_engine.override(providers.Object(movies_engine))
    container.ratings_engine.override(providers.Object(ratings_engine))
    container.local_ratings_client.override(providers.Object(local_source))
    container.omdb_client.override(providers.Object(remote_source))
    yield container
    container.reset_override()


@contextmanager
def _client(container: Container) -> Iterator[TestClient]:
    with TestClient(create_app(container), raise_server_exceptions=False) as client:
        yield client


@pytest.fixture
def client(container: Container) -> Iterator[TestClient]:
    with _client(container) as client:
        yield client


def _error(response) -> dict:
    body = response.json()
    assert body["success"] is False
    return body["error"]


class TestHealth:
    """Tests de /health."""

    def test_health(self, client: TestClient):
        response = client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["message"] == "Movies API is healthy"
        assert body["uptime"] >= 0
        assert body["config"] == {
            "hasOMDBKey": False,
            "ratingsApiUrl": "http://ratings.test",
            "environment": "test",
        }

    def test_transaction_id_header(self, client: TestClient):
        response = client.get("/health")

        assert response.headers[TRANSACTION_HEADER].startswith("txn_")

    def test_transaction_id_in_request_logs(self, client: TestClient):
        records = []
        handler_id = logger.add(lambda message: records.append(message.record), level="INFO")
        try:
            response = client.get("/health")
        finally:
            logger.remove(handler_id)

        transaction_id = response.headers[TRANSACTION_HEADER]
        messages = {
            r["message"] for r in records if r["extra"].get("transaction_id") == transaction_id
        }
        assert {"Requête reçue", "Réponse envoyée"} <= messages

    def test_lifespan_closes_rating_clients(
        self, container: Container, local_source: MagicMock, remote_source: MagicMock
    ):
        with _client(container) as client:
            client.get("/health")

        local_source.close.assert_awaited_once()
        remote_source.close.assert_awaited_once()


class TestMovieDetails:
    """Tests de /movies/details/{imdb_id}."""

    def test_details_with_local_rating(self, client: TestClient):
        response = client.get("/movies/details/tt0111161")

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["message"] == MOVIE_DETAILS_FETCHED
        data = body["data"]
        assert data["imdb_id"] == "tt0111161"
        assert data["budget"] == "$25,000,000"
        assert data["genres"] == ["Drama", "Crime"]
        assert data["average_rating"] == 9.0
        assert data["ratings"] == [{"source": "Local", "value": 9.0}]

    def test_details_with_both_ratings(self, client: TestClient, remote_source: MagicMock):
        remote_source.fetch.return_value = Rating(source="Rotten Tomatoes", value="91%")

        data = client.get("/movies/details/tt0111161").json()["data"]

        assert data["ratings"] == [
            {"source": "Local", "value": 9.0},
            {"source": "Rotten Tomatoes", "value": "91%"},
        ]
        assert data["average_rating"] == 9.0

    def test_details_without_ratings(self, client: TestClient, local_source: MagicMock):
        local_source.fetch.side_effect = RuntimeError("boom")

        response = client.get("/movies/details/tt0111161")

        assert response.status_code == 200
        assert response.json()["data"]["ratings"] == []
        assert response.json()["data"]["average_rating"] is None

    def test_unknown_movie(self, client: TestClient, local_source: MagicMock):
        response = client.get("/movies/details/tt9999999")

        assert response.status_code == 404
        assert _error(response) == {"code": "NOT_FOUND", "message": MOVIE_NOT_FOUND}
        local_source.fetch.assert_not_awaited()

    def test_storage_failure_in_local_branch(
        self, client: TestClient, local_source: MagicMock
    ):
        local_source.fetch.side_effect = AppError.storage_unavailable("db down")

        response = client.get("/movies/details/tt0111161")

        assert response.status_code == 500
        assert _error(response)["code"] == "DB_ERROR"


class TestMovieListings:
    """Tests des listes paginées."""

    def test_list_movies(self, client: TestClient):
        response = client.get("/movies")

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == MOVIES_FETCHED
        assert body["data"]["page"] == 1
        assert body["data"]["totalPages"] == 1
        assert body["data"]["totalCount"] == 4
        assert [m["imdbId"] for m in body["data"]["movies"]] == [
            "tt0068646",
            "tt0111161",
            "tt0109830",
            "tt0000150",
        ]
        assert "movieId" not in body["data"]["movies"][0]

    def test_page_past_the_end(self, client: TestClient):
        data = client.get("/movies", params={"page": "2"}).json()["data"]

        assert data["movies"] == []
        assert data["page"] == 2

    @pytest.mark.parametrize("page", ["0", "-3", "abc", "2.0"])
    def test_invalid_page(self, client: TestClient, page: str):
        response = client.get("/movies", params={"page": page})

        assert response.status_code == 400
        assert _error(response) == {
            "code": "VALIDATION_ERROR",
            "message": INVALID_PAGE_PARAMETER,
        }

    def test_movies_by_year(self, client: TestClient):
        response = client.get("/movies/year/1994", params={"order": "desc"})

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == MOVIES_BY_YEAR_FETCHED
        assert [m["imdbId"] for m in body["data"]["movies"]] == ["tt0111161", "tt0109830"]

    @pytest.mark.parametrize("year", ["1800", "2100", "abcd"])
    def test_invalid_year(self, client: TestClient, year: str):
        response = client.get(f"/movies/year/{year}")

        assert response.status_code == 400
        assert _error(response)["message"] == INVALID_YEAR_PARAMETER

    def test_invalid_order(self, client: TestClient):
        response = client.get("/movies/year/1994", params={"order": "sideways"})

        assert response.status_code == 400
        assert _error(response)["message"] == INVALID_SORT_ORDER

    def test_movies_by_genre(self, client: TestClient):
        response = client.get("/movies/genre", params={"genre": "Comedy"})

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == MOVIES_BY_GENRE_FETCHED
        assert body["data"]["totalCount"] == 1
        assert body["data"]["movies"][0]["title"] == "Forrest Gump"

    def test_genre_required(self, client: TestClient):
        response = client.get("/movies/genre")

        assert response.status_code == 400
        assert _error(response) == {"code": "VALIDATION_ERROR", "message": GENRE_REQUIRED}

    def test_genres_index(self, client: TestClient):
        body = client.get("/movies/genres").json()

        assert body["message"] == GENRES_FETCHED
        assert body["data"] == ["Drama", "Crime", "Comedy", "Romance"]


class TestRatingsService:
    """Tests des routes du service de notes local."""

    def test_heartbeat(self, client: TestClient):
        response = client.get("/ratings/heartbeat")

        assert response.status_code == 200
        assert response.json()["status"] == "ok"

    def test_ratings_for_movie(self, client: TestClient):
        response = client.get("/ratings/42")

        assert response.status_code == 200
        assert [r["rating"] for r in response.json()] == [8.0, 9.0, 10.0]
        assert response.json()[0] == {
            "userId": 1,
            "movieId": 42,
            "rating": 8.0,
            "timestamp": 1260759144,
        }

    def test_no_ratings(self, client: TestClient):
        response = client.get("/ratings/500")

        assert response.status_code == 404
        assert _error(response) == {
            "code": "NOT_FOUND",
            "message": "No ratings found for movieId: 500",
        }

    def test_invalid_movie_id(self, client: TestClient):
        response = client.get("/ratings/abc")

        assert response.status_code == 400
        assert _error(response)["message"] == INVALID_MOVIE_ID


class TestErrorHandling:
    """Tests des gestionnaires d'erreurs."""

    def test_unknown_route(self, client: TestClient):
        response = client.get("/unknown")

        assert response.status_code == 404
        assert _error(response) == {
            "code": "NOT_FOUND",
            "message": "Route GET /unknown not found",
        }

    def test_storage_unavailable(self, container: Container):
        catalog = MagicMock(spec=ICatalogStore)
        catalog.list_movies.side_effect = AppError.storage_unavailable(
            "Database query execution failed"
        )
        container.catalog_repository.override(providers.Object(catalog))

        with _client(container) as client:
            response = client.get("/movies")

        assert response.status_code == 500
        assert _error(response) == {
            "code": "DB_ERROR",
            "message": "Database query execution failed",
        }

    def test_source_failure_never_reaches_client(self, container: Container):
        catalog = MagicMock(spec=ICatalogStore)
        catalog.list_movies.side_effect = AppError.unexpected_source_failure("omdb exploded")
        container.catalog_repository.override(providers.Object(catalog))

        with _client(container) as client:
            response = client.get("/movies")

        assert response.status_code == 500
        assert _error(response) == {
            "code": "INTERNAL_SERVER_ERROR",
            "message": INTERNAL_SERVER_ERROR,
        }

    def test_unhandled_exception(self, container: Container):
        catalog = MagicMock(spec=ICatalogStore)
        catalog.list_movies.side_effect = RuntimeError("boom")
        container.catalog_repository.override(providers.Object(catalog))

        with _client(container) as client:
            response = client.get("/movies")

        assert response.status_code == 500
        assert _error(response)["code"] == "INTERNAL_SERVER_ERROR"
