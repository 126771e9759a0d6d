"""Tests pour AppError et la table kind -> code/statut."""

import pytest

from src.core.errors import AppError, ErrorKind, status_for


class TestKindTable:
    """Chaque kind porte un code public et un statut HTTP."""

    @pytest.mark.parametrize(
        "error,code,status",
        [
            (AppError.not_found("missing"), "NOT_FOUND", 404),
            (AppError.validation("bad"), "VALIDATION_ERROR", 400),
            (AppError.storage_unavailable("down"), "DB_ERROR", 500),
            (AppError.source_unavailable("empty"), "SOURCE_UNAVAILABLE", 502),
            (AppError.unexpected_source_failure("boom"), "EXTERNAL_API_ERROR", 502),
            (AppError.internal("oops"), "INTERNAL_SERVER_ERROR", 500),
        ],
    )
    def test_code_and_status(self, error: AppError, code: str, status: int):
        assert error.code == code
        assert error.status_code == status

    def test_every_kind_has_a_status(self):
        for kind in ErrorKind:
            assert status_for(kind) >= 400

    def test_source_unavailable_keeps_context(self):
        error = AppError.source_unavailable("empty", reason="non-JSON body")

        assert error.kind is ErrorKind.SOURCE_UNAVAILABLE
        assert error.context == {"reason": "non-JSON body"}


class TestAppError:
    """Tests du contenu de l'erreur."""

    def test_factory_sets_kind_and_context(self):
        error = AppError.not_found("Movie not found", imdb_id="tt9999999")

        assert error.kind is ErrorKind.NOT_FOUND
        assert error.message == "Movie not found"
        assert error.context == {"imdb_id": "tt9999999"}
        assert str(error) == "Movie not found"

    def test_to_dict_hides_context(self):
        error = AppError.storage_unavailable("Database query execution failed", operation="x")

        assert error.to_dict() == {
            "code": "DB_ERROR",
            "message": "Database query execution failed",
        }

    def test_default_context_is_empty(self):
        assert AppError(ErrorKind.INTERNAL, "oops").context == {}

    def test_repr(self):
        assert repr(AppError.validation("bad page")) == (
            "AppError(kind=VALIDATION, message='bad page')"
        )

    def test_is_an_exception(self):
        with pytest.raises(AppError):
            raise AppError.internal("oops")
