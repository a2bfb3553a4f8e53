"""Tests for attempt helpers, UseCase bases, and Repository guards."""

from __future__ import annotations

import logging

import pytest

from getflowkit.core import use_case
from getflowkit.core.errors import AuthError, DomainError, NetworkError
from getflowkit.core.repository import Repository
from getflowkit.core.result import Failure, Result, Success, failure, success
from getflowkit.core.use_case import AsyncUseCase, UseCase, attempt, attempt_async


class TestAttempt:
    def test_wraps_return_value(self) -> None:
        assert attempt(int, "42") == Success(42)

    def test_folds_domain_error(self) -> None:
        def fetch() -> str:
            raise NetworkError("down", status_code=503)

        result = attempt(fetch)
        assert result.is_failure
        assert result.error.status_code == 503

    def test_other_exceptions_propagate(self) -> None:
        with pytest.raises(ValueError):
            attempt(int, "not a number")

    def test_custom_catch(self) -> None:
        result = attempt(int, "nope", catch=(ValueError,))
        assert isinstance(result.error, ValueError)

    def test_kwargs_forwarded(self) -> None:
        assert attempt(int, "ff", base=16) == Success(255)

    @pytest.mark.asyncio
    async def test_async_wraps_and_folds(self) -> None:
        async def ok() -> int:
            return 1

        async def bad() -> int:
            raise AuthError("expired")

        assert await attempt_async(ok) == Success(1)
        assert (await attempt_async(bad)).error == AuthError("expired")


class Double(UseCase[int, int]):
    def execute(self, params: int) -> Result[int, DomainError]:
        if params < 0:
            raise AuthError("negative not allowed")
        if params == 0:
            return failure(DomainError("zero"))
        return success(params * 2)


class AsyncDouble(AsyncUseCase[int, int]):
    async def execute(self, params: int) -> Result[int, DomainError]:
        if params < 0:
            raise AuthError("negative not allowed")
        return success(params * 2)


class TestUseCase:
    def test_returns_execute_result(self) -> None:
        assert Double()(4) == Success(8)
        assert Double()(0) == Failure(DomainError("zero"))

    def test_raised_domain_error_becomes_failure(self) -> None:
        assert Double()(-1) == Failure(AuthError("negative not allowed"))

    def test_failure_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="getflowkit.core.use_case"):
            Double()(0)
        assert "Double failed" in caplog.text

    def test_execute_runs_through_attempt(self, monkeypatch: pytest.MonkeyPatch) -> None:
        seen: list[tuple[object, ...]] = []

        def recording_attempt(fn, *args, **kwargs):  # type: ignore[no-untyped-def]
            seen.append(args)
            return attempt(fn, *args, **kwargs)

        monkeypatch.setattr(use_case, "attempt", recording_attempt)
        assert Double()(-1) == Failure(AuthError("negative not allowed"))
        assert seen == [(-1,)]

    @pytest.mark.asyncio
    async def test_async_use_case(self) -> None:
        assert await AsyncDouble()(3) == Success(6)
        assert await AsyncDouble()(-3) == Failure(AuthError("negative not allowed"))


class FakeClient:
    def __init__(self, users: dict[str, str]) -> None:
        self._users = users

    def fetch_user(self, uid: str) -> str:
        if uid not in self._users:
            raise NetworkError(f"user {uid} not found", status_code=404)
        return self._users[uid]

    async def fetch_user_async(self, uid: str) -> str:
        return self.fetch_user(uid)

    def search(self, query: str, *, catch: str = "all") -> str:
        return f"{query}:{catch}"


class UserRepository(Repository):
    def __init__(self, client: FakeClient) -> None:
        self._client = client

    def get(self, uid: str) -> Result[str, DomainError]:
        return self._guard(self._client.fetch_user, uid)

    async def get_async(self, uid: str) -> Result[str, DomainError]:
        return await self._guard_async(self._client.fetch_user_async, uid)

    def search(self, query: str, catch: str) -> Result[str, DomainError]:
        return self._guard(self._client.search, query, catch=catch)


class TestRepository:
    def test_guard_success(self) -> None:
        repo = UserRepository(FakeClient({"u1": "Kim"}))
        assert repo.get("u1") == Success("Kim")

    def test_guard_failure_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        repo = UserRepository(FakeClient({}))
        with caplog.at_level(logging.DEBUG, logger="getflowkit.core.repository"):
            result = repo.get("u2")
        assert result.error.status_code == 404
        assert "UserRepository call failed (status=404)" in caplog.text

    @pytest.mark.asyncio
    async def test_guard_async(self) -> None:
        repo = UserRepository(FakeClient({"u1": "Lee"}))
        assert await repo.get_async("u1") == Success("Lee")
        assert (await repo.get_async("nope")).is_failure

    def test_guard_forwards_every_keyword_to_the_client(self) -> None:
        repo = UserRepository(FakeClient({}))
        assert repo.search("kim", "exact") == Success("kim:exact")
