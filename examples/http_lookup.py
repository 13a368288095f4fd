"""
Result chaining over an HTTP API with httpx.

Flow:
  1. GET /users/{id}            → user JSON
  2. GET /teams/{team_id}       → team JSON
  3. combine both into a badge string

Transport errors, bad status codes and malformed JSON are captured by
Try.catching and translated once, via map_error, into a LookupFailure.
From there on every step is a plain Result bind; the first failure skips
the rest of the chain.

Retry/backoff via tenacity on transient errors (network, timeout) only.

Run (requires the `examples` extra):
    python -m examples.http_lookup https://api.example.com 42
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Any

import httpx
import structlog
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from railmonads import Result, Try, configure_structlog

log = structlog.get_logger()

USAGE = "usage: python -m examples.http_lookup BASE_URL USER_ID"


@dataclass(frozen=True, slots=True)
class LookupFailure:
    """Why a lookup did not produce a badge."""

    step: str
    reason: str


@dataclass(frozen=True, slots=True)
class User:
    id: int
    name: str
    team_id: int


class DirectoryClient:
    """
    Read-only client for the user directory API.

    Every public method returns Result[LookupFailure, T]; no exception
    reaches the caller.
    """

    def __init__(self, base_url: str, timeout: float = 10.0) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout

    def fetch_user(self, user_id: int) -> Result[LookupFailure, User]:
        return (
            self._get_json(f"/users/{user_id}", step="user")
            .bind(lambda body: self._parse_user(body))
            .ensure(lambda user: user.name != "", lambda user: LookupFailure("user", f"user {user.id} has no name"))
        )

    def fetch_team_name(self, team_id: int) -> Result[LookupFailure, str]:
        return self._get_json(f"/teams/{team_id}", step="team").bind(
            lambda body: Result.from_nullable(
                body.get("name"), lambda: LookupFailure("team", f"team {team_id} has no name")
            )
        )

    def badge(self, user_id: int) -> Result[LookupFailure, str]:
        """'<name> (<team>)' for the user, or the first failure along the way."""
        return (
            self.fetch_user(user_id)
            .bind(lambda user: self.fetch_team_name(user.team_id).map(lambda team: f"{user.name} ({team})"))
            .do(lambda text: log.info("badge.built", user_id=user_id))
            .do_if_error(lambda failure: log.warning("badge.failed", user_id=user_id, step=failure.step))
        )

    # ──────────────────────── HTTP ────────────────────────

    def _get_json(self, path: str, step: str) -> Result[LookupFailure, dict[str, Any]]:
        return Try.catching(lambda: self._do_get(path)).map_error(
            lambda exc: LookupFailure(step, _describe(exc))
        )

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=0.1, max=5),
        retry=retry_if_exception_type((httpx.TimeoutException, httpx.NetworkError)),
        reraise=True,
    )
    def _do_get(self, path: str) -> dict[str, Any]:
        """HTTP GET with retry — exceptions caught by Try.catching."""
        with httpx.Client(base_url=self._base_url, timeout=self._timeout) as client:
            response = client.get(path)
            response.raise_for_status()
            body: dict[str, Any] = response.json()
            log.debug("http.fetched", path=path, status=response.status_code)
            return body

    @staticmethod
    def _parse_user(body: dict[str, Any]) -> Result[LookupFailure, User]:
        return Try.catching(
            lambda: User(id=int(body["id"]), name=str(body["name"]), team_id=int(body["team_id"]))
        ).map_error(lambda exc: LookupFailure("user", f"malformed user: {_describe(exc)}"))


def _describe(exc: Exception) -> str:
    if isinstance(exc, httpx.HTTPStatusError):
        return f"HTTP {exc.response.status_code}"
    return f"{type(exc).__name__}: {exc}"


def main(argv: list[str] | None = None) -> int:
    args = argv if argv is not None else sys.argv[1:]
    if len(args) != 2:
        print(USAGE, file=sys.stderr)
        return 2
    base_url, raw_id = args
    configure_structlog(log_level="INFO")
    client = DirectoryClient(base_url)
    return (
        Try.catching(lambda: int(raw_id))
        .map_error(lambda exc: LookupFailure("input", f"not a user id: {raw_id!r}"))
        .bind(client.badge)
        .fold(
            lambda failure: _report(f"{failure.step} failed: {failure.reason}", 1),
            lambda text: _report(text, 0),
        )
    )


def _report(text: str, code: int) -> int:
    print(text)
    return code


if __name__ == "__main__":
    sys.exit(main())
