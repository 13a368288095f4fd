"""
Async Try pipeline: fetch, decode and summarise several documents.

Each document runs through

    fetch_document  →  decode_payload  →  summarise

with the railmonads.aio functions, so the steps nest without awaiting at
every link. The pipelines for all documents run concurrently under
asyncio.gather and are combined with Try.sequence: one failed document
fails the batch with the first captured exception.

Run (requires the `examples` extra):
    python -m examples.async_pipeline https://docs.example.com a.json b.json
"""

from __future__ import annotations

import asyncio
import json
import sys
from typing import Any

import httpx
import structlog

from railmonads import Try, aio, configure_structlog

log = structlog.get_logger()

USAGE = "usage: python -m examples.async_pipeline BASE_URL NAME [NAME ...]"


async def fetch_document(client: httpx.AsyncClient, name: str) -> Try[bytes]:
    async def download() -> bytes:
        response = await client.get(f"/{name}")
        response.raise_for_status()
        return response.content

    return await Try.success(download()).sequence_async()


async def decode_payload(raw: bytes) -> Try[dict[str, Any]]:
    return Try.catching(lambda: json.loads(raw)).ensure(
        lambda doc: isinstance(doc, dict),
        lambda doc: ValueError(f"expected a JSON object, got {type(doc).__name__}"),
    )


async def summarise(document: dict[str, Any]) -> str:
    await asyncio.sleep(0)
    return f"{document['title']} ({len(document.get('sections', []))} sections)"


async def pipeline(client: httpx.AsyncClient, name: str) -> Try[str]:
    return await aio.map_catching_async(
        aio.bind_async(fetch_document(client, name), decode_payload),
        summarise,
    )


async def summarise_all(base_url: str, names: list[str]) -> Try[list[str]]:
    async with httpx.AsyncClient(base_url=base_url, timeout=10.0) as client:
        attempts = await asyncio.gather(*(pipeline(client, name) for name in names))
    for name, attempt in zip(names, attempts):
        attempt.do_if_error(lambda exc, name=name: log.warning("document.failed", name=name, error=str(exc)))
    return Try.sequence(attempts)


def main(argv: list[str] | None = None) -> int:
    args = argv if argv is not None else sys.argv[1:]
    if len(args) < 2:
        print(USAGE, file=sys.stderr)
        return 2
    base_url, *names = args
    configure_structlog(log_level="INFO")
    outcome = asyncio.run(summarise_all(base_url, names))
    for line in outcome.default_with_fn(lambda exc: [f"batch failed: {exc}"]):
        print(line)
    return 0 if outcome else 1


if __name__ == "__main__":
    sys.exit(main())
