"""
Option lookups: nested configuration without None checks.

Every lookup returns an Option, so a missing key anywhere in the chain
simply produces Nothing and the fallback at the end applies.

Run:
    python -m examples.option_lookups
"""

from __future__ import annotations

from typing import Any

import structlog

from railmonads import Option, configure_structlog, to_option

log = structlog.get_logger()

SERVICES: dict[str, dict[str, Any]] = {
    "billing": {"host": "billing.internal", "port": "8443", "tls": True},
    "search": {"host": "search.internal", "port": "not-a-port"},
    "legacy": {"port": "8080"},
}


def lookup(mapping: dict[str, Any], key: str) -> Option[Any]:
    return to_option(mapping.get(key))


def parse_port(raw: str) -> Option[int]:
    return Option.some(int(raw)) if raw.isdigit() else Option.none()


def service_port(name: str) -> Option[int]:
    """Resolve a valid TCP port for the service, or Nothing."""
    return (
        lookup(SERVICES, name)
        .bind(lambda service: lookup(service, "port"))
        .bind(parse_port)
        .filter(lambda port: 0 < port < 65536)
    )


def service_address(name: str) -> Option[str]:
    """host:port, only when both are known."""
    host = lookup(SERVICES, name).bind(lambda service: lookup(service, "host"))
    return host.zip(service_port(name), lambda h, p: f"{h}:{p}")


def describe(name: str) -> str:
    return (
        service_address(name)
        .do_if_none(lambda: log.info("service.unresolved", service=name))
        .fold(lambda: f"{name}: unavailable", lambda address: f"{name}: {address}")
    )


def main() -> None:
    configure_structlog(log_level="INFO")
    for name in ("billing", "search", "legacy", "unknown"):
        print(describe(name))

    ports = Option.sequence([service_port("billing"), service_port("legacy")])
    print("all ports:", ports.default_with([]))


if __name__ == "__main__":
    main()
