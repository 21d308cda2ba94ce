"""Entry point wiring configuration, clients, index management and publishing."""

from __future__ import annotations

import sys
from typing import List, Mapping, Optional

import requests

from .config import SyncSettings, missing_env_vars, parse_args, resolve_settings
from .errors import SyncError
from .indexing.client import ESClient
from .indexing.manager import ensure_index
from .indexing.publisher import publish_items
from .models import IndexReadiness
from .report import Reporter
from .retrieval.client import ContentfulClient
from .retrieval.reader import fetch_items

HEALTH_TIMEOUT_SEC = 5


def _build_source(settings: SyncSettings) -> ContentfulClient:
    return ContentfulClient(
        space_id=settings.space_id,
        access_token=settings.access_token,
        environment=settings.environment,
        host=settings.contentful_host,
    )


def _build_client(settings: SyncSettings) -> ESClient:
    return ESClient(
        base_url=settings.es_url,
        username=settings.es_username,
        password=settings.es_password,
        api_key=settings.es_api_key,
        verify_tls=settings.verify_tls,
    )


def _check_destination(es: ESClient, reporter: Reporter) -> bool:
    try:
        es.health(timeout=HEALTH_TIMEOUT_SEC)
        reachable = True
    except (requests.RequestException, SyncError) as exc:
        reporter.error(exc, "Elasticsearch health check")
        reachable = False
    reporter.step(reachable, "Connect to ElasticSearch instance")
    return reachable


def run_sync(settings: SyncSettings, source: ContentfulClient, es: ESClient, reporter: Reporter) -> int:
    """Run one fetch-then-publish pass and return the process exit status."""

    missing = missing_env_vars(settings)
    reporter.step(not missing, "Get required env vars")
    if missing:
        reporter.error(RuntimeError(f"missing: {', '.join(missing)}"), "Environment")

    if not _check_destination(es, reporter):
        reporter.aborting()
        return 1

    fetched = fetch_items(source, settings.content_type)
    if fetched.error is not None:
        reporter.error(fetched.error, "Contentful")
    reporter.step(fetched.ok, "Test connection to Contentful")
    if fetched.ok:
        reporter.found(len(fetched.items), settings.content_type)
    if not fetched.usable:
        reporter.aborting()
        return 1

    if settings.summary:
        reporter.items_table(fetched.items)

    readiness = ensure_index(
        es,
        settings.index_name,
        create=settings.create_index,
        reset=settings.reset,
        reporter=reporter,
    )
    if readiness is IndexReadiness.ABORTED:
        reporter.aborting()
        return 1

    outcome = publish_items(es, fetched.items, settings.index_name, reporter=reporter)
    reporter.published(outcome, settings.content_type)
    reporter.finished()
    return 0 if outcome.ok else 1


def main(argv: Optional[List[str]] = None, environ: Optional[Mapping[str, str]] = None) -> int:
    """CLI entry point; returns the exit status instead of exiting."""

    args = parse_args(argv)
    settings = resolve_settings(args, environ)
    reporter = Reporter(verbose=settings.verbose)
    reporter.banner()
    reporter.settings_table(settings)

    try:
        return run_sync(settings, _build_source(settings), _build_client(settings), reporter)
    except Exception as exc:
        reporter.error(exc, "Unexpected failure")
        reporter.aborting()
        return 1


def cli() -> None:
    sys.exit(main(sys.argv[1:]))


__all__ = ["HEALTH_TIMEOUT_SEC", "run_sync", "main", "cli"]


if __name__ == "__main__":
    cli()
