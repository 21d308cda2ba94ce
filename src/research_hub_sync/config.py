"""Configuration helpers for the Contentful to Elasticsearch sync."""

from __future__ import annotations

import argparse
import os
import re
import sys
from dataclasses import dataclass
from typing import List, Mapping, NoReturn, Optional

from . import __version__

DEFAULT_ENVIRONMENT = "master"
DEFAULT_INDEX_PREFIX = "research-hub"
DEFAULT_CONTENTFUL_HOST = "cdn.contentful.com"
DEFAULT_ES_HOST = "localhost"
DEFAULT_ES_PORT = "9200"

REQUIRED_ENV_VARS = ("CONTENTFUL_SPACE_ID", "CONTENTFUL_ACCESS_TOKEN")

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class SyncSettings:
    """Resolved runtime settings for one sync run."""

    content_type: str
    environment: str
    index_name: str
    verbose: bool
    summary: bool
    create_index: bool
    reset: bool
    space_id: Optional[str]
    access_token: Optional[str]
    contentful_host: str
    es_url: str
    es_username: Optional[str]
    es_password: Optional[str]
    es_api_key: Optional[str]
    verify_tls: bool


class _SyncArgumentParser(argparse.ArgumentParser):
    """Argument parser whose usage errors exit with status 1."""

    def error(self, message: str) -> NoReturn:
        self.print_help(sys.stderr)
        self.exit(1, f"\n{self.prog}: error: {message}\n")


def build_arg_parser() -> argparse.ArgumentParser:
    """Return the CLI parser used by the sync entry point."""

    parser = _SyncArgumentParser(
        prog="research-hub-sync",
        usage="%(prog)s [options] <content_type>",
        description="Copy Contentful entries of one content type into an Elasticsearch index.",
    )
    parser.add_argument("content_type", nargs="*", help=argparse.SUPPRESS)
    parser.add_argument("-v", "--verbose", action="store_true", help="Include detailed error messages")
    parser.add_argument(
        "-s", "--summary", action="store_true", help="Print summary of content that will be uploaded"
    )
    parser.add_argument(
        "-r", "--reset", action="store_true", help="Delete and recreate the index if it already exists"
    )
    parser.add_argument(
        "-c",
        "--no-create-index",
        dest="create_index",
        action="store_false",
        help="Abort instead of creating the index when it does not exist",
    )
    parser.add_argument(
        "-e", "--env", metavar="<environment id>", default=None, help="Contentful environment id (default master)"
    )
    parser.add_argument(
        "-i",
        "--index",
        metavar="<index name>",
        default=None,
        help="Elasticsearch index name (default research-hub-{env}-{content_type}, "
        "e.g. 'research-hub-master-articles')",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments; exits 1 unless exactly one content type is given."""

    parser = build_arg_parser()
    args = parser.parse_args(argv)
    if len(args.content_type) != 1:
        parser.print_help()
        sys.exit(1)
    args.content_type = args.content_type[0]
    return args


def normalize_index_name(name: str) -> str:
    """Lowercase `name` and separate words with single dashes."""

    dashed = re.sub(r"(?<=[a-z0-9])(?=[A-Z])", "-", name)
    dashed = re.sub(r"[\s_]+", "-", dashed)
    dashed = re.sub(r"-{2,}", "-", dashed)
    return dashed.strip("-").lower()


def default_index_name(prefix: str, environment: str, content_type: str) -> str:
    return normalize_index_name(f"{prefix}-{environment}-{content_type}")


def _env_flag(value: Optional[str], default: bool) -> bool:
    normalized = (value or "").strip().lower()
    if normalized in _TRUTHY:
        return True
    if normalized in _FALSY:
        return False
    return default


def _es_url(environ: Mapping[str, str]) -> str:
    url = environ.get("ELASTICSEARCH_URL")
    if url:
        return url.rstrip("/")
    host = environ.get("ELASTICSEARCH_HOST") or DEFAULT_ES_HOST
    port = environ.get("ELASTICSEARCH_PORT") or DEFAULT_ES_PORT
    if "://" not in host:
        host = f"http://{host}"
    return f"{host.rstrip('/')}:{port}"


def resolve_settings(
    args: Optional[argparse.Namespace] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> SyncSettings:
    """Return immutable settings built from CLI arguments and the environment."""

    args = args or parse_args()
    environ = os.environ if environ is None else environ

    environment = args.env or DEFAULT_ENVIRONMENT
    prefix = environ.get("INDEX_PREFIX") or DEFAULT_INDEX_PREFIX
    index_name = args.index or default_index_name(prefix, environment, args.content_type)

    return SyncSettings(
        content_type=args.content_type,
        environment=environment,
        index_name=index_name,
        verbose=bool(args.verbose),
        summary=bool(args.summary),
        create_index=bool(args.create_index),
        reset=bool(args.reset),
        space_id=environ.get("CONTENTFUL_SPACE_ID"),
        access_token=environ.get("CONTENTFUL_ACCESS_TOKEN"),
        contentful_host=environ.get("CONTENTFUL_HOST") or DEFAULT_CONTENTFUL_HOST,
        es_url=_es_url(environ),
        es_username=environ.get("ELASTICSEARCH_USERNAME"),
        es_password=environ.get("ELASTICSEARCH_PASSWORD"),
        es_api_key=environ.get("ELASTICSEARCH_API_KEY"),
        verify_tls=_env_flag(environ.get("ELASTICSEARCH_VERIFY_TLS"), default=True),
    )


def missing_env_vars(settings: SyncSettings) -> List[str]:
    """Names of required environment variables that were not set."""

    values = {
        "CONTENTFUL_SPACE_ID": settings.space_id,
        "CONTENTFUL_ACCESS_TOKEN": settings.access_token,
    }
    return [name for name in REQUIRED_ENV_VARS if not values[name]]


__all__ = [
    "DEFAULT_ENVIRONMENT",
    "DEFAULT_INDEX_PREFIX",
    "DEFAULT_CONTENTFUL_HOST",
    "REQUIRED_ENV_VARS",
    "SyncSettings",
    "build_arg_parser",
    "parse_args",
    "normalize_index_name",
    "default_index_name",
    "resolve_settings",
    "missing_env_vars",
]
