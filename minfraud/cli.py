"""Command-line entry point.

Usage:
    minfraud score request.json
    minfraud insights request.yaml --locale fr --locale en
    minfraud score request.json --host localhost --port 8080 --no-https

Credentials come from MINFRAUD_ACCOUNT_ID and MINFRAUD_LICENSE_KEY (or .env).
"""

import argparse
import json
import sys

import structlog
import yaml

from .client import MinFraudClient
from .config import Settings
from .errors import InvalidFieldError, MinFraudError
from .request import MinFraudRequest
from .shared.logging import setup_logging

logger = structlog.get_logger()

EXIT_INVALID_INPUT = 1
EXIT_SERVICE_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="minfraud", description="Query the minFraud web service")
    parser.add_argument("service", choices=["score", "insights"], help="Which service to call")
    parser.add_argument("request_file", type=str, help="Path to a JSON or YAML request body")
    parser.add_argument("--host", type=str, default=None, help="Override MINFRAUD_HOST")
    parser.add_argument("--port", type=int, default=None, help="Override MINFRAUD_PORT")
    parser.add_argument("--no-https", action="store_true", help="Use plain HTTP")
    parser.add_argument(
        "--locale",
        action="append",
        default=None,
        help="Preferred locale for GeoIP names; repeat for fallbacks",
    )
    return parser


def main(argv: list[str] | None = None, settings: Settings | None = None, transport=None) -> int:
    args = build_parser().parse_args(argv)
    settings = settings or Settings()
    setup_logging(settings.log_level, settings.log_format)

    overrides = {}
    if args.host:
        overrides["host"] = args.host
    if args.port is not None:
        overrides["port"] = args.port
    if args.no_https:
        overrides["use_https"] = False
    if args.locale:
        overrides["locales"] = args.locale
    if overrides:
        settings = settings.model_copy(update=overrides)

    try:
        with open(args.request_file) as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as exc:
        print(f"Could not read {args.request_file}: {exc}", file=sys.stderr)
        return EXIT_INVALID_INPUT

    if not isinstance(data, dict):
        print(f"{args.request_file} does not contain a request object", file=sys.stderr)
        return EXIT_INVALID_INPUT

    try:
        request = MinFraudRequest.from_dict(data)
        with MinFraudClient.from_settings(settings, transport=transport) as client:
            if args.service == "score":
                response = client.score(request)
            else:
                response = client.insights(request)
    except InvalidFieldError as exc:
        print(f"Invalid input: {exc}", file=sys.stderr)
        return EXIT_INVALID_INPUT
    except MinFraudError as exc:
        logger.error("minfraud_cli_failed", service=args.service, error=str(exc))
        print(f"{type(exc).__name__}: {exc}", file=sys.stderr)
        return EXIT_SERVICE_ERROR

    print(json.dumps(response.to_dict(), indent=2, sort_keys=True))
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
