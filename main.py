import argparse
import json
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from tuitionmatch.agents.orchestrator import RecommendationOrchestrator
from tuitionmatch.api.app import run as run_api
from tuitionmatch.config import settings
from tuitionmatch.domain.errors import CatalogUnavailableError, MatchingInputError
from tuitionmatch.repository.catalog_store import CatalogStore
from tuitionmatch.schemas.requests import RecommendRequest


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="TuitionMatch unified entrypoint")
    parser.add_argument(
        "mode",
        nargs="?",
        choices=["api", "recommend"],
        default="api",
        help="Run mode: api (default), recommend",
    )
    parser.add_argument("--criteria", help="Path to a criteria JSON file (recommend mode)")
    parser.add_argument("--catalog", default=settings.card_catalog_file, help="Path to the card catalog JSON")
    parser.add_argument("--limit", type=int, default=None, help="Maximum recommendations to print")
    return parser


def run_recommend(args: argparse.Namespace) -> int:
    if not args.criteria:
        print("--criteria is required in recommend mode", file=sys.stderr)
        return 2

    try:
        payload = json.loads(Path(args.criteria).read_text(encoding="utf-8"))
        if args.limit is not None:
            payload["limit"] = args.limit
        request = RecommendRequest.model_validate(payload)
    except (OSError, json.JSONDecodeError, ValidationError) as exc:
        print(f"Invalid criteria file {args.criteria}: {exc}", file=sys.stderr)
        return 1

    orchestrator = RecommendationOrchestrator(CatalogStore(args.catalog), settings.engine_config())
    try:
        response = orchestrator.recommend(request)
    except (MatchingInputError, CatalogUnavailableError) as exc:
        print(f"Recommendation failed: {exc}", file=sys.stderr)
        return 1

    print(response.model_dump_json(indent=2))
    return 0


def main() -> None:
    args = build_parser().parse_args()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.mode == "api":
        run_api()
        return

    sys.exit(run_recommend(args))


if __name__ == "__main__":
    main()
