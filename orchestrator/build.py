"""Build stage CLI.

Loads a build context descriptor (YAML or JSON), runs the Spring Boot build
step against the application it names, and writes the result as JSON."""
from __future__ import annotations

import argparse
import json
import sys
from dataclasses import replace
from pathlib import Path
from typing import Any, Dict

import yaml

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from boot import Build, BuildError
from common.config import get_settings
from common.logging import configure_logging, get_logger
from common.schema import BuildContext, ContextValidationError, normalize_context

LOGGER = get_logger(__name__)


def load_context(path: Path, application: Path | None = None) -> BuildContext:
    text = path.read_text(encoding="utf-8")
    try:
        payload: Dict[str, Any] = yaml.safe_load(text) or {}
    except yaml.YAMLError as exc:
        raise ContextValidationError(f"Unable to parse context descriptor {path}: {exc}") from exc
    if application is not None and isinstance(payload, dict):
        payload = {**payload, "application": str(application)}
    return normalize_context(payload, base_dir=path.parent)


def write_result(payload: Dict[str, Any], output: Path | None) -> None:
    serialized = json.dumps(payload, indent=2, ensure_ascii=False)
    if output is None:
        sys.stdout.write(serialized + "\n")
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(serialized + "\n", encoding="utf-8")
    LOGGER.info("Build result written to %s", output)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Spring Boot build step")
    parser.add_argument("--context", required=True, type=Path, help="Build context YAML/JSON file")
    parser.add_argument("--application", type=Path, help="Override the application path in the context")
    parser.add_argument("--output", type=Path, help="Write the result JSON here instead of stdout")
    parser.add_argument("--log-level", help="Logging level (defaults to BOOT_LOG_LEVEL or INFO)")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    settings = get_settings()
    if args.log_level:
        settings = replace(settings, log_level=args.log_level)
    configure_logging(settings=settings)
    try:
        context = load_context(args.context, args.application)
        result = Build(settings).build(context)
    except (BuildError, ContextValidationError) as exc:
        LOGGER.error("Build failed: %s", exc)
        return 1
    if result.is_empty():
        LOGGER.info("Spring Boot not detected in %s", context.application_path)
    write_result(result.to_dict(), args.output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
