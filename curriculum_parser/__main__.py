# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Command line entry point.

Usage:
    python -m curriculum_parser projects/01-cipher --locale es-ES \\
        --track js --repo org/bootcamp --version 1.0.0 --lo learning-objectives
"""

import argparse
import asyncio
import json
import sys
from pathlib import Path

from pydantic import ValidationError

from curriculum_parser import __version__
from curriculum_parser.core.config import YAMLLoadError, get_settings
from curriculum_parser.domains.project import ProjectParser, ProjectParseError
from curriculum_parser.utils.logging import setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="curriculum-parser",
        description="Extract metadata from a curriculum project directory",
    )
    parser.add_argument("directory", type=Path, help="Project directory (00-slug)")
    parser.add_argument("--locale", required=True, help="Locale tag, e.g. es-ES or pt-BR")
    parser.add_argument("--suffix", help="README suffix, e.g. pt for README.pt.md")
    parser.add_argument("--track", help="Curriculum track")
    parser.add_argument("--repo", help="Source repository")
    parser.add_argument("--version", dest="repo_version", help="Curriculum version")
    parser.add_argument(
        "--lo",
        type=Path,
        help="Learning objective catalog (YAML file or directory with data.yml)",
    )
    parser.add_argument(
        "--parser-version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    settings = get_settings()
    setup_logging(settings)

    options = {
        "locale": args.locale,
        "suffix": args.suffix,
        "track": args.track,
        "repo": args.repo,
        "version": args.repo_version,
        "lo": args.lo,
    }

    try:
        record = asyncio.run(ProjectParser(settings).parse(args.directory, options))
    except (ProjectParseError, FileNotFoundError, YAMLLoadError, ValidationError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(json.dumps(record.model_dump(mode="json", by_alias=True), indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
