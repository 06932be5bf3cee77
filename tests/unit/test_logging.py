# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Unit tests for structured logging helpers."""

import importlib
import json
from collections.abc import Generator

import pytest
import structlog
from structlog.contextvars import get_contextvars
from structlog.testing import capture_logs

from curriculum_parser.core.config.settings import Settings
from curriculum_parser.utils.logging import bound_context, get_logger, setup_logging


@pytest.fixture(autouse=True)
def reset_structlog() -> Generator[None, None, None]:
    """Restore structlog defaults after each test."""
    yield
    structlog.reset_defaults()


class TestGetLogger:
    """Tests for get_logger."""

    @pytest.mark.parametrize(
        "module",
        [
            "curriculum_parser.domains.project.document",
            "curriculum_parser.domains.project.learning_objectives",
            "curriculum_parser.domains.project.thumbnail",
            "curriculum_parser.domains.project.assembler",
        ],
    )
    def test_pipeline_modules_create_their_logger(self, module: str) -> None:
        """Test that module-level loggers are built on import."""
        assert importlib.import_module(module).logger is not None

    def test_logger_emits_key_value_events(self) -> None:
        """Test that events carry their key/value context."""
        logger = get_logger("curriculum_parser.domains.project.assembler")

        with capture_logs() as logs:
            logger.info("project_parsed", slug="cipher", learning_objectives=2)

        assert logs == [
            {
                "event": "project_parsed",
                "slug": "cipher",
                "learning_objectives": 2,
                "log_level": "info",
            }
        ]

    def test_production_logs_are_json_on_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test that production output is JSON and stdout stays clean."""
        setup_logging(Settings(environment="production"))
        logger = get_logger("curriculum_parser.tests")

        logger.warning("thumbnail_download_failed", status=404)

        captured = capsys.readouterr()
        assert captured.out == ""
        event = json.loads(captured.err.strip().splitlines()[-1])
        assert event["event"] == "thumbnail_download_failed"
        assert event["status"] == 404
        assert event["level"] == "warning"


class TestBoundContext:
    """Tests for bound_context."""

    def test_binds_for_the_block_only(self) -> None:
        with bound_context(project_dir="/projects/01-cipher"):
            assert get_contextvars()["project_dir"] == "/projects/01-cipher"

        assert "project_dir" not in get_contextvars()

    def test_restores_outer_values(self) -> None:
        with bound_context(project_dir="/projects/01-cipher"):
            with bound_context(project_dir="/projects/02-memory"):
                assert get_contextvars()["project_dir"] == "/projects/02-memory"
            assert get_contextvars()["project_dir"] == "/projects/01-cipher"
