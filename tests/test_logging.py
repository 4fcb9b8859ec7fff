"""Tests for structured logging configuration."""

from __future__ import annotations

import json
import logging

import structlog

from lexicon.logging import configure_logging


def test_configure_logging_renders_json(capsys):
    configure_logging("INFO")
    try:
        log = structlog.get_logger()
        log.info("translations_flushed", count=2)
        log.debug("translation_missing", token="abc")

        lines = [line for line in capsys.readouterr().out.splitlines() if line.strip()]
        payload = json.loads(lines[-1])
        assert payload["event"] == "translations_flushed"
        assert payload["count"] == 2
        assert payload["level"] == "info"
        assert "timestamp" in payload
        assert all("translation_missing" not in line for line in lines)
    finally:
        structlog.reset_defaults()


def test_configure_logging_console_renderer(capsys):
    configure_logging(logging.DEBUG, json_output=False)
    try:
        log = structlog.get_logger()
        log.debug("translation_missing", locale="fr")

        out = capsys.readouterr().out
        assert "translation_missing" in out
        assert "locale=fr" in out
    finally:
        structlog.reset_defaults()
