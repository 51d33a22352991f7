"""Tests for ADFConfig."""

import os
from unittest.mock import patch

import pytest

from atlassian_adf.config import ADFConfig


def test_from_env_defaults():
    """Test defaults when no ADF_* variables are set."""
    with patch.dict(os.environ, {}, clear=True):
        config = ADFConfig.from_env()

    assert config == ADFConfig(
        output_format="text", log_level="WARNING", log_to_file=False, log_dir=None
    )


def test_from_env_values():
    env = {
        "ADF_OUTPUT_FORMAT": "Markdown",
        "ADF_LOG_LEVEL": "debug",
        "ADF_LOG_TO_FILE": "yes",
        "ADF_LOG_DIR": "/tmp/adf-logs",
    }
    with patch.dict(os.environ, env, clear=True):
        config = ADFConfig.from_env()

    assert config.output_format == "markdown"
    assert config.log_level == "DEBUG"
    assert config.log_to_file is True
    assert config.log_dir == "/tmp/adf-logs"


def test_explicit_mapping_overrides_environment():
    with patch.dict(os.environ, {"ADF_OUTPUT_FORMAT": "text"}, clear=True):
        config = ADFConfig.from_env(
            {"ADF_OUTPUT_FORMAT": "extract", "ADF_LOG_TO_FILE": "false"}
        )

    assert config.output_format == "extract"
    assert config.log_to_file is False


def test_invalid_output_format():
    with patch.dict(os.environ, {"ADF_OUTPUT_FORMAT": "html"}, clear=True):
        with pytest.raises(ValueError, match="Unsupported ADF_OUTPUT_FORMAT 'html'"):
            ADFConfig.from_env()
