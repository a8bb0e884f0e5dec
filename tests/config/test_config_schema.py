# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Schema-level validation tests.

These focus on the pydantic models themselves: boundary values, constraint
enforcement and normalization.
"""

import pytest
from pydantic import ValidationError

from aocbench.config.schema import (
    BenchConfig,
    FetchConfig,
    GlobalConfig,
    HarnessConfig,
)


class TestGlobalConfigSchema:
    def test_default_log_level_is_warning(self) -> None:
        assert GlobalConfig(config_version="1.0.0").log_level == "WARNING"

    def test_log_level_is_uppercased(self) -> None:
        assert GlobalConfig(config_version="1.0.0", log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level(self) -> None:
        with pytest.raises(ValidationError):
            GlobalConfig(config_version="1.0.0", log_level="LOUD")

    def test_config_version_is_required(self) -> None:
        with pytest.raises(ValidationError):
            GlobalConfig()  # type: ignore[call-arg]


class TestFetchConfigSchema:
    def test_trailing_slash_is_stripped(self) -> None:
        assert FetchConfig(base_url="https://example.com///").base_url == "https://example.com"

    @pytest.mark.parametrize("timeout", [0, -1, 301])
    def test_timeout_bounds(self, timeout: float) -> None:
        with pytest.raises(ValidationError):
            FetchConfig(timeout_seconds=timeout)

    def test_empty_session_variable_name(self) -> None:
        with pytest.raises(ValidationError):
            FetchConfig(session_env_var="")


class TestBenchConfigSchema:
    @pytest.mark.parametrize("duration", [0, -0.5, float("inf"), float("nan")])
    def test_duration_must_be_positive_and_finite(self, duration: float) -> None:
        with pytest.raises(ValidationError):
            BenchConfig(default_duration_seconds=duration)

    def test_small_duration_is_valid(self) -> None:
        assert BenchConfig(default_duration_seconds=0.01).default_duration_seconds == 0.01


class TestHarnessConfigSchema:
    def test_default_is_valid(self) -> None:
        config = HarnessConfig.default()
        assert config.global_config.config_version == "1.0.0"

    def test_global_section_is_required(self) -> None:
        with pytest.raises(ValidationError):
            HarnessConfig.model_validate({"bench": {"color": False}})

    def test_unknown_section_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            HarnessConfig.model_validate({"global": {"config_version": "1"}, "train": {}})
