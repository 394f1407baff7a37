# SPDX-License-Identifier: MIT
"""Tests for ccconfig.core.resolver."""

import pytest

from ccconfig.configure.environ import BuildEnvironment
from ccconfig.core.resolver import parse_env_bool, resolve_feature_state
from ccconfig.core.state import ResolvedFeatureState


class TestParseEnvBool:
    @pytest.mark.parametrize("value", ["1", "t", "T", "TRUE", "true", "True"])
    def test_true(self, value):
        assert parse_env_bool(value) is True

    @pytest.mark.parametrize("value", ["0", "f", "F", "FALSE", "false", "False"])
    def test_false(self, value):
        assert parse_env_bool(value) is False

    @pytest.mark.parametrize("value", ["", "yes", "on", "tRuE", " true", None])
    def test_unparseable(self, value):
        assert parse_env_bool(value) is None


class TestResolveNoOverrides:
    def test_file_values_stand(self):
        state = resolve_feature_state(True, "/vendor/tc", "-fsafe", "-O2", BuildEnvironment())
        assert state == ResolvedFeatureState(True, "/vendor/tc", "-fsafe -O2")

    def test_flags_joined_with_single_space(self):
        state = resolve_feature_state(False, "", "", "", BuildEnvironment())
        assert state.flags == " "

    def test_ae_flag_only(self):
        state = resolve_feature_state(True, "/tc", "-fsafe", "", BuildEnvironment())
        assert state.flags == "-fsafe "


class TestResolveEnableOverride:
    def test_env_true_wins_over_file_false(self):
        env = BuildEnvironment(sdclang="true")
        state = resolve_feature_state(False, "", "", "", env)
        assert state.enabled is True

    def test_env_false_wins_over_file_true(self):
        env = BuildEnvironment(sdclang="0")
        state = resolve_feature_state(True, "/vendor/tc", "", "", env)
        assert state.enabled is False
        assert state.path == "/vendor/tc"

    def test_unparseable_falls_through(self):
        env = BuildEnvironment(sdclang="maybe")
        assert resolve_feature_state(True, "/tc", "", "", env).enabled is True
        assert resolve_feature_state(False, "", "", "", env).enabled is False


class TestResolvePathOverride:
    def test_env_path_wins(self):
        env = BuildEnvironment(sdclang_path="/opt/tc")
        state = resolve_feature_state(True, "/vendor/tc", "", "", env)
        assert state.path == "/opt/tc"

    def test_env_path_applies_when_disabled(self):
        env = BuildEnvironment(sdclang_path="/opt/tc")
        state = resolve_feature_state(False, "", "", "", env)
        assert state.path == "/opt/tc"


class TestResolveFlagsOverride:
    def test_env_flags_replace_combined(self):
        env = BuildEnvironment(sdclang_common_flags="-O3")
        state = resolve_feature_state(True, "/tc", "-fsafe", "-O2", env)
        assert state.flags == "-O3"


class TestResolveIdempotent:
    def test_same_inputs_same_state(self):
        env = BuildEnvironment(sdclang="1", sdclang_path="/opt/tc")
        first = resolve_feature_state(False, "/vendor/tc", "-fsafe", "-O2", env)
        second = resolve_feature_state(False, "/vendor/tc", "-fsafe", "-O2", env)
        assert first == second
        assert first.as_variables() == second.as_variables()
