"""
Tests for environment variable interpolation.
"""

from ockit.core.interpolate import interpolate


class TestInterpolate:
    """Test interpolate function."""

    def test_replaces_known_variable(self):
        assert interpolate("-n ${NS}", {"NS": "dev"}) == "-n dev"

    def test_replaces_multiple_variables(self):
        env = {"A": "1", "B": "2"}
        assert interpolate("${A}-${B}-${A}", env) == "1-2-1"

    def test_unknown_variable_left_untouched(self):
        assert interpolate("${UNKNOWN}", {}) == "${UNKNOWN}"

    def test_bare_dollar_reference_not_replaced(self):
        assert interpolate("$NS", {"NS": "dev"}) == "$NS"

    def test_empty_value(self):
        assert interpolate("x${EMPTY}y", {"EMPTY": ""}) == "xy"

    def test_empty_text(self):
        assert interpolate("", {"A": "1"}) == ""
        assert interpolate(None, {"A": "1"}) == ""

    def test_defaults_to_process_environment(self, monkeypatch):
        monkeypatch.setenv("OCKIT_TEST_VAR", "value")
        assert interpolate("${OCKIT_TEST_VAR}") == "value"
