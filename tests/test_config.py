"""Tests for dbug.config — filter spec resolution."""

from dbug.config import ENV_VAR, get_filter_spec, resolve_filter_spec


class TestGetFilterSpec:
    """Reading DEBUG from a mapping or the real environment."""

    def test_env_var_name(self):
        assert ENV_VAR == "DEBUG"

    def test_reads_given_mapping(self):
        assert get_filter_spec({"DEBUG": "app:*"}) == "app:*"

    def test_missing_is_none(self):
        assert get_filter_spec({}) is None

    def test_empty_value_kept(self):
        assert get_filter_spec({"DEBUG": ""}) == ""

    def test_reads_os_environ(self, debug_env):
        with debug_env("x y"):
            assert get_filter_spec() == "x y"

    def test_unset_os_environ(self, no_debug_env):
        assert get_filter_spec() is None


class TestResolveFilterSpec:
    """Explicit value > environment."""

    def test_explicit_wins(self):
        assert resolve_filter_spec("a", {"DEBUG": "b"}) == "a"

    def test_explicit_empty_wins(self):
        """An empty explicit spec silences output even if DEBUG is set."""
        assert resolve_filter_spec("", {"DEBUG": "*"}) == ""

    def test_falls_back_to_env(self):
        assert resolve_filter_spec(None, {"DEBUG": "b"}) == "b"

    def test_nothing_anywhere(self):
        assert resolve_filter_spec(None, {}) is None
