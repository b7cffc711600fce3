"""Tests for format dispatch and the strict wrapper."""

import pytest

from snipsmart.core.app import Snipper, resolve_options, snip_smart, snip_smart_or_throw, snipper
from snipsmart.core.domain import Result, SnipOptions, SnipSmartError, Status

BROKEN_JSON = '\nSome text before\n{ "key": "value", "open": [1, 2 }\nSome text after\n'
TAG_INPUT = "\nNoise before\n<section><h1>Hello</h1><p>World</p></section>\nNoise after\n"


class TestResolveOptions:
    def test_none_defaults_to_json(self):
        assert resolve_options(None) == SnipOptions(format="json")

    def test_string_is_format(self):
        assert resolve_options("tag").format == "tag"

    def test_mapping_without_format_defaults_to_json(self):
        assert resolve_options({}).format == "json"

    @pytest.mark.parametrize("key", ["caseSensitive", "case_sensitive"])
    def test_mapping_case_sensitive_keys(self, key):
        """Test that both camelCase and snake_case option keys are accepted."""
        options = resolve_options({"format": "tag", key: True})
        assert options == SnipOptions(format="tag", case_sensitive=True)

    def test_options_instance_passes_through(self):
        options = SnipOptions(format="tag")
        assert resolve_options(options) is options

    @pytest.mark.parametrize("options", [5, 2.5, ["tag"], object()])
    def test_unreadable_options_fall_back_to_defaults(self, options):
        """Test that option values of an unsupported type resolve to the defaults."""
        assert resolve_options(options) == SnipOptions()

    def test_invalid_case_sensitive_keeps_format(self):
        """Test that an unreadable caseSensitive value falls back without losing the format."""
        options = resolve_options({"format": "tag", "caseSensitive": "maybe"})
        assert options == SnipOptions(format="tag", case_sensitive=False)


class TestSnipSmart:
    def test_defaults_to_json(self):
        """Test that the JSON engine runs when no format is given."""
        result = snip_smart('Answer: {"a": 1}')
        assert result.status is Status.SUCCESS
        assert result.data == {"a": 1}

    def test_json_path_sanitizes_content(self):
        """Test that fenced, quoted model output is cleaned before extraction."""
        result = snip_smart("```json\n'{\"a\": ' + '[1, 2]}'\n```", "json")
        assert result.status is Status.SUCCESS
        assert result.data == {"a": [1, 2]}

    def test_json_mismatch_reports_raw(self):
        result = snip_smart(BROKEN_JSON, "json")
        assert result.status is Status.FAIL
        assert result.comments == "Bracket mismatch detected."
        assert result.raw == '{ "key": "value", "open": [1, 2 }'

    def test_tag_format(self):
        result = snip_smart(TAG_INPUT, "tag")
        assert result.status is Status.SUCCESS
        assert result.data == "<section><h1>Hello</h1><p>World</p></section>"

    def test_tag_path_does_not_sanitize(self):
        """Test that escape sequences in markup are left as they are."""
        result = snip_smart("<p>a\\nb</p>", "tag")
        assert result.data == "<p>a\\nb</p>"

    def test_tag_case_sensitivity_from_mapping(self):
        result = snip_smart("<A>x</a>", {"format": "tag", "caseSensitive": True})
        assert result.status is Status.FAIL
        assert "expected </A>" in result.comments

    def test_unknown_format_fails_with_original_content(self):
        """Test that an unknown format fails without running an engine."""
        result = snip_smart(BROKEN_JSON, "unknown")
        assert result.status is Status.FAIL
        assert result.comments == "Invalid format 'unknown'. Expected 'json' or 'tag'."
        assert result.data is None
        assert result.raw == BROKEN_JSON

    def test_unknown_format_from_mapping(self):
        result = snip_smart("<p>x</p>", {"format": "yaml"})
        assert result.comments == "Invalid format 'yaml'. Expected 'json' or 'tag'."

    def test_unknown_format_is_logged(self, caplog):
        snip_smart("x", "csv")
        assert "Invalid format requested: 'csv'" in caplog.text

    def test_non_mapping_options_run_json(self):
        """Test that an options value of the wrong type does not raise."""
        result = snip_smart('{"a": 1}', 5)
        assert result.status is Status.SUCCESS
        assert result.data == {"a": 1}

    def test_invalid_option_value_does_not_raise(self):
        result = snip_smart("<p>x</P>", {"format": "tag", "caseSensitive": "maybe"})
        assert result.status is Status.SUCCESS
        assert result.data == "<p>x</P>"

    def test_invalid_content_is_reported_by_engine(self):
        result = snip_smart(None, "json")
        assert result.status is Status.FAIL
        assert result.comments == "Invalid input: content must be a non-empty string."


class TestSnipSmartOrThrow:
    def test_returns_data_on_success(self):
        assert snip_smart_or_throw(TAG_INPUT, "tag") == "<section><h1>Hello</h1><p>World</p></section>"
        assert snip_smart_or_throw('{"ok": true}') == {"ok": True}

    def test_raises_on_fail_with_result(self):
        """Test that a failed extraction raises with the comments and full result."""
        with pytest.raises(SnipSmartError, match="Bracket mismatch detected.") as exc_info:
            snip_smart_or_throw(BROKEN_JSON, "json")
        assert exc_info.value.result.status is Status.FAIL
        assert exc_info.value.result.raw == '{ "key": "value", "open": [1, 2 }'

    def test_raises_on_check(self):
        """Test that a repaired (check) result is not accepted by the strict wrapper."""
        with pytest.raises(SnipSmartError) as exc_info:
            snip_smart_or_throw('{"name": "Alice"')
        assert exc_info.value.result.status is Status.CHECK
        assert exc_info.value.result.data == {"name": "Alice"}

    def test_raises_on_invalid_format(self):
        with pytest.raises(SnipSmartError, match="Invalid format 'unknown'"):
            snip_smart_or_throw(BROKEN_JSON, "unknown")


class TestSnipper:
    def test_default_formats(self):
        assert snipper.formats() == ["json", "tag"]

    def test_register_and_get_engine(self):
        """Test that engines are registered by name via the decorator."""
        registry = Snipper()

        @registry.engine("upper")
        def upper(content, options):
            return Result.success("uppercased", content.upper())

        assert registry.get_engine("upper") is upper
        assert registry.get_engine("upper")("abc", SnipOptions(format="upper")).data == "ABC"

    def test_unknown_engine_raises(self):
        with pytest.raises(ValueError, match="Unknown format: nope"):
            Snipper().get_engine("nope")
