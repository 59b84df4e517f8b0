from datetime import timedelta

import pytest

from common.modifiers import Modifiers
from term_mouse.commands import JustProgram, ProgramWithArgs, default_launcher
from term_mouse.fields import FieldError
from term_mouse.models import ClickHandler, MouseConfig, UrlConfig
from term_mouse.patterns import ComparablePattern, PatternError


class TestClickHandler:
    @pytest.mark.parametrize("millis", [0, 150, 300, 1000])
    def test_threshold_in_milliseconds(self, millis):
        handler = ClickHandler.from_raw({"threshold": millis})
        assert handler.threshold == timedelta(milliseconds=millis)

    @pytest.mark.parametrize("raw", [-5, "abc"])
    def test_malformed_threshold_defaults(self, raw, config_warnings):
        assert ClickHandler.from_raw({"threshold": raw}) == ClickHandler()
        assert len(config_warnings()) == 1

    def test_default_is_300ms(self):
        assert ClickHandler().threshold == timedelta(milliseconds=300)

    def test_absent_is_default(self):
        assert ClickHandler.from_raw(None) == ClickHandler()

    def test_empty_table_is_default(self, config_warnings):
        assert ClickHandler.from_raw({}) == ClickHandler()
        assert config_warnings() == []

    def test_non_table_raises_field_error(self):
        with pytest.raises(FieldError):
            ClickHandler.from_raw(500)

    def test_negative_threshold_rejected_on_construction(self):
        with pytest.raises(ValueError):
            ClickHandler(threshold=timedelta(milliseconds=-1))

    def test_is_immutable(self):
        handler = ClickHandler()
        with pytest.raises(AttributeError):
            handler.threshold = timedelta(0)


class TestUrlConfig:
    def test_default(self, monkeypatch):
        monkeypatch.setattr("sys.platform", "linux")
        config = UrlConfig()
        assert config.launcher == JustProgram("xdg-open")
        assert config.mods == Modifiers.NONE
        assert config.url_pattern is None

    def test_absent_launcher_is_platform_default_not_none(self):
        assert UrlConfig.from_raw({}).launcher == default_launcher()

    @pytest.mark.parametrize("raw", ["none", "NONE", "None"])
    def test_launcher_disabled(self, raw):
        assert UrlConfig.from_raw({"launcher": raw}).launcher is None

    def test_launcher_with_args(self):
        config = UrlConfig.from_raw({"launcher": {"program": "firefox", "args": ["-P", "work"]}})
        assert config.launcher == ProgramWithArgs("firefox", ("-P", "work"))

    def test_modifiers_accessor(self):
        config = UrlConfig.from_raw({"modifiers": "Control|Shift"})
        assert config.mods == Modifiers.CONTROL | Modifiers.SHIFT

    def test_malformed_fields_default_independently(self, config_warnings):
        config = UrlConfig.from_raw(
            {"launcher": 5, "modifiers": "Hyper", "url_pattern": r"https?://\S+"}
        )
        assert config.launcher == default_launcher()
        assert config.mods == Modifiers.NONE
        assert config.url_pattern == ComparablePattern(r"https?://\S+")
        assert len(config_warnings()) == 2

    def test_invalid_url_pattern_is_fatal(self):
        with pytest.raises(PatternError):
            UrlConfig.from_raw({"url_pattern": "(", "launcher": "my-opener"})

    def test_non_string_url_pattern_is_fatal(self):
        with pytest.raises(PatternError):
            UrlConfig.from_raw({"url_pattern": ["a"]})

    def test_equality_uses_pattern_source(self):
        first = UrlConfig.from_raw({"url_pattern": "a+"})
        second = UrlConfig.from_raw({"url_pattern": "a+"})
        assert first == second
        assert first != UrlConfig.from_raw({"url_pattern": "b+"})


class TestMouseConfig:
    def test_scenario(self, config_warnings):
        config = MouseConfig.from_raw(
            {
                "double_click": {"threshold": 500},
                "hide_when_typing": True,
                "url": {"launcher": "none"},
            }
        )
        assert config.double_click.threshold == timedelta(milliseconds=500)
        assert config.triple_click == ClickHandler()
        assert config.hide_when_typing is True
        assert config.url.launcher is None
        assert config.url.mods == Modifiers.NONE
        assert config.url.url_pattern is None
        assert config_warnings() == []

    def test_absent_section_is_default(self):
        config = MouseConfig.from_raw(None)
        assert config == MouseConfig()
        assert config.double_click == ClickHandler()
        assert config.triple_click == ClickHandler()
        assert config.hide_when_typing is False
        assert config.url == UrlConfig()

    def test_absent_double_click_is_default(self):
        config = MouseConfig.from_raw({"triple_click": {"threshold": 1}})
        assert config.double_click == ClickHandler()
        assert config.triple_click.threshold == timedelta(milliseconds=1)

    def test_non_table_section_is_default(self, config_warnings):
        assert MouseConfig.from_raw("fast") == MouseConfig()
        assert len(config_warnings()) == 1

    def test_field_failures_do_not_affect_siblings(self, config_warnings):
        config = MouseConfig.from_raw(
            {
                "double_click": 12,
                "triple_click": {"threshold": "slow"},
                "hide_when_typing": "yes",
                "url": {"launcher": "my-opener", "modifiers": "Alt"},
            }
        )
        assert config.double_click == ClickHandler()
        assert config.triple_click == ClickHandler()
        assert config.hide_when_typing is False
        assert config.url.launcher == JustProgram("my-opener")
        assert config.url.mods == Modifiers.ALT
        assert len(config_warnings()) == 3

    def test_non_table_url_is_default(self, config_warnings):
        config = MouseConfig.from_raw({"url": "xdg-open", "hide_when_typing": True})
        assert config.url == UrlConfig()
        assert config.hide_when_typing is True
        assert len(config_warnings()) == 1

    def test_warnings_name_the_click_section(self, config_warnings):
        MouseConfig.from_raw({"triple_click": {"threshold": -1}})
        [record] = config_warnings()
        assert "triple_click.threshold" in record.getMessage()

    def test_invalid_url_pattern_fails_whole_load(self):
        with pytest.raises(PatternError):
            MouseConfig.from_raw({"hide_when_typing": True, "url": {"url_pattern": "(unclosed"}})

    def test_unknown_keys_are_ignored(self, config_warnings):
        assert MouseConfig.from_raw({"scroll_speed": 3}) == MouseConfig()
        assert config_warnings() == []


class TestRoundTrip:
    def test_default_is_idempotent(self):
        config = MouseConfig()
        assert MouseConfig.from_raw(config.to_raw()) == config

    def test_disabled_launcher_and_pattern_survive(self):
        config = MouseConfig.from_raw(
            {
                "double_click": {"threshold": 250},
                "url": {
                    "launcher": "none",
                    "modifiers": ["shift", "ctrl"],
                    "url_pattern": r"https?://\S+",
                },
            }
        )
        assert MouseConfig.from_raw(config.to_raw()) == config

    def test_canonical_form(self, monkeypatch):
        monkeypatch.setattr("sys.platform", "darwin")
        assert MouseConfig().to_raw() == {
            "double_click": {"threshold": 300},
            "triple_click": {"threshold": 300},
            "hide_when_typing": False,
            "url": {"launcher": "open", "modifiers": "None"},
        }
