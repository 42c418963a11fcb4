import json

import pytest
from pydantic import ValidationError

from tailwind_translator.core.config import DEFAULT_CONFIG, TranslatorConfig


class TestTranslatorConfig:
    """Test config validation and aliases."""

    def test_defaults(self):
        assert DEFAULT_CONFIG.prefix == ""
        assert DEFAULT_CONFIG.use_default_scale is True
        assert DEFAULT_CONFIG.theme == {}

    def test_legacy_aliases(self):
        config = TranslatorConfig.model_validate(
            {
                "prefix": "tw-",
                "useAllDefaultValues": False,
                "customTheme": {"scale": {"1.02": "102"}},
            }
        )
        assert config.prefix == "tw-"
        assert config.use_default_scale is False
        assert config.theme == {"scale": {"1.02": "102"}}

    def test_camel_case_alias(self):
        assert TranslatorConfig.model_validate({"useDefaultScale": False}).use_default_scale is False

    def test_unknown_key_rejected(self):
        with pytest.raises(ValidationError):
            TranslatorConfig.model_validate({"prefx": "tw-"})

    def test_bad_theme_rejected(self):
        with pytest.raises(ValidationError):
            TranslatorConfig.model_validate({"theme": {"color": "red"}})

    def test_frozen(self):
        config = TranslatorConfig()
        with pytest.raises(ValidationError):
            config.prefix = "tw-"

    def test_dump_round_trip(self):
        config = TranslatorConfig(prefix="x-", theme={"media": {"print": "p"}})
        assert TranslatorConfig(**config.model_dump()) == config


class TestThemeLookup:
    def test_theme_value(self):
        config = TranslatorConfig(theme={"rotate": {"33deg": "third", "1deg": ""}})
        assert config.theme_value("rotate", "33deg") == "third"
        assert config.theme_value("rotate", "2deg") is None
        assert config.theme_value("skew", "33deg") is None

    def test_empty_override_ignored(self):
        config = TranslatorConfig(theme={"rotate": {"1deg": ""}})
        assert config.theme_value("rotate", "1deg") is None

    def test_with_theme_merges(self):
        base = TranslatorConfig(theme={"color": {"#000": "text-ink"}})
        merged = base.with_theme({"color": {"#fff": "text-paper"}, "media": {"print": "p"}})
        assert merged.theme == {
            "color": {"#000": "text-ink", "#fff": "text-paper"},
            "media": {"print": "p"},
        }
        assert base.theme == {"color": {"#000": "text-ink"}}


    def test_theme_read_only(self):
        config = TranslatorConfig(theme={"color": {"#000": "text-ink"}})
        with pytest.raises(TypeError):
            config.theme["media"] = {}
        with pytest.raises(TypeError):
            config.theme["color"]["#fff"] = "text-paper"

    def test_merged_theme_read_only(self):
        merged = DEFAULT_CONFIG.with_theme({"color": {"#fff": "text-paper"}})
        with pytest.raises(TypeError):
            merged.theme["color"]["#fff"] = "text-ink"
        assert DEFAULT_CONFIG.theme == {}

    def test_dump_gives_plain_dicts(self):
        dumped = TranslatorConfig(theme={"media": {"print": "p"}}).model_dump()
        assert type(dumped["theme"]) is dict
        assert type(dumped["theme"]["media"]) is dict


class TestLoad:
    def test_load_json(self, tmp_path):
        path = tmp_path / "translator.json"
        path.write_text(json.dumps({"prefix": "tw-", "useAllDefaultValues": False}), encoding="utf-8")
        config = TranslatorConfig.load(path)
        assert config.prefix == "tw-"
        assert config.use_default_scale is False

    def test_load_invalid(self, tmp_path):
        path = tmp_path / "translator.json"
        path.write_text(json.dumps({"unknown": 1}), encoding="utf-8")
        with pytest.raises(ValidationError):
            TranslatorConfig.load(path)

    def test_load_missing(self, tmp_path):
        with pytest.raises(OSError):
            TranslatorConfig.load(tmp_path / "missing.json")
