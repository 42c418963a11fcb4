"""Tests for important, pseudo and breakpoint decoration."""

import pytest
from tailwind_translator.core.config import TranslatorConfig
from tailwind_translator.core.variants import (
    canonical_media,
    decorate,
    is_composite,
    mark_important,
    media_prefix,
    pseudo_variant,
)


class TestImportant:
    def test_tokens(self):
        assert mark_important("w-4 h-4") == "!w-4 !h-4"

    def test_bracket_token(self):
        assert mark_important("[aspect-ratio:16/9]") == "[aspect-ratio:16/9!important]"

    def test_composite_marked_once(self):
        assert mark_important("filter blur-sm") == "!filter blur-sm"

    def test_empty(self):
        assert mark_important("") == ""

    def test_is_composite(self):
        assert is_composite("backdrop-filter backdrop-blur")
        assert is_composite("transform-none")
        assert not is_composite("w-4")


class TestPseudoVariant:
    @pytest.mark.parametrize(
        "selector,variant",
        [
            (".a:hover", "hover"),
            (".a:focus", "focus"),
            (".a:active", "active"),
            (".a::before", "before"),
            (".a::after", "after"),
            (".a", None),
            (".a:hover .b", None),
        ],
    )
    def test_suffix(self, selector, variant):
        assert pseudo_variant(selector) == variant


class TestMedia:
    """Media queries are canonicalised before the breakpoint lookup."""

    def test_canonical_min_width(self):
        assert canonical_media("@media (min-width: 768px)") == "@media(min-width:768px)"

    def test_canonical_not_all(self):
        assert canonical_media("@media not all and (min-width: 640px)") == (
            "@media_not_all_and(min-width:640px)"
        )

    def test_default_breakpoint(self):
        assert media_prefix("@media (min-width: 768px)", TranslatorConfig()) == "md"

    def test_max_breakpoint(self):
        assert media_prefix("@media not all and (min-width: 1024px)", TranslatorConfig()) == "max-lg"

    def test_unknown_query_bracketed(self):
        assert media_prefix("@media (min-width: 900px)", TranslatorConfig()) == (
            "[@media(min-width:900px)]"
        )

    def test_defaults_disabled(self):
        config = TranslatorConfig(use_default_scale=False)
        assert media_prefix("@media (min-width: 768px)", config) == "[@media(min-width:768px)]"

    def test_theme_raw_key(self):
        config = TranslatorConfig(theme={"media": {"@media (min-width: 900px)": "tablet"}})
        assert media_prefix("@media (min-width: 900px)", config) == "tablet"

    def test_theme_canonical_key(self):
        config = TranslatorConfig(theme={"media": {"@media(min-width:900px)": "tablet"}})
        assert media_prefix("@media (min-width: 900px)", config) == "tablet"


class TestDecorate:
    """Order is important, then pseudo, then breakpoint."""

    def test_plain(self):
        assert decorate(".a", "w-4 h-4") == "w-4 h-4"

    def test_hover(self):
        assert decorate(".a:hover", "text-[red]") == "hover:text-[red]"

    def test_media_each_token(self):
        assert decorate(".a", "mx-[8px] my-[4px]", media="md") == "md:mx-[8px] md:my-[4px]"

    def test_all_variants(self):
        assert decorate(".a:hover", "w-4", media="md", important=True) == "md:hover:!w-4"

    def test_composite_as_unit(self):
        assert decorate(".a:focus", "filter blur-sm", media="lg") == "lg:focus:filter blur-sm"

    def test_empty_stays_empty(self):
        assert decorate(".a:hover", "", media="md", important=True) == ""
