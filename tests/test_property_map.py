"""Tests for single declaration mapping."""

import logging

import pytest
from tailwind_translator.core.config import TranslatorConfig
from tailwind_translator.core.property_map import (
    PROPERTY_MAP,
    StaticRule,
    TransformRule,
    apply_prefix,
    map_declaration,
    supported_properties,
)


class TestWidth:
    """Sizing values pick scale steps, fractions or brackets."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("", ""),
            ("abc", ""),
            ("10px", "w-[10px]"),
            ("10", "w-[10]"),
            ("50%", "w-1/2"),
            ("33.3333%", "w-1/3"),
            ("1rem", "w-4"),
            ("auto", "w-auto"),
            ("100%", "w-full"),
            ("100vw", "w-screen"),
            ("100vh", "w-[100vh]"),
        ],
    )
    def test_width(self, config, value, expected):
        assert map_declaration("width", value, config) == expected

    def test_height_screen(self, config):
        assert map_declaration("height", "100vh", config) == "h-screen"
        assert map_declaration("height", "100vw", config) == "h-[100vw]"

    def test_without_default_scale(self, plain_config):
        assert map_declaration("width", "50%", plain_config) == "w-[50%]"
        assert map_declaration("width", "1rem", plain_config) == "w-[1rem]"
        assert map_declaration("width", "auto", plain_config) == "w-auto"

    @pytest.mark.parametrize(
        "prop,value,expected",
        [
            ("max-width", "none", "max-w-none"),
            ("max-width", "65ch", "max-w-prose"),
            ("max-width", "300px", "max-w-[300px]"),
            ("min-height", "100vh", "min-h-screen"),
            ("max-height", "1rem", "max-h-4"),
            ("min-width", "min-content", "min-w-min"),
        ],
    )
    def test_min_max(self, config, prop, value, expected):
        assert map_declaration(prop, value, config) == expected


class TestInset:
    def test_fraction(self, config):
        assert map_declaration("top", "50%", config) == "top-2/4"

    def test_viewport_is_bracketed(self, config):
        assert map_declaration("top", "100vh", config) == "top-[100vh]"

    def test_negative_scale(self, config):
        assert map_declaration("left", "-1rem", config) == "-left-4"

    def test_negative_bracket(self, config):
        assert map_declaration("right", "-3px", config) == "-right-[3px]"

    def test_auto(self, config):
        assert map_declaration("bottom", "auto", config) == "bottom-auto"

    def test_without_default_scale(self, plain_config):
        assert map_declaration("top", "50%", plain_config) == "top-[50%]"


class TestSpacing:
    def test_margin_side_negative(self, config):
        assert map_declaration("margin-top", "-1rem", config) == "-mt-4"

    def test_margin_side_auto(self, config):
        assert map_declaration("margin-left", "auto", config) == "ml-auto"

    def test_padding_side_zero(self, config):
        assert map_declaration("padding-right", "0", config) == "pr-0"

    def test_margin_symmetry(self, config):
        assert map_declaration("margin", "4px 8px 4px 8px", config) == map_declaration(
            "margin", "4px 8px", config
        )

    def test_gap(self, config):
        assert map_declaration("gap", "1rem", config) == "gap-4"
        assert map_declaration("gap", "1px", config) == "gap-[1px]"
        assert map_declaration("column-gap", "1rem", config) == "gap-x-4"
        assert map_declaration("row-gap", "0.5rem", config) == "gap-y-2"


class TestColors:
    def test_hex(self, config):
        assert map_declaration("color", "#fff", config) == "text-[#fff]"

    def test_rgba_canonicalised(self, config):
        assert map_declaration("background-color", "rgba(0, 0, 0, 0.5)", config) == (
            "bg-[rgba(0,_0,_0,_0.5)]"
        )

    def test_keyword(self, config):
        assert map_declaration("color", "currentColor", config) == "text-current"

    def test_not_a_colour(self, config):
        assert map_declaration("color", "notacolor", config) == ""

    def test_custom_colour_name(self, config):
        assert map_declaration("color", "primary", config, is_custom=True) == "text-primary"
        assert map_declaration("background-color", "brand", config, is_custom=True) == "bg-brand"

    def test_colour_without_utility(self, config):
        assert map_declaration("text-decoration-color", "red", config) == "[text-decoration-color:red]"


class TestTypography:
    def test_font_family_single_name(self, config):
        assert map_declaration("font-family", "Inter", config) == "font-Inter"

    def test_font_family_stack(self, config):
        assert map_declaration("font-family", '"Open Sans", sans-serif', config) == (
            'font-["Open_Sans",_sans-serif]'
        )

    def test_font_family_default_stack(self, config):
        stack = 'ui-serif, Georgia, Cambria, "Times New Roman", Times, serif'
        assert map_declaration("font-family", stack, config) == "font-serif"

    def test_font_weight(self, config, plain_config):
        assert map_declaration("font-weight", "700", config) == "font-bold"
        assert map_declaration("font-weight", "700", plain_config) == "font-[700]"

    def test_line_height(self, config):
        assert map_declaration("line-height", "1.5", config) == "leading-normal"
        assert map_declaration("line-height", "1.5rem", config) == "leading-6"
        assert map_declaration("line-height", "22px", config) == "leading-[22px]"

    def test_letter_spacing(self, config):
        assert map_declaration("letter-spacing", "0.025em", config) == "tracking-wide"


class TestTimingAndGrid:
    def test_duration_seconds(self, config):
        assert map_declaration("transition-duration", "0.3s", config) == "duration-300"

    def test_duration_bracket(self, config):
        assert map_declaration("transition-duration", "250ms", config) == "duration-[250ms]"

    def test_delay(self, config):
        assert map_declaration("transition-delay", "1s", config) == "delay-1000"

    def test_duration_not_a_time(self, config):
        assert map_declaration("transition-duration", "fast", config) == ""

    def test_timing_function(self, config):
        assert map_declaration("transition-timing-function", "cubic-bezier(0.4, 0, 0.2, 1)", config) == (
            "ease-in-out"
        )

    def test_transition(self, config):
        assert map_declaration("transition", "none", config) == "transition-none"
        assert map_declaration("transition", "opacity 150ms cubic-bezier(0.4, 0, 0.2, 1)", config) == (
            "transition-opacity"
        )

    def test_grid_template_repeat(self, config):
        assert map_declaration("grid-template-columns", "repeat(3, minmax(0, 1fr))", config) == (
            "grid-cols-3"
        )

    def test_grid_template_custom(self, config):
        assert map_declaration("grid-template-columns", "200px 1fr", config) == "grid-cols-[200px_1fr]"

    def test_grid_column_span(self, config):
        assert map_declaration("grid-column", "span 2 / span 2", config) == "col-span-2"
        assert map_declaration("grid-column", "1 / -1", config) == "col-span-full"

    def test_z_index(self, config):
        assert map_declaration("z-index", "10", config) == "z-10"
        assert map_declaration("z-index", "5", config) == "z-[5]"
        assert map_declaration("z-index", "1.5", config) == ""


class TestStaticAndArbitrary:
    @pytest.mark.parametrize(
        "prop,value,expected",
        [
            ("display", "none", "hidden"),
            ("display", "flex", "flex"),
            ("position", "absolute", "absolute"),
            ("justify-content", "space-between", "justify-between"),
            ("flex", "1 1 0%", "flex-1"),
            ("flex-grow", "1", "flex-grow"),
            ("opacity", "0.5", "opacity-50"),
            ("transform-origin", "top right", "origin-top-right"),
            ("border-top-width", "1px", "border-t"),
            ("border-top-width", "3px", "border-t-[3px]"),
            ("border-left-style", "dashed", "[border-left-style:dashed]"),
            ("box-align", "start", "[box-align:start]"),
            ("counter-increment", "section", "[counter-increment:section]"),
            ("aspect-ratio", "16 / 9", "[aspect-ratio:16_/_9]"),
            ("border-radius", "9999px", "rounded-full"),
            ("filter", "blur(4px)", "filter blur-sm"),
            ("transform", "none", "transform-none"),
        ],
    )
    def test_mapping(self, config, prop, value, expected):
        assert map_declaration(prop, value, config) == expected

    def test_static_miss(self, config):
        assert map_declaration("display", "sideways", config) == ""


class TestLookupOrder:
    """initial/inherit, theme, default table, then rule."""

    def test_initial_and_inherit(self, config):
        assert map_declaration("width", "initial", config) == "[width:initial]"
        assert map_declaration("color", "inherit", config) == "[color:inherit]"

    def test_initial_on_unknown_property(self, config):
        assert map_declaration("foo-bar", "initial", config) == "[foo-bar:initial]"

    def test_unknown_property(self, config, caplog):
        caplog.set_level(logging.DEBUG, logger="tailwind_translator")
        assert map_declaration("foo-bar", "1px", config) == ""
        assert "Unsupported property: foo-bar" in caplog.text

    def test_theme_property_override(self):
        config = TranslatorConfig(theme={"color": {"#123456": "text-brand"}})
        assert map_declaration("color", "#123456", config) == "text-brand"
        assert map_declaration("color", "#654321", config) == "text-[#654321]"

    def test_theme_beats_default_table(self):
        config = TranslatorConfig(theme={"font-weight": {"700": "font-heavy"}})
        assert map_declaration("font-weight", "700", config) == "font-heavy"

    def test_whitespace_trimmed(self, config):
        assert map_declaration("  width ", " 10px ", config) == "w-[10px]"


class TestBracketRoundTrip:
    """Off-scale values survive into the bracketed utility unchanged."""

    @pytest.mark.parametrize(
        "prop,value",
        [
            ("width", "13px"),
            ("width", "7"),
            ("height", "0.33"),
            ("margin-top", "13px"),
            ("padding", "13px"),
            ("top", "13px"),
            ("gap", "13px"),
            ("z-index", "7"),
            ("order", "13"),
            ("opacity", "0.33"),
            ("flex-grow", "2"),
            ("letter-spacing", "0.33em"),
            ("line-height", "22px"),
            ("font-size", "13px"),
            ("stroke-width", "3"),
            ("border-radius", "13px"),
            ("border-top-width", "3px"),
        ],
    )
    def test_value_kept(self, config, plain_config, prop, value):
        for cfg in (config, plain_config):
            classes = map_declaration(prop, value, cfg)
            assert f"[{value}]" in classes, (prop, value, classes)

    @pytest.mark.parametrize(
        "prop,value,expected",
        [
            ("grid-template-columns", "200px 1fr", "grid-cols-[200px_1fr]"),
            ("aspect-ratio", "16 / 9", "[aspect-ratio:16_/_9]"),
            ("color", "rgba(0, 0, 0, 0.5)", "text-[rgba(0,_0,_0,_0.5)]"),
        ],
    )
    def test_spaces_become_underscores(self, config, prop, value, expected):
        assert map_declaration(prop, value, config) == expected

    @pytest.mark.parametrize("prop", ["width", "height", "margin-top", "top", "font-size"])
    def test_calc_is_dropped(self, config, prop):
        assert map_declaration(prop, "calc(100% - 4px)", config) == ""

    def test_category_theme_key_not_a_property_override(self):
        config = TranslatorConfig(theme={"rotate": {"45deg": "45"}})
        assert map_declaration("rotate", "45deg", config) == "[rotate:45deg]"


class TestPrefix:
    def test_apply_prefix(self):
        assert apply_prefix("mt-4 -ml-2", "tw-") == "tw-mt-4 -tw-ml-2"

    def test_apply_empty_prefix(self):
        assert apply_prefix("mt-4", "") == "mt-4"

    def test_negative_margin_with_prefix(self):
        config = TranslatorConfig(prefix="tw-")
        assert map_declaration("margin-top", "-1rem", config) == "-tw-mt-4"

    def test_every_token_prefixed(self):
        config = TranslatorConfig(prefix="tw-")
        assert map_declaration("margin", "4px 8px", config) == "tw-mx-[8px] tw-my-[4px]"


class TestEveryProperty:
    """Exhaustive pass over the whole table."""

    SAMPLE_VALUES = (
        "10px",
        "-1rem",
        "50%",
        "0",
        "auto",
        "none",
        "red",
        "#fff",
        "rgba(0, 0, 0, 0.5)",
        "1 2 3 4 5",
        "scale(1,1,1)",
        "(",
        ")",
        "/",
        ".s",
        "var(--x)",
        "a b c",
    )

    def test_supported_properties_sorted(self):
        names = supported_properties()
        assert names == sorted(names)
        assert set(names) == set(PROPERTY_MAP)
        assert "margin" in names
        assert "border-left-width" in names

    @pytest.mark.parametrize("prop", supported_properties())
    def test_rule_kind(self, prop):
        assert isinstance(PROPERTY_MAP[prop], (StaticRule, TransformRule))

    @pytest.mark.parametrize("prop", supported_properties())
    def test_initial_keyword(self, config, prop):
        assert map_declaration(prop, "initial", config) == f"[{prop}:initial]"

    @pytest.mark.parametrize("prop", supported_properties())
    def test_empty_value(self, config, prop):
        assert map_declaration(prop, "", config) == ""

    @pytest.mark.parametrize("prop", supported_properties())
    def test_sample_values_never_raise(self, config, plain_config, prop):
        for value in self.SAMPLE_VALUES:
            for cfg in (config, plain_config):
                result = map_declaration(prop, value, cfg)
                assert isinstance(result, str)
                assert "  " not in result
