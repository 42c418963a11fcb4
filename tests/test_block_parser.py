"""Tests for the brace-aware block parser."""

from tailwind_translator.core.block_parser import ParseNode, parse_blocks


class TestFlatRules:
    def test_single_rule(self):
        assert parse_blocks(".a{color:red}") == [ParseNode(".a", "color:red")]

    def test_multiple_rules_in_order(self):
        nodes = parse_blocks(".a{color:red} .b { width: 10px; }")
        assert nodes == [ParseNode(".a", "color:red"), ParseNode(".b", "width: 10px;")]

    def test_whitespace_and_newlines(self):
        nodes = parse_blocks("\n  .a {\n  color: red;\n}\n")
        assert nodes == [ParseNode(".a", "color: red;")]

    def test_selector_across_lines(self):
        assert parse_blocks(".a\n.b{color:red}") == [ParseNode(".a .b", "color:red")]

    def test_empty_input(self):
        assert parse_blocks("") == []
        assert parse_blocks("   \n ") == []

    def test_empty_body(self):
        assert parse_blocks(".a{}") == [ParseNode(".a", "")]

    def test_leaf_flag(self):
        assert parse_blocks(".a{color:red}")[0].is_leaf


class TestNestedRules:
    """At-rule wrappers produce child nodes."""

    def test_media_wrapper(self):
        nodes = parse_blocks("@media (min-width: 640px) { .b { width: 10px; } .c{color:red} }")
        assert len(nodes) == 1
        media = nodes[0]
        assert media.selector == "@media (min-width: 640px)"
        assert not media.is_leaf
        assert media.body == [ParseNode(".b", "width: 10px;"), ParseNode(".c", "color:red")]

    def test_mixed_top_level(self):
        nodes = parse_blocks(".a{color:red}@media (min-width:768px){.b{color:blue}}")
        assert nodes[0] == ParseNode(".a", "color:red")
        assert nodes[1].selector == "@media (min-width:768px)"
        assert nodes[1].body == [ParseNode(".b", "color:blue")]

    def test_deeper_nesting_is_parsed(self):
        nodes = parse_blocks("@supports (display:grid){@media print{.a{color:red}}}")
        inner = nodes[0].body[0]
        assert inner.selector == "@media print"
        assert inner.body == [ParseNode(".a", "color:red")]


class TestMalformedInput:
    """Unbalanced braces are handled best-effort."""

    def test_unterminated_body(self):
        assert parse_blocks(".a{color:red") == [ParseNode(".a", "color:red")]

    def test_trailing_text_discarded(self):
        assert parse_blocks(".a{color:red} .b") == [ParseNode(".a", "color:red")]

    def test_stray_closing_brace(self):
        assert parse_blocks("}.a{color:red}") == [ParseNode(".a", "color:red")]

    def test_text_without_braces(self):
        assert parse_blocks("color: red") == []

    def test_large_input_is_linear(self):
        css = ".a{color:red}" * 5000
        nodes = parse_blocks(css)
        assert len(nodes) == 5000
        assert nodes[-1] == ParseNode(".a", "color:red")
