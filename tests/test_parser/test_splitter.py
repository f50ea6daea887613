"""Tests for splitting stylesheet text into raw rules."""

import pytest

from cascadecss.model.diagnostic import DiagnosticKind
from cascadecss.parser import RawRule, flatten, split_rules
from cascadecss.reporting import CollectingSink, EscalatingSink
from cascadecss.errors import MalformedRuleError


@pytest.fixture
def sink() -> CollectingSink:
    return CollectingSink()


# ---------------------------------------------------------------------------
# Flattening
# ---------------------------------------------------------------------------


class TestFlatten:
    def test_line_breaks_and_tabs_become_spaces(self):
        assert flatten("a {\n\tcolor: red;\r\n}") == "a {  color: red;  }"

    def test_comments_removed(self):
        assert flatten("a { /* note */color: red; }") == "a { color: red; }"

    def test_multiline_comment_removed(self):
        assert flatten("/* one\ntwo */a { }") == "a { }"

    def test_comments_are_not_greedy(self):
        text = "/* x */ a { color: red; } /* y */"
        assert flatten(text) == " a { color: red; } "


# ---------------------------------------------------------------------------
# Splitting
# ---------------------------------------------------------------------------


class TestSplitRules:
    def test_single_rule(self, sink):
        rules = list(split_rules(".a { color: red; }", sink))
        assert rules == [RawRule(".a", " color: red; ")]
        assert sink.records == []

    def test_multiple_rules_in_source_order(self, sink):
        source = """
        .a { color: red; }
        .b { color: blue; }
        #c { margin: 0; }
        """
        rules = list(split_rules(source, sink))
        assert [r.selector_text for r in rules] == [".a", ".b", "#c"]

    def test_selector_whitespace_collapsed(self, sink):
        rules = list(split_rules("div    >\n  p { color: red; }", sink))
        assert rules[0].selector_text == "div > p"

    def test_empty_declaration_block(self, sink):
        rules = list(split_rules(".a {}", sink))
        assert rules == [RawRule(".a", "")]

    def test_blank_chunks_ignored(self, sink):
        rules = list(split_rules("   .a { x: 1; }   \n\n  ", sink))
        assert len(rules) == 1
        assert sink.records == []

    def test_commented_out_rule_skipped(self, sink):
        rules = list(split_rules("/* .a { color: blue; } */ .b { color: red; }", sink))
        assert [r.selector_text for r in rules] == [".b"]


class TestGroupedSelectors:
    def test_selectors_split_on_comma(self):
        raw = RawRule("a, b ,span", " color: red; ")
        assert raw.selectors == ["a", "b", "span"]

    def test_blank_selectors_dropped(self):
        raw = RawRule(", a,", "")
        assert raw.selectors == ["a"]


class TestMalformedRules:
    def test_chunk_without_brace_reported(self, sink):
        rules = list(split_rules(".a { color: red; } oops } .b { color: blue; }", sink))
        assert [r.selector_text for r in rules] == [".a", ".b"]
        assert sink.messages() == ["Invalid or unexpected style data ' oops }'"]
        assert sink.records[0].kind is DiagnosticKind.MALFORMED_RULE

    def test_trailing_text_without_closing_brace(self, sink):
        rules = list(split_rules(".a { color: red; } .b { color: blue;", sink))
        assert len(rules) == 1
        assert len(sink.records) == 1

    def test_escalating_sink_stops_iteration(self):
        rules = split_rules(".a { x: 1; } bad } .b { x: 2; }", EscalatingSink())
        assert next(rules).selector_text == ".a"
        with pytest.raises(MalformedRuleError, match="bad"):
            next(rules)
