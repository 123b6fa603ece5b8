"""Tests for permalink format compilation and rendering."""

from __future__ import annotations

from backend.permalink.tokens import (
    Literal,
    Placeholder,
    compile_format,
    placeholder_names,
    render,
    render_format,
)

DATE_FORMAT = "%year%/%monthnum%/%postname%"


class TestCompileFormat:
    def test_placeholders_absorb_following_separator(self) -> None:
        assert compile_format(DATE_FORMAT) == (
            Placeholder("year", "/"),
            Placeholder("monthnum", "/"),
            Placeholder("postname", None),
        )

    def test_literal_prefix_is_one_token_per_character(self) -> None:
        tokens = compile_format("p/%post_id%")
        assert tokens == (Literal("p"), Literal("/"), Placeholder("post_id", None))

    def test_trailing_literals_after_terminator(self) -> None:
        assert compile_format("%post_id%.html") == (
            Placeholder("post_id", "."),
            Literal("h"),
            Literal("t"),
            Literal("m"),
            Literal("l"),
        )

    def test_adjacent_placeholders_have_no_terminator(self) -> None:
        assert compile_format("%year%%monthnum%") == (
            Placeholder("year", None),
            Placeholder("monthnum", None),
        )

    def test_empty_format(self) -> None:
        assert compile_format("") == ()

    def test_format_without_placeholders(self) -> None:
        assert compile_format("about") == tuple(Literal(c) for c in "about")

    def test_unknown_placeholder_names_accepted(self) -> None:
        assert compile_format("%whatever%") == (Placeholder("whatever", None),)

    def test_lone_percent_signs_are_literals(self) -> None:
        assert compile_format("%%") == (Literal("%"), Literal("%"))
        assert compile_format("100%") == tuple(Literal(c) for c in "100%")

    def test_unclosed_placeholder_is_literal_text(self) -> None:
        tokens = compile_format("%year/x")
        assert all(isinstance(t, Literal) for t in tokens)
        assert "".join(t.text for t in tokens if isinstance(t, Literal)) == "%year/x"


class TestPlaceholderNames:
    def test_in_format_order_without_duplicates(self) -> None:
        tokens = compile_format("%year%/%monthnum%/%year%")
        assert placeholder_names(tokens) == ["year", "monthnum"]

    def test_no_placeholders(self) -> None:
        assert placeholder_names(compile_format("about")) == []


class TestRender:
    def test_substitutes_fields(self) -> None:
        fields = {"year": "2024", "monthnum": "03", "postname": "hello"}
        assert render(compile_format(DATE_FORMAT), fields) == "2024/03/hello"

    def test_missing_fields_render_verbatim(self) -> None:
        assert render_format(DATE_FORMAT, {"year": "2024"}) == "2024/%monthnum%/%postname%"

    def test_extra_fields_ignored(self) -> None:
        assert render_format("%post_id%.html", {"post_id": "7", "slug": "x"}) == "7.html"

    def test_value_containing_placeholder_text_is_not_resubstituted(self) -> None:
        fields = {"year": "%postname%", "postname": "hello"}
        assert render_format("%year%/%postname%", fields) == "%postname%/hello"

    def test_renders_literal_only_format(self) -> None:
        assert render_format("about", {"year": "2024"}) == "about"
