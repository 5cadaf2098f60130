"""Tests for the fluent CSS selector builder."""

import re

import pytest

from models.errors import DuplicateCategoryError, OrderViolationError
from models.selectors import Category, Selector, SelectorBuilder, css_selector_builder

builder = css_selector_builder

DUPLICATE_MSG = re.escape(
    "element, id and pseudo-element should not occur more than one time "
    "inside the selector"
)
ORDER_MSG = re.escape(
    "selector parts should be arranged in the following order: "
    "element, id, class, attribute, pseudo-class, pseudo-element"
)


# ---------------------------------------------------------------------------
# Single parts
# ---------------------------------------------------------------------------


class TestSingleParts:
    @pytest.mark.parametrize(
        "method, value, expected",
        [
            ("element", "div", "div"),
            ("id", "main", "#main"),
            ("class_", "container", ".container"),
            ("attr", "target", "[target]"),
            ("pseudo_class", "hover", ":hover"),
            ("pseudo_element", "before", "::before"),
        ],
    )
    def test_literal_form(self, method, value, expected):
        assert getattr(builder, method)(value).stringify() == expected

    def test_attr_value_is_verbatim(self):
        assert builder.attr('href$=".png"').stringify() == '[href$=".png"]'

    def test_last_category_tracks_append(self):
        sel = builder.element("a").id("b")
        assert sel.last_category is Category.ID
        assert sel.has_element and sel.has_id
        assert not sel.has_pseudo_element


# ---------------------------------------------------------------------------
# Chains
# ---------------------------------------------------------------------------


class TestChains:
    def test_element_and_id(self):
        assert builder.element("a").id("b").stringify() == "a#b"

    def test_repeated_classes(self):
        sel = builder.id("main").class_("container").class_("editable")
        assert sel.stringify() == "#main.container.editable"

    def test_attribute_and_pseudo_class(self):
        sel = builder.element("a").attr('href$=".png"').pseudo_class("focus")
        assert sel.stringify() == 'a[href$=".png"]:focus'

    def test_full_compound(self):
        sel = (
            builder.element("input")
            .id("email")
            .class_("field")
            .class_("wide")
            .attr("type=email")
            .attr("required")
            .pseudo_class("focus")
            .pseudo_class("invalid")
            .pseudo_element("placeholder")
        )
        assert sel.stringify() == (
            "input#email.field.wide[type=email][required]:focus:invalid::placeholder"
        )

    @pytest.mark.parametrize(
        "steps, expected",
        [
            ([("id", "x"), ("pseudo_element", "after")], "#x::after"),
            ([("class_", "a"), ("attr", "b"), ("attr", "c")], ".a[b][c]"),
            ([("element", "p"), ("pseudo_class", "first-child")], "p:first-child"),
            ([("pseudo_class", "root"), ("pseudo_element", "selection")], ":root::selection"),
            ([("element", "li"), ("class_", "a"), ("pseudo_element", "marker")], "li.a::marker"),
        ],
    )
    def test_valid_orderings(self, steps, expected):
        sel = Selector()
        for method, value in steps:
            sel = getattr(sel, method)(value)
        assert sel.stringify() == expected

    def test_many_repeats_allowed(self):
        sel = builder.element("div")
        for i in range(50):
            sel = sel.class_(f"c{i}")
        assert sel.stringify().count(".") == 50

    def test_append_does_not_change_source(self):
        base = builder.element("a")
        base.class_("x")
        assert base.rendered == "a"
        assert base.last_category is Category.ELEMENT

    def test_prefix_reuse(self):
        base = builder.element("a")
        first = base.class_("x")
        second = base.id("y")
        assert first.stringify() == "a.x"
        assert second.stringify() == "a#y"

    def test_entry_points_are_independent(self):
        builder.element("div")
        assert builder.class_("x").stringify() == ".x"
        assert SelectorBuilder().element("p").stringify() == "p"


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class TestDuplicateParts:
    def test_element_twice(self):
        with pytest.raises(DuplicateCategoryError, match=DUPLICATE_MSG):
            builder.element("a").id("b").element("c")

    def test_id_twice(self):
        with pytest.raises(DuplicateCategoryError, match=DUPLICATE_MSG):
            builder.id("a").id("b")

    def test_pseudo_element_twice(self):
        with pytest.raises(DuplicateCategoryError, match=DUPLICATE_MSG):
            builder.pseudo_element("before").pseudo_element("after")

    def test_duplicate_checked_before_order(self):
        with pytest.raises(DuplicateCategoryError):
            builder.element("a").class_("x").element("b")


class TestOrderViolations:
    def test_id_after_class(self):
        with pytest.raises(OrderViolationError, match=ORDER_MSG):
            builder.element("a").class_("x").id("y")

    @pytest.mark.parametrize(
        "first, second",
        [
            ("id", "element"),
            ("class_", "element"),
            ("class_", "id"),
            ("attr", "class_"),
            ("pseudo_class", "attr"),
            ("pseudo_element", "pseudo_class"),
            ("pseudo_element", "class_"),
        ],
    )
    def test_out_of_order(self, first, second):
        sel = getattr(builder, first)("one")
        with pytest.raises(OrderViolationError, match=ORDER_MSG):
            getattr(sel, second)("two")


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


class TestStringify:
    def test_read_and_reset(self):
        sel = builder.element("div").class_("x")
        assert sel.stringify() == "div.x"
        assert sel.stringify() == ""

    def test_reset_does_not_touch_earlier_selectors(self):
        base = builder.element("div")
        derived = base.class_("x")
        derived.stringify()
        assert base.stringify() == "div"


# ---------------------------------------------------------------------------
# Combinators
# ---------------------------------------------------------------------------


class TestCombine:
    def test_adjacent_sibling(self):
        sel = builder.combine(builder.element("div"), "+", builder.element("table"))
        assert sel.stringify() == "div + table"

    @pytest.mark.parametrize("combinator", [" ", "+", "~", ">"])
    def test_combinator_is_padded(self, combinator):
        sel = builder.combine(builder.element("a"), combinator, builder.element("b"))
        assert sel.stringify() == f"a {combinator} b"

    def test_nested_combinations(self):
        sel = builder.combine(
            builder.element("div").id("main").class_("container").class_("draggable"),
            "+",
            builder.combine(
                builder.element("table").id("data"),
                "~",
                builder.combine(
                    builder.element("tr").pseudo_class("nth-of-type(even)"),
                    " ",
                    builder.element("td").pseudo_class("nth-of-type(even)"),
                ),
            ),
        )
        assert sel.stringify() == (
            "div#main.container.draggable + table#data ~ "
            "tr:nth-of-type(even)   td:nth-of-type(even)"
        )

    def test_operands_are_consumed(self):
        left = builder.element("ul")
        right = builder.element("li")
        builder.combine(left, ">", right)
        assert left.stringify() == ""
        assert right.stringify() == ""

    def test_results_are_isolated(self):
        first = builder.combine(builder.element("a"), "+", builder.element("b"))
        second = builder.combine(builder.element("c"), "~", builder.element("d"))
        assert first.stringify() == "a + b"
        assert second.stringify() == "c ~ d"

    def test_appends_extend_joined_text(self):
        sel = builder.combine(builder.element("div"), ">", builder.element("p"))
        assert sel.class_("lead").stringify() == "div > p.lead"

    def test_combined_selector_has_no_ordering_state(self):
        sel = builder.combine(builder.element("a"), "+", builder.element("b"))
        assert sel.last_category is Category.NONE
        assert not (sel.has_element or sel.has_id or sel.has_pseudo_element)

    def test_any_part_may_follow_combine(self):
        sel = builder.combine(
            builder.element("a"), "+", builder.element("b").class_("y")
        )
        assert sel.id("z").stringify() == "a + b.y#z"

    def test_singletons_reset_after_combine(self):
        sel = builder.combine(builder.element("div"), ">", builder.element("p"))
        assert sel.element("span").stringify() == "div > pspan"
