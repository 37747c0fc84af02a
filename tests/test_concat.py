#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Functional test-suite for the hbconcat engine.

• Literal scenarios of the concat helper (strings, arrays, objects, block
  templates, render_all, @root lookups).
• Ordering, distinct, quoting and emptiness properties.
• Error propagation (classification, render and write failures).

A fake template engine is used throughout: fragments are plain callables
receiving the RenderScope, so no template syntax is involved here.
"""
from __future__ import annotations

import io
import unittest

from fakes import (
    FakeTemplateEngine,
    angled,
    bracketed,
    label,
    label_or_root_zero,
    label_or_this,
)
from hbconcat import Bound, ClassificationError, ConcatEngine, RenderError, WriteError
from hbconcat.rendering.stringify import json_render

LABELS = {
    "key0": {"label": "Two"},
    "key1": {"label": "Three"},
    "key2": {"label": "Four"},
}


def _this(scope) -> str:
    return json_render(scope.value)


class ConcatBaseTest(unittest.TestCase):
    def setUp(self) -> None:
        self.tpl = FakeTemplateEngine()
        self.engine = ConcatEngine(template_engine=self.tpl)

    def concat(self, *args, **kwargs) -> str:
        return self.engine.concat(*args, **kwargs)


# --------------------------------------------------------------------------- #
#  1. Literals                                                                #
# --------------------------------------------------------------------------- #
class LiteralTests(ConcatBaseTest):
    def test_numeric_literals(self) -> None:
        self.assertEqual(self.concat([1, 2]), "1,2")

    def test_string_literals(self) -> None:
        self.assertEqual(self.concat(["One", "Two"]), "One,Two")

    def test_separator(self) -> None:
        self.assertEqual(self.concat(["One", "Two"], {"separator": ", "}), "One, Two")

    def test_quotes(self) -> None:
        out = self.concat(["One", "Two"], {"separator": ", ", "quotes": True})
        self.assertEqual(out, '"One", "Two"')

    def test_single_quotes(self) -> None:
        out = self.concat(["One", "Two"], {"separator": ", ", "quotes": True, "single_quote": True})
        self.assertEqual(out, "'One', 'Two'")

    def test_single_quote_without_quotes_is_ignored(self) -> None:
        out = self.concat(["One", "Two"], {"single_quote": True})
        self.assertEqual(out, "One,Two")

    def test_scalar_text_forms(self) -> None:
        self.assertEqual(self.concat([True, False, 1.5, 0, "x"]), "true,false,1.5,0,x")

    def test_single_scalar_is_its_literal(self) -> None:
        for value in ("abc", 42, 2.5, True):
            with self.subTest(value=value):
                self.assertEqual(self.concat([value], {"separator": " | "}), json_render(value))


# --------------------------------------------------------------------------- #
#  2. Arrays and objects                                                      #
# --------------------------------------------------------------------------- #
class ContainerTests(ConcatBaseTest):
    def test_missing_values_and_array_with_quotes(self) -> None:
        out = self.concat(
            [None, ["One", "Two", "Three"], None],
            {"separator": ", ", "quotes": True},
        )
        self.assertEqual(out, '"One", "Two", "Three"')

    def test_literal_array_and_object_distinct(self) -> None:
        out = self.concat(
            ["One", ["One", "Two"], {"Three": 3}],
            {"separator": ", ", "distinct": True},
        )
        self.assertEqual(out, "One, Two, Three")

    def test_object_keys_with_quotes_without_distinct(self) -> None:
        out = self.concat([LABELS], {"separator": ", ", "quotes": True})
        self.assertEqual(out, '"key0", "key1", "key2"')

    def test_object_without_block_never_uses_values(self) -> None:
        out = self.concat([{"a": "value-a", "b": "value-b"}], {"distinct": True, "quotes": True})
        self.assertEqual(out, '"a","b"')
        self.assertNotIn("value", out)

    def test_object_keys_of_this(self) -> None:
        data = {"item1": "Value 1", "item2": "Value 2"}
        self.assertEqual(self.concat([data], {"separator": ", "}), "item1, item2")

    def test_nested_containers_in_array_use_literal_text(self) -> None:
        out = self.concat([[["a", 1], {"k": "v"}, None, "z"]])
        self.assertEqual(out, "[a, 1],[object],z")

    def test_tuple_is_a_sequence(self) -> None:
        self.assertEqual(self.concat([("a", "b")]), "a,b")


# --------------------------------------------------------------------------- #
#  3. Block templates                                                         #
# --------------------------------------------------------------------------- #
class BlockTemplateTests(ConcatBaseTest):
    def test_block_renders_object_values_only(self) -> None:
        out = self.concat(
            ["One", ["One", "Two"], LABELS],
            {"separator": ", ", "distinct": True},
            label,
        )
        self.assertEqual(out, "One, Two, Three, Four")

    def test_block_with_quotes(self) -> None:
        out = self.concat(
            ["One", ["One", "Two"], LABELS],
            {"separator": ", ", "distinct": True, "quotes": True},
            label,
        )
        self.assertEqual(out, '"One", "Two", "Three", "Four"')

    def test_block_of_this(self) -> None:
        data = {"item1": "Value 1", "item2": "Value 2"}
        self.assertEqual(self.concat([data], {"separator": ", "}, _this), "Value 1, Value 2")

    def test_object_values_sub_rendered_with_distinct(self) -> None:
        obj = {"key0": {"label": "Two"}, "key1": {"label": "Three"}}
        out = self.concat([obj], {"distinct": True, "separator": ", "}, label)
        self.assertEqual(out, "Two, Three")

    def test_render_all(self) -> None:
        out = self.concat(
            ["One", ["One", "Two"], LABELS],
            {"separator": ", ", "distinct": True, "render_all": True},
            angled(label_or_this),
        )
        self.assertEqual(out, "<One/>, <Two/>, <Three/>, <Four/>")

    def test_render_all_with_quotes(self) -> None:
        out = self.concat(
            ["One", ["One", "Two"], LABELS],
            {"separator": ", ", "distinct": True, "render_all": True, "quotes": True},
            bracketed(label_or_this),
        )
        self.assertEqual(out, '"[One]", "[Two]", "[Three]", "[Four]"')

    def test_render_all_object_only_with_quotes(self) -> None:
        obj = {"key0": {"label": "Two"}, "key1": {"label": "Three"}}
        out = self.concat([obj], {"render_all": True, "quotes": True, "separator": ", "}, bracketed(label))
        self.assertEqual(out, '"[Two]", "[Three]"')

    def test_render_all_with_root_lookup(self) -> None:
        root = {"zero": "Zero", "s": "One", "arr": ["One", "Two"], "obj": LABELS}
        out = self.concat(
            [Bound(("s",), root["s"]), Bound(("arr",), root["arr"]), Bound(("obj",), root["obj"])],
            {"separator": ", ", "distinct": True, "render_all": True, "quotes": True},
            bracketed(label_or_root_zero),
            root=root,
        )
        self.assertEqual(out, '"[Zero]", "[Two]", "[Three]", "[Four]"')

    def test_render_all_tags(self) -> None:
        def tag_or_this(scope) -> str:
            if isinstance(scope.value, dict) and scope.value.get("tag"):
                return scope.value["tag"]
            return json_render(scope.value)

        data = {"key0": {"tag": "Input"}, "key1": {"tag": "Select"}, "key2": {"tag": "Button"}}
        out = self.concat(["Form", data], {"separator": "", "render_all": True}, angled(tag_or_this))
        self.assertEqual(out, "<Form/><Input/><Select/><Button/>")

    def test_render_all_without_block_uses_literals(self) -> None:
        out = self.concat(["One", ["Two"], {"Three": 3}], {"render_all": True})
        self.assertEqual(out, "One,Two,Three")

    def test_compiled_fragment_from_engine(self) -> None:
        fragment = self.engine.compile("{{label}}")
        self.assertEqual(self.concat([LABELS], None, fragment), "Two,Three,Four")


# --------------------------------------------------------------------------- #
#  4. Render scopes                                                           #
# --------------------------------------------------------------------------- #
class RenderScopeTests(ConcatBaseTest):
    def test_bound_scalar_reuses_path(self) -> None:
        root = {"s": "One"}
        self.concat([Bound(("s",), "One")], {"render_all": True}, _this, root=root)
        (scope,) = self.tpl.scopes
        self.assertEqual(scope.path, ("s",))
        self.assertEqual(scope.value, "One")
        self.assertIs(scope.root, root)

    def test_literal_scalar_binds_value(self) -> None:
        self.concat(["One"], {"render_all": True}, _this)
        (scope,) = self.tpl.scopes
        self.assertIsNone(scope.path)
        self.assertEqual(scope.value, "One")

    def test_sequence_items_never_carry_a_path(self) -> None:
        self.concat([Bound(("arr",), ["a", "b"])], {"render_all": True}, _this)
        self.assertEqual([s.value for s in self.tpl.scopes], ["a", "b"])
        self.assertTrue(all(s.path is None for s in self.tpl.scopes))

    def test_mapping_values_never_carry_a_path(self) -> None:
        self.concat([Bound(("obj",), LABELS)], None, label)
        self.assertEqual([s.value for s in self.tpl.scopes], list(LABELS.values()))
        self.assertTrue(all(s.path is None for s in self.tpl.scopes))

    def test_scalars_are_not_sub_rendered_without_render_all(self) -> None:
        self.concat(["One", ["Two"]], None, _this)
        self.assertEqual(self.tpl.scopes, [])


# --------------------------------------------------------------------------- #
#  5. Distinct, quoting and emptiness                                         #
# --------------------------------------------------------------------------- #
class FilteringTests(ConcatBaseTest):
    def test_duplicates_kept_without_distinct(self) -> None:
        self.assertEqual(self.concat(["a", ["a", "a", "b"]]), "a,a,a,b")

    def test_distinct_inside_one_array(self) -> None:
        self.assertEqual(self.concat([["a", "a", "b", "a"]], {"distinct": True}), "a,b")

    def test_distinct_inside_one_rendered_mapping(self) -> None:
        obj = {"x": {"label": "L"}, "y": {"label": "L"}, "z": {"label": "M"}}
        self.assertEqual(self.concat([obj], {"distinct": True}, label), "L,M")

    def test_distinct_compares_produced_text(self) -> None:
        # 1 and "1" differ as values but print the same.
        self.assertEqual(self.concat([1, "1", 1.0], {"distinct": True}), "1,1.0")

    def test_distinct_compares_after_quoting(self) -> None:
        out = self.concat(["a", '"a"'], {"distinct": True, "quotes": True, "single_quote": True})
        self.assertEqual(out, "'a','\"a\"'")

    def test_distinct_presence_enables(self) -> None:
        self.assertEqual(self.concat(["a", "a"], {"distinct": False}), "a")

    def test_empty_strings_dropped(self) -> None:
        self.assertEqual(self.concat(["", "A", ["", "B"], {"": 1}]), "A,B")

    def test_empty_strings_dropped_with_quotes(self) -> None:
        self.assertEqual(self.concat(["", "A", [""]], {"quotes": True}), '"A"')

    def test_empty_sub_render_dropped(self) -> None:
        out = self.concat([{"a": {}, "b": {"label": "B"}}], {"quotes": True}, label)
        self.assertEqual(out, '"B"')

    def test_only_empty_values(self) -> None:
        self.assertEqual(self.concat([None, "", [None]]), "")

    def test_no_arguments(self) -> None:
        self.assertEqual(self.concat([]), "")

    def test_quoting_is_structural(self) -> None:
        args = ["One", ["Two", "Three"], {"Four": 4}]
        plain = self.concat(args, {"separator": ";"})
        quoted = self.concat(args, {"separator": ";", "quotes": True})
        self.assertEqual(quoted.replace('"', ""), plain)

    def test_block_without_fragment_is_a_no_op(self) -> None:
        out = self.concat(["A", {"k": {"label": "L"}}], None, None, block=True)
        self.assertEqual(out, "A")

    def test_block_without_fragment_render_all(self) -> None:
        out = self.concat(["A", ["B"]], {"render_all": True}, None, block=True)
        self.assertEqual(out, "")


# --------------------------------------------------------------------------- #
#  6. Options                                                                 #
# --------------------------------------------------------------------------- #
class OptionTests(ConcatBaseTest):
    def test_separator_is_rendered(self) -> None:
        self.assertEqual(self.concat(["a", "b"], {"separator": 0}), "a0b")

    def test_null_separator_is_empty(self) -> None:
        self.assertEqual(self.concat(["a", "b"], {"separator": None}), "ab")

    def test_unknown_options_ignored(self) -> None:
        self.assertEqual(self.concat(["a", "b"], {"colour": "red"}), "a,b")


# --------------------------------------------------------------------------- #
#  7. Errors                                                                  #
# --------------------------------------------------------------------------- #
class ErrorTests(ConcatBaseTest):
    def test_unclassifiable_argument(self) -> None:
        with self.assertRaises(ClassificationError):
            self.concat(["a", object()])

    def test_set_is_not_a_sequence(self) -> None:
        with self.assertRaises(TypeError):
            self.concat([{"a", "b"}])

    def test_unsupported_array_item(self) -> None:
        with self.assertRaises(ClassificationError):
            self.concat([["a", {1, 2}]])

    def test_unsupported_array_item_with_render_all(self) -> None:
        with self.assertRaises(ClassificationError):
            self.concat([["a", object()]], {"render_all": True}, _this)
        self.assertEqual([s.value for s in self.tpl.scopes], ["a"])

    def test_unsupported_nested_item(self) -> None:
        with self.assertRaises(ClassificationError):
            self.concat([[["a", object()]]])

    def test_unsupported_mapping_value_with_block(self) -> None:
        with self.assertRaises(ClassificationError):
            self.concat([{"k": {1, 2}}], None, label)
        self.assertEqual(self.tpl.scopes, [])

    def test_mapping_values_ignored_without_block(self) -> None:
        self.assertEqual(self.concat([{"k": object()}]), "k")

    def test_unsupported_mapping_key(self) -> None:
        with self.assertRaises(ClassificationError):
            self.concat([{frozenset(): 1}])

    def test_render_failure_is_wrapped(self) -> None:
        def boom(scope) -> str:
            raise ValueError("bad fragment")

        with self.assertRaises(RenderError) as cm:
            self.concat([{"k": 1}], None, boom)
        self.assertIsInstance(cm.exception.__cause__, ValueError)

    def test_render_error_passes_through(self) -> None:
        err = RenderError("already typed")

        def boom(scope) -> str:
            raise err

        with self.assertRaises(RenderError) as cm:
            self.concat(["a", {"k": 1}], None, boom)
        self.assertIs(cm.exception, err)

    def test_render_failure_aborts_after_partial_work(self) -> None:
        calls = []

        def second_fails(scope) -> str:
            calls.append(scope.value)
            if len(calls) == 2:
                raise RuntimeError("nope")
            return "ok"

        with self.assertRaises(RenderError):
            self.concat([{"a": 1, "b": 2, "c": 3}], None, second_fails)
        self.assertEqual(calls, [1, 2])


# --------------------------------------------------------------------------- #
#  8. Sinks                                                                   #
# --------------------------------------------------------------------------- #
class SinkTests(ConcatBaseTest):
    def test_concat_to_writes_text(self) -> None:
        buf = io.StringIO()
        out = self.engine.concat_to(buf, ["One", "Two"], {"separator": ", "})
        self.assertEqual(out, "One, Two")
        self.assertEqual(buf.getvalue(), "One, Two")

    def test_closed_sink(self) -> None:
        buf = io.StringIO()
        buf.close()
        with self.assertRaises(WriteError) as cm:
            self.engine.concat_to(buf, ["One"])
        self.assertIsInstance(cm.exception.__cause__, ValueError)

    def test_failing_sink(self) -> None:
        class Broken:
            def write(self, text: str) -> int:
                raise OSError("disk full")

        with self.assertRaises(WriteError):
            self.engine.concat_to(Broken(), ["One"])


if __name__ == "__main__":
    unittest.main()
