import os
import unittest
from unittest.mock import patch

from quillhtml.exceptions import QuillHtmlDeltaError
from quillhtml.models import Delta, InsertOp, parse_delta
from quillhtml.models._base import _env_extra_mode


class TestParseDelta(unittest.TestCase):
    def test_accepts_text_bytes_mapping_and_model(self):
        raw = '{"ops": [{"insert": "a", "attributes": {"bold": true}}]}'
        mapping = {"ops": [{"insert": "a", "attributes": {"bold": True}}]}
        for value in (raw, raw.encode("utf-8"), mapping):
            with self.subTest(value=type(value).__name__):
                delta = parse_delta(value)
                self.assertIsInstance(delta, Delta)
                self.assertEqual(delta.ops[0].text, "a")
                self.assertEqual(delta.ops[0].attributes, {"bold": True})
        model = Delta(ops=[InsertOp(insert="x")])
        self.assertIs(parse_delta(model), model)

    def test_invalid_input_is_none(self):
        for value in ("{nope", '["ops"]', {}, {"ops": "text"}, b"\xff", 42):
            with self.subTest(value=value):
                self.assertIsNone(parse_delta(value))

    def test_strict_raises(self):
        with self.assertRaises(QuillHtmlDeltaError):
            parse_delta("{nope", strict=True)
        with self.assertRaises(QuillHtmlDeltaError):
            parse_delta({"insert": "x"}, strict=True)

    def test_non_insert_ops_tolerated(self):
        delta = parse_delta({"ops": [{"retain": 3}, {"insert": {"image": "a.png"}}]})
        self.assertIsNone(delta.ops[0].insert)
        self.assertIsNone(delta.ops[1].text)

    def test_non_mapping_attributes_dropped_for_that_op(self):
        delta = parse_delta(
            {
                "ops": [
                    {"insert": "a", "attributes": []},
                    {"insert": "b", "attributes": {}},
                ]
            }
        )
        self.assertIsNotNone(delta)
        self.assertIsNone(delta.ops[0].attributes)
        self.assertEqual(delta.ops[1].attributes, {})

    def test_attribute_order_preserved(self):
        delta = parse_delta(
            '{"ops": [{"insert": "a", "attributes": {"link": "u", "bold": true}}]}'
        )
        self.assertEqual(list(delta.ops[0].attributes), ["link", "bold"])


class TestExtraMode(unittest.TestCase):
    def test_env_values(self):
        cases = {
            "": "ignore",
            "forbid": "forbid",
            "ALLOW": "allow",
            "strict": "forbid",
            "off": "ignore",
            "bogus": "ignore",
        }
        for raw, expected in cases.items():
            with self.subTest(raw=raw):
                with patch.dict(os.environ, {"QUILLHTML_DELTA_EXTRA": raw}):
                    self.assertEqual(_env_extra_mode(), expected)


if __name__ == "__main__":
    unittest.main()
