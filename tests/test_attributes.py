import unittest

from quillhtml.rendering.attributes import close_tag, open_tag, resolve_attribute
from quillhtml.rendering.options import RenderOptions, TagDefinition
from quillhtml.rendering.validator import is_attribute_valid, validator_for


class TestResolveAttribute(unittest.TestCase):
    def setUp(self):
        self.options = RenderOptions()

    def test_toggles(self):
        for name, tag in (
            ("bold", "strong"),
            ("italic", "em"),
            ("underline", "u"),
            ("strike", "s"),
        ):
            with self.subTest(name=name):
                self.assertEqual(
                    resolve_attribute(name, True, self.options), TagDefinition(tag)
                )

    def test_link_fills_href(self):
        definition = resolve_attribute("link", "https://x", self.options)
        self.assertEqual(definition.tag, "a")
        self.assertEqual(dict(definition.attributes), {"href": "https://x"})
        # The configured definition keeps its placeholder
        self.assertIsNone(self.options.attributes["link"].attributes["href"])

    def test_link_value_replaces_configured_href(self):
        options = RenderOptions.from_mapping(
            {"attributes": {"link": {"attributes": {"href": "https://fixed"}}}}
        )
        self.assertTrue(is_attribute_valid("link", "https://x", options))
        definition = resolve_attribute("link", "https://x", options)
        self.assertEqual(open_tag(definition), '<a href="https://x">')

    def test_unknown_is_false(self):
        self.assertIs(resolve_attribute("color", "#fff", self.options), False)

    def test_open_and_close_tags(self):
        definition = TagDefinition("a", {"href": "u", "rel": None, "target": "_blank"})
        self.assertEqual(open_tag(definition), '<a href="u" target="_blank">')
        self.assertEqual(close_tag(definition), "</a>")
        self.assertEqual(open_tag(TagDefinition("em")), "<em>")


class TestAttributeValidator(unittest.TestCase):
    def test_toggles_need_true(self):
        self.assertTrue(is_attribute_valid("bold", True))
        self.assertFalse(is_attribute_valid("bold", False))
        self.assertFalse(is_attribute_valid("bold", "true"))
        self.assertFalse(is_attribute_valid("italic", 1))

    def test_link_needs_non_empty_string(self):
        self.assertTrue(is_attribute_valid("link", "https://x"))
        self.assertFalse(is_attribute_valid("link", ""))
        self.assertFalse(is_attribute_valid("link", True))

    def test_unknown_names_invalid(self):
        self.assertFalse(is_attribute_valid("header", 1))
        self.assertFalse(is_attribute_valid("color", "#fff"))

    def test_whitelist_follows_options(self):
        options = RenderOptions().with_attribute_option("code", tag="code")
        validate = validator_for(options)
        self.assertTrue(validate("code", True))
        self.assertFalse(is_attribute_valid("code", True))


if __name__ == "__main__":
    unittest.main()
