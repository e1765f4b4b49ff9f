import unittest
from pathlib import Path
from unittest import TestCase

from json_schema_to_jsdoc.pipeline import PipelineGenerator, load_schema


def json_schema_to_jsdoc(path):
    schema = load_schema(path)
    codegen = PipelineGenerator(schema, base_path=path)
    return codegen.generate()


class TestFun(TestCase):
    def test_sample(self):
        p = Path(__file__).parent / "test_data" / "schemas"
        p_in = p / "sample.schema.json"
        p_ref = p / "sample.js"
        s = json_schema_to_jsdoc(p_in)

        with open(p_ref, encoding="utf-8", newline="") as f:
            ref = f.read()
        self.assertEqual(s, ref)

    def test_sample_exports(self):
        p = Path(__file__).parent / "test_data" / "schemas" / "sample.schema.json"
        s = json_schema_to_jsdoc(p)

        self.assertTrue(s.endswith("module.exports = { Person, Location, ContactCodes }\n"))
        for name in ["Person", "Location", "ContactCodes"]:
            declaration = f"/** @type {{{name}Type}} */ \nlet {name} = {{}}; \n\n"
            self.assertIn(declaration, s)
            self.assertLess(s.index(declaration), s.index("module.exports"))

    def test_sample_is_stable(self):
        p = Path(__file__).parent / "test_data" / "schemas" / "sample.schema.json"
        self.assertEqual(json_schema_to_jsdoc(p), json_schema_to_jsdoc(p))

    def test_external_refs(self):
        p = Path(__file__).parent / "test_data" / "schemas" / "external" / "address.schema.json"
        s = json_schema_to_jsdoc(p)

        self.assertIn(" * @property {string} line1 - First address line \n", s)
        self.assertIn(' * @property {"CA"|"NY"} [state] - A state code \n', s)
        self.assertIn("\n/**\n * @typedef {Object} CountryType\n *\n * ISO country code\n *\n */\n\n", s)
        self.assertTrue(s.endswith("module.exports = { Address, Country }\n"))


if __name__ == "__main__":
    unittest.main()
