"""
Functional tests for the JSDoc pipeline.

Each case in test_data/functional/*_tests.json holds a schema and the
snippets its generated module must (or must not) contain.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from json_schema_to_jsdoc.pipeline import JSDocGeneratorConfig, PipelineGenerator


def load_all_test_cases():
    """Load all test cases from all JSON files in test_data/functional directory."""
    functional_dir = Path(__file__).parent / "test_data" / "functional"
    test_cases = []

    for json_file in sorted(functional_dir.glob("*_tests.json")):
        with open(json_file) as f:
            data = json.load(f)

        for test_case in data:
            test_case["_source_file"] = json_file.name
            test_cases.append(test_case)

    return test_cases


def _generate(schema, config_dict):
    """Helper to generate a module with given schema and config."""
    config = JSDocGeneratorConfig.from_dict(config_dict or {})
    return PipelineGenerator(schema, config).generate()


@pytest.mark.parametrize("test_case", load_all_test_cases(), ids=lambda tc: tc["name"])
def test_functional_generation(test_case):
    """Unified test for all JSON test cases using a single pattern."""
    print(f"\nTesting: {test_case['name']} (from {test_case['_source_file']})")
    print(f"Description: {test_case['description']}")

    generated = _generate(test_case["schema"], test_case.get("config"))

    for pattern in test_case.get("expected_contains", []):
        assert pattern in generated, f"Expected pattern {pattern!r} not found in output"

    for pattern in test_case.get("expected_not_contains", []):
        assert pattern not in generated, f"Unexpected pattern {pattern!r} found in output"


if __name__ == "__main__":
    pytest.main([__file__])
