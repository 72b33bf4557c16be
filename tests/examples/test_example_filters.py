"""Tests for the example in the examples/ directory."""

from __future__ import annotations

import importlib.util
import pathlib

PROJECT_ROOT = pathlib.Path(__file__).resolve().parent.parent.parent


def _load_example_module(relative_path: str):
    """Load a Python module from a path relative to PROJECT_ROOT using importlib."""
    full_path = PROJECT_ROOT / relative_path
    spec = importlib.util.spec_from_file_location(full_path.stem, str(full_path))
    mod = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(mod)
    return mod


class TestFilterClassNamesExample:
    """Test: the example rule file filters the sample class names."""

    def test_visible_classes(self):
        mod = _load_example_module("examples/filter_class_names.py")
        assert mod.visible_classes() == [
            "com.example.billing.Invoice",
            "com.example.web.InvoiceController",
        ]

    def test_billing_classes(self):
        mod = _load_example_module("examples/filter_class_names.py")
        assert mod.billing_classes() == ["com.example.billing.Invoice"]
