"""Example: filter fully qualified class names with a YAML rule file."""

import pathlib

from namefilter import NameFilter, conjunction, negate, string_contains

CLASS_NAMES = [
    "com.example.billing.Invoice",
    "com.example.billing.InvoiceTest",
    "com.example.generated.InvoiceDto",
    "com.example.web.InvoiceController",
    "com.example.web.InvoiceControllerIT",
    "org.thirdparty.json.JsonParser",
]

RULES_FILE = pathlib.Path(__file__).with_name("filters.yaml")


def visible_classes() -> list[str]:
    """Apply the rules from filters.yaml to CLASS_NAMES."""
    return NameFilter.load(str(RULES_FILE)).filter(CLASS_NAMES)


def billing_classes() -> list[str]:
    """Compose predicates directly without a rule file."""
    accept = conjunction(string_contains(".billing."), negate(string_contains("Test ")))
    return [name for name in CLASS_NAMES if accept(name)]


if __name__ == "__main__":
    for name in visible_classes():
        print(name)
