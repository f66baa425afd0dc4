#!/usr/bin/env python3
"""Example: Quickstart — semval

Minimal working example: build typed values from raw input, attach them
to properties, and look up type labels.

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install semval
"""
from __future__ import annotations

import semval

RAW_INPUT = [
    ("_num", "9001"),
    ("Date", "1 Jan 1970"),
    ("_wpg", "main_page"),
    ("Email", "someone@example.org"),
    ("_num", "twelve"),
    ("-_txt", "reserved"),
]


def main() -> None:
    print(f"semval version: {semval.__version__}")

    # Step 1: Build values from a type id (or label) and raw input
    for type_id, raw in RAW_INPUT:
        value = semval.new_type_id_value(type_id, raw)
        if value.get_errors():
            print(f"  {type_id:>6} {raw!r:<24} -> errors: {value.get_errors()}")
        else:
            print(f"  {type_id:>6} {raw!r:<24} -> {value.get_wiki_value()!r}")

    # Step 2: Values for properties use the property's type
    value = semval.new_property_value("capital of", "germany")
    print(f"\n{value.get_property()} = {value.get_wiki_value()!r}")

    value = semval.new_property_value("Modification date", "2024-02-29")
    print(f"{value.get_property()} = {value.get_wiki_value()!r}")

    # Step 3: Type labels and aliases
    semval.register_datatype_alias("_txt", "Prose")
    for label in ("String", "Prose", "URL", "Colour"):
        print(f"find_type_id({label!r}) = {semval.find_type_id(label)!r}")


if __name__ == "__main__":
    main()
