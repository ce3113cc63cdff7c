"""Properties command implementation - list the recognized property schema."""

from __future__ import annotations

import json

from rich.console import Console
from rich.table import Table

from ..schema import PROPERTIES

console = Console()


def run_properties(output_json: bool = False) -> int:
    if output_json:
        rows = [
            {
                "name": spec.name + ("<scope>" if spec.is_prefix else ""),
                "kind": spec.kind,
                "default": spec.default,
                "description": spec.description,
                "docIndex": spec.doc_index,
            }
            for spec in PROPERTIES
        ]
        console.print_json(json.dumps(rows))
        return 0

    table = Table(title="REST alignment properties")
    table.add_column("Property", style="cyan")
    table.add_column("Kind")
    table.add_column("Default")
    table.add_column("Description")
    for spec in PROPERTIES:
        name = spec.name + ("<scope>" if spec.is_prefix else "")
        default = "-" if spec.default is None else repr(spec.default)
        table.add_row(name, spec.kind, default, spec.description)
    console.print(table)
    return 0
