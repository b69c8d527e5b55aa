# envdiag/usage.py
"""
Human-readable listing of the variables a schema reads.

    print_usage("APP", AppSettings_schema)

KEY                 TYPE   DEFAULT  REQUIRED  DESCRIPTION
APP_SIMPLE          str             true
APP_NESTED_TIMEOUT  int    30                 Request timeout in seconds
"""
from dataclasses import dataclass
from typing import Iterator, List, Optional

from rich import box
from rich.console import Console
from rich.table import Table

from envdiag.binder import type_name
from envdiag.schema import Schema, effective_key, join_key


@dataclass(frozen=True)
class UsageRow:
    key: str
    type_name: str
    default: str
    required: bool
    description: str


def iter_usage(prefix: str, schema: Schema) -> Iterator[UsageRow]:
    """Yield one row per scalar field, in the order the binder reads them."""
    for spec in schema.fields:
        if spec.kind.is_nested:
            yield from iter_usage(join_key(prefix, spec.key), spec.child)
            continue
        yield UsageRow(
            key=effective_key(prefix, spec.key or spec.name),
            type_name=type_name(schema.annotation_of(spec.name)),
            default=spec.default or "",
            required=spec.required,
            description=spec.description or "",
        )


def usage_table(prefix: str, schema: Schema) -> Table:
    """Build a rich table of every variable under ``prefix``."""
    table = Table(box=box.SIMPLE, show_edge=False, pad_edge=False)
    for column in ("KEY", "TYPE", "DEFAULT", "REQUIRED", "DESCRIPTION"):
        table.add_column(column, no_wrap=column == "KEY")

    rows: List[UsageRow] = list(iter_usage(prefix, schema))
    for row in rows:
        table.add_row(
            row.key,
            row.type_name,
            row.default,
            "true" if row.required else "",
            row.description,
        )
    return table


def print_usage(prefix: str, schema: Schema, console: Optional[Console] = None) -> None:
    """Print the usage table to ``console`` (stdout by default)."""
    (console or Console()).print(usage_table(prefix, schema))


__all__ = ["UsageRow", "iter_usage", "usage_table", "print_usage"]
