"""Rich output formatting helpers for the poststore CLI.

Provides consistent terminal output for document listings, single
documents, category counts, load failures and manifest violations.
"""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table
from rich.text import Text

from poststore.core.document import BlockKind, Document
from poststore.core.manifest import Violation, ViolationKind
from poststore.core.store import LoadFailure

_VIOLATION_STYLES: dict[ViolationKind, str] = {
    ViolationKind.REMOVED: "bold red",
    ViolationKind.MODIFIED: "yellow",
}

console = Console()
err_console = Console(stderr=True, soft_wrap=True)


def print_document_table(documents: list[Document]) -> None:
    """Print one row per document in listing order."""
    if not documents:
        console.print("[dim]No documents found.[/dim]")
        return

    table = Table(title="Documents", show_header=True, header_style="bold")
    table.add_column("Date", style="dim", no_wrap=True)
    table.add_column("Identifier", style="bold")
    table.add_column("Title")
    table.add_column("Categories", style="cyan")

    for doc in documents:
        table.add_row(
            doc.published_at.strftime("%Y-%m-%d"),
            Text(doc.identifier),
            Text(doc.title),
            Text(", ".join(sorted(doc.categories)) or "-"),
        )

    console.print(table)
    console.print(f"[bold]{len(documents)}[/bold] documents")


def print_document_detail(doc: Document) -> None:
    """Print a document's metadata followed by its body blocks."""
    header = Text.assemble(
        ("Title: ", "bold"), (doc.title, ""),
        ("\nIdentifier: ", "bold"), (doc.identifier, "dim"),
        ("\nPublished: ", "bold"), (doc.published_at.isoformat(), ""),
        ("\nCategories: ", "bold"), (", ".join(sorted(doc.categories)) or "-", "cyan"),
    )
    console.print(Panel(header, title="Document"))

    for block in doc.body:
        if block.kind is BlockKind.HEADING:
            console.print(Text(block.text, style="bold underline" if block.level == 1 else "bold"))
        elif block.kind is BlockKind.CODE:
            console.print(Syntax(block.text, block.language or "text", line_numbers=False))
        elif block.kind is BlockKind.IMAGE:
            console.print(Text(f"[image: {block.text or block.src}] {block.src}", style="magenta"))
        elif block.kind is BlockKind.LIST:
            for item in block.items:
                console.print(f"  - {item}", markup=False)
        elif block.kind is BlockKind.QUOTE:
            console.print(Text(block.text, style="italic"))
        else:
            console.print(block.text, markup=False)
        console.print()


def print_categories(counts: dict[str, int]) -> None:
    if not counts:
        console.print("[dim]No categories.[/dim]")
        return
    table = Table(title="Categories", show_header=True, header_style="bold")
    table.add_column("Category", style="cyan")
    table.add_column("Documents", justify="right")
    for name, count in counts.items():
        table.add_row(Text(name), str(count))
    console.print(table)


def print_failures(failures: tuple[LoadFailure, ...]) -> None:
    """Print load failures to stderr."""
    for failure in failures:
        err_console.print(
            Text.assemble(("Skipped ", "yellow"), f"{failure.path}: {failure.reason}"),
            highlight=False,
        )


def print_violations(violations: list[Violation]) -> None:
    if not violations:
        console.print(
            Panel("[bold green]All published documents unchanged[/bold green]",
                  title="Manifest Check")
        )
        return

    console.print(
        Panel(f"[bold red]{len(violations)} violation(s)[/bold red]",
              title="Manifest Check")
    )
    table = Table(show_header=True)
    table.add_column("Identifier", style="bold")
    table.add_column("Kind", justify="center")
    table.add_column("Detail")
    for v in violations:
        table.add_row(
            Text(v.identifier),
            Text(v.kind.value.upper(), style=_VIOLATION_STYLES[v.kind]),
            Text(v.detail),
        )
    console.print(table)
