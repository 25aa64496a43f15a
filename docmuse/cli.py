"""CLI entry point for docmuse."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import typer
from rich import print as rprint
from rich.console import Console
from rich.table import Table

from docmuse.activity import read_activity_log
from docmuse.analysis.report import build_code_report
from docmuse.config import Config
from docmuse.extraction.decisions import extract_design_decisions
from docmuse.extraction.models import CATEGORIES, IMPORTANCE_TIERS

app = typer.Typer(help="Document design decisions and code structure for AI coding agents.")

console = Console()

IMPORTANCE_STYLES = {"high": "red", "medium": "yellow", "low": "dim"}


def _read_source(file: Path) -> str:
    if not file.exists():
        rprint(f"[red]File not found: {file}[/red]")
        raise typer.Exit(1)
    return file.read_text(encoding="utf-8")


def _check_format(format: str) -> None:
    if format not in ("text", "json"):
        rprint(f"[red]Unknown format '{format}'. Use text or json.[/red]")
        raise typer.Exit(1)


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging")) -> None:
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)


@app.command()
def decisions(
    file: Path = typer.Argument(help="Conversation log to scan"),
    language: str = typer.Option(None, "--language", "-l", help="en, ko or auto (default from config)"),
    max_decisions: int = typer.Option(None, "--max", "-n", help="Maximum number of decisions"),
    project_context: str = typer.Option(None, "--context", "-c", help="Project description for the summary"),
    no_code: bool = typer.Option(False, "--no-code", help="Don't link code blocks to decisions"),
    format: str = typer.Option("text", "--format", "-f", help="Output format: text or json"),
) -> None:
    """Extract design decisions from a conversation log."""
    _check_format(format)
    config = Config.load()
    for issue in config.validate():
        rprint(f"[yellow]Config: {issue}[/yellow]")

    text = _read_source(file)
    report = extract_design_decisions(
        text,
        project_context=project_context,
        language=language or config.language,
        extract_related_code=config.extract_related_code and not no_code,
        max_decisions=max_decisions or config.max_decisions,
    )

    if format == "json":
        typer.echo(json.dumps(report.to_dict(), indent=2, ensure_ascii=False))
        return

    rprint(f"[bold]{report.summary}[/bold]")
    if not report.decisions:
        return

    table = Table(title="Design decisions", show_header=True)
    table.add_column("Importance", style="cyan")
    table.add_column("Category", style="green")
    table.add_column("Title")
    table.add_column("Rationale", style="white")
    for d in report.decisions:
        style = IMPORTANCE_STYLES.get(d.importance, "white")
        table.add_row(
            f"[{style}]{d.importance} ({d.importance_score})[/{style}]",
            d.category,
            d.title,
            d.rationale,
        )
    console.print(table)

    stats = report.stats
    by_importance = ", ".join(f"{t} {stats.by_importance[t]}" for t in IMPORTANCE_TIERS if t in stats.by_importance)
    by_category = ", ".join(f"{c} {stats.by_category[c]}" for c in CATEGORIES if c in stats.by_category)
    rprint(f"\n[bold]By importance:[/bold] {by_importance}")
    rprint(f"[bold]By category:[/bold] {by_category}")

    if report.stats.top_keywords:
        rprint(f"\n[bold]Top keywords:[/bold] {', '.join(report.stats.top_keywords)}")


@app.command()
def analyze(
    file: Path = typer.Argument(help="Source file to analyze"),
    language: str = typer.Option(None, "--language", "-l", help="typescript, javascript, python or go"),
    diagrams: bool = typer.Option(False, "--diagrams", "-d", help="Print Mermaid diagrams"),
    format: str = typer.Option("text", "--format", "-f", help="Output format: text or json"),
) -> None:
    """Analyze the structure of a source file."""
    _check_format(format)
    code = _read_source(file)
    report = build_code_report(
        code,
        language=language,
        filename=file.name,
        generate_diagrams=diagrams,
    )

    if format == "json":
        typer.echo(json.dumps(report.to_dict(), indent=2))
        return

    analysis = report.analysis
    rprint(f"[bold]{file.name}[/bold] ({analysis.language}, {analysis.line_count} lines)")
    for insight in report.insights:
        rprint(f"  {insight}")

    if analysis.functions:
        table = Table(title="Functions", show_header=True)
        table.add_column("Line", style="cyan")
        table.add_column("Name", style="green")
        table.add_column("Params")
        table.add_column("Async")
        table.add_column("Exported")
        for f in analysis.functions:
            table.add_row(
                str(f.line_number),
                f.name,
                ", ".join(f.params),
                "yes" if f.is_async else "",
                "yes" if f.exported else "",
            )
        console.print(table)

    if analysis.classes:
        table = Table(title="Classes", show_header=True)
        table.add_column("Line", style="cyan")
        table.add_column("Name", style="green")
        table.add_column("Extends")
        table.add_column("Methods")
        for c in analysis.classes:
            table.add_row(
                str(c.line_number),
                c.name,
                c.extends or "",
                ", ".join(m.name for m in c.methods),
            )
        console.print(table)

    if analysis.dependencies:
        rprint(f"\n[bold]Dependencies:[/bold] {', '.join(analysis.dependencies)}")

    for diagram in report.diagrams or []:
        rprint(f"\n[bold]{diagram['type']} diagram:[/bold]")
        typer.echo(diagram["diagram"])


@app.command()
def serve() -> None:
    """Start the MCP server (called by Claude Code / Cursor automatically)."""
    import asyncio
    from docmuse.mcp_server import main as mcp_main
    asyncio.run(mcp_main())


@app.command()
def activity(
    limit: int = typer.Option(20, "--limit", "-n", help="Number of entries to show"),
    tool: str = typer.Option(None, "--tool", "-t", help="Only show calls to this tool"),
    format: str = typer.Option("text", "--format", "-f", help="Output format: text or json"),
) -> None:
    """Show recent MCP tool calls."""
    _check_format(format)
    entries = read_activity_log(limit=limit, tool_name=tool, log_path=Config.load().log_path)

    if format == "json":
        typer.echo(json.dumps(entries, indent=2, ensure_ascii=False))
        return

    if not entries:
        rprint("No activity recorded yet.")
        return

    table = Table(title="Recent tool calls", show_header=True)
    table.add_column("Time", style="cyan")
    table.add_column("Tool", style="green")
    table.add_column("Duration (ms)", style="yellow")
    table.add_column("Error", style="red")
    for entry in entries:
        table.add_row(
            entry.get("timestamp", ""),
            entry.get("tool_name", ""),
            str(entry.get("duration_ms", "")),
            entry.get("error") or "",
        )
    console.print(table)


if __name__ == "__main__":
    app()
