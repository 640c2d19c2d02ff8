#!/usr/bin/env python3
"""PRD Studio CLI - upload reference documents and generate PRDs.

Usage:
    # Analyze reference documents (uploads to RAGFlow when PRD_STUDIO_RAGFLOW_API_KEY is set)
    python main.py ingest ./refs/marketplace-prd.pdf ./refs/lean-prd.txt

    # Generate a PRD and export it as markdown and HTML
    python main.py generate --product-name "Widget Tracker" --industry SaaS --format both

    # Convert any markdown file to an HTML fragment
    python main.py render ./notes.md --output ./notes.html
"""

import sys
from pathlib import Path
from typing import Optional, Tuple

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from agents import AgentClient
from config import settings, INDUSTRIES, PRODUCT_TYPES, DETAIL_LEVELS, EMPHASIS_OPTIONS
from contracts import PRDRequest
from knowledge_base import KnowledgeBaseClient
from providers import list_providers as get_available_providers
from rendering import to_html, render_lines
from workspace import PRDStudio


console = Console()

_HEADING_STYLES = {1: "bold underline", 2: "bold", 3: "bold dim"}
_SPAN_STYLES = {"strong": "bold", "em": "italic", "plain": ""}


def build_studio(model: Optional[str] = None, use_kb: bool = True) -> PRDStudio:
    """Wire a session; the knowledge base is attached only when an API key is configured."""
    kb = KnowledgeBaseClient() if use_kb else None
    if kb is not None and not kb.is_available():
        console.print("[dim]No RAGFlow API key set; running without the knowledge base.[/dim]")
        kb = None
    return PRDStudio(agent_client=AgentClient(model=model, knowledge_base=kb), knowledge_base=kb)


def print_markdown_preview(markdown: str, max_lines: Optional[int] = None) -> None:
    """Render markdown line by line through rich styles."""
    lines = render_lines(markdown)
    if max_lines is not None:
        lines = lines[:max_lines]
    for line in lines:
        if line.kind == "blank":
            console.print()
            continue
        if line.kind == "heading":
            console.print(Text(line.text, style=_HEADING_STYLES.get(line.level, "bold")))
            continue
        if line.kind == "quote":
            console.print(Text(f"  │ {line.text}", style="italic dim"))
            continue
        prefix = {"bullet": "  • ", "numbered": "  - "}.get(line.kind, "")
        text = Text(prefix)
        for span in line.spans:
            text.append(span.text, style=_SPAN_STYLES.get(span.style, ""))
        console.print(text)


@click.group()
def cli():
    """PRD Studio: document intelligence for product requirement documents."""


@cli.command()
@click.argument("files", nargs=-1, required=True, type=click.Path())
@click.option("--model", default=None, help="Model name or alias (e.g. gpt-4o, claude-sonnet)")
@click.option("--no-kb", is_flag=True, help="Skip the knowledge-base upload")
def ingest(files: Tuple[str, ...], model: Optional[str], no_kb: bool):
    """Upload and analyze reference documents."""
    studio = build_studio(model=model, use_kb=not no_kb)

    for file in files:
        console.print(f"\n[dim]Uploading[/dim] {file}")
        result = studio.upload_document(file)
        color = "green" if result.ok else "red"
        console.print(f"[{color}]{result.message}[/{color}]")

    documents = studio.store.state.documents
    if not documents:
        sys.exit(1)

    table = Table(title="Uploaded documents")
    table.add_column("Title")
    table.add_column("File")
    table.add_column("Industry")
    table.add_column("Sections", justify="right")
    table.add_column("KPI frameworks")
    for doc in documents:
        table.add_row(
            doc.document_title,
            doc.file_name,
            doc.suggested_tags.industry or "-",
            str(len(doc.sections)),
            ", ".join(doc.kpi_frameworks) or "-",
        )
    console.print(table)


@cli.command()
@click.option("--product-name", "-n", required=True, help="Name of the product")
@click.option("--industry", "-i", required=True, type=click.Choice(INDUSTRIES, case_sensitive=False))
@click.option("--product-type", "-t", type=click.Choice(PRODUCT_TYPES), default="B2B", show_default=True)
@click.option("--detail-level", "-d", type=click.Choice(DETAIL_LEVELS), default="Standard", show_default=True)
@click.option("--emphasis", "-e", multiple=True, type=click.Choice(EMPHASIS_OPTIONS), help="Sections to emphasize (repeatable)")
@click.option("--problem", "-p", default="", help="Problem statement")
@click.option("--model", default=None, help="Model name or alias (e.g. gpt-4o, claude-sonnet)")
@click.option("--output", "-o", "output_dir", default=None, help=f"Output directory (default: {settings.output_dir})")
@click.option("--format", "fmt", type=click.Choice(["md", "html", "both"]), default="md", show_default=True)
@click.option("--preview-lines", type=int, default=40, show_default=True, help="Lines of preview to print (0 = none)")
@click.option("--no-kb", is_flag=True, help="Generate without knowledge-base reference passages")
def generate(
    product_name: str,
    industry: str,
    product_type: str,
    detail_level: str,
    emphasis: Tuple[str, ...],
    problem: str,
    model: Optional[str],
    output_dir: Optional[str],
    fmt: str,
    preview_lines: int,
    no_kb: bool,
):
    """Generate a PRD and export it."""
    studio = build_studio(model=model, use_kb=not no_kb)
    request = PRDRequest(
        product_name=product_name,
        industry=next(i for i in INDUSTRIES if i.lower() == industry.lower()),
        product_type=product_type,
        detail_level=detail_level,
        problem_statement=problem,
        emphasis_areas=list(emphasis),
    )

    console.print(Panel.fit(
        f"[bold blue]{request.product_name}[/bold blue]\n"
        f"[dim]{request.detail_level} | {request.product_type} | {request.industry}[/dim]",
        border_style="blue",
    ))

    with console.status("Generating your PRD..."):
        result = studio.generate_prd(request)

    if not result.ok:
        console.print(f"[red]Error:[/red] {result.message}")
        sys.exit(1)

    prd = result.record
    console.print(f"[green]{result.message}[/green]")
    console.print(f"  [dim]Sections:[/dim] {len(prd.sections)}  [dim]Words:[/dim] {prd.metadata.word_count}")

    if preview_lines > 0:
        console.print()
        print_markdown_preview(prd.markdown_body, max_lines=preview_lines)

    for export_fmt in (["md", "html"] if fmt == "both" else [fmt]):
        exported = studio.export_prd(prd.id, output_dir=output_dir, fmt=export_fmt)
        color = "green" if exported.ok else "red"
        console.print(f"[{color}]{exported.message}[/{color}]")
        if not exported.ok:
            sys.exit(1)


@cli.command()
@click.argument("markdown_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--output", "-o", default=None, help="Write the HTML fragment here instead of stdout")
def render(markdown_file: str, output: Optional[str]):
    """Convert a markdown file to an HTML fragment."""
    fragment = to_html(Path(markdown_file).read_text(encoding="utf-8", errors="replace"))
    if output:
        Path(output).write_text(fragment, encoding="utf-8")
        console.print(f"[green]Saved[/green] {output}")
    else:
        click.echo(fragment)


@cli.command()
@click.option("--sample", is_flag=True, help="Show the sample workspace")
def dashboard(sample: bool):
    """Show workspace metrics and recent activity."""
    studio = PRDStudio(agent_client=AgentClient())
    studio.use_sample_data(sample)
    metrics = studio.store.dashboard_metrics()

    console.print(f"[bold]Uploaded PRDs:[/bold] {metrics.document_count}")
    console.print(f"[bold]Generated PRDs:[/bold] {metrics.prd_count}")
    avg = metrics.avg_reference_documents
    console.print(f"[bold]Avg. ref. documents used:[/bold] {avg if avg is not None else '---'}")

    activity = studio.store.recent_activity()
    if not activity:
        console.print("\n[dim]No recent activity. Upload a PRD or generate one to get started.[/dim]")
        return
    console.print("\n[bold]Recent activity[/bold]")
    for entry in activity:
        label = "Uploaded to knowledge base" if entry.kind.value == "upload" else "Generated via AI"
        console.print(f"  {entry.timestamp:%b %d}  {entry.title}  [dim]{label}[/dim]")


@cli.command()
def providers():
    """List model aliases and whether their API keys are set."""
    console.print("[bold]Available models:[/bold]\n")
    for name, available in get_available_providers().items():
        status = "[green]✓ Ready[/green]" if available else "[red]✗ No API key[/red]"
        console.print(f"  {name:16} {status}")
    console.print("\n[dim]Set API keys via environment variables:[/dim]")
    console.print("  OPENAI_API_KEY, ANTHROPIC_API_KEY, GOOGLE_API_KEY, DEEPSEEK_API_KEY")


main = cli


if __name__ == "__main__":
    main()
