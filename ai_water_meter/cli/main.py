"""
CLI interface for AI Water Meter.

Provides command-line access to prompt measurement, history and the
aggregation service.
"""

import json
import logging
import sys
from pathlib import Path
from typing import Optional

import typer
import yaml
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from ai_water_meter.config.loader import MeterConfig, load_meter_config
from ai_water_meter.core.aggregator import Period, PeriodStats, SessionTotals
from ai_water_meter.core.analysis import PromptFootprint
from ai_water_meter.core.comparisons import eco_comparisons, prompt_equivalents
from ai_water_meter.sdk.aggregation_client import AggregationClient
from ai_water_meter.sdk.meter import PromptMeter
from ai_water_meter.storage.export import ExportFormat
from ai_water_meter.storage.repository import initialize_schema

app = typer.Typer()
console = Console()

EXIT_CODE_PASS = 0
EXIT_CODE_FAIL = 1

SESSION_COMMANDS = "Special commands: 'stats' to view totals, 'reset' to reset counters, 'exit' to quit"


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(name)s: %(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _load_config(ctx: typer.Context) -> MeterConfig:
    """Load the configuration named by --config, or defaults."""
    options = ctx.obj or {}
    config_path = options.get("config_path")
    if config_path is None:
        return MeterConfig()
    try:
        return load_meter_config(str(config_path))
    except (FileNotFoundError, ValueError, yaml.YAMLError) as e:
        console.print(f"[red]Invalid configuration:[/] {str(e)}")
        sys.exit(EXIT_CODE_FAIL)


def get_meter(ctx: typer.Context) -> PromptMeter:
    """Build a PromptMeter from the CLI options."""
    options = ctx.obj or {}
    return PromptMeter(_load_config(ctx), db_path=options.get("db_path"))


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        envvar="AI_WATER_METER_CONFIG",
        help="Path to a YAML configuration file"
    ),
    db: Optional[str] = typer.Option(
        None,
        "--db",
        help="Prompt history database (overrides the configuration)"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging")
):
    """AI Water Meter CLI."""
    _configure_logging(verbose)
    ctx.obj = {"config_path": config, "db_path": db}
    if ctx.invoked_subcommand is None:
        console.print("AI Water Meter - Use --help to see available commands")


@app.command()
def init(ctx: typer.Context):
    """Initialize the prompt history database."""
    options = ctx.obj or {}
    db_path = options.get("db_path") or _load_config(ctx).storage.db_path
    try:
        initialize_schema(db_path)
        console.print(f"[green]✓[/] Database initialized at {db_path}")
        sys.exit(EXIT_CODE_PASS)
    except Exception as e:
        console.print(f"[red]Error initializing database:[/] {str(e)}")
        sys.exit(EXIT_CODE_FAIL)


@app.command()
def analyze(
    ctx: typer.Context,
    prompt: str = typer.Argument(..., help="Prompt text to analyze"),
    record: bool = typer.Option(False, "--record", "-r", help="Add the prompt to the history"),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
    explain: bool = typer.Option(False, "--explain", "-e", help="Show which estimation rule fired")
):
    """Estimate the energy and water cost of a prompt."""
    try:
        meter = get_meter(ctx)
        if record:
            outcome = meter.record(prompt)
            footprint = outcome.footprint
        else:
            outcome = None
            footprint = meter.measure(prompt)

        if as_json:
            result = footprint.to_dict()
            if explain:
                result["estimationRule"] = footprint.analysis.estimation_rule
            typer.echo(json.dumps(result, indent=2))
        else:
            _display_footprint(footprint, explain)
            if outcome is not None:
                if outcome.recorded:
                    console.print("[green]✓[/] Prompt added to history")
                else:
                    console.print("[yellow]Prompt not added (empty or already in history)[/]")
        sys.exit(EXIT_CODE_PASS)
    except Exception as e:
        console.print(f"[red]Error analyzing prompt:[/] {str(e)}")
        sys.exit(EXIT_CODE_FAIL)


@app.command()
def session(
    ctx: typer.Context,
    record: bool = typer.Option(False, "--record", "-r", help="Add each prompt to the history")
):
    """Interactive session with running totals."""
    meter = get_meter(ctx)
    console.print("[bold]Prompt Energy Calculator[/]")
    console.print("Enter a prompt to estimate energy usage.")
    console.print(SESSION_COMMANDS)

    while True:
        line = sys.stdin.readline()
        if not line:
            break
        text = line.rstrip("\n")
        command = text.strip().lower()

        if command == "exit":
            break
        if command == "stats":
            _display_session_totals(meter.session.totals)
            continue
        if command == "reset":
            meter.session.reset()
            console.print("All counters have been reset to zero.")
            continue
        if not command:
            continue

        try:
            if record:
                footprint = meter.record(text).footprint
            else:
                footprint = meter.measure(text)
                meter.session.add(footprint)
        except Exception as e:
            console.print(f"[red]Error analyzing prompt:[/] {str(e)}")
            continue

        _display_footprint(footprint, explain=False)
        _display_session_totals(meter.session.totals)
        console.print("\nEnter another prompt (or 'exit' to quit):")

    sys.exit(EXIT_CODE_PASS)


@app.command()
def stats(
    ctx: typer.Context,
    period: Period = typer.Option(Period.ALL, "--period", "-p", help="Reporting window")
):
    """Show usage statistics for a period."""
    try:
        period_stats = get_meter(ctx).stats(period)
        _display_period_stats(period_stats)
        sys.exit(EXIT_CODE_PASS)
    except Exception as e:
        console.print(f"[red]Error:[/] {str(e)}")
        sys.exit(EXIT_CODE_FAIL)


@app.command()
def history(
    ctx: typer.Context,
    limit: Optional[int] = typer.Option(None, "--limit", "-n", min=1, help="Show only the most recent N prompts")
):
    """List recorded prompts."""
    try:
        records = get_meter(ctx).history(limit)
    except Exception as e:
        console.print(f"[red]Error:[/] {str(e)}")
        sys.exit(EXIT_CODE_FAIL)

    if not records:
        console.print("[dim]No prompts recorded yet.[/]")
        sys.exit(EXIT_CODE_PASS)

    table = Table(title="Prompt History")
    table.add_column("Timestamp")
    table.add_column("Prompt", overflow="fold")
    table.add_column("Tokens", justify="right")
    table.add_column("Energy (Wh)", justify="right")
    table.add_column("Water (ml)", justify="right")
    for record in records:
        table.add_row(
            record.timestamp.strftime("%Y-%m-%d %H:%M"),
            _truncate(record.prompt, 60),
            str(record.total_tokens),
            f"{record.real_world_kwh * 1000:.2f}",
            f"{record.real_world_water_ml:.2f}",
        )
    console.print(table)
    sys.exit(EXIT_CODE_PASS)


@app.command()
def export(
    ctx: typer.Context,
    output: Path = typer.Option(..., "--output", "-o", help="Destination file"),
    fmt: ExportFormat = typer.Option(ExportFormat.JSON, "--format", "-f", help="Export format")
):
    """Export the history as JSON or CSV."""
    try:
        meter = get_meter(ctx)
        if not meter.history():
            console.print("[yellow]No history to export[/]")
            sys.exit(EXIT_CODE_PASS)
        path = meter.export(output, fmt)
        console.print(f"[green]✓[/] History exported to {path}")
        sys.exit(EXIT_CODE_PASS)
    except Exception as e:
        console.print(f"[red]Error exporting history:[/] {str(e)}")
        sys.exit(EXIT_CODE_FAIL)


@app.command("import")
def import_history(
    ctx: typer.Context,
    path: Path = typer.Argument(..., help="JSON history file")
):
    """Import prompts from a JSON history export."""
    try:
        added = get_meter(ctx).import_history(path)
        console.print(f"[green]✓[/] Imported {added} prompt(s)")
        sys.exit(EXIT_CODE_PASS)
    except Exception as e:
        console.print(f"[red]Error importing history:[/] {str(e)}")
        sys.exit(EXIT_CODE_FAIL)


@app.command()
def clear(
    ctx: typer.Context,
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip the confirmation prompt")
):
    """Delete the whole prompt history."""
    if not yes and not typer.confirm("Delete all recorded prompts?"):
        console.print("Aborted.")
        sys.exit(EXIT_CODE_PASS)
    try:
        removed = get_meter(ctx).clear()
        console.print(f"[green]✓[/] Removed {removed} prompt(s)")
        sys.exit(EXIT_CODE_PASS)
    except Exception as e:
        console.print(f"[red]Error clearing history:[/] {str(e)}")
        sys.exit(EXIT_CODE_FAIL)


@app.command()
def submit(
    ctx: typer.Context,
    server: Optional[str] = typer.Option(None, "--server", "-s", help="Aggregation server URL")
):
    """Report cumulative water usage to the aggregation server."""
    meter = get_meter(ctx)
    aggregation = meter.config.aggregation
    client = AggregationClient(
        base_url=server or aggregation.server_url,
        user_id=meter.contributor_id(),
        timeout=aggregation.timeout_seconds,
    )
    result = meter.submit(client)
    if not result.success:
        console.print(f"[red]Submission failed:[/] {result.error}")
        sys.exit(EXIT_CODE_FAIL)

    console.print("[green]✓[/] Water usage submitted")
    console.print(f"Global total: {result.total_water_ml:,.2f} ml from {result.contributor_count} contributor(s)")
    sys.exit(EXIT_CODE_PASS)


@app.command()
def serve(
    host: str = typer.Option("127.0.0.1", "--host", help="Interface to bind"),
    port: int = typer.Option(3000, "--port", help="Port to listen on"),
    data_file: Path = typer.Option(Path("water-usage-data.json"), "--data-file", help="Ledger JSON file")
):
    """Run the aggregation server."""
    import uvicorn

    from ai_water_meter.server.app import create_app
    from ai_water_meter.server.ledger import WaterUsageLedger

    console.print(f"Water tracking server running at http://{host}:{port}")
    console.print(f"  GET  http://{host}:{port}/api/water-usage")
    console.print(f"  POST http://{host}:{port}/api/submit-usage")
    uvicorn.run(create_app(WaterUsageLedger(data_file)), host=host, port=port)


def _truncate(text: str, width: int) -> str:
    text = " ".join(text.split())
    return text if len(text) <= width else text[:width - 3] + "..."


def _display_footprint(footprint: PromptFootprint, explain: bool) -> None:
    """Display a single prompt analysis."""
    analysis = footprint.analysis
    energy = footprint.energy

    console.print("\n[bold]Energy Analysis[/bold]")
    console.print("-" * 40)
    console.print(f"Prompt Tokens: {analysis.prompt_tokens}")
    console.print(f"Est. Response Tokens: {analysis.estimated_response_tokens}")
    console.print(f"Total Tokens: {analysis.total_tokens}")
    console.print(f"Vocabulary Complexity: {analysis.vocabulary_complexity * 100:.2f}%")
    console.print(f"Reasoning Level: {analysis.reasoning_level.label} ({int(analysis.reasoning_level)})")
    console.print(f"Openness Score: {analysis.openness_level.label}")
    console.print(f"Est. Response Size: ~{int(analysis.estimated_response_tokens / 1.3):,} words")
    if explain:
        console.print(f"Estimation Rule: {analysis.estimation_rule}")

    table = Table(show_header=True)
    table.add_column("")
    table.add_column("Direct (theoretical)", justify="right")
    table.add_column("Real-world (with overhead)", justify="right")
    table.add_row("Energy (kWh)", f"{energy.direct_kwh:.6e}", f"{energy.real_world_kwh:.6e}")
    table.add_row("Energy (Wh)", f"{energy.direct_watt_hours:.2f}", f"{energy.real_world_watt_hours:.2f}")
    table.add_row("Water (ml)", f"{energy.direct_water_ml:.2f}", f"{energy.real_world_water_ml:.2f}")
    console.print(table)
    console.print(f"Total Modifier: {energy.total_modifier:.2f}x")

    equivalents = prompt_equivalents(energy.real_world_kwh, energy.real_world_water_ml)
    if energy.real_world_water_ml > 1000:
        console.print(f"This is equivalent to {equivalents.litres:.3f} liters of water")
    if energy.real_world_water_ml > 250:
        console.print(f"This is about {equivalents.glasses_of_water:.1f} glasses of drinking water")
    console.print(f"This is equivalent to powering a 10W LED bulb for {equivalents.led_bulb_hours:.4f} hours")


def _display_session_totals(totals: SessionTotals) -> None:
    """Display running session totals."""
    console.print("\n[bold]Cumulative Energy Usage[/bold]")
    console.print(f"Total Energy: {totals.real_world_watt_hours:.2f} Wh")
    console.print(f"Total Water: {totals.real_world_water_ml:.2f} ml")
    console.print(f"Prompts: {totals.prompts}")
    console.print(f"Tokens: {totals.tokens}")
    equivalents = prompt_equivalents(totals.real_world_kwh, totals.real_world_water_ml)
    if totals.real_world_water_ml > 1000:
        console.print(f"Total water usage: {equivalents.litres:.3f} liters")
    console.print(f"Equivalent to powering a 10W LED bulb for {equivalents.led_bulb_hours:.2f} hours")


def _display_period_stats(period_stats: PeriodStats) -> None:
    """Display aggregated statistics for a period."""
    console.print(f"\n[bold]Usage Statistics ({period_stats.period.value})[/bold]")
    console.print("-" * 40)
    console.print(f"Prompts: {period_stats.total_prompts}")
    console.print(f"Tokens: {period_stats.total_tokens:,}")
    console.print(f"Energy: {period_stats.total_watt_hours:.2f} Wh")
    console.print(f"Water: {period_stats.total_water_ml:.2f} ml")
    for comparison in eco_comparisons(period_stats.total_kwh, period_stats.total_water_ml):
        console.print(f"[dim]{comparison}[/]")


if __name__ == "__main__":
    app()
