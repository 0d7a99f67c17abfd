"""
Reward rules CLI

Commands for inspecting the rule table:
- list: Show every rule with its event types, amount and reason
- evaluate: Show the decision for a single event type
"""

import json

import click
from rich import box
from rich.console import Console
from rich.table import Table

from rewardagent.config import DEFAULT_TOKEN
from rewardagent.rules import RuleEvaluator

console = Console()


def _output_json(data: object) -> None:
    """Print data as JSON to stdout."""
    click.echo(json.dumps(data, indent=2, default=str))


@click.group()
def rules():
    """Inspect the reward rule table."""
    pass


@rules.command("list")
@click.option(
    "--format", "fmt",
    type=click.Choice(["table", "json"]),
    default="table",
    help="Output format (table or json).",
)
def list_rules(fmt: str):
    """List all reward rules in match order."""
    evaluator = RuleEvaluator()
    data = [
        {
            "priority": i,
            "event_types": list(rule.event_types),
            "amount": rule.amount,
            "reason": rule.reason,
        }
        for i, rule in enumerate(evaluator.rules, start=1)
    ]

    if fmt == "json":
        _output_json(data)
        return

    console.print("\n[bold blue]Reward Rules[/bold blue]\n")
    table = Table(box=box.ROUNDED)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Event Types", style="cyan")
    table.add_column("Amount", justify="right")
    table.add_column("Reason")

    for row in data:
        table.add_row(
            str(row["priority"]),
            ", ".join(row["event_types"]),
            f"{row['amount']} {DEFAULT_TOKEN}",
            row["reason"],
        )

    console.print(table)
    console.print(f"\n  Total rules: {len(data)}\n")


@rules.command()
@click.argument("event_type")
@click.option("--json", "json_flag", is_flag=True, help="Output as JSON.")
def evaluate(event_type: str, json_flag: bool):
    """Show the reward decision for EVENT_TYPE (e.g. daily_active)."""
    decision = RuleEvaluator().evaluate(event_type)
    info = {
        "event_type": event_type,
        "should_reward": decision.should_reward,
        "amount": decision.amount,
        "reason": decision.reason,
    }

    if json_flag:
        _output_json(info)
        return

    if decision.qualifies:
        console.print(
            f"[green]Reward[/green] {decision.amount} {DEFAULT_TOKEN} "
            f"for [cyan]{event_type}[/cyan]: {decision.reason}"
        )
    else:
        console.print(f"[yellow]No reward[/yellow] for [cyan]{event_type}[/cyan]")
