"""Main CLI entrypoint for workhook."""

import json
import logging
import os
import sys
from typing import Annotated

import typer
from rich.console import Console

from workhook.agents.identity import EnvIdentityResolver, detect_agent_role
from workhook.beads.bd_client import BdCliStore
from workhook.beads.workspace import find_beads_root, workspace_root
from workhook.core.config import HookConfig
from workhook.core.constants import DecisionKind
from workhook.core.exceptions import HookConflictError, HookError
from workhook.hook.service import HookService, ensure_role_may_hook
from workhook.models.decision import HookRequest, HookResult

console = Console()
err_console = Console(stderr=True)

app = typer.Typer(
    name="workhook",
    help="Durable work hooks for agents",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    log_level: Annotated[
        str, typer.Option("--log-level", help="Logging level (DEBUG, INFO, WARNING, ERROR)")
    ] = "WARNING",
) -> None:
    """Durable work hooks for agents."""
    valid_log_levels = ["DEBUG", "INFO", "WARNING", "ERROR"]
    log_level_upper = log_level.upper()
    if log_level_upper not in valid_log_levels:
        err_console.print(f"[red]Error: Invalid log level '{log_level}'[/red]")
        err_console.print(f"Valid levels: {', '.join(valid_log_levels)}")
        raise typer.Exit(1)

    logging.basicConfig(
        level=getattr(logging, log_level_upper),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )


def build_service() -> HookService:
    """Wire the hook service to the bd CLI of the current workspace."""
    beads_root = find_beads_root()
    config = HookConfig.load(beads_root)
    store = BdCliStore(workdir=workspace_root(beads_root), config=config.bd)
    return HookService(
        query=store,
        mutator=store,
        progress=store,
        identity=EnvIdentityResolver(),
        config=config,
    )


def _print_result(result: HookResult) -> None:
    decision = result.decision
    request = result.request

    for extra in decision.extra_pinned:
        console.print(f"[yellow]⚠ Also pinned to {decision.agent_id}: {extra}[/yellow]")

    if decision.kind == DecisionKind.NO_OP:
        console.print(f"[bold]✓[/bold] Already hooked: {request.bead_id}")
        return

    if decision.kind == DecisionKind.AUTO_REPLACE:
        console.print(f"[dim]ℹ[/dim] Replacing completed bead {decision.existing.id}...")
    elif decision.kind == DecisionKind.FORCE_REPLACE:
        console.print(f"[dim]⚠[/dim] Force-replacing incomplete bead {decision.existing.id}...")

    console.print(f"[bold]🪝[/bold] Hooking {request.bead_id}...")

    if result.dry_run:
        for action in result.actions:
            console.print(f"Would {action.describe()}")
        if request.subject:
            console.print(f"  subject (for handoff mail): {request.subject}")
        if request.message:
            console.print(f"  context (for handoff mail): {request.message}")
        return

    console.print("[bold]✓[/bold] Work attached to hook (pinned bead)")


@app.command("hook")
def hook_command(
    bead_id: Annotated[str, typer.Argument(help="Bead (issue) to attach to your hook")],
    subject: Annotated[
        str, typer.Option("--subject", "-s", help="Subject for handoff mail (optional)")
    ] = "",
    message: Annotated[
        str, typer.Option("--message", "-m", help="Message for handoff mail (optional)")
    ] = "",
    dry_run: Annotated[
        bool, typer.Option("--dry-run", "-n", help="Show what would be done")
    ] = False,
    force: Annotated[
        bool, typer.Option("--force", "-f", help="Replace existing incomplete pinned bead")
    ] = False,
    json_output: Annotated[
        bool, typer.Option("--json", help="Output as JSON")
    ] = False,
) -> None:
    """Attach work to your hook (durable across restarts).

    Work on your hook survives session restarts, context compaction and
    handoffs. This assigns without starting: the bead is pinned to you.

    Examples:
        workhook hook gt-abc                    # Attach issue gt-abc
        workhook hook gt-abc -s "Fix the bug"   # With subject for handoff mail
        workhook hook gt-abc -m "Check tests"   # With context message
    """
    request = HookRequest(
        bead_id=bead_id,
        subject=subject,
        message=message,
        dry_run=dry_run,
        force=force,
    )

    try:
        role = detect_agent_role(os.environ)
        ensure_role_may_hook(role)
        service = build_service()
        result = service.hook(request, role=role)
    except HookConflictError as e:
        err_console.print(f"[red]Error:[/red] {e.message}")
        raise typer.Exit(1)
    except HookError as e:
        err_console.print(f"[red]Error:[/red] {e.message}")
        for key, value in e.details.items():
            err_console.print(f"  {key}: {value}")
        raise typer.Exit(1)

    if json_output:
        typer.echo(json.dumps(result.to_dict(), indent=2))
        return

    _print_result(result)
    if result.executed and result.actions:
        console.print("  The hook survives restarts; pick the work up after a handoff")


if __name__ == "__main__":
    app()
