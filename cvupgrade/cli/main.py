"""Main CLI interface using Typer."""

import logging
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from ..core import UpgradeAdvisor, render_report
from ..k8s import ClusterVersionClient, K8sClient
from ..model.intent import UpgradeOptions
from ..model.outcome import Outcome
from ..model.report import ReportFormat
from ..upgrade.errors import UpgradeError
from ..upgrade.validation import validate_options
from ..utils.logger import get_logger, set_log_level

# Create CLI app
app = typer.Typer(
    name="cvupgrade",
    help="Check on upgrade status or upgrade the cluster to a newer version",
    add_completion=True,
)

console = Console()
err_console = Console(stderr=True)
logger = get_logger(__name__)


def _print_outcome(outcome: Outcome, output: ReportFormat) -> None:
    """Print warnings to stderr and the result to stdout."""
    for warning in outcome.warnings:
        err_console.print(f"[yellow]warning:[/yellow] {escape(warning)}", soft_wrap=True)

    if outcome.failed:
        err_console.print(f"[red]error:[/red] {escape(outcome.message)}", soft_wrap=True)
        raise typer.Exit(1)

    if outcome.report is not None:
        text = render_report(outcome.report, output)
    else:
        text = outcome.message
    console.print(text, markup=False, emoji=False, highlight=False, soft_wrap=True)


@app.command()
def upgrade(
    to: str = typer.Option(
        "",
        "--to",
        help="Specify the version to upgrade to. The version must be on the list of available updates.",
    ),
    to_image: str = typer.Option(
        "",
        "--to-image",
        help="Provide a release image to upgrade to. WARNING: This option does not check for "
        "upgrade compatibility and may break your cluster.",
    ),
    to_latest: bool = typer.Option(False, "--to-latest", help="Use the next available version"),
    clear: bool = typer.Option(
        False,
        "--clear",
        help="If an upgrade has been requested but not yet downloaded, cancel the update. "
        "This has no effect once the update has started.",
    ),
    force: bool = typer.Option(
        False,
        "--force",
        help="Forcefully upgrade the cluster even when upgrade release image validation fails "
        "and the cluster is reporting errors.",
    ),
    allow_explicit_upgrade: bool = typer.Option(
        False,
        "--allow-explicit-upgrade",
        help="Upgrade even if the upgrade target is not listed in the available versions list.",
    ),
    allow_upgrade_with_warnings: bool = typer.Option(
        False,
        "--allow-upgrade-with-warnings",
        help="Upgrade even if an upgrade is in process or a cluster error is blocking the update.",
    ),
    include_not_recommended: bool = typer.Option(
        False,
        "--include-not-recommended",
        help="Display additional updates which are not recommended based on your cluster "
        "configuration.",
    ),
    allow_not_recommended: bool = typer.Option(
        False,
        "--allow-not-recommended",
        help="Allows upgrade to a version when it is supported but not recommended for updates",
    ),
    context: Optional[str] = typer.Option(
        None, "--context", "-c", help="Kubernetes context to use"
    ),
    kubeconfig: Optional[str] = typer.Option(
        None, "--kubeconfig", envvar="KUBECONFIG", help="Path to the kubeconfig file"
    ),
    output: ReportFormat = typer.Option(
        ReportFormat.TEXT, "--output", "-o", help="Output format for the status report"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Check on upgrade status or upgrade the cluster to a newer version.

    With no arguments, show whether an upgrade is in progress, whether any
    errors might prevent one, and the recommended updates. --to, --to-image
    and --to-latest request an update; --clear cancels a pending one.
    """
    if verbose:
        set_log_level(logging.DEBUG)

    options = UpgradeOptions(
        to=to,
        to_image=to_image,
        to_latest=to_latest,
        clear=clear,
        force=force,
        allow_explicit_upgrade=allow_explicit_upgrade,
        allow_upgrade_with_warnings=allow_upgrade_with_warnings,
        include_not_recommended=include_not_recommended,
        allow_not_recommended=allow_not_recommended,
    )

    # Bad flags fail before kubectl is probed; the advisor reports any warnings
    try:
        validate_options(options)
        client = ClusterVersionClient(K8sClient(context=context, kubeconfig=kubeconfig))
    except UpgradeError as e:
        err_console.print(f"[red]error:[/red] {escape(str(e))}", soft_wrap=True)
        raise typer.Exit(1)

    outcome = UpgradeAdvisor(client, options).decide()
    logger.debug(f"Outcome: {outcome.kind.value}")
    _print_outcome(outcome, output)


if __name__ == "__main__":
    app()
