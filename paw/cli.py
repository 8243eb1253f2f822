# Copyright 2025 Loopper-AI
# Operator CLI: run the decision workflow, print its definition, retry failed executions

from __future__ import annotations

import dataclasses
import enum
import logging
from typing import Any

import rich_click as click
from botocore.exceptions import BotoCoreError, ClientError

from .clients import LambdaClient, StepFunctionsClient
from .config import Config
from .definition import build_definition, to_json
from .exceptions import PawError
from .models import Request, StateMachine, StateMachineExecution, WorkflowOutcome
from .services import RetryService
from .utils import DATE_EXAMPLE, parse_utc_date_time
from .workflow import DecisionWorkflow

logger = logging.getLogger(__name__)

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


class ExitCode(enum.IntEnum):
    SUCCESS = 0
    WORKFLOW_FAILED = 1
    UNAVAILABLE = 69
    CONFIG_ERROR = 78


def _parse_date(raw: str | None) -> Any:
    try:
        return parse_utc_date_time(raw)
    except ValueError as e:
        raise click.BadParameter(f"Invalid date ({e}). Please try again!") from e


def _date_option(ctx: click.Context, param: click.Parameter, value: str | None) -> Any:
    return _parse_date(value)


def _prompt_date(label: str) -> Any:
    return click.prompt(
        f"{label} (ex. {DATE_EXAMPLE})",
        default="",
        show_default=False,
        value_proc=_parse_date,
    )


def _parse_selection(raw: str, count: int) -> list[int]:
    """'all' or comma separated 1-based numbers → sorted 0-based indexes."""
    text = raw.strip().lower()
    if text in ("", "all"):
        return list(range(count))
    if text == "none":
        return []

    indexes: set[int] = set()
    for part in text.split(","):
        try:
            number = int(part)
        except ValueError as e:
            raise click.BadParameter(f"Not a number: {part.strip()!r}") from e
        if not 1 <= number <= count:
            raise click.BadParameter(f"Out of range: {number} (1-{count})")
        indexes.add(number - 1)
    return sorted(indexes)


def _select_machine(service: RetryService, name: str | None, default_name: str) -> StateMachine:
    if name:
        machine = service.find_machine(name)
        if machine is None:
            raise click.BadParameter(f"State machine not found: {name}", param_hint="--machine")
        return machine

    machines = service.client.list_machines()
    if not machines:
        raise click.ClickException("No state machines found")

    for number, machine in enumerate(machines, start=1):
        click.echo(f"  {number}. {machine}")
    default = next((i for i, m in enumerate(machines, start=1) if m.name == default_name), 1)
    choice = click.prompt("Select the Machine", type=click.IntRange(1, len(machines)), default=default)
    return machines[choice - 1]


def _select_executions(executions: list[StateMachineExecution]) -> list[StateMachineExecution]:
    for number, execution in enumerate(executions, start=1):
        click.echo(f"  [x] {number}. {execution}")
    indexes = click.prompt(
        "Select the executions to retry (comma separated numbers, 'all' or 'none')",
        default="all",
        value_proc=lambda raw: _parse_selection(raw, len(executions)),
    )
    return [executions[i] for i in indexes]


@click.group(context_settings=CONTEXT_SETTINGS)
@click.option("--log-level", default=None, help="Override LOG_LEVEL (DEBUG, INFO, WARNING, ...)")
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """Decision workflow and Step Functions operator tools."""
    config = Config.from_environment()
    if log_level:
        config = dataclasses.replace(config, log_level=log_level.upper())

    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    is_valid, err = config.validate()
    if not is_valid:
        logger.error("Configuration error: %s", err)
        click.echo(f"Configuration error: {err}", err=True)
        ctx.exit(ExitCode.CONFIG_ERROR)

    ctx.obj = config


@cli.command("run")
@click.argument("body")
@click.option("--remote", is_flag=True, help="Invoke the deployed function instead of the local handler")
@click.pass_obj
def run_cmd(config: Config, body: str, remote: bool) -> None:
    """Run the decision workflow for BODY and report the terminal state."""
    workflow = DecisionWorkflow()
    if remote:
        workflow = DecisionWorkflow(LambdaClient(config.function_name, config.region).invoke)

    try:
        run = workflow.execute(Request(body=body))
    except (PawError, ClientError, BotoCoreError) as e:
        click.echo(f"Error on processing action: {e}", err=True)
        raise SystemExit(ExitCode.UNAVAILABLE)

    click.echo(f"Result: statusCode={run.result.status_code} body={run.result.body!r}")
    click.echo(f"Outcome: {run.outcome.value}")
    if run.outcome is WorkflowOutcome.FAILURE:
        raise SystemExit(ExitCode.WORKFLOW_FAILED)


@cli.command("definition")
@click.option("--function-name", default=None, help="Function name or ARN (default: FUNCTION_NAME)")
@click.pass_obj
def definition_cmd(config: Config, function_name: str | None) -> None:
    """Print the state machine definition (Amazon States Language)."""
    click.echo(to_json(build_definition(function_name or config.function_name)))


@cli.command("retry-failed")
@click.option("--machine", "machine_name", default=None, help="State machine name (prompted when omitted)")
@click.option("--start", default=None, callback=_date_option, help=f"Window start, e.g. '{DATE_EXAMPLE}'")
@click.option("--end", default=None, callback=_date_option, help=f"Window end, e.g. '{DATE_EXAMPLE}'")
@click.option("--yes", "-y", is_flag=True, help="Retry every failed execution without asking")
@click.pass_obj
def retry_failed_cmd(config: Config, machine_name: str | None, start: Any, end: Any, yes: bool) -> None:
    """Restart failed executions with their original input."""
    service = RetryService(StepFunctionsClient(config.region, config.max_results))

    try:
        machine = _select_machine(service, machine_name, config.state_machine_name)
        if start is None and end is None and not yes:
            start = _prompt_date("Start Date")
            end = _prompt_date("End Date")

        failed = service.find_failed(machine, start, end)
        if not failed:
            click.echo("No failed executions found")
            return

        selected = failed if yes else _select_executions(failed)
        if not selected:
            click.echo("Nothing selected")
            return

        with click.progressbar(
            length=len(selected),
            label="Retrying",
            item_show_func=lambda e: f"ID: {e.name}" if e else None,
        ) as bar:
            report = service.retry(selected, on_progress=lambda e: bar.update(1, e))

    except (PawError, ClientError, BotoCoreError) as e:
        click.echo(f"Error on processing action: {e}", err=True)
        raise SystemExit(ExitCode.UNAVAILABLE)

    for name in report.skipped:
        click.echo(f"Skipped (no input): {name}")
    for name in report.failed:
        click.echo(f"Failed to start: {name}", err=True)
    if not report.ok:
        raise SystemExit(ExitCode.UNAVAILABLE)
    click.echo("Success")


def main() -> None:
    cli(prog_name="paw")
