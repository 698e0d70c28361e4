import asyncio
import sys

import click

from rigging.env import Env, load_env
from rigging.registry import ClientRegistry

from .orchestrator import Orchestrator


@click.group(help="Provision test backends for an integration run.")
def cli():
    pass


async def ping_all(registry: ClientRegistry) -> int:
    status = 0
    for client_set in registry.all():
        try:
            await client_set.ping()
            click.echo(f"{client_set.key}: ok")

        except Exception as err:
            click.echo(f"{client_set.key}: {err}", err=True)
            status = 1

    return status


@cli.command(help="Bring every backend up, ping each client set, then tear down.")
@click.option("--env-file", default=".env", type=str, show_default=True)
@click.option("--log-level", default=None, type=str)
def smoke(
    env_file: str,
    log_level: str | None,
):
    override = Env(RIGGING_LOG_LEVEL=log_level) if log_level else None
    env = load_env(env_file=env_file, override=override)

    orchestrator = Orchestrator(env)
    status = asyncio.run(orchestrator.run(ping_all))

    sys.exit(status)
