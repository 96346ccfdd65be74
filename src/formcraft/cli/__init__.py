"""formcraft command line tool."""
import click

from formcraft import __version__
from formcraft.form import FormStore

from . import forms


@click.group()
@click.version_option(version=__version__)
@click.option("--no-samples", is_flag=True, default=False, help="Start from an empty store.")
@click.pass_context
def cli(ctx, no_samples):
    """formcraft command line tool, working on an in-memory form store."""
    store = FormStore()
    if not no_samples:
        store.load_samples()

    ctx.obj = store


for command in forms.COMMANDS:
    cli.add_command(command)


def main():
    cli(prog_name="formcraft")
