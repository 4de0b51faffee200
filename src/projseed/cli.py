"""Top-level Click group for the projseed CLI."""

import click

from projseed.scaffold.cli import new_cmd


@click.group()
@click.option("--extra-path", "extra_paths", multiple=True, metavar="DIR",
              type=click.Path(file_okay=False),
              help="Extra directory to search for tools such as poetry (repeatable)")
@click.pass_context
def main(ctx, extra_paths):
    """projseed - create Python project skeletons."""
    ctx.ensure_object(dict)
    ctx.obj["extra_paths"] = list(extra_paths)


main.add_command(new_cmd)
