"""CLI for blog-tool."""

import logging

import click

from .config import ConfigStore, default_config_path
from .errors import ConfigWriteError
from .models import PushOptions
from .push import push as run_push

logger = logging.getLogger(__name__)

INSUFFICIENT = "insufficient parameters supplied."
USAGE_COMMANDS = ("push", "config")


def setup_logging(verbose: int) -> None:
    """Setup logging."""
    level = logging.DEBUG if verbose >= 2 else logging.INFO if verbose == 1 else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def echo_usage(ctx: click.Context, names: tuple[str, ...] = USAGE_COMMANDS) -> None:
    """Print the help of the given subcommands."""
    root = ctx.find_root()
    for name in names:
        cmd = root.command.get_command(root, name)
        with click.Context(cmd, info_name=name, parent=root) as sub:
            click.echo(cmd.get_help(sub))
        click.echo()


class BlogToolGroup(click.Group):
    """Group that reports unknown subcommands with exit status 1."""

    def resolve_command(self, ctx, args):
        name = args[0] if args else None
        if name is not None and self.get_command(ctx, name) is None:
            click.echo(f"unknown command {name!r}.")
            echo_usage(ctx)
            ctx.exit(1)
        return super().resolve_command(ctx, args)


class ShortFlagCommand(click.Command):
    """Command that also accepts ``-x=value`` for single-letter options."""

    def parse_args(self, ctx, args):
        short = {
            opt
            for param in self.params
            if isinstance(param, click.Option)
            for opt in param.opts
            if len(opt) == 2
        }
        split: list[str] = []
        for i, arg in enumerate(args):
            if arg == "--":
                split.extend(args[i:])
                break
            head, sep, value = arg.partition("=")
            if sep and head in short:
                split.extend([head, value])
            else:
                split.append(arg)
        return super().parse_args(ctx, split)


# ============ CLI Group ============

@click.group(cls=BlogToolGroup, invoke_without_command=True)
@click.option(
    "--config-dir",
    envvar="BLOG_TOOL_CONFIG_DIR",
    type=click.Path(file_okay=False),
    help="Config root (default: user config dir)",
)
@click.option("-v", "--verbose", count=True, help="Verbosity (-v, -vv)")
@click.pass_context
def cli(ctx: click.Context, config_dir: str | None, verbose: int) -> None:
    """Push a single file to a GitHub repository."""
    setup_logging(verbose)
    ctx.ensure_object(dict)
    ctx.obj["store"] = ConfigStore(default_config_path(config_dir))

    if ctx.invoked_subcommand is None:
        ctx.obj["store"].show()
        echo_usage(ctx)
        ctx.exit(0)


# ============ Commands ============

@cli.command("config")
@click.option("-show", "--show", "show", is_flag=True, help="Show current configs")
@click.argument("action", required=False, metavar="[new|delete]")
@click.pass_context
def config_command(ctx, show, action):
    """Manage the stored configuration."""
    store: ConfigStore = ctx.obj["store"]

    if not show and action is None:
        click.echo(INSUFFICIENT)
        echo_usage(ctx, ("config",))
        ctx.exit(1)

    if show:
        store.show()
        return

    try:
        if action == "new":
            store.reset(new=True)
        elif action == "delete":
            store.reset()
        else:
            click.echo(f"unknown config action {action!r}.")
            echo_usage(ctx, ("config",))
            ctx.exit(1)
    except ConfigWriteError as e:
        click.echo(str(e), err=True)
        ctx.exit(1)


@cli.command(cls=ShortFlagCommand)
@click.option("-r", "--repo", default="", help="Use specified repo")
@click.option("-u", "--username", default="", help="Use specified username")
@click.option("-t", "--token", default="", help="Use specified token")
@click.option("-path", "--path", "remote_path", default="", help="Use specified path")
@click.option("-b", "--branch", default="", help="Use specified branch")
@click.option("-sha", "--sha", default="", help="Use specified sha")
@click.option("-m", "--message", default="", help="Use specified message")
@click.argument("filename", required=False)
@click.pass_context
def push(ctx, repo, username, token, remote_path, branch, sha, message, filename):
    """Upload FILENAME to the configured repository."""
    if filename is None:
        click.echo(INSUFFICIENT)
        echo_usage(ctx, ("push",))
        ctx.exit(1)

    store: ConfigStore = ctx.obj["store"]
    config = store.load()
    options = PushOptions(
        repository=repo,
        username=username,
        token=token,
        branch=branch,
        path=remote_path,
        sha=sha,
        message=message,
    )
    logger.debug("Pushing %s", filename)
    ctx.exit(run_push(config, options, filename))


@cli.command("help")
@click.pass_context
def help_command(ctx):
    """Show usage of all commands."""
    echo_usage(ctx)


def main() -> None:
    cli(obj={})


if __name__ == "__main__":
    main()
