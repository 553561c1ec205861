"""RoboAvatar CLI -- generate deterministic robot avatars from text.

Thin wrapper around :mod:`roboavatar.generator` using click.
"""

from __future__ import annotations

import logging
from pathlib import Path

import click

from roboavatar.assets import catalog
from roboavatar.config import AvatarConfig
from roboavatar.core.digest import derive_index_array, sha512_digest
from roboavatar.core.errors import RoboAvatarError
from roboavatar.generator import RoboHash


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _error(msg: str) -> None:
    """Print an error message to stderr and exit 1."""
    click.echo(msg, err=True)
    raise SystemExit(1)


def _load_config(ctx: click.Context, **overrides) -> AvatarConfig:
    """Build an AvatarConfig from CLI overrides, env vars and config.toml."""
    try:
        return AvatarConfig(config_path=ctx.obj.get("config_path"), **overrides)
    except ValueError as exc:
        _error(f"Error: {exc}")


def _configure_logging(level: str, debug: bool) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if debug:
        logging.getLogger("roboavatar").setLevel(logging.DEBUG)


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="roboavatar")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Path to config.toml (default: $ROBOAVATAR_CONFIG).",
)
@click.option("--debug", is_flag=True, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None, debug: bool) -> None:
    """RoboAvatar -- deterministic robot avatars."""
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path
    ctx.obj["debug"] = debug


# ---------------------------------------------------------------------------
# roboavatar generate
# ---------------------------------------------------------------------------


@cli.command()
@click.argument("text")
@click.option("--set", "set_choice", default=None, help="default, set1 .. set5.")
@click.option("--colour", "colour_choice", default=None, help="any, blue, brown, ...")
@click.option("--size", type=int, default=None, help="Square canvas size in pixels.")
@click.option("--width", type=int, default=None, help="Canvas width in pixels.")
@click.option("--height", type=int, default=None, help="Canvas height in pixels.")
@click.option(
    "--background",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Background image drawn under the robot.",
)
@click.option("--background-set", default=None, help="Background set name, or 'any'.")
@click.option(
    "--catalog",
    "catalog_root",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Catalog root containing sets/ (default: current directory).",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write the PNG here instead of printing base64.",
)
@click.pass_context
def generate(
    ctx: click.Context,
    text: str,
    set_choice: str | None,
    colour_choice: str | None,
    size: int | None,
    width: int | None,
    height: int | None,
    background: Path | None,
    background_set: str | None,
    catalog_root: Path | None,
    output: Path | None,
) -> None:
    """Generate the avatar for TEXT."""
    cfg = _load_config(
        ctx,
        catalog_root=catalog_root,
        set_choice=set_choice,
        colour_choice=colour_choice,
        width=width if width is not None else size,
        height=height if height is not None else size,
        background_set=background_set,
    )
    _configure_logging(cfg.log_level, ctx.obj["debug"])

    try:
        robo = RoboHash.from_text(
            text,
            chunks=cfg.chunks,
            duplicate_index=cfg.duplicate_index,
            catalog_root=cfg.catalog_root,
            set_choice=cfg.set_choice,
            colour_choice=cfg.colour_choice,
            width=cfg.width,
            height=cfg.height,
            background=background,
            background_set=cfg.background_set,
        )
        if output is not None:
            output.write_bytes(robo.assemble_png())
            click.echo(f"Wrote {cfg.width}x{cfg.height} avatar to {output}")
        else:
            click.echo(robo.assemble_base64())
    except RoboAvatarError as exc:
        _error(f"Error: {exc}")
    except OSError as exc:
        _error(f"Error: cannot write {output}: {exc}")


# ---------------------------------------------------------------------------
# roboavatar digest
# ---------------------------------------------------------------------------


@cli.command()
@click.argument("text")
@click.pass_context
def digest(ctx: click.Context, text: str) -> None:
    """Print the SHA-512 digest and index array for TEXT (offline)."""
    cfg = _load_config(ctx)
    hex_digest = sha512_digest(text)
    try:
        indices = derive_index_array(hex_digest, cfg.chunks, duplicate=cfg.duplicate_index)
    except RoboAvatarError as exc:
        _error(f"Error: {exc}")

    click.echo(f"Digest:  {hex_digest}")
    click.echo(f"Indices: {', '.join(str(i) for i in indices)}")


# ---------------------------------------------------------------------------
# roboavatar sets
# ---------------------------------------------------------------------------


@cli.command("sets")
@click.option(
    "--catalog",
    "catalog_root",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Catalog root containing sets/.",
)
@click.pass_context
def list_sets(ctx: click.Context, catalog_root: Path | None) -> None:
    """List the sets in the catalog and their categories."""
    cfg = _load_config(ctx, catalog_root=catalog_root)

    try:
        names = catalog.list_sets(cfg.catalog_root)
    except RoboAvatarError as exc:
        _error(f"Error: {exc}")

    if not names:
        click.echo("No sets found.")
        return

    for name in names:
        try:
            categories = catalog.list_categories(cfg.catalog_root, name)
        except RoboAvatarError:
            categories = []
        click.echo(f"{name:<10} {', '.join(categories)}")


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
