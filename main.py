"""명령줄 실행: 미리보기 PNG 렌더링과 기본 템플릿 생성."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from config import load_config
from locker.errors import InvalidConfig, RenderFailed
from locker.options import FrameType, TierHeightMode
from locker.templates import save_default_templates
from preview import init_engine, render_locker_grid, render_locker_grid_base64

app = typer.Typer(
    name="locker-preview",
    help="Render storage-locker preview images.",
)


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else load_config()["logging"].get("level", "INFO")
    logging.basicConfig(level=level, format="%(asctime)s [%(name)s] %(message)s")


def _parse_ratios(value: str | None) -> list[float] | None:
    if not value:
        return None
    try:
        return [float(part) for part in value.split(",") if part.strip()]
    except ValueError:
        raise typer.BadParameter("ratios must be comma-separated numbers", param_hint="--ratios")


@app.command()
def render(
    columns: Annotated[int, typer.Option("--columns", "-c", help="Number of columns (1-20)")],
    tiers: Annotated[int, typer.Option("--tiers", "-t", help="Number of tiers (1-10)")],
    output: Annotated[Path, typer.Option("--output", "-o", help="Output file path")] = Path("locker-preview.png"),
    control_panel_column: Annotated[
        int, typer.Option("--control-panel-column", help="1-based column for the control panel, 0 for none"),
    ] = 0,
    control_panel_tier_span: Annotated[
        int, typer.Option("--control-panel-span", help="Cells in the control panel column (top filler included)"),
    ] = 4,
    frame_type: Annotated[FrameType, typer.Option("--frame", help="Frame type")] = FrameType.NONE,
    color: Annotated[str | None, typer.Option("--color", help="Palette name, hex value or 'custom'")] = None,
    custom_color: Annotated[str, typer.Option("--custom-color", help="Hex used with --color custom")] = "#808080",
    handle: Annotated[bool, typer.Option("--handle/--no-handle", help="Draw handles")] = False,
    tier_height_mode: Annotated[
        TierHeightMode, typer.Option("--tier-heights", help="Tier height mode"),
    ] = TierHeightMode.UNIFORM,
    ratios: Annotated[
        str | None, typer.Option("--ratios", help="Comma-separated custom tier ratios"),
    ] = None,
    assets: Annotated[
        Path | None, typer.Option("--assets", help="Template asset directory"),
    ] = None,
    as_base64: Annotated[bool, typer.Option("--base64", help="Write base64 text instead of PNG")] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v")] = False,
) -> None:
    """Render a locker preview image."""
    _setup_logging(verbose)
    init_engine(asset_dir=assets)

    tier_ratios = _parse_ratios(ratios)
    if tier_ratios and tier_height_mode is TierHeightMode.UNIFORM:
        tier_height_mode = TierHeightMode.CUSTOM
    options = dict(
        control_panel_column=control_panel_column,
        control_panel_tier_span=control_panel_tier_span,
        frame_type=frame_type.value,
        color=color,
        custom_color=custom_color,
        handle=handle,
        tier_height_mode=tier_height_mode.value,
        tier_ratios=tier_ratios,
    )
    try:
        if as_base64:
            output.write_text(render_locker_grid_base64(columns, tiers, **options), encoding="ascii")
        else:
            output.write_bytes(render_locker_grid(columns, tiers, **options))
    except InvalidConfig as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=1)
    except RenderFailed as e:
        typer.echo(f"Rendering failed: {e}", err=True)
        raise typer.Exit(code=2)

    typer.echo(f"Saved: {output}")


@app.command("make-assets")
def make_assets(
    directory: Annotated[
        Path | None, typer.Argument(help="Asset directory (defaults to the configured one)"),
    ] = None,
    overwrite: Annotated[bool, typer.Option("--overwrite", help="Replace existing files")] = False,
) -> None:
    """Write the default grayscale templates."""
    _setup_logging(False)
    target = directory or Path(load_config()["assets"]["directory"])
    for name, path in save_default_templates(target, overwrite=overwrite).items():
        typer.echo(f"{name}: {path}")


if __name__ == "__main__":
    app()
