"""Website Roaster CLI — entry-point for local use.

Usage:
    roaster --help
    python cli/main.py --help

Commands:
    analyze   → fetch a site and print its roast / professional review
    landing   → render a landing page from business info
    serve     → run the HTTP API with uvicorn
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from roaster.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import json
from typing import Optional

import typer

from roaster.config import settings
from roaster.errors import RoasterError
from roaster.generation.providers import build_generator
from roaster.grader.rules import Style
from roaster.landing.models import BusinessInfo
from roaster.log import setup_logging
from roaster.pipeline import analyze_url, generate_landing

app = typer.Typer(
    name="roaster",
    help="Website Roaster CLI.",
    no_args_is_help=True,
)

_STYLE_CHOICES = ("roast", "professional", "both")


@app.callback()
def main(
    log_level: str = typer.Option(settings.log_level, "--log-level", help="Logging level."),
) -> None:
    """Grade websites and generate landing pages."""
    setup_logging(log_level)


# ---------------------------------------------------------------------------
# Analyze
# ---------------------------------------------------------------------------
@app.command("analyze")
def analyze(
    url: str = typer.Argument(..., help="Website URL (scheme optional)."),
    style: str = typer.Option("both", help="Report style: roast | professional | both."),
    as_json: bool = typer.Option(False, "--json", help="Print the raw API-shaped JSON."),
) -> None:
    """Fetch URL, grade it and print the critique."""
    if style not in _STYLE_CHOICES:
        typer.echo(f"[analyze] Unknown style {style!r}. Use: roast | professional | both")
        raise typer.Exit(1)

    generator = build_generator()
    try:
        result = analyze_url(url, generator)
    except RoasterError as exc:
        typer.echo(f"❌ Error: {exc.message}")
        raise typer.Exit(code=1)

    if as_json:
        typer.echo(json.dumps(result.as_dict(), indent=2, ensure_ascii=False))
        return

    signals = result.signals
    typer.echo(f"[analyze] URL    : {signals.url}")
    typer.echo(f"[analyze] Title  : {signals.title}")
    typer.echo(f"[analyze] Mode   : {generator.mode}")

    reports = {
        Style.ROAST.value: result.roast_feedback,
        Style.PROFESSIONAL.value: result.professional_feedback,
    }
    for name, text in reports.items():
        if style in (name, "both"):
            typer.echo("\n" + "=" * 72)
            typer.echo(text)


# ---------------------------------------------------------------------------
# Landing page
# ---------------------------------------------------------------------------
@app.command("landing")
def landing(
    name: str = typer.Option(..., help="Business name."),
    description: str = typer.Option(..., help="What the business does."),
    target_customer: Optional[str] = typer.Option(None, help="Who it serves."),
    features: Optional[str] = typer.Option(None, help="Comma-separated key features."),
    cta: Optional[str] = typer.Option(None, help="Call-to-action button text."),
    contact: Optional[str] = typer.Option(None, help="Contact line."),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write HTML to this file."),
) -> None:
    """Render a landing page and print it (or save it with --output)."""
    info = BusinessInfo(
        name=name,
        description=description,
        target_customer=target_customer,
        features=features,
        cta=cta,
        contact=contact,
    )
    try:
        html = generate_landing(info, build_generator())
    except RoasterError as exc:
        typer.echo(f"❌ Error: {exc.message}")
        raise typer.Exit(code=1)

    if output is None:
        typer.echo(html)
        return
    output.write_text(html, encoding="utf-8")
    typer.echo(f"[landing] Wrote {len(html)} characters to {output}")


# ---------------------------------------------------------------------------
# Serve
# ---------------------------------------------------------------------------
@app.command("serve")
def serve(
    host: str = typer.Option(settings.host, help="Bind address."),
    port: int = typer.Option(settings.port, help="Bind port."),
    reload: bool = typer.Option(False, help="Reload on code changes."),
) -> None:
    """Run the HTTP API."""
    import uvicorn

    typer.echo(f"🔥 Website Roaster running at http://{host}:{port}")
    uvicorn.run("roaster.api.app:app", host=host, port=port, reload=reload)


if __name__ == "__main__":
    app()
