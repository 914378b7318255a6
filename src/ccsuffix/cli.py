from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer

from .config import resolver_from_env
from .core.contracts import Region, SuffixTableError
from .resolver import CountrySuffixResolver

app = typer.Typer(help="ccsuffix: country code → domain suffix lookup")


def _load(
    overrides: Optional[Path], *, bad_table_code: int = 2
) -> CountrySuffixResolver:
    """
    Build the effective resolver. Unreadable override files exit 2; an
    unsound table exits with `bad_table_code`.
    """
    try:
        return resolver_from_env(overrides)
    except OSError as e:
        reason = e.strerror or e.__class__.__name__
        typer.echo(
            f"cannot read override file {e.filename or overrides}: {reason}",
            err=True,
        )
        raise typer.Exit(code=2)
    except SuffixTableError as e:
        typer.echo(str(e), err=True)
        for p in e.problems:
            typer.echo(f"  - {p}", err=True)
        raise typer.Exit(code=bad_table_code)


@app.command("resolve")
def resolve(
    codes: List[str] = typer.Argument(
        ..., help="Two-letter country codes (e.g., GB de nz)"
    ),
    overrides: Optional[Path] = typer.Option(
        None, help="JSON file of extra CODE → suffix entries"
    ),
    explain: bool = typer.Option(
        False, help="Show normalized code and whether the fallback was used"
    ),
):
    """Print the domain suffix for each country code."""
    r = _load(overrides)
    if explain:
        for c in codes:
            res = r.explain(c)
            how = "table" if res.matched else "fallback"
            typer.echo(f"{res.code or '-'}\t{res.suffix}\t{how}")
        return None
    if len(codes) == 1:
        typer.echo(r.resolve(codes[0]))
        return None
    for c in codes:
        typer.echo(f"{c}\t{r.resolve(c)}")
    return None


@app.command("table")
def table(
    region: Optional[Region] = typer.Option(
        None, case_sensitive=False, help="Only list one region"
    ),
    overrides: Optional[Path] = typer.Option(
        None, help="JSON file of extra CODE → suffix entries"
    ),
):
    """List the lookup table, sorted by code."""
    r = _load(overrides)
    for e in r.entries(region):
        typer.echo(f"{e.code}\t{e.suffix}")


@app.command("check")
def check(
    overrides: Optional[Path] = typer.Option(
        None, help="JSON file of extra CODE → suffix entries"
    ),
):
    """Validate the effective table (built-in plus overrides)."""
    r = _load(overrides, bad_table_code=1)
    typer.echo(f"ok: {len(r)} entries, fallback {r.default}")


def main() -> None:
    app()


if __name__ == "__main__":
    app()
