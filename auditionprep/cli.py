"""AuditionPrep CLI entry point."""

import sys

import click

from auditionprep import __version__
from auditionprep.generator import LilypondExporter
from auditionprep.logger_config import set_verbose
from auditionprep.materials import audition_materials, available_pages, select_pages
from auditionprep.models import Instrument, Orchestra


def _option_name(member: Instrument | Orchestra) -> str:
    """CLI spelling of an enum member, e.g. CHAMBER_STRINGS -> chamber-strings."""
    return member.name.lower().replace("_", "-")


INSTRUMENT_CHOICES: dict[str, Instrument] = {_option_name(i): i for i in Instrument}
ORCHESTRA_CHOICES: dict[str, Orchestra] = {_option_name(o): o for o in Orchestra}


# ── CLI group ──────────────────────────────────────────────────────────────────

@click.group(invoke_without_command=True, context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name="auditionprep")
@click.pass_context
def main(ctx: click.Context) -> None:
    """AuditionPrep — LilyPond audition packets for orchestra auditions.

    With no subcommand the default packet is rendered to standard output.
    """
    if ctx.invoked_subcommand is None:
        ctx.invoke(render)


# ── render subcommand ──────────────────────────────────────────────────────────

@main.command()
@click.option(
    "--instrument",
    "instruments",
    multiple=True,
    type=click.Choice(sorted(INSTRUMENT_CHOICES), case_sensitive=False),
    help="Only render packets for this instrument. Repeatable.",
)
@click.option(
    "--orchestra",
    "orchestras",
    multiple=True,
    type=click.Choice(sorted(ORCHESTRA_CHOICES), case_sensitive=False),
    help="Only render packets for this orchestra. Repeatable.",
)
@click.option(
    "--all",
    "render_all",
    is_flag=True,
    default=False,
    help="Render every defined packet instead of the default selection.",
)
@click.option(
    "--output",
    "-o",
    default=None,
    metavar="PATH",
    help="Destination .ly file. Defaults to standard output.",
)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log progress to stderr.")
def render(
    instruments: tuple[str, ...],
    orchestras: tuple[str, ...],
    render_all: bool,
    output: str | None,
    verbose: bool,
) -> None:
    """
    Generate the audition packet document in LilyPond format.

    Without filters only the default packet (Flute / Philharmonic) is
    rendered. Pipe the output to ``lilypond -`` or pass -o to save it.

    \b
    Examples:
      auditionprep render > flute.ly
      auditionprep render --orchestra philharmonic -o philharmonic.ly
      auditionprep render --instrument violin --instrument viola -o strings.ly
      auditionprep render --all -o everything.ly
    """
    set_verbose(verbose)

    if instruments or orchestras:
        try:
            pages = select_pages(
                instruments=[INSTRUMENT_CHOICES[name.lower()] for name in instruments],
                orchestras=[ORCHESTRA_CHOICES[name.lower()] for name in orchestras],
            )
        except ValueError as exc:
            click.echo(f"  ERROR: {exc}", err=True)
            sys.exit(1)
    elif render_all:
        pages = available_pages()
    else:
        pages = audition_materials()

    exporter = LilypondExporter(pages)

    if output is None:
        click.echo(exporter.render())
        return

    click.echo(f"auditionprep v{__version__}", err=True)
    click.echo(f"  Pages  : {len(pages)}", err=True)
    click.echo(f"  Output : {output}", err=True)
    try:
        exporter.export(output)
    except OSError as exc:
        click.echo(f"  ERROR: Could not write output file — {exc}", err=True)
        sys.exit(1)
    click.echo(f"Done!  Run 'lilypond {output}' to typeset the packet.", err=True)


# ── pages subcommand ───────────────────────────────────────────────────────────

@main.command()
def pages() -> None:
    """List every audition packet that can be rendered."""
    for page in available_pages():
        click.echo(f"{page.title:<40}  {len(page.scales):>2} scale(s)  [{page.clef.value} clef]")
