"""Command line: recover polynomials or secrets from share documents.

Usage:
    polysecret shares.json
    polysecret --mode secret a.json b.json
    cat shares.json | polysecret --format text
"""

import json
import logging

import click

from polysecret.config import LOG_LEVELS, load_settings
from polysecret.recover import Mode, recover_batch
from polysecret.report import FORMATS, render
from polysecret.shares import SAMPLE_DOCUMENT

logger = logging.getLogger(__name__)


def _items_from_input(label: str, data: bytes) -> list:
    """Split one input into (label, source) items; a JSON array is a batch."""
    try:
        document = json.loads(data)
    except ValueError:
        # bad JSON or undecodable bytes; recover_one reports InvalidEncoding
        return [(label, data)]
    if isinstance(document, list):
        return [(f"{label}[{i}]", d) for i, d in enumerate(document)]
    return [(label, document)]


@click.command()
@click.argument("files", nargs=-1, type=click.File("rb"))
@click.option("--mode", type=click.Choice([m.value for m in Mode]), default=None,
              help="Recover the whole polynomial or only its value at x=0.")
@click.option("--format", "fmt", type=click.Choice(FORMATS), default=None,
              help="Output format.")
@click.option("--log-level", type=click.Choice(LOG_LEVELS, case_sensitive=False),
              default=None, help="Logging level for diagnostics on stderr.")
@click.option("--sample", is_flag=True, help="Ignore input and run the built-in example.")
@click.pass_context
def main(ctx, files, mode, fmt, log_level, sample):
    """Reconstruct a polynomial from threshold shares in FILES (or stdin)."""
    try:
        settings = load_settings()
    except ValueError as e:
        raise click.ClickException(str(e)) from e

    level = getattr(logging, log_level.upper()) if log_level else settings.log_level_value
    logging.basicConfig(level=level,
                        format="%(levelname)s %(name)s: %(message)s")
    mode = Mode(mode) if mode else settings.mode
    fmt = fmt or settings.fmt

    if sample:
        items = [("sample", SAMPLE_DOCUMENT)]
    elif files:
        items = []
        for f in files:
            items.extend(_items_from_input(f.name, f.read()))
    else:
        data = click.get_binary_stream("stdin").read()
        if data.strip():
            items = _items_from_input("<stdin>", data)
        else:
            logger.info("Empty input, using built-in sample")
            items = [("sample", SAMPLE_DOCUMENT)]

    outcomes = recover_batch(items, mode)
    click.echo(render(outcomes, fmt))
    if not all(o.ok for o in outcomes):
        ctx.exit(1)
