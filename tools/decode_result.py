#!/usr/bin/env python3
"""
Decode a `submit` response into its result shape and execution outcome.
"""

import logging
import sys
from pathlib import Path

import click

ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT / "src"))
sys.path.insert(0, str(ROOT))

from engine_codec.errors import CodecError  # noqa: E402
from engine_codec.results import decode_submit_result  # noqa: E402
from tools.config import ToolConfig  # noqa: E402
from tools.report import FORMATS, build_report, render_report  # noqa: E402

logger = logging.getLogger(__name__)


def _parse_hex(text: str) -> bytes:
    text = text.strip()
    if text.startswith(("0x", "0X")):
        text = text[2:]
    try:
        return bytes.fromhex(text)
    except ValueError as e:
        raise click.BadParameter(f"not a hex string: {e}", param_hint="HEX_INPUT")


@click.command()
@click.argument("hex_input", required=False)
@click.option(
    "--input-file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Read raw response bytes from a file instead of HEX_INPUT",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(FORMATS),
    default=None,
    help="Output format [default: ENGINE_CODEC_FORMAT or yaml]",
)
@click.option("--verbose", "-v", is_flag=True, help="Log which result layout was chosen")
def main(hex_input, input_file, output_format, verbose):
    """Decode HEX_INPUT (optionally 0x-prefixed) as a `submit` result."""
    config = ToolConfig.from_env()
    output_format = output_format or config.output_format
    if output_format not in FORMATS:
        raise click.BadParameter(f"unknown format {output_format!r}", param_hint="--format")

    logging.basicConfig(
        level=logging.DEBUG if verbose or config.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    if input_file is not None:
        data = input_file.read_bytes()
    elif hex_input:
        data = _parse_hex(hex_input)
    else:
        raise click.UsageError("provide HEX_INPUT or --input-file")

    try:
        decoded = decode_submit_result(data)
    except CodecError as e:
        logger.error(f"Decode failed: {e}")
        sys.exit(1)

    click.echo(render_report(build_report(decoded), output_format), nl=False)


if __name__ == "__main__":
    main()
