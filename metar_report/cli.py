from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from metar_report.adapters.sample_metar import SampleMetarAdapter
from metar_report.adapters.xflysim import XFlysimMetarAdapter
from metar_report.command import COMMAND_DESCRIPTION, COMMAND_EXAMPLE, run_metar_command
from metar_report.config import SAMPLES_DIR, load_code_tables_or_empty, load_settings
from metar_report.errors import ConfigError


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=COMMAND_DESCRIPTION, epilog=f"example: {COMMAND_EXAMPLE}")
    parser.add_argument("icao", nargs="?", default="", help="Airport ICAO code")
    parser.add_argument("--source", choices=["live", "sample"], default="live")
    parser.add_argument("--samples-dir", type=Path, default=SAMPLES_DIR)
    parser.add_argument("--out", type=Path, default=None, help="Output directory for the HTML page")
    parser.add_argument("--config", type=Path, default=None)
    parser.add_argument("--verbose", action="store_true")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        format="[%(levelname)s] %(message)s",
        level=logging.DEBUG if args.verbose else logging.INFO,
    )
    try:
        settings = load_settings(args.config)
    except ConfigError as exc:
        logging.getLogger(__name__).error("%s", exc)
        return 2

    if args.source == "sample":
        adapter = SampleMetarAdapter(args.samples_dir)
    else:
        adapter = XFlysimMetarAdapter(settings.url_template, settings.timeout_s)

    result = run_metar_command(
        args.icao,
        adapter,
        load_code_tables_or_empty(settings.config_path),
        args.out or settings.output_dir,
    )
    for reply in result.replies:
        print(reply)
    if result.html_path:
        print(result.html_path)
    return 0 if result.ok else 1


if __name__ == "__main__":
    sys.exit(main())
