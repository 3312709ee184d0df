"""Command line interface: `pontos list` and `pontos data`."""

from __future__ import annotations

import argparse
import asyncio
import sys
from datetime import date
from typing import List, Optional

from src.pontos.api_pontos import PontosAPI
from src.pontos.errors import PontosError
from src.pontos.export import day_to_csv, list_vessels
from src.pontos.support_functions.support_functions import to_date
from src.utils.config import load_config
from src.utils.pontos_logger import configure_logger, get_logger

DEFAULT_VESSEL_ID = "name_SD401Fredrika"
DEFAULT_DATE = date(2023, 11, 7)


def _date_arg(text: str) -> date:
    try:
        return to_date(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid date {text!r}, expected YYYY-MM-DD") from e


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pontos",
        description="Download operational vessel data from the PONTOS data hub.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("list", help="List available vessel ids on the PONTOS data hub.")

    data = sub.add_parser("data", help="Download daily data as csv files.")
    data.add_argument("-v", "--vessel-id", default=DEFAULT_VESSEL_ID)
    data.add_argument("-d", "--date", type=_date_arg, default=DEFAULT_DATE, help="YYYY-MM-DD (UTC day)")
    data.add_argument("-o", "--output", default=None, help="Output folder (default: PONTOS_OUTPUT_FOLDER)")
    data.add_argument("--nest", action=argparse.BooleanOptionalAction, default=None,
                      help="Put the files in a <vessel_id>_<date>/ folder (default: PONTOS_NEST_OUTPUT)")
    return parser


async def run(args: argparse.Namespace) -> None:
    config = load_config()
    configure_logger(level=config.log_level)
    with PontosAPI(config) as api:
        if args.command == "list":
            await list_vessels(api)
        else:
            await day_to_csv(
                api,
                args.vessel_id,
                args.date,
                output_folder=args.output if args.output is not None else config.output_folder,
                nest=args.nest if args.nest is not None else config.nest_output,
            )


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        asyncio.run(run(args))
    except PontosError as e:
        get_logger("cli").error(f"{type(e).__name__}: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
