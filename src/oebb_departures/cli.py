"""CLI for inspecting ÖBB station boards and rendering labels once."""

import argparse
import asyncio
import json
import sys
from dataclasses import asdict
from pathlib import Path
from typing import Any

import aiohttp

from oebb_departures.adapters.display.file_display_surface import decode_data_url
from oebb_departures.adapters.display.svg_image_composer import SvgImageComposer
from oebb_departures.adapters.oebb_api import OebbDepartureRepository
from oebb_departures.application.services import (
    DepartureBoardService,
    FieldRenderer,
    ScrollEngine,
    clean_destination,
)
from oebb_departures.domain.exceptions import DepartureFetchError
from oebb_departures.domain.models import ComposedLine, Departure, DepartureSettings
from oebb_departures.domain.models.display_field import DisplayField


def _settings_from_args(args: Any) -> DepartureSettings:
    return DepartureSettings.from_payload(
        {
            "stationId": args.station_id,
            "departureCount": args.count,
            "trainFilter": args.filter,
            "line1": getattr(args, "line1", None),
            "line2": getattr(args, "line2", None),
            "line3": getattr(args, "line3", None),
        }
    )


async def fetch_board(settings: DepartureSettings) -> list[Departure]:
    """Fetch the filtered board for ``settings``."""
    async with aiohttp.ClientSession() as session:
        service = DepartureBoardService(OebbDepartureRepository(session=session))
        return await service.get_board(settings)


def format_departure(departure: Departure) -> str:
    """One-line text summary of a departure."""
    if departure.is_cancelled:
        status = "CANCELLED"
    elif departure.is_delayed:
        status = f"{departure.actual_time} ({departure.delay})"
    else:
        status = "on time"
    platform = f"Pl. {departure.platform}" if departure.platform else ""
    return (
        f"{departure.scheduled_time}  {departure.train:<10} "
        f"{clean_destination(departure.destination):<30} {platform:<8} {status}"
    )


def render_departure_svg(departure: Departure, settings: DepartureSettings, total: int) -> str:
    """Render the first frame of a departure label as SVG text."""
    renderer = FieldRenderer()
    lines = []
    for field_name in settings.line_fields:
        x_offset = 0
        if field_name == DisplayField.DESTINATION:
            x_offset = ScrollEngine.offset(clean_destination(departure.destination), 0)
        lines.append(ComposedLine(renderer.render(departure, field_name), x_offset))
    counter_text = f"1/{total}" if total > 1 else ""
    return decode_data_url(SvgImageComposer().compose(lines, counter_text))


async def _handle_board_command(args: Any) -> None:
    settings = _settings_from_args(args)
    departures = await fetch_board(settings)

    if args.json:
        print(json.dumps([asdict(d) for d in departures], indent=2, ensure_ascii=False))
        return

    if not departures:
        print("No departures")
        return

    for departure in departures:
        print(format_departure(departure))


async def _handle_render_command(args: Any) -> None:
    settings = _settings_from_args(args)
    departures = await fetch_board(settings)
    composer = SvgImageComposer()

    if departures:
        svg = render_departure_svg(departures[0], settings, len(departures))
    else:
        svg = composer.render_message_svg("No departures")

    if args.output:
        Path(args.output).write_text(svg, encoding="utf-8")
        print(f"Wrote {args.output}")
    else:
        print(svg)


def _setup_argparse() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="ÖBB departure board tools",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s board 1290401 --count 5
  %(prog)s board 1290401 --count 3 --filter "S80, REX"
  %(prog)s render 1290401 --line3 delay --output label.svg
        """,
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    field_choices = sorted(DisplayField.names())

    board_parser = subparsers.add_parser("board", help="Print the next departures")
    board_parser.add_argument("station_id", help="ÖBB station number (e.g., 1290401)")
    board_parser.add_argument("--count", type=int, default=5, help="Number of departures")
    board_parser.add_argument("--filter", help="Comma-separated train names to keep")
    board_parser.add_argument("--json", action="store_true", help="Output as JSON")

    render_parser = subparsers.add_parser("render", help="Render the label of the next departure")
    render_parser.add_argument("station_id", help="ÖBB station number (e.g., 1290401)")
    render_parser.add_argument("--count", type=int, default=1, help="Number of departures")
    render_parser.add_argument("--filter", help="Comma-separated train names to keep")
    render_parser.add_argument("--line1", choices=field_choices, default="train")
    render_parser.add_argument("--line2", choices=field_choices, default="destination")
    render_parser.add_argument("--line3", choices=field_choices, default="actualTime")
    render_parser.add_argument("--output", "-o", help="File to write the SVG to")

    return parser


async def main() -> None:
    """Main CLI entry point."""
    parser = _setup_argparse()
    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    try:
        if args.command == "board":
            await _handle_board_command(args)
        elif args.command == "render":
            await _handle_render_command(args)
    except DepartureFetchError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def cli_main() -> None:
    """Console script entry point."""
    asyncio.run(main())


if __name__ == "__main__":
    cli_main()
