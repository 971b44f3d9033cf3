import argparse
import sys

from environs import Env

from measurement.logging_config import get_logger, setup_logging
from measurement.application.services.conversion import ConversionService
from measurement.application.services.quantity_parser import parse_quantity
from measurement.domain.exceptions import ParseError
from measurement.infrastructure.output.formatters import (
    ConsoleOutputFormatter,
    JSONOutputFormatter,
)

logger = get_logger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Measurement unit converter")
    parser.add_argument(
        "quantity",
        type=str,
        help='Quantity to convert, amount followed by unit (e.g., "420g", "1.5l")',
    )
    parser.add_argument(
        "unit",
        type=str,
        help="Target unit suffix (e.g., kg, floz)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the result as JSON",
    )
    parser.add_argument(
        "--exact-only",
        action="store_true",
        help="Fail instead of falling back to approximate conversion",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    # Load environment variables as early as possible within main()
    env = Env()
    env.read_env(".env")

    setup_logging(env)
    precision = env.int("OUTPUT_PRECISION", None)

    service = ConversionService()
    try:
        quantity = parse_quantity(args.quantity)
        unit = service.resolve_unit(quantity, args.unit)
    except ParseError as e:
        print(f"Error: {e}")
        return 2

    result = service.convert(quantity, unit)
    if args.exact_only and not result.exact:
        print(f"Error: no exact conversion from {quantity.unit} to {unit}")
        return 1

    if args.json:
        print(JSONOutputFormatter(precision).format_result(result))
    else:
        ConsoleOutputFormatter(precision).format_result(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
