import argparse
import logging
from typing import Optional

from image_layers.api.layout import open_layout
from image_layers.api.pil_io import get_format, save
from image_layers.constants import ImageFormat
from image_layers.version import __version__

try:
    from IPython.lib.pretty import pprint
except ImportError:
    from pprint import pprint

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="image-layers command line utility.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Be more verbose.")
    parser.add_argument("--version", action="version", version=__version__)

    subparsers = parser.add_subparsers(dest="command", required=True)

    export_parser = subparsers.add_parser(
        "export", help="Render a layout document to PNG or JPEG"
    )
    export_parser.add_argument("layout_file", help="Input layout JSON file")
    export_parser.add_argument(
        "output_file", help="Output image file (.png, .jpg or .jpeg)"
    )
    export_parser.add_argument(
        "-q", "--quality", type=int, default=None, help="JPEG quality in [1, 100]"
    )
    export_parser.add_argument(
        "-f", "--format", default=None, help="Output format, PNG or JPEG"
    )

    show_parser = subparsers.add_parser("show", help="Show the layer tree")
    show_parser.add_argument("layout_file", help="Input layout JSON file")

    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> Optional[int]:
    args = parse_args(argv)

    logging.basicConfig(level=logging.WARNING)
    package_logger = logging.getLogger("image_layers")
    if args.verbose:
        package_logger.setLevel(logging.DEBUG)
    else:
        package_logger.setLevel(logging.INFO)

    if args.command == "export":
        options = {}
        try:
            image_format = get_format(args.output_file, args.format)
            if args.quality is not None:
                if image_format == ImageFormat.JPEG:
                    options["quality"] = args.quality
                else:
                    logger.warning(
                        "--quality is ignored for %s output", image_format.value
                    )
            layer = open_layout(args.layout_file)
            save(layer, args.output_file, format=image_format.value, **options)
        except (OSError, ValueError) as e:
            logger.error(str(e))
            return 1
        logger.info("Saved %s", args.output_file)

    elif args.command == "show":
        pprint(open_layout(args.layout_file))

    return None


if __name__ == "__main__":
    raise SystemExit(main())
