"""Main argument parser for the label picker CLI."""

import argparse

from label_picker import __version__
from label_picker.stores.settings import InputSize


def create_main_parser() -> argparse.ArgumentParser:
    """Create the main argument parser.

    Returns:
        The configured argument parser
    """
    parser = argparse.ArgumentParser(
        prog="label-picker",
        description="Label picker - pick, filter and create labels in the terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
            Without --server-url (or LABEL_PICKER_SERVER_URL) labels are
            created in memory and discarded on exit.

            Examples:
                label-picker --catalog labels.json
                label-picker --catalog labels.json --selected bug urgent
                label-picker --server-url https://labels.example.com
        """,
    )

    parser.add_argument(
        "--version",
        "-v",
        action="version",
        version=f"label-picker {__version__}",
        help="Show the version number and exit",
    )

    parser.add_argument(
        "-c",
        "--catalog",
        type=str,
        help=(
            'Path to a JSON catalog: {"labels": [...], "selected": [...]}. '
            "Defaults to the server catalog when a server is configured."
        ),
    )
    parser.add_argument(
        "--selected",
        nargs="*",
        default=None,
        metavar="NAME",
        help="Names of labels already attached (overrides the catalog file)",
    )
    parser.add_argument(
        "--server-url",
        type=str,
        help="Base URL of the label server used to create labels",
    )
    parser.add_argument(
        "--api-token",
        type=str,
        help="API token sent to the label server",
    )
    parser.add_argument(
        "--input-size",
        choices=[size.value for size in InputSize],
        help="Width preset of the filter input",
    )

    return parser
