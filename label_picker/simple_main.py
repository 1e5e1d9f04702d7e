#!/usr/bin/env python3
"""
Main entry point for the label picker CLI.
"""

import argparse
import asyncio
import logging
import os
from html import escape
from pathlib import Path

from prompt_toolkit import print_formatted_text
from prompt_toolkit.formatted_text import HTML

from label_picker.api.labels_client import LabelsApiClient, LabelsApiError
from label_picker.api.memory_store import InMemoryLabelStore
from label_picker.argparsers.main_parser import create_main_parser
from label_picker.models import Label
from label_picker.stores.catalog import load_catalog, resolve_selected
from label_picker.stores.settings import InputSize, PickerSettings


def _configure_logging() -> None:
    debug_env = os.getenv("DEBUG", "false").lower()
    if debug_env != "1" and debug_env != "true":
        logging.disable(logging.WARNING)


def _print_error(message: str) -> None:
    print_formatted_text(HTML(f"<red>{escape(message)}</red>"))


def build_settings(args: argparse.Namespace) -> PickerSettings:
    """Layer CLI flags over the settings file and environment."""
    settings = PickerSettings.load()
    overrides = {}
    if args.server_url:
        overrides["server_url"] = args.server_url
    if args.api_token:
        overrides["api_token"] = args.api_token
    if args.input_size:
        overrides["input_size"] = InputSize(args.input_size)
    if not overrides:
        return settings
    return PickerSettings.model_validate({**settings.model_dump(), **overrides})


def build_label_creator(
    settings: PickerSettings, labels: list[Label]
) -> LabelsApiClient | InMemoryLabelStore:
    if settings.server_url:
        return LabelsApiClient(
            settings.server_url,
            api_token=settings.api_token,
            timeout=settings.request_timeout,
        )
    return InMemoryLabelStore(labels)


def load_labels(
    args: argparse.Namespace, settings: PickerSettings
) -> tuple[list[Label], list[Label]]:
    labels: list[Label] = []
    selected: list[Label] = []

    if args.catalog:
        labels, selected = load_catalog(Path(args.catalog).expanduser())
    elif settings.server_url:
        client = LabelsApiClient(
            settings.server_url,
            api_token=settings.api_token,
            timeout=settings.request_timeout,
        )
        labels = asyncio.run(client.list_labels())

    if args.selected is not None:
        selected = resolve_selected(labels, args.selected)
    return labels, selected


def main() -> None:
    """Main entry point for the label picker CLI."""
    _configure_logging()
    parser = create_main_parser()
    args = parser.parse_args()

    settings = build_settings(args)

    try:
        labels, selected = load_labels(args, settings)
    except (OSError, ValueError) as exc:
        _print_error(f"Failed to load catalog: {exc}")
        raise SystemExit(1)
    except LabelsApiError as exc:
        _print_error(f"Failed to fetch labels: {exc}")
        raise SystemExit(1)

    # Import the app only when needed
    from label_picker.tui.app import LabelPickerApp

    app = LabelPickerApp(
        labels=labels,
        selected_labels=selected,
        label_creator=build_label_creator(settings, labels),
        settings=settings,
    )

    try:
        app.run()
    except KeyboardInterrupt:
        print_formatted_text(HTML("\n<yellow>Goodbye!</yellow>"))
    except Exception as e:
        _print_error(f"Error: {e}")
        raise

    for label in app.selected_labels:
        print_formatted_text(HTML(f"<green>•</green> {escape(label.name)}"))


if __name__ == "__main__":
    main()
