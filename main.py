#!/usr/bin/env python3
"""
stm2horizon - STM32CubeMX pin table → Horizon EDA pool records
==============================================================

    python main.py [convert] [--pool-path …] [--dry-run]   create unit/entity/part
    python main.py serve                                   run the JSON API

Anything not given on the command line is taken from the environment
(POOL_PATH, PACKAGE_PATH, XML_PATH, PART_NAME, DATASHEET_URL,
DESCRIPTION, also read from .env) or asked for interactively.
See config.py for all tunables.
"""

import argparse
import logging
import sys

from flask import Flask

import config
from api import api_bp
from import_engine import PoolImportError, run_import


def create_app() -> Flask:
    """Flask application factory."""
    app = Flask(__name__)
    # Pin and pad maps are ordered; keep that order in responses
    app.json.sort_keys = False
    app.register_blueprint(api_bp)
    return app


def info(caption: str, value) -> None:
    print(caption.ljust(config.CAPTION_WIDTH) + str(value))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="stm2horizon",
        description="Create Horizon unit, entity and part from a CubeMX pin table",
    )
    sub = parser.add_subparsers(dest="command")

    conv = sub.add_parser("convert", help="write pool records (default)")
    for flag, dest, help_ in (
        ("--pool-path", "pool_path", "pool root directory"),
        ("--package-path", "package_path", "package JSON, relative to the pool"),
        ("--xml-path", "xml_path", "CubeMX MCU XML file"),
        ("--part-name", "part_name", "part name / MPN"),
        ("--datasheet-url", "datasheet_url", "datasheet URL"),
        ("--description", "description", "part description"),
    ):
        conv.add_argument(flag, dest=dest, default=None, help=help_)
    conv.add_argument("--dry-run", action="store_true",
                      help="build and check the records without writing them")
    conv.add_argument("-v", "--verbose", action="store_true")

    serve = sub.add_parser("serve", help="run the HTTP API")
    serve.add_argument("--host", default=config.HOST)
    serve.add_argument("--port", type=int, default=config.PORT)
    return parser


def cmd_convert(args) -> int:
    overrides = {k: getattr(args, k, None) for k in config.PROMPTS}
    try:
        cfg = config.resolve_configuration(overrides)
    except (ValueError, EOFError) as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1

    try:
        result = run_import(cfg, dry_run=getattr(args, "dry_run", False))
    except PoolImportError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1

    report = result.report
    info("Pad Count:", report.pad_count)
    info("Pin Count:", report.pin_count)
    info("Unit:", report.unit_uuid)
    info("Entity:", report.entity_uuid)
    info("Part:", report.part_uuid)
    for path in report.written:
        print(f"Written {path}")
    if not report.written:
        print("Dry run - nothing written")
    return 0


def cmd_serve(args) -> int:
    app = create_app()
    print("=" * 56)
    print("  stm2horizon API")
    print(f"  http://{args.host}:{args.port}/api/v1/convert")
    print("=" * 56)
    app.run(host=args.host, port=args.port, debug=config.DEBUG)
    return 0


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if getattr(args, "verbose", False) else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if args.command == "serve":
        return cmd_serve(args)
    return cmd_convert(args)


if __name__ == "__main__":
    sys.exit(main())
