"""Command line entry point for building and validating the catalog."""

import argparse
import logging
import sys
from pathlib import Path

from bas_atlas.config import settings
from bas_atlas.exceptions import AtlasError
from bas_atlas.services.pipeline import BuildOptions, build_catalog
from bas_atlas.services.schema_validation import JsonSchemaOracle, validate_dist

logger = logging.getLogger(__name__)


def cmd_build(args) -> None:
    options = BuildOptions.from_settings(
        settings,
        data_dir=args.data_dir,
        dist_dir=args.dist_dir,
        schemas_dir=args.schemas_dir,
        validate_only=args.validate,
        clean=args.clean,
    )
    logger.info(f"Building {settings.app_name} data from {options.data_dir}")
    result = build_catalog(options)
    logger.info("Build complete" if result.written else "Validation complete")


def cmd_import(args) -> None:
    options = BuildOptions.from_settings(
        settings,
        snapshot=args.snapshot,
        dist_dir=args.dist_dir,
        schemas_dir=args.schemas_dir,
        clean=args.clean,
    )
    result = build_catalog(options)
    dataset = result.dataset
    logger.info(
        f"Imported {dataset.total_brands} brands, {dataset.total_types} types, {dataset.total_models} models"
    )


def cmd_validate(args) -> None:
    dist_dir = args.dist_dir or Path(settings.dist_dir)
    schemas_dir = args.schemas_dir or Path(settings.schemas_dir)
    validate_dist(dist_dir, JsonSchemaOracle(schemas_dir))
    logger.info("Validation successful")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="bas-atlas", description="Build the BAS Atlas catalog artifacts")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    build_cmd = subparsers.add_parser("build", help="Build dist artifacts from the data directory")
    build_cmd.add_argument("--validate", action="store_true", help="Validate only, do not write files")
    build_cmd.add_argument("--clean", action="store_true", help="Remove the output directory first")
    build_cmd.add_argument("--data-dir", type=Path, help="Source data directory")
    build_cmd.add_argument("--dist-dir", type=Path, help="Output directory")
    build_cmd.add_argument("--schemas-dir", type=Path, help="JSON Schema directory")
    build_cmd.set_defaults(func=cmd_build)

    import_cmd = subparsers.add_parser("import", help="Build dist artifacts from a combined snapshot file")
    import_cmd.add_argument("snapshot", type=Path, help="Path to a combined index.json")
    import_cmd.add_argument("--clean", action="store_true", help="Remove the output directory first")
    import_cmd.add_argument("--dist-dir", type=Path, help="Output directory")
    import_cmd.add_argument("--schemas-dir", type=Path, help="JSON Schema directory")
    import_cmd.set_defaults(func=cmd_import)

    validate_cmd = subparsers.add_parser("validate", help="Validate written artifacts against the schemas")
    validate_cmd.add_argument("--dist-dir", type=Path, help="Output directory")
    validate_cmd.add_argument("--schemas-dir", type=Path, help="JSON Schema directory")
    validate_cmd.set_defaults(func=cmd_validate)

    return parser


def main(argv=None) -> int:
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else settings.log_level.upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )
    parser = build_parser()
    args = parser.parse_args(argv)

    if not hasattr(args, "func"):
        parser.print_help()
        return 1

    try:
        args.func(args)
    except AtlasError as e:
        logger.error(f"Build failed: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
