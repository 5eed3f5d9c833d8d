"""Generate command - scan a package and emit Must wrapper stubs."""

import logging
import os
import sys

from ..analysis import get_alias_strategy
from ..config import GeneratorConfig, parse_tags
from ..emit import UpdateError, load_update_settings, render, write_output
from ..pipeline import run_pipeline
from ..source.loader import PackageLoadError

logger = logging.getLogger(__name__)


def build_config(args) -> GeneratorConfig:
    """GeneratorConfig from parsed command-line arguments.

    Raises:
        ValueError: the alias strategy (flag or GOMUST_ALIAS_STRATEGY) is unknown
    """
    config = GeneratorConfig(
        build_tags=parse_tags(args.tags or ""),
        dry_run=args.dry_run,
        update=args.update,
    )
    if args.output:
        config.output_name = args.output
    if args.alias_strategy:
        config.alias_strategy = args.alias_strategy
    get_alias_strategy(config.alias_strategy)
    return config


def cmd_generate(args) -> int:
    """Scan args.directory and write (or print, with -n) the wrappers."""
    try:
        config = build_config(args)
    except ValueError as e:
        print(f"Error: {e}")
        return 1
    output_path = os.path.join(args.directory, config.output_name)

    if config.update:
        try:
            config.apply_settings(load_update_settings(output_path))
            get_alias_strategy(config.alias_strategy)
        except (UpdateError, ValueError) as e:
            print(f"Error: {e}")
            return 1
        logger.debug(f"Updating {output_path} with recorded settings {config.settings()}")

    try:
        result = run_pipeline(args.directory, config)
    except PackageLoadError as e:
        print("Failed to parse package:", e)
        return 1

    for diagnostic in result.resolution.diagnostics:
        print(diagnostic, file=sys.stderr)

    body = render(result.resolution.import_paths(), result.functions)

    if config.dry_run:
        sys.stdout.write(body)
    elif result.error_count == 0:
        write_output(output_path, body, config.settings())
        print(f"Wrote {len(result.functions)} wrappers to {output_path}")

    if result.error_count:
        if config.dry_run:
            logger.error(f"{result.error_count} import errors")
        else:
            logger.error(f"{result.error_count} import errors; {output_path} not written")
        return 1
    return 0
