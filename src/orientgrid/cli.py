"""
Command-line interface for orientgrid.

Runs random placement explorations from YAML configs and exposes the
orientation and placement primitives for one-off checks.
"""

import argparse
import dataclasses
import json
import sys
from typing import Dict, List, Optional

from orientgrid.core.config import Config, load_config, create_default_config, validate_config
from orientgrid.core.grid import OrientGrid, Vec3
from orientgrid.core.patterns import get_pattern
from orientgrid.core.registry import PATTERN_REGISTRY, ROTATION_SAMPLER_REGISTRY
from orientgrid.core.rotation import euler_rotation
from orientgrid.runner import ExplorationRunner
from orientgrid.utils.display import StatusDisplay, LiveLogger


def get_available_components() -> Dict[str, List[str]]:
    """Get registered patterns and rotation samplers."""
    # Import modules to trigger registration
    import orientgrid.core.patterns  # noqa: F401
    import orientgrid.samplers  # noqa: F401

    return {
        "patterns": sorted(PATTERN_REGISTRY.keys()),
        "samplers": sorted(ROTATION_SAMPLER_REGISTRY.keys()),
    }


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser."""
    components = get_available_components()

    parser = argparse.ArgumentParser(
        prog="orientgrid",
        description="orientgrid: rotated pattern placement on a voxel grid",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Examples:
  # Run a random placement exploration
  orientgrid run --config configs/l_hexomino.yaml

  # Create default configuration
  orientgrid create-config --output config.yaml

  # Orient a single offset
  orientgrid orient --size 10 10 10 --offset 1 0 0 --anchor 8 0 0

  # Place one pattern
  orientgrid place --size 10 10 10 --pattern l_hexomino --anchor 2 8 0 --euler 0 0 -90

Available Components:
  Patterns: {', '.join(components['patterns'])}
  Samplers: {', '.join(components['samplers'])}
        """
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    run_parser = subparsers.add_parser("run", help="Run a random placement exploration")
    run_parser.add_argument("--config", "-c", required=True, help="Path to configuration file")
    run_parser.add_argument("--seed", type=int, help="Override random seed")
    run_parser.add_argument("--attempts", type=int, help="Override number of attempts")
    run_parser.add_argument("--output-dir", help="Override log directory")
    run_parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose output")

    config_parser = subparsers.add_parser("create-config", help="Create default configuration file")
    config_parser.add_argument("--output", "-o", default="config.yaml", help="Output configuration file")

    validate_parser = subparsers.add_parser("validate-config", help="Validate configuration file")
    validate_parser.add_argument("config", help="Configuration file to validate")
    validate_parser.add_argument("--strict", action="store_true", help="Treat warnings as errors")

    orient_parser = subparsers.add_parser("orient", help="Map one local offset to a world index")
    orient_parser.add_argument("--size", type=int, nargs=3, required=True, metavar=("X", "Y", "Z"))
    orient_parser.add_argument("--offset", type=int, nargs=3, required=True, metavar=("X", "Y", "Z"))
    orient_parser.add_argument("--anchor", type=int, nargs=3, required=True, metavar=("X", "Y", "Z"))
    orient_parser.add_argument("--euler", type=float, nargs=3, default=(0, 0, 0), metavar=("X", "Y", "Z"),
                               help="Euler angles in degrees")

    place_parser = subparsers.add_parser("place", help="Place one pattern on an empty grid")
    place_parser.add_argument("--size", type=int, nargs=3, required=True, metavar=("X", "Y", "Z"))
    place_parser.add_argument("--pattern", choices=components['patterns'], default="l_hexomino")
    place_parser.add_argument("--anchor", type=int, nargs=3, required=True, metavar=("X", "Y", "Z"))
    place_parser.add_argument("--euler", type=float, nargs=3, default=(0, 0, 0), metavar=("X", "Y", "Z"),
                              help="Euler angles in degrees")
    place_parser.add_argument("--tile", type=int, default=1, help="Tile id to write")

    list_parser = subparsers.add_parser("list-components", help="List registered patterns and samplers")
    list_parser.add_argument("--format", choices=["table", "json"], default="table", help="Output format")

    return parser


def _load_and_validate_config(args, logger) -> Optional[Config]:
    """Load and validate configuration with error handling."""
    try:
        logger.log_action("Loading configuration")
        config = load_config(args.config)

        issues = validate_config(config)
        errors = [issue for issue in issues if issue.startswith("ERROR")]
        warnings = [issue for issue in issues if not issue.startswith("ERROR")]

        if errors:
            StatusDisplay.print_section("Configuration Errors")
            for error in errors:
                logger.log_error(error.replace("ERROR: ", ""))
            return None
        for warning in warnings:
            logger.log_warning(warning.replace("WARNING: ", ""))

        return config

    except FileNotFoundError:
        logger.log_error(f"Configuration file not found: {args.config}")
        logger.log_info("Use 'orientgrid create-config' to create a default configuration")
        return None
    except Exception as e:
        logger.log_error(f"Configuration error: {e}")
        return None


def _apply_run_overrides(config: Config, args) -> None:
    """Apply command line overrides to configuration."""
    if getattr(args, 'seed', None) is not None:
        config.exploration.seed = args.seed
    if getattr(args, 'attempts', None) is not None:
        config.exploration.attempts = args.attempts
    if getattr(args, 'output_dir', None):
        config.runner.log_dir = args.output_dir
    if getattr(args, 'verbose', False):
        config.runner.verbose = True
    # Re-run section validation on the overridden values
    config.exploration = dataclasses.replace(config.exploration)


def run_command(args) -> int:
    """Execute run command."""
    logger = LiveLogger(verbose=getattr(args, 'verbose', False))

    try:
        StatusDisplay.print_header("orientgrid Exploration")

        config = _load_and_validate_config(args, logger)
        if config is None:
            return 1

        _apply_run_overrides(config, args)

        StatusDisplay.print_fields({
            "Grid Size": "x".join(str(d) for d in config.grid.size),
            "Cell Size": config.grid.cell_size,
            "Pattern": "custom" if config.exploration.offsets is not None else config.exploration.pattern,
            "Rotation Sampler": config.exploration.rotation_sampler,
            "Attempts": config.exploration.attempts,
            "Seed": config.exploration.seed,
            "Output Directory": config.runner.log_dir,
        }, "Exploration Configuration")

        runner = ExplorationRunner(config)
        runner.setup()
        result = runner.run()
        runner.print_summary(result)
        return 0

    except KeyboardInterrupt:
        logger.log_warning("Exploration interrupted by user")
        return 1
    except Exception as e:
        logger.log_error(f"Failed to run exploration: {e}")
        if getattr(args, 'verbose', False):
            import traceback
            logger.log_error(traceback.format_exc())
        return 1


def create_config_command(args) -> int:
    """Execute create-config command."""
    logger = LiveLogger(verbose=True)
    try:
        create_default_config(args.output)
        logger.log_result(f"Default configuration written to {args.output}")
        return 0
    except OSError as e:
        logger.log_error(f"Failed to write configuration: {e}")
        return 1


def validate_config_command(args) -> int:
    """Execute validate-config command."""
    logger = LiveLogger(verbose=True)
    try:
        config = load_config(args.config)
    except Exception as e:
        logger.log_error(f"Configuration error: {e}")
        return 1

    issues = validate_config(config)
    if not issues:
        logger.log_result("Configuration is valid")
        return 0

    has_errors = False
    for issue in issues:
        if issue.startswith("ERROR"):
            has_errors = True
            logger.log_error(issue.replace("ERROR: ", ""))
        else:
            logger.log_warning(issue.replace("WARNING: ", ""))

    if has_errors or args.strict:
        return 1
    return 0


def orient_command(args) -> int:
    """Execute orient command."""
    grid = OrientGrid(args.size)
    rotation = euler_rotation(*args.euler)
    world_index = grid.try_orient_index(args.offset, args.anchor, rotation)

    if world_index is None:
        candidate = grid.orient_index(args.offset, args.anchor, rotation)
        StatusDisplay.print_status(f"OutOfBounds: {candidate.to_tuple()}", "error")
        return 1

    StatusDisplay.print_status(f"World index: {world_index.to_tuple()}", "success")
    return 0


def place_command(args) -> int:
    """Execute place command."""
    grid = OrientGrid(args.size)
    pattern = get_pattern(args.pattern)
    result = grid.try_place_pattern(args.tile, pattern, Vec3.from_list(args.anchor), euler_rotation(*args.euler))

    if not result:
        StatusDisplay.print_status(f"{result.error.value}: {result.message}", "error")
        return 1

    StatusDisplay.print_status(result.message, "success")
    for cell in result.world_cells:
        print(f"  {cell.to_tuple()}")
    return 0


def list_components_command(args) -> int:
    """Execute list-components command."""
    components = get_available_components()

    if args.format == "json":
        print(json.dumps(components, indent=2))
        return 0

    StatusDisplay.print_section("Patterns")
    for name in components["patterns"]:
        print(f"  {name:<20} : {len(get_pattern(name))} cells")
    StatusDisplay.print_section("Rotation Samplers")
    for name in components["samplers"]:
        print(f"  {name}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    try:
        parser = create_parser()

        if argv is None:
            argv = sys.argv[1:]
        if not argv:
            parser.print_help()
            return 1

        args = parser.parse_args(argv)

        command_handlers = {
            "run": run_command,
            "create-config": create_config_command,
            "validate-config": validate_config_command,
            "orient": orient_command,
            "place": place_command,
            "list-components": list_components_command,
        }

        handler = command_handlers.get(args.command)
        if handler:
            return handler(args)
        else:
            parser.print_help()
            return 1

    except KeyboardInterrupt:
        print("\n⚠️  Interrupted by user")
        return 1
    except Exception as e:
        print(f"\n❌ Unexpected error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
