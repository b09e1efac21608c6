"""
Command-line interface for imagebump - Container Image Version Bumper.

Subcommands:
- list: Show the images referenced by FROM lines
- set: Change the version of one image
- apply: Change versions from a YAML pins file
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from constants import DEFAULT_DOCKERFILE
from core.dockerfile import Dockerfile
from core.exceptions import ImageBumpException
from core.pins import apply_version_pins, load_version_pins
from utils.logging_helpers import log_error_section

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False):
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )


def parse_args(args: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="imagebump",
        description="imagebump - Container Image Version Bumper",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable verbose logging.")

    # Options shared by every subcommand
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("-f", "--file", type=Path, default=Path(DEFAULT_DOCKERFILE), help="Dockerfile to read.")

    # Options for subcommands that produce a modified Dockerfile
    output = argparse.ArgumentParser(add_help=False)
    output_group = output.add_mutually_exclusive_group()
    output_group.add_argument("-o", "--output", type=Path, help="Write the result here instead of stdout.")
    output_group.add_argument("-i", "--in-place", action="store_true", help="Overwrite the input Dockerfile.")

    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("list", parents=[common], help="List images referenced by FROM lines.")

    set_parser = subparsers.add_parser("set", parents=[common, output], help="Set the version of one image.")
    set_parser.add_argument("image", help="Image name without tag or digest.")
    set_parser.add_argument("version", help="New tag, sha256 digest, or tag@digest.")

    apply_parser = subparsers.add_parser("apply", parents=[common, output], help="Apply versions from a pins file.")
    apply_parser.add_argument("pins", type=Path, help="YAML file with an 'images' mapping.")
    apply_parser.add_argument("--strict", action="store_true", help="Fail when a pinned image is not in the Dockerfile.")

    return parser.parse_args(args)


def emit(dockerfile: Dockerfile, args: argparse.Namespace) -> None:
    """Write the Dockerfile to the destination selected on the command line."""
    if args.in_place:
        dockerfile.save(args.file)
        logger.info(f"Updated {args.file}")
    elif args.output:
        dockerfile.save(args.output)
        logger.info(f"Wrote {args.output}")
    else:
        dockerfile.write(sys.stdout)


def run_list(dockerfile: Dockerfile, args: argparse.Namespace) -> None:
    """Print each image name and its full reference."""
    for name, image in dockerfile.get_artifacts().items():
        print(f"{name}\t{image}")


def run_set(dockerfile: Dockerfile, args: argparse.Namespace) -> None:
    """Set one image version and emit the result."""
    dockerfile.set_version(args.image, args.version)
    emit(dockerfile, args)


def run_apply(dockerfile: Dockerfile, args: argparse.Namespace) -> None:
    """Apply a pins file and emit the result."""
    pins = load_version_pins(args.pins)
    logger.info(f"Applying {len(pins)} pin(s) to {dockerfile.name}")
    applied = apply_version_pins(dockerfile, pins, strict=args.strict)
    logger.info(f"Applied {len(applied)} pin(s)")
    emit(dockerfile, args)


COMMANDS = {
    "list": run_list,
    "set": run_set,
    "apply": run_apply,
}


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    setup_logging(args.verbose)

    try:
        dockerfile = Dockerfile.from_path(args.file)
        COMMANDS[args.command](dockerfile, args)
    except (ImageBumpException, OSError) as e:
        log_error_section(
            f"imagebump {args.command} failed",
            [str(e), f"File: {args.file}"],
            logger=logger,
        )
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
