"""Command-line entry point for merging image files."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import TYPE_CHECKING, TypeVar

from pydantic import ValidationError

from merge_images.compositor import merge_with_layout
from merge_images.config import ConfigLoader, MergeConfig
from merge_images.config_defaults import (
    DEFAULT_OUTPUT_PATH,
    JPEG_QUALITY_MAX,
    JPEG_QUALITY_MIN,
)
from merge_images.errors import MergeError
from merge_images.logging_utils import logger, set_level
from merge_images.version import resolve_project_version

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Callable, Sequence

T = TypeVar("T")

LAYOUT_CHOICES = ("grid", "waterfall")
LOG_LEVEL_CHOICES = ("DEBUG", "INFO", "WARNING", "ERROR")


def quality_int(text: str) -> int:
    """Parse a JPEG quality within the supported range."""
    value = int(text)
    if not JPEG_QUALITY_MIN <= value <= JPEG_QUALITY_MAX:
        msg = (f"quality must be between {JPEG_QUALITY_MIN} and "
               f"{JPEG_QUALITY_MAX}, got {value}")
        raise ValueError(msg)
    return value


def _wrap_validator(
    validator: Callable[[str], T],
    error_cls: type[argparse.ArgumentTypeError] = argparse.ArgumentTypeError,
) -> Callable[[str], T]:
    """Convert ``ValueError`` from a validator into ``ArgumentTypeError``."""

    def wrapper(text: str) -> T:
        try:
            return validator(text)
        except ValueError as exc:
            raise error_cls(str(exc)) from exc

    return wrapper


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line parser for the merge tool."""
    parser = argparse.ArgumentParser(
        prog="merge-images",
        description=(
            "Merge several images into one JPEG preview, either as a "
            "grid of square cells or as a waterfall of columns."
        ),
    )
    parser.add_argument("images", nargs="+", type=Path,
                        help="Input image files, in placement order.")
    parser.add_argument("--out", type=Path, default=Path(DEFAULT_OUTPUT_PATH))
    parser.add_argument(
        "--layout",
        type=str,
        default=None,
        choices=list(LAYOUT_CHOICES),
        help="Layout algorithm. Overrides the config file.",
    )
    parser.add_argument(
        "--quality",
        type=_wrap_validator(quality_int),
        default=None,
        help="JPEG quality of the merged image. Overrides the config file.",
    )
    parser.add_argument("--config", type=str, default=None,
                        help="Path to a TOML config file.")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        default=None,
        choices=list(LOG_LEVEL_CHOICES),
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {resolve_project_version()}",
    )
    return parser


def _build_config(args: argparse.Namespace) -> MergeConfig:
    """Load the config file if given and apply CLI overrides."""
    config = (ConfigLoader.load(args.config) if args.config
              else MergeConfig.model_validate({}))
    if args.layout is not None:
        config.layout = args.layout
    if args.quality is not None:
        config.encode.quality = args.quality
    if args.log_level is not None:
        config.logging.level = args.log_level
    return config


def _read_inputs(paths: Sequence[Path]) -> list[bytes]:
    return [path.read_bytes() for path in paths]


def main(argv: Sequence[str] | None = None) -> int:
    """Parse command-line arguments, merge the images and write output."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = _build_config(args)
    except (FileNotFoundError, ValidationError) as exc:
        parser.error(str(exc))
    set_level(config.logging.level)

    try:
        images = _read_inputs(args.images)
    except OSError as exc:
        parser.error(f"Cannot read input image: {exc}")

    try:
        merged = merge_with_layout(images, config.layout, encode=config.encode)
    except MergeError as exc:
        logger.error("Failed to merge %d images: %s", len(images), exc)
        return 1

    args.out.parent.mkdir(parents=True, exist_ok=True)
    args.out.write_bytes(merged)
    logger.info("Wrote %s (%d bytes)", args.out, len(merged))
    return 0


__all__ = ["build_parser", "main"]
