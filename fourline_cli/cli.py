"""
Fourline CLI - Main entry point.

Grades a captured stroke file against a target letter from the command
line. Prints the collaborator result dict as JSON.

Exit codes:
    0: letter accepted
    1: letter rejected
    2: usage, input or configuration error
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, List, Optional

import cv2
import yaml

from fourline_grading import (
    LETTER_CATALOG,
    GradingConfig,
    GradingMode,
    LetterGrader,
    NotebookVisualizer,
    RasterRenderer,
    StrokeSet,
    get_letter_spec,
)
from fourline_grading.config import DEFAULT_CONFIG
from fourline_grading.logging import LogEvent, create_logger

EXIT_PASS = 0
EXIT_FAIL = 1
EXIT_ERROR = 2


def load_strokes(strokes_path: str) -> StrokeSet:
    """
    Load a stroke capture from JSON.

    Accepts a list of strokes or an object with a ``strokes`` key; each
    stroke is a list of ``{"x", "y"}`` objects or ``[x, y]`` pairs.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the JSON or stroke data is invalid
    """
    path = Path(strokes_path)

    if not path.exists():
        raise FileNotFoundError(f"Stroke file not found: {strokes_path}")

    try:
        with open(path) as f:
            data: Any = json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {strokes_path}: {e}")

    if isinstance(data, dict):
        data = data.get("strokes", [])
    return StrokeSet.from_json_like(data)


def load_config(config_path: Optional[str]) -> GradingConfig:
    """
    Load grading configuration, logging the outcome.

    Raises:
        FileNotFoundError: If the config file doesn't exist
        ValueError: If the YAML or its values are invalid
    """
    if config_path is None:
        return DEFAULT_CONFIG

    logger = create_logger("cli")

    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    try:
        config = GradingConfig.from_yaml(path)
    except (yaml.YAMLError, ValueError, TypeError) as e:
        logger.error(
            event=LogEvent.CONFIG_INVALID,
            message="Invalid grading config",
            metadata={"path": str(path)},
            exc_info=e,
        )
        raise ValueError(f"Invalid grading config {config_path}: {e}") from e

    logger.info(
        event=LogEvent.CONFIG_LOADED,
        message="Loaded grading config",
        metadata={"path": str(path), "canvas_wh": list(config.canvas_wh)},
    )
    return config


def write_overlay(path: str, grader: LetterGrader, letter: str, strokes: StrokeSet, result) -> None:
    visualizer = NotebookVisualizer(RasterRenderer(grader.config))
    frame = visualizer.draw_attempt(get_letter_spec(letter), strokes, result)
    if not cv2.imwrite(path, frame):
        raise ValueError(f"Could not write overlay image: {path}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fourline",
        description="Fourline CLI - Grade handwritten letters on a four-line notebook",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Full grading (zone + shape) in practice mode
  fourline grade A strokes.json

  # Stricter quiz threshold, with debug overlay
  fourline grade g strokes.json --mode quiz --overlay attempt.png

  # Zone check only
  fourline classify o strokes.json

  # List letters and their categories
  fourline letters
"""
    )

    parser.add_argument(
        "--config",
        default=None,
        help="Path to grading config YAML (default: built-in settings)"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log shape scores and grading steps"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    grade_cmd = subparsers.add_parser("grade", help="Zone check, then shape check")
    grade_cmd.add_argument("letter", help="Target letter (A-Z, a-z)")
    grade_cmd.add_argument("strokes", help="Path to stroke capture JSON")
    grade_cmd.add_argument(
        "--mode",
        choices=[m.value for m in GradingMode],
        default=GradingMode.PRACTICE.value,
        help="Grading context (default: practice)"
    )
    grade_cmd.add_argument(
        "--threshold",
        type=float,
        default=None,
        help="Explicit shape MSE threshold (overrides --mode)"
    )
    grade_cmd.add_argument("--overlay", default=None, help="Write a debug overlay PNG")

    classify_cmd = subparsers.add_parser("classify", help="Zone check only")
    classify_cmd.add_argument("letter", help="Target letter (A-Z, a-z)")
    classify_cmd.add_argument("strokes", help="Path to stroke capture JSON")

    subparsers.add_parser("letters", help="List letters and categories")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return EXIT_ERROR

    if args.command == "letters":
        for char, spec in LETTER_CATALOG.items():
            print(f"{char}\t{spec.case.value}\t{spec.category.value}")
        return EXIT_PASS

    try:
        config = load_config(args.config)
        spec = get_letter_spec(args.letter)
        strokes = load_strokes(args.strokes)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR

    grader = LetterGrader(
        config,
        logger=create_logger(
            "grader", level=logging.DEBUG if args.verbose else logging.WARNING
        ).bind(command=args.command),
    )

    if args.command == "classify":
        result = grader.classify(spec, strokes)
    else:
        if args.threshold is not None and not 0.0 <= args.threshold <= 1.0:
            print(f"Error: --threshold must be in [0, 1], got {args.threshold}", file=sys.stderr)
            return EXIT_ERROR
        threshold = args.threshold if args.threshold is not None else config.threshold_for(GradingMode(args.mode))
        result = grader.grade(spec, strokes, threshold)

        if args.overlay:
            try:
                write_overlay(args.overlay, grader, spec.char, strokes, result)
            except (ValueError, cv2.error) as e:
                print(f"Error: {e}", file=sys.stderr)
                return EXIT_ERROR

    print(json.dumps(result.to_dict(), ensure_ascii=False))
    return EXIT_PASS if result.passed else EXIT_FAIL


if __name__ == "__main__":
    sys.exit(main())
