"""Command-line entry point for Padcalc.

Without arguments the calculator window is opened. ``--eval`` evaluates a
single expression headlessly, and ``--health-check`` verifies dependencies.
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any

from . import config
from .logging_config import LOG_LEVELS, get_logger, setup_logging, shutdown_logging

logger = get_logger("cli")


def _health_check() -> int:
    """Run health check to verify dependencies and basic operations.

    Returns:
        Exit code (0 for success, non-zero for failures)
    """
    checks_passed = 0
    checks_failed = 0

    print("Running Padcalc health check...")
    print("-" * 50)

    # Check pygame import
    try:
        import pygame

        print(f"[OK] pygame {pygame.version.ver} imported successfully")
        checks_passed += 1
    except ImportError as e:
        print(f"[FAIL] pygame import failed: {e}")
        print("  To install: pip install pygame")
        checks_failed += 1

    # Check evaluation
    try:
        from .evaluator import evaluate_expression

        result = evaluate_expression("3 * 3")
        if result == "9.000000":
            print("[OK] Basic evaluation works")
            checks_passed += 1
        else:
            print(f"[FAIL] Evaluation check failed: expected 9.000000, got {result}")
            checks_failed += 1
    except Exception as e:
        print(f"[FAIL] Evaluation check failed: {e}")
        checks_failed += 1

    # Check keypad layout
    try:
        from .layout import build_buttons

        buttons = build_buttons()
        overlapping = [
            (a.label, b.label)
            for i, a in enumerate(buttons)
            for b in buttons[i + 1 :]
            if a.rect.x <= b.rect.x + b.rect.width
            and b.rect.x <= a.rect.x + a.rect.width
            and a.rect.y <= b.rect.y + b.rect.height
            and b.rect.y <= a.rect.y + a.rect.height
        ]
        if len(buttons) == 16 and not overlapping:
            print("[OK] Keypad layout has 16 non-overlapping buttons")
            checks_passed += 1
        else:
            print(f"[FAIL] Keypad layout check failed: overlaps {overlapping}")
            checks_failed += 1
    except Exception as e:
        print(f"[FAIL] Layout check failed: {e}")
        checks_failed += 1

    # Check font subsystem (no window needed)
    try:
        import pygame

        pygame.font.init()
        pygame.font.Font(config.FONT_PATH, config.FONT_SIZE)
        print(f"[OK] Font {config.FONT_PATH or 'default'} loads")
        checks_passed += 1
        pygame.font.quit()
    except ImportError:
        pass
    except Exception as e:
        print(f"[FAIL] Font check failed: {e}")
        checks_failed += 1

    print("-" * 50)
    print(f"Results: {checks_passed} passed, {checks_failed} failed")

    if checks_failed > 0:
        print("\n[WARN] Some health checks failed. The calculator window may not start.")
        return 1

    print("\n[OK] All health checks passed!")
    return 0


def print_result_pretty(res: dict[str, Any], output_format: str = "human") -> None:
    """Print result in specified format.

    Args:
        res: Result dictionary
        output_format: "json" for JSON output, "human" for what the result line would show
    """
    if output_format == "json":
        print(json.dumps(res, indent=2, ensure_ascii=False))
        return
    if not res.get("ok"):
        print(config.ERROR_TOKEN)
        return
    print(res.get("result"))


def main_entry(argv: list[str] | None = None) -> int:
    """
    Main entry point for Padcalc CLI.

    Args:
        argv: Optional command-line arguments (defaults to sys.argv)

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    default_level = config.LOG_LEVEL.upper()
    if default_level not in LOG_LEVELS:
        default_level = "INFO"

    parser = argparse.ArgumentParser(prog="padcalc")
    parser.add_argument(
        "-e",
        "--eval",
        type=str,
        help="Evaluate one expression and exit (no window)",
        dest="eval_expr",
    )
    parser.add_argument(
        "--format",
        type=str,
        choices=["json", "human"],
        default="human",
        help="Output format for --eval: json (machine-readable) or human",
    )
    parser.add_argument("--font", type=str, help="Path to a TTF font file")
    parser.add_argument("--font-size", type=int, help="Font size in points")
    parser.add_argument(
        "--frame-delay", type=int, help="Delay between frames in milliseconds"
    )
    parser.add_argument(
        "-v", "--version", action="store_true", help="Show program version"
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=default_level,
        help="Set logging level",
    )
    parser.add_argument("--log-file", type=str, help="Write logs to file")
    parser.add_argument(
        "--health-check",
        action="store_true",
        help="Run health check and verify dependencies",
    )
    args = parser.parse_args(argv)

    setup_logging(level=args.log_level, log_file=args.log_file)
    try:
        return _dispatch(args)
    finally:
        shutdown_logging()


def _dispatch(args: argparse.Namespace) -> int:
    if args.version:
        print(config.VERSION)
        return 0

    if args.health_check:
        return _health_check()

    if args.eval_expr is not None:
        from .api import evaluate

        result = evaluate(args.eval_expr)
        print_result_pretty(result.to_dict(), output_format=args.format)
        return 0

    from .app import AppSettings, run
    from .types import StartupError

    settings = AppSettings()
    if args.font:
        settings.font_path = args.font
    if args.font_size is not None:
        settings.font_size = args.font_size
    if args.frame_delay is not None:
        settings.frame_delay_ms = args.frame_delay

    try:
        return run(settings)
    except StartupError as e:
        logger.error("Startup failed [%s]: %s", e.code, e)
        return 1
    except KeyboardInterrupt:
        print("\nInterrupted by user.")
        return 1


if __name__ == "__main__":
    """Allow running the CLI module directly with python -m padcalc_pkg.cli"""
    sys.exit(main_entry())
