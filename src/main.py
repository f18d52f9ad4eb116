# --- Portable bootstrap: ensure 'src' is on sys.path ---
from __future__ import annotations
import sys
from pathlib import Path

_SRC_DIR = Path(__file__).resolve().parent   # .../PROJECT_ROOT/src

if str(_SRC_DIR) not in sys.path:
    sys.path.insert(0, str(_SRC_DIR))
# --- end bootstrap ---

from dialog_unwrap.prelude import capture, unwrap_or_dialog, unwrap_or_dialog_default  # noqa: E402
import argparse                                                                          # noqa: E402
import logging                                                                           # noqa: E402


def _divide(a: float, b: float) -> float:
    return a / b


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Show the error dialog for a failing division.")
    parser.add_argument("divisor", type=int, nargs="?", default=0)
    parser.add_argument("--fallback", action="store_true",
                        help="return 0.0 after the dialog instead of exiting")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    res = capture(_divide, 42, args.divisor).context("とあるプロセスが異常終了しました。")
    if args.fallback:
        value = unwrap_or_dialog_default(res, float)
    else:
        value = unwrap_or_dialog(res)
    print(value)
    return 0


if __name__ == "__main__":
    sys.exit(main())
