from __future__ import annotations

import sys

from .cli.analyze_grids import main as analyze_main


def main(argv: list[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)

    # Default behavior: run analysis if no subcommand
    if not argv:
        return analyze_main([])

    cmd = argv[0].lower()
    rest = argv[1:]

    if cmd in {"analyze", "analysis"}:
        return analyze_main(rest)

    # Flags only: treat as analyze
    if cmd.startswith("-"):
        return analyze_main(argv)

    print("Usage:")
    print("  python -m power_play_analysis analyze [--csv ...] [--outdir figures]")
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
