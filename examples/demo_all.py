"""Run every pattern demo and print its output."""

import sys

sys.path.insert(0, "src")

from pattern_catalog.application.demos import run_all
from pattern_catalog.shared.logging import configure_logging


def main():
    configure_logging()
    print("=" * 50)
    print("Pattern-Catalog - design pattern demos")
    print("=" * 50)

    for result in run_all():
        print(f"\n[{result.pattern}]")
        for line in result.lines:
            print(f"    {line}")


if __name__ == "__main__":
    main()
