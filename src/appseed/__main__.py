"""`python -m appseed <project-directory>`: mismo comando que el script `appseed`."""

from __future__ import annotations

import sys

# Los avisos usan ✔/✖; en consolas Windows cp1252 fallarían al imprimirse.
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8")
    sys.stderr.reconfigure(encoding="utf-8")

from appseed.cli.main import run


def main() -> None:
    run()


if __name__ == "__main__":
    main()
