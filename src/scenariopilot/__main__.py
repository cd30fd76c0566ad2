"""Module entrypoint for ``python -m scenariopilot``."""

from scenariopilot.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
