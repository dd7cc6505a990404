"""Allow ``python -m rusend``."""

from rusend.cli.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
