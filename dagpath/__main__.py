"""Module entrypoint for ``python -m dagpath``."""

from dagpath.cli import main

if __name__ == "__main__":
    main()
