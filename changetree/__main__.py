"""Module entrypoint for ``python -m changetree``."""

from .cli import main


if __name__ == "__main__":
    main()
