"""Module entrypoint for ``python -m treepath``."""

from .cli import main


if __name__ == "__main__":
    main()
