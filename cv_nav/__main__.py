"""Entrypoint for `python -m cv_nav`."""

from .cli import main


if __name__ == "__main__":
    main()
