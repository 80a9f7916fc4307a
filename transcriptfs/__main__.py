"""Module entrypoint for ``python -m transcriptfs``."""

from .cli import main


if __name__ == "__main__":
    main()
