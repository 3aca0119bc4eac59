"""Module entrypoint for `python -m sempoa`."""

from sempoa.cli.main import run

if __name__ == "__main__":
    run()
