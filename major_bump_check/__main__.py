"""Allow `python -m major_bump_check`."""

from major_bump_check.cli import cli

if __name__ == "__main__":
    cli()
