"""Allow ``python -m jj_prompt``."""

from jj_prompt.cli import cli

if __name__ == "__main__":
    cli(prog_name="jj-prompt")
