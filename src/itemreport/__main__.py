"""
CLI entry point for running itemreport as a module.

Usage: python -m itemreport [OPTIONS] COMMAND [ARGS]...
"""

from itemreport.cli.main import cli

if __name__ == "__main__":
    cli()
