"""Allow `python -m research_hub_sync`."""

from .runner import cli

cli()
