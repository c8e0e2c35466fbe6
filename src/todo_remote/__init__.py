"""Remote task data source for the to-do app: REST client, observable results, CLI."""

__version__ = "0.1.0"
