"""Allow ``python -m pattern_catalog``."""
from pattern_catalog.cli.main import cli

cli()
