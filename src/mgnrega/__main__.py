from mgnrega.cli import cli

cli()
