from schemagraph.cli import cli

cli()
