from flatwiki.cli import cli

cli()
