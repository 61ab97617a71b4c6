from shapecast.cli import cli

cli()
