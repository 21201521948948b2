from scribl.cli import cli

cli()
