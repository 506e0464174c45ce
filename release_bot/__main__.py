from release_bot.cli import cli

cli()
