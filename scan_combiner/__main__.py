from scan_combiner.cli import cli

cli()
