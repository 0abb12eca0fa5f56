"""
eclair CLI - Main entry point.

This module registers all CLI commands. Each command is implemented
in its own module under cli/commands/.
"""

import logging

import click

from .commands import diff, domains, fit, orphans, stats, trace, view


@click.group()
@click.version_option(package_name="eclair")
@click.option("-v", "--verbose", is_flag=True, help="Log projection details")
def main(verbose: bool):
    """eclair: explore an architecture graph.

    Reduces, traces and fits the graph produced by the riviere builder.

    \b
    Quick Start:
      eclair stats .riviere/graph.json
      eclair view . --hide UseCase
      eclair trace . orders:api:place-order
      eclair fit . --domain orders
      eclair domains .
      eclair diff old.json .riviere/graph.json
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%H:%M:%S",
        )


# Register commands
main.add_command(view.view)
main.add_command(trace.trace)
main.add_command(orphans.orphans)
main.add_command(fit.fit)
main.add_command(stats.stats)
main.add_command(domains.domains)
main.add_command(diff.diff)

if __name__ == "__main__":
    main()
