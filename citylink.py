"""Command line entry point: read a neighbour table, build R*, answer route queries."""
from pathlib import Path

import click
from loguru import logger

import closure
import citytable
import pairlist
import pathfinder
from errors import AllocationError, DeadEndError, MatrixFormatError, RouteFormatError
from settings import RunOptions, Settings, setup_logging


def run(options: RunOptions, settings: Settings) -> int:
    """Do everything options asks for. Returns the process exit status."""
    try:
        matrix = citytable.read_matrix(options.input_file)
    except MatrixFormatError as e:
        click.echo(f"Error: {e}", err=True)
        return 1
    n = matrix.shape[0]

    click.echo(citytable.format_neighbour_table(matrix))

    if options.route is not None:
        for node in options.route:
            if not 0 <= node < n:
                click.echo(f"Error: Node {node} is outside the table (0..{n - 1})", err=True)
                return 2

    try:
        base_edges = pairlist.build(matrix, n)
        del matrix
        r_star = closure.close(base_edges.copy())
    except AllocationError as e:
        click.echo(f"Error: {e}", err=True)
        return 1
    logger.info(f"{len(base_edges)} direct links, {len(r_star)} pairs in R*")

    if options.print_closure:
        click.echo()
        click.echo(citytable.format_closure(r_star))

    if options.route is not None:
        start, target = options.route
        try:
            path = pathfinder.find_path(r_star, base_edges, start, target)
            click.echo(citytable.format_path(path))
        except DeadEndError as e:
            click.echo(f"Path exists but could not be traced: {e}")

    if options.write_output:
        out_file = citytable.write_closure(r_star, options.input_file, settings.output_prefix)
        click.echo(f"Saving {out_file.name}...")

    if options.write_matrix:
        out_file = citytable.write_closure_matrix(r_star, n, options.input_file, settings.output_prefix)
        click.echo(f"Saving {out_file.name}...")

    return 0


def _parse_route(ctx, param, value):
    if value is None:
        return None
    try:
        return citytable.parse_route(value)
    except RouteFormatError as e:
        raise click.BadParameter(str(e)) from e


@click.command()
@click.option("-i", "--input", "input_file", required=True,
              type=click.Path(exists=True, dir_okay=False, path_type=Path),
              help="Neighbour table file: size N followed by N rows of N 0/1 values.")
@click.option("-r", "--route", callback=_parse_route, metavar="SOURCE,DESTINATION",
              help="Find whether there is a path from SOURCE to DESTINATION and print it.")
@click.option("-p", "--print", "print_closure", is_flag=True, help="Print the transitive closure (R*).")
@click.option("-o", "--output", "write_output", is_flag=True,
              help="Write the transitive closure to out-<inputfile>.")
@click.option("--matrix-out", "write_matrix", is_flag=True,
              help="Also save the transitive closure as a sparse matrix, out-<inputfile stem>.npz.")
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr.")
@click.pass_context
def cli(ctx, input_file, route, print_closure, write_output, write_matrix, verbose):
    """Find routes between cities from an adjacency (neighbour) table."""
    settings = Settings.from_env()
    setup_logging(settings, verbose=verbose)
    options = RunOptions(
        input_file=input_file,
        route=route,
        print_closure=print_closure,
        write_output=write_output,
        write_matrix=write_matrix,
    )
    ctx.exit(run(options, settings))


if __name__ == "__main__":
    cli()
