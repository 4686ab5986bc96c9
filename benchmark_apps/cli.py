"""
Benchmark Apps - CLI

Usage:
    benchmark-apps run -c fast='sleep 0.1 && echo' -c slow='sleep 0.3 && echo' -n 5
    benchmark-apps run -f commands.json -n 10 --arg-scale 1000 --pretty
    benchmark-apps time "ls -R /usr/share"
"""

import sys
import logging

import click
from rich.console import Console
from rich.markup import escape
from rich.progress import Progress, SpinnerColumn, TextColumn, BarColumn, MofNCompleteColumn

from . import __version__
from .config import Config
from .data.loader import CommandLoader, parse_command_specs, create_sample_commands
from .benchmark.runner import BenchmarkRunner, time_this
from .benchmark.reporter import Reporter, print_summary
from .benchmark.utils import make_arg_generator
from .errors import BenchmarkError

logger = logging.getLogger(__name__)

console = Console()


def setup_logging(verbose: bool = False, debug: bool = False):
    """Configure logging level."""
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        force=True
    )

    logging.getLogger('benchmark_apps').setLevel(level)


@click.group()
@click.version_option(version=__version__)
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output (INFO level)')
@click.option('--debug', is_flag=True, help='Enable debug output (DEBUG level, shows each command line)')
@click.pass_context
def cli(ctx, verbose, debug):
    """
    Benchmark Apps

    Time shell commands over repeated iterations and compare them.
    Commands are run through the shell with their output discarded.

    Use -v for verbose output, --debug for every timed command line.
    """
    ctx.ensure_object(dict)
    ctx.obj['verbose'] = verbose
    ctx.obj['debug'] = debug
    setup_logging(verbose, debug)


@cli.command()
@click.option('--cmd', '-c', 'cmd_specs', multiple=True, metavar='NAME=COMMAND', help='Command to benchmark (repeatable)')
@click.option('--file', '-f', 'command_file', default=None, help='Command set file (JSON/CSV)')
@click.option('--iterations', '-n', default=None, type=int, help=f'Iterations per command (default: {Config.ITERATIONS})')
@click.option('--pretty/--no-pretty', default=None, help='Print per-iteration timings after the run')
@click.option('--arg-template', default='{iteration}', show_default=True, help='Argument appended to each command')
@click.option('--arg-scale', default=1, type=int, show_default=True, help='Multiplier for the iteration number')
@click.option('--no-args', is_flag=True, help='Do not append an argument to the commands')
@click.option('--output', '-o', default=None, help='Output directory for reports (default: REPORT_DIR)')
@click.option('--format', 'report_format', type=click.Choice(['md', 'json', 'both', 'none']), default='none', help='Report format')
def run(cmd_specs, command_file, iterations, pretty, arg_template, arg_scale, no_args, output, report_format):
    """
    Run a benchmark over a set of commands.

    Example:
        benchmark-apps run -c a='sleep 0.1 && echo' -c b='sleep 0.2 && echo' -n 3 --pretty
    """
    try:
        commands = {}
        if command_file:
            commands.update(CommandLoader(command_file).load())
        commands.update(parse_command_specs(cmd_specs))
    except (BenchmarkError, FileNotFoundError) as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)

    if not commands:
        console.print("[red]Error: no commands given. Use --cmd NAME=COMMAND or --file.[/red]")
        sys.exit(1)

    options = Config.get_harness_defaults()
    if iterations is not None:
        options['iterations'] = iterations
    if pretty is not None:
        options['pretty_print'] = pretty
    try:
        options['arg_generator'] = (lambda i: "") if no_args else make_arg_generator(arg_template, arg_scale)
        runner = BenchmarkRunner(options)
    except BenchmarkError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)

    console.print(f"\n[bold blue]Command Benchmark[/bold blue]")
    console.print(f"Commands: [cyan]{', '.join(commands)}[/cyan]")
    console.print(f"Iterations: [cyan]{runner.options.iterations}[/cyan]")
    console.print("")

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        MofNCompleteColumn(),
        console=console,
        transient=True,
    ) as progress:
        task = progress.add_task(
            "Running benchmark...",
            total=max(runner.options.iterations, 0) * len(commands),
        )
        runner.on_progress(lambda completed, total: progress.update(task, completed=completed))

        try:
            results = runner.run(commands, overrides={'pretty_print': False})
        except BenchmarkError as e:
            progress.stop()
            console.print(f"[red]Error: {escape(str(e))}[/red]")
            sys.exit(1)

    if runner.options.pretty_print:
        runner.pretty_print(iterations=runner.options.iterations)
        console.print("")

    if report_format != 'none':
        reporter = Reporter(output)

        if report_format in ['md', 'both']:
            md_path = reporter.generate_markdown(results)
            console.print(f"📄 Markdown report: [green]{md_path}[/green]")

        if report_format in ['json', 'both']:
            json_path = reporter.generate_json(results)
            console.print(f"📊 JSON results: [green]{json_path}[/green]")

    print_summary(results, console=console)


@cli.command('time')
@click.argument('command_line')
def time_cmd(command_line):
    """
    Time a single command line once.

    Example:
        benchmark-apps time "sleep 0.5"
    """
    try:
        elapsed = time_this(command_line)
    except BenchmarkError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)

    click.echo(f"{elapsed:.4f} s")


@cli.command('create-sample')
@click.option('--output', '-o', default='commands.json', help='Output filename')
@click.option('--format', '-f', 'sample_format', type=click.Choice(['json', 'csv']), default='json', help='Output format')
def create_sample(output, sample_format):
    """Create sample command set file."""
    create_sample_commands(output, sample_format)
    console.print(f"[green]✅ Sample commands created: {output}[/green]")
    console.print("\nEdit this file to add your own commands.")


if __name__ == "__main__":
    cli()
