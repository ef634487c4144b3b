"""Command-line front end for the random name generator.

    name_maker [amount | male_amount female_amount]
    name_maker -m|--male|-f|--female [amount]
    name_maker -M|--many [amount | male_amount female_amount]
    name_maker -F|--family [amount | male_amount female_amount]
"""

import logging
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler

from ..config import get_config
from ..core.errors import ArgumentError, InitializationError, SamplingError
from ..core.models import Gender
from ..generator import RandomNameGenerator
from .utils import ExitCode, Output

app = typer.Typer(
    name="name_maker",
    help="Generate random human names, batches of names, or families.",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)

console = Console()
err_console = Console(stderr=True)

USAGE = """Usage:
    name_maker [amount | male_amount female_amount]
    name_maker -m|--male|-f|--female [amount]
    name_maker -M|--many [amount | male_amount female_amount]
    name_maker -F|--family [amount | male_amount female_amount]
Run 'name_maker --help' for details."""

_MODE_FLAGS = ("--male", "--female", "--many", "--family")


def setup_logging(verbose: bool = False, debug: bool = False) -> None:
    """Route name_maker logs to stderr through rich."""
    level = logging.WARNING
    if verbose:
        level = logging.INFO
    if debug:
        level = logging.DEBUG

    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )
    logging.getLogger("name_maker").setLevel(level)


def _version_callback(value: bool) -> None:
    if value:
        from .. import __version__

        print(f"name_maker {__version__}")
        raise typer.Exit()


def select_mode(male: bool, female: bool, many: bool, family: bool) -> str | None:
    """Return the single selected mode flag, or None for the bare form.

    Raises:
        ArgumentError: If more than one mode flag is set.
    """
    chosen = [flag for flag, on in zip(_MODE_FLAGS, (male, female, many, family)) if on]
    if len(chosen) > 1:
        raise ArgumentError(f"Conflicting flags: {', '.join(chosen)}")
    return chosen[0] if chosen else None


def run(
    generator: RandomNameGenerator,
    mode: str | None,
    amounts: list[int],
    out: Output,
    *,
    default_amount: int = 1,
    default_children: int = 0,
) -> None:
    """Dispatch one invocation to the generator and write its names to ``out``.

    Raises:
        ArgumentError: If the number of amounts does not fit the mode.
    """
    if any(amount < 0 for amount in amounts):
        raise ArgumentError("Amounts must be non-negative integers.")

    if mode in ("--male", "--female"):
        gender = Gender.MALE if mode == "--male" else Gender.FEMALE
        if len(amounts) > 1:
            raise ArgumentError("Too many command arguments.")
        if not amounts:
            out.names([generator.generate_specific(gender)])
        elif gender is Gender.MALE:
            out.names(generator.generate_many_specific(amounts[0], 0))
        else:
            out.names(generator.generate_many_specific(0, amounts[0]))
        return

    if len(amounts) > 2:
        raise ArgumentError("Too many command arguments.")

    if mode == "--family":
        if not amounts:
            family = generator.sample_family(random_children=default_children)
        elif len(amounts) == 1:
            family = generator.sample_family(random_children=amounts[0])
        else:
            family = generator.sample_family(amounts[0], amounts[1])
        out.family(family)
        return

    # Bare form and --many
    if not amounts:
        out.names(generator.generate_many(default_amount))
    elif len(amounts) == 1:
        out.names(generator.generate_many(amounts[0]))
    else:
        out.names(generator.generate_many_specific(amounts[0], amounts[1]))


@app.command()
def main(
    amounts: Annotated[
        list[int] | None,
        typer.Argument(
            help="Number of names, or male and female amounts",
            show_default=False,
        ),
    ] = None,
    male: Annotated[
        bool, typer.Option("-m", "--male", help="Generate male names only")
    ] = False,
    female: Annotated[
        bool, typer.Option("-f", "--female", help="Generate female names only")
    ] = False,
    many: Annotated[
        bool, typer.Option("-M", "--many", help="Generate a batch of names")
    ] = False,
    family: Annotated[
        bool,
        typer.Option(
            "-F",
            "--family",
            help="Generate a family: amount is the number of children, "
            "or male and female children",
        ),
    ] = False,
    seed: Annotated[
        int | None,
        typer.Option("--seed", help="Random seed for reproducibility"),
    ] = None,
    json_output: Annotated[
        bool,
        typer.Option("--json", help="Output machine-readable JSON"),
    ] = False,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Show info logs")
    ] = False,
    debug: Annotated[bool, typer.Option("--debug", help="Show debug logs")] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            help="Show version and exit",
            callback=_version_callback,
            is_eager=True,
        ),
    ] = False,
):
    """Generate random names from the bundled name lists.

    Examples:
        name_maker                 # one name
        name_maker 5               # five names
        name_maker 2 3             # two male then three female names
        name_maker -f 4            # four female names
        name_maker -F 3            # a family with three children
        name_maker -F 2 1          # a family with two sons and one daughter
    """
    setup_logging(verbose=verbose, debug=debug)
    config = get_config()
    out = Output(
        console=console,
        err_console=err_console,
        json_mode=json_output or config.json_mode,
    )

    try:
        mode = select_mode(male, female, many, family)
        generator = RandomNameGenerator.init(
            seed=seed if seed is not None else config.defaults.seed
        )
        run(
            generator,
            mode,
            list(amounts or []),
            out,
            default_amount=config.defaults.amount,
            default_children=config.defaults.children,
        )
    except ArgumentError as exc:
        out.error(str(exc), suggestion=USAGE, exit_code=ExitCode.ARGUMENT_ERROR)
    except InitializationError as exc:
        out.error(str(exc), exit_code=ExitCode.INITIALIZATION_ERROR)
    except SamplingError as exc:
        out.error(str(exc), exit_code=ExitCode.SAMPLING_ERROR)

    raise typer.Exit(out.finish())
