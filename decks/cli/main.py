"""Typer entry-point wiring for the deck CLI."""

from __future__ import annotations

import logging
import random
from enum import Enum

import typer
from rich.console import Console
from rich.logging import RichHandler

from .. import ordering
from ..cards import Card
from ..deck import build_composed_deck, build_deck
from ..options import DeckOptions
from .render import format_deck, render_summary

app = typer.Typer(add_completion=False, rich_markup_mode="rich", no_args_is_help=True)
console = Console()
_log_handler = RichHandler(console=console, show_path=False)


class SortOrder(str, Enum):
    """Named orderings selectable from the command line."""

    RANK = "rank"
    SUIT = "suit"
    SUIT_RANK = "suit-rank"
    RANK_SUIT = "rank-suit"


def _configure_logging(verbose: bool) -> None:
    # root logger handlers belong to the host
    package_logger = logging.getLogger("decks")
    if verbose:
        package_logger.addHandler(_log_handler)
        package_logger.setLevel(logging.DEBUG)
    else:
        package_logger.removeHandler(_log_handler)
        package_logger.setLevel(logging.NOTSET)


def _build_options(
    sort: SortOrder | None,
    descending: bool,
    shuffle: bool,
    jokers: int,
    filter_ranks: list[str] | None,
    decks: int,
) -> DeckOptions:
    options = DeckOptions().with_shuffle(shuffle).with_jokers(jokers).with_composed_deck(decks)
    if sort is not None:
        less = ordering.ORDERINGS[sort.value]
        options = options.with_sorting(ordering.reverse(less) if descending else less)
    if filter_ranks:
        options = options.with_filter_ranks(filter_ranks)
    return options


def _assemble(
    sort: SortOrder | None,
    descending: bool,
    shuffle: bool,
    seed: int | None,
    jokers: int,
    filter_ranks: list[str] | None,
    decks: int,
    compose: bool,
    verbose: bool,
) -> list[Card]:
    _configure_logging(verbose)
    options = _build_options(sort, descending, shuffle, jokers, filter_ranks, decks)
    rng = random.Random(seed)
    if compose:
        return build_composed_deck(options, rng=rng)
    return build_deck(options, rng=rng)


SORT_OPTION = typer.Option(None, "--sort", help="Order the deck before shuffling.")
REVERSE_OPTION = typer.Option(False, "--reverse", help="Invert the selected ordering.")
SHUFFLE_OPTION = typer.Option(False, "--shuffle", help="Randomly permute the deck.")
SEED_OPTION = typer.Option(None, help="Random seed for reproducible shuffles (omit for randomness).")
JOKERS_OPTION = typer.Option(0, min=0, help="Number of jokers appended after shuffling.")
FILTER_OPTION = typer.Option(None, "--filter", help="Rank to remove; repeat for several ranks.")
DECKS_OPTION = typer.Option(1, min=1, help="Number of standard decks (requires --compose).")
COMPOSE_OPTION = typer.Option(
    False,
    "--compose",
    help="Concatenate --decks standard decks instead of building a single one.",
)
VERBOSE_OPTION = typer.Option(False, "--verbose", "-v", help="Log builder steps.")


@app.command()
def build(
    sort: SortOrder | None = SORT_OPTION,
    descending: bool = REVERSE_OPTION,
    shuffle: bool = SHUFFLE_OPTION,
    seed: int | None = SEED_OPTION,
    jokers: int = JOKERS_OPTION,
    filter_ranks: list[str] | None = FILTER_OPTION,
    decks: int = DECKS_OPTION,
    compose: bool = COMPOSE_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Print a deck built from the given options."""

    cards = _assemble(sort, descending, shuffle, seed, jokers, filter_ranks, decks, compose, verbose)
    if cards:
        console.print(format_deck(cards))
    console.print(f"[cyan]{len(cards)} card(s).[/cyan]")


@app.command()
def summary(
    sort: SortOrder | None = SORT_OPTION,
    descending: bool = REVERSE_OPTION,
    shuffle: bool = SHUFFLE_OPTION,
    seed: int | None = SEED_OPTION,
    jokers: int = JOKERS_OPTION,
    filter_ranks: list[str] | None = FILTER_OPTION,
    decks: int = DECKS_OPTION,
    compose: bool = COMPOSE_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Print per-suit counts for a deck built from the given options."""

    cards = _assemble(sort, descending, shuffle, seed, jokers, filter_ranks, decks, compose, verbose)
    console.print(render_summary(cards))


def main() -> None:
    """Entry-point for ``python -m decks.cli``."""

    app()


if __name__ == "__main__":  # pragma: no cover - CLI invocation
    main()
