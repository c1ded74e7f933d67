"""Distance and matching CLI commands.

Registered as top-level commands by closestmatch.cli.app.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import structlog
import typer

from closestmatch.cli.context import CLIContext
from closestmatch.cli.formatters import (
    print_distance,
    print_distance_matrix,
    print_error,
    print_info,
    print_matches,
    print_score_table,
)
from closestmatch.infrastructure.candidates import CandidateFileError, load_candidates
from closestmatch.infrastructure.text import fold_text
from closestmatch.modules.matching import (
    closest_match,
    distance,
    distance_matrix,
    score_candidates,
    select_closest,
)

logger = structlog.get_logger()

FoldOption = Annotated[
    bool,
    typer.Option("--fold", help="Ignore accents, case and surrounding whitespace"),
]
ExactOption = Annotated[
    bool,
    typer.Option("--exact", help="Compare exact characters even if fold is configured"),
]


def _resolve_fold(fold: bool, exact: bool) -> bool:
    """Combine --fold/--exact with the configured default."""
    if fold and exact:
        print_error("Cannot use both --fold and --exact")
        print_info("Choose one or omit both to use config default")
        raise typer.Exit(1)
    if fold:
        return True
    if exact:
        return False
    return CLIContext.get().get_config().fold_input


def distance_command(
    text1: Annotated[str, typer.Argument(help="First text")],
    text2: Annotated[str, typer.Argument(help="Second text")],
    fold: FoldOption = False,
    exact: ExactOption = False,
) -> None:
    """Print the edit distance between two texts.

    \b
    Examples:
        closestmatch distance kitten sitting      # 3
        closestmatch distance Café cafe --fold    # 0
    """
    if _resolve_fold(fold, exact):
        text1, text2 = fold_text(text1), fold_text(text2)

    value = distance(text1, text2)
    logger.debug(
        "distance_computed",
        length1=len(text1),
        length2=len(text2),
        distance=value,
    )
    print_distance(value)


def find(
    query: Annotated[str, typer.Argument(help="Text to match")],
    candidates: Annotated[
        list[str] | None,
        typer.Argument(help="Candidates to choose from"),
    ] = None,
    file: Annotated[
        Path | None,
        typer.Option(
            "--file",
            "-f",
            help="Read more candidates from a file (one per line, or .yaml/.yml list)",
        ),
    ] = None,
    all_matches: Annotated[
        bool,
        typer.Option("--all", "-a", help="Show every candidate tied at the minimum"),
    ] = False,
    first: Annotated[
        bool,
        typer.Option("--first", help="Show only the first closest candidate"),
    ] = False,
    fold: FoldOption = False,
    exact: ExactOption = False,
    scores: Annotated[
        bool,
        typer.Option("--scores", "-s", help="Show a table of all distances"),
    ] = False,
) -> None:
    """Find the candidate closest to QUERY.

    Ties go to the candidate listed first. Candidates given as arguments
    come before those read from --file.

    \b
    Examples:
        closestmatch find dag dog pumpkin                # dog
        closestmatch find hello jello yellow bello --all # jello, bello
        closestmatch find goku -f names.txt --scores     # Show every distance
    """
    if all_matches and first:
        print_error("Cannot use both --all and --first")
        print_info("Choose one or omit both to use config default")
        raise typer.Exit(1)

    use_fold = _resolve_fold(fold, exact)

    pool = list(candidates or [])
    if file is not None:
        try:
            pool.extend(load_candidates(file))
        except CandidateFileError as e:
            print_error(str(e))
            raise typer.Exit(1) from e

    if not pool:
        print_error("No candidates to match against")
        print_info("Pass candidates as arguments or use --file")
        raise typer.Exit(1)

    if all_matches:
        show_all = True
    elif first:
        show_all = False
    else:
        show_all = CLIContext.get().get_config().show_all_by_default

    key = fold_text if use_fold else None

    if scores:
        scored = score_candidates(query, pool, key=key)
        print_score_table(query, scored)
        result = select_closest(scored, show_all)
    else:
        result = closest_match(query, pool, show_all, key=key)

    if isinstance(result, list):
        matches = result
    else:
        matches = [result] if result is not None else []

    logger.debug(
        "closest_match_found",
        candidates=len(pool),
        matches=len(matches),
        show_all=show_all,
        fold=use_fold,
    )
    print_matches(matches)


def explain(
    text1: Annotated[str, typer.Argument(help="First text (rows)")],
    text2: Annotated[str, typer.Argument(help="Second text (columns)")],
    fold: FoldOption = False,
    exact: ExactOption = False,
) -> None:
    """Show the full edit-distance table for two texts.

    Each cell holds the distance between a prefix of TEXT1 and a prefix
    of TEXT2; the bottom-right cell is the answer.

    \b
    Examples:
        closestmatch explain hlelo hello
    """
    if _resolve_fold(fold, exact):
        text1, text2 = fold_text(text1), fold_text(text2)

    print_distance_matrix(text1, text2, distance_matrix(text1, text2))
