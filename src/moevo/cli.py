"""Command line interface.

Commands
--------
- ``show-settings``: print the resolved :class:`~moevo.config.Settings`.
- ``mutate``: sample a random solution of a registered problem, mutate a copy
  and print both, which is handy for checking operator options before wiring
  them into an algorithm.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Iterable

from moevo.config import (
    ConfigError,
    MutationConfig,
    Settings,
    VariationRunConfig,
    configure_logging,
    get_settings,
    load_config,
)
from moevo.core.random import random_source
from moevo.operators.mutation import MUTATION_OPERATORS, mutation_factory
from moevo.problems import PROBLEMS, problem_factory

__all__ = ["build_parser", "main", "run_mutation"]

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="moevo CLI")
    parser.add_argument(
        "--structured-logs",
        dest="structured_logs",
        action="store_true",
        help="emit JSON log records",
    )
    parser.add_argument(
        "--plain-logs",
        dest="structured_logs",
        action="store_false",
        help="emit plain-text log records",
    )
    parser.set_defaults(structured_logs=None)

    subparsers = parser.add_subparsers(dest="command", required=True)

    show = subparsers.add_parser("show-settings", help="Print resolved settings")
    show.add_argument("--json", action="store_true", help="JSON output")

    mutate = subparsers.add_parser("mutate", help="Mutate a random solution")
    mutate.add_argument("--config", type=str, help="YAML run configuration")
    mutate.add_argument("--problem", choices=sorted(PROBLEMS), help="Problem name")
    mutate.add_argument(
        "--operator", choices=sorted(MUTATION_OPERATORS), help="Mutation operator"
    )
    mutate.add_argument("--seed", type=int, help="Random seed (defaults to settings)")
    mutate.add_argument("--distribution-index", type=float, dest="distribution_index")
    mutate.add_argument(
        "--real-probability", type=float, dest="real_mutation_probability"
    )
    mutate.add_argument(
        "--binary-probability", type=float, dest="binary_mutation_probability"
    )
    mutate.add_argument(
        "--evaluate", action="store_true", help="Evaluate objectives before and after"
    )
    mutate.add_argument("--json", action="store_true", help="JSON output")

    return parser


def _configure_logging(structured: bool | None, settings: Settings, command: str) -> None:
    configure_logging(settings=settings, structured=structured, context={"command": command})


def _print_payload(payload: dict[str, Any], *, as_json: bool) -> None:
    if as_json:
        print(json.dumps(payload, indent=2, sort_keys=True))
    else:
        for key, value in payload.items():
            print(f"{key}: {value}")


def _resolve_run_config(args: argparse.Namespace) -> VariationRunConfig:
    run = (
        load_config(args.config, VariationRunConfig)
        if args.config
        else VariationRunConfig()
    )
    updates: dict[str, Any] = {}
    for name in ("problem", "operator", "seed"):
        value = getattr(args, name)
        if value is not None:
            updates[name] = value

    options = run.mutation.model_dump()
    for name in (
        "distribution_index",
        "real_mutation_probability",
        "binary_mutation_probability",
    ):
        value = getattr(args, name)
        if value is not None:
            options[name] = value
    updates["mutation"] = MutationConfig.model_validate(options)
    return run.model_copy(update=updates)


def run_mutation(
    run: VariationRunConfig, *, seed: int, evaluate: bool = False
) -> dict[str, Any]:
    """Mutate one random solution as described by ``run``; return a report."""

    random = random_source(seed)
    problem = problem_factory(run.problem, **run.problem_options)
    operator = mutation_factory(run.operator, run.mutation)

    original = problem.create_solution(random)
    if evaluate:
        problem.evaluate(original)
    mutated = original.copy()
    operator.execute(mutated, random)
    if evaluate:
        problem.evaluate(mutated)

    logger.info(
        "mutated %s solution with %s",
        problem.name,
        operator.name,
        extra={"seed": seed},
    )
    return {
        "problem": problem.name,
        "operator": operator.name,
        "seed": seed,
        "options": run.mutation.model_dump(by_alias=True),
        "before": original.to_dict(),
        "after": mutated.to_dict(),
    }


def main(argv: Iterable[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    settings = get_settings()
    _configure_logging(args.structured_logs, settings, args.command)

    try:
        if args.command == "show-settings":
            _print_payload(settings.to_dict(), as_json=args.json)
        elif args.command == "mutate":
            run = _resolve_run_config(args)
            seed = settings.random_seed if run.seed is None else run.seed
            payload = run_mutation(run, seed=seed, evaluate=args.evaluate)
            _print_payload(payload, as_json=args.json)
        else:  # pragma: no cover - argparse enforces the choices
            parser.error(f"Unknown command: {args.command}")
    except (ConfigError, ValueError) as exc:
        logger.error("%s failed: %s", args.command, exc)
        print(str(exc), file=sys.stderr)
        return 2

    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
