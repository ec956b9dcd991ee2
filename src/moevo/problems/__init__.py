"""Benchmark problems and a name-based registry."""

from __future__ import annotations

from typing import Any, Callable

from ..core.problem import Problem
from .zdt import ZDT4, ZDT5

__all__ = ["PROBLEMS", "ZDT4", "ZDT5", "problem_factory"]

PROBLEMS: dict[str, Callable[..., Problem]] = {
    "zdt4": ZDT4,
    "zdt5": ZDT5,
}


def problem_factory(name: str, **kwargs: Any) -> Problem:
    key = str(name).lower()
    if key not in PROBLEMS:
        available = ", ".join(sorted(PROBLEMS))
        raise ValueError(f"unknown problem '{name}' (available: {available})")
    return PROBLEMS[key](**kwargs)
