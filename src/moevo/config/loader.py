"""YAML configuration loading validated against pydantic schemas.

Example
-------
>>> from moevo.config.loader import load_config
>>> from moevo.config.schemas import VariationRunConfig
>>> run = load_config("configs/zdt5_bit_flip.yaml", VariationRunConfig)
>>> run.mutation.binary_mutation_probability
0.01
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Type, TypeVar, Union

import yaml
from pydantic import BaseModel, ValidationError

__all__ = ["ConfigError", "load_config", "save_config"]

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


class ConfigError(Exception):
    """Raised when a configuration file cannot be read or validated."""

    pass


def _resolve_config_path(file_path: Union[str, Path], project_root: Optional[Path] = None) -> Path:
    """Resolve ``file_path`` as absolute, then project-relative, then cwd-relative."""

    path = Path(file_path)
    if path.is_absolute() and path.exists():
        return path

    if project_root is None:
        project_root = Path(__file__).resolve().parents[3]

    resolved = project_root / path
    if resolved.exists():
        return resolved

    if path.exists():
        return path.resolve()

    raise FileNotFoundError(f"Config file not found: {file_path}")


def load_config(
    file_path: Union[str, Path],
    schema: Type[T],
    *,
    project_root: Optional[Path] = None,
    strict: bool = True,
) -> T:
    """Load a YAML file and validate it against ``schema``.

    Parameters
    ----------
    file_path : str or Path
        Location of the YAML document.
    schema : Type[BaseModel]
        Pydantic model used for validation.
    project_root : Path, optional
        Base directory for relative paths.
    strict : bool, default=True
        When ``False`` failures are logged and ``schema()`` is returned.

    Raises
    ------
    ConfigError
        Missing file, invalid YAML, empty document or validation failure
        (only when ``strict`` is true).
    """

    try:
        resolved_path = _resolve_config_path(file_path, project_root)
        logger.debug("Loading config from: %s", resolved_path)
        with open(resolved_path, "r", encoding="utf-8") as handle:
            data = yaml.safe_load(handle)

        if data is None:
            message = f"Empty configuration file: {file_path}"
            if strict:
                raise ConfigError(message)
            logger.warning("%s, using defaults", message)
            return schema()

        try:
            config = schema.model_validate(data)
        except ValidationError as exc:
            message = f"Configuration validation failed for {file_path}:\n{exc}"
            if strict:
                raise ConfigError(message) from exc
            logger.warning(message)
            return schema()
        logger.info("Loaded config: %s", resolved_path.name)
        return config

    except FileNotFoundError as exc:
        if strict:
            raise ConfigError(f"Configuration file not found: {file_path}") from exc
        logger.warning("Config file not found: %s, using defaults", file_path)
        return schema()
    except yaml.YAMLError as exc:
        message = f"Invalid YAML syntax in {file_path}: {exc}"
        if strict:
            raise ConfigError(message) from exc
        logger.warning(message)
        return schema()


def save_config(
    config: BaseModel, file_path: Union[str, Path], *, project_root: Optional[Path] = None
) -> Path:
    """Write ``config`` as YAML using field aliases; return the absolute path."""

    path = Path(file_path)
    if not path.is_absolute():
        if project_root is None:
            project_root = Path(__file__).resolve().parents[3]
        path = project_root / path

    path.parent.mkdir(parents=True, exist_ok=True)
    data = config.model_dump(mode="json", by_alias=True, exclude_none=True)
    with open(path, "w", encoding="utf-8") as handle:
        yaml.safe_dump(data, handle, default_flow_style=False, sort_keys=False, indent=2)

    logger.info("Saved configuration to: %s", path)
    return path
