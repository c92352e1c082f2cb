"""JSON reading and writing for config files and report output."""

import dataclasses
import json
import logging
from pathlib import Path
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

T = TypeVar('T', bound=BaseModel)
logger = logging.getLogger('league_analyzer.utils')


def load_json(path: Path | str, schema: type[T] | None = None) -> Any | T:
    """
    Read a JSON document, optionally validating it into a pydantic model.

    Both a syntax error and a schema mismatch surface as ValueError naming
    the file, so callers only need one except clause for a bad config.

    Raises:
        FileNotFoundError: No file at path
        ValueError: Unparseable JSON, or data that fails schema validation
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f'No JSON file at {path}')

    text = path.read_text(encoding='utf-8')
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        logger.error(f'{path}: bad JSON at line {e.lineno} col {e.colno} ({e.msg})')
        raise ValueError(f'{path} is not valid JSON (line {e.lineno}, col {e.colno}): {e.msg}') from e

    if schema is None:
        return data

    try:
        return schema.model_validate(data)
    except ValidationError as e:
        logger.error(f'{path} does not match {schema.__name__}: {e.error_count()} error(s)')
        raise ValueError(f'{path} does not match {schema.__name__}:\n{e}') from e


def to_jsonable(data: Any) -> Any:
    """Convert Pydantic models and dataclasses (recursively) into plain JSON data."""
    if isinstance(data, BaseModel):
        return data.model_dump()
    if dataclasses.is_dataclass(data) and not isinstance(data, type):
        return {f.name: to_jsonable(getattr(data, f.name)) for f in dataclasses.fields(data)}
    if isinstance(data, dict):
        return {str(k): to_jsonable(v) for k, v in data.items()}
    if isinstance(data, (list, tuple)):
        return [to_jsonable(v) for v in data]
    return data


def save_json(path: Path | str, data: Any, indent: int = 2) -> Path:
    """
    Write models, dataclasses or plain data as indented UTF-8 JSON.

    Missing parent directories are created. Returns the written path.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(to_jsonable(data), f, indent=indent, ensure_ascii=False)
        f.write('\n')
    logger.info(f'Wrote {path}')
    return path
