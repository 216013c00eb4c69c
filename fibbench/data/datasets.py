"""
Dataset Loading

Reads the report CSV files from a data directory. Each load produces a
``DatasetResult``; a missing or unreadable file is reported in the result
and logged, never raised, so one bad file cannot take down the others.
"""
import asyncio
import logging
from pathlib import Path
from typing import Dict, Iterable, Optional, Union

from .csv_parser import parse_csv
from .models import DATASETS, DatasetResult

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def dataset_path(name: str, data_dir: PathLike) -> Path:
    """Resolve the CSV path of a catalogued dataset."""
    if name not in DATASETS:
        raise KeyError(f"Unknown dataset: {name}")
    return Path(data_dir) / DATASETS[name].filename


def load_dataset(name: str, data_dir: PathLike) -> DatasetResult:
    """Read and parse one dataset, capturing I/O failures in the result."""
    path = dataset_path(name, data_dir)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Failed to load %s data from %s: %s", name, path, e)
        return DatasetResult(name=name, error=str(e))

    table = parse_csv(text)
    logger.debug("Loaded %s: %d rows from %s", name, len(table), path)
    return DatasetResult(name=name, table=table)


async def load_dataset_async(name: str, data_dir: PathLike) -> DatasetResult:
    """``load_dataset`` off the event loop thread."""
    return await asyncio.to_thread(load_dataset, name, data_dir)


async def load_datasets(
    data_dir: PathLike,
    names: Optional[Iterable[str]] = None,
) -> Dict[str, DatasetResult]:
    """
    Load several datasets concurrently.

    The loads are independent: there is no ordering between them and a
    failure of one is returned alongside the successes of the others.
    """
    names = list(names) if names is not None else list(DATASETS)
    results = await asyncio.gather(
        *(load_dataset_async(name, data_dir) for name in names)
    )
    return {result.name: result for result in results}


def load_datasets_sync(
    data_dir: PathLike,
    names: Optional[Iterable[str]] = None,
) -> Dict[str, DatasetResult]:
    """Blocking wrapper around ``load_datasets`` for CLI use."""
    return asyncio.run(load_datasets(data_dir, names))
