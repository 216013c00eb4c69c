"""
Dataset Package

CSV parsing, the dataset catalogue, concurrent loading and generation.
"""
from .csv_parser import CsvRow, CsvTable, iter_rows, parse_csv
from .datasets import dataset_path, load_dataset, load_datasets, load_datasets_sync
from .generator import DataGenerator, GenerationConfig
from .models import (
    DATASETS,
    AccuracyPoint,
    ComplexityPoint,
    DatasetResult,
    DatasetSpec,
    GoldenRatioPoint,
)

__all__ = [
    "DATASETS",
    "AccuracyPoint",
    "ComplexityPoint",
    "CsvRow",
    "CsvTable",
    "DataGenerator",
    "DatasetResult",
    "DatasetSpec",
    "GenerationConfig",
    "GoldenRatioPoint",
    "dataset_path",
    "iter_rows",
    "load_dataset",
    "load_datasets",
    "load_datasets_sync",
    "parse_csv",
]
