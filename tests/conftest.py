"""
Test Configuration and Fixtures
================================

Shared pytest fixtures for the fibbench test suite.

Usage:
    pytest tests/                    # Run all tests
    pytest tests/ -v                 # Verbose output
    pytest tests/ -k "core"          # Run only core tests
    pytest tests/ --quick            # Skip slow tests
"""

import pytest
from pathlib import Path
from typing import Dict

import sys
sys.path.insert(0, str(Path(__file__).parent.parent))


# =============================================================================
# Custom Markers
# =============================================================================

def pytest_configure(config):
    """Register custom markers"""
    config.addinivalue_line("markers", "slow: marks tests as slow")
    config.addinivalue_line("markers", "integration: marks integration tests")


def pytest_addoption(parser):
    """Add custom command line options"""
    parser.addoption(
        "--quick",
        action="store_true",
        default=False,
        help="Skip slow tests",
    )


def pytest_collection_modifyitems(config, items):
    """Skip slow tests if --quick is specified"""
    if config.getoption("--quick"):
        skip_slow = pytest.mark.skip(reason="Skipped with --quick")
        for item in items:
            if "slow" in item.keywords:
                item.add_marker(skip_slow)


# =============================================================================
# Dataset Fixtures
# =============================================================================

COMPLEXITY_CSV = """n,iterative_ns,matrix_ns
10,120,450
20,210,520
30,305,560
"""

BINET_CSV = """n,exact,binet,abs_error,rel_error
0,0,0.0,0.0,0.0
1,1,1.0,0.0,0.0
2,1,1.0000000000000002,0.0,0.0
71,308061521170129,308061521170130.0,1.0,3.2e-15
72,498454011879264,498454011879265.1,1.0,2.0e-15
"""

GOLDEN_CSV = """n,ratio,error_from_phi
1,1.0,0.6180339887498949
2,2.0,0.3819660112501051
3,1.5,0.1180339887498949
50,1.618033988749895,1.2345e-20
"""


@pytest.fixture
def dataset_texts() -> Dict[str, str]:
    return {
        "complexity_comparison.csv": COMPLEXITY_CSV,
        "binet_accuracy.csv": BINET_CSV,
        "golden_ratio_convergence.csv": GOLDEN_CSV,
    }


@pytest.fixture
def data_dir(tmp_path, dataset_texts) -> Path:
    """Directory holding all three report datasets."""
    directory = tmp_path / "results"
    directory.mkdir()
    for filename, text in dataset_texts.items():
        (directory / filename).write_text(text, encoding="utf-8")
    return directory


@pytest.fixture
def partial_data_dir(data_dir) -> Path:
    """Report datasets with the golden ratio file missing."""
    (data_dir / "golden_ratio_convergence.csv").unlink()
    return data_dir


class FakeTimer:
    """Deterministic stand-in for time.perf_counter, advancing ``step`` per call."""

    def __init__(self, step: float = 0.001):
        self.now = 0.0
        self.step = step

    def __call__(self) -> float:
        self.now += self.step
        return self.now


@pytest.fixture
def fake_timer() -> FakeTimer:
    return FakeTimer()
