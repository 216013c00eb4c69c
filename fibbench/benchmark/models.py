"""
Benchmark Data Models

Dataclasses for timing samples, profiler points, scenarios and summaries.
"""
from __future__ import annotations

from dataclasses import dataclass, field, asdict
from typing import Any, Dict, List, Optional

from fibbench.metrics import speedup_ratio


# =============================================================================
# BenchmarkSample: one A/B timing of the same batch
# =============================================================================

@dataclass
class BenchmarkSample:
    """Mean per-call duration of two batch variants over the same indices."""

    variant_a_ms: float
    variant_b_ms: float
    indices: List[int] = field(default_factory=list)
    iterations: int = 100
    variant_a_label: str = "SIMD"
    variant_b_label: str = "Scalar"
    timestamp: Optional[str] = None

    @property
    def speedup_ratio(self) -> float:
        """variant B time / variant A time."""
        return speedup_ratio(self.variant_b_ms, self.variant_a_ms)

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d["speedup_ratio"] = self.speedup_ratio
        return d


# =============================================================================
# Profiler output
# =============================================================================

@dataclass
class ProfilePoint:
    """Mean time of one method at one index."""

    method: str
    n: int
    iterations: int
    mean_ns: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class MemoryPoint:
    """Peak traced allocation of one call of a method at one index."""

    method: str
    n: int
    peak_bytes: int

    @property
    def peak_kib(self) -> float:
        return self.peak_bytes / 1024

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d["peak_kib"] = self.peak_kib
        return d


@dataclass
class ScalingRow:
    """Iterative vs matrix timing at one index."""

    n: int
    iterative_ns: float
    matrix_ns: float

    @property
    def speedup(self) -> float:
        return speedup_ratio(self.iterative_ns, self.matrix_ns)

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d["speedup"] = self.speedup
        return d


# =============================================================================
# BenchmarkScenario: input configuration
# =============================================================================

@dataclass
class BenchmarkScenario:
    """A batch of indices to compare, repeated ``runs`` times."""

    name: str
    indices: List[int] = field(default_factory=list)
    iterations: int = 100
    runs: int = 1

    def __post_init__(self):
        if not self.indices:
            raise ValueError("A scenario needs at least one index")
        if any(n < 0 for n in self.indices):
            raise ValueError("Scenario indices must be non-negative")
        if self.iterations < 1 or self.runs < 1:
            raise ValueError("'iterations' and 'runs' must be at least 1")

    @property
    def label(self) -> str:
        return f"{self.name} ({len(self.indices)} indices)"


# =============================================================================
# Aggregation
# =============================================================================

@dataclass
class AggregateResult:
    """Mean and spread of the samples collected for one scenario."""

    scenario: str
    num_runs: int

    avg_variant_a_ms: float = 0.0
    avg_variant_b_ms: float = 0.0
    std_variant_a_ms: float = 0.0
    std_variant_b_ms: float = 0.0

    avg_speedup: float = 0.0
    min_speedup: float = 0.0
    max_speedup: float = 0.0


@dataclass
class BenchmarkSummary:
    """Complete benchmark summary with samples, aggregates and profiles."""

    timestamp: str
    duration: float  # seconds

    samples: Dict[str, List[BenchmarkSample]] = field(default_factory=dict)
    aggregates: List[AggregateResult] = field(default_factory=list)
    profile: List[ProfilePoint] = field(default_factory=list)
    memory: List[MemoryPoint] = field(default_factory=list)
    scaling: List[ScalingRow] = field(default_factory=list)

    @property
    def total_samples(self) -> int:
        return sum(len(s) for s in self.samples.values())

    def to_dict(self) -> Dict[str, Any]:
        return {
            "timestamp": self.timestamp,
            "duration": self.duration,
            "total_samples": self.total_samples,
            "aggregates": [asdict(a) for a in self.aggregates],
            "samples": {
                name: [s.to_dict() for s in samples]
                for name, samples in self.samples.items()
            },
            "profile": [p.to_dict() for p in self.profile],
            "memory": [m.to_dict() for m in self.memory],
            "scaling": [r.to_dict() for r in self.scaling],
        }
