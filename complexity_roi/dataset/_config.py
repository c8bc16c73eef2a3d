"""Configuration for synthetic dataset generation."""

from __future__ import annotations

from dataclasses import dataclass

from complexity_roi.exceptions import ConfigurationError

# ---------------------------------------------------------------------------
# Naming constants
# ---------------------------------------------------------------------------

# Category lookup order matters: the first key found in a base file name wins.
NAME_TEMPLATES: dict[str, tuple[str, ...]] = {
    "auth": (
        "auth-service",
        "authentication",
        "auth-middleware",
        "auth-provider",
        "oauth-client",
        "login-handler",
        "session-manager",
    ),
    "api": (
        "api-client",
        "api-controller",
        "rest-handler",
        "graphql-client",
        "endpoint-manager",
        "service-gateway",
    ),
    "data": (
        "data-processor",
        "data-transformer",
        "query-builder",
        "data-validator",
        "db-connector",
        "data-aggregator",
        "data-formatter",
    ),
    "ui": (
        "ui-components",
        "theme-provider",
        "layout-manager",
        "responsive-grid",
        "animation-controller",
        "dashboard-widgets",
    ),
    "utils": (
        "utility-helpers",
        "string-parser",
        "date-formatter",
        "logger",
        "error-handler",
        "config-manager",
        "cache-service",
    ),
    "business": (
        "payment-processor",
        "invoice-generator",
        "tax-calculator",
        "subscription-manager",
        "pricing-engine",
    ),
    "security": (
        "security-middleware",
        "encryption-service",
        "permission-handler",
        "token-validator",
        "csrf-protection",
    ),
}

DEFAULT_CATEGORY = "utils"

# Extra keywords routing a file name to the business category
BUSINESS_KEYWORDS: tuple[str, ...] = ("payment", "invoice")

FILE_EXTENSIONS: tuple[str, ...] = (".js", ".ts", ".jsx", ".tsx", ".vue")


# ---------------------------------------------------------------------------
# Frozen dataclass configs
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ChurnTier:
    """Inclusive churn range for files above a complexity floor.

    Parameters
    ----------
    min_complexity : float
        Tier applies when complexity is strictly greater than this value.
    low : int
        Smallest churn value drawn.
    high : int
        Largest churn value drawn.
    """

    min_complexity: float
    low: int
    high: int


@dataclass(frozen=True)
class GeneratorConfig:
    """Immutable configuration for :func:`generate_dataset`.

    Parameters
    ----------
    variations_per_base : int
        Number of randomised variations emitted per base record.
    complexity_noise : float
        Half-width of the uniform complexity noise, as a fraction of the
        base complexity.
    refactor_time_noise : float
        Half-width of the uniform refactor-time noise, as a fraction of
        the base refactor time.
    anomaly_probability : float
        Probability that a variation takes the anomaly branch, which
        overrides the noisy complexity and refactor time.
    anomaly_split : float
        Probability, once in the anomaly branch, of attempting the
        complex-but-cheap case (only applies above ``anomaly_pivot``).
    anomaly_pivot : float
        Base complexity separating complex-but-cheap from
        simple-but-expensive anomalies.
    complex_anomaly_factors : tuple[float, float]
        (complexity, time) multipliers for complex-but-cheap anomalies.
    simple_anomaly_factors : tuple[float, float]
        (complexity, time) multipliers for simple-but-expensive anomalies.
    complexity_bounds : tuple[float, float]
        Final clamp applied to varied complexity.
    lines_per_complexity : float
        Lines of code per point of base complexity.
    lines_noise : float
        Half-width of the uniform lines-of-code noise, as a fraction.
    min_lines_of_code : int
        Floor applied to generated lines of code.
    year : int
        Year of the synthetic ``last_modified`` dates.
    max_month : int
        Months are drawn uniformly from ``1..max_month``.
    max_day : int
        Days are drawn uniformly from ``1..max_day``.
    churn_tiers : tuple[ChurnTier, ...]
        Tiers checked in order against the varied complexity.
    default_churn : tuple[int, int]
        Churn range when no tier matches.
    outlier_probability : float
        Probability that churn is overridden by an outlier range.
    outlier_split : float
        Probability, for simple files, of taking the frequent-change
        outlier.
    frequent_change_max_complexity : float
        Files below this complexity may become frequent-change outliers.
    frequent_change_churn : tuple[int, int]
        Churn range for frequent-change outliers.
    stable_complex_min_complexity : float
        Files above this complexity may become stable-but-complex outliers.
    stable_complex_churn : tuple[int, int]
        Churn range for stable-but-complex outliers.
    """

    variations_per_base: int = 5
    complexity_noise: float = 0.10
    refactor_time_noise: float = 0.15
    anomaly_probability: float = 0.05
    anomaly_split: float = 0.5
    anomaly_pivot: float = 50.0
    complex_anomaly_factors: tuple[float, float] = (1.1, 0.6)
    simple_anomaly_factors: tuple[float, float] = (0.9, 1.8)
    complexity_bounds: tuple[float, float] = (1.0, 100.0)
    lines_per_complexity: float = 6.0
    lines_noise: float = 0.20
    min_lines_of_code: int = 20
    year: int = 2023
    max_month: int = 10
    max_day: int = 28
    churn_tiers: tuple[ChurnTier, ...] = (
        ChurnTier(min_complexity=70.0, low=5, high=20),
        ChurnTier(min_complexity=40.0, low=3, high=15),
    )
    default_churn: tuple[int, int] = (1, 10)
    outlier_probability: float = 0.10
    outlier_split: float = 0.5
    frequent_change_max_complexity: float = 30.0
    frequent_change_churn: tuple[int, int] = (10, 25)
    stable_complex_min_complexity: float = 70.0
    stable_complex_churn: tuple[int, int] = (1, 5)

    def __post_init__(self) -> None:
        if self.variations_per_base < 0:
            raise ConfigurationError(
                f"variations_per_base must be >= 0, got {self.variations_per_base}"
            )
        for name in (
            "anomaly_probability",
            "anomaly_split",
            "outlier_probability",
            "outlier_split",
        ):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ConfigurationError(f"{name} must be in [0, 1], got {value}")
        for name in ("complexity_noise", "refactor_time_noise", "lines_noise"):
            value = getattr(self, name)
            if not 0.0 <= value < 1.0:
                raise ConfigurationError(f"{name} must be in [0, 1), got {value}")

        low, high = self.complexity_bounds
        if not 0.0 <= low <= high <= 100.0:
            raise ConfigurationError(
                f"complexity_bounds must satisfy 0 <= low <= high <= 100, "
                f"got {self.complexity_bounds}"
            )
        if self.min_lines_of_code < 1:
            raise ConfigurationError(
                f"min_lines_of_code must be >= 1, got {self.min_lines_of_code}"
            )
        if not 1 <= self.max_month <= 12:
            raise ConfigurationError(f"max_month must be in [1, 12], got {self.max_month}")
        if not 1 <= self.max_day <= 28:
            raise ConfigurationError(f"max_day must be in [1, 28], got {self.max_day}")

        ranges = [
            ("default_churn", self.default_churn),
            ("frequent_change_churn", self.frequent_change_churn),
            ("stable_complex_churn", self.stable_complex_churn),
        ]
        ranges.extend(
            (f"churn_tiers[{i}]", (tier.low, tier.high))
            for i, tier in enumerate(self.churn_tiers)
        )
        for name, (lo, hi) in ranges:
            if not 1 <= lo <= hi:
                raise ConfigurationError(
                    f"{name} must satisfy 1 <= low <= high, got ({lo}, {hi})"
                )

    # -- factory methods -----------------------------------------------------

    @classmethod
    def for_reference(cls) -> GeneratorConfig:
        """Reference dataset: 5 variations, 5% anomalies, 10% churn outliers."""
        return cls()

    @classmethod
    def for_stable(cls, variations_per_base: int = 5) -> GeneratorConfig:
        """Noise only: no anomaly branch and no churn outliers."""
        return cls(
            variations_per_base=variations_per_base,
            anomaly_probability=0.0,
            outlier_probability=0.0,
        )
