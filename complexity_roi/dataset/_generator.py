"""Randomised variation of the base records into a full dataset."""

from __future__ import annotations

import logging
from collections.abc import Sequence

import numpy as np

from complexity_roi.dataset._config import (
    BUSINESS_KEYWORDS,
    DEFAULT_CATEGORY,
    FILE_EXTENSIONS,
    NAME_TEMPLATES,
    GeneratorConfig,
)
from complexity_roi.dataset._records import BASE_RECORDS, EDGE_CASE_RECORDS, FileRecord
from complexity_roi.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


def pick_category(file_name: str) -> str:
    """Return the naming category whose keyword appears in *file_name*.

    Keys of :data:`NAME_TEMPLATES` are tried in declaration order against
    the lower-cased name; ``payment`` and ``invoice`` also select
    ``business``.  Falls back to ``utils``.
    """
    lowered = file_name.lower()
    for key in NAME_TEMPLATES:
        if key in lowered:
            return key
        if key == "business" and any(word in lowered for word in BUSINESS_KEYWORDS):
            return key
    return DEFAULT_CATEGORY


def vary_complexity_and_time(
    base_complexity: float,
    base_refactor_time: float,
    rng: np.random.Generator,
    config: GeneratorConfig | None = None,
) -> tuple[float, float, bool]:
    """Draw a varied (complexity, refactor time) pair.

    Parameters
    ----------
    base_complexity : float
        Complexity of the template record.
    base_refactor_time : float
        Refactor time of the template record.
    rng : np.random.Generator
        Random source.
    config : GeneratorConfig or None
        Generator configuration.

    Returns
    -------
    tuple[float, float, bool]
        Complexity clamped to ``config.complexity_bounds`` and refactor
        time, both rounded to one decimal, plus whether an anomaly
        override was applied.
    """
    if config is None:
        config = GeneratorConfig()

    complexity_var = rng.uniform(-config.complexity_noise, config.complexity_noise)
    time_var = rng.uniform(-config.refactor_time_noise, config.refactor_time_noise)
    complexity = base_complexity * (1.0 + complexity_var)
    refactor_time = base_refactor_time * (1.0 + time_var)

    anomalous = False
    if rng.random() < config.anomaly_probability:
        if rng.random() < config.anomaly_split and base_complexity > config.anomaly_pivot:
            c_factor, t_factor = config.complex_anomaly_factors
            complexity = base_complexity * c_factor
            refactor_time = base_refactor_time * t_factor
            anomalous = True
        elif base_complexity < config.anomaly_pivot:
            c_factor, t_factor = config.simple_anomaly_factors
            complexity = base_complexity * c_factor
            refactor_time = base_refactor_time * t_factor
            anomalous = True

    # Single clamp after the anomaly branch: complex anomalies may overshoot.
    low, high = config.complexity_bounds
    complexity = min(max(complexity, low), high)

    return float(round(complexity, 1)), float(round(refactor_time, 1)), anomalous


def draw_churn(
    complexity: float,
    rng: np.random.Generator,
    config: GeneratorConfig | None = None,
) -> tuple[int, bool]:
    """Draw a churn count correlated with *complexity*.

    Returns the churn value and whether an outlier range was used.
    """
    if config is None:
        config = GeneratorConfig()

    low, high = config.default_churn
    for tier in config.churn_tiers:
        if complexity > tier.min_complexity:
            low, high = tier.low, tier.high
            break

    outlier = False
    if rng.random() < config.outlier_probability:
        if (
            complexity < config.frequent_change_max_complexity
            and rng.random() < config.outlier_split
        ):
            low, high = config.frequent_change_churn
            outlier = True
        elif complexity > config.stable_complex_min_complexity:
            low, high = config.stable_complex_churn
            outlier = True

    return int(rng.integers(low, high, endpoint=True)), outlier


def draw_last_modified(
    rng: np.random.Generator,
    config: GeneratorConfig | None = None,
) -> str:
    """Draw a ``YYYY-MM-DD`` date inside the configured window."""
    if config is None:
        config = GeneratorConfig()
    month = int(rng.integers(1, config.max_month, endpoint=True))
    day = int(rng.integers(1, config.max_day, endpoint=True))
    return f"{config.year:04d}-{month:02d}-{day:02d}"


def generate_variation(
    base: FileRecord,
    index: int,
    rng: np.random.Generator,
    config: GeneratorConfig | None = None,
) -> FileRecord:
    """Build the *index*-th variation of a base record.

    The base record picks the naming category and anchors the noise
    ranges; lines of code follow the base (not the varied) complexity
    while churn follows the varied complexity.
    """
    if config is None:
        config = GeneratorConfig()

    templates = NAME_TEMPLATES[pick_category(base.file_name)]
    basename = templates[index % len(templates)]
    extension = FILE_EXTENSIONS[int(rng.integers(len(FILE_EXTENSIONS)))]

    complexity, refactor_time, anomalous = vary_complexity_and_time(
        base.complexity, base.refactor_time_days, rng, config
    )
    if anomalous:
        logger.debug("Anomaly applied to variation %d of %s", index, base.file_name)
    last_modified = draw_last_modified(rng, config)

    lines_base = base.complexity * config.lines_per_complexity
    lines_var = rng.uniform(-config.lines_noise, config.lines_noise) * lines_base
    lines_of_code = max(config.min_lines_of_code, int(round(lines_base + lines_var)))

    churn, outlier = draw_churn(complexity, rng, config)
    if outlier:
        logger.debug("Churn outlier for variation %d of %s", index, base.file_name)

    return FileRecord(
        file_name=f"{basename}{extension}",
        complexity=complexity,
        refactor_time_days=refactor_time,
        lines_of_code=lines_of_code,
        last_modified=last_modified,
        churn=churn,
    )


def expected_dataset_size(
    config: GeneratorConfig | None = None,
    base_records: Sequence[FileRecord] = BASE_RECORDS,
    edge_cases: Sequence[FileRecord] = EDGE_CASE_RECORDS,
) -> int:
    """Number of records :func:`generate_dataset` produces for *config*."""
    if config is None:
        config = GeneratorConfig()
    return len(base_records) * (1 + config.variations_per_base) + len(edge_cases)


def check_base_records(
    base_records: Sequence[FileRecord],
    config: GeneratorConfig | None = None,
) -> None:
    """Reject base records whose varied refactor time could round to 0.

    The smallest reachable time is the base time scaled by the lower
    noise bound, or by the anomaly time factor that applies to the
    record's base complexity.

    Raises
    ------
    ConfigurationError
        Naming the first offending base record.
    """
    if config is None:
        config = GeneratorConfig()
    if config.variations_per_base == 0:
        return
    for base in base_records:
        factor = 1.0 - config.refactor_time_noise
        if config.anomaly_probability > 0.0:
            if base.complexity > config.anomaly_pivot and config.anomaly_split > 0.0:
                factor = min(factor, config.complex_anomaly_factors[1])
            elif base.complexity < config.anomaly_pivot:
                factor = min(factor, config.simple_anomaly_factors[1])
        if round(base.refactor_time_days * factor, 1) <= 0.0:
            raise ConfigurationError(
                f"base record {base.file_name!r}: refactor time "
                f"{base.refactor_time_days} can vary down to 0 days"
            )


def generate_dataset(
    config: GeneratorConfig | None = None,
    *,
    rng: np.random.Generator | None = None,
    seed: int | None = None,
    base_records: Sequence[FileRecord] = BASE_RECORDS,
    edge_cases: Sequence[FileRecord] = EDGE_CASE_RECORDS,
) -> tuple[FileRecord, ...]:
    """Generate the full file-record dataset.

    Base records come first, unchanged, followed by
    ``config.variations_per_base`` variations of each base record in
    base order, followed by the edge-case records verbatim.

    Parameters
    ----------
    config : GeneratorConfig or None
        Generator configuration.  Defaults to ``GeneratorConfig()``.
    rng : np.random.Generator or None
        Random source.  Takes precedence over *seed*.
    seed : int or None
        Seed for a fresh ``np.random.default_rng``.  When both *rng* and
        *seed* are ``None`` the values are non-deterministic.
    base_records : Sequence[FileRecord]
        Template records.
    edge_cases : Sequence[FileRecord]
        Records appended without variation.

    Returns
    -------
    tuple[FileRecord, ...]
        Immutable dataset of ``expected_dataset_size(config)`` records.
    """
    if config is None:
        config = GeneratorConfig()
    check_base_records(base_records, config)
    if rng is None:
        rng = np.random.default_rng(seed)

    records: list[FileRecord] = list(base_records)
    for base in base_records:
        for i in range(config.variations_per_base):
            records.append(generate_variation(base, i, rng, config))
    records.extend(edge_cases)

    logger.debug(
        "Generated %d records from %d base records (%d variations each, %d edge cases)",
        len(records),
        len(base_records),
        config.variations_per_base,
        len(edge_cases),
    )
    return tuple(records)
