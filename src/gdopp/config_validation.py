"""Configuration validation for gdopp defaults and the check registry."""

import inspect
import logging

logger = logging.getLogger(__name__)


def validate_thresholds() -> None:
    """Validate default thresholds at import time.

    Raises:
        GDoppConfigurationError: If a default threshold is out of range
    """
    from gdopp.constants import (
        DEFAULT_CORRELATION_THRESHOLD,
        DEFAULT_SIGNAL_THRESHOLD,
        THRESHOLD_RANGE,
    )
    from gdopp.exceptions import GDoppConfigurationError

    errors = []
    low, high = THRESHOLD_RANGE

    if low >= high:
        errors.append(f"THRESHOLD_RANGE {THRESHOLD_RANGE} is empty")

    for name, value in (
        ("DEFAULT_SIGNAL_THRESHOLD", DEFAULT_SIGNAL_THRESHOLD),
        ("DEFAULT_CORRELATION_THRESHOLD", DEFAULT_CORRELATION_THRESHOLD),
    ):
        if not low <= value <= high:
            errors.append(f"{name} ({value}) must be between {low} and {high}")

    if errors:
        raise GDoppConfigurationError(
            "Invalid threshold configuration detected:\n"
            + "\n".join(f"  - {e}" for e in errors)
        )


def validate_registry() -> None:
    """Validate that every registered check has the shared signature.

    Every entry must be callable and take the chunk as its first parameter;
    any further parameters must have defaults.

    Raises:
        GDoppConfigurationError: If a registry entry is invalid
    """
    from gdopp.checks.registry import CHECK_REGISTRY
    from gdopp.exceptions import GDoppConfigurationError

    errors = []
    for name, check in CHECK_REGISTRY.items():
        if not callable(check):
            errors.append(f"Check '{name.value}' is not callable")
            continue

        parameters = list(inspect.signature(check).parameters.values())
        if not parameters or parameters[0].name != "chunk":
            errors.append(f"Check '{name.value}' must take 'chunk' as first parameter")
            continue

        required = [
            p.name
            for p in parameters[1:]
            if p.default is inspect.Parameter.empty
            and p.kind
            not in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)
        ]
        if required:
            errors.append(
                f"Check '{name.value}' has parameters without defaults: {required}"
            )

    if errors:
        raise GDoppConfigurationError(
            "Invalid check registry:\n" + "\n".join(f"  - {e}" for e in errors)
        )


def validate_all_configs() -> None:
    """Run all configuration validations.

    This function is called at module import to ensure the defaults and
    the check registry are valid before any checks run.

    Raises:
        GDoppConfigurationError: If any configuration validation fails
    """
    validate_thresholds()
    validate_registry()

    logger.debug("All configuration validations passed")


# Run validation at import time
validate_all_configs()
