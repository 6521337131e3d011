"""Run a selection of quality checks over one ADV chunk."""

import logging
from collections.abc import Sequence
from typing import Any

from ..exceptions import (
    CheckExecutionError,
    CheckParameterError,
    InvalidArgumentError,
)
from ..util import ChunkLike
from .base import CheckReport
from .registry import AdvCheck, get_adv_checks, resolve_check, select_parameters

logger = logging.getLogger(__name__)

Tests = str | AdvCheck | Sequence[str | AdvCheck] | None


def resolve_test_names(tests: Tests) -> list[str]:
    """Expand ``tests`` into the ordered list of check names to run.

    ``"all"`` (alone or as the first entry) expands to the full registry.

    Raises:
        InvalidArgumentError: If ``tests`` is None or empty
    """
    if tests is None:
        names: list[Any] = []
    elif isinstance(tests, str):
        names = [tests]
    else:
        names = list(tests)

    if not names:
        raise InvalidArgumentError(
            'cannot perform check without any tests specified. use "all" for all tests'
        )
    if names[0] == "all":
        return get_adv_checks()
    return [str(name) if isinstance(name, AdvCheck) else name for name in names]


def run_checks(chunk: ChunkLike, tests: Tests = "all", **params: Any) -> CheckReport:
    """Run the requested checks over a chunk and collect their results.

    Each keyword parameter is passed to every requested check that declares
    it; checks ignore parameters they do not declare.

    Args:
        chunk: One burst of ADV data
        tests: ``"all"`` or a sequence of check names
        **params: Check parameters such as ``signal_threshold``

    Returns:
        CheckReport with one result per requested check, in request order

    Raises:
        InvalidArgumentError: If no tests are given
        UnknownCheckError: If a name is not registered
        CheckParameterError: If a check rejects a parameter value
        CheckExecutionError: If a check raises any other error
    """
    names = resolve_test_names(tests)
    valid_names = get_adv_checks()
    report = CheckReport()
    used: set[str] = set()

    for name in names:
        check = resolve_check(name)
        kwargs = select_parameters(check, params)
        used.update(kwargs)
        try:
            failed = check(chunk, **kwargs)
        except InvalidArgumentError as e:
            raise CheckParameterError(str(name), valid_names) from e
        except Exception as e:
            raise CheckExecutionError(str(name), valid_names) from e
        report.add_result(name, failed)

    unused = sorted(set(params) - used)
    if unused:
        logger.warning(f"Parameters not used by any requested check: {unused}")

    return report


def check_adv(
    chunk: ChunkLike, tests: Tests = "all", verbose: bool = False, **params: Any
) -> bool:
    """Perform user-specified quality checks on one ADV chunk.

    Args:
        chunk: One burst of ADV data, e.g. one ``window.idx`` group
        tests: ``"all"`` or a sequence of check names from
            :func:`get_adv_checks`
        verbose: Print one ``passed``/``failed`` line per check
        **params: Check parameters such as ``signal_threshold`` or
            ``correlation_threshold``

    Returns:
        True if any requested check failed

    Examples:
    >>> check_adv(chunk, tests=["signal.noise_check_adv", "frozen.turb_check_adv"], verbose=True)
    signal.noise_check_adv...passed
    frozen.turb_check_adv....failed
    True
    >>> check_adv(chunk, tests="beam.correlation_check_adv", correlation_threshold=55)
    False
    """
    report = run_checks(chunk, tests, **params)
    if verbose:
        print(report.report())
    return report.failed
