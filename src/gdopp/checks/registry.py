"""Registry of available ADV quality checks."""

import inspect
from collections.abc import Callable, Mapping
from enum import Enum
from types import MappingProxyType
from typing import Any, Final

from ..exceptions import UnknownCheckError
from .correlation import beam_correlation_check
from .signal import signal_noise_check
from .turbulence import frozen_turbulence_check

CheckFunction = Callable[..., bool]


class AdvCheck(str, Enum):
    """Identifiers of the registered checks, in registry order."""

    SIGNAL_NOISE = "signal.noise_check_adv"
    BEAM_CORRELATION = "beam.correlation_check_adv"
    FROZEN_TURBULENCE = "frozen.turb_check_adv"

    def __str__(self) -> str:
        return self.value


CHECK_REGISTRY: Final[Mapping[AdvCheck, CheckFunction]] = MappingProxyType(
    {
        AdvCheck.SIGNAL_NOISE: signal_noise_check,
        AdvCheck.BEAM_CORRELATION: beam_correlation_check,
        AdvCheck.FROZEN_TURBULENCE: frozen_turbulence_check,
    }
)


def get_adv_checks() -> list[str]:
    """Return the names of all registered checks, in registry order."""
    return [check.value for check in CHECK_REGISTRY]


def resolve_check(name: str | AdvCheck) -> CheckFunction:
    """Look up the check function registered under ``name``.

    Raises:
        UnknownCheckError: If ``name`` is not a registered check
    """
    try:
        key = AdvCheck(name)
    except ValueError as e:
        raise UnknownCheckError(str(name), get_adv_checks()) from e
    return CHECK_REGISTRY[key]


def select_parameters(check: CheckFunction, params: Mapping[str, Any]) -> dict[str, Any]:
    """Pick the entries of ``params`` that ``check`` declares.

    The first parameter of a check is the chunk and is never selected.
    """
    parameters = list(inspect.signature(check).parameters.values())[1:]
    if any(p.kind is inspect.Parameter.VAR_KEYWORD for p in parameters):
        return dict(params)
    accepted = {
        p.name
        for p in parameters
        if p.kind
        in (inspect.Parameter.POSITIONAL_OR_KEYWORD, inspect.Parameter.KEYWORD_ONLY)
    }
    return {key: value for key, value in params.items() if key in accepted}
