"""restalign - REST dependency alignment configuration."""

__version__ = "0.1.0"

from .constraints import Constraint, construct_constraints
from .errors import ConfigurationError
from .headers import parse_headers
from .state import RestState, initialise
from .translator import TranslatorSettings

__all__ = [
    "ConfigurationError",
    "Constraint",
    "RestState",
    "TranslatorSettings",
    "__version__",
    "construct_constraints",
    "initialise",
    "parse_headers",
]
