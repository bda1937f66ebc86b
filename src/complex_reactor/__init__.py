"""ComplexReactor: limiting-reagent stoichiometric reactor with one or two products."""

from __future__ import annotations

__version__ = "0.1.0"

from complex_reactor.exceptions import (
    ComplexReactorError,
    ConfigurationError,
    IndexOutOfRangeError,
    InvalidParameterError,
)
from complex_reactor.reactor import ComplexReactor
from complex_reactor.stoichiometry import compute_products, reacted_amount, split_products
from complex_reactor.utils.config import AppConfig, ReactorConfig, load_config
from complex_reactor.utils.logging import JSONFormatter, setup_logging

__all__ = [
    # Version
    "__version__",
    # Exceptions
    "ComplexReactorError",
    "ConfigurationError",
    "IndexOutOfRangeError",
    "InvalidParameterError",
    # Reactor
    "ComplexReactor",
    # Stoichiometry
    "compute_products",
    "reacted_amount",
    "split_products",
    # Config
    "AppConfig",
    "ReactorConfig",
    "load_config",
    # Logging
    "JSONFormatter",
    "setup_logging",
]
