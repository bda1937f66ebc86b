"""Two-input stoichiometric reactor with one or two products."""

from __future__ import annotations

import logging
from numbers import Integral
from typing import TYPE_CHECKING, Any

from complex_reactor.exceptions import IndexOutOfRangeError
from complex_reactor.stoichiometry import (
    check_flag,
    check_fraction,
    check_non_negative,
    compute_products,
)

if TYPE_CHECKING:
    from complex_reactor.utils.config import ReactorConfig

logger = logging.getLogger(__name__)


class ComplexReactor:
    """Simplified 1 A + 1 B -> products reactor.

    The limiting reagent is ``min(A, B)`` and ``reacted = limiting * conversion``.
    In single-output mode all reacted mass becomes product R. In two-output
    mode it is divided so that ``R = reacted * split_ratio`` and
    ``S = reacted * (1 - split_ratio)``.

    Every parameter is validated when it is assigned, so ``run_reaction`` has
    no failure modes. A failed setter leaves the previous value in place.

    Example:
        >>> reactor = ComplexReactor(conversion=1.0, two_outputs=True, split_ratio=0.7)
        >>> reactor.set_inputs(1.0, 1.0)
        >>> reactor.run_reaction()
        [0.7, 0.30000000000000004]

    Attributes:
        input_a: Quantity of reagent A.
        input_b: Quantity of reagent B.
        conversion: Fraction (0..1) of the limiting reagent that reacts.
        two_outputs: Whether the reaction yields R and S or only R.
        split_ratio: Fraction (0..1) of reacted mass routed to R.
        last_outputs: Result of the most recent ``run_reaction`` call.
    """

    def __init__(
        self,
        conversion: float = 0.5,
        two_outputs: bool = False,
        split_ratio: float = 0.5,
    ):
        """Initialize reactor.

        Args:
            conversion: Fraction of the limiting reagent that reacts.
            two_outputs: If True, the reaction yields two products (R and S).
            split_ratio: Fraction of reacted mass going to R. Ignored when
                ``two_outputs`` is False.

        Raises:
            InvalidParameterError: If conversion or split_ratio is not in [0, 1].
        """
        self._conversion = check_fraction("conversion", conversion)
        self._split_ratio = check_fraction("split_ratio", split_ratio)
        self._two_outputs = bool(two_outputs)
        self._input_a = 0.0
        self._input_b = 0.0
        self._last_outputs: list[float] = []
        logger.debug(
            f"Initialized {self.__class__.__name__}: conversion={self._conversion}, "
            f"two_outputs={self._two_outputs}, split_ratio={self._split_ratio}"
        )

    # ------------------------------------------------------------------
    # Read-only state
    # ------------------------------------------------------------------

    @property
    def input_a(self) -> float:
        return self._input_a

    @property
    def input_b(self) -> float:
        return self._input_b

    @property
    def conversion(self) -> float:
        return self._conversion

    @property
    def two_outputs(self) -> bool:
        return self._two_outputs

    @property
    def split_ratio(self) -> float:
        return self._split_ratio

    @property
    def last_outputs(self) -> list[float]:
        """Copy of the most recent result (empty before a run or after reset)."""
        return list(self._last_outputs)

    @property
    def num_outputs(self) -> int:
        """Number of products the next run will yield."""
        return 2 if self._two_outputs else 1

    # ------------------------------------------------------------------
    # Setters
    # ------------------------------------------------------------------

    def set_inputs(self, a: float, b: float) -> None:
        """Set reagent quantities.

        Args:
            a: Quantity of A (>= 0).
            b: Quantity of B (>= 0).

        Raises:
            InvalidParameterError: If a or b is negative. Prior inputs are kept.
        """
        a = check_non_negative("input_a", a)
        b = check_non_negative("input_b", b)
        self._input_a = a
        self._input_b = b

    def set_conversion(self, conversion: float) -> None:
        """Set the conversion fraction.

        Raises:
            InvalidParameterError: If the value is outside [0, 1].
        """
        self._conversion = check_fraction("conversion", conversion)

    def set_two_outputs(self, two: bool) -> None:
        """Switch between single-product and two-product mode."""
        self._two_outputs = bool(two)

    def set_split_ratio(self, ratio: float) -> None:
        """Set the fraction of reacted mass routed to R.

        Raises:
            InvalidParameterError: If the value is outside [0, 1].
        """
        self._split_ratio = check_fraction("split_ratio", ratio)

    # ------------------------------------------------------------------
    # Reaction
    # ------------------------------------------------------------------

    def run_reaction(self) -> list[float]:
        """Run the reaction with the current inputs and parameters.

        Inputs are not consumed; calling this twice without changes gives the
        same result.

        Returns:
            ``[R]`` in single-output mode or ``[R, S]`` in two-output mode.
        """
        products = compute_products(
            self._input_a,
            self._input_b,
            self._conversion,
            two_outputs=self._two_outputs,
            split_ratio=self._split_ratio,
        )
        self._last_outputs = [float(p) for p in products]
        logger.debug(
            f"Reaction A={self._input_a}, B={self._input_b} -> {self._last_outputs}",
            extra={"reaction": self._log_fields()},
        )
        return list(self._last_outputs)

    def reset(self) -> None:
        """Zero the inputs and clear the stored result."""
        self._input_a = 0.0
        self._input_b = 0.0
        self._last_outputs.clear()
        logger.debug("Reactor reset", extra={"reaction": self._log_fields()})

    def _log_fields(self) -> dict[str, Any]:
        return {
            "input_a": self._input_a,
            "input_b": self._input_b,
            "conversion": self._conversion,
            "two_outputs": self._two_outputs,
            "split_ratio": self._split_ratio,
            "outputs": list(self._last_outputs),
        }

    def get_last_output(self, index: int) -> float:
        """Get one product from the most recent run.

        Args:
            index: 0 for R, 1 for S.

        Returns:
            Stored product quantity.

        Raises:
            IndexOutOfRangeError: If ``index`` is not an integer or no output
                is stored there.
        """
        if isinstance(index, bool) or not isinstance(index, Integral):
            raise IndexOutOfRangeError(f"output index must be an integer, got {index!r}")
        index = int(index)
        if index < 0 or index >= len(self._last_outputs):
            raise IndexOutOfRangeError(
                f"output index {index} out of range ({len(self._last_outputs)} stored)"
            )
        return self._last_outputs[index]

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        """Serialize parameters and inputs to a dictionary."""
        return {
            "type": self.__class__.__name__,
            "conversion": self._conversion,
            "two_outputs": self._two_outputs,
            "split_ratio": self._split_ratio,
            "input_a": self._input_a,
            "input_b": self._input_b,
        }

    @classmethod
    def from_dict(cls, config: dict[str, Any]) -> ComplexReactor:
        """Build a reactor from ``to_dict()`` output.

        Missing keys fall back to the constructor defaults.

        Raises:
            InvalidParameterError: If any stored value violates its range or
                ``two_outputs`` is not a boolean.
        """
        reactor = cls(
            conversion=config.get("conversion", 0.5),
            two_outputs=check_flag("two_outputs", config.get("two_outputs", False)),
            split_ratio=config.get("split_ratio", 0.5),
        )
        reactor.set_inputs(config.get("input_a", 0.0), config.get("input_b", 0.0))
        return reactor

    @classmethod
    def from_config(cls, config: ReactorConfig) -> ComplexReactor:
        """Build a reactor from a validated :class:`ReactorConfig`."""
        return cls.from_dict(config.model_dump())

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"conversion={self._conversion}, "
            f"two_outputs={self._two_outputs}, "
            f"split_ratio={self._split_ratio})"
        )


__all__ = ["ComplexReactor"]
