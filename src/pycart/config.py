"""Cart configuration for pycart."""

from __future__ import annotations

import dataclasses
import decimal
import os
from decimal import Decimal
from typing import Any

from pycart._money import ROUNDING_MODES, format_amount, quantize
from pycart.exceptions import CartConfigError


@dataclasses.dataclass(frozen=True)
class CartConfig:
    """Cart configuration.

    Parameters
    ----------
    currency : str
        ISO 4217 code of the single currency the cart is priced in.
    currency_symbol : str
        Symbol used by :meth:`format_price`.
    minor_unit_places : int
        Number of fractional digits of the currency's minor unit.
        Totals are rounded to this many places.
    rounding : str
        Name of a :mod:`decimal` rounding mode. Defaults to standard
        half-up rounding.
    """

    currency: str = "USD"
    currency_symbol: str = "$"
    minor_unit_places: int = 2
    rounding: str = decimal.ROUND_HALF_UP

    def __post_init__(self) -> None:
        if not self.currency.strip():
            raise CartConfigError("currency must be non-empty")
        if self.minor_unit_places < 0:
            raise CartConfigError(f"minor_unit_places must be >= 0, got {self.minor_unit_places}")
        if self.rounding not in ROUNDING_MODES:
            raise CartConfigError(f"Unknown rounding mode: {self.rounding!r}")

    def round_price(self, amount: Decimal) -> Decimal:
        """Round *amount* to the currency's minor unit."""
        return quantize(amount, self.minor_unit_places, self.rounding)

    def format_price(self, amount: Decimal) -> str:
        """Render *amount* for display, e.g. ``$24.99``."""
        return format_amount(
            amount,
            symbol=self.currency_symbol,
            places=self.minor_unit_places,
            rounding=self.rounding,
        )

    @classmethod
    def from_env(cls, **overrides: Any) -> CartConfig:
        """Create configuration from environment variables.

        Reads optional ``PYCART_*`` variables. Explicit keyword arguments
        override environment values.

        Parameters
        ----------
        **overrides
            Explicit field values that take precedence over env vars.

        Returns
        -------
        CartConfig
            Populated configuration.
        """
        env = os.environ

        _ENV_CONFIG_MAP = {
            "PYCART_CURRENCY": "currency",
            "PYCART_CURRENCY_SYMBOL": "currency_symbol",
            "PYCART_ROUNDING": "rounding",
        }
        config_kwargs: dict[str, Any] = {}
        for env_key, field_name in _ENV_CONFIG_MAP.items():
            val = env.get(env_key)
            if val is not None:
                config_kwargs[field_name] = val.strip()

        # minor_unit_places is numeric, handle separately
        places_env = env.get("PYCART_MINOR_UNIT_PLACES")
        if places_env is not None and "minor_unit_places" not in overrides:
            try:
                config_kwargs["minor_unit_places"] = int(places_env)
            except ValueError as exc:
                raise CartConfigError(f"PYCART_MINOR_UNIT_PLACES must be an integer, got {places_env!r}") from exc

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
