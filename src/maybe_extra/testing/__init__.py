"""Testing support – Hypothesis strategies for property tests over options.

Importing this package does not require hypothesis; drawing a strategy does.
"""

from maybe_extra.testing.strategies import option_list_strategy, option_strategy

__all__ = ["option_list_strategy", "option_strategy"]
