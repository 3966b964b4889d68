"""Pure combinators over ``Option`` — public re-export surface.

Modules:
  presence.py     — is_some, is_nothing, join, filter_, to_maybe, guarded
  extraction.py   — unwrap, unpack, with_default, with_default_lazy
  alternatives.py — or_, or_else, or_list, or_lazy, or_else_lazy, or_list_lazy, one_of
  sequences.py    — values, combine, traverse and their tuple variants
  conversions.py  — to_list, to_array, cons
  applicative.py  — and_map, next_, prev, and_then2..4, map2..4

Names that would shadow builtins or keywords carry a trailing underscore
(``or_``, ``filter_``, ``next_``), as in :mod:`operator`.
"""

from maybe_extra.combinators.alternatives import (
    one_of,
    or_,
    or_else,
    or_else_lazy,
    or_lazy,
    or_list,
    or_list_lazy,
)
from maybe_extra.combinators.applicative import (
    and_map,
    and_then2,
    and_then3,
    and_then4,
    map2,
    map3,
    map4,
    next_,
    prev,
)
from maybe_extra.combinators.conversions import cons, to_array, to_list
from maybe_extra.combinators.extraction import unpack, unwrap, with_default, with_default_lazy
from maybe_extra.combinators.presence import filter_, guarded, is_nothing, is_some, join, to_maybe
from maybe_extra.combinators.sequences import (
    combine,
    combine_array,
    combine_both,
    combine_first,
    combine_map,
    combine_map_array,
    combine_second,
    filter_values,
    foldr_values,
    traverse,
    traverse_array,
    values,
)

__all__ = [
    "and_map",
    "and_then2",
    "and_then3",
    "and_then4",
    "combine",
    "combine_array",
    "combine_both",
    "combine_first",
    "combine_map",
    "combine_map_array",
    "combine_second",
    "cons",
    "filter_",
    "filter_values",
    "foldr_values",
    "guarded",
    "is_nothing",
    "is_some",
    "join",
    "map2",
    "map3",
    "map4",
    "next_",
    "one_of",
    "or_",
    "or_else",
    "or_else_lazy",
    "or_lazy",
    "or_list",
    "or_list_lazy",
    "prev",
    "to_array",
    "to_list",
    "to_maybe",
    "traverse",
    "traverse_array",
    "unpack",
    "unwrap",
    "values",
    "with_default",
    "with_default_lazy",
]
