"""
maybe_extra – convenience combinators over an optional value.

Import path convention::

    from maybe_extra import Some, Nothing, combine, or_lazy
    from maybe_extra.combinators import traverse
    from maybe_extra.unsafe import unwrap_or_fail   # last resort only
"""

from maybe_extra.combinators import (
    and_map,
    and_then2,
    and_then3,
    and_then4,
    combine,
    combine_array,
    combine_both,
    combine_first,
    combine_map,
    combine_map_array,
    combine_second,
    cons,
    filter_,
    filter_values,
    foldr_values,
    guarded,
    is_nothing,
    is_some,
    join,
    map2,
    map3,
    map4,
    next_,
    one_of,
    or_,
    or_else,
    or_else_lazy,
    or_lazy,
    or_list,
    or_list_lazy,
    prev,
    to_array,
    to_list,
    to_maybe,
    traverse,
    traverse_array,
    unpack,
    unwrap,
    values,
    with_default,
    with_default_lazy,
)
from maybe_extra.types import NOTHING, Nothing, Option, Some, from_nullable, to_nullable

__version__ = "0.1.0"
__all__ = [
    "NOTHING",
    "Nothing",
    "Option",
    "Some",
    "__version__",
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
    "from_nullable",
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
    "to_nullable",
    "traverse",
    "traverse_array",
    "unpack",
    "unwrap",
    "values",
    "with_default",
    "with_default_lazy",
]
