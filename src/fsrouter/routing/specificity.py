"""Specificity ordering for parameterized route patterns.

The router tries parameterized patterns in this order, so a URL always
lands on the pattern that commits to the most literal text::

    /blog/archive/[id]     more static segments first
    /blog/[id]/comments    same counts: longer literal base first
    /blog/[id]
    /[lang]/raw            no literal base, still one static segment
    /blog/[...rest]        catch-all after an equally sized dynamic
    /blog/[id]/[page]      fewer parameters first
    /[fallback]
    /                      root always last

A catch-all can take every URL of a longer pattern tried after it
(``/blog/[...rest]`` before ``/blog/[id]/[page]``). ``build_route_table``
reports such routes with a ``RouteShadowed`` event.
"""

from collections.abc import Iterable
from functools import cmp_to_key

from fsrouter.routing.segment import RoutePattern


def compare_patterns(a: RoutePattern, b: RoutePattern) -> int:
    """Return negative if *a* should be tried before *b*, positive if after, 0 on a tie."""
    if a.is_root or b.is_root:
        return int(a.is_root) - int(b.is_root)

    if a.static_count != b.static_count:
        return b.static_count - a.static_count

    # Catch-alls count as parameters here so /blog/[id] and /blog/[...rest]
    # tie and fall through to the catch-all rule.
    if a.param_count != b.param_count:
        return a.param_count - b.param_count

    if a.has_catch_all != b.has_catch_all:
        return 1 if a.has_catch_all else -1

    # Same shape: /blog/[id] (base "blog") beats /[a]/raw (no base)
    if a.base_length != b.base_length:
        return b.base_length - a.base_length

    return b.raw_length - a.raw_length


def sort_patterns(patterns: Iterable[RoutePattern]) -> list[RoutePattern]:
    """Sort patterns most specific first.

    The sort is stable, so patterns that compare equal keep their input
    (discovery) order.
    """
    return sorted(patterns, key=cmp_to_key(compare_patterns))
