"""Resolution of access decisions against a permission snapshot.

Both resolvers walk the namespace from the most specific name to the least
specific one. The global resolver falls back to the configured default; the
role resolver reports no opinion (None) when no rule names the identity.
"""

from typing import Mapping, Optional, Sequence, Tuple

from ..entities.permission import RoleRule, join_segments


def resolve_global(
    segments: Sequence[str],
    global_index: Mapping[str, bool],
    default: bool,
    depth: Optional[int] = None,
    separator: str = "."
) -> bool:
    """Nearest enclosing global rule wins.
    
    A rule on ``A`` applies to ``A.B`` and ``A.B.C`` unless a rule on a more
    specific name exists.
    
    Args:
        segments: Resource identifier segments
        global_index: Resource name to allow/deny
        default: Answer when no enclosing name has a rule
        depth: Number of leading segments to start from (defaults to all)
        separator: Segment separator used to rebuild names
        
    Returns:
        The decision of the nearest configured ancestor, or ``default``
    """
    if depth is None:
        depth = len(segments)
    
    while depth > 0:
        found = global_index.get(join_segments(segments, depth, separator))
        if found is not None:
            return found
        depth -= 1
    
    return default


def resolve_role(
    segments: Sequence[str],
    role_index: Mapping[str, Tuple[RoleRule, ...]],
    identity_name: str,
    separator: str = "."
) -> Optional[bool]:
    """Find the most specific role rule naming the identity.
    
    Within one name the first matching rule wins. A match at any level, however
    general, outranks the global answer.
    
    Returns:
        The matching rule's decision, or None when no level names the identity
    """
    for depth in range(len(segments), 0, -1):
        rules = role_index.get(join_segments(segments, depth, separator))
        if not rules:
            continue
        for rule in rules:
            if rule.role_id == identity_name:
                return rule.is_allowed
    return None


def resolve_access(
    segments: Sequence[str],
    global_index: Mapping[str, bool],
    role_index: Mapping[str, Tuple[RoleRule, ...]],
    identity_name: str,
    default: bool,
    separator: str = "."
) -> bool:
    """Global answer, overridden by a role rule when one names the identity."""
    is_allowed = resolve_global(segments, global_index, default, separator=separator)
    role_decision = resolve_role(segments, role_index, identity_name, separator)
    if role_decision is not None:
        is_allowed = role_decision
    return is_allowed
