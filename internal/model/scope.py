"""Analytical scopes.

A scope is an enum-tagged identifier rather than a free-form string so that
parent/child lookups during deduplication are keyed on typed values.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from .constant import OVERALL_SCOPE_ID
from .post import Post


class ScopeType(str, Enum):
    OVERALL = "overall"
    CLUSTER = "cluster"
    SUBCLUSTER = "subcluster"
    MICROCLUSTER = "microcluster"
    CITY = "city"
    PLATFORM = "platform"


@dataclass(frozen=True)
class Scope:
    type: ScopeType
    id: str

    @classmethod
    def overall(cls) -> "Scope":
        return cls(ScopeType.OVERALL, OVERALL_SCOPE_ID)

    @property
    def is_overall(self) -> bool:
        return self.type == ScopeType.OVERALL

    @property
    def key(self) -> str:
        """Public alert id: "overall" or "{type}:{id}"."""
        if self.is_overall:
            return OVERALL_SCOPE_ID
        return f"{self.type.value}:{self.id}"

    @property
    def identity_key(self) -> str:
        """Hash input for stable/instance ids; always "{type}:{id}"."""
        return f"{self.type.value}:{self.id}"

    def __str__(self) -> str:
        return self.key


@dataclass(frozen=True)
class ScopeSpec:
    """How to group posts into scopes of one type and find their parent."""

    type: ScopeType
    key: Callable[[Post], Optional[str]]
    parent_type: Optional[ScopeType] = None
    parent_key: Optional[Callable[[Post], Optional[str]]] = None

    def parent_of(self, posts: list[Post]) -> Optional[Scope]:
        """Parent scope taken from the group's first post."""
        if self.parent_type is None or self.parent_key is None or not posts:
            return None
        parent_id = self.parent_key(posts[0])
        if not parent_id:
            return None
        return Scope(self.parent_type, parent_id)


# Evaluation order of grouped scopes; overall is always evaluated first.
SCOPE_SPECS: tuple[ScopeSpec, ...] = (
    ScopeSpec(ScopeType.CLUSTER, lambda post: post.cluster),
    ScopeSpec(
        ScopeType.SUBCLUSTER,
        lambda post: post.subcluster,
        parent_type=ScopeType.CLUSTER,
        parent_key=lambda post: post.cluster,
    ),
    ScopeSpec(
        ScopeType.MICROCLUSTER,
        lambda post: post.microcluster,
        parent_type=ScopeType.SUBCLUSTER,
        parent_key=lambda post: post.subcluster,
    ),
    ScopeSpec(ScopeType.CITY, lambda post: post.location.city),
    ScopeSpec(ScopeType.PLATFORM, lambda post: post.platform),
)


__all__ = ["ScopeType", "Scope", "ScopeSpec", "SCOPE_SPECS"]
