"""
Immutable view of the category tree used by the validators.
"""
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional


@dataclass(frozen=True)
class CategoryNode:
    """A single category row as seen by the validators."""
    id: int
    name: str
    parent_id: Optional[int] = None
    level: int = 0
    is_active: bool = True

    @property
    def is_root(self) -> bool:
        return self.parent_id is None


@dataclass(frozen=True)
class CategoryTreeSnapshot:
    """Point-in-time copy of every category, keyed by id."""
    nodes: Dict[int, CategoryNode] = field(default_factory=dict)

    @classmethod
    def from_nodes(cls, nodes: Iterable[CategoryNode]) -> 'CategoryTreeSnapshot':
        """Build a snapshot from category nodes."""
        return cls(nodes={node.id: node for node in nodes})

    def __contains__(self, category_id) -> bool:
        return category_id in self.nodes

    def __len__(self) -> int:
        return len(self.nodes)

    def get(self, category_id) -> Optional[CategoryNode]:
        """Get a node by id."""
        return self.nodes.get(category_id)

    def roots(self) -> List[CategoryNode]:
        """Get main categories ordered by name."""
        return sorted(
            (node for node in self.nodes.values() if node.parent_id is None),
            key=lambda node: node.name,
        )

    def children_of(self, parent_id) -> List[CategoryNode]:
        """Get direct children of a category ordered by name."""
        return sorted(
            (node for node in self.nodes.values() if node.parent_id == parent_id),
            key=lambda node: node.name,
        )

    def has_sibling_named(self, name: str, parent_id, exclude_id=None) -> bool:
        """Check whether another category under parent_id already uses name."""
        return any(
            node.name == name and node.parent_id == parent_id and node.id != exclude_id
            for node in self.nodes.values()
        )

    def creates_cycle(self, category_id, new_parent_id) -> bool:
        """Check if making new_parent_id the parent of category_id closes a loop."""
        seen = set()
        current = new_parent_id
        while current is not None:
            if current == category_id or current in seen:
                return True
            seen.add(current)
            node = self.nodes.get(current)
            current = node.parent_id if node else None
        return False
