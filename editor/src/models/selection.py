"""Selection model: ordered set of selected shape ids."""
from typing import Iterable, List, Optional


class Selection:
    """Ordered list of NodeIds with set semantics (no duplicates).

    Toggling an id off removes it by swapping with the last element, so the
    relative order of the remaining ids is not preserved. Nothing renders
    differently because of selection order.
    """

    def __init__(self, ids: Iterable = ()):
        self._ids: List = []
        self.replace(ids)

    def apply(self, hit: Optional[int], additive: bool) -> None:
        """Update the selection from a hit-test result.

        hit     additive  effect
        id      False     replace with [id]
        id      True      toggle id
        None    False     clear
        None    True      no-op
        """
        if hit is not None:
            if additive:
                self.toggle(hit)
            else:
                self._ids = [hit]
        elif not additive:
            self._ids.clear()

    def toggle(self, node_id) -> bool:
        """Remove node_id if selected (swap-remove), else append. Returns True if now selected."""
        try:
            idx = self._ids.index(node_id)
        except ValueError:
            self._ids.append(node_id)
            return True
        last = self._ids.pop()
        if idx < len(self._ids):
            self._ids[idx] = last
        return False

    def replace(self, ids: Iterable) -> None:
        """Replace the contents, dropping duplicates but keeping first-seen order."""
        seen = set()
        result = []
        for node_id in ids:
            if node_id not in seen:
                seen.add(node_id)
                result.append(node_id)
        self._ids = result

    def clear(self) -> None:
        self._ids.clear()

    def snapshot(self) -> List:
        """Copy of the current ids, safe to keep across mutations."""
        return list(self._ids)

    def ids(self) -> List:
        return list(self._ids)

    def __contains__(self, node_id):
        return node_id in self._ids

    def __iter__(self):
        return iter(list(self._ids))

    def __len__(self):
        return len(self._ids)

    def __eq__(self, other):
        if isinstance(other, Selection):
            return self._ids == other._ids
        if isinstance(other, list):
            return self._ids == other
        return NotImplemented

    def __repr__(self):
        return f"Selection({self._ids!r})"
