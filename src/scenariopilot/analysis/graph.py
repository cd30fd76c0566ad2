"""Feature dependency graph and cycle detection."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping

from scenariopilot.contracts.feature import Feature


class DependencyGraph:
    """Adjacency map of feature id -> dependency ids, detached from the Feature models.

    Dependency targets that are not themselves keys (external labels) are
    leaf nodes.
    """

    def __init__(self, edges: Mapping[str, Iterable[str]]) -> None:
        self._adjacency: dict[str, tuple[str, ...]] = {
            node: tuple(dict.fromkeys(targets)) for node, targets in edges.items()
        }

    @classmethod
    def from_features(cls, features: Iterable[Feature]) -> DependencyGraph:
        return cls({feature.id: feature.dependencies for feature in features})

    @property
    def nodes(self) -> list[str]:
        ordered = dict.fromkeys(self._adjacency)
        for targets in self._adjacency.values():
            ordered.update(dict.fromkeys(targets))
        return list(ordered)

    def dependencies_of(self, node: str) -> tuple[str, ...]:
        return self._adjacency.get(node, ())

    def find_cycles(self) -> list[list[str]]:
        """Return every cycle closed by a DFS back-edge, as ordered id paths.

        Uses an explicit stack instead of recursion; each cycle is reported
        once regardless of which node the traversal entered it from.
        """
        visited: set[str] = set()
        seen: set[tuple[str, ...]] = set()
        cycles: list[list[str]] = []

        for root in self._adjacency:
            if root in visited:
                continue
            visited.add(root)
            path = [root]
            on_path = {root}
            stack: list[Iterator[str]] = [iter(self.dependencies_of(root))]

            while stack:
                child = next(stack[-1], None)
                if child is None:
                    stack.pop()
                    on_path.discard(path.pop())
                    continue
                if child in on_path:
                    cycle = path[path.index(child) :]
                    key = _canonical(cycle)
                    if key not in seen:
                        seen.add(key)
                        cycles.append(cycle)
                    continue
                if child in visited:
                    continue
                visited.add(child)
                on_path.add(child)
                path.append(child)
                stack.append(iter(self.dependencies_of(child)))

        return cycles


def _canonical(cycle: list[str]) -> tuple[str, ...]:
    pivot = cycle.index(min(cycle))
    return tuple(cycle[pivot:] + cycle[:pivot])
