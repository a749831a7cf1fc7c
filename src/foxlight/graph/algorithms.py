"""Graph algorithms over adjacency maps: closures, cycles, SCC, topological order.

Every function takes ``adjacency: dict[node, set[node]]`` and runs
iteratively, so deep import chains never hit Python's recursion limit.
Neighbours are visited in sorted order to keep results deterministic.
"""

from collections import deque
from typing import Dict, Iterable, List, Optional, Set

Adjacency = Dict[str, Set[str]]


def bfs_closure(adjacency: Adjacency, start: str) -> List[str]:
    """All nodes reachable from ``start`` in BFS order, ``start`` excluded.

    Each node is visited at most once, so cycles terminate. ``start`` is
    left out even when a cycle leads back to it.
    """
    visited: Set[str] = {start}
    order: List[str] = []
    queue: deque[str] = deque([start])

    while queue:
        current = queue.popleft()
        for neighbor in sorted(adjacency.get(current, ())):
            if neighbor in visited:
                continue
            visited.add(neighbor)
            order.append(neighbor)
            queue.append(neighbor)

    return order


def dfs_cycles(adjacency: Adjacency, nodes: Iterable[str]) -> List[List[str]]:
    """Report cycles found by a depth-first walk with an explicit path stack.

    When the walk reaches a node that is already on the current path, the
    cycle is the path from that node's position to the top, closed by
    repeating the node. Overlapping cycles may be reported more than once
    and are not reduced to a minimal basis; see ``tarjan_scc`` for that.
    """
    cycles: List[List[str]] = []
    visited: Set[str] = set()
    in_stack: Set[str] = set()
    path: List[str] = []

    for root in nodes:
        if root in visited:
            continue

        visited.add(root)
        in_stack.add(root)
        path.append(root)
        call_stack = [(root, iter(sorted(adjacency.get(root, ()))))]

        while call_stack:
            node, it = call_stack[-1]
            pushed = False
            for neighbor in it:
                if neighbor in in_stack:
                    start = path.index(neighbor)
                    cycles.append(path[start:] + [neighbor])
                    continue
                if neighbor in visited:
                    continue
                visited.add(neighbor)
                in_stack.add(neighbor)
                path.append(neighbor)
                call_stack.append((neighbor, iter(sorted(adjacency.get(neighbor, ())))))
                pushed = True
                break

            if not pushed:
                call_stack.pop()
                path.pop()
                in_stack.discard(node)

    return cycles


def tarjan_scc(adjacency: Adjacency, all_nodes: Iterable[str]) -> List[Set[str]]:
    """Tarjan's algorithm for strongly connected components (iterative).

    Uses an explicit call stack to avoid Python recursion limits on deep
    dependency chains.
    """
    node_set = set(all_nodes)
    counter = 0
    scc_stack: List[str] = []
    on_stack: Set[str] = set()
    index: Dict[str, int] = {}
    lowlink: Dict[str, int] = {}
    result: List[Set[str]] = []

    def _neighbors(node: str) -> List[str]:
        return [w for w in sorted(adjacency.get(node, ())) if w in node_set]

    for root in sorted(node_set):
        if root in index:
            continue

        index[root] = lowlink[root] = counter
        counter += 1
        scc_stack.append(root)
        on_stack.add(root)
        call_stack = [(root, iter(_neighbors(root)))]

        while call_stack:
            v, it = call_stack[-1]
            pushed = False
            for w in it:
                if w not in index:
                    index[w] = lowlink[w] = counter
                    counter += 1
                    scc_stack.append(w)
                    on_stack.add(w)
                    call_stack.append((w, iter(_neighbors(w))))
                    pushed = True
                    break
                elif w in on_stack:
                    lowlink[v] = min(lowlink[v], index[w])

            if not pushed:
                call_stack.pop()
                if call_stack:
                    caller = call_stack[-1][0]
                    lowlink[caller] = min(lowlink[caller], lowlink[v])

                if lowlink[v] == index[v]:
                    component: Set[str] = set()
                    while True:
                        w = scc_stack.pop()
                        on_stack.discard(w)
                        component.add(w)
                        if w == v:
                            break
                    result.append(component)

    return result


def kahn_topological_sort(adjacency: Adjacency, nodes: Iterable[str]) -> Optional[List[str]]:
    """Kahn's algorithm. Returns ``None`` when a cycle leaves nodes unvisited.

    In-degrees are counted from ``adjacency`` over ``nodes``; zero in-degree
    nodes are processed FIFO in the order ``nodes`` yields them.
    """
    node_list = list(nodes)
    in_degree: Dict[str, int] = {n: 0 for n in node_list}
    for n in node_list:
        for target in adjacency.get(n, ()):
            in_degree[target] = in_degree.get(target, 0) + 1

    queue: deque[str] = deque(n for n in node_list if in_degree[n] == 0)
    order: List[str] = []

    while queue:
        current = queue.popleft()
        order.append(current)
        for target in sorted(adjacency.get(current, ())):
            in_degree[target] -= 1
            if in_degree[target] == 0:
                queue.append(target)

    if len(order) < len(in_degree):
        return None
    return order
