from collections import defaultdict


def _is_int(obj):
    # bool is a subclass of int
    return isinstance(obj, int) and not isinstance(obj, bool)


class WeightedUnionFind:
    """
    Disjoint-set forest over variables ``0..n-1`` where every node also stores
    its offset to its parent, i.e. ``offsets[v] == value(v) - value(parents[v])``.
    After ``find(v)``, ``parents[v]`` is the root and ``offsets[v]`` is the
    offset to the root. Roots always have offset 0.
    """

    def __init__(self, n):
        if not _is_int(n) or n < 0:
            raise ValueError(f"n={n!r} must be a non-negative int")
        self.parents = list(range(n))
        self.offsets = [0] * n

    def __len__(self):
        return len(self.parents)

    def _check_index(self, obj):
        # plain list indexing would silently accept negative values
        if not _is_int(obj) or not 0 <= obj < len(self.parents):
            raise IndexError(f"variable={obj!r} out of range for n={len(self.parents)}")

    def find(self, obj):
        self._check_index(obj)

        path = []
        root = obj
        while self.parents[root] != root:
            path.append(root)
            root = self.parents[root]

        # walk back from the node closest to the root
        offset_to_root = 0
        for ancestor in reversed(path):
            offset_to_root += self.offsets[ancestor]
            self.offsets[ancestor] = offset_to_root
            self.parents[ancestor] = root
        return root, offset_to_root

    def union_with_constraint(self, i, j, c):
        """
        Record ``value(i) - value(j) == c``.

        Returns False if ``i`` and ``j`` are already related by a different
        difference, in which case nothing is merged. Otherwise merges the
        group of ``i`` under the root of ``j`` (if needed) and returns True.
        """
        root_i, offset_i = self.find(i)
        root_j, offset_j = self.find(j)

        if root_i == root_j:
            return offset_i - offset_j == c

        self.parents[root_i] = root_j
        self.offsets[root_i] = c + offset_j - offset_i
        return True

    def difference(self, i, j):
        root_i, offset_i = self.find(i)
        root_j, offset_j = self.find(j)
        if root_i != root_j:
            return None
        return offset_i - offset_j

    def component_dict(self):
        result = defaultdict(dict)
        for obj in range(len(self.parents)):
            root, offset = self.find(obj)
            result[root][obj] = offset
        return dict(result)
