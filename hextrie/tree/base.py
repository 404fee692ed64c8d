from hextrie.helpers import nibbles_to_hex

RADIX = 16


class HexTrieNode:
    __slots__ = ("children", "value")

    def __init__(self):
        self.children = [None] * RADIX
        self.value = None

    @property
    def is_dead(self):
        """
        A node with no value and no children doesn't lead to any key
        """
        return self.value is None and not any(self.children)

    @property
    def child_count(self):
        return sum(1 for child in self.children if child is not None)

    def iter_children(self):
        for nibble, child in enumerate(self.children):
            if child is not None:
                yield nibble, child

    def walk(self):
        """Depth-first walk in nibble order.

        Yields:
            tuple: (nibbles, node) for this node and every descendant, parents before children.
        """
        stack = [((), self)]
        while stack:
            nibbles, node = stack.pop()
            yield nibbles, node
            # reversed so that lower nibbles get popped first
            for nibble, child in reversed(list(node.iter_children())):
                stack.append((nibbles + (nibble,), child))

    @property
    def all_child_nodes(self):
        return [node for _, node in self.walk() if node.value is not None]

    @property
    def nodes_by_key(self):
        return {nibbles_to_hex(nibbles): node for nibbles, node in self.walk() if node.value is not None}

    def copy(self):
        new_node = self.__class__()
        # (source, destination) pairs still to be filled in
        stack = [(self, new_node)]
        while stack:
            source, destination = stack.pop()
            destination.value = source.value
            for nibble, child in source.iter_children():
                new_child = destination.children[nibble] = self.__class__()
                stack.append((child, new_child))
        return new_node

    def prune(self):
        """
        Prune dead nodes
        """
        pruned = 0
        # reversed walk order visits every child before its parent
        for _, node in reversed(list(self.walk())):
            for nibble, child in node.iter_children():
                if child.is_dead:
                    node.children[nibble] = None
                    pruned += 1
        return pruned


class BaseHexTree:
    node_class = HexTrieNode

    def __init__(self):
        self.root = self.node_class()

    def get(self, *args, **kwargs):
        return self.get_data(*args, **kwargs)

    def search(self, *args, **kwargs):
        return self.get_data(*args, **kwargs)

    def get_data(self, query, raise_error=False):
        node = self.get_node(query, raise_error)
        value = getattr(node, "value", None)
        if value is None and raise_error:
            raise KeyError(f'Key "{query}" not found')
        return value

    @property
    def all_nodes(self):
        return self.root.all_child_nodes

    @property
    def nodes_by_key(self):
        return self.root.nodes_by_key

    def prune(self):
        return self.root.prune()
