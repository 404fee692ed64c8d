from hextrie.helpers import hex_to_nibbles, nibbles_to_hex
from hextrie.tree.base import BaseHexTree, RADIX


class HexRadixTree(BaseHexTree):
    """A 16-way radix tree keyed by hex digits.

    Every hex digit of a key occupies its own level; single-child chains are never collapsed.
    """

    def insert(self, key, value=None):
        """Add a hex key to the tree.

        Args:
            key (str): The hex key to insert. Non-hex characters are ignored.
            value: Optional value to associate with the key. Defaults to the canonical (lowercase) key.
        """
        self.insert_nibbles(list(hex_to_nibbles(key)), value)

    def insert_nibbles(self, nibbles, value=None):
        """Add an already-decomposed key to the tree.

        Args:
            nibbles (Iterable[int]): Nibble values (0-15), most significant first.
            value: Optional value to associate with the key. Defaults to the canonical (lowercase) key.

        Raises:
            ValueError: If a nibble is outside 0-15.
        """
        nibbles = list(nibbles)
        # validate before touching the tree so a bad nibble can't leave dead nodes behind
        for nibble in nibbles:
            if not (isinstance(nibble, int) and 0 <= nibble < RADIX):
                raise ValueError(f"Invalid nibble: {nibble!r}")
        if value is None:
            value = nibbles_to_hex(nibbles)
        node = self.root
        for nibble in nibbles:
            child = node.children[nibble]
            if child is None:
                child = node.children[nibble] = self.node_class()
            node = child
        node.value = value

    def get_node(self, query, raise_error=False):
        """Find the node sitting at an exact hex key.

        Args:
            query (str): The hex key to search for.
            raise_error (bool): If True, raise KeyError when the path doesn't exist. Defaults to False.

        Returns:
            The node at the end of the key's path, or None if the path doesn't exist.
            The node may have no value if it's only a prefix of other keys.
        """
        node = self.root
        for nibble in hex_to_nibbles(query):
            node = node.children[nibble]
            if node is None:
                if raise_error:
                    raise KeyError(f'Key "{query}" not found')
                return None
        return node

    def delete(self, query):
        """Clear the value at a hex key and prune any nodes left without a purpose.

        Deleting a key that isn't present does nothing. The root is never pruned.

        Returns:
            int: The number of nodes pruned.
        """
        node = self.root
        path = []
        for nibble in hex_to_nibbles(query):
            child = node.children[nibble]
            if child is None:
                return 0
            path.append((node, nibble))
            node = child
        node.value = None

        pruned = 0
        # unwind from the deepest node, stopping at the first one still in use
        for parent, nibble in reversed(path):
            if not parent.children[nibble].is_dead:
                break
            parent.children[nibble] = None
            pruned += 1
        return pruned
