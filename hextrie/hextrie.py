import logging

from .tree.hex import HexRadixTree
from .tree.render import render_tree

log = logging.getLogger("hextrie")


class HexTrie:
    """
    A class representing a hex-keyed trie. Can contain an unlimited number of keys, each made of hex digits.

    Every hex digit is one level of a 16-way tree. Keys are decomposed permissively: characters that
    aren't hex digits are ignored, so "A1-F" and "a1f" are the same key.

    Not thread-safe. Callers sharing a trie between threads must hold their own lock around every call.
    """

    def __init__(self, *keys):
        """
        Initialize a HexTrie object.

        Args:
            *keys: One or more hex keys to be included in this trie, each storing its canonical form as its value.
        """
        self.tree = HexRadixTree()
        for key in keys:
            self.insert(key)

    def insert(self, key, value=None):
        """
        Insert a key with an optional value, overwriting any previous value at that key.

        Args:
            key (str): The hex key to insert
            value: Optional value to store (defaults to the canonical form of the key)
        """
        self.tree.insert(key, value)

    def add(self, key, value=None):
        """
        Alias for insert()
        """
        return self.insert(key, value=value)

    def put(self, key, value=None):
        """Alias for insert()"""
        return self.insert(key, value=value)

    def insert_nibbles(self, nibbles, value=None):
        """
        Insert a key that has already been split into nibbles, skipping string parsing.

        Args:
            nibbles (Iterable[int]): Nibble values (0-15), most significant first
            value: Optional value to store (defaults to the canonical form of the key)
        """
        self.tree.insert_nibbles(nibbles, value)

    def get(self, key, raise_error=False):
        """
        Get the value stored at a key.

        Args:
            key (str): The hex key to look up
            raise_error (bool): If True, raise KeyError instead of returning None

        Returns:
            The value stored at the key, or None if there isn't one
        """
        return self.tree.get(key, raise_error=raise_error)

    def search(self, key, raise_error=False):
        """Alias for get()"""
        return self.get(key, raise_error=raise_error)

    def delete(self, key):
        """
        Delete the value at a key, along with any nodes that existed only to reach it.

        Deleting a key that isn't present is a no-op.

        Args:
            key (str): The hex key to delete
        """
        pruned = self.tree.delete(key)
        if pruned:
            log.debug(f'Pruned {pruned:,} nodes after deleting "{key}"')

    def render(self):
        """
        Return a tree diagram of the trie, one line per node
        """
        return render_tree(self.tree.root)

    def prune(self):
        """
        Remove any nodes that don't lead to a value.

        Only needed if nodes have been modified directly; delete() already prunes.

        Returns:
            int: The number of nodes removed
        """
        pruned = self.tree.prune()
        if pruned:
            log.debug(f"Pruned {pruned:,} dead nodes")
        return pruned

    def items(self):
        """Yield (key, value) pairs in nibble order"""
        for key, node in self.tree.nodes_by_key.items():
            yield key, node.value

    def merge(self, other):
        """
        Merge another HexTrie into this one.
        """
        results = []
        for key, value in other.items():
            self.insert(key, value)
            results.append(key)
        return results

    def copy(self):
        """
        Create a copy of this HexTrie.

        Returns:
            HexTrie: A new HexTrie with its own nodes holding the same keys and values
        """
        new_trie = self.__class__()
        new_trie.tree.root = self.tree.root.copy()
        return new_trie

    def __contains__(self, key):
        """Check if a value is stored at the key"""
        return self.get(key) is not None

    def __len__(self):
        """Return the number of stored values"""
        return sum(1 for _, node in self.tree.root.walk() if node.value is not None)

    def __bool__(self):
        """Return True if any value is stored"""
        return any(node.value is not None for _, node in self.tree.root.walk())

    def __iter__(self):
        """Return iterator over the keys in nibble order"""
        for key, _ in self.items():
            yield key

    def __eq__(self, other):
        """Check whether another trie holds the same keys and values"""
        if isinstance(other, HexTrie):
            return list(self.items()) == list(other.items())
        return False

    __hash__ = None

    def __str__(self):
        """Return the tree diagram"""
        return self.render()

    def __repr__(self):
        keys = list(self)
        shown = ",".join(repr(k) for k in keys[:5])
        if len(keys) > 5:
            shown += ",..."
        return f"{self.__class__.__name__}({shown})"
