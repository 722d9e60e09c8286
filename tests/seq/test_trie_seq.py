import unittest
from pyrsistent import PVector
from scriptkit.core.errors import IndexOutOfRangeError
from scriptkit.core.seq import Seq
from scriptkit.core.trie_seq import TrieSeq


class TestTrieSeq(unittest.TestCase):
    def setUp(self):
        self.s = TrieSeq.new(list('ABCDE'))

    def test_initialization(self):
        """Items live in a persistent vector and no evolver exists yet."""
        self.assertEqual(len(self.s), 5)
        self.assertIsInstance(self.s._data, PVector)
        self.assertIsNone(self.s.evolver)
        self.assertEqual(self.s.get(1), 'A')

    def test_point_update(self):
        """set() goes through the evolver until something reads the vector."""
        self.s.set(3, 'X')
        self.assertIsNotNone(self.s.evolver)
        self.assertEqual(self.s.get(3), 'X')
        self.assertIsNone(self.s.evolver)
        self.assertEqual(''.join(self.s), 'ABXDE')

    def test_point_updates_are_batched(self):
        """Consecutive set() and add() calls keep using one evolver until a read."""
        original = self.s._data
        self.s.set(1, 'X')
        evolver = self.s.evolver
        self.s.set(2, 'Y')
        self.s.add('F')
        self.assertIs(self.s.evolver, evolver)
        self.assertIs(self.s._data, original)
        self.assertEqual(len(self.s), 6)
        self.assertIs(self.s.evolver, evolver)
        self.assertEqual(''.join(self.s), 'XYCDEF')
        self.assertIsNone(self.s.evolver)

    def test_append(self):
        self.s.add('F')
        self.assertIsNotNone(self.s.evolver)
        self.s.insert(['G', 'H'])
        self.assertEqual(''.join(self.s), 'ABCDEFGH')

    def test_structural_insertion(self):
        self.s.set(1, 'Z')
        self.s.insert(list('XYZ'), 3)
        self.assertIsNone(self.s.evolver)
        self.assertEqual(''.join(self.s), 'ZBXYZCDE')

    def test_structural_deletion(self):
        self.s.delete(2, 4)
        self.assertEqual(''.join(self.s), 'AE')
        self.assertEqual(self.s.pop(), 'E')
        self.assertEqual(len(self.s), 1)
        with self.assertRaises(IndexOutOfRangeError):
            self.s.delete(1, 2)

    def test_copy_shares_structure(self):
        self.s.set(1, 'Z')
        other = self.s.copy()
        self.assertIs(other._data, self.s._data)
        self.s.set(2, 'Q')
        other.add('F')
        self.assertEqual(''.join(other), 'ZBCDEF')
        self.assertEqual(''.join(self.s), 'ZQCDE')

    def test_derived_sequences_keep_backend(self):
        self.assertIsInstance(self.s.slice(1, 2), TrieSeq)
        self.assertIsInstance(self.s.filter(lambda c: c != 'A'), TrieSeq)
        self.assertIsInstance(self.s + TrieSeq.new(['F']), TrieSeq)

    def test_in_place_utilities(self):
        self.s.keep_if(lambda c: c in 'ACE')
        self.assertEqual(''.join(self.s), 'ACE')
        self.s.apply(str.lower)
        self.assertEqual(''.join(self.s), 'ace')

    def test_same_content_as_list_backend(self):
        self.assertEqual(self.s, Seq.new(list('ABCDE')))
        self.assertEqual(repr(TrieSeq.new([1, 2])), 'TrieSeq<number>[1, 2]#2')


if __name__ == '__main__':
    unittest.main()
