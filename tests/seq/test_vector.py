import unittest
from scriptkit.core.errors import TypeMismatchError
from scriptkit.core.seq import Seq
from scriptkit.core.typecheck import Tag
from scriptkit.core.vector import Vector


class TestVector(unittest.TestCase):
    def test_new(self):
        v = Vector.new([1, 2, 3])
        self.assertIsInstance(v, Vector)
        self.assertIs(v.tag, Tag.NUMBER)
        self.assertIs(Vector.new([1, 2], 'integer').tag, Tag.INTEGER)
        self.assertIs(Vector.new([], 'number').tag, Tag.NUMBER)

    def test_mixed_ints_and_floats(self):
        self.assertEqual(Vector.new([1, 2.5]).unpack(), [1, 2.5])
        self.assertEqual(Vector.new([1.5, 2]).unpack(), [1.5, 2])
        v, err = Vector.try_new([1, 2.5])
        self.assertIsNone(err)
        self.assertEqual(len(v), 2)

    def test_apply_producing_floats(self):
        v = Vector.new([0.5, 1.0])
        v.apply(lambda x: x + 0.5)
        self.assertEqual(v.unpack(), [1.0, 1.5])
        w = Vector.new([1, 2])
        w.apply(lambda x: x * 1.5)
        self.assertEqual(w.unpack(), [1.5, 3.0])

    def test_utilities_accept_plain_arrays(self):
        self.assertIsInstance(Vector.filter([1, 2.5], lambda x: x > 1), Vector)
        with self.assertRaises(TypeMismatchError):
            Vector.all(['a'], lambda x: True)

    def test_from_seq(self):
        v = Vector.new(Seq.new([1, 2]))
        self.assertIsInstance(v, Vector)
        self.assertEqual(v.unpack(), [1, 2])

    def test_non_numeric(self):
        with self.assertRaisesRegex(TypeMismatchError, 'numeric'):
            Vector.new(['a'])
        with self.assertRaises(TypeMismatchError):
            Vector.new([True])
        with self.assertRaises(TypeMismatchError):
            Vector.filled('string', 2)

    def test_filled(self):
        self.assertEqual(Vector.filled('float', 2).unpack(), [0.0, 0.0])

    def test_try_new(self):
        v, err = Vector.try_new([1, 2])
        self.assertIsNone(err)
        self.assertEqual(v.unpack(), [1, 2])

    def test_try_new_degrades(self):
        with self.assertLogs('scriptkit.vector', level='WARNING'):
            v, err = Vector.try_new(['a', 'b'])
        self.assertIsInstance(err, TypeMismatchError)
        self.assertIsInstance(v, Vector)
        self.assertEqual(len(v), 0)
        self.assertIs(v.tag, Tag.NUMBER)

        with self.assertLogs('scriptkit.vector', level='WARNING'):
            _, err = Vector.try_new([])
        self.assertIsInstance(err, ValueError)

    def test_derived_sequences(self):
        v = Vector.new([1, 2, 3])
        self.assertIsInstance(v.slice(1, 2), Vector)
        self.assertIsInstance(v.filter(lambda x: x > 1), Vector)
        self.assertIs(type(v.map(str)), Seq)

    def test_apply_must_stay_numeric(self):
        v = Vector.new([1, 2])
        v.apply(lambda x: x / 2)
        self.assertEqual(v.unpack(), [0.5, 1.0])
        with self.assertRaises(TypeMismatchError):
            v.apply(str)
        self.assertEqual(v.unpack(), [0.5, 1.0])


if __name__ == '__main__':
    unittest.main()
