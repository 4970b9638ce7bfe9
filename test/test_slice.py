import os
import sys
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from prism.slice import Slice
from prism.errors import InvalidArgument
import unittest

class TestApply(unittest.TestCase):
  def test_both_unset(self):
    self.assertEqual(Slice().apply(Slice()), Slice())

  def test_step_and_start_scale(self):
    self.assertEqual(Slice(1, 14, 2).apply(Slice(1, None, 2)), Slice(3, 14, 4))

  def test_inner_stop_is_shifted_and_scaled(self):
    self.assertEqual(Slice(1, 14, 2).apply(Slice(None, 3)), Slice(1, 7, 2))

  def test_unset_inner_stop_keeps_outer_stop(self):
    self.assertEqual(Slice(2, 9).apply(Slice(1)), Slice(3, 9, None))
    self.assertEqual(Slice(2).apply(Slice(1)), Slice(3, None, None))

  def test_only_outer_step_set(self):
    self.assertEqual(Slice(None, None, 3).apply(Slice(1)), Slice(3, None, 3))

  def test_only_inner_step_set(self):
    self.assertEqual(Slice(4).apply(Slice(None, None, 2)), Slice(4, None, 2))

  def test_start_stays_unset_when_both_unset(self):
    self.assertEqual(Slice(None, 10, 2).apply(Slice(None, 3)), Slice(None, 6, 2))

  def test_negative_values_are_not_normalized(self):
    self.assertEqual(Slice(-3, None, -1).apply(Slice(2, 4)), Slice(-5, -7, -1))

  def test_zero_step_composes_without_error(self):
    self.assertEqual(Slice(step=0).apply(Slice(step=3)), Slice(None, None, 0))

  def test_apply_is_associative(self):
    a, b, c = Slice(1, 15, 2), Slice(1, 6), Slice(None, None, 2)
    self.assertEqual(a.apply(b).apply(c), a.apply(b.apply(c)))

class TestLength(unittest.TestCase):
  def test_defaults(self):
    self.assertEqual(Slice().length(5), 5)
    self.assertEqual(Slice().resolve(5), (0, 5, 1))

  def test_ceil_division(self):
    self.assertEqual(Slice(1, 14, 2).length(16), 7)
    self.assertEqual(Slice(1, None, 2).length(7), 3)
    self.assertEqual(Slice(0, 10, 3).length(16), 4)

  def test_negative_extent_is_clamped(self):
    self.assertEqual(Slice(10, 4).length(16), 0)
    self.assertEqual(Slice(None, None, -1).length(5), 0)

  def test_negative_step(self):
    self.assertEqual(Slice(5, -1, -1).length(6), 6)
    self.assertEqual(Slice(14, 0, -3).length(16), 5)

  def test_zero_step(self):
    with self.assertRaises(InvalidArgument): Slice(0, 4, 0).length(4)

class TestSlice(unittest.TestCase):
  def test_from_builtin_slice(self):
    self.assertEqual(Slice.from_slice(slice(1, None, 2)), Slice(1, None, 2))
    self.assertEqual(Slice.from_slice(slice(None)), Slice.full())

  def test_immutable(self):
    with self.assertRaises(AttributeError): Slice(1).start = 2

  def test_repr(self):
    self.assertEqual(repr(Slice(1, 14, 2)), "Slice(1:14:2)")
    self.assertEqual(repr(Slice(None, 3)), "Slice(:3:)")

if __name__ == '__main__':
    unittest.main()
