"""Tests for shortint scalar types."""

import hypothesis
from hypothesis import strategies
import numpy as np
from shortint.shortint_lib import types
from absl.testing import absltest
from absl.testing import parameterized


class ModulusTest(parameterized.TestCase):

  @parameterized.named_parameters(
      dict(testcase_name='_message', cls=types.MessageModulus),
      dict(testcase_name='_carry', cls=types.CarryModulus),
  )
  def test_bit_length(self, cls):
    self.assertEqual(cls(1).bit_length, 0)
    self.assertEqual(cls(2).bit_length, 1)
    self.assertEqual(cls(256).bit_length, 8)

  @parameterized.product(
      cls=[types.MessageModulus, types.CarryModulus],
      value=[0, -2, 3, 6, 12],
  )
  def test_non_power_of_two_raises(self, cls, value):
    with self.assertRaises(ValueError):
      cls(value)

  @parameterized.product(
      cls=[types.MessageModulus, types.CarryModulus],
      value=[2.0, '4', True, None],
  )
  def test_non_int_raises(self, cls, value):
    with self.assertRaises(TypeError):
      cls(value)

  def test_numpy_int_is_normalized(self):
    modulus = types.MessageModulus(np.int64(8))
    self.assertIs(type(modulus.value), int)
    self.assertEqual(modulus, types.MessageModulus(8))

  def test_message_and_carry_never_compare_equal(self):
    self.assertNotEqual(types.MessageModulus(4), types.CarryModulus(4))
    self.assertNotEqual(types.MessageModulus(4), 4)

  def test_is_immutable(self):
    modulus = types.CarryModulus(4)
    with self.assertRaises(AttributeError):
      modulus.value = 8

  @hypothesis.given(strategies.integers(min_value=0, max_value=62))
  def test_power_of_two_round_trip(self, bits: int):
    self.assertEqual(types.MessageModulus(2**bits).bit_length, bits)
    self.assertEqual(hash(types.CarryModulus(2**bits)),
                     hash(types.CarryModulus(2**bits)))


class CiphertextModulusTest(absltest.TestCase):

  def test_native_is_word_modulus(self):
    modulus = types.CiphertextModulus.native()
    self.assertEqual(modulus.value, 2**64)
    self.assertTrue(modulus.is_native)
    self.assertTrue(modulus.is_power_of_two)
    self.assertEqual(modulus.bit_length, 64)

  def test_native_instances_are_equal(self):
    self.assertEqual(
        types.CiphertextModulus.native(), types.CiphertextModulus(2**64)
    )

  def test_native_of_narrower_dtype(self):
    modulus = types.CiphertextModulus.native(np.uint32)
    self.assertEqual(modulus.value, 2**32)
    self.assertFalse(modulus.is_native)

  def test_non_power_of_two_modulus(self):
    modulus = types.CiphertextModulus(2**32 - 5)
    self.assertFalse(modulus.is_power_of_two)
    self.assertEqual(modulus.bit_length, 32)

  def test_out_of_range_raises(self):
    with self.assertRaises(ValueError):
      types.CiphertextModulus(1)
    with self.assertRaises(ValueError):
      types.CiphertextModulus(2**64 + 1)

  def test_non_int_raises(self):
    for value in (2.5, 2.0**32, '4096', True, None):
      with self.assertRaises(TypeError):
        types.CiphertextModulus(value)

  def test_numpy_int_is_normalized(self):
    modulus = types.CiphertextModulus(np.uint64(2**32))
    self.assertIs(type(modulus.value), int)
    self.assertEqual(modulus.bit_length, 32)


if __name__ == '__main__':
  absltest.main()
