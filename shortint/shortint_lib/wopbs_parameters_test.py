"""Tests for WopbsParameters."""

import dataclasses

from shortint.shortint_lib import test_utils
from absl.testing import absltest
from absl.testing import parameterized


class WopbsParametersTest(parameterized.TestCase):

  def setUp(self):
    super().setUp()
    self.params = test_utils.wopbs_params_for(test_utils.TEST_PBS_PARAMS)

  def test_shares_encoding_with_source(self):
    pbs = test_utils.TEST_PBS_PARAMS
    self.assertEqual(self.params.message_modulus, pbs.message_modulus)
    self.assertEqual(self.params.carry_modulus, pbs.carry_modulus)
    self.assertEqual(self.params.ciphertext_modulus, pbs.ciphertext_modulus)
    self.assertEqual(
        self.params.encryption_key_choice, pbs.encryption_key_choice
    )

  def test_decomposition_views(self):
    self.assertEqual(self.params.pfks_decomp_params.log_base, 8)
    self.assertEqual(self.params.pfks_decomp_params.level_count, 2)
    self.assertEqual(self.params.cbs_decomp_params.base, 64)
    self.assertEqual(self.params.cbs_decomp_params.precision_bits, 18)

  @parameterized.named_parameters(
      dict(testcase_name='_zero_pfks_level', pfks_level=0),
      dict(testcase_name='_zero_cbs_base_log', cbs_base_log=0),
      dict(testcase_name='_zero_pfks_std_dev', pfks_modular_std_dev=0.0),
      dict(testcase_name='_polynomial_size_not_power_of_two',
           polynomial_size=3),
  )
  def test_out_of_range_field_raises(self, **changes):
    with self.assertRaises(ValueError):
      dataclasses.replace(self.params, **changes)

  def test_wrong_field_type_raises(self):
    with self.assertRaises(TypeError):
      dataclasses.replace(self.params, carry_modulus=4)


if __name__ == '__main__':
  absltest.main()
