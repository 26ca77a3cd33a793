"""Tests for the vetted preset catalog."""

import re

from shortint.shortint_lib import key_choice
from shortint.shortint_lib import parameters
from shortint.shortint_params import presets
from absl.testing import absltest
from absl.testing import parameterized

_NAME_PATTERN = re.compile(r'PARAM_(SMALL_)?MESSAGE_(\d)_CARRY_(\d)')


def _bits(params: parameters.PBSParameters):
  return params.message_modulus.bit_length, params.carry_modulus.bit_length


class PresetsTest(parameterized.TestCase):

  def test_catalog_size(self):
    self.assertLen(presets.PRESETS_BY_NAME, 40)
    self.assertLen(presets.ALL_PARAMETER_VEC, 28)
    self.assertLen(presets.BIVARIATE_PBS_COMPLIANT_PARAMETER_SET_VEC, 16)

  @parameterized.parameters(*sorted(presets.PRESETS_BY_NAME))
  def test_name_encodes_encoding_and_key(self, name):
    params = presets.get_preset_by_name(name)
    small, message_bits, carry_bits = _NAME_PATTERN.fullmatch(name).groups()
    self.assertEqual(_bits(params), (int(message_bits), int(carry_bits)))
    expected_key = (
        key_choice.EncryptionKeyChoice.SMALL
        if small
        else key_choice.EncryptionKeyChoice.BIG
    )
    self.assertEqual(params.encryption_key_choice, expected_key)
    self.assertTrue(params.ciphertext_modulus.is_native)

  @parameterized.parameters(*sorted(presets.PRESETS_BY_NAME))
  def test_decompositions_fit_in_a_word(self, name):
    params = presets.get_preset_by_name(name)
    self.assertLessEqual(params.pbs_decomp_params.precision_bits, 64)
    self.assertLessEqual(params.ks_decomp_params.precision_bits, 64)

  def test_all_parameters_are_ordered(self):
    bits = [_bits(p) for p in presets.ALL_PARAMETER_VEC]
    self.assertEqual(bits, sorted(bits))
    self.assertLen(set(bits), len(bits))

  def test_all_parameters_have_carry(self):
    for params in presets.ALL_PARAMETER_VEC:
      self.assertGreaterEqual(params.carry_modulus.bit_length, 1)
      self.assertEqual(
          params.encryption_key_choice, key_choice.EncryptionKeyChoice.BIG
      )

  def test_bivariate_sets_fit_a_second_message_in_the_carry(self):
    for params in presets.BIVARIATE_PBS_COMPLIANT_PARAMETER_SET_VEC:
      self.assertGreaterEqual(
          params.carry_modulus.value, params.message_modulus.value
      )
      self.assertIn(params, presets.ALL_PARAMETER_VEC)

  def test_preset_description(self):
    self.assertEqual(
        presets.preset_description(presets.PARAM_MESSAGE_3_CARRY_2),
        'message 3 bits, carry 2 bits',
    )

  def test_unknown_name_raises(self):
    with self.assertRaisesRegex(ValueError, 'PARAM_MESSAGE_9_CARRY_9'):
      presets.get_preset_by_name('PARAM_MESSAGE_9_CARRY_9')

  def test_index_names_match_constants(self):
    for name, params in presets.PRESETS_BY_NAME.items():
      self.assertIs(getattr(presets, name), params)
    self.assertLen(
        {id(p) for p in presets.PRESETS_BY_NAME.values()},
        len(presets.PRESETS_BY_NAME),
    )

  def test_index_holds_only_named_presets(self):
    self.assertNotIn('DEFAULT_PARAMETERS', presets.PRESETS_BY_NAME)
    self.assertNotIn('NATIVE_CIPHERTEXT_MODULUS', presets.PRESETS_BY_NAME)
    for name, params in presets.PRESETS_BY_NAME.items():
      self.assertRegex(name, _NAME_PATTERN)
      self.assertIsInstance(params, parameters.PBSParameters)

  def test_catalog_is_read_only(self):
    with self.assertRaises(TypeError):
      presets.PRESETS_BY_NAME['PARAM_MESSAGE_2_CARRY_2'] = None

  def test_default_parameter_set(self):
    param_set = presets.get_default_parameter_set()
    self.assertTrue(param_set.is_bootstrap_only)
    self.assertEqual(
        param_set.bootstrap_parameters, presets.PARAM_MESSAGE_2_CARRY_2
    )
    self.assertEqual(param_set.message_modulus.value, 4)
    self.assertEqual(param_set.carry_modulus.value, 4)


if __name__ == '__main__':
  absltest.main()
