"""Tests for the nearest-fit parameter resolver."""

import hypothesis
from hypothesis import strategies
from shortint.shortint_lib import errors
from shortint.shortint_params import presets
from shortint.shortint_params import resolver
from absl.testing import absltest
from absl.testing import parameterized

_LOGGER_NAME = resolver.__name__


class RescaleTest(parameterized.TestCase):

  @parameterized.parameters(
      (0, 1), (1, 1), (2, 2), (3, 4), (4, 4), (5, 8), (7, 8), (8, 8),
      (9, 16), (2**40 + 1, 2**41),
  )
  def test_rescale_to_power_of_two(self, space, expected):
    self.assertEqual(resolver.rescale_to_power_of_two(space), expected)

  def test_negative_space_raises(self):
    with self.assertRaises(ValueError):
      resolver.rescale_to_power_of_two(-1)

  @hypothesis.given(strategies.integers(min_value=2, max_value=2**20))
  def test_rescaled_is_smallest_power_of_two_above(self, space: int):
    rescaled = resolver.rescale_to_power_of_two(space)
    self.assertEqual(rescaled & (rescaled - 1), 0)
    self.assertGreaterEqual(rescaled, space)
    self.assertLess(rescaled // 2, space)


class ResolverTest(parameterized.TestCase):

  def test_documented_example(self):
    self.assertEqual(
        resolver.get_parameters_from_message_and_carry(7, 2),
        presets.PARAM_MESSAGE_3_CARRY_1,
    )

  @parameterized.named_parameters(
      dict(testcase_name='_exact', msg_space=4, carry_space=4,
           expected=presets.PARAM_MESSAGE_2_CARRY_2),
      dict(testcase_name='_rounded_up', msg_space=3, carry_space=5,
           expected=presets.PARAM_MESSAGE_2_CARRY_3),
      dict(testcase_name='_largest_message', msg_space=100, carry_space=2,
           expected=presets.PARAM_MESSAGE_7_CARRY_1),
      dict(testcase_name='_largest_carry', msg_space=2, carry_space=128,
           expected=presets.PARAM_MESSAGE_1_CARRY_7),
  )
  def test_match(self, msg_space, carry_space, expected):
    with self.assertNoLogs(_LOGGER_NAME):
      params = resolver.get_parameters_from_message_and_carry(
          msg_space, carry_space
      )
    self.assertEqual(params, expected)

  @parameterized.named_parameters(
      dict(testcase_name='_message_of_one', msg_space=1, carry_space=1),
      dict(testcase_name='_no_carry_space', msg_space=5, carry_space=1),
      dict(testcase_name='_zero_carry', msg_space=4, carry_space=0),
      dict(testcase_name='_too_large', msg_space=256, carry_space=4),
  )
  def test_fallback_warns(self, msg_space, carry_space):
    with self.assertLogs(_LOGGER_NAME, level='WARNING') as logs:
      params = resolver.get_parameters_from_message_and_carry(
          msg_space, carry_space
      )
    self.assertIs(params, resolver.FALLBACK_PARAMETERS)
    self.assertEqual(params, presets.PARAM_MESSAGE_2_CARRY_2)
    self.assertLen(logs.records, 1)
    self.assertIn('No parameters found', logs.output[0])

  def test_fallback_names_rescaled_request(self):
    with self.assertLogs(_LOGGER_NAME, level='WARNING') as logs:
      resolver.get_parameters_from_message_and_carry(5, 1)
    self.assertIn('msg_space = 8 and carry_space = 1', logs.output[0])

  def test_strict_raises(self):
    with self.assertRaises(errors.NoMatchingPresetError) as cm:
      resolver.get_parameters_from_message_and_carry(1, 1, strict=True)
    self.assertEqual(cm.exception.message_space, 1)
    self.assertEqual(cm.exception.carry_space, 1)

  def test_strict_match(self):
    self.assertEqual(
        resolver.get_parameters_from_message_and_carry(7, 2, strict=True),
        presets.PARAM_MESSAGE_3_CARRY_1,
    )

  @hypothesis.settings(deadline=None)
  @hypothesis.given(
      strategies.integers(min_value=0, max_value=300),
      strategies.integers(min_value=0, max_value=300),
  )
  def test_idempotent(self, msg_space: int, carry_space: int):
    first = resolver.get_parameters_from_message_and_carry(
        msg_space, carry_space
    )
    second = resolver.get_parameters_from_message_and_carry(
        msg_space, carry_space
    )
    self.assertIs(first, second)

  @hypothesis.settings(deadline=None)
  @hypothesis.given(strategies.sampled_from(presets.ALL_PARAMETER_VEC))
  def test_every_catalog_entry_is_reachable(self, params):
    self.assertIs(
        resolver.get_parameters_from_message_and_carry(
            params.message_modulus.value, params.carry_modulus.value
        ),
        params,
    )


if __name__ == '__main__':
  absltest.main()
