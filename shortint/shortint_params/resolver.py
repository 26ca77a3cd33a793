"""Maps a desired plaintext capacity to a vetted parameter set."""

import logging

from shortint.shortint_lib import errors
from shortint.shortint_lib import parameters
from shortint.shortint_params import presets

logger = logging.getLogger(__name__)

# Returned when no preset matches a request. It is not tuned for the request
# and callers must not treat it as a match.
FALLBACK_PARAMETERS = presets.PARAM_MESSAGE_2_CARRY_2


def rescale_to_power_of_two(space: int) -> int:
  """Rounds a plaintext space up to the next power of two.

  Spaces of 0 and 1 both round to 2^0 = 1.

  Args:
    space: The number of distinct values to hold.

  Returns:
    2^ceil(log2(space)), or 1 if space <= 1.

  Raises:
    ValueError: if space is negative.
  """
  if space < 0:
    raise ValueError(f'Plaintext space must be >= 0, got {space}.')
  if space <= 1:
    return 1
  return 1 << (space - 1).bit_length()


def get_parameters_from_message_and_carry(
    msg_space: int, carry_space: int, strict: bool = False
) -> parameters.PBSParameters:
  """Returns the preset whose moduli fit the given message and carry spaces.

  Both spaces are first rounded up to a power of two, then the first preset of
  presets.ALL_PARAMETER_VEC with exactly those moduli is returned. For example
  a message space of 7 and a carry space of 2 give PARAM_MESSAGE_3_CARRY_1.

  Args:
    msg_space: The number of message values to hold.
    carry_space: The number of carry values to hold.
    strict: If True, raise instead of falling back when no preset matches.

  Returns:
    The matching preset, or FALLBACK_PARAMETERS if there is none.

  Raises:
    NoMatchingPresetError: if strict and no preset matches.
  """
  rescaled_message_space = rescale_to_power_of_two(msg_space)
  rescaled_carry_space = rescale_to_power_of_two(carry_space)

  for params in presets.ALL_PARAMETER_VEC:
    if (
        params.message_modulus.value == rescaled_message_space
        and params.carry_modulus.value == rescaled_carry_space
    ):
      return params

  if strict:
    raise errors.NoMatchingPresetError(
        rescaled_message_space, rescaled_carry_space
    )
  logger.warning(
      'No parameters found for msg_space = %d and carry_space = %d, falling '
      'back to %s',
      rescaled_message_space,
      rescaled_carry_space,
      presets.preset_description(FALLBACK_PARAMETERS),
  )
  return FALLBACK_PARAMETERS
