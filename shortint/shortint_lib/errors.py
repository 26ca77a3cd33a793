"""Errors raised while building a shortint parameter configuration."""

from typing import Sequence, Tuple

MODULI_FIELDS = ('message_modulus', 'carry_modulus', 'ciphertext_modulus')
KEY_CHOICE_FIELDS = ('encryption_key_choice',)


class ConfigError(ValueError):
  """Base class for caller-correctable configuration mistakes."""


class IncompatibleParametersError(ConfigError):
  """A PBS and a WoPBS parameter set disagree on a shared field.

  Attributes:
    mismatched_fields: The names of the shared fields that differ.
    field_classes: The classes of the mismatched fields, a subset of
      ('moduli', 'key choice').
  """

  def __init__(self, mismatched_fields: Sequence[str]) -> None:
    self.mismatched_fields: Tuple[str, ...] = tuple(mismatched_fields)
    classes = []
    if any(f in MODULI_FIELDS for f in self.mismatched_fields):
      classes.append('moduli')
    if any(f in KEY_CHOICE_FIELDS for f in self.mismatched_fields):
      classes.append('key choice')
    self.field_classes: Tuple[str, ...] = tuple(classes)
    super().__init__(
        'Incompatible PBSParameters and WopbsParameters: mismatched '
        f'{" and ".join(self.field_classes)} '
        f'({", ".join(self.mismatched_fields)}).'
    )


class NoMatchingPresetError(ConfigError):
  """No vetted preset has the requested (rescaled) message and carry moduli."""

  def __init__(self, message_space: int, carry_space: int) -> None:
    self.message_space = message_space
    self.carry_space = carry_space
    super().__init__(
        f'No parameters found for msg_space = {message_space} and '
        f'carry_space = {carry_space}.'
    )
