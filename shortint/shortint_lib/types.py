"""Scalar types for shortint parameters."""

import dataclasses
from typing import NewType

import numpy as np

LweDimension = NewType('LweDimension', int)
GlweDimension = NewType('GlweDimension', int)
PolynomialSize = NewType('PolynomialSize', int)
DecompositionBaseLog = NewType('DecompositionBaseLog', int)
DecompositionLevelCount = NewType('DecompositionLevelCount', int)

# Ciphertexts are stored in unsigned 64-bit words.
NATIVE_WORD_DTYPE = np.uint64


def is_power_of_two(value: int) -> bool:
  return value > 0 and value & (value - 1) == 0


def _check_int(name: str, value) -> None:
  if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
    raise TypeError(f'{name} must be an int, got {type(value).__name__}.')


def _check_power_of_two(name: str, value: int) -> None:
  _check_int(name, value)
  if not is_power_of_two(int(value)):
    raise ValueError(f'{name} must be a positive power of two, got {value}.')


@dataclasses.dataclass(frozen=True)
class MessageModulus:
  """The number of distinct values the message part of a plaintext holds.

  A message modulus of 2^X encodes messages over X bits.
  """

  value: int

  # log2(value)
  bit_length: int = dataclasses.field(init=False, compare=False, repr=False)

  def __post_init__(self) -> None:
    _check_power_of_two('Message modulus', self.value)
    object.__setattr__(self, 'value', int(self.value))
    object.__setattr__(self, 'bit_length', self.value.bit_length() - 1)


@dataclasses.dataclass(frozen=True)
class CarryModulus:
  """The number of distinct values the carry part of a plaintext holds.

  A carry modulus of 2^Y leaves Y bits of headroom above the message. A
  carry modulus of 1 means there is no carry space at all.
  """

  value: int

  # log2(value)
  bit_length: int = dataclasses.field(init=False, compare=False, repr=False)

  def __post_init__(self) -> None:
    _check_power_of_two('Carry modulus', self.value)
    object.__setattr__(self, 'value', int(self.value))
    object.__setattr__(self, 'bit_length', self.value.bit_length() - 1)


@dataclasses.dataclass(frozen=True)
class CiphertextModulus:
  """The modulus q ciphertext coefficients are reduced under."""

  value: int

  def __post_init__(self) -> None:
    _check_int('Ciphertext modulus', self.value)
    object.__setattr__(self, 'value', int(self.value))
    native = _native_modulus_value()
    if not 1 < self.value <= native:
      raise ValueError(
          f'Ciphertext modulus must be in (1, {native}], got {self.value}.'
      )

  @classmethod
  def native(cls, dtype=NATIVE_WORD_DTYPE) -> 'CiphertextModulus':
    """The modulus given by wrapping arithmetic on an unsigned word dtype."""
    return cls(2 ** np.iinfo(dtype).bits)

  @property
  def is_native(self) -> bool:
    return self.value == _native_modulus_value()

  @property
  def is_power_of_two(self) -> bool:
    return is_power_of_two(self.value)

  @property
  def bit_length(self) -> int:
    """The number of bits needed to hold a coefficient mod q."""
    return (self.value - 1).bit_length()


def _native_modulus_value() -> int:
  return 2 ** np.iinfo(NATIVE_WORD_DTYPE).bits
