"""Parameters for a programmable-bootstrap (PBS) shortint pipeline."""

import dataclasses
import math
from typing import Any, Iterable

from shortint.shortint_lib import decomposition
from shortint.shortint_lib import key_choice
from shortint.shortint_lib import types


def _check_positive_int(name: str, value: Any) -> None:
  if isinstance(value, bool) or not isinstance(value, int):
    raise TypeError(f'{name} must be an int, got {type(value).__name__}.')
  if value < 1:
    raise ValueError(f'{name} must be >= 1, got {value}.')


def _check_std_dev(name: str, value: Any) -> None:
  if isinstance(value, bool) or not isinstance(value, (int, float)):
    raise TypeError(f'{name} must be a float, got {type(value).__name__}.')
  # expressed as a fraction of the ciphertext modulus
  if not math.isfinite(value) or not 0 < value < 1:
    raise ValueError(f'{name} must be in (0, 1), got {value}.')


def _check_instance(name: str, value: Any, expected: type) -> None:
  if not isinstance(value, expected):
    raise TypeError(
        f'{name} must be a {expected.__name__}, got {type(value).__name__}.'
    )


def validate_record(
    record: Any, int_fields: Iterable[str], std_dev_fields: Iterable[str]
) -> None:
  """Checks the fields common to every shortint parameter record.

  Args:
    record: A PBSParameters or WopbsParameters instance.
    int_fields: Names of fields that must be positive ints.
    std_dev_fields: Names of noise standard deviation fields.

  Raises:
    TypeError: if a field has the wrong type.
    ValueError: if a field is out of range.
  """
  for name in int_fields:
    _check_positive_int(name, getattr(record, name))
  if not types.is_power_of_two(record.polynomial_size):
    raise ValueError(
        f'polynomial_size must be a power of two, got {record.polynomial_size}.'
    )
  for name in std_dev_fields:
    _check_std_dev(name, getattr(record, name))
  _check_instance('message_modulus', record.message_modulus,
                  types.MessageModulus)
  _check_instance('carry_modulus', record.carry_modulus, types.CarryModulus)
  _check_instance('ciphertext_modulus', record.ciphertext_modulus,
                  types.CiphertextModulus)
  _check_instance('encryption_key_choice', record.encryption_key_choice,
                  key_choice.EncryptionKeyChoice)


@dataclasses.dataclass(frozen=True)
class PBSParameters:
  """Every value needed to run one bootstrap + keyswitch pipeline.

  Failing to fix these parameters properly yields incorrect and insecure
  computation. Unless you know the impact of each of them, stick with the
  vetted presets in shortint_params.presets.
  """

  # dimension of the small LWE secret key
  lwe_dimension: types.LweDimension

  # dimension of the GLWE secret key; together with polynomial_size it
  # defines the big LWE key of dimension glwe_dimension * polynomial_size
  glwe_dimension: types.GlweDimension

  # N in the polynomial modulus x^N + 1
  polynomial_size: types.PolynomialSize

  # noise standard deviations, as a fraction of the ciphertext modulus
  lwe_modular_std_dev: float
  glwe_modular_std_dev: float

  # gadget decomposition of the bootstrapping key
  pbs_base_log: types.DecompositionBaseLog
  pbs_level: types.DecompositionLevelCount

  # gadget decomposition of the keyswitching key
  ks_base_log: types.DecompositionBaseLog
  ks_level: types.DecompositionLevelCount

  message_modulus: types.MessageModulus
  carry_modulus: types.CarryModulus
  ciphertext_modulus: types.CiphertextModulus
  encryption_key_choice: key_choice.EncryptionKeyChoice

  def __post_init__(self) -> None:
    validate_record(
        self,
        int_fields=(
            'lwe_dimension',
            'glwe_dimension',
            'polynomial_size',
            'pbs_base_log',
            'pbs_level',
            'ks_base_log',
            'ks_level',
        ),
        std_dev_fields=('lwe_modular_std_dev', 'glwe_modular_std_dev'),
    )

  @property
  def pbs_decomp_params(self) -> decomposition.DecompositionParameters:
    return decomposition.DecompositionParameters(
        log_base=self.pbs_base_log,
        level_count=self.pbs_level,
        total_bit_length=self.ciphertext_modulus.bit_length,
    )

  @property
  def ks_decomp_params(self) -> decomposition.DecompositionParameters:
    return decomposition.DecompositionParameters(
        log_base=self.ks_base_log,
        level_count=self.ks_level,
        total_bit_length=self.ciphertext_modulus.bit_length,
    )

  @property
  def pbs_order(self) -> key_choice.PBSOrder:
    return key_choice.pbs_order(self.encryption_key_choice)
