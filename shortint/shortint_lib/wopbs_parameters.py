"""Parameters for shortint operations without padding (WoPBS).

A WoPBS parameter set drives circuit bootstrapping and the vertical packing of
lookup tables. It is vetted independently from the PBS presets; it only needs
to agree with a PBS parameter set on the plaintext encoding and the input key
to be combined with it (see parameter_set.ShortintParameterSet.combine).
"""

import dataclasses

from shortint.shortint_lib import decomposition
from shortint.shortint_lib import key_choice
from shortint.shortint_lib import parameters
from shortint.shortint_lib import types


@dataclasses.dataclass(frozen=True)
class WopbsParameters:
  """Parameters for shortint operations without padding."""

  lwe_dimension: types.LweDimension
  glwe_dimension: types.GlweDimension
  polynomial_size: types.PolynomialSize
  lwe_modular_std_dev: float
  glwe_modular_std_dev: float
  pbs_base_log: types.DecompositionBaseLog
  pbs_level: types.DecompositionLevelCount
  ks_base_log: types.DecompositionBaseLog
  ks_level: types.DecompositionLevelCount

  # private functional packing keyswitch
  pfks_base_log: types.DecompositionBaseLog
  pfks_level: types.DecompositionLevelCount
  pfks_modular_std_dev: float

  # circuit bootstrap
  cbs_base_log: types.DecompositionBaseLog
  cbs_level: types.DecompositionLevelCount

  message_modulus: types.MessageModulus
  carry_modulus: types.CarryModulus
  ciphertext_modulus: types.CiphertextModulus
  encryption_key_choice: key_choice.EncryptionKeyChoice

  def __post_init__(self) -> None:
    parameters.validate_record(
        self,
        int_fields=(
            'lwe_dimension',
            'glwe_dimension',
            'polynomial_size',
            'pbs_base_log',
            'pbs_level',
            'ks_base_log',
            'ks_level',
            'pfks_base_log',
            'pfks_level',
            'cbs_base_log',
            'cbs_level',
        ),
        std_dev_fields=(
            'lwe_modular_std_dev',
            'glwe_modular_std_dev',
            'pfks_modular_std_dev',
        ),
    )

  @property
  def pfks_decomp_params(self) -> decomposition.DecompositionParameters:
    return decomposition.DecompositionParameters(
        log_base=self.pfks_base_log,
        level_count=self.pfks_level,
        total_bit_length=self.ciphertext_modulus.bit_length,
    )

  @property
  def cbs_decomp_params(self) -> decomposition.DecompositionParameters:
    return decomposition.DecompositionParameters(
        log_base=self.cbs_base_log,
        level_count=self.cbs_level,
        total_bit_length=self.ciphertext_modulus.bit_length,
    )
