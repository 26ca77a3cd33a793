"""A single configuration handle over PBS and WoPBS parameter sets.

Encryption, key generation and bootstrapping read every parameter through a
ShortintParameterSet, whichever operation mode it was configured for. The
handle wraps exactly one of three shapes:

  * PBS only: a PBSParameters.
  * WoPBS only: a WopbsParameters.
  * PBS and WoPBS: one of each, agreeing on every field in SHARED_FIELDS.

The combined shape checks that agreement when it is built, so an incoherent
combination can never be observed.
"""

import dataclasses
from typing import Optional, Tuple, Union

from shortint.shortint_lib import errors
from shortint.shortint_lib import key_choice
from shortint.shortint_lib import parameters
from shortint.shortint_lib import wopbs_parameters

PBSParameters = parameters.PBSParameters
WopbsParameters = wopbs_parameters.WopbsParameters

# Fields a PBS and a WoPBS parameter set must agree on to be combined.
SHARED_FIELDS = errors.MODULI_FIELDS + errors.KEY_CHOICE_FIELDS


def check_compatibility(
    pbs_params: PBSParameters, wopbs_params: WopbsParameters
) -> Tuple[str, ...]:
  """Returns the names of the SHARED_FIELDS on which the two sets differ."""
  return tuple(
      name
      for name in SHARED_FIELDS
      if getattr(pbs_params, name) != getattr(wopbs_params, name)
  )


def _check_record(name: str, value, expected: type) -> None:
  if not isinstance(value, expected):
    raise TypeError(
        f'{name} must be a {expected.__name__}, got {type(value).__name__}.'
    )


@dataclasses.dataclass(frozen=True)
class _PbsOnly:
  pbs_params: PBSParameters

  def __post_init__(self) -> None:
    _check_record('pbs_params', self.pbs_params, PBSParameters)


@dataclasses.dataclass(frozen=True)
class _WopbsOnly:
  wopbs_params: WopbsParameters

  def __post_init__(self) -> None:
    _check_record('wopbs_params', self.wopbs_params, WopbsParameters)


@dataclasses.dataclass(frozen=True)
class _PbsAndWopbs:
  pbs_params: PBSParameters
  wopbs_params: WopbsParameters

  def __post_init__(self) -> None:
    _check_record('pbs_params', self.pbs_params, PBSParameters)
    _check_record('wopbs_params', self.wopbs_params, WopbsParameters)
    mismatched = check_compatibility(self.pbs_params, self.wopbs_params)
    if mismatched:
      raise errors.IncompatibleParametersError(mismatched)


_Variant = Union[_PbsOnly, _WopbsOnly, _PbsAndWopbs]
_VARIANTS = (_PbsOnly, _WopbsOnly, _PbsAndWopbs)


def _shared_field(name: str) -> property:
  def getter(self: 'ShortintParameterSet'):
    return getattr(self._record, name)

  getter.__name__ = name
  getter.__doc__ = f'The {name} of the configured parameters.'
  return property(getter)


@dataclasses.dataclass(frozen=True)
class ShortintParameterSet:
  """Configuration handle; build it with the from_*/combine class methods."""

  inner: _Variant

  def __post_init__(self) -> None:
    if not isinstance(self.inner, _VARIANTS):
      raise TypeError(
          'ShortintParameterSet must wrap PBS and/or WoPBS parameters, got: '
          f'{type(self.inner).__name__}.'
      )

  @classmethod
  def from_bootstrap(cls, pbs_params: PBSParameters) -> 'ShortintParameterSet':
    return cls(_PbsOnly(pbs_params))

  @classmethod
  def from_extended(
      cls, wopbs_params: WopbsParameters
  ) -> 'ShortintParameterSet':
    return cls(_WopbsOnly(wopbs_params))

  @classmethod
  def combine(
      cls, pbs_params: PBSParameters, wopbs_params: WopbsParameters
  ) -> 'ShortintParameterSet':
    """Builds a handle carrying both a PBS and a WoPBS parameter set.

    Args:
      pbs_params: The PBS parameters.
      wopbs_params: The WoPBS parameters.

    Returns:
      The combined handle.

    Raises:
      IncompatibleParametersError: if the sets disagree on their message
        moduli, carry moduli, ciphertext moduli or encryption key choice.
      TypeError: if either argument is not of the expected record type.
    """
    return cls(_PbsAndWopbs(pbs_params, wopbs_params))

  @property
  def bootstrap_parameters(self) -> Optional[PBSParameters]:
    if isinstance(self.inner, _WopbsOnly):
      return None
    return self.inner.pbs_params

  @property
  def extended_parameters(self) -> Optional[WopbsParameters]:
    if isinstance(self.inner, _PbsOnly):
      return None
    return self.inner.wopbs_params

  @property
  def is_bootstrap_only(self) -> bool:
    return isinstance(self.inner, _PbsOnly)

  @property
  def is_extended_only(self) -> bool:
    return isinstance(self.inner, _WopbsOnly)

  @property
  def is_combined(self) -> bool:
    return isinstance(self.inner, _PbsAndWopbs)

  @property
  def _record(self) -> Union[PBSParameters, WopbsParameters]:
    # For the combined shape the shared fields were checked equal at
    # construction; the remaining fields are read from the PBS set.
    if isinstance(self.inner, _WopbsOnly):
      return self.inner.wopbs_params
    return self.inner.pbs_params

  lwe_dimension = _shared_field('lwe_dimension')
  glwe_dimension = _shared_field('glwe_dimension')
  polynomial_size = _shared_field('polynomial_size')
  lwe_modular_std_dev = _shared_field('lwe_modular_std_dev')
  glwe_modular_std_dev = _shared_field('glwe_modular_std_dev')
  pbs_base_log = _shared_field('pbs_base_log')
  pbs_level = _shared_field('pbs_level')
  ks_base_log = _shared_field('ks_base_log')
  ks_level = _shared_field('ks_level')
  message_modulus = _shared_field('message_modulus')
  carry_modulus = _shared_field('carry_modulus')
  ciphertext_modulus = _shared_field('ciphertext_modulus')
  encryption_key_choice = _shared_field('encryption_key_choice')

  @property
  def pbs_order(self) -> key_choice.PBSOrder:
    return key_choice.pbs_order(self.encryption_key_choice)


ParameterSetLike = Union[
    ShortintParameterSet,
    PBSParameters,
    WopbsParameters,
    Tuple[PBSParameters, WopbsParameters],
]


def as_parameter_set(value: ParameterSetLike) -> ShortintParameterSet:
  """Converts any accepted parameter input into a ShortintParameterSet.

  Args:
    value: A handle (returned as is), a PBSParameters, a WopbsParameters, or a
      (PBSParameters, WopbsParameters) pair.

  Returns:
    The corresponding handle.

  Raises:
    IncompatibleParametersError: if a pair cannot be combined.
    TypeError: for any other input.
  """
  if isinstance(value, ShortintParameterSet):
    return value
  if isinstance(value, PBSParameters):
    return ShortintParameterSet.from_bootstrap(value)
  if isinstance(value, WopbsParameters):
    return ShortintParameterSet.from_extended(value)
  if (
      isinstance(value, tuple)
      and len(value) == 2
      and isinstance(value[0], PBSParameters)
      and isinstance(value[1], WopbsParameters)
  ):
    return ShortintParameterSet.combine(*value)
  raise TypeError(f'Cannot build a ShortintParameterSet from: {value!r}.')
