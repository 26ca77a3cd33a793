"""Gadget decomposition parameters for bootstrapping and key switching."""

import dataclasses


@dataclasses.dataclass(frozen=True)
class DecompositionParameters:
  """The parameters to a bit decomposition subroutine.

  Let B = 2^log_base. A bit decomposition computes the first level_count
  digits of the base-B representation of a number, which also clears
  lower-order bits. In the context of TFHE, those lower-order bits contain
  noise and can be safely ignored.

  Whether a (log_base, level_count) pair keeps noise growth acceptable is a
  property of the vetted parameter set; only the structural bounds are checked
  here.
  """

  log_base: int
  level_count: int
  total_bit_length: int = 64

  def __post_init__(self) -> None:
    if self.log_base < 1:
      raise ValueError(f'Decomposition log base must be >= 1: {self.log_base}')
    if self.level_count < 1:
      raise ValueError(
          f'Decomposition level count must be >= 1: {self.level_count}'
      )
    if self.precision_bits > self.total_bit_length:
      raise ValueError(
          'Bad params. log_base * level_count must not exceed '
          f'total_bit_length. Instead found log_base={self.log_base}, '
          f'level_count={self.level_count}, '
          f'total_bit_length={self.total_bit_length}'
      )

  @property
  def base(self) -> int:
    return 2**self.log_base

  @property
  def precision_bits(self) -> int:
    """Number of most significant bits kept by the decomposition."""
    return self.log_base * self.level_count
