"""Choice of input encryption key and the resulting PBS pipeline order."""

import enum


class EncryptionKeyChoice(enum.Enum):
  """The secret key used to encrypt caller-provided ciphertexts.

  * BIG: the big LWE key derived from the GLWE key encrypts inputs. Faster,
    but the public key can get very large. Refreshing a ciphertext or
    evaluating a table lookup computes the PBS first, then a keyswitch.
  * SMALL: the small LWE key encrypts inputs. Slower, with much smaller
    public keys. The keyswitch is computed first, then the PBS.
  """

  BIG = 'big'
  SMALL = 'small'


class PBSOrder(enum.Enum):
  """Stage order of the bootstrap + keyswitch pipeline."""

  BOOTSTRAP_KEYSWITCH = 'bootstrap_keyswitch'
  KEYSWITCH_BOOTSTRAP = 'keyswitch_bootstrap'


_ORDER_FOR_KEY_CHOICE = {
    EncryptionKeyChoice.BIG: PBSOrder.BOOTSTRAP_KEYSWITCH,
    EncryptionKeyChoice.SMALL: PBSOrder.KEYSWITCH_BOOTSTRAP,
}
_KEY_CHOICE_FOR_ORDER = {v: k for k, v in _ORDER_FOR_KEY_CHOICE.items()}


def pbs_order(choice: EncryptionKeyChoice) -> PBSOrder:
  """Returns the pipeline order used for inputs encrypted under `choice`."""
  if not isinstance(choice, EncryptionKeyChoice):
    raise TypeError(f'Expected an EncryptionKeyChoice, got: {choice!r}.')
  return _ORDER_FOR_KEY_CHOICE[choice]


def key_choice_for_order(order: PBSOrder) -> EncryptionKeyChoice:
  """Inverse of pbs_order."""
  if not isinstance(order, PBSOrder):
    raise TypeError(f'Expected a PBSOrder, got: {order!r}.')
  return _KEY_CHOICE_FOR_ORDER[order]
