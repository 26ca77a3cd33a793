"""Vetted shortint parameter sets.

Nomenclature: PARAM_MESSAGE_X_CARRY_Y: the message (respectively carry) modulus
is encoded over X (resp. Y) bits, i.e., message_modulus = 2^X (resp.
carry_modulus = 2^Y). The PARAM_SMALL_* sets encrypt inputs under the small LWE
key.

All parameter sets guarantee 128 bits of security and an error probability
smaller than 2^-40 for a PBS. Changing any literal below invalidates that
analysis.
"""

from types import MappingProxyType
from typing import Mapping

from shortint.shortint_lib import key_choice
from shortint.shortint_lib import parameter_set
from shortint.shortint_lib import parameters
from shortint.shortint_lib import types

NATIVE_CIPHERTEXT_MODULUS = types.CiphertextModulus.native()

PARAM_MESSAGE_1_CARRY_0 = parameters.PBSParameters(
    lwe_dimension=678,
    glwe_dimension=5,
    polynomial_size=256,
    lwe_modular_std_dev=0.000022810107419132102,
    glwe_modular_std_dev=0.00000000037411618952047216,
    pbs_base_log=15,
    pbs_level=1,
    ks_level=2,
    ks_base_log=5,
    message_modulus=types.MessageModulus(2),
    carry_modulus=types.CarryModulus(1),
    ciphertext_modulus=NATIVE_CIPHERTEXT_MODULUS,
    encryption_key_choice=key_choice.EncryptionKeyChoice.BIG,
)

PARAM_MESSAGE_1_CARRY_1 = parameters.PBSParameters(
    lwe_dimension=684,
    glwe_dimension=3,
    polynomial_size=512,
    lwe_modular_std_dev=0.00002043784477291318,
    glwe_modular_std_dev=0.0000000000034525330484572114,
    pbs_base_log=18,
    pbs_level=1,
    ks_level=3,
    ks_base_log=4,
    message_modulus=types.MessageModulus(2),
    carry_modulus=types.CarryModulus(2),
    ciphertext_modulus=NATIVE_CIPHERTEXT_MODULUS,
    encryption_key_choice=key_choice.EncryptionKeyChoice.BIG,
)

PARAM_MESSAGE_2_CARRY_0 = parameters.PBSParameters(
    lwe_dimension=656,
    glwe_dimension=2,
    polynomial_size=512,
    lwe_modular_std_dev=0.000034119201269311964,
    glwe_modular_std_dev=0.00000004053919869756513,
    pbs_base_log=8,
    pbs_level=2,
    ks_level=4,
    ks_base_log=3,
    message_modulus=types.MessageModulus(4),
    carry_modulus=types.CarryModulus(1),
    ciphertext_modulus=NATIVE_CIPHERTEXT_MODULUS,
    encryption_key_choice=key_choice.EncryptionKeyChoice.BIG,
)

PARAM_MESSAGE_1_CARRY_2 = parameters.PBSParameters(
    lwe_dimension=742,
    glwe_dimension=2,
    polynomial_size=1024,
    lwe_modular_std_dev=0.000007069849454709433,
    glwe_modular_std_dev=0.00000000000000029403601535432533,
    pbs_base_log=23,
    pbs_level=1,
    ks_level=3,
    ks_base_log=4,
    message_modulus=types.MessageModulus(2),
    carry_modulus=types.CarryModulus(4),
    ciphertext_modulus=NATIVE_CIPHERTEXT_MODULUS,
    encryption_key_choice=key_choice.EncryptionKeyChoice.BIG,
)

PARAM_MESSAGE_2_CARRY_1 = parameters.PBSParameters(
    lwe_dimension=742,
    glwe_dimension=2,
    polynomial_size=1024,
    lwe_modular_std_dev=0.000007069849454709433,
    glwe_modular_std_dev=0.00000000000000029403601535432533,
    pbs_base_log=23,
    pbs_level=1,
    ks_level=3,
    ks_base_log=4,
    message_modulus=types.MessageModulus(4),
    carry_modulus=types.CarryModulus(2),
    ciphertext_modulus=NATIVE_CIPHERTEXT_MODULUS,
    encryption_key_choice=key_choice.EncryptionKeyChoice.BIG,
)

PARAM_MESSAGE_3_CARRY_0 = parameters.PBSParameters(
    lwe_dimension=742,
    glwe_dimension=2,
    polynomial_size=1024,
    lwe_modular_std_dev=0.000007069849454709433,
    glwe_modular_std_dev=0.00000000000000029403601535432533,
    pbs_base_log=23,
    pbs_level=1,
    ks_level=3,
    ks_base_log=4,
    message_modulus=types.MessageModulus(8),
    carry_modulus=types.CarryModulus(1),
    ciphertext_modulus=NATIVE_CIPHERTEXT_MODULUS,
    encryption_key_choice=key_choice.EncryptionKeyChoice.BIG,
)

PARAM_MESSAGE_1_CARRY_3 = parameters.PBSParameters(
    lwe_dimension=745,
    glwe_dimension=1,
    polynomial_size=2048,
    lwe_modular_std_dev=0.000006692125069956277,
    glwe_modular_std_dev=0.00000000000000029403601535432533,
    pbs_base_log=23,
    pbs_level=1,
    ks_level=5,
    ks_base_log=3,
    message_modulus=types.MessageModulus(2),
    carry_modulus=types.CarryModulus(8),
    ciphertext_modulus=NATIVE_CIPHERTEXT_MODULUS,
    encryption_key_choice=key_choice.EncryptionKeyChoice.BIG,
)

PARAM_MESSAGE_2_CARRY_2 = parameters.PBSParameters(
    lwe_dimension=742,
    glwe_dimension=1,
    polynomial_size=2048,
    lwe_modular_std_dev=0.000007069849454709433,
    glwe_modular_std_dev=0.00000000000000029403601535432533,
    pbs_base_log=23,
    pbs_level=1,
    ks_level=5,
    ks_base_log=3,
    message_modulus=types.MessageModulus(4),
    carry_modulus=types.CarryModulus(4),
    ciphertext_modulus=NATIVE_CIPHERTEXT_MODULUS,
    encryption_key_choice=key_choice.EncryptionKeyChoice.BIG,
)

PARAM_MESSAGE_3_CARRY_1 = parameters.PBSParameters(
    lwe_dimension=742,
    glwe_dimension=1,
    polynomial_size=2048,
    lwe_modular_std_dev=0.000007069849454709433,
    glwe_modular_std_dev=0.00000000000000029403601535432533,
    pbs_base_log=23,
    pbs_level=1,
    ks_level=5,
    ks_base_log=3,
    message_modulus=types.MessageModulus(8),
    carry_modulus=types.CarryModulus(2),
    ciphertext_modulus=NATIVE_CIPHERTEXT_MODULUS,
    encryption_key_choice=key_choice.EncryptionKeyChoice.BIG,
)

PARAM_MESSAGE_4_CARRY_0 = parameters.PBSParameters(
    lwe_dimension=742,
    glwe_dimension=1,
    polynomial_size=2048,
    lwe_modular_std_dev=0.000007069849454709433,
    glwe_modular_std_dev=0.00000000000000029403601535432533,
    pbs_base_log=23,
    pbs_level=1,
    ks_level=5,
    ks_base_log=3,
    message_modulus=types.MessageModulus(16),
    carry_modulus=types.CarryModulus(1),
    ciphertext_modulus=NATIVE_CIPHERTEXT_MODULUS,
    encryption_key_choice=key_choice.EncryptionKeyChoice.BIG,
)

PARAM_MESSAGE_1_CARRY_4 = parameters.PBSParameters(
    lwe_dimension=807,
    glwe_dimension=1,
    polynomial_size=4096,
    lwe_modular_std_dev=0.0000021515145918907506,
    glwe_modular_std_dev=0.0000000000000000002168404344971009,
    pbs_base_log=15,
    pbs_level=2,
    ks_level=5,
    ks_base_log=3,
    message_modulus=types.MessageModulus(2),
    carry_modulus=types.CarryModulus(16),
    ciphertext_modulus=NATIVE_CIPHERTEXT_MODULUS,
    encryption_key_choice=key_choice.EncryptionKeyChoice.BIG,
)

PARAM_MESSAGE_2_CARRY_3 = parameters.PBSParameters(
    lwe_dimension=856,
    glwe_dimension=1,
    polynomial_size=4096,
    lwe_modular_std_dev=0.0000008775214009854235,
    glwe_modular_std_dev=0.0000000000000000002168404344971009,
    pbs_base_log=22,
    pbs_level=1,
    ks_level=6,
    ks_base_log=3,
    message_modulus=types.MessageModulus(4),
    carry_modulus=types.CarryModulus(8),
    ciphertext_modulus=NATIVE_CIPHERTEXT_MODULUS,
    encryption_key_choice=key_choice.EncryptionKeyChoice.BIG,
)

PARAM_MESSAGE_3_CARRY_2 = parameters.PBSParameters(
    lwe_dimension=812,
    glwe_dimension=1,
    polynomial_size=4096,
    lwe_modular_std_dev=0.0000019633637461248447,
    glwe_modular_std_dev=0.0000000000000000002168404344971009,
    pbs_base_log=22,
    pbs_level=1,
    ks_level=5,
    ks_base_log=3,
    message_modulus=types.MessageModulus(8),
    carry_modulus=types.CarryModulus(4),
    ciphertext_modulus=NATIVE_CIPHERTEXT_MODULUS,
    encryption_key_choice=key_choice.EncryptionKeyChoice.BIG,
)

PARAM_MESSAGE_4_CARRY_1 = parameters.PBSParameters(
    lwe_dimension=808,
    glwe_dimension=1,
    polynomial_size=4096,
    lwe_modular_std_dev=0.0000021124945159091033,
    glwe_modular_std_dev=0.0000000000000000002168404344971009,
    pbs_base_log=22,
    pbs_level=1,
    ks_level=5,
    ks_base_log=3,
    message_modulus=types.MessageModulus(16),
    carry_modulus=types.CarryModulus(2),
    ciphertext_modulus=NATIVE_CIPHERTEXT_MODULUS,
    encryption_key_choice=key_choice.EncryptionKeyChoice.BIG,
)

PARAM_MESSAGE_5_CARRY_0 = parameters.PBSParameters(
    lwe_dimension=807,
    glwe_dimension=1,
    polynomial_size=4096,
    lwe_modular_std_dev=0.0000021515145918907506,
    glwe_modular_std_dev=0.0000000000000000002168404344971009,
    pbs_base_log=22,
    pbs_level=1,
    ks_level=5,
    ks_base_log=3,
    message_modulus=types.MessageModulus(32),
    carry_modulus=types.CarryModulus(1),
    ciphertext_modulus=NATIVE_CIPHERTEXT_MODULUS,
    encryption_key_choice=key_choice.EncryptionKeyChoice.BIG,
)

PARAM_MESSAGE_1_CARRY_5 = parameters.PBSParameters(
    lwe_dimension=864,
    glwe_dimension=1,
    polynomial_size=8192,
    lwe_modular_std_dev=0.000000757998020150446,
    glwe_modular_std_dev=0.0000000000000000002168404344971009,
    pbs_base_log=15,
    pbs_level=2,
    ks_level=6,
    ks_base_log=3,
    message_modulus=types.MessageModulus(2),
    carry_modulus=types.CarryModulus(32),
    ciphertext_modulus=NATIVE_CIPHERTEXT_MODULUS,
    encryption_key_choice=key_choice.EncryptionKeyChoice.BIG,
)

PARAM_MESSAGE_2_CARRY_4 = parameters.PBSParameters(
    lwe_dimension=864,
    glwe_dimension=1,
    polynomial_size=8192,
    lwe_modular_std_dev=0.000000757998020150446,
    glwe_modular_std_dev=0.0000000000000000002168404344971009,
    pbs_base_log=15,
    pbs_level=2,
    ks_level=6,
    ks_base_log=3,
    message_modulus=types.MessageModulus(4),
    carry_modulus=types.CarryModulus(16),
    ciphertext_modulus=NATIVE_CIPHERTEXT_MODULUS,
    encryption_key_choice=key_choice.EncryptionKeyChoice.BIG,
)

PARAM_MESSAGE_3_CARRY_3 = parameters.PBSParameters(
    lwe_dimension=864,
    glwe_dimension=1,
    polynomial_size=8192,
    lwe_modular_std_dev=0.000000757998020150446,
    glwe_modular_std_dev=0.0000000000000000002168404344971009,
    pbs_base_log=15,
    pbs_level=2,
    ks_level=6,
    ks_base_log=3,
    message_modulus=types.MessageModulus(8),
    carry_modulus=types.CarryModulus(8),
    ciphertext_modulus=NATIVE_CIPHERTEXT_MODULUS,
    encryption_key_choice=key_choice.EncryptionKeyChoice.BIG,
)

PARAM_MESSAGE_4_CARRY_2 = parameters.PBSParameters(
    lwe_dimension=864,
    glwe_dimension=1,
    polynomial_size=8192,
    lwe_modular_std_dev=0.000000757998020150446,
    glwe_modular_std_dev=0.0000000000000000002168404344971009,
    pbs_base_log=15,
    pbs_level=2,
    ks_level=6,
    ks_base_log=3,
    message_modulus=types.MessageModulus(16),
    carry_modulus=types.CarryModulus(4),
    ciphertext_modulus=NATIVE_CIPHERTEXT_MODULUS,
    encryption_key_choice=key_choice.EncryptionKeyChoice.BIG,
)

PARAM_MESSAGE_5_CARRY_1 = parameters.PBSParameters(
    lwe_dimension=875,
    glwe_dimension=1,
    polynomial_size=8192,
    lwe_modular_std_dev=0.0000006197725091905067,
    glwe_modular_std_dev=0.0000000000000000002168404344971009,
    pbs_base_log=22,
    pbs_level=1,
    ks_level=6,
    ks_base_log=3,
    message_modulus=types.MessageModulus(32),
    carry_modulus=types.CarryModulus(2),
    ciphertext_modulus=NATIVE_CIPHERTEXT_MODULUS,
    encryption_key_choice=key_choice.EncryptionKeyChoice.BIG,
)

PARAM_MESSAGE_6_CARRY_0 = parameters.PBSParameters(
    lwe_dimension=915,
    glwe_dimension=1,
    polynomial_size=8192,
    lwe_modular_std_dev=0.00000029804653749339636,
    glwe_modular_std_dev=0.0000000000000000002168404344971009,
    pbs_base_log=22,
    pbs_level=1,
    ks_level=4,
    ks_base_log=4,
    message_modulus=types.MessageModulus(64),
    carry_modulus=types.CarryModulus(1),
    ciphertext_modulus=NATIVE_CIPHERTEXT_MODULUS,
    encryption_key_choice=key_choice.EncryptionKeyChoice.BIG,
)

PARAM_MESSAGE_1_CARRY_6 = parameters.PBSParameters(
    lwe_dimension=930,
    glwe_dimension=1,
    polynomial_size=16384,
    lwe_modular_std_dev=0.00000022649232786295453,
    glwe_modular_std_dev=0.0000000000000000002168404344971009,
    pbs_base_log=11,
    pbs_level=3,
    ks_level=6,
    ks_base_log=3,
    message_modulus=types.MessageModulus(2),
    carry_modulus=types.CarryModulus(64),
    ciphertext_modulus=NATIVE_CIPHERTEXT_MODULUS,
    encryption_key_choice=key_choice.EncryptionKeyChoice.BIG,
)

PARAM_MESSAGE_2_CARRY_5 = parameters.PBSParameters(
    lwe_dimension=934,
    glwe_dimension=1,
    polynomial_size=16384,
    lwe_modular_std_dev=0.00000021050318566634375,
    glwe_modular_std_dev=0.0000000000000000002168404344971009,
    pbs_base_log=15,
    pbs_level=2,
    ks_level=6,
    ks_base_log=3,
    message_modulus=types.MessageModulus(4),
    carry_modulus=types.CarryModulus(32),
    ciphertext_modulus=NATIVE_CIPHERTEXT_MODULUS,
    encryption_key_choice=key_choice.EncryptionKeyChoice.BIG,
)

PARAM_MESSAGE_3_CARRY_4 = parameters.PBSParameters(
    lwe_dimension=930,
    glwe_dimension=1,
    polynomial_size=16384,
    lwe_modular_std_dev=0.00000022649232786295453,
    glwe_modular_std_dev=0.0000000000000000002168404344971009,
    pbs_base_log=15,
    pbs_level=2,
    ks_level=6,
    ks_base_log=3,
    message_modulus=types.MessageModulus(8),
    carry_modulus=types.CarryModulus(16),
    ciphertext_modulus=NATIVE_CIPHERTEXT_MODULUS,
    encryption_key_choice=key_choice.EncryptionKeyChoice.BIG,
)

PARAM_MESSAGE_4_CARRY_3 = parameters.PBSParameters(
    lwe_dimension=930,
    glwe_dimension=1,
    polynomial_size=16384,
    lwe_modular_std_dev=0.00000022649232786295453,
    glwe_modular_std_dev=0.0000000000000000002168404344971009,
    pbs_base_log=15,
    pbs_level=2,
    ks_level=6,
    ks_base_log=3,
    message_modulus=types.MessageModulus(16),
    carry_modulus=types.CarryModulus(8),
    ciphertext_modulus=NATIVE_CIPHERTEXT_MODULUS,
    encryption_key_choice=key_choice.EncryptionKeyChoice.BIG,
)

PARAM_MESSAGE_5_CARRY_2 = parameters.PBSParameters(
    lwe_dimension=930,
    glwe_dimension=1,
    polynomial_size=16384,
    lwe_modular_std_dev=0.00000022649232786295453,
    glwe_modular_std_dev=0.0000000000000000002168404344971009,
    pbs_base_log=15,
    pbs_level=2,
    ks_level=6,
    ks_base_log=3,
    message_modulus=types.MessageModulus(32),
    carry_modulus=types.CarryModulus(4),
    ciphertext_modulus=NATIVE_CIPHERTEXT_MODULUS,
    encryption_key_choice=key_choice.EncryptionKeyChoice.BIG,
)

PARAM_MESSAGE_6_CARRY_1 = parameters.PBSParameters(
    lwe_dimension=930,
    glwe_dimension=1,
    polynomial_size=16384,
    lwe_modular_std_dev=0.00000022649232786295453,
    glwe_modular_std_dev=0.0000000000000000002168404344971009,
    pbs_base_log=15,
    pbs_level=2,
    ks_level=6,
    ks_base_log=3,
    message_modulus=types.MessageModulus(64),
    carry_modulus=types.CarryModulus(2),
    ciphertext_modulus=NATIVE_CIPHERTEXT_MODULUS,
    encryption_key_choice=key_choice.EncryptionKeyChoice.BIG,
)

PARAM_MESSAGE_7_CARRY_0 = parameters.PBSParameters(
    lwe_dimension=930,
    glwe_dimension=1,
    polynomial_size=16384,
    lwe_modular_std_dev=0.00000022649232786295453,
    glwe_modular_std_dev=0.0000000000000000002168404344971009,
    pbs_base_log=15,
    pbs_level=2,
    ks_level=6,
    ks_base_log=3,
    message_modulus=types.MessageModulus(128),
    carry_modulus=types.CarryModulus(1),
    ciphertext_modulus=NATIVE_CIPHERTEXT_MODULUS,
    encryption_key_choice=key_choice.EncryptionKeyChoice.BIG,
)

PARAM_MESSAGE_1_CARRY_7 = parameters.PBSParameters(
    lwe_dimension=1004,
    glwe_dimension=1,
    polynomial_size=32768,
    lwe_modular_std_dev=0.00000005845871624688967,
    glwe_modular_std_dev=0.0000000000000000002168404344971009,
    pbs_base_log=11,
    pbs_level=3,
    ks_level=7,
    ks_base_log=3,
    message_modulus=types.MessageModulus(2),
    carry_modulus=types.CarryModulus(128),
    ciphertext_modulus=NATIVE_CIPHERTEXT_MODULUS,
    encryption_key_choice=key_choice.EncryptionKeyChoice.BIG,
)

PARAM_MESSAGE_2_CARRY_6 = parameters.PBSParameters(
    lwe_dimension=987,
    glwe_dimension=1,
    polynomial_size=32768,
    lwe_modular_std_dev=0.00000007979529246348835,
    glwe_modular_std_dev=0.0000000000000000002168404344971009,
    pbs_base_log=11,
    pbs_level=3,
    ks_level=7,
    ks_base_log=3,
    message_modulus=types.MessageModulus(4),
    carry_modulus=types.CarryModulus(64),
    ciphertext_modulus=NATIVE_CIPHERTEXT_MODULUS,
    encryption_key_choice=key_choice.EncryptionKeyChoice.BIG,
)

PARAM_MESSAGE_3_CARRY_5 = parameters.PBSParameters(
    lwe_dimension=985,
    glwe_dimension=1,
    polynomial_size=32768,
    lwe_modular_std_dev=0.00000008277032914509569,
    glwe_modular_std_dev=0.0000000000000000002168404344971009,
    pbs_base_log=11,
    pbs_level=3,
    ks_level=7,
    ks_base_log=3,
    message_modulus=types.MessageModulus(8),
    carry_modulus=types.CarryModulus(32),
    ciphertext_modulus=NATIVE_CIPHERTEXT_MODULUS,
    encryption_key_choice=key_choice.EncryptionKeyChoice.BIG,
)

PARAM_MESSAGE_4_CARRY_4 = parameters.PBSParameters(
    lwe_dimension=996,
    glwe_dimension=1,
    polynomial_size=32768,
    lwe_modular_std_dev=0.00000006767666038309478,
    glwe_modular_std_dev=0.0000000000000000002168404344971009,
    pbs_base_log=15,
    pbs_level=2,
    ks_level=7,
    ks_base_log=3,
    message_modulus=types.MessageModulus(16),
    carry_modulus=types.CarryModulus(16),
    ciphertext_modulus=NATIVE_CIPHERTEXT_MODULUS,
    encryption_key_choice=key_choice.EncryptionKeyChoice.BIG,
)

PARAM_MESSAGE_5_CARRY_3 = parameters.PBSParameters(
    lwe_dimension=1020,
    glwe_dimension=1,
    polynomial_size=32768,
    lwe_modular_std_dev=0.000000043618425315728666,
    glwe_modular_std_dev=0.0000000000000000002168404344971009,
    pbs_base_log=15,
    pbs_level=2,
    ks_level=5,
    ks_base_log=4,
    message_modulus=types.MessageModulus(32),
    carry_modulus=types.CarryModulus(8),
    ciphertext_modulus=NATIVE_CIPHERTEXT_MODULUS,
    encryption_key_choice=key_choice.EncryptionKeyChoice.BIG,
)

PARAM_MESSAGE_6_CARRY_2 = parameters.PBSParameters(
    lwe_dimension=1018,
    glwe_dimension=1,
    polynomial_size=32768,
    lwe_modular_std_dev=0.000000045244666805696514,
    glwe_modular_std_dev=0.0000000000000000002168404344971009,
    pbs_base_log=15,
    pbs_level=2,
    ks_level=5,
    ks_base_log=4,
    message_modulus=types.MessageModulus(64),
    carry_modulus=types.CarryModulus(4),
    ciphertext_modulus=NATIVE_CIPHERTEXT_MODULUS,
    encryption_key_choice=key_choice.EncryptionKeyChoice.BIG,
)

PARAM_MESSAGE_7_CARRY_1 = parameters.PBSParameters(
    lwe_dimension=1017,
    glwe_dimension=1,
    polynomial_size=32768,
    lwe_modular_std_dev=0.0000000460803851108693,
    glwe_modular_std_dev=0.0000000000000000002168404344971009,
    pbs_base_log=15,
    pbs_level=2,
    ks_level=5,
    ks_base_log=4,
    message_modulus=types.MessageModulus(128),
    carry_modulus=types.CarryModulus(2),
    ciphertext_modulus=NATIVE_CIPHERTEXT_MODULUS,
    encryption_key_choice=key_choice.EncryptionKeyChoice.BIG,
)

PARAM_MESSAGE_8_CARRY_0 = parameters.PBSParameters(
    lwe_dimension=1017,
    glwe_dimension=1,
    polynomial_size=32768,
    lwe_modular_std_dev=0.0000000460803851108693,
    glwe_modular_std_dev=0.0000000000000000002168404344971009,
    pbs_base_log=15,
    pbs_level=2,
    ks_level=5,
    ks_base_log=4,
    message_modulus=types.MessageModulus(256),
    carry_modulus=types.CarryModulus(1),
    ciphertext_modulus=NATIVE_CIPHERTEXT_MODULUS,
    encryption_key_choice=key_choice.EncryptionKeyChoice.BIG,
)

PARAM_SMALL_MESSAGE_1_CARRY_1 = parameters.PBSParameters(
    lwe_dimension=783,
    glwe_dimension=3,
    polynomial_size=512,
    lwe_modular_std_dev=0.0000033382067621812462,
    glwe_modular_std_dev=0.0000000000034525330484572114,
    pbs_base_log=18,
    pbs_level=1,
    ks_level=3,
    ks_base_log=5,
    message_modulus=types.MessageModulus(2),
    carry_modulus=types.CarryModulus(2),
    ciphertext_modulus=NATIVE_CIPHERTEXT_MODULUS,
    encryption_key_choice=key_choice.EncryptionKeyChoice.SMALL,
)

PARAM_SMALL_MESSAGE_2_CARRY_2 = parameters.PBSParameters(
    lwe_dimension=870,
    glwe_dimension=1,
    polynomial_size=2048,
    lwe_modular_std_dev=0.0000006791658447437413,
    glwe_modular_std_dev=0.00000000000000029403601535432533,
    pbs_base_log=23,
    pbs_level=1,
    ks_level=4,
    ks_base_log=4,
    message_modulus=types.MessageModulus(4),
    carry_modulus=types.CarryModulus(4),
    ciphertext_modulus=NATIVE_CIPHERTEXT_MODULUS,
    encryption_key_choice=key_choice.EncryptionKeyChoice.SMALL,
)

PARAM_SMALL_MESSAGE_3_CARRY_3 = parameters.PBSParameters(
    lwe_dimension=1025,
    glwe_dimension=1,
    polynomial_size=8192,
    lwe_modular_std_dev=0.00000003980397588319241,
    glwe_modular_std_dev=0.0000000000000000002168404344971009,
    pbs_base_log=15,
    pbs_level=2,
    ks_level=5,
    ks_base_log=4,
    message_modulus=types.MessageModulus(8),
    carry_modulus=types.CarryModulus(8),
    ciphertext_modulus=NATIVE_CIPHERTEXT_MODULUS,
    encryption_key_choice=key_choice.EncryptionKeyChoice.SMALL,
)

PARAM_SMALL_MESSAGE_4_CARRY_4 = parameters.PBSParameters(
    lwe_dimension=1214,
    glwe_dimension=1,
    polynomial_size=32768,
    lwe_modular_std_dev=0.0000000012520482863081104,
    glwe_modular_std_dev=0.0000000000000000002168404344971009,
    pbs_base_log=15,
    pbs_level=2,
    ks_level=6,
    ks_base_log=4,
    message_modulus=types.MessageModulus(16),
    carry_modulus=types.CarryModulus(16),
    ciphertext_modulus=NATIVE_CIPHERTEXT_MODULUS,
    encryption_key_choice=key_choice.EncryptionKeyChoice.SMALL,
)

# Every parameter set where the carry space holds at least one bit, ordered by
# message bits, then carry bits.
WITH_CARRY_PARAMETERS_VEC = (
    PARAM_MESSAGE_1_CARRY_1,
    PARAM_MESSAGE_1_CARRY_2,
    PARAM_MESSAGE_1_CARRY_3,
    PARAM_MESSAGE_1_CARRY_4,
    PARAM_MESSAGE_1_CARRY_5,
    PARAM_MESSAGE_1_CARRY_6,
    PARAM_MESSAGE_1_CARRY_7,
    PARAM_MESSAGE_2_CARRY_1,
    PARAM_MESSAGE_2_CARRY_2,
    PARAM_MESSAGE_2_CARRY_3,
    PARAM_MESSAGE_2_CARRY_4,
    PARAM_MESSAGE_2_CARRY_5,
    PARAM_MESSAGE_2_CARRY_6,
    PARAM_MESSAGE_3_CARRY_1,
    PARAM_MESSAGE_3_CARRY_2,
    PARAM_MESSAGE_3_CARRY_3,
    PARAM_MESSAGE_3_CARRY_4,
    PARAM_MESSAGE_3_CARRY_5,
    PARAM_MESSAGE_4_CARRY_1,
    PARAM_MESSAGE_4_CARRY_2,
    PARAM_MESSAGE_4_CARRY_3,
    PARAM_MESSAGE_4_CARRY_4,
    PARAM_MESSAGE_5_CARRY_1,
    PARAM_MESSAGE_5_CARRY_2,
    PARAM_MESSAGE_5_CARRY_3,
    PARAM_MESSAGE_6_CARRY_1,
    PARAM_MESSAGE_6_CARRY_2,
    PARAM_MESSAGE_7_CARRY_1,
)

# The catalog searched by resolver.get_parameters_from_message_and_carry.
ALL_PARAMETER_VEC = WITH_CARRY_PARAMETERS_VEC

# Parameter sets whose carry space can hold a second message, as needed to
# evaluate a bivariate function with a single PBS.
BIVARIATE_PBS_COMPLIANT_PARAMETER_SET_VEC = (
    PARAM_MESSAGE_1_CARRY_1,
    PARAM_MESSAGE_1_CARRY_2,
    PARAM_MESSAGE_1_CARRY_3,
    PARAM_MESSAGE_1_CARRY_4,
    PARAM_MESSAGE_1_CARRY_5,
    PARAM_MESSAGE_1_CARRY_6,
    PARAM_MESSAGE_1_CARRY_7,
    PARAM_MESSAGE_2_CARRY_2,
    PARAM_MESSAGE_2_CARRY_3,
    PARAM_MESSAGE_2_CARRY_4,
    PARAM_MESSAGE_2_CARRY_5,
    PARAM_MESSAGE_2_CARRY_6,
    PARAM_MESSAGE_3_CARRY_3,
    PARAM_MESSAGE_3_CARRY_4,
    PARAM_MESSAGE_3_CARRY_5,
    PARAM_MESSAGE_4_CARRY_4,
)

DEFAULT_PARAMETERS = PARAM_MESSAGE_2_CARRY_2

PRESETS_BY_NAME: Mapping[str, parameters.PBSParameters] = MappingProxyType({
    'PARAM_MESSAGE_1_CARRY_0': PARAM_MESSAGE_1_CARRY_0,
    'PARAM_MESSAGE_1_CARRY_1': PARAM_MESSAGE_1_CARRY_1,
    'PARAM_MESSAGE_2_CARRY_0': PARAM_MESSAGE_2_CARRY_0,
    'PARAM_MESSAGE_1_CARRY_2': PARAM_MESSAGE_1_CARRY_2,
    'PARAM_MESSAGE_2_CARRY_1': PARAM_MESSAGE_2_CARRY_1,
    'PARAM_MESSAGE_3_CARRY_0': PARAM_MESSAGE_3_CARRY_0,
    'PARAM_MESSAGE_1_CARRY_3': PARAM_MESSAGE_1_CARRY_3,
    'PARAM_MESSAGE_2_CARRY_2': PARAM_MESSAGE_2_CARRY_2,
    'PARAM_MESSAGE_3_CARRY_1': PARAM_MESSAGE_3_CARRY_1,
    'PARAM_MESSAGE_4_CARRY_0': PARAM_MESSAGE_4_CARRY_0,
    'PARAM_MESSAGE_1_CARRY_4': PARAM_MESSAGE_1_CARRY_4,
    'PARAM_MESSAGE_2_CARRY_3': PARAM_MESSAGE_2_CARRY_3,
    'PARAM_MESSAGE_3_CARRY_2': PARAM_MESSAGE_3_CARRY_2,
    'PARAM_MESSAGE_4_CARRY_1': PARAM_MESSAGE_4_CARRY_1,
    'PARAM_MESSAGE_5_CARRY_0': PARAM_MESSAGE_5_CARRY_0,
    'PARAM_MESSAGE_1_CARRY_5': PARAM_MESSAGE_1_CARRY_5,
    'PARAM_MESSAGE_2_CARRY_4': PARAM_MESSAGE_2_CARRY_4,
    'PARAM_MESSAGE_3_CARRY_3': PARAM_MESSAGE_3_CARRY_3,
    'PARAM_MESSAGE_4_CARRY_2': PARAM_MESSAGE_4_CARRY_2,
    'PARAM_MESSAGE_5_CARRY_1': PARAM_MESSAGE_5_CARRY_1,
    'PARAM_MESSAGE_6_CARRY_0': PARAM_MESSAGE_6_CARRY_0,
    'PARAM_MESSAGE_1_CARRY_6': PARAM_MESSAGE_1_CARRY_6,
    'PARAM_MESSAGE_2_CARRY_5': PARAM_MESSAGE_2_CARRY_5,
    'PARAM_MESSAGE_3_CARRY_4': PARAM_MESSAGE_3_CARRY_4,
    'PARAM_MESSAGE_4_CARRY_3': PARAM_MESSAGE_4_CARRY_3,
    'PARAM_MESSAGE_5_CARRY_2': PARAM_MESSAGE_5_CARRY_2,
    'PARAM_MESSAGE_6_CARRY_1': PARAM_MESSAGE_6_CARRY_1,
    'PARAM_MESSAGE_7_CARRY_0': PARAM_MESSAGE_7_CARRY_0,
    'PARAM_MESSAGE_1_CARRY_7': PARAM_MESSAGE_1_CARRY_7,
    'PARAM_MESSAGE_2_CARRY_6': PARAM_MESSAGE_2_CARRY_6,
    'PARAM_MESSAGE_3_CARRY_5': PARAM_MESSAGE_3_CARRY_5,
    'PARAM_MESSAGE_4_CARRY_4': PARAM_MESSAGE_4_CARRY_4,
    'PARAM_MESSAGE_5_CARRY_3': PARAM_MESSAGE_5_CARRY_3,
    'PARAM_MESSAGE_6_CARRY_2': PARAM_MESSAGE_6_CARRY_2,
    'PARAM_MESSAGE_7_CARRY_1': PARAM_MESSAGE_7_CARRY_1,
    'PARAM_MESSAGE_8_CARRY_0': PARAM_MESSAGE_8_CARRY_0,
    'PARAM_SMALL_MESSAGE_1_CARRY_1': PARAM_SMALL_MESSAGE_1_CARRY_1,
    'PARAM_SMALL_MESSAGE_2_CARRY_2': PARAM_SMALL_MESSAGE_2_CARRY_2,
    'PARAM_SMALL_MESSAGE_3_CARRY_3': PARAM_SMALL_MESSAGE_3_CARRY_3,
    'PARAM_SMALL_MESSAGE_4_CARRY_4': PARAM_SMALL_MESSAGE_4_CARRY_4,
})


def get_preset_by_name(name: str) -> parameters.PBSParameters:
  """Returns the preset named e.g. 'PARAM_MESSAGE_2_CARRY_2'."""
  if name not in PRESETS_BY_NAME:
    raise ValueError(
        f'Unknown parameter preset {name}. Choose one of:'
        f' {", ".join(PRESETS_BY_NAME)}'
    )
  return PRESETS_BY_NAME[name]


def preset_description(params: parameters.PBSParameters) -> str:
  """A human-readable label for a parameter set's plaintext encoding."""
  return (
      f'message {params.message_modulus.bit_length} bits, '
      f'carry {params.carry_modulus.bit_length} bits'
  )


def get_default_parameter_set() -> parameter_set.ShortintParameterSet:
  """Returns the default PBS-only configuration."""
  return parameter_set.ShortintParameterSet.from_bootstrap(DEFAULT_PARAMETERS)
