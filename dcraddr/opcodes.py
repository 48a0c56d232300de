"""Script opcodes referenced by the version 0 address script templates."""

OP_DATA_20 = 0x14
OP_DATA_30 = 0x1E
OP_DATA_32 = 0x20
OP_DATA_33 = 0x21
OP_1 = 0x51
OP_2 = 0x52
OP_RETURN = 0x6A
OP_DUP = 0x76
OP_EQUAL = 0x87
OP_EQUALVERIFY = 0x88
OP_HASH160 = 0xA9
OP_CHECKSIG = 0xAC

# Stake tagging opcodes.
OP_SSTX = 0xBA
OP_SSGEN = 0xBB
OP_SSRTX = 0xBC
OP_SSTXCHANGE = 0xBD
OP_CHECKSIGALT = 0xBE
OP_TGEN = 0xC3

# Signature types selected by OP_CHECKSIGALT.
SIG_TYPE_ECDSA_SECP256K1 = 0
SIG_TYPE_ED25519 = 1
SIG_TYPE_SCHNORR_SECP256K1 = 2
