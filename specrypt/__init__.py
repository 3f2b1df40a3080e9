"""Readable reference implementations of AES-128, BIP-340 Schnorr signatures and BLS12-381 map-to-curve."""

__version__ = "0.1.0"
__all__ = ["aes", "aes_jazz", "bip340", "bls_field", "bls_svdw", "bls_sswu_g1", "bls_sswu_g2"]