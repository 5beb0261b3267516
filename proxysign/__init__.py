"""Mambo-Usuda-Okamoto proxy signatures over a prime-order subgroup of Z*p."""

from proxysign.aks import is_prime
from proxysign.delegation import DelegationIssuer, ProxyCredential
from proxysign.factorize import IntegerFactorizer
from proxysign.gen_group import DomainParameterBuilder, DomainParameters
from proxysign.keygen import PrincipalKeyPair, gen_x, gen_y, generate_key_pair
from proxysign.sign import ProxySigner, Signature
from proxysign.verifier import SignatureVerifier, VerificationResult

__version__ = "0.1.0"

__all__ = [
    "DelegationIssuer",
    "DomainParameterBuilder",
    "DomainParameters",
    "IntegerFactorizer",
    "PrincipalKeyPair",
    "ProxyCredential",
    "ProxySigner",
    "Signature",
    "SignatureVerifier",
    "VerificationResult",
    "gen_x",
    "gen_y",
    "generate_key_pair",
    "is_prime",
]
