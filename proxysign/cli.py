"""
Command-line tools
    proxysign-keygen       [-d] [--bits N]
    proxysign-proxy-keygen [-d] privateKey publicKey
    proxysign-sign         [-d] proxyKey publicKey fileToSign
    proxysign-verify       [-d] publicKey fileSignature signedFile

Exit status: 0 success, 1 operational failure, 2 usage error (argparse).
A signature that does not verify is reported on stdout with status 0.
"""

import argparse
import logging
import sys

from proxysign import key_files as kf
from proxysign.config import configure_logging, get_settings
from proxysign.delegation import DelegationIssuer
from proxysign.errors import ProxySignError
from proxysign.gen_group import MIN_BIT_LENGTH, DomainParameterBuilder
from proxysign.keygen import PrincipalKeyPair, generate_key_pair
from proxysign.sign import ProxySigner
from proxysign.verifier import SignatureVerifier

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1


def _parser(prog, description, positionals):
    parser = argparse.ArgumentParser(prog=prog, description=description)
    parser.add_argument("-d", "--debug", action="store_true", help="log intermediate values")
    for name, help_text in positionals:
        parser.add_argument(name, help=help_text)
    return parser


def _run(action, args):
    settings = get_settings()
    configure_logging(args.debug, settings)
    try:
        return action(args, settings)
    except ProxySignError as e:
        logger.error(str(e))
        print(f"{e} Try again!")
        return EXIT_FAILURE


def _keygen(args, settings):
    bits = args.bits or settings.PRIME_BIT_LENGTH
    domain = DomainParameterBuilder().build(bits)
    key_pair = generate_key_pair(domain)
    logger.debug(f"p = {domain.p}")
    logger.debug(f"q = {domain.q}")
    logger.debug(f"g = {domain.g}")
    logger.debug(f"x = {key_pair.x}")
    logger.debug(f"y = {key_pair.y}")

    public_path = kf.write_text(settings.PUBLIC_KEY_FILE,
                                kf.encode_public_key(kf.PublicKey(domain=domain, y=key_pair.y)))
    print(f"Public key file has been generated successfully! Name of a file: {public_path}")
    private_path = kf.write_text(settings.PRIVATE_KEY_FILE, kf.encode_private_key(key_pair.x))
    print(f"Private key file has been generated successfully! Name of a file: {private_path}")
    return EXIT_OK


def keygen_main(argv=None):
    parser = _parser("proxysign-keygen", "Generate the delegator's public and private key.", [])
    parser.add_argument("--bits", type=int, default=None, help="bit length of p")
    args = parser.parse_args(argv)
    if args.bits is not None and args.bits < MIN_BIT_LENGTH:
        parser.error(f"--bits must be at least {MIN_BIT_LENGTH}")
    return _run(_keygen, args)


def _proxy_keygen(args, settings):
    x = kf.load_private_key(args.private_key)
    public_key = kf.load_public_key(args.public_key)
    domain = public_key.domain
    logger.debug(f"p = {domain.p}")
    logger.debug(f"g = {domain.g}")
    logger.debug(f"q = {domain.q}")
    logger.debug(f"y = {public_key.y}")
    logger.debug(f"x = {x}")

    issuer = DelegationIssuer(domain, PrincipalKeyPair(x=x, y=public_key.y))
    credential = issuer.issue()
    path = kf.write_text(settings.PROXY_KEY_FILE, kf.encode_credential(credential))
    print(f"Proxy key has been generated successfully! Name of a file: {path}")
    return EXIT_OK


def proxy_keygen_main(argv=None):
    parser = _parser("proxysign-proxy-keygen", "Issue a proxy key from the delegator's keys.", [
        ("private_key", "delegator private key file"),
        ("public_key", "delegator public key file"),
    ])
    return _run(_proxy_keygen, parser.parse_args(argv))


def _sign(args, settings):
    message = kf.read_bytes(args.file_to_sign)
    credential = kf.load_credential(args.proxy_key)
    domain = kf.load_public_key(args.public_key).domain
    logger.debug(f"r = {credential.r}")
    logger.debug(f"s = {credential.s}")

    signer = ProxySigner(domain, credential, algorithm=settings.DIGEST_ALGORITHM)
    signature = signer.sign(message)
    path = kf.write_text(settings.SIGNATURE_FILE, kf.encode_signature(signature))
    print(f"File signature has been generated successfully! Name of a file: {path}")
    return EXIT_OK


def sign_main(argv=None):
    parser = _parser("proxysign-sign", "Sign a file with a proxy key.", [
        ("proxy_key", "proxy key file"),
        ("public_key", "delegator public key file"),
        ("file_to_sign", "file to sign"),
    ])
    return _run(_sign, parser.parse_args(argv))


def _verify(args, settings):
    message = kf.read_bytes(args.signed_file)
    signature = kf.load_signature(args.signature)
    public_key = kf.load_public_key(args.public_key)

    verifier = SignatureVerifier(public_key.domain, public_key.y, algorithm=settings.DIGEST_ALGORITHM)
    result = verifier.verify(signature, message)
    if result.is_valid:
        print("File signature is correct and successfully verified!")
    else:
        print("Signature verification FAILED!")
    return EXIT_OK


def verify_main(argv=None):
    parser = _parser("proxysign-verify", "Verify a proxy signature against the delegator's public key.", [
        ("public_key", "delegator public key file"),
        ("signature", "signature file"),
        ("signed_file", "file that was signed"),
    ])
    return _run(_verify, parser.parse_args(argv))


def _entry(main):
    def run():
        sys.exit(main())
    return run


keygen = _entry(keygen_main)
proxy_keygen = _entry(proxy_keygen_main)
sign = _entry(sign_main)
verify = _entry(verify_main)
