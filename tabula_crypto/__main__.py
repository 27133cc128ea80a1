"""
Command line:  python -m tabula_crypto CIPHER {encipher,decipher,tableau} [TEXT]

    python -m tabula_crypto vigenere encipher --key KEY HELLO
    echo "URYYB" | python -m tabula_crypto rot13 decipher
    python -m tabula_crypto della-porta tableau

Text is read from stdin when not given as an argument.
"""

import argparse
import logging
import sys

from .ciphers.atbash      import AtbashCipher
from .ciphers.affine      import AffineCipher
from .ciphers.beaufort    import BeaufortCipher, VariantBeaufortCipher
from .ciphers.caesar      import CaesarCipher
from .ciphers.decimation  import DecimationCipher
from .ciphers.della_porta import DellaPortaCipher
from .ciphers.gronsfeld   import GronsfeldCipher
from .ciphers.keyword     import KeywordCipher
from .ciphers.rot13       import ROT13Cipher
from .ciphers.trithemius  import TrithemiusCipher
from .ciphers.vigenere    import VigenereCipher
from .errors              import TabulaError
from .tabula_recta        import Autokey

logger = logging.getLogger("tabula_crypto")

# cipher name -> (needs --key, takes --autokey, factory(args, flags))
CIPHERS = {
    "vigenere":         (True,  True,  lambda a, f: VigenereCipher(a.key, a.alphabet, a.autokey, **f)),
    "beaufort":         (True,  True,  lambda a, f: BeaufortCipher(a.key, a.alphabet, a.autokey, **f)),
    "variant-beaufort": (True,  True,  lambda a, f: VariantBeaufortCipher(a.key, a.alphabet, a.autokey, **f)),
    "della-porta":      (True,  True,  lambda a, f: DellaPortaCipher(a.key, a.alphabet, a.autokey, **f)),
    "gronsfeld":        (True,  False, lambda a, f: GronsfeldCipher(a.key, a.alphabet, **f)),
    "trithemius":       (False, False, lambda a, f: TrithemiusCipher(a.alphabet, **f)),
    "keyword":          (True,  False, lambda a, f: KeywordCipher(a.key, a.alphabet, **f)),
    "affine":           (False, False, lambda a, f: AffineCipher(a.slope, a.intercept, a.alphabet, **f)),
    "caesar":           (False, False, lambda a, f: CaesarCipher(a.shift, a.alphabet, **f)),
    "decimation":       (False, False, lambda a, f: DecimationCipher(a.slope, a.alphabet, **f)),
    "atbash":           (False, False, lambda a, f: AtbashCipher(a.alphabet, **f)),
    "rot13":            (False, False, lambda a, f: ROT13Cipher(**f)),
}


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="tabula-crypto",
        description="Classical substitution ciphers (educational use only).",
    )
    p.add_argument("cipher", choices=sorted(CIPHERS))
    p.add_argument("action", choices=["encipher", "decipher", "tableau"])
    p.add_argument("text", nargs="?", help="message text (default: read stdin)")
    p.add_argument("-k", "--key", help="countersign or keyword")
    p.add_argument("-a", "--alphabet", help="base alphabet (default A-Z)")
    p.add_argument("--autokey", choices=[m.value for m in Autokey], default="none",
                   help="autoclave mode for Vigenère-family ciphers")
    p.add_argument("--shift", type=int, default=3, help="Caesar shift (default 3)")
    p.add_argument("--slope", type=int, default=1, help="affine slope / decimation multiplier")
    p.add_argument("--intercept", type=int, default=0, help="affine intercept")
    p.add_argument("--strict", action="store_true",
                   help="fail on symbols outside the alphabet instead of passing them through")
    p.add_argument("--caseless", action="store_true", help="match symbols case-insensitively")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return p


def main(argv=None) -> int:
    parser = build_parser()
    # options may come before or after the message text
    args = parser.parse_intermixed_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format=' %(message)s')

    needs_key, takes_autokey, factory = CIPHERS[args.cipher]
    if needs_key and not args.key:
        parser.error(f"{args.cipher} needs --key")
    if not takes_autokey and args.autokey != Autokey.NONE.value:
        parser.error(f"{args.cipher} does not support --autokey")

    try:
        cipher = factory(args, {"strict": args.strict, "caseless": args.caseless})
        logger.info(f"{args.action} with {cipher!r}")
        if args.action == "tableau":
            print(cipher.printable())
            return 0
        text = args.text if args.text is not None else sys.stdin.read().rstrip("\n")
        fn = cipher.encipher if args.action == "encipher" else cipher.decipher
        print(fn(text))
    except TabulaError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
