"""Top-level script environment."""
import argparse
import logging
import sys

from rc5py import cipher
from rc5py import errors
from rc5py.primitives import rc5
from rc5py.primitives.word import WordSize

log = logging.getLogger("rc5py")


def get_parser():
    parser = argparse.ArgumentParser(prog="rc5py", description="RC5 block cipher")
    parser.add_argument("-v", "--verbose", action="store_true", help="print debug messages")
    subparsers = parser.add_subparsers(dest="command", required=True)

    for command in ["encrypt", "decrypt"]:
        subparser = subparsers.add_parser(command, help="{} hexadecimal data".format(command))
        subparser.add_argument("data", help="hexadecimal input, a multiple of the block size")
        subparser.add_argument("-k", "--key", required=True, help="hexadecimal key")
        subparser.add_argument("-r", "--rounds", type=int, default=cipher.DEFAULT_ROUNDS)
        subparser.add_argument("-w", "--word-size", type=int, default=cipher.DEFAULT_WORD_SIZE.value,
                               choices=[ws.value for ws in WordSize])

    subparsers.add_parser("selftest", help="check the test vectors")

    return parser


def main(argv=None):
    parser = get_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s:%(name)s:%(message)s")

    if args.command == "selftest":
        for word_size, rounds in rc5.get_tested_instances():
            cipher_instance = rc5.get_RC5_instance(word_size, rounds)
            cipher_instance.test()
            print("{}: ok".format(cipher_instance.__name__))
        return 0

    function = cipher.encrypt if args.command == "encrypt" else cipher.decrypt
    try:
        key = bytes.fromhex(args.key)
        data = bytes.fromhex(args.data)
    except ValueError as e:
        parser.exit(1, "{}: error: invalid hexadecimal string: {}\n".format(parser.prog, e))

    try:
        output = function(key, data, args.rounds, args.word_size)
    except errors.RC5Error as e:
        log.debug("%s failed", args.command, exc_info=True)
        parser.exit(1, "{}: error: {}\n".format(parser.prog, e))

    print(output.hex())
    return 0


if __name__ == "__main__":
    sys.exit(main())
