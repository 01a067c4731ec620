import sys
from argparse import ArgumentParser, ArgumentTypeError

import xerox
from tabulate import tabulate

from time import sleep
from .generator import PasswordGenerator
from .core import ALPHABETS, DEFAULT_LENGTHS, CharacterClass, InvalidConfiguration

def print_err(*args, **kwargs):
    kwargs.update(file=sys.stderr, flush=True)
    print(*args, **kwargs)

def count(value):
    number = int(value)
    if number < 0:
        raise ArgumentTypeError("expected a non-negative count, got {}".format(value))
    return number

def custom_class(value):
    alphabet, sep, length = value.rpartition(":")
    if not sep:
        raise ArgumentTypeError("expected ALPHABET:COUNT, got '{}'".format(value))
    return CharacterClass(alphabet, count(length))

class PasswordDriver(object):
    @staticmethod
    def make_generator(args):
        lengths = {name: getattr(args, name) for name in ALPHABETS}
        generator = PasswordGenerator.default(**lengths)
        for cls in args.chars:
            generator.add(cls)
        return generator

    @staticmethod
    def gen(args):
        generator = PasswordDriver.make_generator(args)
        if args.pw_action is PasswordActions.clip and args.count > 1:
            print_err("Only one password can be copied; ignoring --count {}.".format(args.count))
            args.count = 1
        for _ in range(args.count):
            args.pw_action(generator.generate(), args)

    @staticmethod
    def classes(args):
        generator = PasswordDriver.make_generator(args)
        rows = [(cls.label, cls.length, len(cls.alphabet), cls.alphabet) for cls in generator.classes]
        print(tabulate(rows, headers=("Class", "Length", "Size", "Alphabet"), tablefmt="rst", disable_numparse=True))
        print_err("Total length: {}".format(generator.length))

class PasswordActions:
    @staticmethod
    def print(pwd, args):
        print(pwd)

    @staticmethod
    def clip(pwd, args):
        try:
            delay = args.clear_after
            xerox.copy(pwd, xsel=True)
            print_err("Password copied to clipboard; clearing in {} seconds.".format(delay))
            sleep(delay)
        finally:
            xerox.copy("", xsel=True)
            print_err("Clipboard cleared.")

def add_class_args(parser):
    for name in ALPHABETS:
        parser.add_argument("--" + name, type=count, default=DEFAULT_LENGTHS[name],
                            help="Number of {} [default: {}].".format(name, DEFAULT_LENGTHS[name]))
    parser.add_argument("--chars", type=custom_class, action="append", default=[],
                        metavar="ALPHABET:COUNT", help="Add a custom character class.")

def add_gen_args(parser):
    add_class_args(parser)
    parser.add_argument("--count", type=count, default=1, help="Number of passwords to generate.")
    parser.add_argument("--clip", action="store_const", dest="pw_action",
                        const=PasswordActions.clip, default=PasswordActions.print,
                        help="Copy the password to the clipboard instead of printing it.")
    parser.add_argument("--clear-after", type=count, default=10,
                        help="Seconds before the clipboard is cleared [default: 10].")

def parse_args(argv=None):
    parser = ArgumentParser(description='Generate a password from a mix of character classes.')
    subparsers = parser.add_subparsers(help='Action', dest="action")

    gen_parser = subparsers.add_parser("gen", help="Generate passwords (default action).")
    add_gen_args(gen_parser)
    gen_parser.set_defaults(handler=PasswordDriver.gen)

    classes_parser = subparsers.add_parser("classes", help="List the configured character classes.")
    add_class_args(classes_parser)
    classes_parser.set_defaults(handler=PasswordDriver.classes)

    args = parser.parse_args(argv)
    if not hasattr(args, "handler"):
        args = gen_parser.parse_args([])
    return args

def run(argv=None):
    try:
        args = parse_args(argv)
        args.handler(args)
        return 0
    except InvalidConfiguration as e:
        print_err("Invalid configuration: {}".format(e))
        return 1

def main():
    try:
        sys.exit(run())
    except (KeyboardInterrupt, EOFError):
        print_err("Interrupted")
