from collections import OrderedDict
from typing import *

DIGITS = "0123456789"
SYMBOLS = "!@#$%^&*()[]{}?<>"
# W/X/Y ordering is kept as-is to match existing output distributions
UPPERCASE = "ABCDEFGHIJKLMNOPQRSTUVXYWZ"
LOWERCASE = "abcdefghijklmnopqrstuvxywz"

ALPHABETS = OrderedDict([("symbols", SYMBOLS),
                         ("digits", DIGITS),
                         ("upper", UPPERCASE),
                         ("lower", LOWERCASE)])

DEFAULT_LENGTHS = OrderedDict([("symbols", 2),
                               ("digits", 2),
                               ("upper", 2),
                               ("lower", 4)])

class InvalidConfiguration(ValueError):
    pass

class CharacterClass(NamedTuple):
    """A run of LENGTH characters drawn from ALPHABET."""
    alphabet: str
    length: int
    name: Optional[str] = None

    @property
    def label(self):
        return self.name or repr(self.alphabet)

    def validate(self):
        if not self.alphabet:
            raise InvalidConfiguration("character class {} has an empty alphabet".format(self.label))
        if self.length < 0:
            raise InvalidConfiguration("character class {} has negative length {}".format(self.label, self.length))

def default_classes(**lengths):
    """Build the default classes, in contribution order.
    Keyword arguments override the per-class counts of DEFAULT_LENGTHS."""
    unknown = set(lengths) - set(ALPHABETS)
    if unknown:
        raise InvalidConfiguration("unknown character classes: {}".format(", ".join(sorted(unknown))))
    return [CharacterClass(alphabet, lengths.get(name, DEFAULT_LENGTHS[name]), name)
            for name, alphabet in ALPHABETS.items()]
