import os
import random
from typing import *

from .core import CharacterClass, default_classes

class PasswordGenerator:
    """Compose a password from an ordered list of character classes.

    Each class contributes exactly its length worth of characters, drawn with
    replacement from its alphabet; the result is then shuffled so that the
    order of the classes does not leak into the password.

    Instances own their random engine, which is seeded once from the
    platform's entropy source.  Sharing an instance across threads is not
    safe; separate instances are independent."""

    SEED_BYTES = 32

    def __init__(self, classes: Iterable[CharacterClass] = (), rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random(os.urandom(PasswordGenerator.SEED_BYTES))
        self._classes = list(classes)

    @staticmethod
    def default(**lengths):
        return PasswordGenerator(default_classes(**lengths))

    @property
    def classes(self) -> Tuple[CharacterClass, ...]:
        return tuple(self._classes)

    @property
    def length(self) -> int:
        return sum(cls.length for cls in self._classes)

    def add(self, character_class: CharacterClass):
        self._classes.append(character_class)

    def generate(self) -> str:
        for cls in self._classes:
            cls.validate()

        chars = [self.rng.choice(cls.alphabet)
                 for cls in self._classes
                 for _ in range(cls.length)]
        self.rng.shuffle(chars)
        return "".join(chars)
