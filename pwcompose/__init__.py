from .core import CharacterClass, InvalidConfiguration
from .generator import PasswordGenerator
