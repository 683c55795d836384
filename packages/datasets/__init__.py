from .validator import validate_wordlist, pretty_summary
from .io import DictionaryError, load_dictionary, read_lines

__all__ = ["validate_wordlist", "pretty_summary", "DictionaryError", "load_dictionary", "read_lines"]
