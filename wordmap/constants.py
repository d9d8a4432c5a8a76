
from pathlib import Path
from types import SimpleNamespace
import os

script_loc = Path(os.path.dirname(os.path.realpath(__file__)))
root_loc = script_loc / '..'

# Read once at import; tests patch attributes directly.
# No word list ships with the package, so the service needs WORDMAP_DICTIONARY.

_dictionary = os.environ.get('WORDMAP_DICTIONARY')

config = SimpleNamespace(**{
    'root_loc': root_loc,
    'dictionary_path': Path(_dictionary).expanduser() if _dictionary else None,
    'log_path': Path(os.environ.get(
        'WORDMAP_LOG_FILE', '~/wordmap_log.ndjson')).expanduser(),
    'host': '0.0.0.0',
    'port': int(os.environ.get('WORDMAP_PORT', '5000')),
    # Stays below the 4300 digit int -> str limit of Python 3.11+.
    'max_value_bits': 13000,
})
