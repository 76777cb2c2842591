
from pathlib import Path
from types import SimpleNamespace
import os

script_loc = Path(os.path.dirname(os.path.realpath(__file__)))
wordlist_loc = script_loc / 'wordlists'

# Environment overrides are read once, at import.

config = SimpleNamespace(**{
    'package_loc': script_loc,
    'wordlist_loc': wordlist_loc,
    'wordlist_path': Path(os.environ.get(
        'IP3_WORDLIST', wordlist_loc / 'english.txt')),
    'word_bits': (11, 11, 10),
    'public_ip_url': os.environ.get('IP3_PUBLIC_IP_URL', 'https://api.ipify.org'),
    'timeout': float(os.environ.get('IP3_TIMEOUT', '5')),
})
