# --- utils.py ---

import time
import threading
import string
from colorama import Fore, Style, init

init()

# Working alphabet (input is case-normalized to this)
ALPHABET = frozenset(string.ascii_lowercase)

# Tie-break rules for letters that become free in the same round
TIE_BREAKS = ('alpha', 'discovery')
DEFAULT_TIE_BREAK = 'alpha'

VERBOSE = False
start_time = None

# Lock used for synchronized printing across threads
PRINT_LOCK = threading.Lock()

def log_with_time(msg, color=Fore.LIGHTBLUE_EX):
    """Print ``msg`` with a timestamp."""
    global start_time
    if start_time is None:
        start_time = time.time()
    elapsed = time.time() - start_time
    mins = int(elapsed // 60)
    secs = elapsed % 60
    timestamp = Style.DIM + f"[{mins:02}:{secs:06.3f}]" + Style.RESET_ALL
    with PRINT_LOCK:
        print(f"{timestamp} {color}{msg}{Style.RESET_ALL}", flush=True)

def vlog(msg, t0=None):
    if VERBOSE:
        if t0 is not None:
            elapsed = time.time() - t0
            log_with_time(f"{msg} (took {elapsed:.3f}s)")
        else:
            log_with_time(msg)

def format_letters(letters):
    """Render an iterable of letters as a compact ``[a b c]`` string for logs."""
    return "[" + " ".join(letters) + "]"
