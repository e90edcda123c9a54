import os, logging
import numpy as np

# ------- Tunables (override via app settings) -------
STRASSEN_THRESHOLD = int(os.getenv("STRASSEN_THRESHOLD", "32"))   # crossover to naive
STRASSEN_WORKERS   = int(os.getenv("STRASSEN_WORKERS", "1"))      # >1: top-level products on a pool
MM_DTYPE           = os.getenv("MM_DTYPE", "int32").lower()       # int32/int64
RANDOM_LOW         = int(os.getenv("RANDOM_LOW", "0"))
RANDOM_HIGH        = int(os.getenv("RANDOM_HIGH", "10"))           # exclusive
LOG_LEVEL          = os.getenv("LOG_LEVEL", "INFO").upper()


def dtype_of(s: str):
    if s == "int32":
        return np.int32
    if s == "int64":
        return np.int64
    raise ValueError(f"Unsupported MM_DTYPE {s!r}; expected int32 or int64")


DEFAULT_DTYPE = dtype_of(MM_DTYPE)


def get_logger(name: str = "intmatrix"):
    lg = logging.getLogger(name)
    if not lg.handlers:
        h = logging.StreamHandler()
        h.setFormatter(logging.Formatter("%(asctime)s | %(levelname)s | %(message)s"))
        lg.addHandler(h)
        lg.setLevel(LOG_LEVEL)
    return lg
