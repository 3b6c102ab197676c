# settings.py
import os

# ======= Puzzle defaults =======
QUEENS_SIZE = int(os.getenv("BT_QUEENS_SIZE", "8"))

# ======= Logging =======
LOG_LEVEL = os.getenv("BT_LOG_LEVEL", "WARNING").upper()

# ======= Benchmark harness =======
BENCH_REPEAT = int(os.getenv("BT_BENCH_REPEAT", "20"))
DATA_DIR     = os.getenv("BT_DATA_DIR", "data")

class CFG:
    QUEENS_SIZE = QUEENS_SIZE

    LOG_LEVEL = LOG_LEVEL

    BENCH_REPEAT = BENCH_REPEAT
    DATA_DIR     = DATA_DIR

__all__ = ["CFG"]
