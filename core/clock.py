import time

def wall_clock_ms():
    return time.time() * 1000.0
