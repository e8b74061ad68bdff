# point/vector math shared by every channel
import logging
import math
import numpy as np

logger = logging.getLogger(__name__)

EAR_EPS   = 1e-6   # EAR horizontal-distance guard
RATIO_EPS = 1e-3   # mouth + pose ratios

def distance(a, b):
    return float(np.linalg.norm(np.asarray(a, dtype=np.float64)[:2] - np.asarray(b, dtype=np.float64)[:2]))

def ear(p1, p2, p3, p4, p5, p6):
    # EAR: (|p2-p6| + |p3-p5|) / (2 * |p1-p4|)
    vert = distance(p2, p6) + distance(p3, p5)
    horiz = distance(p1, p4) + EAR_EPS
    return vert / (2.0 * horiz)

def safe_ratio(num, den, eps=RATIO_EPS):
    """num / (den + eps), never dividing by an exact zero."""
    d = den + eps
    if d == 0.0:
        d = eps
    return num / d

def clamp01(x):
    """Clip to [0, 1]; NaN and -inf land on 0, +inf on 1."""
    if x is None or math.isnan(x):
        logger.warning("non-finite normalized value %r replaced with 0.0", x)
        return 0.0
    if math.isinf(x):
        logger.warning("non-finite normalized value %r clipped", x)
    return float(max(0.0, min(1.0, x)))

def finite_or(x, default=0.0):
    x = float(x)
    if math.isfinite(x):
        return x
    logger.warning("non-finite measurement %r replaced with %r", x, default)
    return default

def round_half_up(x):
    # .5 always goes up (towards +inf), never to even
    return int(math.floor(x + 0.5))
