# 68-point face layout (iBUG/dlib order) + detector-output adaptation
import math
import numpy as np

N_POINTS = 68

JAW        = list(range(0, 17))
LEFT_BROW  = list(range(17, 22))
RIGHT_BROW = list(range(22, 27))
NOSE_BRIDGE = list(range(27, 31))
NOSE_BASE  = list(range(31, 36))
LEFT_EYE   = list(range(36, 42))
RIGHT_EYE  = list(range(42, 48))
OUTER_MOUTH = list(range(48, 60))
INNER_MOUTH = list(range(60, 68))

NOSE_TIP = 30
MOUTH_LEFT, MOUTH_RIGHT = 48, 54
MOUTH_TOP, MOUTH_BOTTOM = 51, 57

def as_points(landmarks):
    """
    Convert detector landmarks (68 rows of x, y[, z]) into a float (68, 2) array.
    Anything else is a caller bug, so fail fast.
    """
    pts = np.asarray(landmarks, dtype=np.float64)
    if pts.ndim != 2 or pts.shape[0] != N_POINTS or pts.shape[1] < 2:
        raise ValueError(f"expected {N_POINTS} landmark points with x, y; got shape {pts.shape}")
    return pts[:, :2]

def face_size(box, default=200.0):
    # bbox width normalizes every pixel measurement
    if not box:
        return float(default)
    w = box.get("width")
    if w is None:
        return float(default)
    w = float(w)
    if not math.isfinite(w) or w <= 0.0:
        return float(default)
    return w
