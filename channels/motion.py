# head movement: nose-tip displacement, moving average over the last N frames
import numpy as np

from core.geometry import clamp01, finite_or
from core.landmarks import NOSE_TIP

MOVE_FULL = 0.05   # avg displacement (× face size per frame) that saturates

def head_movement(state, pts, face_size):
    state.push_movement(pts[NOSE_TIP], face_size)
    avg = finite_or(np.mean(state.mov_buf)) if state.mov_buf else 0.0
    normalized = clamp01(avg / MOVE_FULL)
    return {"value": avg, "normalized": normalized, "label": f"{normalized * 100:.0f}%"}
