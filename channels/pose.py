# Approximate head pose from 2D landmark geometry (no 3D model)
import math

from core.geometry import safe_ratio, clamp01, finite_or, round_half_up
from core.landmarks import NOSE_TIP, MOUTH_LEFT, MOUTH_RIGHT

PITCH_NEUTRAL = 0.45   # nose sits ~45% of the way from eye line to mouth line
PITCH_GAIN = 35.0
YAW_GAIN   = 60.0
POSE_FULL  = 60.0      # |pitch| + |yaw| degrees that saturates

def _deg(x):
    x = finite_or(x)
    return round_half_up(x)

def head_pose(state, pts):
    nose_x, nose_y = pts[NOSE_TIP]

    # Pitch: nose tip vs eye line, relative to eye→mouth height
    eye_mid_y = (pts[36, 1] + pts[45, 1]) / 2.0
    mouth_mid_y = (pts[MOUTH_LEFT, 1] + pts[MOUTH_RIGHT, 1]) / 2.0
    face_h = mouth_mid_y - eye_mid_y
    pitch = _deg((safe_ratio(nose_y - eye_mid_y, face_h) - PITCH_NEUTRAL) * 2.0 * PITCH_GAIN)

    # Yaw: nose position between eye centers
    l_eye_x = (pts[36, 0] + pts[39, 0]) / 2.0
    r_eye_x = (pts[42, 0] + pts[45, 0]) / 2.0
    yaw = _deg((safe_ratio(nose_x - l_eye_x, r_eye_x - l_eye_x) - 0.5) * YAW_GAIN)

    # Roll: outer-eye-corner line tilt
    dy = pts[45, 1] - pts[36, 1]
    dx = pts[45, 0] - pts[36, 0]
    roll = _deg(math.degrees(math.atan2(dy, dx)))

    normalized = clamp01((abs(pitch) + abs(yaw)) / POSE_FULL)
    state.record_pose(pitch, yaw, roll)
    side = "R" if yaw > 0 else "L"
    return {"value": abs(pitch) + abs(yaw), "pitch": pitch, "yaw": yaw, "roll": roll,
            "normalized": normalized, "label": f"{side}{abs(yaw)}°"}
