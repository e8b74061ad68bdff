# eye openness (EAR) + blink rate over a rolling window
from core.geometry import ear, clamp01, finite_or
from core.landmarks import LEFT_EYE, RIGHT_EYE

EAR_FLOOR = 0.1    # EAR at/below this reads fully closed
EAR_SPAN  = 0.3    # 0.1 + 0.3 → fully open

BLINK_LOW  = 8     # blinks/min; below = staring / frozen
BLINK_HIGH = 25    # above = agitated
BLINK_HIGH_SPAN = 20

def _pct(n):
    return f"{n * 100:.0f}%"

def eye_openness(pts):
    ear_l = finite_or(ear(*pts[LEFT_EYE]))
    ear_r = finite_or(ear(*pts[RIGHT_EYE]))
    mean_ear = (ear_l + ear_r) / 2.0
    normalized = clamp01((mean_ear - EAR_FLOOR) / EAR_SPAN)
    return {"value": mean_ear, "ear": mean_ear, "ear_left": ear_l, "ear_right": ear_r,
            "normalized": normalized, "label": _pct(normalized)}

def blink_normalized(bpm):
    if bpm < BLINK_LOW:
        return (BLINK_LOW - bpm) / BLINK_LOW
    if bpm > BLINK_HIGH:
        return clamp01((bpm - BLINK_HIGH) / BLINK_HIGH_SPAN)
    return 0.0

def blink_rate(state, mean_ear, now_ms, threshold=0.21, window_ms=60000):
    """
    Blinks seen in the trailing window, reported directly as blinks/min.
    Under-counts until a full window has elapsed since reset (known approximation).
    """
    bpm = state.update_blink(mean_ear, threshold, now_ms, window_ms)
    normalized = clamp01(blink_normalized(bpm))
    return {"value": bpm, "bpm": bpm, "normalized": normalized, "label": f"{bpm}/min"}
