from core.geometry import clamp01

W_EYES, W_BROW, W_STILL = 0.5, 0.3, 0.2

def focus_score(eye_open, brow, movement):
    # High focus = eyes open, brows relaxed, head steady
    raw = (eye_open["normalized"] * W_EYES
           + (1.0 - brow["normalized"]) * W_BROW
           + (1.0 - movement["normalized"]) * W_STILL)
    normalized = clamp01(raw)
    return {"value": raw, "normalized": normalized, "label": f"{normalized * 100:.0f}%"}
