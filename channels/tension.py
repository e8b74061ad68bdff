# brow / mouth tension + left-right asymmetry (all stateless, face-size relative)
from core.geometry import distance, safe_ratio, clamp01, finite_or
from core.landmarks import NOSE_TIP, MOUTH_LEFT, MOUTH_RIGHT, MOUTH_TOP, MOUTH_BOTTOM

BROW_GAP_RELAXED = 0.18   # brow-to-eye gap (× face size) that reads as fully relaxed
MOUTH_RATIO_OPEN = 0.30   # outer-lip height/width at which tension hits 0
ASYM_FULL        = 0.05   # midline deviation (× face size) that saturates

def _pct(n):
    return f"{n * 100:.0f}%"

def brow_tension(pts, face_size):
    # middle three brow points vs upper/lower lid points
    l_brow_y = pts[[18, 19, 20], 1].mean()
    r_brow_y = pts[[23, 24, 25], 1].mean()
    l_eye_y  = pts[[37, 38, 40, 41], 1].mean()
    r_eye_y  = pts[[43, 44, 46, 47], 1].mean()
    gap = finite_or(((l_eye_y - l_brow_y) + (r_eye_y - r_brow_y)) / 2.0)
    normalized = clamp01(1.0 - gap / (BROW_GAP_RELAXED * face_size))
    return {"value": gap, "gap": gap, "normalized": normalized, "label": _pct(normalized)}

def mouth_tension(pts):
    m_w = distance(pts[MOUTH_LEFT], pts[MOUTH_RIGHT])
    m_h = distance(pts[MOUTH_TOP], pts[MOUTH_BOTTOM])
    ratio = finite_or(safe_ratio(m_h, m_w))
    normalized = clamp01(1.0 - ratio / MOUTH_RATIO_OPEN)
    return {"value": ratio, "ratio": ratio, "normalized": normalized, "label": _pct(normalized)}

def asymmetry(pts, face_size):
    nose_x = pts[NOSE_TIP, 0]
    l_eye_x = (pts[36, 0] + pts[39, 0]) / 2.0
    r_eye_x = (pts[42, 0] + pts[45, 0]) / 2.0
    eye_diff   = abs((nose_x - l_eye_x) - (r_eye_x - nose_x))
    mouth_diff = abs((nose_x - pts[MOUTH_LEFT, 0]) - (pts[MOUTH_RIGHT, 0] - nose_x))
    asym = finite_or((eye_diff + mouth_diff) / 2.0)
    normalized = clamp01(asym / (ASYM_FULL * face_size))
    # label shows symmetry, not asymmetry
    return {"value": asym, "normalized": normalized, "label": _pct(1.0 - normalized)}
