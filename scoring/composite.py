import math

from core.geometry import round_half_up

# Fixed weights; they sum to 100 so the raw composite already lands in 0..100
WEIGHTS = {
    "eye_closure":   20,   # uses 1 - eye_openness
    "brow_tension":  25,
    "mouth_tension": 18,
    "asymmetry":     12,
    "head_movement": 10,
    "blink_rate":    10,
    "distraction":    5,   # uses 1 - focus
}

# (upper bound exclusive, label, css class, color)
LEVELS = [
    (20,   "CALM",     "calm",     "#00ff99"),
    (40,   "MILD",     "mild",     "#00e5ff"),
    (60,   "MODERATE", "moderate", "#ffaa00"),
    (80,   "HIGH",     "high",     "#ff3b3b"),
    (None, "EXTREME",  "extreme",  "#ff0055"),
]

def weighted_sum(m):
    return ((1.0 - m["eye_openness"]["normalized"]) * WEIGHTS["eye_closure"]
            + m["brow_tension"]["normalized"]       * WEIGHTS["brow_tension"]
            + m["mouth_tension"]["normalized"]      * WEIGHTS["mouth_tension"]
            + m["asymmetry"]["normalized"]          * WEIGHTS["asymmetry"]
            + m["head_movement"]["normalized"]      * WEIGHTS["head_movement"]
            + m["blink_rate"]["normalized"]         * WEIGHTS["blink_rate"]
            + (1.0 - m["focus"]["normalized"])      * WEIGHTS["distraction"])

def stress_score(metrics):
    """Composite stress 0..100 (int). Clamped again here even though channels are clamped."""
    raw = weighted_sum(metrics)
    if math.isnan(raw):
        return 0
    return round_half_up(max(0.0, min(100.0, raw)))

def level_for(score):
    for upper, label, cls, color in LEVELS:
        if upper is None or score < upper:
            return {"label": label, "cls": cls, "color": color}
