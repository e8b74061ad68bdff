# whole-session aggregates + per-frame export rows (no file I/O here)
import numpy as np

from core.geometry import round_half_up

CALM_BELOW = 20
HIGH_FROM  = 60
N_BUCKETS  = 10

CSV_COLUMNS = ("time_ms", "stress", "emotion", "focus", "pitch", "yaw", "roll", "blink_rate")

def session_stats(scores):
    """avg / peak / min / calm / high / total for one session; None when nothing was analyzed."""
    if not scores:
        return None
    arr = np.asarray(scores, dtype=np.float64)
    return {
        "avg":   round_half_up(float(arr.mean())),
        "peak":  int(arr.max()),
        "min":   int(arr.min()),
        "calm":  int((arr < CALM_BELOW).sum()),
        "high":  int((arr >= HIGH_FROM).sum()),
        "total": int(arr.size),
    }

def session_fractions(stats):
    # whole-percent shares for the summary panel
    if not stats or not stats["total"]:
        return {"calm_pct": 0, "high_pct": 0}
    return {
        "calm_pct": round_half_up(100.0 * stats["calm"] / stats["total"]),
        "high_pct": round_half_up(100.0 * stats["high"] / stats["total"]),
    }

def score_distribution(scores):
    # 10 equal buckets over [0, 100); 100 folds into the last one
    counts = [0] * N_BUCKETS
    for s in scores:
        counts[min(N_BUCKETS - 1, int(s // 10))] += 1
    return counts

def frame_record(result, t_ms, emotion="neutral"):
    """One export row, in CSV_COLUMNS order."""
    m = result["metrics"]
    pose = m["head_pose"]
    return [
        int(t_ms),
        result["stress"],
        emotion or "neutral",
        round_half_up(m["focus"]["normalized"] * 100),
        pose["pitch"],
        pose["yaw"],
        pose["roll"],
        m["blink_rate"]["bpm"],
    ]
