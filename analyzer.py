# Per-frame stress analysis: 68 landmarks + face box -> 8 channels -> composite score
import logging

from core.clock import wall_clock_ms
from core.config import DEFAULT_CFG
from core.landmarks import as_points, face_size
from core.state import AnalyzerState
from channels.eyes import eye_openness, blink_rate
from channels.tension import brow_tension, mouth_tension, asymmetry
from channels.motion import head_movement
from channels.focus import focus_score
from channels.pose import head_pose
from scoring.composite import stress_score, level_for
from scoring.session import session_stats

logger = logging.getLogger(__name__)

class StressAnalyzer:
    """
    One instance per running monitor. analyze() once per processed frame, reset() at
    session start and end. Not thread-safe: a single caller drives it.
    """
    def __init__(self, cfg=None, clock=None):
        a = (cfg or DEFAULT_CFG)["analyzer"]
        self.ear_threshold = float(a["ear_blink_threshold"])
        self.blink_window_ms = float(a["blink_window_ms"])
        self.default_face_size = float(a["default_face_size"])
        self.clock = clock or wall_clock_ms
        self.state = AnalyzerState(a["history_size"], a["movement_window"])
        self._last_level = None

    def analyze(self, landmarks, box=None):
        pts = as_points(landmarks)
        size = face_size(box, self.default_face_size)
        st = self.state
        st.tick()

        eyes  = eye_openness(pts)
        brow  = brow_tension(pts, size)
        mouth = mouth_tension(pts)
        asym  = asymmetry(pts, size)
        move  = head_movement(st, pts, size)
        blink = blink_rate(st, eyes["ear"], self.clock(), self.ear_threshold, self.blink_window_ms)
        focus = focus_score(eyes, brow, move)
        pose  = head_pose(st, pts)

        metrics = {
            "eye_openness": eyes, "brow_tension": brow, "mouth_tension": mouth,
            "asymmetry": asym, "head_movement": move, "blink_rate": blink,
            "focus": focus, "head_pose": pose,
        }
        stress = stress_score(metrics)
        level = level_for(stress)
        st.record_score(stress)

        if level["label"] != self._last_level:
            logger.debug("stress level %s -> %s (score %d)", self._last_level, level["label"], stress)
            self._last_level = level["label"]

        return {
            "stress": stress,
            "level": level,
            "metrics": metrics,
            "history": st.history.recent_scores(),
        }

    def get_session_stats(self):
        return session_stats(self.state.history.session)

    def reset(self):
        self.state.reset()
        self._last_level = None
        logger.debug("analyzer state cleared")
