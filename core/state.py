# cross-frame memory for one analyzer instance (single writer)
import math
from collections import deque

from core.history import HistoryTracker

class AnalyzerState:
    def __init__(self, history_size=120, movement_window=12):
        self.history = HistoryTracker(history_size)
        self.movement_window = int(movement_window)
        self.reset()

    def reset(self):
        self.history.reset()
        self.blink_times = []        # ms timestamps of closed->open transitions
        self.eye_closed = False      # blink latch
        self.mov_buf = deque(maxlen=self.movement_window)
        self.prev_nose = None
        self.prev_pose = {"pitch": 0, "yaw": 0, "roll": 0}
        self.frame_count = 0
        self.total_frames = 0

    # --- designated update paths ---
    def tick(self):
        self.frame_count += 1
        self.total_frames += 1

    def push_movement(self, nose_xy, face_size):
        """
        Store the nose displacement vs last frame (face-size relative); first frame only primes.
        A non-finite nose is skipped entirely so the buffer and prev_nose stay clean.
        """
        x, y = float(nose_xy[0]), float(nose_xy[1])
        if not (math.isfinite(x) and math.isfinite(y)):
            return
        if self.prev_nose is not None:
            dx = x - self.prev_nose[0]
            dy = y - self.prev_nose[1]
            mov = math.hypot(dx, dy) / face_size
            if math.isfinite(mov):
                self.mov_buf.append(mov)
        self.prev_nose = (x, y)

    def update_blink(self, ear, threshold, now_ms, window_ms):
        """Two-state latch: open->closed below threshold, closed->open logs one blink."""
        if ear < threshold and not self.eye_closed:
            self.eye_closed = True
        elif ear >= threshold and self.eye_closed:
            self.eye_closed = False
            self.blink_times.append(now_ms)
        self.blink_times = [t for t in self.blink_times if now_ms - t < window_ms]
        return len(self.blink_times)

    def record_pose(self, pitch, yaw, roll):
        self.prev_pose = {"pitch": pitch, "yaw": yaw, "roll": roll}

    def record_score(self, score):
        self.history.push(score)
