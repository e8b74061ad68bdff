# stress alert + auto breathing-guide trigger policies (threshold, cooldown, hysteresis)
import logging

from core.clock import wall_clock_ms

logger = logging.getLogger(__name__)

class AlertGate:
    """
    Fires when stress >= threshold, at most once per cooldown.
    reset() only zeroes the per-session count; the cooldown spans sessions.
    """
    def __init__(self, threshold=70, cooldown_ms=8000, clock=None):
        self.threshold = threshold
        self.cooldown_ms = cooldown_ms
        self.clock = clock or wall_clock_ms
        self.last_fired = None
        self.count = 0

    def reset(self):
        self.count = 0

    def update(self, stress):
        if stress < self.threshold:
            return False
        now = self.clock()
        if self.last_fired is not None and now - self.last_fired <= self.cooldown_ms:
            return False
        self.last_fired = now
        self.count += 1
        logger.info("stress alert: %s/100 (alert #%d)", stress, self.count)
        return True

class BreathingTrigger:
    """
    Start the guide when stress reaches threshold (unless stopped within the cooldown),
    stop it once stress falls below threshold - release_margin.
    """
    def __init__(self, threshold=70, release_margin=10, cooldown_ms=30000, auto=True, clock=None):
        self.threshold = threshold
        self.release_margin = release_margin
        self.cooldown_ms = cooldown_ms
        self.auto = auto
        self.clock = clock or wall_clock_ms
        self.reset()

    def reset(self):
        self.active = False
        self.stopped_at = None

    def update(self, stress):
        if not self.auto:
            return None
        now = self.clock()
        if stress >= self.threshold and not self.active:
            if self.stopped_at is None or now - self.stopped_at > self.cooldown_ms:
                self.active = True
                logger.info("breathing guide started (stress %s)", stress)
                return "start"
        elif stress < self.threshold - self.release_margin and self.active:
            self.active = False
            self.stopped_at = now
            logger.info("breathing guide stopped (stress %s)", stress)
            return "stop"
        return None

    def no_face(self):
        # face lost: drop an auto-started guide without arming the cooldown
        if self.active and self.auto:
            self.active = False
            return "stop"
        return None

def from_config(cfg, clock=None):
    a = cfg["alerts"]
    gate = AlertGate(a["alert_threshold"], a["alert_cooldown_ms"], clock=clock)
    breath = BreathingTrigger(a["breath_threshold"], a["breath_release_margin"],
                              a["breath_cooldown_ms"], auto=a["breath_auto"], clock=clock)
    return gate, breath
