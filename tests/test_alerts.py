from core.config import DEFAULT_CFG
from scoring.alerts import AlertGate, BreathingTrigger, from_config

def test_alert_fires_then_cools_down(clock):
    gate = AlertGate(threshold=70, cooldown_ms=8000, clock=clock)
    assert gate.update(69) is False
    assert gate.update(70) is True
    clock.advance(5000)
    assert gate.update(90) is False
    clock.advance(3000)
    assert gate.update(90) is False     # exactly 8 s: still cooling
    clock.advance(1)
    assert gate.update(90) is True
    assert gate.count == 2

def test_alert_reset_keeps_cooldown(clock):
    gate = AlertGate(clock=clock)
    gate.update(99)
    gate.reset()
    assert gate.count == 0
    assert gate.update(99) is False     # new session, same 8 s cooldown
    clock.advance(8001)
    assert gate.update(99) is True
    assert gate.count == 1

def test_breathing_start_stop_hysteresis(clock):
    br = BreathingTrigger(threshold=70, release_margin=10, cooldown_ms=30000, clock=clock)
    assert br.update(72) == "start"
    assert br.active
    assert br.update(65) is None        # between 60 and 70: keep going
    assert br.update(59) == "stop"
    clock.advance(10000)
    assert br.update(80) is None        # inside cooldown
    clock.advance(20001)
    assert br.update(80) == "start"

def test_breathing_manual_mode(clock):
    br = BreathingTrigger(auto=False, clock=clock)
    assert br.update(100) is None
    assert not br.active

def test_breathing_face_lost(clock):
    br = BreathingTrigger(clock=clock)
    br.update(90)
    assert br.no_face() == "stop"
    assert br.no_face() is None
    assert br.update(90) == "start"     # no cooldown after a face loss

def test_from_config(clock):
    gate, br = from_config(DEFAULT_CFG, clock=clock)
    assert gate.threshold == 70 and gate.cooldown_ms == 8000
    assert br.threshold == 70 and br.release_margin == 10 and br.cooldown_ms == 30000
