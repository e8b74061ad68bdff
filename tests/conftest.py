"""
Synthetic 68-point faces (iBUG order) with controllable geometry.

Neutral layout for a 200 px wide face centred at (320, 240):
  eyes 80 px apart, 30 px wide, eye line at y=220
  nose tip 45% of the way from eye line to mouth line (zero pitch)
  mouth corners 50 px apart, 70 px below the eye line
"""
import math

import numpy as np
import pytest

FACE_BOX = {"x": 220, "y": 120, "width": 200, "height": 240}

def make_face(ear=0.35, brow_gap=40.0, mouth_ratio=0.36, nose_dx=0.0, nose_dy=0.0,
              roll_deg=0.0, shift=(0.0, 0.0), cx=320.0, cy=240.0):
    pts = np.zeros((68, 2), dtype=np.float64)
    ey = cy - 20.0
    my = ey + 70.0

    # jaw: lower half-ellipse, ear to ear
    for i in range(17):
        a = math.pi * i / 16.0
        pts[i] = (cx - 100.0 * math.cos(a), cy + 20.0 + 100.0 * math.sin(a))

    v = ear * 30.0
    for base, ex in ((36, cx - 40.0), (42, cx + 40.0)):
        pts[base + 0] = (ex - 15.0, ey)
        pts[base + 1] = (ex - 5.0, ey - v / 2.0)
        pts[base + 2] = (ex + 5.0, ey - v / 2.0)
        pts[base + 3] = (ex + 15.0, ey)
        pts[base + 4] = (ex + 5.0, ey + v / 2.0)
        pts[base + 5] = (ex - 5.0, ey + v / 2.0)

    for base, ex in ((17, cx - 40.0), (22, cx + 40.0)):
        for k in range(5):
            pts[base + k] = (ex - 20.0 + 10.0 * k, ey - brow_gap)

    for k in range(4):
        pts[27 + k] = (cx, ey + 10.5 * k)
    pts[30] = (cx + nose_dx, ey + 0.45 * 70.0 + nose_dy)
    for k in range(5):
        pts[31 + k] = (cx - 10.0 + 5.0 * k, ey + 38.0)

    h = mouth_ratio * 50.0
    top = [(-25.0, 0.0), (-15.0, -0.8), (-7.0, -1.0), (0.0, -1.0), (7.0, -1.0), (15.0, -0.8), (25.0, 0.0)]
    for k, (dx, f) in enumerate(top):
        pts[48 + k] = (cx + dx, my + f * h / 2.0)
    bottom = [(15.0, 0.8), (7.0, 1.0), (0.0, 1.0), (-7.0, 1.0), (-15.0, 0.8)]
    for k, (dx, f) in enumerate(bottom):
        pts[55 + k] = (cx + dx, my + f * h / 2.0)
    inner = [(-20.0, 0.0), (-8.0, -0.5), (0.0, -0.5), (8.0, -0.5),
             (20.0, 0.0), (8.0, 0.5), (0.0, 0.5), (-8.0, 0.5)]
    for k, (dx, f) in enumerate(inner):
        pts[60 + k] = (cx + dx, my + f * h / 2.0)

    if roll_deg:
        r = math.radians(roll_deg)
        rot = np.array([[math.cos(r), -math.sin(r)], [math.sin(r), math.cos(r)]])
        pts = (pts - (cx, cy)) @ rot.T + (cx, cy)
    return pts + np.asarray(shift, dtype=np.float64)

class FakeClock:
    def __init__(self, start=0.0):
        self.now = float(start)

    def __call__(self):
        return self.now

    def advance(self, ms):
        self.now += ms
        return self.now

@pytest.fixture
def clock():
    return FakeClock()

@pytest.fixture
def face():
    return make_face
