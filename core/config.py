# Config (safe defaults + merge with YAML)
from pathlib import Path

import yaml

DEFAULT_PATH = Path("configs/default.yaml")

DEFAULT_CFG = {
    "analyzer": {
        "history_size": 120,          # ~2 min of display history at 1 Hz
        "movement_window": 12,
        "ear_blink_threshold": 0.21,
        "blink_window_ms": 60000,
        "default_face_size": 200,
    },
    "alerts": {
        "alert_threshold": 70,
        "alert_cooldown_ms": 8000,
        "breath_threshold": 70,
        "breath_release_margin": 10,
        "breath_cooldown_ms": 30000,
        "breath_auto": True,
    },
}

def merge_config(user_cfg):
    # shallow merge per top-level key
    user_cfg = user_cfg or {}
    return {k: (DEFAULT_CFG[k] | (user_cfg.get(k) or {})) for k in DEFAULT_CFG.keys()}

def load_config(path=None):
    cfg_path = Path(path) if path is not None else DEFAULT_PATH
    user_cfg = yaml.safe_load(cfg_path.read_text()) if cfg_path.exists() else {}
    return merge_config(user_cfg)
