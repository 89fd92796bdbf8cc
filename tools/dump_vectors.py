from __future__ import annotations

import json
import os
from dataclasses import asdict
from datetime import date
from pathlib import Path

from macro_targets.models import DayEntry, TrainingSession
from macro_targets.profile_io import load_profile
from macro_targets.targets import compute_daily_targets

# Emits one JSON line per case so the output can be diffed against the
# server's responses for the same profile.
WEIGHTS = [55.0, 72.5, 85.0, 110.0]
DAY_TYPES = ["performance", "fatburner", "metabolize"]
SESSION_PLANS = {
    "rest": (),
    "strength60": (TrainingSession("strength", 60),),
    "run45_walk30": (TrainingSession("run", 45), TrainingSession("walking", 30)),
}


def main() -> None:
    profile_path = Path(os.environ.get("MACRO_TARGETS_PROFILE", "profile.json")).resolve()
    on = date.fromisoformat(os.environ.get("MACRO_TARGETS_ON", date.today().isoformat()))
    profile = load_profile(profile_path)
    print(f"# profile={profile_path} on={on.isoformat()}")
    for weight_kg in WEIGHTS:
        for day_type in DAY_TYPES:
            for plan, sessions in SESSION_PLANS.items():
                result = compute_daily_targets(profile, DayEntry(weight_kg, day_type, sessions), on)
                case = {"weight_kg": weight_kg, "day_type": day_type, "sessions": plan}
                print(json.dumps({"case": case, "targets": None if result is None else asdict(result)}))


if __name__ == "__main__":
    main()
