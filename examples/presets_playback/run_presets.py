"""
Esempio minimo: regimi dei preset e riproduzione della traiettoria in tempo reale.
"""

import sys
import time
from pathlib import Path

# Aggiungi root repository al path
ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT))

from dampedosc.core import SimulationSession, SimulationWindow, PhysicalParameters
from dampedosc.logging_config import setup_logging
from dampedosc.physics import normalized_position, sample
from dampedosc.presets import PRESETS


def main() -> None:
    setup_logging()
    window = SimulationWindow(duration=20.0, sample_count=100, speed_factor=1.0)

    print("Preset regimes:")
    for preset in PRESETS.values():
        traj = sample(PhysicalParameters(**preset.params), window)
        print(
            f"  {preset.name:<22} {traj.regime.value:<18} "
            f"x(end)={traj.x[-1]: .4f}  xMax={traj.amplitude_bound:.3f}"
        )

    # 50 samples over 5 s, speed 0.1 -> one step every 10 ms
    with SimulationSession(window=SimulationWindow(duration=5.0, sample_count=50, speed_factor=0.1)) as session:
        session.apply_preset("weak_damping")
        session.toggle_running()
        for _ in range(10):
            time.sleep(0.05)
            s = session.get_current_sample()
            marker = normalized_position(s.x, session.amplitude_bound)
            bar = "-" * int(marker * 40)
            print(f"  t={s.t:5.2f}  x={s.x: .3f}  v={s.v: .3f}  |{bar}o")
        session.restart()

    print("Fatto.")


if __name__ == "__main__":
    main()
