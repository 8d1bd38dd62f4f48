import os
import sys

THIS_DIR = os.path.dirname(os.path.abspath(__file__))
SRC = os.path.abspath(os.path.join(THIS_DIR, "..", "src"))
if SRC not in sys.path:
    sys.path.insert(0, SRC)

import matplotlib.pyplot as plt

from beam_engine.domain.beam import BeamSpec, SupportType, LoadType
from beam_engine.engine.analysis import compute_beam_result
from beam_engine.materials.material_db import load_default_materials
from beam_engine.sections.catalog import standard_section
from beam_engine.services.logging_setup import setup_logging
from beam_engine.services.summary import summarize

logger = setup_logging()

steel = load_default_materials().get("Steel")

spec = BeamSpec(
    span_m=10.0,
    support=SupportType.SIMPLY_SUPPORTED,
    load_type=LoadType.POINT,
    load_kn=100.0,
    load_position_m=5.0,
    section=standard_section("150 x 300 mm"),
    elastic_modulus_gpa=steel.E_gpa,
)

res = compute_beam_result(spec)
print(summarize(spec, res).as_text())
print("I [cm^4] =", res.moment_of_inertia_cm4)
print("R1, R2 =", res.reactions.r1, res.reactions.r2)

x = [p.x_m for p in res.diagram]
fig, (ax_v, ax_m, ax_y) = plt.subplots(3, 1, sharex=True, figsize=(8, 9))
ax_v.step(x, [p.shear_kn for p in res.diagram], where="post")
ax_v.set_ylabel("V [kN]")
ax_m.plot(x, [p.moment_knm for p in res.diagram])
ax_m.set_ylabel("M [kN·m]")
ax_y.plot(x, [p.deflection_mm for p in res.diagram])
ax_y.set_ylabel("y [mm]")
ax_y.invert_yaxis()
ax_y.set_xlabel("x [m]")
for ax in (ax_v, ax_m, ax_y):
    ax.grid(True, alpha=0.3)
    ax.axhline(0.0, color="k", lw=0.8)
fig.tight_layout()
plt.show()
