"""Named constants for stroke construction.

Distances are in input units (usually pixels).
"""
import math

# StrokeOptions defaults
DEFAULT_SIZE = 8.0                # base stroke diameter
DEFAULT_THINNING = 0.5            # pressure effect on width, -1..1
DEFAULT_SMOOTHING = 0.5           # side simplification, 0..1
DEFAULT_STREAMLINE = 0.5          # input smoothing, 0..1
DEFAULT_PRESSURE = 0.5            # pressure for samples that carry none

# Pressure simulation
PRESSURE_SEED = 0.5               # starting pressure before the first segment

# Thinning magnitude clamps (keep width away from zero and from 2x size)
THINNING_MIN = 0.05
THINNING_MAX = 0.95

# Offset strategy
OFFSET_SMOOTH_DIST = 3.0          # side drift before a vertex is committed

# Spline strategy
RESAMPLE_DIVISOR = 4.0            # resample every size / 4 along the centerline
LEAD_IN_DIVISOR = 2.0             # gradients before size / 2 are replaced
END_GRADIENT_BACKOFF = 1.1        # end tangent sampled at n - 1.1
END_GRADIENT_SAMPLES = 3          # samples averaged for the end tangent

# Caps and corner fans: rotate by pi * t for t in CAP_STEPS
CAP_STEPS = (0.0, 0.25, 0.5, 0.75, 1.0)

# Short strokes: total length below SHORT_STROKE_FACTOR * max size
SHORT_STROKE_FACTOR = 2.0

TAU = 2 * math.pi
