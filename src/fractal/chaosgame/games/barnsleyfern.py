from __future__ import annotations

from fractal.chaosgame.base import AffineChaosGame, AffineTransform
from fractal.geometry import Point

# Barnsley's coefficients, for a fern spanning x in [-2.2, 2.7] and y in [0, 10].
STEM = AffineTransform(((0.0, 0.0), (0.0, 0.16)), (0.0, 0.0))
SUCCESSIVE_LEAFLETS = AffineTransform(((0.85, 0.04), (-0.04, 0.85)), (0.0, 1.6))
LEFT_LEAFLET = AffineTransform(((0.2, -0.26), (0.23, 0.22)), (0.0, 1.6))
RIGHT_LEAFLET = AffineTransform(((-0.15, 0.28), (0.26, 0.24)), (0.0, 0.44))
WEIGHTS = (0.01, 0.85, 0.07, 0.07)

# Fit the fern into [-1, 1] x [-1, 1].
SCALE = 0.2


def _fit(transform: AffineTransform) -> AffineTransform:
    """Conjugate ``transform`` by ``q = SCALE * p - (0, 1)`` so it works in view space."""

    (a, b), (c, d) = transform.matrix
    e, f = transform.offset
    # q' = M q + (SCALE * offset + (I - M) @ (0, -1))
    offset_x = SCALE * e + b
    offset_y = SCALE * f - 1.0 + d
    return AffineTransform(transform.matrix, (offset_x, offset_y))


def build() -> AffineChaosGame:
    return AffineChaosGame(
        [_fit(t) for t in (STEM, SUCCESSIVE_LEAFLETS, LEFT_LEAFLET, RIGHT_LEAFLET)],
        WEIGHTS,
        initial=Point(0.0, -1.0),
    )
