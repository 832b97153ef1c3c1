from fractal.chaosgame.base import AffineChaosGame as AffineChaosGame
from fractal.chaosgame.base import AffineTransform as AffineTransform
from fractal.chaosgame.base import ChaosGame as ChaosGame
from fractal.chaosgame.base import \
    ChaosGameMoveIterator as ChaosGameMoveIterator
