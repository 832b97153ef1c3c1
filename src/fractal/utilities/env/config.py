from fractal.utilities.env.chaosgame import ChaosGameConfiguration
from fractal.utilities.env.rendering import RenderingConfiguration


class Configuration(
    RenderingConfiguration,
    ChaosGameConfiguration,
):
    """Aggregate environment configuration helpers."""
