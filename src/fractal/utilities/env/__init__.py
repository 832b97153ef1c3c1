"""Environment configuration helpers."""

from fractal.utilities.env.config import Configuration as Configuration
from fractal.utilities.env.enums import RenderMode as RenderMode
