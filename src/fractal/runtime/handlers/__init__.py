from fractal.runtime.handlers.base import WindowHandler as WindowHandler
from fractal.runtime.handlers.chaos import \
    ChaosGameWindowHandler as ChaosGameWindowHandler
from fractal.runtime.handlers.turtle import \
    DoubleBufferedAnimatedWindowHandler as DoubleBufferedAnimatedWindowHandler
from fractal.runtime.handlers.turtle import \
    DoubleBufferedWindowHandler as DoubleBufferedWindowHandler
from fractal.runtime.handlers.turtle import SinkTurtle as SinkTurtle
from fractal.runtime.handlers.turtle import \
    construct_turtle_window_handler as construct_turtle_window_handler
