from fractal.turtle.actions import Forward as Forward
from fractal.turtle.actions import PenDown as PenDown
from fractal.turtle.actions import PenUp as PenUp
from fractal.turtle.actions import SetHeading as SetHeading
from fractal.turtle.actions import SetPosition as SetPosition
from fractal.turtle.actions import Turn as Turn
from fractal.turtle.actions import TurtleAction as TurtleAction
from fractal.turtle.base import StateTurtle as StateTurtle
from fractal.turtle.base import Turtle as Turtle
from fractal.turtle.base import TurtleProgram as TurtleProgram
from fractal.turtle.chunks import ActionChunk as ActionChunk
from fractal.turtle.chunks import \
    TurtleCollectToNextForwardIterator as TurtleCollectToNextForwardIterator
from fractal.turtle.state import TurtleState as TurtleState
