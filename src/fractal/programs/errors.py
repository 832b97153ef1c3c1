class ConstructionError(ValueError):
    """Raised when a program cannot be built from the requested parameters."""


class UnknownProgramError(ConstructionError):
    def __init__(self, kind: str, name: str, known: list[str]) -> None:
        self.kind = kind
        self.name = name
        self.known = known
        super().__init__(
            f"Unknown {kind} '{name}'. Valid options are: {', '.join(known)}"
        )


class IterationRangeError(ConstructionError):
    def __init__(self, name: str, iterations: int, maximum: int) -> None:
        self.name = name
        self.iterations = iterations
        self.maximum = maximum
        super().__init__(
            f"{name} requires 0 <= iterations <= {maximum}, got {iterations}"
        )


def check_iterations(name: str, iterations: int, maximum: int) -> int:
    if iterations < 0 or iterations > maximum:
        raise IterationRangeError(name, iterations, maximum)
    return iterations
