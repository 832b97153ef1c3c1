from fractal.utilities.env.parsing import _env_int, _env_optional_int

DEFAULT_DOTS_PER_FRAME = 1000


class ChaosGameConfiguration:
    @classmethod
    def dots_per_frame(cls) -> int:
        return _env_int(
            "FRACTAL_DOTS_PER_FRAME", default=DEFAULT_DOTS_PER_FRAME, minimum=1
        )

    @classmethod
    def chaos_seed(cls) -> int | None:
        return _env_optional_int("FRACTAL_CHAOS_SEED", minimum=0)
