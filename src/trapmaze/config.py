from dataclasses import dataclass, replace

MAP_WIDTH, MAP_HEIGHT = 36, 18
JUMP_DISTANCE = 3
MIN_SIDE = 3  # smallest grid with one interior cell


@dataclass(frozen=True)
class GameConfig:
    width: int = MAP_WIDTH
    height: int = MAP_HEIGHT
    jump_distance: int = JUMP_DISTANCE
    # Pause before the next level replaces the completed one (presentation only).
    level_advance_delay_ms: int = 500
    first_level: int = 1

    def validate(self) -> "GameConfig":
        if self.width < MIN_SIDE or self.height < MIN_SIDE:
            raise ValueError(
                f"grid must be at least {MIN_SIDE}x{MIN_SIDE}, got {self.width}x{self.height}"
            )
        if self.jump_distance < 1:
            raise ValueError("jump_distance must be >= 1")
        if self.first_level < 1:
            raise ValueError("first_level must be >= 1")
        return self

    def with_size(self, width: int, height: int) -> "GameConfig":
        return replace(self, width=width, height=height).validate()


DEFAULT_CONFIG = GameConfig()
