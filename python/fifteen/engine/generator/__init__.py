from fifteen.engine.generator.generator import DEFAULT_STEPS, GameGenerator

__all__ = ["DEFAULT_STEPS", "GameGenerator"]
