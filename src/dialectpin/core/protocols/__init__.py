from .normalizer import ScriptNormalizer, is_simplified

__all__ = ["ScriptNormalizer", "is_simplified"]
