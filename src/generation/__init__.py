"""Static API generation package."""

from src.generation.generate import run_generate

__all__ = ["run_generate"]
