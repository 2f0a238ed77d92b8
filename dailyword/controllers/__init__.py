"""
Controllers Package

HTTP endpoints for the rendering and input layer.
"""

from .game_controller import game_bp

__all__ = ['game_bp']
