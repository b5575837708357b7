from .base import Scene
from .chaos_scene import ChaosGameScene
from .manager import SceneManager

__all__ = ["Scene", "ChaosGameScene", "SceneManager"]
