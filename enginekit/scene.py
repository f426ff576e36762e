"""Scenes, scene factories and the manager that switches between them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional


class BaseScene:
    """A game scene that tracks its lifecycle; subclasses add their own work."""

    def __init__(self) -> None:
        self.active = False
        self.frames_updated = 0
        self.frames_drawn = 0

    def initialize(self) -> None:
        """Prepare the scene and mark it active."""
        self.active = True
        self.frames_updated = 0
        self.frames_drawn = 0

    def finalize(self) -> None:
        """Release the scene's resources and mark it inactive."""
        self.active = False

    def update(self) -> None:
        """Advance the scene by one frame."""
        self.frames_updated += 1

    def draw(self) -> None:
        """Draw the scene."""
        self.frames_drawn += 1


class AbstractSceneFactory(ABC):
    """Creates scenes by name."""

    @abstractmethod
    def create_scene(self, scene_name: str) -> Optional[BaseScene]:
        """Return a new scene for ``scene_name``, or None if the name is unknown."""


class SceneManager:
    """Runs one scene at a time and switches to a requested scene on the next update."""

    def __init__(self, scene_factory: Optional[AbstractSceneFactory] = None) -> None:
        self.scene_factory = scene_factory
        self.scene: Optional[BaseScene] = None
        self.next_scene: Optional[BaseScene] = None

    def change_scene(self, scene_name: str) -> None:
        """Request a switch to the scene the factory makes for ``scene_name``."""
        if self.scene_factory is None:
            raise RuntimeError("no scene factory is set")
        if self.next_scene is not None:
            raise RuntimeError("a scene change is already pending")
        self.next_scene = self.scene_factory.create_scene(scene_name)

    def update(self) -> None:
        """Perform a pending scene change, then update the current scene."""
        if self.next_scene is not None:
            if self.scene is not None:
                self.scene.finalize()
            self.scene = self.next_scene
            self.next_scene.finalize()
            self.next_scene = None
            self.scene.initialize()

        if self.scene is None:
            raise RuntimeError("no scene is running")
        self.scene.update()

    def draw(self) -> None:
        """Draw the current scene."""
        if self.scene is None:
            raise RuntimeError("no scene is running")
        self.scene.draw()

    def close(self) -> None:
        """Finalize and drop the current scene."""
        if self.scene is not None:
            self.scene.finalize()
            self.scene = None

    def __enter__(self) -> SceneManager:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()