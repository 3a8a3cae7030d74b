
from .config import SceneConfig
from .generate import (
    ShapeKind,
    random_shape,
    random_scene,
    initialize_scene,
    demo_scene,
)
