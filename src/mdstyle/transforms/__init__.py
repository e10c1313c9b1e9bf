from mdstyle.transforms.base import Transform
from mdstyle.transforms.variables import VariableResolutionTransform
from mdstyle.transforms.list_display import ListDisplayTransform

BUILTIN_TRANSFORMS: list[Transform] = [
    VariableResolutionTransform(),
    ListDisplayTransform(),
]


def apply_transforms(css: str, custom_transforms: list[Transform] | None = None) -> str:
    """Apply all built-in transforms (and any custom ones) to *css*."""
    transforms = list(BUILTIN_TRANSFORMS)
    if custom_transforms:
        transforms.extend(custom_transforms)
    for t in transforms:
        css = t.apply(css)
    return css
