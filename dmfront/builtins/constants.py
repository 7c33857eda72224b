"""
BYOND builtin constant macros.

These are the names the DM preprocessor knows before any #define in user
code: direction flags, layers, icon and blend operations, sight and
appearance flags, map formats, perspectives and a few strings.
"""

from typing import Dict, Union

from ..lexer.tokens import Token
from ..preprocessor.defines import ConstantDefine, DefineMap

BUILTIN_CONSTANTS: Dict[str, Union[int, str]] = {
    'DM_VERSION': 511,

    'FALSE': 0,
    'TRUE': 1,

    # Directions
    'NORTH': 1,
    'SOUTH': 2,
    'EAST': 4,
    'WEST': 8,
    'NORTHEAST': 5,
    'SOUTHEAST': 6,
    'NORTHWEST': 9,
    'SOUTHWEST': 10,

    # Layers
    'FLOAT_LAYER': -1,
    'AREA_LAYER': 1,
    'TURF_LAYER': 2,
    'OBJ_LAYER': 3,
    'MOB_LAYER': 4,
    'FLY_LAYER': 5,
    'EFFECTS_LAYER': 5000,
    'TOPDOWN_LAYER': 10000,
    'BACKGROUND_LAYER': 20000,

    # icon.Blend() operations
    'ICON_ADD': 0,
    'ICON_SUBTRACT': 1,
    'ICON_MULTIPLY': 2,
    'ICON_OVERLAY': 3,
    'ICON_AND': 4,
    'ICON_OR': 5,
    'ICON_UNDERLAY': 6,

    # atom.blend_mode
    'BLEND_DEFAULT': 0,
    'BLEND_OVERLAY': 1,
    'BLEND_ADD': 2,
    'BLEND_SUBTRACT': 3,
    'BLEND_MULTIPLY': 4,

    # atom.animate_movement
    'NO_STEPS': 0,
    'FORWARD_STEPS': 1,
    'SLIDE_STEPS': 2,
    'SYNC_STEPS': 3,

    # mob.sight
    'BLIND': 1,
    'SEE_MOBS': 4,
    'SEE_OBJS': 8,
    'SEE_TURFS': 16,
    'SEE_SELF': 32,
    'SEE_INFRA': 64,
    'SEE_PIXELS': 256,
    'SEE_THRU': 512,
    'SEE_BLACKNESS': 1024,

    # atom.appearance_flags
    'LONG_GLIDE': 1,
    'RESET_COLOR': 2,
    'RESET_ALPHA': 4,
    'RESET_TRANSFORM': 8,
    'NO_CLIENT_COLOR': 16,
    'KEEP_TOGETHER': 32,
    'KEEP_APART': 64,
    'PLANE_MASTER': 128,
    'TILE_BOUND': 256,
    'PIXEL_SCALE': 512,

    # world.map_format
    'TOPDOWN_MAP': 0,
    'ISOMETRIC_MAP': 1,
    'SIDE_MAP': 2,
    'TILED_ICON_MAP': 32768,

    # client.control_freak
    'CONTROL_FREAK_ALL': 1,
    'CONTROL_FREAK_SKIN': 2,
    'CONTROL_FREAK_MACROS': 4,

    # client.perspective
    'MOB_PERSPECTIVE': 0,
    'EYE_PERSPECTIVE': 1,
    'EDGE_PERSPECTIVE': 2,

    'MOUSE_ACTIVE_POINTER': 1,

    # world.system_type
    'MS_WINDOWS': "MS Windows",
    'UNIX': "UNIX",

    # gender
    'MALE': "male",
    'FEMALE': "female",
    'NEUTER': "neuter",
    'PLURAL': "plural",
}


def constant_token(value: Union[int, str]) -> Token:
    """Single literal token for a builtin constant value."""
    if isinstance(value, str):
        return Token.string(value)
    return Token.integer(value)


def default_defines(defines: DefineMap):
    """Register the builtin constant macros into `defines`, overwriting."""
    for name, value in BUILTIN_CONSTANTS.items():
        defines[name] = ConstantDefine.of(constant_token(value))
    # TODO: function-like builtins ASSERT, CRASH and EXCEPTION need FunctionDefine bodies
