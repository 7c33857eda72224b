"""
The builtin declaration table.

Each entry is written the way the declaration would look in DM source,
minus the leading slash:

    entry("atom/movable")                          a type
    entry("obj/parent_type", prefab("/atom/movable"))   a parent override
    entry("atom/var/icon/icon")                    a var with a declared type
    entry("world/var/static/fps", number(10))      a static var with a default

Entries are parsed into TypeDeclaration or VariableDeclaration when the
table is built, so the registrar never looks at raw strings.

The table is order dependent: a type must be declared by an earlier entry
before any default refers to it. check_entry_order() verifies this.
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional, Set, Tuple, Union

from ..location import Location
from ..parser.ast_nodes import ASTNode, NumberNode, StringNode, PrefabNode
from ..objtree.objtree import VAR_MODIFIERS, check_segments
from ..objtree.errors import ObjectTreeError, EmptySegmentError, UnresolvedReferenceError

VAR_MARKER = 'var'
PARENT_TYPE = 'parent_type'


@dataclass(frozen=True)
class TypeDeclaration:
    """Declares the type at `path`, optionally overriding its parent."""
    path: Tuple[str, ...]
    parent_type: Optional[PrefabNode] = None


@dataclass(frozen=True)
class VariableDeclaration:
    """Declares var `name` on the type at `owner`."""
    owner: Tuple[str, ...]
    name: str
    type_path: Tuple[str, ...] = ()
    modifiers: Tuple[str, ...] = ()


Declaration = Union[TypeDeclaration, VariableDeclaration]


@dataclass(frozen=True, eq=False)
class Entry:
    """One row of the builtin table."""
    declaration: Declaration
    default: Optional[ASTNode] = None
    source: str = ''

    @property
    def is_var(self) -> bool:
        return isinstance(self.declaration, VariableDeclaration)

    def __str__(self):
        if self.default is None:
            return self.source
        return f"{self.source} = {self.default}"


def number(value: int) -> NumberNode:
    return NumberNode(value)


def string(value: str) -> StringNode:
    return StringNode(value)


def prefab(path: str) -> PrefabNode:
    return PrefabNode.parse(path)


def parse_entry(path: str, default: Optional[ASTNode] = None) -> Entry:
    """
    Parse one declaration path into an Entry.

    Args:
        path: Slash separated path without a leading slash
        default: Optional default value expression

    Returns:
        Entry holding a TypeDeclaration or VariableDeclaration

    Raises:
        EmptySegmentError: the path or one of its segments is empty
        ObjectTreeError: the path is otherwise malformed
    """
    location = Location.builtins()
    if not path:
        raise EmptySegmentError("Empty path", (), location)
    segments = tuple(path.split('/'))
    check_segments(segments, location)
    if isinstance(default, PrefabNode):
        check_segments(default.path, location)

    if VAR_MARKER in segments:
        marker = segments.index(VAR_MARKER)
        owner, rest = segments[:marker], segments[marker + 1:]
        modifiers = []
        while rest and rest[0] in VAR_MODIFIERS:
            modifiers.append(rest[0])
            rest = rest[1:]
        if not rest:
            raise ObjectTreeError(f"Missing var name in {path!r}", segments, location)
        declaration = VariableDeclaration(
            owner=owner,
            name=rest[-1],
            type_path=rest[:-1],
            modifiers=tuple(modifiers),
        )
        return Entry(declaration, default, path)

    if default is None:
        return Entry(TypeDeclaration(segments), None, path)

    if segments[-1] != PARENT_TYPE or len(segments) < 2:
        raise ObjectTreeError(
            f"Only parent_type may be assigned in a type declaration: {path!r}",
            segments, location)
    if not isinstance(default, PrefabNode):
        raise ObjectTreeError(
            f"parent_type must be a type path, got {default!r}", segments, location)
    return Entry(TypeDeclaration(segments[:-1], default), None, path)


entry = parse_entry


def check_entry_order(entries: Iterable[Entry]):
    """Raise UnresolvedReferenceError if an entry refers to a later type."""
    declared: Set[Tuple[str, ...]] = set()
    for item in entries:
        decl = item.declaration
        if isinstance(decl, TypeDeclaration):
            path, reference = decl.path, decl.parent_type
        else:
            path, reference = decl.owner, item.default
        for i in range(1, len(path) + 1):
            declared.add(path[:i])
        if isinstance(reference, PrefabNode) and reference.path not in declared:
            raise UnresolvedReferenceError(
                f"{item} refers to {reference} before it is declared",
                reference.path, Location.builtins())


BUILTIN_ENTRIES: List[Entry] = [
    # The root type
    entry("var/type"),
    entry("var/parent_type"),
    entry("var/tag"),
    entry("var/vars"),

    entry("datum"),

    entry("atom/parent_type", prefab("/datum")),
    entry("atom/var/alpha"),
    entry("atom/var/appearance"),
    entry("atom/var/appearance_flags"),
    entry("atom/var/blend_mode"),
    entry("atom/var/color"),
    entry("atom/var/contents"),
    entry("atom/var/density"),
    entry("atom/var/desc"),
    entry("atom/var/dir"),
    entry("atom/var/gender"),
    entry("atom/var/icon/icon"),
    entry("atom/var/icon_state"),
    entry("atom/var/invisibility"),
    entry("atom/var/infra_luminosity"),
    entry("atom/var/atom/loc"),
    entry("atom/var/layer"),
    entry("atom/var/luminosity"),
    entry("atom/var/maptext"),
    entry("atom/var/maptext_width"),
    entry("atom/var/maptext_height"),
    entry("atom/var/maptext_x"),
    entry("atom/var/maptext_y"),
    entry("atom/var/mouse_over_pointer"),
    entry("atom/var/mouse_drag_pointer"),
    entry("atom/var/mouse_drop_pointer"),
    entry("atom/var/mouse_drop_zone"),
    entry("atom/var/mouse_opacity"),
    entry("atom/var/name"),
    entry("atom/var/opacity"),
    entry("atom/var/overlays"),
    entry("atom/var/override"),
    entry("atom/var/parent_type"),
    entry("atom/var/pixel_x"),
    entry("atom/var/pixel_y"),
    entry("atom/var/pixel_w"),
    entry("atom/var/pixel_z"),
    entry("atom/var/plane"),
    entry("atom/var/suffix"),
    entry("atom/var/tag"),
    entry("atom/var/text"),
    entry("atom/var/transform"),
    entry("atom/var/type"),
    entry("atom/var/underlays"),
    entry("atom/var/vars"),
    entry("atom/var/verbs"),
    entry("atom/var/x"),
    entry("atom/var/y"),
    entry("atom/var/z"),

    entry("atom/movable"),
    entry("atom/movable/var/animate_movement"),
    entry("atom/movable/var/bound_x"),
    entry("atom/movable/var/bound_y"),
    entry("atom/movable/var/bound_width"),
    entry("atom/movable/var/bound_height"),
    entry("atom/movable/var/locs"),
    entry("atom/movable/var/screen_loc"),
    entry("atom/movable/var/glide_size"),
    entry("atom/movable/var/step_size"),
    entry("atom/movable/var/step_x"),
    entry("atom/movable/var/step_y"),

    entry("area/parent_type", prefab("/atom")),
    entry("turf/parent_type", prefab("/atom")),
    entry("obj/parent_type", prefab("/atom/movable")),

    entry("mob/parent_type", prefab("/atom/movable")),
    entry("mob/var/ckey"),
    entry("mob/var/client/client"),
    entry("mob/var/list/group"),
    entry("mob/var/key"),
    entry("mob/var/see_infrared"),
    entry("mob/var/see_invisible"),
    entry("mob/var/see_in_dark"),
    entry("mob/var/sight"),

    entry("world"),
    entry("var/static/world/world"),
    entry("world/var/static/address"),
    entry("world/var/static/area/area", prefab("/area")),
    entry("world/var/static/cache_lifespan", number(30)),
    entry("world/var/static/contents"),
    entry("world/var/static/cpu"),
    entry("world/var/static/executor"),
    entry("world/var/static/fps", number(10)),
    entry("world/var/static/game_state", number(0)),
    entry("world/var/static/host"),
    entry("world/var/static/hub"),
    entry("world/var/static/hub_password"),
    entry("world/var/static/icon_size", number(32)),
    entry("world/var/static/internet_address"),
    entry("world/var/static/log"),
    entry("world/var/static/loop_checks", number(1)),
    entry("world/var/static/map_format", number(0)),  # TOPDOWN_MAP
    entry("world/var/static/maxx"),
    entry("world/var/static/maxy"),
    entry("world/var/static/maxz"),
    entry("world/var/static/mob/mob", prefab("/mob")),
    entry("world/var/static/name", string("byond")),
    entry("world/var/static/params"),
    entry("world/var/static/port"),
    entry("world/var/static/realtime"),
    entry("world/var/static/reachable"),
    entry("world/var/static/sleep_offline", number(0)),
    entry("world/var/static/status"),
    entry("world/var/static/system_type"),
    entry("world/var/static/tick_lag", number(1)),
    entry("world/var/static/tick_usage"),
    entry("world/var/static/turf/turf", prefab("/turf")),
    entry("world/var/static/time"),
    entry("world/var/static/timeofday"),
    entry("world/var/static/url"),
    entry("world/var/static/version", number(0)),
    entry("world/var/static/view", number(5)),
    entry("world/var/static/visibility", number(1)),

    entry("client"),
    entry("client/var/address"),
    entry("client/var/authenticate"),
    entry("client/var/bounds"),
    entry("client/var/byond_version"),
    entry("client/var/CGI"),
    entry("client/var/ckey"),
    entry("client/var/color"),
    entry("client/var/command_text"),
    entry("client/var/connection"),
    entry("client/var/control_freak", number(0)),
    entry("client/var/computer_id"),
    entry("client/var/default_verb_category", string("Commands")),
    entry("client/var/dir", number(1)),  # NORTH
    entry("client/var/edge_limit"),
    entry("client/var/eye"),
    entry("client/var/fps", number(0)),
    entry("client/var/gender"),
    entry("client/var/glide_size", number(0)),
    entry("client/var/images"),
    entry("client/var/inactivity"),
    entry("client/var/key"),
    entry("client/var/lazy_eye"),
    entry("client/var/mob"),
    entry("client/var/mouse_pointer_icon"),
    entry("client/var/perspective", number(0)),  # MOB_PERSPECTIVE
    entry("client/var/pixel_x", number(0)),
    entry("client/var/pixel_y", number(0)),
    entry("client/var/pixel_w", number(0)),
    entry("client/var/pixel_z", number(0)),
    entry("client/var/preload_rsc", number(1)),
    entry("client/var/screen"),
    entry("client/var/script"),
    entry("client/var/show_map", number(1)),
    entry("client/var/show_popup_menus", number(1)),
    entry("client/var/show_verb_panel", number(1)),
    entry("client/var/statobj"),
    entry("client/var/statpanel"),
    entry("client/var/tick_lag", number(0)),
    entry("client/var/verbs"),
    entry("client/var/view"),
    entry("client/var/virtual_eye"),

    entry("sound"),
    entry("sound/var/file"),
    entry("sound/var/repeat"),
    entry("sound/var/wait"),
    entry("sound/var/channel"),
    entry("sound/var/volume"),
    entry("sound/var/frequency"),
    entry("sound/var/pan"),
    entry("sound/var/priority"),
    entry("sound/var/status"),
    entry("sound/var/x"),
    entry("sound/var/y"),
    entry("sound/var/z"),
    entry("sound/var/falloff"),
    entry("sound/var/environment"),
    entry("sound/var/echo"),
]
