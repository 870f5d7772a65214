"""Reading whole scene descriptions from text or from '.rt' files."""

from __future__ import annotations

import os
from typing import Union

from rtscene.model import Scene
from rtscene.parse_basic import parse_light, parse_plane, parse_sphere
from rtscene.parse_solid import parse_cone, parse_cylinder
from rtscene.reader import UNKNOWN_ID, LineReader, ParseError

_WHITESPACE = " \t\n\v\f\r"

BAD_NAME = "scene file name must end with '.rt'"
CANNOT_OPEN = "cannot open scene file"
CANNOT_READ = "scene file is empty"

_SHAPE_PARSERS = {
    "sp": parse_sphere,
    "pl": parse_plane,
    "cy": parse_cylinder,
    "co": parse_cone,
}


def _identifier_followed_by_space(line: str, start: int, ident: str) -> bool:
    end = start + len(ident)
    return (
        line.startswith(ident, start)
        and end < len(line)
        and line[end] in _WHITESPACE
    )


def parse_line(line: str, scene: Scene) -> None:
    """Parse one line of a scene description into scene.

    Blank lines are ignored. Ambient ('A') and camera ('C') lines are
    recognised but their contents are not interpreted here.
    """
    start = 0
    while start < len(line) and line[start] in _WHITESPACE:
        start += 1
    if start >= len(line):
        return
    if _identifier_followed_by_space(line, start, "A"):
        return
    if _identifier_followed_by_space(line, start, "C"):
        return
    if _identifier_followed_by_space(line, start, "L"):
        parse_light(LineReader(line, start + 1), scene)
        return
    for ident, parser in _SHAPE_PARSERS.items():
        if _identifier_followed_by_space(line, start, ident):
            parser(LineReader(line, start + len(ident)), scene)
            return
    raise ParseError(UNKNOWN_ID)


def parse_text(text: str) -> Scene:
    """Build a scene from the full text of a scene description."""
    lines = text.splitlines(keepends=True)
    if not lines:
        raise ParseError(CANNOT_READ)
    scene = Scene()
    for line in lines:
        parse_line(line, scene)
    scene.object_index = 0
    scene.light_index = 0
    return scene


def load_scene(path: Union[str, os.PathLike]) -> Scene:
    """Read and parse a '.rt' scene file."""
    if not os.fspath(path).endswith(".rt"):
        raise ParseError(BAD_NAME)
    try:
        with open(path, encoding="utf-8") as handle:
            text = handle.read()
    except OSError as exc:
        raise ParseError(CANNOT_OPEN) from exc
    return parse_text(text)