"""Convex hulls of integer points by Graham's scan."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass
from functools import cmp_to_key

COLLINEAR = 0
CLOCKWISE = 1
COUNTERCLOCKWISE = 2


@dataclass(frozen=True)
class Point:
    """A point with integer coordinates."""

    x: int
    y: int


def _as_points(points: Iterable[Point | tuple[int, int]]) -> list[Point]:
    return [p if isinstance(p, Point) else Point(*p) for p in points]


def _squared_distance(a: Point, b: Point) -> int:
    return (a.x - b.x) ** 2 + (a.y - b.y) ** 2


def _lowest(points: list[Point]) -> Point:
    return min(points, key=lambda p: (p.y, p.x))


def orientation(p: Point, q: Point, r: Point) -> int:
    """0 if collinear, 1 if ``p, q, r`` turn clockwise, 2 if counterclockwise."""
    value = (q.y - p.y) * (r.x - q.x) - (q.x - p.x) * (r.y - q.y)
    if value == 0:
        return COLLINEAR
    return CLOCKWISE if value > 0 else COUNTERCLOCKWISE


def graham_scan(points: Iterable[Point | tuple[int, int]]) -> list[Point]:
    """Hull in counterclockwise order from the lowest point.

    Points are sorted by polar angle about the lowest (then leftmost) point,
    nearer first on ties. Only right turns are removed, so collinear points
    on the boundary stay in the hull.
    """
    pts = _as_points(points)
    if len(pts) < 2:
        raise ValueError("Graham scan needs at least two points")
    ref = _lowest(pts)
    pts.sort(key=lambda p: (math.atan2(p.y - ref.y, p.x - ref.x), _squared_distance(ref, p)))

    stack = pts[:2]
    for point in pts[2:]:
        while len(stack) > 1:
            below, top = stack[-2], stack[-1]
            cross = (top.x - below.x) * (point.y - below.y) - (top.y - below.y) * (point.x - below.x)
            if cross >= 0:
                break
            stack.pop()
        stack.append(point)
    return stack


def convex_hull(points: Iterable[Point | tuple[int, int]]) -> list[Point]:
    """Hull without collinear boundary points, listed clockwise.

    The list ends with the lowest (then leftmost) point. Fewer than three
    points give an empty hull.
    """
    pts = _as_points(points)
    if len(pts) < 3:
        return []
    pts.sort(key=lambda p: (p.y, p.x))
    ref = pts[0]

    def polar(a: Point, b: Point) -> int:
        turn = orientation(ref, a, b)
        if turn == COLLINEAR:
            da, db = _squared_distance(ref, a), _squared_distance(ref, b)
            return (da > db) - (da < db)
        return -1 if turn == COUNTERCLOCKWISE else 1

    pts[1:] = sorted(pts[1:], key=cmp_to_key(polar))

    stack = pts[:2]
    for point in pts[2:]:
        while len(stack) > 1 and orientation(stack[-2], stack[-1], point) != COUNTERCLOCKWISE:
            stack.pop()
        stack.append(point)
    return stack[::-1]