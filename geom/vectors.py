"""Pure 2D vector functions on (x, y) tuples."""
import math
from .types import Point

# Below this length a vector is treated as zero.
EPS = 1e-12

# ============================================================
# Vector Arithmetic
# ============================================================
def add(a: Point, b: Point) -> Point:
    return (a[0]+b[0], a[1]+b[1])

def subtract(a: Point, b: Point) -> Point:
    """Vector a - b."""
    return (a[0]-b[0], a[1]-b[1])

def scale(v: Point, k: float) -> Point:
    return (v[0]*k, v[1]*k)

def length(v: Point) -> float:
    return math.hypot(v[0], v[1])

def distance(a: Point, b: Point) -> float:
    """Euclidean distance between two points."""
    return math.hypot(b[0]-a[0], b[1]-a[1])

def midpoint(a: Point, b: Point) -> Point:
    return ((a[0]+b[0])/2, (a[1]+b[1])/2)

def normalize(v: Point) -> Point:
    """Unit vector along v, or (0, 0) when v has (near) zero length."""
    Ln = length(v)
    if Ln < EPS:
        return (0.0, 0.0)
    return (v[0]/Ln, v[1]/Ln)

def perpendicular(v: Point) -> Point:
    """Unit vector 90 degrees CCW from v, i.e. (-v.y, v.x) normalized."""
    return normalize((-v[1], v[0]))

def left_norm(p1: Point, p2: Point) -> Point:
    """Unit normal to the left of the direction p1 -> p2; (0, 0) if p1 == p2."""
    return perpendicular(subtract(p2, p1))

def offset_point(p: Point, n: Point, d: float) -> Point:
    """Offset point p by distance d along unit direction n."""
    return (p[0]+d*n[0], p[1]+d*n[1])

# ============================================================
# Point Sets
# ============================================================
def rotate(point: Point, center: Point, radians: float) -> Point:
    """Rotate point CCW about center by the given angle."""
    c = math.cos(radians); s = math.sin(radians)
    dx = point[0]-center[0]; dy = point[1]-center[1]
    return (center[0]+dx*c-dy*s, center[1]+dx*s+dy*c)

def centroid(points: list[Point]) -> Point:
    """Mean of the points (vertex centroid, not area centroid)."""
    n = len(points)
    return (sum(p[0] for p in points)/n, sum(p[1] for p in points)/n)

def bbox_center(points: list[Point]) -> Point:
    """Centre of the axis-aligned bounding box of the points."""
    xs = [p[0] for p in points]; ys = [p[1] for p in points]
    return ((min(xs)+max(xs))/2, (min(ys)+max(ys))/2)
