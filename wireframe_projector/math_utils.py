#
# PROJECT: wireframe-projector
# MODULE: wireframe_projector/math_utils.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

import math

# Relative size of |det| against its Hadamard bound below which a matrix is singular.
SINGULAR_EPSILON = 1e-12


class SingularMatrixError(ValueError):
    """Raised when inverting a matrix whose determinant is (numerically) zero."""


class DegenerateAxisError(ValueError):
    """Raised when a rotation axis has no direction."""


def radians(degrees: float) -> float:
    return degrees * math.pi / 180.0


class Vec4:
    """Homogeneous 3D vector. Operations never modify it; they return new vectors.

    Points carry w=1. Arithmetic works on x, y, z only; the result keeps the
    left operand's w, so point - point is still tagged as a point.
    """
    __slots__ = ('x', 'y', 'z', 'w')

    def __init__(self, x: float, y: float, z: float, w: float = 1.0):
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)
        self.w = float(w)

    def __repr__(self):
        return f"Vec4({self.x!r}, {self.y!r}, {self.z!r}, {self.w!r})"

    def __eq__(self, other):
        if not isinstance(other, Vec4):
            return NotImplemented
        return (self.x, self.y, self.z, self.w) == (other.x, other.y, other.z, other.w)

    __hash__ = None

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    def __getitem__(self, index):
        if index == 0: return self.x
        if index == 1: return self.y
        if index == 2: return self.z
        if index == 3: return self.w
        raise IndexError("Vec4 index out of range")

    def __add__(self, other):
        if isinstance(other, Vec4):
            return Vec4(self.x + other.x, self.y + other.y, self.z + other.z, self.w)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Vec4):
            return Vec4(self.x - other.x, self.y - other.y, self.z - other.z, self.w)
        return NotImplemented

    def __neg__(self):
        return Vec4(-self.x, -self.y, -self.z, self.w)

    def __mul__(self, scalar):
        return Vec4(self.x * scalar, self.y * scalar, self.z * scalar, self.w)

    def mul_components(self, other) -> 'Vec4':
        return Vec4(self.x * other.x, self.y * other.y, self.z * other.z, self.w)

    def dot(self, other) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other) -> 'Vec4':
        # Normals come out of here, but by convention they are tagged w=1.
        return Vec4(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
            1.0
        )

    def length(self) -> float:
        return math.sqrt(self.dot(self))

    def normalize(self) -> 'Vec4':
        """Unit-length copy; a zero vector is returned unchanged."""
        l = self.length()
        if l > 0:
            return Vec4(self.x / l, self.y / l, self.z / l, self.w)
        return Vec4(self.x, self.y, self.z, self.w)

    def angle(self, other) -> float:
        return angle(self, other)

    def transform(self, mat: 'Mat4') -> 'Vec4':
        return mat.mul_vec4(self)


def angle(v1: Vec4, v2: Vec4) -> float:
    """Angle in radians between two non-zero vectors."""
    c = v1.dot(v2) / (v1.length() * v2.length())
    # Parallel vectors can round just past +/-1.
    if c > 1.0:
        c = 1.0
    elif c < -1.0:
        c = -1.0
    return math.acos(c)


def _identity_rows():
    return [[1.0 if r == c else 0.0 for c in range(4)] for r in range(4)]


class Mat4:
    """Immutable 4x4 matrix stored as a tuple of row tuples, [row][col].

    Vectors are transformed as m @ (x, y, z, w), so translation sits in the
    last column and in a product A @ B the matrix B acts first.
    """
    __slots__ = ('m',)

    def __init__(self, data=None):
        if data is None:
            data = [[0.0] * 4 for _ in range(4)]
        rows = tuple(tuple(float(v) for v in row) for row in data)
        if len(rows) != 4 or any(len(row) != 4 for row in rows):
            raise ValueError(f"Mat4 needs 4 rows of 4 values, got {[len(r) for r in rows]}")
        self.m = rows

    def __repr__(self):
        return f"Mat4({self.m!r})"

    def __eq__(self, other):
        if not isinstance(other, Mat4):
            return NotImplemented
        return self.m == other.m

    __hash__ = None

    def __getitem__(self, index):
        return self.m[index]

    def rows(self):
        return self.m

    @classmethod
    def identity(cls) -> 'Mat4':
        return cls(_identity_rows())

    @classmethod
    def translation(cls, x, y, z) -> 'Mat4':
        m = _identity_rows()
        m[0][3] = x
        m[1][3] = y
        m[2][3] = z
        return cls(m)

    @classmethod
    def scale(cls, sx, sy, sz) -> 'Mat4':
        m = _identity_rows()
        m[0][0] = sx
        m[1][1] = sy
        m[2][2] = sz
        return cls(m)

    @classmethod
    def rotation_x(cls, rad: float) -> 'Mat4':
        m = _identity_rows()
        c = math.cos(rad)
        s = math.sin(rad)
        m[1][1] = c
        m[1][2] = -s
        m[2][1] = s
        m[2][2] = c
        return cls(m)

    @classmethod
    def rotation_y(cls, rad: float) -> 'Mat4':
        m = _identity_rows()
        c = math.cos(rad)
        s = math.sin(rad)
        m[0][0] = c
        m[0][2] = s
        m[2][0] = -s
        m[2][2] = c
        return cls(m)

    @classmethod
    def rotation_z(cls, rad: float) -> 'Mat4':
        m = _identity_rows()
        c = math.cos(rad)
        s = math.sin(rad)
        m[0][0] = c
        m[0][1] = -s
        m[1][0] = s
        m[1][1] = c
        return cls(m)

    @classmethod
    def rotation_about_line(cls, p: Vec4, v: Vec4, phi: float) -> 'Mat4':
        """
        Rotation by phi radians about the line through point p with
        direction v. Points on the line are fixed.

        Raises DegenerateAxisError if v has zero length.
        """
        l = v.length()
        if l <= 0:
            raise DegenerateAxisError("cannot rotate around a vector of length zero")
        x = v.x / l
        y = v.y / l
        z = v.z / l

        x2, y2, z2 = x * x, y * y, z * z
        sp = math.sin(phi)
        cp = math.cos(phi)
        omcp = 1.0 - cp

        return cls([
            [x2 + (y2 + z2) * cp,
             x * y * omcp - z * sp,
             x * z * omcp + y * sp,
             (p.x * (y2 + z2) - x * (p.y * y + p.z * z)) * omcp + (p.y * z - p.z * y) * sp],
            [x * y * omcp + z * sp,
             y2 + (x2 + z2) * cp,
             y * z * omcp - x * sp,
             (p.y * (x2 + z2) - y * (p.x * x + p.z * z)) * omcp + (p.z * x - p.x * z) * sp],
            [x * z * omcp - y * sp,
             y * z * omcp + x * sp,
             z2 + (x2 + y2) * cp,
             (p.z * (x2 + y2) - z * (p.x * x + p.y * y)) * omcp + (p.x * y - p.y * x) * sp],
            [0.0, 0.0, 0.0, 1.0],
        ])

    def __matmul__(self, other):
        if isinstance(other, Mat4):
            a, b = self.m, other.m
            res = [[0.0] * 4 for _ in range(4)]
            for r in range(4):
                for c in range(4):
                    val = 0.0
                    for k in range(4):
                        val += a[r][k] * b[k][c]
                    res[r][c] = val
            return Mat4(res)
        return NotImplemented

    def transpose(self) -> 'Mat4':
        return Mat4([[self.m[r][c] for r in range(4)] for c in range(4)])

    def mul_vec4(self, v: Vec4) -> Vec4:
        """Transform all four homogeneous components of v."""
        m = self.m
        return Vec4(
            m[0][0] * v.x + m[0][1] * v.y + m[0][2] * v.z + m[0][3] * v.w,
            m[1][0] * v.x + m[1][1] * v.y + m[1][2] * v.z + m[1][3] * v.w,
            m[2][0] * v.x + m[2][1] * v.y + m[2][2] * v.z + m[2][3] * v.w,
            m[3][0] * v.x + m[3][1] * v.y + m[3][2] * v.z + m[3][3] * v.w,
        )

    def determinant(self) -> float:
        (a0, a1, a2, a3), (b0, b1, b2, b3), (c0, c1, c2, c3), (d0, d1, d2, d3) = self.m
        return (a0*b1*c2*d3 + a0*b2*c3*d1 + a0*b3*c1*d2 +
                a1*b0*c3*d2 + a1*b2*c0*d3 + a1*b3*c2*d0 +
                a2*b0*c1*d3 + a2*b1*c3*d0 + a2*b3*c0*d1 +
                a3*b0*c2*d1 + a3*b1*c0*d2 + a3*b2*c1*d0 -
                a0*b1*c3*d2 - a0*b2*c1*d3 - a0*b3*c2*d1 -
                a1*b0*c2*d3 - a1*b2*c3*d0 - a1*b3*c0*d2 -
                a2*b0*c3*d1 - a2*b1*c0*d3 - a2*b3*c1*d0 -
                a3*b0*c1*d2 - a3*b1*c2*d0 - a3*b2*c0*d1)

    def inverse(self) -> 'Mat4':
        """
        Adjugate over determinant.

        Raises SingularMatrixError when the determinant is negligible next to
        the product of the row lengths (Hadamard's bound on |det|), i.e. the
        rows are linearly dependent up to rounding. Uniformly tiny or huge
        matrices are judged by their shape, not their magnitude.
        """
        det = self.determinant()
        bound = 1.0
        for row in self.m:
            bound *= math.sqrt(sum(v * v for v in row))
        if not math.isfinite(det) or bound == 0.0 or abs(det) <= SINGULAR_EPSILON * bound:
            raise SingularMatrixError(f"matrix is not invertible (determinant {det!r})")

        (a0, a1, a2, a3), (b0, b1, b2, b3), (c0, c1, c2, c3), (d0, d1, d2, d3) = self.m
        adj = [
            [b1*c2*d3 + b2*c3*d1 + b3*c1*d2 - b1*c3*d2 - b2*c1*d3 - b3*c2*d1,
             a1*c3*d2 + a2*c1*d3 + a3*c2*d1 - a1*c2*d3 - a2*c3*d1 - a3*c1*d2,
             a1*b2*d3 + a2*b3*d1 + a3*b1*d2 - a1*b3*d2 - a2*b1*d3 - a3*b2*d1,
             a1*b3*c2 + a2*b1*c3 + a3*b2*c1 - a1*b2*c3 - a2*b3*c1 - a3*b1*c2],
            [b0*c3*d2 + b2*c0*d3 + b3*c2*d0 - b0*c2*d3 - b2*c3*d0 - b3*c0*d2,
             a0*c2*d3 + a2*c3*d0 + a3*c0*d2 - a0*c3*d2 - a2*c0*d3 - a3*c2*d0,
             a0*b3*d2 + a2*b0*d3 + a3*b2*d0 - a0*b2*d3 - a2*b3*d0 - a3*b0*d2,
             a0*b2*c3 + a2*b3*c0 + a3*b0*c2 - a0*b3*c2 - a2*b0*c3 - a3*b2*c0],
            [b0*c1*d3 + b1*c3*d0 + b3*c0*d1 - b0*c3*d1 - b1*c0*d3 - b3*c1*d0,
             a0*c3*d1 + a1*c0*d3 + a3*c1*d0 - a0*c1*d3 - a1*c3*d0 - a3*c0*d1,
             a0*b1*d3 + a1*b3*d0 + a3*b0*d1 - a0*b3*d1 - a1*b0*d3 - a3*b1*d0,
             a0*b3*c1 + a1*b0*c3 + a3*b1*c0 - a0*b1*c3 - a1*b3*c0 - a3*b0*c1],
            [b0*c2*d1 + b1*c0*d2 + b2*c1*d0 - b0*c1*d2 - b1*c2*d0 - b2*c0*d1,
             a0*c1*d2 + a1*c2*d0 + a2*c0*d1 - a0*c2*d1 - a1*c0*d2 - a2*c1*d0,
             a0*b2*d1 + a1*b0*d2 + a2*b1*d0 - a0*b1*d2 - a1*b2*d0 - a2*b0*d1,
             a0*b1*c2 + a1*b2*c0 + a2*b0*c1 - a0*b2*c1 - a1*b0*c2 - a2*b1*c0],
        ]
        return Mat4([[v / det for v in row] for row in adj])
