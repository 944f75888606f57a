## surface and solid representations for roundpath extrusions

"""
=======================================
Surfaces and solids produced by roundpath
=======================================

Extrusions are returned in a plain list-based representation so that
they can be inspected, transformed and compared without any extra
machinery.

A surface is ``['surface', vertices, normals, faces, boundary, holes]``
where ``vertices`` are homogeneous points ``[x, y, z, 1]``, ``normals``
are the matching per-vertex directions ``[x, y, z, 0]``, ``faces`` are
index triples, and ``boundary``/``holes`` list the vertex indices of the
outline loops (empty for surfaces that are not planar caps).

A solid is ``['solid', surfaces, material, construction]``.  The
construction list records how the solid was made, for example
``['procedure', 'extrude_filleted', {...}]``.
"""

from copy import deepcopy

from roundpath.geom import cross, dot, epsilon, homo, mag, point, scale3, sub


def surface(*args):
    """given a list of surface parameters as arguments, return a
    conforming surface representation.  Checks arguments for data-type
    correctness.

    """
    if not args:
        return ['surface', [], [], [], [], []]
    if len(args) < 3 or len(args) > 5:
        raise ValueError('bad arguments to surface')
    vrts, nrms, facs = args[0], args[1], args[2]
    bndr = args[3] if len(args) > 3 else []
    hle = args[4] if len(args) > 4 else []
    if not (isinstance(vrts, list) and isinstance(nrms, list)
            and isinstance(facs, list) and len(vrts) == len(nrms)):
        raise ValueError('bad arguments to surface')
    surf = ['surface', vrts, nrms, facs, bndr, hle]
    if not issurface(surf, fast=False):
        raise ValueError('bad arguments to surface')
    return surf


def issurface(s, fast=True):
    """
    Check to see if ``s`` is a valid surface.
    """
    if not isinstance(s, list) or len(s) != 6 or s[0] != 'surface':
        return False
    if fast:
        return True
    verts, norms, faces = s[1], s[2], s[3]
    if len(verts) != len(norms):
        return False
    count = len(verts)
    for face in faces:
        if len(face) != 3:
            return False
        for idx in face:
            if not isinstance(idx, int) or idx < 0 or idx >= count:
                return False
    return isinstance(s[4], list) and isinstance(s[5], list)


def reversesurface(s):
    """ return a normal-reversed copy of the surface """
    s2 = deepcopy(s)
    s2[2] = [[-n[0], -n[1], -n[2], 0] for n in s2[2]]
    s2[3] = [[f[0], f[2], f[1]] for f in s2[3]]
    return s2


def transformsurface(s, mat):
    """ return a copy of surface ``s`` with vertices and normals transformed by ``mat``"""
    s2 = deepcopy(s)
    s2[1] = [homo(mat.mul(point(v))) for v in s[1]]
    normals = []
    for n in s[2]:
        n4 = mat.mul([n[0], n[1], n[2], 0])
        normals.append([n4[0], n4[1], n4[2], 0])
    s2[2] = normals
    return s2


def solid(*args):
    """given a list of solid parameters as arguments, return a
    conforming solid representation.

    """
    if not args or (len(args) == 1 and args[0] == []):
        # empty solid, which is legal for zero-area sections
        return ['solid', [], [], []]
    if len(args) > 3 or not isinstance(args[0], list):
        raise ValueError('bad arguments to solid')
    for srf in args[0]:
        if not issurface(srf):
            raise ValueError('bad arguments to solid')
    material = args[1] if len(args) > 1 else []
    construction = args[2] if len(args) > 2 else []
    if not (isinstance(material, list) and isinstance(construction, list)):
        raise ValueError('bad arguments to solid')
    return ['solid', args[0], material, construction]


def issolid(s, fast=True):
    """
    Check to see if ``s`` is a solid.  NOTE: this function only determines
    if the data structure is correct, it does not verify that the collection
    of surfaces completely bounds a volume of space without holes
    """
    if not isinstance(s, list) or len(s) != 4 or s[0] != 'solid':
        return False
    if fast:
        return True
    return (all(issurface(srf, fast=False) for srf in s[1])
            and isinstance(s[2], list) and isinstance(s[3], list))


def transformsolid(x, mat):
    """ return a copy of solid ``x`` with every surface transformed by ``mat``"""
    if not issolid(x):
        raise ValueError('bad solid passed to transformsolid')
    x2 = deepcopy(x)
    x2[1] = [transformsurface(s, mat) for s in x[1]]
    return x2


def solidbbox(sld):
    """ return ``[[xmin,ymin,zmin,1],[xmax,ymax,zmax,1]]`` for a solid"""
    if not issolid(sld):
        raise ValueError('bad argument to solidbbox')
    verts = [v for surf in sld[1] for v in surf[1]]
    if not verts:
        raise ValueError('empty solid passed to solidbbox')
    lo = [min(v[i] for v in verts) for i in range(3)]
    hi = [max(v[i] for v in verts) for i in range(3)]
    return [point(lo), point(hi)]


def _point_to_key(p):
    # Round to a reasonable precision to handle floating point comparison
    return (round(p[0] / epsilon) * epsilon,
            round(p[1] / epsilon) * epsilon,
            round(p[2] / epsilon) * epsilon)


def issolidclosed(x):
    """
    Check if solid x is topologically closed, that is, every edge is
    shared by exactly two faces across all surfaces.  Edges are matched
    by vertex position, not by index, so separate surfaces that share a
    seam count as joined.
    """
    if not issolid(x, fast=False):
        raise ValueError('invalid solid passed to issolidclosed')

    edges = {}
    for surf in x[1]:
        verts = surf[1]
        for face in surf[3]:
            keys = [_point_to_key(verts[i]) for i in face]
            for a, b in ((0, 1), (1, 2), (2, 0)):
                edge = (min(keys[a], keys[b]), max(keys[a], keys[b]))
                edges[edge] = edges.get(edge, 0) + 1

    return all(count == 2 for count in edges.values())


def volumeof(x):
    """
    Calculate the volume enclosed by a solid.

    Uses the divergence theorem: each triangular face ``(p0, p1, p2)``
    contributes ``dot(p0, cross(p1-p0, p2-p0)) / 6``.  The sum is signed
    by face orientation, so an outward-facing solid has positive volume.
    """
    if not issolid(x, fast=False):
        raise ValueError('invalid solid passed to volumeof')

    total = 0.0
    for surf in x[1]:
        verts = surf[1]
        for face in surf[3]:
            p0 = verts[face[0]]
            v1 = sub(verts[face[1]], p0)
            v2 = sub(verts[face[2]], p0)
            total += dot(p0, cross(v1, v2)) / 6.0
    return total


def normfunc(tri):
    """
    unit normal of a flat triangle given as three points, or ``None``
    for a degenerate triangle
    """
    d = cross(sub(tri[1], tri[0]), sub(tri[2], tri[1]))
    m = mag(d)
    if m <= epsilon * epsilon:
        return None
    n = scale3(d, 1.0 / m)
    n[3] = 0
    return n
