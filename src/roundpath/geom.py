## scalar, vector and planar helpers for roundpath
## Copyright (c) 2026 roundpath contributors
## Copyright (c) 2020 yapCAD contributors
## All rights reserved

# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
# 
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
# 
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""scalar, vector and planar helpers for **roundpath**

Vectors follow the homogeneous convention used throughout the solid
code: a vector is a list of four numbers ``[x, y, z, w]``.  Points lie
in the ``w=1`` hyperplane and directions (normals) in ``w=0``.  The
planar helpers at the bottom of this module work on anything indexable
with at least two components, which includes radius points, so the
rounding engine can use them directly on ``(x, y, r)`` tuples.
"""

from math import *

## constants
epsilon=0.000005
pi2 = 2.0*pi

## operations on scalars
## -----------------------

def isgoodnum(n):
    """ determine if an argument is actually a scalar number, and not boolean
    """
    return (not isinstance(n,bool)) and isinstance(n,(int,float))

def close(a,b):
    """ are two scalars the same within epsilon
    """
    return abs(a-b) < epsilon

def sign(x):
    """ -1, 0 or 1 according to the sign of ``x``"""
    if x > 0:
        return 1
    if x < 0:
        return -1
    return 0


## operations on vectors
## ------------------------

def vect(a=False,b=False,c=False,d=False):
    """Convenience function for making a homogeneous coordinates 4 vector
from practically anything
    """
    r = [0,0,0,1]
    if isgoodnum(a):
        r[0]=a
        if isgoodnum(b):
            r[1]=b
            if isgoodnum(c):
                r[2]=c
                if isgoodnum(d):
                    r[3]=d
    elif isinstance(a,(tuple,list)):
        for i in range(min(4,len(a))):
            x=a[i]
            if isgoodnum(x):
                r[i]=x
    return r

def isvect(x):
    """
    check to see if argument is a proper vector for our purposes
    """
    return isinstance(x,list) and len(x) == 4 and all(isgoodnum(c) for c in x)

def point(x=False,y=False,z=False):
    """Point creation from a point-like sequence or scalars"""
    if isinstance(x,(tuple,list)):
        r = vect(x)
        if len(x) < 4:
            r[3] = 1
    else:
        r = vect(x,y,z)
    if r[3] <= 0:
        raise ValueError('bad w argument to point()')
    return r

## R^3 -> R^3 functions: ignore w component
def sub(a,b):
    """ 3 vector, `a - b`"""
    return [a[0]-b[0],a[1]-b[1],a[2]-b[2],1.0]

def scale3(a,c):
    """ 3 vector, vector ''a'' times scalar ``c``, `a * c`"""
    return [a[0]*c,a[1]*c,a[2]*c,1.0]

def cross(a,b):
    """Compute the cross generalized product of a x b, assuming that both
    fall into the w=1 hyperplane

    """
    return [ a[1]*b[2] - a[2]*b[1],
             a[2]*b[0] - a[0]*b[2],
             a[0]*b[1] - a[1]*b[0],
             1.0 ]

## R^4 -> R^4 functions: operate on w component
def homo(a):
    """Homogenize, or project back to the w=1 plane by scaling all values by w"""
    return [ a[0]/a[3],
             a[1]/a[3],
             a[2]/a[3],
             1 ]

## R^3 -> R functions -- ignore w component
def dot(a,b):
    """ 3 vector ``a`` dot ``b`` """
    return a[0]*b[0]+a[1]*b[1]+a[2]*b[2]

def mag(a):
    """ compute the magnitude of 3 vector ``a``"""
    return sqrt(a[0]*a[0]+a[1]*a[1]+a[2]*a[2])

def dot4(a,b):
    """ 4 vect dot product"""
    return a[0]*b[0]+a[1]*b[1]+a[2]*b[2]+a[3]*b[3]


## planar (XY) helpers.  These only look at the first two components
## of their arguments and return plain (x, y) tuples.
## -------------------------------------------------------------------

def sub2(a,b):
    return (a[0]-b[0], a[1]-b[1])

def add2(a,b):
    return (a[0]+b[0], a[1]+b[1])

def scale2(a,c):
    return (a[0]*c, a[1]*c)

def dot2(a,b):
    return a[0]*b[0]+a[1]*b[1]

def cross2(a,b):
    """ z component of the cross product of two XY vectors"""
    return a[0]*b[1]-a[1]*b[0]

def mag2(a):
    return hypot(a[0],a[1])

def dist2(a,b):
    return hypot(a[0]-b[0],a[1]-b[1])

def unit2(a):
    """ unit XY vector in the direction of ``a``"""
    m = mag2(a)
    if m < epsilon:
        raise ValueError('zero-length vector passed to unit2')
    return (a[0]/m, a[1]/m)

def leftnormal2(a):
    """ ``a`` rotated by +90 degrees"""
    return (-a[1], a[0])

def angle2(a,b):
    """ angle in degrees, from the +X axis, of the direction from ``a`` to ``b``"""
    return degrees(atan2(b[1]-a[1], b[0]-a[0]))

def direction2(ang):
    """ unit XY vector at ``ang`` degrees from the +X axis"""
    rad = radians(ang)
    return (cos(rad), sin(rad))

def lineLineIntersectXY(p1,d1,p2,d2):
    """Intersection of the infinite line through ``p1`` with direction
    ``d1`` and the line through ``p2`` with direction ``d2``.  Returns
    ``False`` for parallel lines.
    """
    denom = cross2(d1,d2)
    if abs(denom) < epsilon*epsilon:
        return False
    t = cross2(sub2(p2,p1),d2)/denom
    return (p1[0]+t*d1[0], p1[1]+t*d1[1])

def signedAreaXY(loop):
    """ shoelace signed area of a closed XY loop; positive when counterclockwise"""
    total = 0.0
    n = len(loop)
    for i in range(n):
        x0, y0 = loop[i][0], loop[i][1]
        x1, y1 = loop[(i+1) % n][0], loop[(i+1) % n][1]
        total += x0*y1 - x1*y0
    return total/2.0
