## 4x4 homogeneous transformation matrices for roundpath extrusion frames
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

from math import *
import roundpath.geom as geom

## A matrix is represented as a list of four four-vectors, one per
## row.  Because vectors are plain lists, Mx implies a column vector.

## Extrusion frames are built from an X rotation, then Y, then Z,
## then a translation.  See ``EulerRotation()`` below.


class Matrix:
    """4x4 transformation matrix class for transforming homogenous 3D coordinates

    ``m`` holds the four rows.
    """

    def __init__(self,a=False):
        self.m = [[1 if i == j else 0 for j in range(4)] for i in range(4)]

        if a is False:
            rows = None
        elif isinstance(a,Matrix):
            rows = [a.getrow(i) for i in range(4)]
        elif isinstance(a,(tuple,list)) and len(a) == 16:
            rows = [a[i*4:i*4+4] for i in range(4)]
        elif (isinstance(a,(tuple,list)) and len(a) == 4 and
              all(isinstance(r,(tuple,list)) and len(r) == 4 for r in a)):
            rows = a
        else:
            raise ValueError('bad thing used in attempt to initialize matrix: {}'.format(a))

        if rows:
            for i in range(4):
                self.setrow(i,list(rows[i]))

    def __repr__(self):
        return "Matrix({})".format(self.m)

    def get(self,i,j):
        if not (0 <= i <= 3 and 0 <= j <= 3):
            raise ValueError('bad index passed to get: {},{}'.format(i,j))
        return self.m[i][j]

    def getrow(self,i):
        return [self.get(i,j) for j in range(4)]

    def getcol(self,j):
        return [self.get(i,j) for i in range(4)]

    def setrow(self,i,x):
        if not (0 <= i <= 3):
            raise ValueError('bad row passed to setrow: {}'.format(i))
        if not geom.isvect(x):
            raise ValueError('bad non-vector passed to setrow: {}'.format(x))
        self.m[i] = list(x)

    def mul(self,x):
        """``M * X`` for a matrix ``X``, or ``M * x`` for a column vector ``x``"""
        if isinstance(x,Matrix):
            result = Matrix()
            for i in range(4):
                row = self.getrow(i)
                result.setrow(i,[geom.dot4(row,x.getcol(j)) for j in range(4)])
            return result
        if geom.isvect(x):
            return [geom.dot4(self.getrow(i),x) for i in range(4)]
        raise ValueError('bad thing passed to mul(): {}'.format(x))


# return the generalized 4x4 arbitrary axis rotation matrix
def Rotation(axis,angle):
    m = geom.mag(axis)
    u = axis
    if m < geom.epsilon:
        raise ValueError('zero-length rotation axis not allowed')
    if not geom.close(m,1.0):
        u = geom.scale3(axis,1.0/m)

    rad = (angle%360.0)*geom.pi2/360.0

    ux = u[0]
    uy = u[1]
    uz = u[2]

    cang = cos(rad)
    cmin = 1.0-cang
    sang = sin(rad)

    # see http://www.opengl-tutorial.org/assets/faq_quaternions/index.html#Q38
    R = [[cang + ux*ux*cmin, ux*uy*cmin-uz*sang, ux*uz*cmin+uy*sang,0],
         [uy*ux*cmin+uz*sang, cang + uy*uy*cmin, uy*uz*cmin - ux*sang,0],
         [uz*ux*cmin-uy*sang, uz*uy*cmin+ux*sang, cang+uz*uz*cmin,0],
         [0,0,0,1]]

    return Matrix(_snap(R))

def Translation(delta):
    T = [[1,0,0,delta[0]],
         [0,1,0,delta[1]],
         [0,0,1,delta[2]],
         [0,0,0,1]]
    return Matrix(T)

def EulerRotation(rx,ry,rz):
    """rotation about X by ``rx`` degrees, then about Y by ``ry``, then
    about Z by ``rz``, as a single matrix ``Rz*Ry*Rx``.
    """
    Rx = Rotation(geom.vect(1,0,0),rx)
    Ry = Rotation(geom.vect(0,1,0),ry)
    Rz = Rotation(geom.vect(0,0,1),rz)
    return Rz.mul(Ry).mul(Rx)

## multiples of 90 degrees come out of sin() and cos() with residue
## on the order of 1e-16; snap those to exact integers so axis-aligned
## frames map grid points onto grid points
def _snap(R):
    out = []
    for row in R:
        r = []
        for x in row:
            nearest = round(x)
            r.append(nearest if abs(x-nearest) < geom.epsilon*geom.epsilon else x)
        out.append(r)
    return out
