#!/usr/bin/env python
# -*- coding: utf-8 -*-

from meshproj.errors import (ConfigurationError, IndexOutOfRangeError,
                             MeshFileError, ParseError, ProjectorError)
from meshproj.obj import Face, Mesh, ObjLoader
from meshproj.projector import (ProjectionMode, ProjectionParams, Projector,
                                project)
from meshproj.vector import Vector3


__version__ = '0.1'
