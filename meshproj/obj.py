#!/usr/bin/env python
# -*- coding: utf-8 -*-

import logging

import numpy as np

from meshproj.errors import IndexOutOfRangeError, MeshFileError, ParseError
from meshproj.vector import Vector3


DOUBLE = np.float64

LOGGER = logging.getLogger(__name__)


class Face:
    """三角形の面

    頂点と法線のインデックス (0 始まり) を 3 つずつ持つ
    """

    __slots__ = ('vertices', 'normals')

    def __init__(self, vertices, normals):
        """
        :param tuple vertices: 頂点インデックス 3 つ
        :param tuple normals: 法線インデックス 3 つ
        """
        self.vertices = tuple(int(i) for i in vertices)
        self.normals = tuple(int(i) for i in normals)
        if len(self.vertices) != 3 or len(self.normals) != 3:
            raise ValueError('Face must reference exactly three vertices '
                             'and three normals')

    def __eq__(self, other):
        if not isinstance(other, Face):
            return NotImplemented
        return (self.vertices, self.normals) == (other.vertices,
                                                 other.normals)

    def __repr__(self):
        return 'Face(vertices={0!r}, normals={1!r})'.format(self.vertices,
                                                           self.normals)


def _freeze(points):
    array = np.array(points, dtype=DOUBLE)
    if array.size == 0:
        array = array.reshape((0, 3))
    elif array.ndim != 2 or array.shape[1] != 3:
        raise ValueError('expected N x 3 coordinates, got shape {0}'
                         .format(array.shape))
    array.setflags(write=False)
    return array


class Mesh:
    """読み込み済みのメッシュ (読み取り専用)"""

    def __init__(self, points, normals=(), faces=()):
        """
        :param points: 頂点座標 (N x 3)
        :param normals: 頂点法線 (K x 3)
        :param faces: Face のシーケンス
        :raises IndexOutOfRangeError: 面が範囲外のインデックスを参照したとき
        """
        self._points = _freeze(points)
        self._normals = _freeze(normals)
        self._faces = tuple(faces)
        self.validate()

    @property
    def points(self):
        return self._points

    @property
    def normals(self):
        return self._normals

    @property
    def faces(self):
        return self._faces

    def vertex(self, index):
        """
        :rtype: Vector3
        """
        return Vector3.from_array(self._points[index])

    def normal(self, index):
        """
        :rtype: Vector3
        """
        return Vector3.from_array(self._normals[index])

    def validate(self):
        """すべての面のインデックスが範囲内であることを確認する処理"""
        num_points = len(self._points)
        num_normals = len(self._normals)
        for i, face in enumerate(self._faces):
            for index in face.vertices:
                if not 0 <= index < num_points:
                    raise IndexOutOfRangeError(
                        'face {0:d} references vertex {1:d}, but only {2:d} '
                        'vertices are loaded'.format(i, index + 1,
                                                     num_points))
            for index in face.normals:
                if not 0 <= index < num_normals:
                    raise IndexOutOfRangeError(
                        'face {0:d} references normal {1:d}, but only {2:d} '
                        'normals are loaded'.format(i, index + 1,
                                                    num_normals))


def _parse_vector(items, lineno):
    if len(items) < 4:
        raise ParseError('expected 3 coordinates after {0!r}, got {1:d}'
                         .format(items[0], len(items) - 1), lineno)
    try:
        return tuple(float(i) for i in items[1:4])
    except ValueError:
        raise ParseError('invalid number in {0!r}'.format(' '.join(items)),
                         lineno) from None


def _parse_index(token, item, lineno):
    try:
        index = int(token)
    except ValueError:
        raise ParseError('invalid index {0!r} in face token {1!r}'
                         .format(token, item), lineno) from None
    # OBJ のインデックスは 1 始まり
    if index < 1:
        raise ParseError('index must be 1 or greater in face token {0!r}'
                         .format(item), lineno)
    return index - 1


def _parse_face(items, lineno):
    if len(items) != 4:
        raise ParseError('face must have exactly 3 vertices, got {0:d}'
                         .format(len(items) - 1), lineno)
    vertices = []
    normals = []
    for item in items[1:]:
        # v/vt/vn
        parts = item.split('/')
        if len(parts) < 3:
            raise ParseError('face token {0!r} has no normal index'
                             .format(item), lineno)
        vertices.append(_parse_index(parts[0], item, lineno))
        normals.append(_parse_index(parts[2], item, lineno))
    return Face(vertices, normals)


def load_mesh(fp):
    """OBJ ファイルを読み込む処理

    :param fp: テキストモードで開いたファイル
    :rtype: Mesh
    """
    points = []
    normals = []
    faces = []
    for lineno, l in enumerate(fp, 1):
        items = l.split()
        # 空行と未対応の行は読み飛ばす (コメント行を含む)
        if len(items) == 0:
            continue
        if items[0] == 'v':
            points.append(_parse_vector(items, lineno))
        elif items[0] == 'vn':
            normals.append(_parse_vector(items, lineno))
        elif items[0] == 'f':
            faces.append(_parse_face(items, lineno))
    LOGGER.debug('parsed %d vertices, %d normals, %d faces',
                 len(points), len(normals), len(faces))
    return Mesh(points, normals, faces)


class ObjLoader:
    """パスから OBJ ファイルを読み込むローダー"""

    def __init__(self, path):
        self.path = path

    def load(self):
        """
        :rtype: Mesh
        :raises MeshFileError: ファイルを開けないとき
        :raises ParseError: 内容が不正なとき
        :raises IndexOutOfRangeError: 面のインデックスが範囲外のとき
        """
        LOGGER.info('loading %s', self.path)
        try:
            with open(self.path, 'r') as f:
                return load_mesh(f)
        except FileNotFoundError:
            raise MeshFileError('Failed to open file {0}: no such file'
                                .format(self.path)) from None
        except (OSError, UnicodeDecodeError) as e:
            raise MeshFileError('Failed to read file {0}: {1}'
                                .format(self.path, e)) from e
