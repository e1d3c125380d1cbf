#!/usr/bin/env python
# -*- coding: utf-8 -*-

from enum import Enum
import logging
import numbers

import numpy as np

from meshproj.bounds import Bounds
from meshproj.errors import ConfigurationError
from meshproj.image import emit_pixels
from meshproj.tiling import plan_tiles
from meshproj.vector import Vector3


DOUBLE = np.float64

LOGGER = logging.getLogger(__name__)


class ProjectionMode(Enum):
    face = 0
    vertex = 1
    vertex_normal = 2
    face_normal = 3

    @classmethod
    def from_token(cls, token):
        """コマンドラインの文字列から投影モードを求める処理

        :param str token: face|f, vertex|v, vertex_normal|vn, face_normal|fn
        :rtype: ProjectionMode
        :raises ConfigurationError: 未知の文字列のとき
        """
        try:
            return _MODE_TOKENS[token.strip().lower()]
        except (KeyError, AttributeError):
            raise ConfigurationError(
                'Unknown projection type {0!r}'.format(token)) from None


_MODE_TOKENS = {
    'face': ProjectionMode.face,
    'f': ProjectionMode.face,
    'vertex': ProjectionMode.vertex,
    'v': ProjectionMode.vertex,
    'vertex_normal': ProjectionMode.vertex_normal,
    'vn': ProjectionMode.vertex_normal,
    'face_normal': ProjectionMode.face_normal,
    'fn': ProjectionMode.face_normal,
}


def _check_size(name, value):
    if (isinstance(value, bool) or not isinstance(value, numbers.Integral)
            or value <= 0):
        raise ConfigurationError(
            '{0} must be a positive integer, got {1!r}'.format(name, value))
    return int(value)


class ProjectionParams:
    def __init__(self, width=512, height=512, mode=ProjectionMode.face):
        """
        :param int width: 画像の幅 (画素)
        :param int height: 画像の高さ (画素)
        :param mode: ProjectionMode または face, v などの文字列
        :raises ConfigurationError: 値が不正なとき
        """
        self.width = _check_size('width', width)
        self.height = _check_size('height', height)
        if not isinstance(mode, ProjectionMode):
            mode = ProjectionMode.from_token(mode)
        self.mode = mode

    def __repr__(self):
        return 'ProjectionParams(width={0:d}, height={1:d}, mode={2})'.format(
            self.width, self.height, self.mode.name)


def _to_pixel(value, size):
    """[0, 1] の値を 0 ~ size - 1 の画素座標に変換する処理

    範囲外の値は端に寄せ, nan は 0 とする
    """
    scaled = value * size
    if scaled != scaled or scaled < 0:
        return 0
    if scaled >= size:
        return size - 1
    return int(scaled)


class Projector:
    """メッシュの要素を画素に割り当てて平均した色の画像を作る"""

    def project(self, mesh, params):
        """
        :param meshproj.obj.Mesh mesh: メッシュ
        :param ProjectionParams params: 画像サイズと投影モード
        :return: RGB の画素データ (行優先, width * height * 3 バイト)
        :rtype: bytes
        """
        return emit_pixels(self.accumulate(mesh, params))

    def accumulate(self, mesh, params):
        """各画素の色の平均を求める処理

        :rtype: numpy.ndarray (height x width x 3)
        """
        width = params.width
        height = params.height
        LOGGER.debug('projecting %s onto %dx%d', params.mode.name,
                     width, height)
        # 画素ごとの色の合計と寄与の数
        sums = np.zeros((height, width, 3), dtype=DOUBLE)
        counts = np.zeros((height, width), dtype=np.int64)

        if params.mode is ProjectionMode.face:
            self._project_faces(mesh, sums, counts)
        elif params.mode is ProjectionMode.vertex:
            self._project_points(mesh.points, sums, counts)
        elif params.mode is ProjectionMode.vertex_normal:
            self._project_points(mesh.normals, sums, counts)
        elif params.mode is ProjectionMode.face_normal:
            self._project_face_normals(mesh, sums, counts)

        # 寄与のない画素は nan のまま残る
        with np.errstate(divide='ignore', invalid='ignore'):
            return sums / counts[..., np.newaxis]

    def _plan(self, mesh, counts):
        height, width = counts.shape
        layout = plan_tiles(len(mesh.faces), width, height)
        LOGGER.debug('%d faces, %r', len(mesh.faces), layout)
        return layout

    def _project_faces(self, mesh, sums, counts):
        """面ごとに 3 頂点の正規化した座標の平均で塗る"""
        if len(mesh.faces) == 0:
            return
        layout = self._plan(mesh, counts)
        bounds = Bounds.from_points(mesh.points)
        for i, face in enumerate(mesh.faces):
            color = Vector3()
            for index in face.vertices:
                normalized = bounds.normalize_point(mesh.vertex(index))
                color = color.add(normalized.divide(3))
            rows, cols = layout.block(i)
            sums[rows, cols] += color.to_array()
            counts[rows, cols] += 1

    def _project_points(self, points, sums, counts):
        """点の x, y を画素の位置, z を明るさとして塗る"""
        if len(points) == 0:
            return
        height, width = counts.shape
        bounds = Bounds.from_points(points)
        flat_sums = sums.reshape((-1, 3))
        flat_counts = counts.reshape(-1)
        for p in points:
            p = Vector3.from_array(p)
            x = _to_pixel(bounds.normalize(p.x, 0), width)
            y = _to_pixel(bounds.normalize(p.y, 1), height)
            # NOTE: 行の幅に height を使う (width != height のとき位置がずれる)
            index = (y * height + x) % (width * height)
            flat_sums[index] += Vector3.splat(
                bounds.normalize_guarded(p.z, 2)).to_array()
            flat_counts[index] += 1

    def _project_face_normals(self, mesh, sums, counts):
        """面ごとに幾何的な法線ベクトルで塗る"""
        if len(mesh.faces) == 0:
            return
        layout = self._plan(mesh, counts)
        for i, face in enumerate(mesh.faces):
            v0, v1, v2 = (mesh.vertex(j) for j in face.vertices)
            normal = v0.sub(v1).cross(v0.sub(v2))
            # 頂点法線と逆向きであれば反転
            if normal.dot(mesh.normal(face.normals[0])) < 0.0:
                normal = normal.negate()
            rows, cols = layout.block(i)
            sums[rows, cols] += normal.to_array()
            counts[rows, cols] += 1


def project(mesh, params):
    """Projector().project(mesh, params) の省略形"""
    return Projector().project(mesh, params)
