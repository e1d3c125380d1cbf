#!/usr/bin/env python
# -*- coding: utf-8 -*-

import logging

import numpy as np

from meshproj.vector import Vector3


DOUBLE = np.float64

# これより絶対値の小さい座標は 0 とみなす
EPSILON = 1e-6

LOGGER = logging.getLogger(__name__)


class Bounds:
    """点群の各軸の範囲 (最小値, 最大値) と正規化"""

    def __init__(self, vmin, vmax):
        """
        :param Vector3 vmin: 各軸の最小値
        :param Vector3 vmax: 各軸の最大値
        """
        self.vmin = vmin
        self.vmax = vmax
        self.range = vmax.sub(vmin)

    @classmethod
    def from_points(cls, points):
        """点群を 1 度走査して範囲を求める処理

        :param points: N x 3 の配列, または Vector3 のシーケンス
        :rtype: Bounds
        """
        points = iter(points)
        try:
            first = Vector3(*next(points))
        except StopIteration:
            raise ValueError('cannot compute bounds of an empty point set') \
                from None
        vmin = vmax = first
        for p in points:
            p = Vector3(*p)
            vmin = vmin.minimum(p)
            vmax = vmax.maximum(p)
        bounds = cls(vmin, vmax)
        degenerate = bounds.degenerate_axes()
        if degenerate:
            LOGGER.warning('zero range on axis %s, normalized values will '
                           'be undefined', ', '.join('xyz'[a]
                                                     for a in degenerate))
        return bounds

    def degenerate_axes(self):
        """範囲が 0 の軸のリスト"""
        return [axis for axis in range(3) if self.range[axis] == 0.0]

    def normalize(self, value, axis):
        """座標を [0, 1] に正規化する処理

        範囲が 0 の軸では nan または inf になる
        :param float value: 座標
        :param int axis: 0 (x), 1 (y), 2 (z)
        :rtype: float
        """
        with np.errstate(divide='ignore', invalid='ignore'):
            return float(DOUBLE(value - self.vmin[axis]) /
                         DOUBLE(self.range[axis]))

    def normalize_guarded(self, value, axis):
        """0 に近い座標を 0 として扱う正規化"""
        if abs(value) < EPSILON:
            return 0.0
        return self.normalize(value, axis)

    def normalize_point(self, point):
        """色として使うための各成分の正規化

        :param Vector3 point:
        :rtype: Vector3
        """
        return Vector3(self.normalize_guarded(point.x, 0),
                       self.normalize_guarded(point.y, 1),
                       self.normalize_guarded(point.z, 2))

    def __repr__(self):
        return 'Bounds(vmin={0!r}, vmax={1!r})'.format(self.vmin, self.vmax)
