#!/usr/bin/env python
# -*- coding: utf-8 -*-

import math

import numpy as np


DOUBLE = np.float64


class Vector3:
    """3 次元ベクトルを表す値型

    演算はすべて新しい Vector3 を返し, 自身は変更しない
    """

    __slots__ = ('x', 'y', 'z')

    def __init__(self, x=0.0, y=0.0, z=0.0):
        """
        :param float x:
        :param float y:
        :param float z:
        """
        object.__setattr__(self, 'x', float(x))
        object.__setattr__(self, 'y', float(y))
        object.__setattr__(self, 'z', float(z))

    def __setattr__(self, name, value):
        raise AttributeError('Vector3 is immutable')

    @classmethod
    def splat(cls, value):
        """全成分が value のベクトル"""
        return cls(value, value, value)

    @classmethod
    def from_array(cls, array):
        """
        :param numpy.ndarray array: 長さ 3 の配列
        :rtype: Vector3
        """
        return cls(array[0], array[1], array[2])

    def to_array(self):
        """
        :rtype: numpy.ndarray
        """
        return np.array((self.x, self.y, self.z), dtype=DOUBLE)

    def __getitem__(self, index):
        if index == 0:
            return self.x
        elif index == 1:
            return self.y
        elif index == 2:
            return self.z
        raise IndexError('Vector3 index out of range: {0}'.format(index))

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __len__(self):
        return 3

    def __eq__(self, other):
        if not isinstance(other, Vector3):
            return NotImplemented
        return (self.x, self.y, self.z) == (other.x, other.y, other.z)

    def __hash__(self):
        return hash((self.x, self.y, self.z))

    def __repr__(self):
        return 'Vector3({0!r}, {1!r}, {2!r})'.format(self.x, self.y, self.z)

    def add(self, other):
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def sub(self, other):
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def negate(self):
        return Vector3(-self.x, -self.y, -self.z)

    def scale(self, factor):
        return Vector3(self.x * factor, self.y * factor, self.z * factor)

    def divide(self, divisor):
        """スカラーで割る処理

        0 で割った場合は例外ではなく inf / nan になる
        """
        with np.errstate(divide='ignore', invalid='ignore'):
            d = DOUBLE(divisor)
            return Vector3(DOUBLE(self.x) / d, DOUBLE(self.y) / d,
                           DOUBLE(self.z) / d)

    def minimum(self, other):
        """成分ごとの最小値"""
        return Vector3(min(self.x, other.x), min(self.y, other.y),
                       min(self.z, other.z))

    def maximum(self, other):
        """成分ごとの最大値"""
        return Vector3(max(self.x, other.x), max(self.y, other.y),
                       max(self.z, other.z))

    def dot(self, other):
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other):
        return Vector3(self.y * other.z - self.z * other.y,
                       self.z * other.x - self.x * other.z,
                       self.x * other.y - self.y * other.x)

    def length(self):
        return math.sqrt(self.dot(self))

    def normalized(self):
        """単位ベクトルを求める処理

        ゼロベクトルは呼び出し側で除外すること (成分が nan になる)
        """
        return self.divide(self.length())
